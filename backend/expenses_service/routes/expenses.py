from __future__ import annotations
from typing import Any, Dict
from flask import Blueprint, request, jsonify, current_app, make_response
from werkzeug.exceptions import HTTPException, BadRequest
from expenses_service.errors import RequestBodyError, error_payload
from expenses_service.routes.expense_handlers import ParsedRequest, HandlerResult, split_path, check_main_route, dispatch
from expenses_service.services.expenses import ExpenseService
from expenses_service.services.identity import IdentityVerifier

functions_bp = Blueprint('functions', __name__)
verifier = IdentityVerifier()

BODY_ERROR = 'Failed to parse request body: {}'


def load_json_body() -> Dict[str, Any]:
    content_type = request.headers.get('Content-Type')
    if not content_type or 'application/json' not in content_type:
        raise RequestBodyError(BODY_ERROR.format('Content-Type must be application/json'))
    try:
        data = request.get_json()
    except BadRequest as e:
        raise RequestBodyError(BODY_ERROR.format(e.description)) from e
    if not isinstance(data, dict):
        raise RequestBodyError(BODY_ERROR.format('JSON body must be an object'))
    return data


def success_response(result: HandlerResult):
    if result.status == 204:
        return make_response('', 204)
    body = result.data if result.raw else {'data': result.data}
    return jsonify(body), result.status


def error_response(exc: BaseException):
    status = exc.code if isinstance(exc, HTTPException) and exc.code else 400
    return jsonify(error_payload(exc)), status


# OPTIONS never reaches the function: the app's preflight hook answers it
FUNCTION_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'TRACE', 'CONNECT']


@functions_bp.route('/', defaults={'path': ''}, methods=FUNCTION_METHODS)
@functions_bp.route('/<path:path>', methods=FUNCTION_METHODS)
def expenses_function(path: str):
    main_route, sub_route = split_path(path)
    try:
        check_main_route(main_route)
        req = ParsedRequest(
            method=request.method,
            sub_route=sub_route,
            params=request.args,
            authorization=request.headers.get('Authorization'),
            load_body=load_json_body,
        )
        result = dispatch(req, ExpenseService, verifier)
    except HTTPException as e:
        return error_response(e)
    except Exception as e:
        current_app.logger.exception('Expenses function error')
        return error_response(e)
    return success_response(result)


__all__ = ['functions_bp', 'load_json_body', 'success_response', 'error_response']
