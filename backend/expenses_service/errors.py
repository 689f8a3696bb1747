from __future__ import annotations
"""Typed HTTP errors for the expense function.

All of them are werkzeug ``HTTPException`` subclasses so handlers can raise them the same way
route code elsewhere calls ``abort()``; the function blueprint renders them into the
``{error, details?}`` envelope.
"""
from typing import Any, Dict, Optional
from werkzeug import exceptions as wz

UNKNOWN_ERROR = 'An unknown error occurred'


class ExpenseFunctionError(wz.HTTPException):
    code = 400

    def __init__(self, description: Optional[str] = None, details: Any = None):
        super().__init__(description=description)
        self.details = details


class ValidationError(ExpenseFunctionError):
    code = 400


class BusinessRuleViolation(ExpenseFunctionError):
    code = 400


class RequestBodyError(ExpenseFunctionError):
    code = 400


class UnexpectedError(ExpenseFunctionError):
    """Lower-layer failure passed through as a 400 with its message."""
    code = 400

    @classmethod
    def from_exception(cls, exc: BaseException) -> 'UnexpectedError':
        message = str(getattr(exc, 'orig', None) or exc) or UNKNOWN_ERROR
        return cls(message, details={'type': type(exc).__name__})


class Unauthorized(ExpenseFunctionError):
    code = 401

    def __init__(self, description: str = 'Unauthorized', details: Any = None):
        super().__init__(description, details)


class NotFoundError(ExpenseFunctionError):
    code = 404

    def __init__(self, resource: Optional[str] = None, details: Any = None):
        super().__init__(f'{resource} not found' if resource else 'Not found', details)


class MethodNotAllowed(ExpenseFunctionError):
    code = 405

    def __init__(self, description: str = 'Method not allowed', details: Any = None):
        super().__init__(description, details)


def error_payload(exc: BaseException) -> Dict[str, Any]:
    """Shape any exception into the ``{error, details?}`` envelope body."""
    if isinstance(exc, wz.HTTPException):
        payload: Dict[str, Any] = {'error': exc.description or exc.name}
        details = getattr(exc, 'details', None)
        if details is not None:
            payload['details'] = details
        return payload
    message = str(exc)
    if message:
        return {'error': message, 'details': {'type': type(exc).__name__}}
    return {'error': UNKNOWN_ERROR}


__all__ = [
    'ExpenseFunctionError', 'ValidationError', 'BusinessRuleViolation', 'RequestBodyError', 'UnexpectedError',
    'Unauthorized', 'NotFoundError', 'MethodNotAllowed', 'error_payload', 'UNKNOWN_ERROR',
]
