from __future__ import annotations
"""Routing table for the expenses function.

Requests are matched against ROUTES in order on (method, sub-route). Handlers are plain
functions ``handler(request, service) -> HandlerResult`` and signal failures by raising the
typed errors from ``expenses_service.errors``; nothing here depends on Flask.
"""
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple
from expenses_service.errors import MethodNotAllowed, NotFoundError, Unauthorized
from expenses_service.services.identity import AuthenticatedUser

MAIN_ROUTE = 'expenses'
FILTER_PARAMS = ('category', 'start_date', 'end_date', 'payment_status')


@dataclass
class ParsedRequest:
    method: str
    sub_route: str = ''
    params: Mapping[str, str] = field(default_factory=dict)
    authorization: Optional[str] = None
    load_body: Callable[[], Dict[str, Any]] = dict
    path_args: Dict[str, str] = field(default_factory=dict)
    user: Optional[AuthenticatedUser] = None

    def json(self) -> Dict[str, Any]:
        return self.load_body()


class HandlerResult(NamedTuple):
    data: Any = None
    status: int = 200
    # raw bodies are sent as-is instead of inside {"data": ...}
    raw: bool = False


@dataclass(frozen=True)
class Route:
    method: str
    pattern: str
    handler: Callable[[ParsedRequest, Any], HandlerResult]
    auth_required: bool = True

    def matches_path(self, sub_route: str) -> Optional[re.Match]:
        return re.fullmatch(self.pattern, sub_route)


# --- handlers ---
def get_summary(req: ParsedRequest, service) -> HandlerResult:
    # Placeholder until reporting lands; intentionally unauthenticated.
    return HandlerResult({'summary': {}}, raw=True)


def list_expenses(req: ParsedRequest, service) -> HandlerResult:
    filters = {name: req.params.get(name) or None for name in FILTER_PARAMS}
    return HandlerResult(service.list_expenses(filters))


def get_categories(req: ParsedRequest, service) -> HandlerResult:
    return HandlerResult(service.categories())


def get_expense(req: ParsedRequest, service) -> HandlerResult:
    return HandlerResult(service.get_expense(req.path_args['id']))


def create_expense(req: ParsedRequest, service) -> HandlerResult:
    return HandlerResult(service.create_expense(req.json(), req.user.id), 201)


def update_expense(req: ParsedRequest, service) -> HandlerResult:
    return HandlerResult(service.update_expense(req.path_args['id'], req.json()))


def delete_expense(req: ParsedRequest, service) -> HandlerResult:
    service.delete_expense(req.path_args['id'])
    return HandlerResult(None, 204)


ID = r'(?P<id>[A-Za-z0-9-]+)'

ROUTES: Tuple[Route, ...] = (
    Route('GET', 'summary', get_summary, auth_required=False),
    Route('GET', '', list_expenses),
    Route('GET', 'categories', get_categories),
    Route('GET', ID, get_expense),
    Route('POST', '', create_expense),
    Route('PUT', ID, update_expense),
    Route('DELETE', ID, delete_expense),
)


def split_path(path: str, prefix: str = '') -> Tuple[str, str]:
    """Return (main_route, sub_route) for a request path below ``prefix``."""
    if prefix and path.startswith(prefix):
        path = path[len(prefix):]
    parts = path.strip('/').split('/', 1)
    main = parts[0]
    sub = parts[1].strip('/') if len(parts) > 1 else ''
    return main, sub


def match_route(method: str, sub_route: str, routes=ROUTES) -> Optional[Tuple[Route, Dict[str, str]]]:
    for route in routes:
        if route.method != method:
            continue
        m = route.matches_path(sub_route)
        if m:
            return route, m.groupdict()
    return None


def dispatch(req: ParsedRequest, service_factory: Callable[[], Any], verifier, routes=ROUTES) -> HandlerResult:
    """Authenticate (unless the sub-route is public), match and run a handler.

    ``service_factory`` is only called once a route has been authorized, so a rejected
    request never touches the store.
    """
    public = [r for r in routes if not r.auth_required and r.matches_path(req.sub_route)]
    if public:
        found = match_route(req.method, req.sub_route, public)
        if not found:
            raise MethodNotAllowed()
    else:
        req.user = verifier.user_from_header(req.authorization)
        if req.user is None:
            raise Unauthorized()
        found = match_route(req.method, req.sub_route, routes)
        if not found:
            raise MethodNotAllowed()
    route, args = found
    req.path_args = args
    return route.handler(req, service_factory())


def check_main_route(main_route: str) -> None:
    if main_route != MAIN_ROUTE:
        raise NotFoundError()


__all__ = [
    'ParsedRequest', 'HandlerResult', 'Route', 'ROUTES', 'split_path', 'match_route', 'dispatch',
    'check_main_route', 'MAIN_ROUTE',
]
