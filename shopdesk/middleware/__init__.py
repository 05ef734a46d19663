"""
Route guard middleware.

Runs on every request:
  1. Look the path up in the route table (unknown paths pass through)
  2. Evaluate the guard against the app's session store
  3. Redirect (303) unless the session's role is allowed on the route
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse

from shopdesk.routing import evaluate, find_route
from shopdesk.utils import Logger

logger = Logger("guard")


class RouteGuardMiddleware(BaseHTTPMiddleware):
    """Gates every route-table page on the current session's role."""

    async def dispatch(self, request: Request, call_next):
        route = find_route(request.url.path)
        if route is None:
            return await call_next(request)

        session = request.app.state.session_store.current()
        decision = evaluate(session, route)
        if decision.allowed:
            return await call_next(request)

        logger.debug(
            f"{request.method} {request.url.path} -> {decision.redirect_to} ({decision.state.value})"
        )
        return RedirectResponse(url=decision.redirect_to, status_code=303)


__all__ = ["RouteGuardMiddleware"]
