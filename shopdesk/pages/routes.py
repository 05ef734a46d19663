"""
Page shells for the public login page and every route-table page.

Route-table pages are only reached after RouteGuardMiddleware has
authorized the navigation, so a session is always present here.
"""

from fastapi import APIRouter, Depends, Request

from shopdesk.auth.credentials import first_of_role
from shopdesk.rbac import visible_actions
from shopdesk.routing import PUBLIC_ROUTES, ROUTE_TABLE, RouteDescriptor
from shopdesk.session import SessionStore, get_session_store
from shopdesk.utils import success_response
from .navigation import build_nav

pages_router = APIRouter()


async def login_page(request: Request):
    """Public login page; lists the one-click demo accounts when enabled."""
    demo_accounts = []
    if request.app.state.settings.demo_logins_enabled:
        for role in ("Admin", "Staff"):
            record = first_of_role(role)
            if record is not None:
                demo_accounts.append({"role": record.role, "email": record.email})
    return success_response(
        data={"page": "login", "title": "Login", "demo_accounts": demo_accounts}
    )


for _path in PUBLIC_ROUTES:
    pages_router.add_api_route(_path, login_page, methods=["GET"], tags=["Login"])


def render_page(route: RouteDescriptor, store: SessionStore) -> dict:
    session = store.current()
    shell = {
        "page": route.page,
        "path": route.path,
        "title": route.title,
        "section": route.section,
        "role": session.role.value,
        "user": {"id": session.id, "email": session.email},
        "nav": build_nav(session.role),
    }
    if route.module != "dashboard":
        shell["actions"] = visible_actions(session.role, route.module)
    return shell


def _page_handler(route: RouteDescriptor):
    async def handler(store: SessionStore = Depends(get_session_store)):
        return success_response(data=render_page(route, store))

    handler.__doc__ = f"{route.title} page."
    return handler


for _route in ROUTE_TABLE:
    pages_router.add_api_route(
        _route.path,
        _page_handler(_route),
        methods=["GET"],
        name=f"{_route.allowed_roles[0].value}:{_route.page}",
        tags=[_route.section],
    )
