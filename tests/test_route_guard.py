import pytest

from shopdesk.routing import (
    LANDING_ROUTES,
    ROUTE_TABLE,
    GuardState,
    RouteDescriptor,
    evaluate,
    find_route,
    routes_for_role,
)
from shopdesk.session import Role, Session

ADMIN_ONLY = RouteDescriptor(
    path="/admin/payroll",
    page="payroll",
    title="Payroll",
    section="Finance",
    module="payroll",
    allowed_roles=(Role.ADMIN,),
)
SHARED = RouteDescriptor(
    path="/shared",
    page="shared",
    title="Shared",
    section="Dashboard",
    module="dashboard",
    allowed_roles=(Role.ADMIN, Role.STAFF),
)


def _session(role: Role) -> Session:
    return Session(id="x", email="x@shop.test", role=role)


@pytest.mark.parametrize("route", [ADMIN_ONLY, SHARED])
def test_no_session_redirects_to_login(route):
    decision = evaluate(None, route)
    assert decision.state is GuardState.UNAUTHENTICATED
    assert decision.redirect_to == "/login"
    assert not decision.allowed


def test_wrong_role_redirects_to_own_landing_route():
    decision = evaluate(_session(Role.STAFF), ADMIN_ONLY)
    assert decision.state is GuardState.WRONG_ROLE
    assert decision.redirect_to == "/staff"
    assert not decision.allowed


def test_allowed_role_renders():
    decision = evaluate(_session(Role.ADMIN), ADMIN_ONLY)
    assert decision.state is GuardState.AUTHORIZED
    assert decision.redirect_to is None
    assert decision.allowed


@pytest.mark.parametrize("role", list(Role))
def test_multi_role_route_allows_each_listed_role(role):
    assert evaluate(_session(role), SHARED).allowed


def test_route_table_covers_both_roles():
    assert len(ROUTE_TABLE) == 32
    assert len(routes_for_role(Role.ADMIN)) == 16
    assert len(routes_for_role(Role.STAFF)) == 16
    for route in ROUTE_TABLE:
        prefix = LANDING_ROUTES[route.allowed_roles[0]]
        assert route.path == prefix or route.path.startswith(prefix + "/")


def test_route_paths_are_unique():
    paths = [route.path for route in ROUTE_TABLE]
    assert len(paths) == len(set(paths))


def test_find_route():
    assert find_route("/admin").page == "dashboard"
    assert find_route("/staff/stock-movement").allowed_roles == (Role.STAFF,)
    assert find_route("/staff/sales/") == find_route("/staff/sales")
    assert find_route("/login") is None
    assert find_route("/admin/unknown") is None
