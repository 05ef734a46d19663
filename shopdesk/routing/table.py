"""
Route table — every navigable dashboard page and the roles allowed on it.

Static and immutable. The router mounts one page per descriptor and the
route guard reads `allowed_roles` from the same descriptor.
"""

from dataclasses import dataclass
from typing import Optional

from shopdesk.session import Role

LOGIN_ROUTE = "/login"
PUBLIC_ROUTES: tuple[str, ...] = ("/", LOGIN_ROUTE)

LANDING_ROUTES: dict[Role, str] = {
    Role.ADMIN: "/admin",
    Role.STAFF: "/staff",
}


@dataclass(frozen=True)
class RouteDescriptor:
    path: str
    page: str
    title: str
    section: str
    module: str
    allowed_roles: tuple[Role, ...]


# (page slug, title, nav section, capability module)
_SHARED_PAGES: tuple[tuple[str, str, str, str], ...] = (
    ("bank-deposits", "Bank Deposits", "Finance", "bank-deposits"),
    ("company-expenses", "Company Expenses", "Finance", "expenses"),
    ("customer-ledger", "Customer Ledger", "Finance", "customer-ledger"),
    ("customers", "Customers", "Customers", "customers"),
    ("due-sales", "Due Sales", "Sales", "due-sales"),
    ("inventory", "Inventory", "Inventory", "inventory"),
    ("stock", "Stock", "Inventory", "stock"),
    ("payment-methods", "Payment Methods", "Finance", "payment-methods"),
    ("payroll", "Payroll", "Finance", "payroll"),
    ("reports", "Reports", "Finance", "reports"),
    ("sales", "Sales", "Sales", "sales"),
    ("stock-adjustment", "Stock Adjustment", "Inventory", "stock-adjustment"),
    ("stock-movement", "Stock Movement", "Inventory", "stock-movement"),
    ("supplier-ledger", "Supplier Ledger", "Suppliers", "supplier-ledger"),
    ("suppliers", "Suppliers", "Suppliers", "suppliers"),
)


def _role_routes(role: Role, dashboard_title: str) -> list[RouteDescriptor]:
    base = LANDING_ROUTES[role]
    routes = [
        RouteDescriptor(
            path=base,
            page="dashboard",
            title=dashboard_title,
            section="Dashboard",
            module="dashboard",
            allowed_roles=(role,),
        )
    ]
    for page, title, section, module in _SHARED_PAGES:
        routes.append(
            RouteDescriptor(
                path=f"{base}/{page}",
                page=page,
                title=title,
                section=section,
                module=module,
                allowed_roles=(role,),
            )
        )
    return routes


ROUTE_TABLE: tuple[RouteDescriptor, ...] = tuple(
    _role_routes(Role.ADMIN, "Admin Dashboard")
    + _role_routes(Role.STAFF, "Staff Dashboard")
)

_BY_PATH: dict[str, RouteDescriptor] = {route.path: route for route in ROUTE_TABLE}


def find_route(path: str) -> Optional[RouteDescriptor]:
    """Exact-path lookup; a single trailing slash is ignored."""
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return _BY_PATH.get(path)


def landing_route(role: Role) -> str:
    return LANDING_ROUTES[role]


def routes_for_role(role: Role) -> list[RouteDescriptor]:
    return [route for route in ROUTE_TABLE if role in route.allowed_roles]
