from .table import (
    LANDING_ROUTES,
    LOGIN_ROUTE,
    PUBLIC_ROUTES,
    ROUTE_TABLE,
    RouteDescriptor,
    find_route,
    landing_route,
    routes_for_role,
)
from .guard import GuardDecision, GuardState, evaluate

__all__ = [
    "LANDING_ROUTES",
    "LOGIN_ROUTE",
    "PUBLIC_ROUTES",
    "ROUTE_TABLE",
    "RouteDescriptor",
    "find_route",
    "landing_route",
    "routes_for_role",
    "GuardDecision",
    "GuardState",
    "evaluate",
]
