"""
Route guard — decides, per navigation, whether a page may render.

Three terminal outcomes, evaluated synchronously:
  UNAUTHENTICATED → redirect to /login (whatever the allow-list says)
  WRONG_ROLE      → redirect to the session role's own landing route
  AUTHORIZED      → render the page
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from shopdesk.session import Session
from .table import LOGIN_ROUTE, RouteDescriptor, landing_route


class GuardState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    WRONG_ROLE = "wrong_role"
    AUTHORIZED = "authorized"


@dataclass(frozen=True)
class GuardDecision:
    state: GuardState
    redirect_to: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.state is GuardState.AUTHORIZED


def evaluate(session: Optional[Session], route: RouteDescriptor) -> GuardDecision:
    if session is None:
        return GuardDecision(GuardState.UNAUTHENTICATED, redirect_to=LOGIN_ROUTE)
    if session.role not in route.allowed_roles:
        return GuardDecision(GuardState.WRONG_ROLE, redirect_to=landing_route(session.role))
    return GuardDecision(GuardState.AUTHORIZED)
