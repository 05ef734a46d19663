"""
Capability checking.

Every role-conditional decision (which actions a page shows, which
sections a role may open) goes through `has_capability`.
"""

from shopdesk.session import Role
from .roles import ACTIONS, get_role_capabilities


def check_capability(granted: list[str], required: str) -> bool:
    """
    Check if a capability list satisfies the required capability.

    Supports wildcards:
      - "*:*"      → full access
      - "sales:*"  → all actions on the sales module
      - "sales:read" → exact match
    """
    if not required or ":" not in required:
        return False

    req_module, req_action = required.split(":", 1)

    for cap in granted:
        c_module, c_action = cap.split(":", 1)

        if c_module == "*" and c_action == "*":
            return True

        if c_module == req_module and c_action == "*":
            return True

        if c_module == req_module and c_action == req_action:
            return True

    return False


def has_capability(role: Role, capability: str) -> bool:
    return check_capability(get_role_capabilities(role), capability)


def visible_actions(role: Role, module: str) -> list[str]:
    """Actions on `module` the role is allowed to see, in canonical order."""
    return [action for action in ACTIONS if has_capability(role, f"{module}:{action}")]
