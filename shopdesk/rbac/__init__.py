from .roles import ACTIONS, ROLE_CAPABILITIES, get_role_capabilities
from .permissions import check_capability, has_capability, visible_actions

__all__ = [
    "ACTIONS",
    "ROLE_CAPABILITIES",
    "get_role_capabilities",
    "check_capability",
    "has_capability",
    "visible_actions",
]
