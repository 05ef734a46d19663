"""Role navigation menu, grouped by section, built from the route table."""

from shopdesk.rbac import has_capability
from shopdesk.routing import routes_for_role
from shopdesk.session import Role


def build_nav(role: Role) -> list[dict]:
    categories: dict[str, list[dict]] = {}
    for route in routes_for_role(role):
        if route.module != "dashboard" and not has_capability(role, f"{route.module}:read"):
            continue
        categories.setdefault(route.section, []).append(
            {"name": route.title, "href": route.path}
        )
    return [{"title": title, "items": items} for title, items in categories.items()]
