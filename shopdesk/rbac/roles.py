"""
Role capability matrix.

Capability format:  "{module}:{action}"
  - Modules : sales, customers, customer-ledger, suppliers, supplier-ledger,
              inventory, stock, stock-adjustment, stock-movement, expenses,
              bank-deposits, payment-methods, payroll, reports
  - Actions : read, create, update, delete, *  (wildcard)
  - Wildcard: "*:*"  means ALL modules, ALL actions
"""

from shopdesk.session import Role

ACTIONS: tuple[str, ...] = ("read", "create", "update", "delete")

ROLE_CAPABILITIES: dict[Role, list[str]] = {
    Role.ADMIN: [
        "*:*",  # everything
    ],
    Role.STAFF: [
        "sales:read",
        "sales:create",
        "due-sales:read",
        "due-sales:update",
        "customers:read",
        "customers:create",
        "customer-ledger:read",
        "customer-ledger:create",
        "suppliers:read",
        "supplier-ledger:read",
        "inventory:read",
        "stock:read",
        "stock-adjustment:read",
        "stock-adjustment:create",
        "stock-movement:read",
        "expenses:read",
        "expenses:create",
        "bank-deposits:read",
        "bank-deposits:create",
        "payment-methods:read",
        "payroll:read",
        "reports:read",
    ],
}


def get_role_capabilities(role: Role) -> list[str]:
    """Return the capability list for a given role."""
    return ROLE_CAPABILITIES.get(role, [])
