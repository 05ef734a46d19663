"""ShopDesk: session, login and role-gated routing for the shop dashboards."""

__version__ = "1.0.0"
