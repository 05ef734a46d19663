from .navigation import build_nav
from .routes import pages_router, render_page

__all__ = ["build_nav", "pages_router", "render_page"]
