"""
API module - Health and web page routes for the platform.
"""


from .routes import router as health_router
from .routes.web import router as web_router

__all__ = ["health_router", "web_router"]
