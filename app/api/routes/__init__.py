# API routes
from app.api.routes.root import get_app_settings
from app.api.routes.root import router as root_router

__all__ = ["root_router", "get_app_settings"]
