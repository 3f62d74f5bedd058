"""HTTP routes."""

from .auth import router as auth_router
from .pages import router as pages_router
from .translate import router as translate_router

__all__ = ["auth_router", "pages_router", "translate_router"]
