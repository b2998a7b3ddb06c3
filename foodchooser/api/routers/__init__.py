"""
API Routers package.

Each module contains a FastAPI router for a specific domain.
"""

from .meals import router as meals_router
from .groceries import router as groceries_router
from .preferences import router as preferences_router
from .recommendations import router as recommendations_router
from .spending import router as spending_router

__all__ = [
    "meals_router",
    "groceries_router",
    "preferences_router",
    "recommendations_router",
    "spending_router",
]
