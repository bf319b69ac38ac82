# API Routes
from .generate import router as generate_router
from .checklists import router as checklists_router
from .health import router as health_router

__all__ = [
    "generate_router",
    "checklists_router",
    "health_router",
]
