from fastapi import APIRouter

from .feeds import router as feeds_router
from .health import router as health_router
from .items import router as items_router

v1 = APIRouter()
v1.include_router(health_router)
v1.include_router(feeds_router)
v1.include_router(items_router)

__all__ = ["v1"]
