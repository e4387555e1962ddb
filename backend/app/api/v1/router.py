from fastapi import APIRouter

from backend.app.api.v1.endpoints.health import router as health_router
from backend.app.api.v1.endpoints.material_orders import router as material_orders_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(material_orders_router, tags=["material_orders"])
