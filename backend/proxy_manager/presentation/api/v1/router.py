"""V1 API router: aggregates all v1 endpoint routers under /api/v1."""

from fastapi import APIRouter

from proxy_manager.presentation.api.v1.endpoints.health import router as health_router
from proxy_manager.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from proxy_manager.presentation.api.v1.endpoints.proxies import router as proxies_router
from proxy_manager.presentation.api.v1.endpoints.proxy_sessions import router as proxy_sessions_router
from proxy_manager.presentation.api.v1.endpoints.users import router as users_router
from proxy_manager.presentation.api.v1.endpoints.settings import router as settings_router

router = APIRouter(prefix="/api/v1")
router.include_router(health_router)
router.include_router(dashboard_router)
router.include_router(proxies_router)
router.include_router(proxy_sessions_router)
router.include_router(users_router)
router.include_router(settings_router)
