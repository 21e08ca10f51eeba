"""Top-level API router — aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from clientportal.presentation.api.endpoints.health import router as health_router
from clientportal.presentation.api.endpoints.auth import router as auth_router
from clientportal.presentation.api.endpoints.clients import router as clients_router
from clientportal.presentation.api.endpoints.projects import router as projects_router
from clientportal.presentation.api.endpoints.invoices import router as invoices_router
from clientportal.presentation.api.endpoints.chat import router as chat_router
from clientportal.presentation.api.endpoints.portal import router as portal_router
from clientportal.presentation.api.endpoints.content import router as content_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(clients_router)
router.include_router(projects_router)
router.include_router(invoices_router)
router.include_router(chat_router)
router.include_router(portal_router)
router.include_router(content_router)
