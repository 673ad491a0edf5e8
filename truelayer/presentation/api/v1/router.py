from fastapi import APIRouter

from .auth import auth_router
from .data import data_router
from .health import health_router
from .webhook import webhook_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(auth_router, tags=["Authentication"])
router.include_router(data_router, tags=["Data"])
router.include_router(webhook_router, tags=["Webhooks"])
