from fastapi import APIRouter

from email_relay.presentation.routers.email import router as email_router
from email_relay.presentation.routers.fallback import router as fallback_router

api = APIRouter()

api.include_router(email_router, prefix="/api")

# catch-all, keep it after every real router
api.include_router(fallback_router)
