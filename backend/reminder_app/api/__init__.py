from fastapi import APIRouter
from reminder_app.api.routes import auth_router, events_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(events_router)
