import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from reminder_app.core.config import settings
from reminder_app.core.database import init_db
from reminder_app.core.errors import ReminderAppError
from reminder_app.core.logging import logger
from reminder_app.api import api_router

app = FastAPI(title="Reminders (FastAPI + SQLModel + JWT)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(ReminderAppError)
def handle_app_error(request: Request, exc: ReminderAppError):
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.message})

@app.exception_handler(RequestValidationError)
def handle_request_validation(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"msg": "Validation Error", "errors": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(Exception)
def handle_unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"msg": "Server Error"})

@app.on_event("startup")
def on_startup():
    init_db()

@app.get("/")
def health():
    return {"message": "OK"}

app.include_router(api_router)


def run():
    uvicorn.run("reminder_app.main:app", host=settings.host, port=settings.port)
