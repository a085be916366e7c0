"""FastAPI application factory."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from studiodesk.api.v1.api import api_router
from studiodesk.core.config import settings
from studiodesk.core.exceptions import StudioDeskError
from studiodesk.core.logging import configure_logging
from studiodesk.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s (%s)", settings.PROJECT_NAME, settings.ENV)
    yield
    await engine.dispose()
    logger.info("Shutting down %s", settings.PROJECT_NAME)


async def studiodesk_error_handler(request: Request, exc: StudioDeskError) -> JSONResponse:
    content = {"message": exc.message, "error_code": exc.error_code}
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "validation error", "errors": jsonable_encoder(exc.errors())},
    )


async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Unhandled storage error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "internal storage error", "error_code": "STORAGE_ERROR"},
    )


def create_application() -> FastAPI:
    configure_logging()

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Multi-tenant studio back-office: attendance check-in and class credit.",
        lifespan=lifespan,
    )

    application.add_exception_handler(StudioDeskError, studiodesk_error_handler)
    application.add_exception_handler(HTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(SQLAlchemyError, storage_exception_handler)

    application.include_router(api_router, prefix=f"{settings.API_PREFIX}/v1")

    @application.get("/health", tags=["health"])
    async def health_check():
        return {"status": "ok"}

    return application


app = create_application()
