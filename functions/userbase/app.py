"""
FastAPI application entry point for the user service.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from userbase.config import get_settings
from userbase.routes import router
from userbase.validation import ValidationError

logger = logging.getLogger(__name__)


async def _validation_error_handler(request: Request, exc: ValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.kind)
    return JSONResponse(status_code=422, content={"detail": exc.as_dict()})


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Userbase", version="0.1.0")
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
