"""Error handlers that turn calculator input errors into API responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .calculators.errors import BOMValidationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(BOMValidationError)
    async def bom_validation_error_handler(
        request: Request, exc: BOMValidationError
    ) -> JSONResponse:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "validation",
                "details": [e.to_dict() for e in exc.errors],
            },
        )
