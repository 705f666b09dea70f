from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.errors import StoreFailureError, TransferAPIError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TransferAPIError)
    async def transfer_api_error_handler(
        request: Request, exc: TransferAPIError
    ) -> JSONResponse:
        content = {"message": exc.message}
        if isinstance(exc, StoreFailureError):
            content["error"] = exc.detail
        if exc.status_code >= 500:
            logger.error(
                "request.failed",
                extra={"path": request.url.path, "status_code": exc.status_code},
            )
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "message": "Invalid request body",
                "errors": jsonable_encoder(exc.errors()),
            },
        )
