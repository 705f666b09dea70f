from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, Request

logger = logging.getLogger("transfer_api.requests")


async def log_requests(request: Request, call_next):
    """Log ``[timestamp] METHOD path`` for every request, then pass it on."""
    timestamp = datetime.now(UTC).isoformat()
    logger.info("[%s] %s %s", timestamp, request.method, request.url.path)
    return await call_next(request)


def install_request_logger(app: FastAPI) -> None:
    app.middleware("http")(log_requests)
