import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from sqlmodel import Session

from .api.exceptions import register_exception_handlers
from .api.middleware import install_request_logger
from .api.routes import router as users_router, transfer_router
from .core import db
from .core.config import get_settings
from .services import TransferService

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    db.init_db()
    if settings.seed_on_startup:
        with Session(db.get_engine()) as session:
            if TransferService(session, settings=settings).seed_if_empty():
                logger.info("accounts.initialized")
    yield

app = FastAPI(title=settings.app_name, lifespan=lifespan)

install_request_logger(app)
app.include_router(users_router)
app.include_router(transfer_router)
register_exception_handlers(app)

@app.get("/")
def read_root() -> dict:
    return {
        "message": settings.app_name,
        "endpoints": {
            "POST /create-users": "Create sample users (Alice and Bob)",
            "POST /transfer": "Transfer money between accounts",
            "GET /users": "Get all users",
            "GET /users/:id": "Get specific user",
            "DELETE /users": "Delete all users",
        },
        "transferFlow": [
            "1. Create users with POST /create-users",
            "2. Note the user IDs from response",
            "3. Transfer with POST /transfer { fromUserId, toUserId, amount }",
            "4. Check balances with GET /users",
        ],
    }

@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok"}

def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)

if __name__ == "__main__":
    run()
