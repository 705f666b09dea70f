import logging

import uvicorn
from fastapi import FastAPI

from .api.demo_routes import router as demo_router
from .api.exceptions import register_exception_handlers
from .api.middleware import install_request_logger
from .core.config import get_settings

settings = get_settings()
logging.basicConfig(level=settings.log_level)

app = FastAPI(title=settings.demo_app_name)

install_request_logger(app)
app.include_router(demo_router)
register_exception_handlers(app)

def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)

if __name__ == "__main__":
    run()
