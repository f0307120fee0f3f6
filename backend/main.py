from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from config.app_config import APP_HOST, APP_PORT, APP_VERSION, CORS_ORIGINS, LOG_DIR, LOG_LEVEL
from constants import ApiPrefix
from init_db import init_database
from api import goods, payments, users, health
from utils.error_handlers import request_validation_exception_handler
from utils.logging_utils import configure_logging

log_file = configure_logging(LOG_DIR, LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {log_file}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Starting order backend...")
    init_database()
    logger.info("✅ Application startup complete")

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title="Order Demo CRUD API",
    description="Users, goods and payments with soft deletion",
    version=APP_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Malformed input is rejected with 400 before reaching the services
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

# Include API routers
app.include_router(goods.router, prefix=ApiPrefix.API, tags=["goods"])
app.include_router(payments.router, prefix=ApiPrefix.API, tags=["payments"])
app.include_router(users.router, prefix=ApiPrefix.API, tags=["users"])
app.include_router(health.router, tags=["health"])


if __name__ == "__main__":
    import uvicorn

    logger.info(f"🚀 Starting order backend on http://{APP_HOST}:{APP_PORT}...")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
