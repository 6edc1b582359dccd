"""
ledger_service/app.py

FastAPI application entrypoint for the ledger service.

This module wires together:
- Logging configuration (file-based under LOG_DIR)
- CORS and request-logging middleware
- 400 responses for request validation failures
- The accounts router under /v1
"""

import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from ledger_service.api.accounts import router as accounts_router
from ledger_service.logging_config import get_logger, setup_logging

# Load environment variables early
load_dotenv()

# Configure logging before creating the app
setup_logging()
logger = get_logger("ledger_service")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Ledger service starting up")
    yield
    logger.info("Ledger service shutting down")


app = FastAPI(title="Ledger Service", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Lightweight request logger to help trace ledger traffic.
    """
    body = await request.body()
    logger.info(
        "HTTP %s %s from %s body=%s",
        request.method,
        request.url.path,
        request.client.host if request.client else "?",
        body.decode(errors="ignore")[:200],
    )
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed or missing input is a plain bad request here, not 422.
    logger.warning("Validation failed for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.get("/api/health")
async def health():
    """
    Simple health check endpoint.
    """
    return {"status": "healthy"}


app.include_router(accounts_router, prefix="/v1")
