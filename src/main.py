"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.em_account.api.router import router as account_router
from src.em_book.api.router import router as book_router
from src.em_common.errors import AppError
from src.em_common.response import error_response
from src.em_gateway.api.router import router as instruction_router
from src.em_gateway.middleware.request_log import RequestLogMiddleware
from src.em_ledger.api.router import router as ledger_router
from src.em_matching.api.router import router as matching_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: configure logging. The ledger starts uninitialized."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("%s starting (debug=%s)", settings.APP_NAME, settings.DEBUG)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(instruction_router, prefix="/api/v1")
app.include_router(ledger_router, prefix="/api/v1")
app.include_router(account_router, prefix="/api/v1")
app.include_router(book_router, prefix="/api/v1")
app.include_router(matching_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
