from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dealfinder.config import settings
from dealfinder.dependencies import CatalogSnapshot
from dealfinder.exceptions import CatalogError, DomainError, InvalidParameterError, RankingError
from dealfinder.logging import get_logger
from dealfinder.middleware import RequestIDMiddleware
from dealfinder.repositories.deal import get_catalog
from dealfinder.routers.deal import router as deal_router
from dealfinder.schemas.deal import DealListResponse
from dealfinder.schemas.error import ErrorDetail, ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the catalog before accepting traffic so a bad file fails startup, not a request."""
    catalog = get_catalog()
    logger.info("startup_complete", deals=len(catalog))
    yield


app = FastAPI(title="Deals API", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)
app.include_router(deal_router)


def _error_json(code: str, message: str) -> dict[str, object]:
    """Build the standard error envelope as a dict for JSONResponse."""
    return ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump()


def _empty_deals_json(message: str) -> dict[str, object]:
    return DealListResponse(deals=[], message=message).model_dump()


@app.exception_handler(InvalidParameterError)
async def invalid_parameter_handler(request: Request, exc: InvalidParameterError) -> JSONResponse:
    """Return 200 with no deals and the validation message.

    The frontend shows ``message`` from successful responses only, so caller
    mistakes are reported in-band rather than as 4xx.
    """
    logger.warning("invalid_parameter", param=exc.param, error=exc.message, path=request.url.path)
    return JSONResponse(status_code=200, content=_empty_deals_json(exc.message))


@app.exception_handler(RankingError)
async def ranking_error_handler(request: Request, exc: RankingError) -> JSONResponse:
    """Return 500 with no deals; the cause was already logged by the service."""
    return JSONResponse(status_code=500, content=_empty_deals_json(exc.message))


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    logger.error("catalog_unavailable", error=exc.message, path=request.url.path)
    return JSONResponse(
        status_code=503,
        content=_error_json("catalog_unavailable", "Deal catalog is unavailable"),
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Return 400 for generic domain-level violations."""
    logger.warning("domain_error", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json("domain_error", exc.message))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a safe error response.

    - Logs full exception with traceback (includes request_id from context)
    - Returns generic error to client (no stack traces leaked)
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=500,
        content=_error_json("internal_error", "Internal server error"),
    )


@app.get("/health")
async def health(catalog: CatalogSnapshot) -> dict[str, str | int]:
    """Health check endpoint: reports how many deals are being served."""
    return {"status": "ok", "deals": len(catalog)}
