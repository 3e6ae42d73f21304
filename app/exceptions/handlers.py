import logging
from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.mappers.fallback import (
    fallback_activities,
    fallback_hotels,
    fallback_live_hotels,
    fallback_transfers,
)
from app.mappers.hotel_filters import compute_stats
from app.schemas.activities import ActivitiesMeta, ActivitiesResponse
from app.schemas.live import LiveInventoryResponse
from app.schemas.responses import (
    InventoryMetadata,
    InventoryResponse,
    SearchMeta,
    UnifiedSearchResponse,
)
from app.schemas.transfers import TransfersMeta, TransfersResponse

from .custom import (
    AggregationError,
    ExtrasLookupError,
    InvalidSearchParamsError,
    InventoryError,
    LiveInventoryError,
)

logger = logging.getLogger(__name__)

FALLBACK_ERROR_SOURCE = "fallback_error"


def _dump(body: BaseModel) -> dict:
    return body.model_dump(mode="json", by_alias=True, exclude_none=True)


def _empty_envelope(error: str, message: str | None = None) -> dict:
    body = UnifiedSearchResponse(
        meta=SearchMeta(lastUpdated=datetime.now(timezone.utc)),
        data=[],
        totalCount=0,
        error=error,
        message=message,
    )
    return _dump(body)


async def invalid_search_params_handler(
    _request: Request, exc: InvalidSearchParamsError,
) -> JSONResponse:
    logger.info("Rejected search query: %s", exc.message)
    return JSONResponse(status_code=200, content=_empty_envelope(exc.message))


async def aggregation_error_handler(_request: Request, exc: AggregationError) -> JSONResponse:
    logger.error("Hotel search failed: %s", exc.message)
    return JSONResponse(
        status_code=500,
        content=_empty_envelope("Failed to perform unified search", exc.message),
    )


async def inventory_error_handler(_request: Request, exc: InventoryError) -> JSONResponse:
    logger.error("Enhanced inventory failed: %s", exc.message)
    now = datetime.now(timezone.utc)
    hotels = fallback_hotels(now=now)
    body = InventoryResponse(
        hotels=hotels,
        alerts=[],
        source=FALLBACK_ERROR_SOURCE,
        lastUpdated=now,
        metadata=InventoryMetadata(searchParams=exc.params, stats=compute_stats(hotels)),
        error="Failed to fetch enhanced real-time inventory",
        message=exc.message,
    )
    return JSONResponse(status_code=500, content=_dump(body))


async def live_inventory_error_handler(
    _request: Request, exc: LiveInventoryError,
) -> JSONResponse:
    logger.error("Live inventory failed: %s", exc.message)
    now = datetime.now(timezone.utc)
    body = LiveInventoryResponse(
        hotels=fallback_live_hotels(now=now),
        alerts=[],
        lastUpdated=now,
        source="fallback_data",
        error="Failed to fetch real-time inventory",
    )
    return JSONResponse(status_code=500, content=_dump(body))


async def extras_lookup_error_handler(
    _request: Request, exc: ExtrasLookupError,
) -> JSONResponse:
    """Activities and transfers always answer 200, with fallback rows on failure."""
    logger.error("Hotel Beds %s lookup failed: %s", exc.kind, exc.message)
    now = datetime.now(timezone.utc)
    if exc.kind == "transfers":
        transfers = fallback_transfers(now=now)
        body = TransfersResponse(
            meta=TransfersMeta(count=len(transfers), source=FALLBACK_ERROR_SOURCE),
            data=transfers,
            lastUpdated=now,
            error=exc.message,
        )
    else:
        activities = fallback_activities(now=now)
        body = ActivitiesResponse(
            meta=ActivitiesMeta(count=len(activities), source=FALLBACK_ERROR_SOURCE),
            data=activities,
            lastUpdated=now,
            error=exc.message,
        )
    return JSONResponse(status_code=200, content=_dump(body))


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error: %r", exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=_empty_envelope("Internal server error", str(exc) or type(exc).__name__),
    )
