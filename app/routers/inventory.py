from datetime import datetime, timezone

from fastapi import APIRouter

from app.dependencies import (
    HotelSearchDep,
    LiveInventoryDep,
    LiveInventoryParamsDep,
    SearchParamsDep,
)
from app.exceptions.custom import AggregationError, InventoryError
from app.mappers.alerts import build_alerts
from app.schemas.live import LiveInventoryMetadata, LiveInventoryResponse
from app.schemas.responses import InventoryMetadata, InventoryResponse

router = APIRouter(prefix="/api/inventory")


@router.get(
    "/enhanced",
    response_model=InventoryResponse,
    response_model_exclude_none=True,
)
async def enhanced_inventory(
    service: HotelSearchDep,
    params: SearchParamsDep,
) -> InventoryResponse:
    """Aggregated inventory plus scarcity and deal alerts."""
    try:
        result = await service.search(params)
    except AggregationError as exc:
        raise InventoryError(exc.message, params=params) from exc
    now = datetime.now(timezone.utc)
    return InventoryResponse(
        hotels=result.hotels,
        alerts=build_alerts(result.hotels, now=now),
        source=result.source,
        lastUpdated=now,
        metadata=InventoryMetadata(searchParams=params, stats=result.stats),
    )


@router.get(
    "/live",
    response_model=LiveInventoryResponse,
    response_model_exclude_none=True,
)
async def live_inventory(
    service: LiveInventoryDep,
    params: LiveInventoryParamsDep,
) -> LiveInventoryResponse:
    """Current Amadeus offers per hotel with scarcity alerts."""
    result = await service.fetch(params)
    return LiveInventoryResponse(
        hotels=result.hotels,
        alerts=result.alerts,
        lastUpdated=result.lastUpdated,
        source=result.source,
        metadata=LiveInventoryMetadata(
            searchParams=params,
            totalHotels=len(result.hotels),
            petFriendlyCount=sum(1 for h in result.hotels if h.petFriendly),
        ),
    )
