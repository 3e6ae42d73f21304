import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from app.dependencies import HotelSearchDep, SearchParamsDep
from app.schemas.responses import SearchMeta, UnifiedSearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/search")


@router.get(
    "/unified",
    response_model=UnifiedSearchResponse,
    response_model_exclude_none=True,
)
async def unified_search(
    service: HotelSearchDep,
    params: SearchParamsDep,
) -> UnifiedSearchResponse:
    logger.info(
        "Unified search: destination=%s check_in=%s pet_friendly=%s",
        params.destination, params.checkIn, params.petFriendly,
    )
    result = await service.search(params)
    return UnifiedSearchResponse(
        meta=SearchMeta(
            searchParams=params,
            stats=result.stats,
            source=result.source,
            lastUpdated=datetime.now(timezone.utc),
        ),
        data=result.hotels,
        totalCount=len(result.hotels),
    )
