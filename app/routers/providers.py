from datetime import datetime, timezone

from fastapi import APIRouter

from app.dependencies import HotelSearchDep, SearchParamsDep
from app.schemas.hotels import Provider, UnifiedHotelRecord
from app.schemas.responses import ProviderMeta, ProviderSearchResponse
from app.schemas.search import SearchParams

router = APIRouter(prefix="/api")


def _provider_response(
    provider: Provider,
    params: SearchParams,
    hotels: list[UnifiedHotelRecord],
    source: str,
) -> ProviderSearchResponse:
    return ProviderSearchResponse(
        meta=ProviderMeta(
            count=len(hotels),
            source=source,
            provider=provider,
            searchParams=params,
        ),
        data=hotels,
        lastUpdated=datetime.now(timezone.utc),
    )


@router.get(
    "/hotels/list",
    response_model=ProviderSearchResponse,
    response_model_exclude_none=True,
)
async def amadeus_hotels(
    service: HotelSearchDep,
    params: SearchParamsDep,
) -> ProviderSearchResponse:
    hotels, source = await service.search_amadeus(params)
    return _provider_response(Provider.amadeus, params, hotels, source)


@router.get(
    "/hotelbeds/hotels",
    response_model=ProviderSearchResponse,
    response_model_exclude_none=True,
)
async def hotelbeds_hotels(
    service: HotelSearchDep,
    params: SearchParamsDep,
) -> ProviderSearchResponse:
    hotels, source = await service.search_hotelbeds(params)
    return _provider_response(Provider.hotelbeds, params, hotels, source)
