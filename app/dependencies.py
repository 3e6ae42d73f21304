from typing import Annotated, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from app.exceptions.custom import InvalidSearchParamsError
from app.schemas.activities import ActivitySearchParams
from app.schemas.live import LiveInventoryParams
from app.schemas.search import SearchParams
from app.schemas.transfers import TransferSearchParams
from app.services.hotel_search import HotelSearchService
from app.services.live_inventory import LiveInventoryService
from app.services.travel_extras import TravelExtrasService

ParamsT = TypeVar("ParamsT", bound=BaseModel)


def get_hotel_search_service(request: Request) -> HotelSearchService:
    return request.app.state.hotel_search_service


def get_live_inventory_service(request: Request) -> LiveInventoryService:
    return request.app.state.live_inventory_service


def get_travel_extras_service(request: Request) -> TravelExtrasService:
    return request.app.state.travel_extras_service


def _parse_query(model: type[ParamsT], request: Request) -> ParamsT:
    """Parse the string-typed query string, applying defaults for absent keys."""
    try:
        return model.model_validate(dict(request.query_params))
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) or "query" for err in exc.errors()
        )
        raise InvalidSearchParamsError(f"Invalid search parameters: {fields}") from exc


def get_search_params(request: Request) -> SearchParams:
    return _parse_query(SearchParams, request)


def get_live_inventory_params(request: Request) -> LiveInventoryParams:
    return _parse_query(LiveInventoryParams, request)


def get_activity_params(request: Request) -> ActivitySearchParams:
    return _parse_query(ActivitySearchParams, request)


def get_transfer_params(request: Request) -> TransferSearchParams:
    return _parse_query(TransferSearchParams, request)


HotelSearchDep = Annotated[HotelSearchService, Depends(get_hotel_search_service)]
LiveInventoryDep = Annotated[LiveInventoryService, Depends(get_live_inventory_service)]
TravelExtrasDep = Annotated[TravelExtrasService, Depends(get_travel_extras_service)]
SearchParamsDep = Annotated[SearchParams, Depends(get_search_params)]
LiveInventoryParamsDep = Annotated[LiveInventoryParams, Depends(get_live_inventory_params)]
ActivityParamsDep = Annotated[ActivitySearchParams, Depends(get_activity_params)]
TransferParamsDep = Annotated[TransferSearchParams, Depends(get_transfer_params)]
