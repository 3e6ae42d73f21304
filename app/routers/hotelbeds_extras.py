from datetime import datetime, timezone

from fastapi import APIRouter

from app.dependencies import ActivityParamsDep, TransferParamsDep, TravelExtrasDep
from app.schemas.activities import ActivitiesMeta, ActivitiesResponse
from app.schemas.transfers import TransfersMeta, TransfersResponse

router = APIRouter(prefix="/api/hotelbeds")


@router.get(
    "/activities",
    response_model=ActivitiesResponse,
    response_model_exclude_none=True,
)
async def activities(
    service: TravelExtrasDep,
    params: ActivityParamsDep,
) -> ActivitiesResponse:
    records, source = await service.search_activities(params)
    return ActivitiesResponse(
        meta=ActivitiesMeta(count=len(records), source=source, searchParams=params),
        data=records,
        lastUpdated=datetime.now(timezone.utc),
    )


@router.get(
    "/transfers",
    response_model=TransfersResponse,
    response_model_exclude_none=True,
)
async def transfers(
    service: TravelExtrasDep,
    params: TransferParamsDep,
) -> TransfersResponse:
    records, source = await service.search_transfers(params)
    return TransfersResponse(
        meta=TransfersMeta(count=len(records), source=source, searchParams=params),
        data=records,
        lastUpdated=datetime.now(timezone.utc),
    )
