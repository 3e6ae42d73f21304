import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from app.exceptions.custom import MalformedPayloadError, ProviderError
from app.schemas.activities import ActivitySearchParams
from app.schemas.hotelbeds import HotelBedsActivitiesResponse, HotelBedsTransfersResponse
from app.schemas.transfers import TransferSearchParams
from app.services.hotelbeds import HotelBedsClient
from app.services.hotelbeds_auth import HotelBedsApi

logger = logging.getLogger(__name__)

ACTIVITIES_PATH = "/activity-content-api/3.0/activities"
TRANSFERS_PATH = "/transfer-api/1.0/availability"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class _HotelBedsProductService:
    api: HotelBedsApi

    def __init__(self, hotelbeds: HotelBedsClient):
        self._hotelbeds = hotelbeds

    @property
    def configured(self) -> bool:
        return self._hotelbeds.is_configured(self.api)

    async def _call(
        self,
        model: type[ResponseT],
        method: str,
        path: str,
        *,
        params: dict | None = None,
        json: dict | None = None,
    ) -> ResponseT | None:
        """Single attempt; failures are logged and returned as None."""
        if not self.configured:
            logger.warning("Hotel Beds %s credentials not configured, skipping", self.api.value)
            return None

        try:
            body = await self._hotelbeds.request(self.api, method, path, params=params, json=json)
            return model.model_validate(body)
        except ProviderError as exc:
            logger.warning(
                "Hotel Beds %s unavailable: %s (status=%s)",
                self.api.value, exc.message, exc.status_code,
            )
        except MalformedPayloadError as exc:
            logger.warning("Hotel Beds %s returned a malformed payload: %s", self.api.value, exc.message)
        except ValidationError as exc:
            logger.warning("Hotel Beds %s returned an unexpected shape: %s", self.api.value, exc)
        return None


class HotelBedsActivitiesService(_HotelBedsProductService):
    api = HotelBedsApi.activities

    async def search_activities(
        self, params: ActivitySearchParams,
    ) -> HotelBedsActivitiesResponse | None:
        result = await self._call(
            HotelBedsActivitiesResponse,
            "GET",
            ACTIVITIES_PATH,
            params={"destinationCode": params.destination, "language": params.language},
        )
        if result is not None:
            logger.info(
                "Hotel Beds returned %d activities for %s",
                len(result.activities or []), params.destination,
            )
        return result


def build_transfer_payload(params: TransferSearchParams) -> dict:
    return {
        "language": "ENG",
        "from": {"type": "ATLAS", "code": params.from_},
        "to": {"type": "ATLAS", "code": params.to},
        "occupancy": {"paxes": params.pax},
        "transferType": params.type,
    }


class HotelBedsTransfersService(_HotelBedsProductService):
    api = HotelBedsApi.transfers

    async def search_transfers(
        self, params: TransferSearchParams,
    ) -> HotelBedsTransfersResponse | None:
        result = await self._call(
            HotelBedsTransfersResponse,
            "POST",
            TRANSFERS_PATH,
            json=build_transfer_payload(params),
        )
        if result is not None:
            logger.info(
                "Hotel Beds returned %d transfers from %s",
                len(result.transfers or []), params.from_,
            )
        return result
