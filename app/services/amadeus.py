import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from app.exceptions.custom import MalformedPayloadError, ProviderError
from app.schemas.amadeus import AmadeusHotelListResponse, AmadeusHotelOffersResponse
from app.schemas.live import LiveInventoryParams
from app.schemas.search import SearchParams

logger = logging.getLogger(__name__)

PROVIDER = "amadeus"
HOTELS_BY_IDS_PATH = "/v1/reference-data/locations/hotels/by-hotels"
HOTEL_OFFERS_PATH = "/v3/shopping/hotel-offers"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class AmadeusService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        access_token: str,
        default_hotel_ids: list[str],
        base_url: str = "https://test.api.amadeus.com",
    ):
        self._client = client
        self._access_token = access_token
        self._default_hotel_ids = default_hotel_ids
        self._base_url = base_url.rstrip("/")

    @property
    def configured(self) -> bool:
        return bool(self._access_token)

    async def search_hotels(self, params: SearchParams) -> AmadeusHotelListResponse | None:
        """Fetch hotel records by id. Single attempt; never raises.

        Returns None when the call fails or the payload is malformed.
        """
        hotel_ids = params.hotel_id_list or self._default_hotel_ids
        result = await self._safe_get(
            HOTELS_BY_IDS_PATH,
            {"hotelIds": ",".join(hotel_ids)},
            AmadeusHotelListResponse,
        )
        if result is not None:
            logger.info("Amadeus returned %d hotels", len(result.data))
        return result

    async def search_offers(
        self, params: LiveInventoryParams,
    ) -> AmadeusHotelOffersResponse | None:
        """Fetch the best current offer per hotel. Same failure policy as search_hotels."""
        query = {
            "hotelIds": ",".join(params.hotel_id_list),
            "adults": params.adults,
            "roomQuantity": params.roomQuantity,
            "paymentPolicy": "NONE",
            "bestRateOnly": "true",
        }
        if params.checkInDate is not None:
            query["checkInDate"] = params.checkInDate.isoformat()

        result = await self._safe_get(HOTEL_OFFERS_PATH, query, AmadeusHotelOffersResponse)
        if result is not None:
            logger.info("Amadeus returned offers for %d hotels", len(result.data or []))
        return result

    async def _safe_get(
        self, path: str, query: dict, model: type[ResponseT],
    ) -> ResponseT | None:
        if not self.configured:
            logger.warning("Amadeus access token not configured, skipping provider")
            return None

        try:
            return await self._get(path, query, model)
        except ProviderError as exc:
            logger.warning("Amadeus unavailable: %s (status=%s)", exc.message, exc.status_code)
        except MalformedPayloadError as exc:
            logger.warning("Amadeus returned a malformed payload: %s", exc.message)
        return None

    async def _get(self, path: str, query: dict, model: type[ResponseT]) -> ResponseT:
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Accept": "application/json",
        }
        try:
            resp = await self._client.get(
                f"{self._base_url}{path}", params=query, headers=headers,
            )
        except httpx.HTTPError as exc:
            raise ProviderError(PROVIDER, f"{type(exc).__name__}: {exc}") from exc

        if not resp.is_success:
            raise ProviderError(PROVIDER, resp.text[:200], status_code=resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise MalformedPayloadError(PROVIDER, f"invalid JSON body: {exc}") from exc

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise MalformedPayloadError(PROVIDER, str(exc)) from exc
