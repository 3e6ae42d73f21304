import logging

import httpx
from pydantic import ValidationError

from app.exceptions.custom import MalformedPayloadError, ProviderError
from app.schemas.hotelbeds import HotelBedsAvailabilityResponse
from app.schemas.search import SearchParams
from app.services.hotelbeds_auth import HotelBedsApi, HotelBedsAuth

logger = logging.getLogger(__name__)

PROVIDER = "hotelbeds"
AVAILABILITY_PATH = "/hotel-api/1.0/hotels"


class HotelBedsClient:
    """Signed transport shared by the Hotel Beds hotels, activities and
    transfers APIs. Raises ProviderError or MalformedPayloadError."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        auth: HotelBedsAuth,
        base_url: str = "https://api.test.hotelbeds.com",
    ):
        self._client = client
        self._auth = auth
        self._base_url = base_url.rstrip("/")

    def is_configured(self, api: HotelBedsApi) -> bool:
        return self._auth.is_configured(api)

    async def request(
        self,
        api: HotelBedsApi,
        method: str,
        path: str,
        *,
        params: dict | None = None,
        json: dict | None = None,
    ):
        provider = f"{PROVIDER}_{api.value}"
        try:
            resp = await self._client.request(
                method,
                f"{self._base_url}{path}",
                params=params,
                json=json,
                headers=self._auth.headers_for(api),
            )
        except httpx.HTTPError as exc:
            raise ProviderError(provider, f"{type(exc).__name__}: {exc}") from exc

        if not resp.is_success:
            raise ProviderError(provider, resp.text[:200], status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            raise MalformedPayloadError(provider, f"invalid JSON body: {exc}") from exc


def build_availability_payload(params: SearchParams) -> dict:
    return {
        "stay": {
            "checkIn": params.checkIn.isoformat(),
            "checkOut": params.checkOut.isoformat(),
        },
        "occupancies": [
            {
                "rooms": params.rooms,
                "adults": params.adults,
                "children": params.children,
            }
        ],
        "destination": {"code": params.destination},
    }


class HotelBedsService:
    def __init__(self, hotelbeds: HotelBedsClient):
        self._hotelbeds = hotelbeds

    @property
    def configured(self) -> bool:
        return self._hotelbeds.is_configured(HotelBedsApi.hotels)

    async def search_hotels(self, params: SearchParams) -> HotelBedsAvailabilityResponse | None:
        """Search availability for a destination and stay. Single attempt; never raises."""
        if not self.configured:
            logger.warning("Hotel Beds credentials not configured, skipping provider")
            return None

        try:
            result = await self._fetch(build_availability_payload(params))
        except ProviderError as exc:
            logger.warning("Hotel Beds unavailable: %s (status=%s)", exc.message, exc.status_code)
            return None
        except MalformedPayloadError as exc:
            logger.warning("Hotel Beds returned a malformed payload: %s", exc.message)
            return None

        logger.info(
            "Hotel Beds returned %d hotels for %s", len(result.hotel_list), params.destination
        )
        return result

    async def _fetch(self, payload: dict) -> HotelBedsAvailabilityResponse:
        logger.debug("Hotel Beds availability request: %s", payload)
        body = await self._hotelbeds.request(
            HotelBedsApi.hotels, "POST", AVAILABILITY_PATH, json=payload,
        )
        try:
            return HotelBedsAvailabilityResponse.model_validate(body)
        except ValidationError as exc:
            raise MalformedPayloadError(PROVIDER, str(exc)) from exc
