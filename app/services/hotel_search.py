import asyncio
import logging
from datetime import datetime, timezone

from app.exceptions.custom import AggregationError
from app.mappers.amadeus_mapper import normalize_amadeus_hotels
from app.mappers.fallback import (
    FALLBACK_SOURCE,
    amadeus_fallback_hotels,
    fallback_hotels,
    hotelbeds_fallback_hotels,
)
from app.mappers.hotel_filters import apply_filters, compute_stats, sort_hotels
from app.mappers.hotelbeds_mapper import normalize_hotelbeds_hotels
from app.schemas.hotels import Provider, UnifiedHotelRecord
from app.schemas.search import AggregatedResult, SearchParams
from app.services.amadeus import AmadeusService
from app.services.hotelbeds import HotelBedsService

logger = logging.getLogger(__name__)

UNAVAILABLE = "unavailable"


def _api_source(provider: Provider) -> str:
    return f"{provider.value}_api"


class HotelSearchService:
    def __init__(self, amadeus: AmadeusService, hotelbeds: HotelBedsService):
        self._amadeus = amadeus
        self._hotelbeds = hotelbeds

    async def _fan_out(self, params: SearchParams):
        """Call both providers concurrently. A provider that raises counts as no data."""
        amadeus_raw, hotelbeds_raw = await asyncio.gather(
            self._amadeus.search_hotels(params),
            self._hotelbeds.search_hotels(params),
            return_exceptions=True,
        )
        if isinstance(amadeus_raw, BaseException):
            logger.error("Amadeus adapter raised: %r", amadeus_raw)
            amadeus_raw = None
        if isinstance(hotelbeds_raw, BaseException):
            logger.error("Hotel Beds adapter raised: %r", hotelbeds_raw)
            hotelbeds_raw = None
        return amadeus_raw, hotelbeds_raw

    async def search(self, params: SearchParams) -> AggregatedResult:
        amadeus_raw, hotelbeds_raw = await self._fan_out(params)
        try:
            return self._aggregate(params, amadeus_raw, hotelbeds_raw)
        except Exception as exc:
            logger.exception("Hotel aggregation failed")
            raise AggregationError(str(exc)) from exc

    def _aggregate(self, params: SearchParams, amadeus_raw, hotelbeds_raw) -> AggregatedResult:
        now = datetime.now(timezone.utc)
        amadeus_hotels = normalize_amadeus_hotels(amadeus_raw, now=now)
        hotelbeds_hotels = normalize_hotelbeds_hotels(hotelbeds_raw, now=now)

        provider_status = {
            Provider.amadeus.value: _api_source(Provider.amadeus) if amadeus_hotels else UNAVAILABLE,
            Provider.hotelbeds.value: (
                _api_source(Provider.hotelbeds) if hotelbeds_hotels else UNAVAILABLE
            ),
        }

        hotels = apply_filters(amadeus_hotels + hotelbeds_hotels, params)
        provider_counts = {
            Provider.amadeus.value: len(amadeus_hotels),
            Provider.hotelbeds.value: len(hotelbeds_hotels),
        }

        if amadeus_hotels and hotelbeds_hotels:
            source = "multi_provider_api"
        elif amadeus_hotels:
            source = _api_source(Provider.amadeus)
        elif hotelbeds_hotels:
            source = _api_source(Provider.hotelbeds)
        else:
            source = UNAVAILABLE

        if not hotels and not params.has_filters:
            logger.info("No live hotel data for %s, serving fallback inventory", params.destination)
            hotels = fallback_hotels(now=now)
            source = FALLBACK_SOURCE
            provider_counts = None

        hotels = sort_hotels(hotels)
        return AggregatedResult(
            hotels=hotels,
            stats=compute_stats(hotels, provider_counts),
            source=source,
            providerStatus=provider_status,
        )

    async def search_amadeus(self, params: SearchParams) -> tuple[list[UnifiedHotelRecord], str]:
        """Amadeus only, with that provider's fallback when it has no data."""
        raw = await self._amadeus.search_hotels(params)
        try:
            hotels = normalize_amadeus_hotels(raw)
            if hotels:
                return hotels, _api_source(Provider.amadeus)
            logger.info("Amadeus returned no data, serving fallback inventory")
            return amadeus_fallback_hotels(), FALLBACK_SOURCE
        except Exception as exc:
            logger.exception("Amadeus normalization failed")
            raise AggregationError(str(exc)) from exc

    async def search_hotelbeds(self, params: SearchParams) -> tuple[list[UnifiedHotelRecord], str]:
        """Hotel Beds only, with that provider's fallback when it has no data."""
        raw = await self._hotelbeds.search_hotels(params)
        try:
            hotels = normalize_hotelbeds_hotels(raw)
            if hotels:
                return hotels, _api_source(Provider.hotelbeds)
            logger.info("Hotel Beds returned no data, serving fallback inventory")
            return hotelbeds_fallback_hotels(), FALLBACK_SOURCE
        except Exception as exc:
            logger.exception("Hotel Beds normalization failed")
            raise AggregationError(str(exc)) from exc
