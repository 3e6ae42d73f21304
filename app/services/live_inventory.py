import logging
from datetime import datetime, timezone

from pydantic import BaseModel

from app.exceptions.custom import LiveInventoryError
from app.mappers.alerts import build_live_alerts
from app.mappers.fallback import fallback_live_hotels
from app.mappers.live_offer_mapper import normalize_live_hotels
from app.schemas.live import LiveHotel, LiveInventoryParams
from app.schemas.responses import Alert
from app.services.amadeus import AmadeusService

logger = logging.getLogger(__name__)

LIVE_SOURCE = "amadeus_api_enhanced"
FALLBACK_DATA_SOURCE = "fallback_data"


class LiveInventoryResult(BaseModel):
    hotels: list[LiveHotel]
    alerts: list[Alert]
    source: str
    lastUpdated: datetime


class LiveInventoryService:
    def __init__(self, amadeus: AmadeusService):
        self._amadeus = amadeus

    async def fetch(self, params: LiveInventoryParams) -> LiveInventoryResult:
        """Current offers with scarcity alerts; fallback rows when Amadeus has none.

        Raises LiveInventoryError when the rows cannot be assembled.
        """
        raw = await self._amadeus.search_offers(params)
        try:
            now = datetime.now(timezone.utc)
            hotels = normalize_live_hotels(raw, now=now)
            source = LIVE_SOURCE
            if not hotels:
                logger.info("No live offers for %s, serving fallback", params.hotelIds)
                hotels, source = fallback_live_hotels(now=now), FALLBACK_DATA_SOURCE
            alerts = build_live_alerts(hotels, now=now)
        except Exception as exc:
            logger.exception("Live inventory assembly failed")
            raise LiveInventoryError(str(exc)) from exc

        return LiveInventoryResult(hotels=hotels, alerts=alerts, source=source, lastUpdated=now)
