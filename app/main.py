import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import (
    AggregationError,
    ExtrasLookupError,
    InvalidSearchParamsError,
    InventoryError,
    LiveInventoryError,
)
from app.exceptions.handlers import (
    aggregation_error_handler,
    extras_lookup_error_handler,
    invalid_search_params_handler,
    inventory_error_handler,
    live_inventory_error_handler,
    unhandled_error_handler,
)
from app.routers.hotelbeds_extras import router as hotelbeds_extras_router
from app.routers.hotels import router as hotels_router
from app.routers.inventory import router as inventory_router
from app.routers.providers import router as providers_router
from app.routers.search import router as search_router
from app.services.amadeus import AmadeusService
from app.services.hotel_search import HotelSearchService
from app.services.hotelbeds import HotelBedsClient, HotelBedsService
from app.services.hotelbeds_auth import HotelBedsAuth
from app.services.hotelbeds_extras import HotelBedsActivitiesService, HotelBedsTransfersService
from app.services.live_inventory import LiveInventoryService
from app.services.travel_extras import TravelExtrasService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.provider_timeout_seconds) as client:
        amadeus = AmadeusService(
            client,
            settings.amadeus_access_token,
            settings.amadeus_hotel_id_list,
            base_url=settings.amadeus_base_url,
        )
        hotelbeds_client = HotelBedsClient(
            client,
            HotelBedsAuth(settings.hotelbeds_credentials),
            base_url=settings.hotelbeds_base_url,
        )

        app.state.hotel_search_service = HotelSearchService(
            amadeus, HotelBedsService(hotelbeds_client),
        )
        app.state.live_inventory_service = LiveInventoryService(amadeus)
        app.state.travel_extras_service = TravelExtrasService(
            HotelBedsActivitiesService(hotelbeds_client),
            HotelBedsTransfersService(hotelbeds_client),
        )

        yield


app = FastAPI(title="Pet Travel Inventory", lifespan=lifespan)

app.add_exception_handler(InvalidSearchParamsError, invalid_search_params_handler)
app.add_exception_handler(AggregationError, aggregation_error_handler)
app.add_exception_handler(InventoryError, inventory_error_handler)
app.add_exception_handler(LiveInventoryError, live_inventory_error_handler)
app.add_exception_handler(ExtrasLookupError, extras_lookup_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(search_router)
app.include_router(inventory_router)
app.include_router(providers_router)
app.include_router(hotels_router)
app.include_router(hotelbeds_extras_router)
