from pydantic_settings import BaseSettings

from app.services.hotelbeds_auth import HotelBedsApi, HotelBedsCredentials


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    amadeus_base_url: str = "https://test.api.amadeus.com"
    amadeus_access_token: str = ""
    amadeus_hotel_ids: str = "ACPAR419,MCLONGHM,PARPET01"
    hotelbeds_base_url: str = "https://api.test.hotelbeds.com"
    hotelbeds_hotels_api_key: str = ""
    hotelbeds_hotels_secret: str = ""
    hotelbeds_activities_api_key: str = ""
    hotelbeds_activities_secret: str = ""
    hotelbeds_transfers_api_key: str = ""
    hotelbeds_transfers_secret: str = ""
    provider_timeout_seconds: float = 10.0
    log_level: str = "INFO"

    @property
    def amadeus_hotel_id_list(self) -> list[str]:
        return [h.strip() for h in self.amadeus_hotel_ids.split(",") if h.strip()]

    @property
    def hotelbeds_credentials(self) -> dict[HotelBedsApi, HotelBedsCredentials]:
        return {
            HotelBedsApi.hotels: HotelBedsCredentials(
                api_key=self.hotelbeds_hotels_api_key, secret=self.hotelbeds_hotels_secret,
            ),
            HotelBedsApi.activities: HotelBedsCredentials(
                api_key=self.hotelbeds_activities_api_key,
                secret=self.hotelbeds_activities_secret,
            ),
            HotelBedsApi.transfers: HotelBedsCredentials(
                api_key=self.hotelbeds_transfers_api_key,
                secret=self.hotelbeds_transfers_secret,
            ),
        }
