import hashlib
import time
from enum import StrEnum

from pydantic import BaseModel


class HotelBedsApi(StrEnum):
    hotels = "hotels"
    activities = "activities"
    transfers = "transfers"


class HotelBedsCredentials(BaseModel):
    api_key: str
    secret: str

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.secret)


def generate_signature(api_key: str, secret: str, timestamp: int) -> str:
    """SHA-256 hex digest of api key + secret + unix timestamp (seconds)."""
    return hashlib.sha256(f"{api_key}{secret}{timestamp}".encode()).hexdigest()


def build_auth_headers(
    credentials: HotelBedsCredentials,
    timestamp: int | None = None,
) -> dict[str, str]:
    """Signed request headers. The timestamp is part of the signature, so
    headers must be rebuilt for every request."""
    if timestamp is None:
        timestamp = int(time.time())
    return {
        "Api-key": credentials.api_key,
        "X-Signature": generate_signature(credentials.api_key, credentials.secret, timestamp),
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


class HotelBedsAuth:
    """Hotel Beds issues a separate key pair for each API product."""

    def __init__(self, credentials: dict[HotelBedsApi, HotelBedsCredentials]):
        self._credentials = dict(credentials)

    def credentials_for(self, api: HotelBedsApi) -> HotelBedsCredentials:
        return self._credentials.get(api) or HotelBedsCredentials(api_key="", secret="")

    def is_configured(self, api: HotelBedsApi) -> bool:
        return self.credentials_for(api).configured

    def headers_for(self, api: HotelBedsApi, timestamp: int | None = None) -> dict[str, str]:
        return build_auth_headers(self.credentials_for(api), timestamp=timestamp)
