class ProviderError(Exception):
    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider}: {message}")


class MalformedPayloadError(Exception):
    def __init__(self, provider: str, message: str):
        self.provider = provider
        self.message = message
        super().__init__(f"{provider}: {message}")


class InvalidSearchParamsError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AggregationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ExtrasLookupError(Exception):
    """Activities or transfers could not be assembled, even from fallback data."""

    def __init__(self, kind: str, message: str):
        self.kind = kind
        self.message = message
        super().__init__(f"{kind}: {message}")


class LiveInventoryError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InventoryError(Exception):
    def __init__(self, message: str, params=None):
        self.message = message
        self.params = params
        super().__init__(message)
