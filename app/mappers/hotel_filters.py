from collections.abc import Iterable

from app.schemas.hotels import Provider, UnifiedHotelRecord
from app.schemas.search import PriceRange, SearchParams, SearchStats


def apply_filters(
    hotels: Iterable[UnifiedHotelRecord],
    params: SearchParams,
) -> list[UnifiedHotelRecord]:
    """Drop hotels that fail the pet, price or rating filters in `params`."""
    result = list(hotels)
    if params.petFriendly:
        result = [h for h in result if h.petPolicy.allowed]
    if params.maxPrice is not None:
        result = [h for h in result if h.pricing.from_ <= params.maxPrice]
    if params.minRating is not None:
        result = [h for h in result if h.rating >= params.minRating]
    return result


def sort_hotels(hotels: Iterable[UnifiedHotelRecord]) -> list[UnifiedHotelRecord]:
    """Cheapest first, better rated first on equal price.

    `sorted` is stable, so full ties keep their incoming order.
    """
    return sorted(hotels, key=lambda h: (h.pricing.from_, -h.rating))


def compute_stats(
    hotels: list[UnifiedHotelRecord],
    provider_counts: dict[str, int] | None = None,
) -> SearchStats:
    """Summary of `hotels`.

    `provider_counts` reports how many records each upstream returned before
    filtering; when omitted the providers of `hotels` are counted.
    """
    providers = {p.value: 0 for p in Provider}
    if provider_counts is None:
        for hotel in hotels:
            providers[hotel.provider.value] += 1
    else:
        providers.update(provider_counts)

    if not hotels:
        return SearchStats(providers=providers)

    prices = [h.pricing.from_ for h in hotels]
    return SearchStats(
        totalHotels=len(hotels),
        petFriendlyCount=sum(1 for h in hotels if h.petPolicy.allowed),
        averagePrice=round(sum(prices) / len(prices), 2),
        providers=providers,
        priceRange=PriceRange(min=min(prices), max=max(prices)),
    )
