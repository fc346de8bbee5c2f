"""Filter engine — narrows approved listings by optional search criteria.

Every present criterion becomes one predicate; a listing matches when all
predicates hold. Absent criteria, "all", blank strings and unparsable
numbers add no predicate at all.
"""

import math
from typing import Callable, Iterable, List, Optional

from homedirect.domain.models.listing import Listing
from homedirect.domain.schemas.listing import ListingFilter

Predicate = Callable[[Listing], bool]


def parse_number(value: Optional[str]) -> Optional[float]:
    """Parse a numeric criterion; None for empty or non-numeric input."""
    if value is None:
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value.casefold() if value else None


def build_predicates(filters: ListingFilter) -> List[Predicate]:
    """Translate criteria into independent predicates."""
    predicates: List[Predicate] = []

    if filters.listing_type and filters.listing_type != "all":
        wanted_listing = filters.listing_type
        predicates.append(lambda p: p.listing_type.value == wanted_listing)

    if filters.property_type and filters.property_type != "all":
        wanted_property = filters.property_type
        predicates.append(lambda p: p.property_type.value == wanted_property)

    # Location fields match on case-insensitive substring
    for field in ("region", "city", "district"):
        needle = _text(getattr(filters, field))
        if needle is not None:
            predicates.append(
                lambda p, field=field, needle=needle: needle in getattr(p, field).casefold()
            )

    price_min = parse_number(filters.price_min)
    if price_min is not None:
        predicates.append(lambda p: p.price >= price_min)

    price_max = parse_number(filters.price_max)
    if price_max is not None:
        predicates.append(lambda p: p.price <= price_max)

    area_min = parse_number(filters.area_min)
    if area_min is not None:
        predicates.append(lambda p: p.area >= area_min)

    area_max = parse_number(filters.area_max)
    if area_max is not None:
        predicates.append(lambda p: p.area <= area_max)

    rooms = parse_number(filters.rooms)
    if rooms is not None:
        predicates.append(lambda p: p.rooms == rooms)

    return predicates


def filter_listings(listings: Iterable[Listing], filters: Optional[ListingFilter] = None) -> List[Listing]:
    """Apply criteria to already-approved listings, keeping their order."""
    predicates = build_predicates(filters or ListingFilter())
    return [listing for listing in listings if all(check(listing) for check in predicates)]
