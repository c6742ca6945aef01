"""Filtering and sorting of a loaded collection.

`evaluate` is a pure function of (listings, params): the presentation layer
calls it again whenever any input changes. Nothing is cached or indexed; the
collections this serves hold tens to low hundreds of records.

Parameter values arrive straight from form controls, so they are kept raw and
coerced only here. A value that does not make sense (a price bound of "abc",
a bedroom choice of "lots") imposes no constraint instead of hiding everything.
"""

from __future__ import annotations

from typing import Iterable, List, Literal, NamedTuple, Optional, Sequence, Union

from pydantic import BaseModel

from .models import FeedState, Listing
from .utils import distinct, to_number

ANY = "any"
STUDIO = "studio"
ALL = "all"

SortField = Literal["price", "size"]
Direction = Literal["asc", "desc"]

Bound = Union[int, float, str, None]


class SortKey(NamedTuple):
    field: SortField = "price"
    direction: Direction = "asc"

    @classmethod
    def parse(cls, value: Union[str, "SortKey", None]) -> "SortKey":
        """Parse "price-asc" style keys.

        An empty key gives the default order. Otherwise anything but "price" sorts
        by size and anything but "asc" sorts descending, so a bare "price" is
        price-desc.
        """
        if isinstance(value, SortKey):
            return value
        text = (value or "").strip().lower()
        if not text:
            return cls()
        field, _, direction = text.partition("-")
        return cls(
            field="price" if field == "price" else "size",
            direction="asc" if direction == "asc" else "desc",
        )

    def __str__(self) -> str:
        return f"{self.field}-{self.direction}"


class QueryParams(BaseModel):
    """Filter and sort choices, as entered."""

    text: str = ""
    beds: Union[int, str] = ANY
    min_price: Bound = None
    max_price: Bound = None
    district: str = ALL
    sort: str = "price-asc"


def _matches_text(listing: Listing, text: str) -> bool:
    needle = text.strip().lower()
    if not needle:
        return True
    return needle in listing.title.lower() or needle in listing.district.lower()


def _matches_beds(listing: Listing, beds: Union[int, str]) -> bool:
    choice = str(beds).strip().lower()
    if choice == ANY:
        return True
    if choice == STUDIO:
        return listing.beds == 0
    wanted = to_number(choice)
    if wanted is None:
        return True
    return listing.beds == wanted


def _matches_district(listing: Listing, district: str) -> bool:
    return district == ALL or listing.district == district


def evaluate(listings: Iterable[Listing], params: Optional[QueryParams] = None) -> List[Listing]:
    """Return the listings matching every filter, in the requested order.

    The sort is stable: listings with equal sort values keep their relative
    order from the input.
    """
    params = params or QueryParams()
    low = to_number(params.min_price)
    high = to_number(params.max_price)

    out = [
        item
        for item in listings
        if _matches_text(item, params.text)
        and _matches_beds(item, params.beds)
        and (low is None or item.price >= low)
        and (high is None or item.price <= high)
        and _matches_district(item, params.district)
    ]

    key = SortKey.parse(params.sort)
    # reverse=True keeps equal elements in input order, so both directions stay stable
    return sorted(out, key=lambda item: getattr(item, key.field), reverse=key.direction == "desc")


def district_facet(listings: Iterable[Listing]) -> List[str]:
    """Distinct districts in order of first appearance, for a selection control."""
    return distinct(item.district for item in listings)


def summarize(state: FeedState, results: Sequence[Listing]) -> str:
    """Status line for the results header."""
    if state.loading:
        return "Loading…"
    if state.error:
        return "Error"
    return f"{len(results)} result(s)"
