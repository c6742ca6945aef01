"""Bundled-collection source: no parsing, no I/O."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..data import LISTINGS
from ..models import Listing
from .base import ListingSource


class StaticSource(ListingSource):
    """Serve a fixed collection as-is (the bundled catalog by default)."""

    name = "static"

    def __init__(self, listings: Optional[Iterable[Listing]] = None) -> None:
        self._listings = tuple(LISTINGS if listings is None else listings)

    async def fetch(self) -> List[Listing]:
        return list(self._listings)
