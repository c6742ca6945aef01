"""Base classes for feed sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..models import Listing


class ListingSource(ABC):
    """Abstract base class for a listing feed."""

    name: str

    @abstractmethod
    async def fetch(self) -> List[Listing]:
        """Fetch the feed and return normalized listings."""
        raise NotImplementedError
