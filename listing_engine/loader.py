"""Feed loading and publication.

`load()` is the plain contract: configuration in, normalized listings out.
`FeedLoader` wraps it for a long-lived consumer (a UI session): it holds the
current `FeedState`, swaps it atomically, and drops completions that arrive
after the consumer moved on.

Each `FeedLoader.load()` call takes the next generation number. When the
fetch finishes, its result is applied only if no newer load has started and
`dispose()` has not been called. Failures keep the listings already on display.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional

from .config import Settings, get_settings
from .data import LISTINGS
from .models import FeedState, Listing
from .sources.base import ListingSource
from .sources.sheet import SheetSource
from .sources.static import StaticSource

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Error"


def build_source(settings: Optional[Settings] = None) -> ListingSource:
    """Pick the feed source named by configuration."""
    settings = settings or get_settings()
    if settings.data_source == "sheet":
        return SheetSource(settings.feed_url, timeout_s=settings.feed_timeout_s)
    return StaticSource()


async def load(settings: Optional[Settings] = None) -> List[Listing]:
    """Load the configured feed once.

    Raises:
        FetchError: the remote document could not be retrieved.
        ParseError: the remote document is not a listing feed.
    """
    return await build_source(settings).fetch()


class FeedLoader:
    """Holds the currently displayed collection for one consumer."""

    def __init__(self, source: ListingSource, initial: Optional[Iterable[Listing]] = None) -> None:
        self._source = source
        self._generation = 0
        self._disposed = False
        seed = LISTINGS if initial is None else initial
        self._state = FeedState(listings=tuple(seed), loading=source.name != "static")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "FeedLoader":
        return cls(build_source(settings))

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Stop accepting results; any in-flight load is discarded when it completes."""
        self._disposed = True

    def _is_current(self, generation: int) -> bool:
        return not self._disposed and generation == self._generation

    def _publish(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)

    async def load(self) -> bool:
        """Run one load attempt; return True if its result was applied."""
        if self._disposed:
            return False

        self._generation += 1
        generation = self._generation
        self._publish(loading=True)

        try:
            listings = await self._source.fetch()
        except asyncio.CancelledError:
            if self._is_current(generation):
                self._publish(loading=False)
            raise
        except Exception as exc:
            if not self._is_current(generation):
                logger.debug("Discarding failure of superseded load #%d: %s", generation, exc)
                return False
            logger.warning("Loading %s feed failed: %s", self._source.name, exc, exc_info=True)
            self._publish(error=str(exc) or GENERIC_ERROR, loading=False)
            return False

        if not self._is_current(generation):
            logger.debug("Discarding result of superseded load #%d", generation)
            return False

        self._publish(listings=tuple(listings), error=None, loading=False)
        logger.info("Published %d listings from %s feed", len(listings), self._source.name)
        return True
