"""Published-spreadsheet source connector.

A Google Sheet "published to the web" as CSV is the editable backend: whoever
maintains the sheet updates listings without a deploy. We fetch the document
once, bypassing caches so the latest published version is shown, and hand the
text to `normalize.parse_listings`.

Note: the published URL can start serving an HTML page (e.g. when the sheet is
unpublished); that surfaces as a ParseError rather than a page of "Untitled" rows.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from ..errors import FetchError
from ..models import Listing
from ..normalize import parse_listings
from .base import ListingSource

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


class SheetSource(ListingSource):
    """Fetch a CSV feed over HTTP and normalize it."""

    name = "sheet"

    def __init__(
        self,
        url: str,
        timeout_s: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self._timeout = timeout_s
        self._transport = transport

    async def _download(self) -> str:
        """Return the document body, raising FetchError on any transport problem."""
        async with httpx.AsyncClient(
            timeout=self._timeout, follow_redirects=True, transport=self._transport
        ) as client:
            try:
                resp = await client.get(self.url, headers=NO_CACHE_HEADERS)
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise FetchError(
                    f"Failed to fetch sheet (HTTP {exc.response.status_code})"
                ) from exc
            except httpx.HTTPError as exc:
                raise FetchError(f"Failed to fetch sheet: {exc}") from exc
            return resp.text

    async def fetch(self) -> List[Listing]:
        """Download the sheet and return its rows as listings.

        Raises:
            FetchError: transport failure or non-success status.
            ParseError: the body is not a listing CSV at all.
        """
        text = await self._download()
        listings = parse_listings(text)
        logger.info("Loaded %d listings from %s", len(listings), self.url)
        return listings
