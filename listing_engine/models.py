"""Data models for the listing engine.

The key idea: whatever feed the records come from, the query layer only ever
sees a *fully populated* `Listing`. Defaults are applied during normalization,
so no field is ever missing or None once a record exists.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class Listing(BaseModel):
    """A normalized rental listing.

    Records are frozen: a collection is replaced as a whole on reload and never
    patched in place.
    """

    model_config = ConfigDict(frozen=True)

    id: Union[int, str] = Field(..., description="Source id, or the 1-based row position when absent.")
    title: str = "Untitled"
    district: str = ""

    price: float = Field(default=0, ge=0, description="Monthly rent; 0 when missing or unparseable.")
    beds: int = Field(default=0, ge=0, description="Bedroom count; 0 is a studio.")
    size: float = Field(default=0, ge=0, description="Floor area in square meters.")

    address: str = ""
    tags: Tuple[str, ...] = ()


class FeedState(BaseModel):
    """Snapshot of what the presentation layer should render.

    `loading`, `error` and `listings` are independent: a failed reload keeps the
    previous listings next to the error message.
    """

    model_config = ConfigDict(frozen=True)

    listings: Tuple[Listing, ...] = ()
    loading: bool = False
    error: Optional[str] = None
