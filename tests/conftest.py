"""Shared fixtures for listing engine tests."""
from __future__ import annotations

import pytest

from listing_engine.data import LISTINGS
from listing_engine.models import Listing


def _make_listing(id, price=0, beds=0, size=0, title="Flat", district="", **kwargs) -> Listing:
    return Listing(id=id, title=title, district=district, price=price, beds=beds, size=size, **kwargs)


@pytest.fixture
def make_listing():
    return _make_listing


@pytest.fixture
def catalog() -> list[Listing]:
    """The bundled five-listing catalog (prices 980, 1150, 550, 1490, 1650)."""

    return list(LISTINGS)
