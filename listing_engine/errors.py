"""Exceptions raised while loading a listing feed."""

from __future__ import annotations


class FeedError(Exception):
    """Base class for feed loading failures."""


class FetchError(FeedError):
    """The remote document could not be retrieved (transport error or non-2xx status)."""


class ParseError(FeedError):
    """The document was retrieved but cannot be read as a listing feed at all."""
