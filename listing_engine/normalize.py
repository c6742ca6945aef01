"""Normalization of the published-sheet CSV feed.

This module contains deterministic parsing logic:
- line splitting (CRLF/LF, blank lines dropped)
- a small quote-aware field scanner
- header-name column lookup
- field coercion with defaults, so every row becomes a complete `Listing`

The CSV dialect is deliberately simple: a field may be wrapped in one pair of
double quotes to carry commas, but escaped quotes and embedded newlines are not
supported. A published spreadsheet export never needs more than that.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import ParseError
from .models import Listing
from .utils import to_number, uniq_preserve_order

logger = logging.getLogger(__name__)

COLUMNS = ("id", "title", "district", "price", "beds", "size", "address", "tags")

UNTITLED = "Untitled"
BOM = "\ufeff"

LINE_RE = re.compile(r"\r?\n")
TAG_SPLIT_RE = re.compile(r"\s*,\s*")


def split_lines(text: str) -> List[str]:
    """Split a document on CRLF/LF boundaries, discarding blank lines.

    A leading UTF-8 byte order mark is dropped so it cannot hide the first column.
    """
    return [line for line in LINE_RE.split((text or "").lstrip(BOM)) if line.strip()]


def _strip_quotes(field: str) -> str:
    """Remove one leading and one trailing double quote, if present."""
    if field.startswith('"'):
        field = field[1:]
    if field.endswith('"'):
        field = field[:-1]
    return field


def split_fields(line: str) -> List[str]:
    """Split one CSV line on commas that are not inside a quoted span.

    The scanner only tracks whether it is inside quotes; quote characters are
    kept while scanning and one surrounding layer is stripped per field at the end.
    """
    fields: List[str] = []
    buf: List[str] = []
    in_quotes = False

    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
            buf.append(ch)
        elif ch == "," and not in_quotes:
            fields.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
    fields.append("".join(buf))

    return [_strip_quotes(f) for f in fields]


def column_index(header: Sequence[str], name: str) -> int:
    """Position of `name` in the header (trimmed, case-insensitive), or -1."""
    wanted = name.lower()
    for i, h in enumerate(header):
        if h.strip().lower() == wanted:
            return i
    return -1


def _cell(row: Sequence[str], idx: int) -> Optional[str]:
    if idx < 0 or idx >= len(row):
        return None
    return row[idx]


def _count(value: Optional[str]) -> float:
    """Numeric field with the 0 default for empty, unparseable or negative input."""
    num = to_number(value)
    if num is None or num < 0:
        return 0.0
    return num


def parse_tags(value: Optional[str]) -> Tuple[str, ...]:
    """Split a tags cell such as "Furnished, Balcony" into clean labels."""
    if not value:
        return ()
    return tuple(uniq_preserve_order(t.strip() for t in TAG_SPLIT_RE.split(value)))


def row_to_listing(row: Sequence[str], columns: Dict[str, int], position: int) -> Listing:
    """Build a `Listing` from one data row; `position` is the 1-based row number."""
    raw_id = (_cell(row, columns["id"]) or "").strip()

    return Listing(
        id=raw_id or position,
        title=(_cell(row, columns["title"]) or "").strip() or UNTITLED,
        district=(_cell(row, columns["district"]) or "").strip(),
        price=_count(_cell(row, columns["price"])),
        beds=int(_count(_cell(row, columns["beds"]))),
        size=_count(_cell(row, columns["size"])),
        address=(_cell(row, columns["address"]) or "").strip(),
        tags=parse_tags(_cell(row, columns["tags"])),
    )


def parse_listings(text: str) -> List[Listing]:
    """Parse a whole CSV document into listings.

    Rows never fail individually: short or malformed rows fall back to field
    defaults. Only a document whose header matches none of the expected
    columns raises `ParseError`.
    """
    lines = split_lines(text)
    if not lines:
        return []

    header, *rows = [split_fields(line) for line in lines]
    columns = {name: column_index(header, name) for name in COLUMNS}

    if all(idx < 0 for idx in columns.values()):
        raise ParseError("Feed header has none of the expected columns: " + ", ".join(COLUMNS))

    missing = [name for name, idx in columns.items() if idx < 0]
    if missing:
        logger.warning("Feed is missing columns %s; defaults apply", ", ".join(missing))

    listings = [row_to_listing(row, columns, i + 1) for i, row in enumerate(rows)]
    logger.debug("Parsed %d listings from %d lines", len(listings), len(lines))
    return listings
