"""Utility helpers shared across the engine."""

from __future__ import annotations

import math
from typing import Any, Hashable, Iterable, List, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


def uniq_preserve_order(items: Iterable[str]) -> List[str]:
    """Deduplicate while preserving first-seen order, dropping empty entries."""
    seen = set()
    out: List[str] = []
    for it in items:
        if not it:
            continue
        key = it.strip().lower()
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(it)
    return out


def distinct(items: Iterable[T]) -> List[T]:
    """Exact-value dedup in order of first appearance (empty values kept)."""
    return list(dict.fromkeys(items))


def to_number(value: Any) -> Optional[float]:
    """Parse a loosely formatted number; None when empty, missing or not finite.

    Mirrors what a spreadsheet export produces: "980", " 1150 ", "65.5".
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            num = float(text)
        except ValueError:
            return None
    if math.isnan(num) or math.isinf(num):
        return None
    return num
