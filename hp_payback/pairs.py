"""
Lenient parsing of user-entered numbers and "x:y" pair tables.

COP tables and weather bins are typed by hand as text such as::

    60:3.77, 55:3.56
    50:3.39

Nothing in here raises on bad input. Unparsable numbers fall back to a
default and unparsable table entries are dropped, so a half-typed table
still produces a usable (possibly empty) coordinate list.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

logger = logging.getLogger(__name__)

_ENTRY_SPLIT = re.compile(r'\n|,')


@dataclass(frozen=True)
class Coordinate:
    """One (independent, dependent) sample, e.g. (outdoor °F, COP) or (outdoor °F, weight)."""
    x: float
    y: float


def _parse_finite(value: Any) -> Optional[float]:
    """Return value as a finite float, or None if it isn't one."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def to_number(value: Any, fallback: float = 0.0) -> float:
    """
    Coerce a raw form value to a finite float.

    Args:
        value: String, int, float or None as typed by the user
        fallback: Returned when value is missing, blank, non-numeric or non-finite

    Returns:
        The parsed number, or fallback
    """
    number = _parse_finite(value)
    return fallback if number is None else number


def parse_pairs(text: Optional[str]) -> List[Coordinate]:
    """
    Parse free-form "x:y" text into coordinates sorted ascending by x.

    Entries are separated by newlines or commas. Each entry is split on
    its first colon; both sides must parse to finite numbers or the entry
    is dropped.

    Args:
        text: Raw table text (None is treated as empty)

    Returns:
        List of Coordinate, sorted by x (stable for duplicate x)
    """
    if not text:
        return []

    coords = []
    for raw in _ENTRY_SPLIT.split(text):
        entry = raw.strip()
        if not entry:
            continue
        left, sep, right = entry.partition(':')
        x = _parse_finite(left.strip()) if sep else None
        y = _parse_finite(right.strip()) if sep else None
        if x is None or y is None:
            logger.debug("Dropping malformed pair entry %r", entry)
            continue
        coords.append(Coordinate(x, y))

    return sorted(coords, key=lambda c: c.x)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_pairs(coords: Iterable[Coordinate], sep: str = "\n") -> str:
    """Render coordinates back to "x:y" text that parse_pairs reads losslessly."""
    return sep.join(f"{_format_number(c.x)}:{_format_number(c.y)}" for c in coords)


def pairs_from_list(items: Iterable[Any]) -> List[Coordinate]:
    """
    Build coordinates from a list of [x, y] pairs (as found in JSON configs).

    Items that are not two-element sequences of finite numbers are dropped.
    """
    coords = []
    for item in items:
        if isinstance(item, (str, bytes)):
            logger.debug("Dropping malformed pair item %r", item)
            continue
        try:
            left, right = item
        except (TypeError, ValueError):
            logger.debug("Dropping malformed pair item %r", item)
            continue
        x = _parse_finite(left)
        y = _parse_finite(right)
        if x is None or y is None:
            logger.debug("Dropping non-numeric pair item %r", item)
            continue
        coords.append(Coordinate(x, y))
    return sorted(coords, key=lambda c: c.x)
