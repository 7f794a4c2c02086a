"""Domain helpers for sequential pal identifiers."""
from __future__ import annotations

import re
from typing import Any

PAL_ID_WIDTH = 3
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_pal_id(value: Any) -> int | None:
    """Parse the leading integer of an identifier ("007" -> 7, "12a" -> 12)."""
    match = LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def format_pal_id(number: int) -> str:
    """Render a number as a zero-padded identifier; wider numbers are kept whole."""
    return str(number).zfill(PAL_ID_WIDTH)


def next_pal_id(last_id: Any | None) -> str:
    """Identifier following last_id; "001" when the sequence is empty.

    Raises ValueError when last_id has no leading integer.
    """
    if last_id is None:
        return format_pal_id(1)
    number = parse_pal_id(last_id)
    if number is None:
        raise ValueError(f"Cannot derive next pal ID from '{last_id}'")
    return format_pal_id(number + 1)
