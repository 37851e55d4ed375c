"""Utility functions for the application."""

import json
import re
from typing import Any

from core.constants import BYTE_UNITS
from core.log import get_logger

logger = get_logger(__name__)

FORMATTED_SIZE_PATTERN = re.compile(r"^(\d+)(GB|MB|K)$")
FORMATTED_SIZE_MULTIPLIERS = {"GB": 1024**3, "MB": 1024**2, "K": 1024}


def to_int(value: Any, default: int | None = None) -> int | None:
    """Coerce a server value to int, returning ``default`` when impossible."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def to_str(value: Any, default: str | None = None) -> str | None:
    """Coerce a server value to str; bytes are decoded as UTF-8."""
    if value is None:
        return default
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def format_number(value: Any, digits: int = 0) -> str:
    """Format a number with thousands separators.

    Values that are not numeric are returned unchanged as text.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    return f"{number:,.{digits}f}"


def format_byte_down(
    value: Any, limes: int = 6, comma: int = 0
) -> tuple[str, str] | None:
    """Scale a byte count down to a readable unit.

    A unit is only used once the value reaches ``10**limes`` of the
    corresponding decimal magnitude, so 8 MiB renders as ``8,192 KiB``.

    Args:
        value: Byte count
        limes: Number of digits kept before switching to a bigger unit
        comma: Number of decimals

    Returns:
        Tuple of (formatted value, unit) or None when value is not numeric
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None

    divider = 10**comma
    threshold = 10**limes
    unit = BYTE_UNITS[0]

    for power in range(len(BYTE_UNITS) - 1, 0, -1):
        exponent = (power - 1) * 3
        if number >= threshold * 10**exponent:
            number = round(number / (1024**power / divider)) / divider
            unit = BYTE_UNITS[power]
            break

    if unit == BYTE_UNITS[0]:
        return format_number(number), unit
    return format_number(number, comma), unit


def extract_value_from_formatted_size(formatted_size: str) -> int:
    """Convert values like ``8MB``, ``1GB`` or ``64K`` to bytes.

    Returns -1 for any other notation.
    """
    match = FORMATTED_SIZE_PATTERN.match(formatted_size)
    if not match:
        return -1
    return int(match.group(1)) * FORMATTED_SIZE_MULTIPLIERS[match.group(2)]


def parse_json_object(raw: Any) -> dict[str, Any] | None:
    """Decode a JSON document that is expected to hold an object."""
    text = to_str(raw)
    if not text:
        return None
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError:
        logger.warning(f"Could not decode JSON payload: {text[:80]}")
        return None
    return decoded if isinstance(decoded, dict) else None


def escape_bind_markers(sql: str) -> str:
    """Escape colons so SQLAlchemy ``text()`` does not read them as bind parameters.

    Apply to names interpolated into SQL text; ``text()`` turns ``\\:`` back
    into a literal colon.
    """
    return sql.replace(":", "\\:")
