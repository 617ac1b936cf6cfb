"""Utility helper functions."""

import re
from datetime import UTC, datetime
from typing import Any, Optional

LINE_ITEM_ID_PATTERN = re.compile(r"^LI-(\d+)$")


def get_timestamp() -> str:
    """Get current UTC timestamp in ISO format, e.g. 2024-09-06T03:28:26.123Z."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_int(value: Any) -> Optional[int]:
    """Parse a decimal integer string, returning None when it is not one."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def line_item_number(line_item_id: Optional[str]) -> int:
    """Return the counter of an ``LI-<n>`` id, or 0 for any other id."""
    if not line_item_id:
        return 0
    match = LINE_ITEM_ID_PATTERN.match(line_item_id)
    return int(match.group(1)) if match else 0


def format_line_item_id(number: int) -> str:
    """Format a line item counter as an ``LI-<n>`` id."""
    return f"LI-{number}"
