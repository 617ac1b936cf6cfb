"""Utilities package."""

from warehouse_api.utils.helpers import (
    format_line_item_id,
    get_timestamp,
    line_item_number,
    parse_int,
)
from warehouse_api.utils.logger import setup_logging

__all__ = [
    "setup_logging",
    "get_timestamp",
    "parse_int",
    "line_item_number",
    "format_line_item_id",
]
