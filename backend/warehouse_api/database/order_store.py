"""Flat-file order store.

The whole collection is read from disk on every ``load`` and the whole
collection is rewritten on every ``save``; nothing is cached between calls.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from warehouse_api.exceptions import StorageUnavailable
from warehouse_api.models.order import Order

logger = logging.getLogger(__name__)


class OrderStore:
    """JSON file holding the full order collection.

    Read failures degrade to an empty collection and write failures are
    logged and swallowed, so callers always get an answer. Two load/save
    sequences that interleave lose the first write; callers that need
    more must serialise their own load-mutate-save.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_raw(self) -> list[dict[str, Any]]:
        """Read the raw JSON array from disk."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageUnavailable(str(self.path), str(e)) from e

        if not isinstance(data, list):
            raise StorageUnavailable(str(self.path), "order file must contain a JSON array")
        return data

    def _write_raw(self, data: list[dict[str, Any]]) -> None:
        """Atomically replace the order file with ``data``."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageUnavailable(str(self.path), str(e)) from e

    def load(self, strict: bool = False) -> list[Order]:
        """Load every order; an unreadable store yields an empty list.

        A file that reads fine but holds records that fail validation also
        yields an empty list, unless ``strict`` is set: then it raises
        StorageUnavailable so a caller about to rewrite the file does not
        replace the existing orders with its own.
        """
        try:
            raw = self._read_raw()
        except StorageUnavailable as e:
            logger.error("Error loading orders: %s", e.message)
            return []

        try:
            orders = [Order.model_validate(item) for item in raw]
        except ValidationError as e:
            logger.error("Invalid order records in %s: %s", self.path, e)
            if strict:
                raise StorageUnavailable(str(self.path), "order file holds invalid records") from e
            return []

        logger.debug("Loaded %d orders from %s", len(orders), self.path)
        return orders

    def save(self, orders: list[Order]) -> bool:
        """Rewrite the whole store. Returns False if the write failed."""
        data = [order.model_dump(mode="json", exclude_unset=True) for order in orders]
        try:
            self._write_raw(data)
        except StorageUnavailable as e:
            logger.error("Error saving orders: %s", e.message)
            return False

        logger.debug("Saved %d orders to %s", len(orders), self.path)
        return True
