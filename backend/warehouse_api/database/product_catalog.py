"""Read-only product mapping lookup."""

import logging
from types import MappingProxyType
from typing import Iterator, Mapping

from warehouse_api.models.product import MappedProduct, ProductMapping, ProductMappingEntry

logger = logging.getLogger(__name__)


class ProductCatalog:
    """Immutable lookup from a sellable product or kit id to its physical products."""

    def __init__(self, entries: Mapping[str, ProductMappingEntry] | None = None) -> None:
        self._entries: Mapping[str, ProductMappingEntry] = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_mapping(cls, mapping: ProductMapping) -> "ProductCatalog":
        """Build a catalog from a parsed mapping file."""
        return cls(mapping.root)

    def products_for(self, product_id: str | None) -> list[MappedProduct]:
        """Physical products for ``product_id``; unknown ids map to no products."""
        if product_id is None:
            return []
        entry = self._entries.get(product_id)
        if entry is None:
            return []
        return list(entry.products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
