"""Data loader service for the product mapping file."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from warehouse_api.database.product_catalog import ProductCatalog
from warehouse_api.models.product import ProductMapping

logger = logging.getLogger(__name__)


class DataLoader:
    """Service for loading the product mapping from JSON files."""

    @staticmethod
    def load_json_file(file_path: str | Path) -> dict[str, Any]:
        """Load a JSON object from a single file."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if file_path.suffix.lower() != ".json":
            raise ValueError(f"File must be a JSON file: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in file %s: %s", file_path, e)
            raise

        if not isinstance(data, dict):
            raise ValueError(f"JSON must contain an object keyed by product id: {file_path}")

        logger.info("Loaded %d records from %s", len(data), file_path)
        return data

    @staticmethod
    def parse_product_mapping(data: dict[str, Any]) -> ProductMapping:
        """Validate raw mapping data into a ProductMapping."""
        return ProductMapping.model_validate(data)

    @staticmethod
    def load_product_mapping(file_path: str | Path) -> ProductCatalog:
        """Load the product mapping file into a catalog.

        Any failure is logged and yields an empty catalog, so the API still
        starts; unmapped products simply expand to nothing.
        """
        try:
            raw_data = DataLoader.load_json_file(file_path)
            mapping = DataLoader.parse_product_mapping(raw_data)
        except (OSError, ValueError, ValidationError) as e:
            logger.error("Error loading product mapping: %s", e)
            return ProductCatalog()

        catalog = ProductCatalog.from_mapping(mapping)
        logger.info("Product mapping loaded with %d entries", len(catalog))
        return catalog
