import json
import logging
from pathlib import Path
from typing import List, Union
from pydantic import ValidationError
from .models import Product

class CatalogError(Exception):
    """Raised when the catalog file cannot be read or contains invalid products."""

class CatalogLoader:
    def __init__(self, catalog_path: Union[str, Path]):
        self.catalog_path = Path(catalog_path)
        self.logger = logging.getLogger(__name__)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def get_products(self) -> List[Product]:
        """Read and validate the catalog. The file is re-read on every call so edits show up immediately."""
        raw_products = self._read_raw_products()
        products = []
        for index, raw in enumerate(raw_products):
            try:
                products.append(Product.model_validate(raw))
            except ValidationError as e:
                self.logger.error(f"Invalid product at index {index} in {self.catalog_path}: {e}")
                raise CatalogError(f"Invalid product at index {index} in {self.catalog_path}") from e
        self.logger.info(f"Loaded {len(products)} products from {self.catalog_path}")
        return products

    def _read_raw_products(self) -> List[dict]:
        try:
            data = json.loads(self.catalog_path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            self.logger.error(f"Catalog file not found: {self.catalog_path}")
            raise CatalogError(f"Catalog file not found: {self.catalog_path}") from e
        except json.JSONDecodeError as e:
            self.logger.error(f"Catalog file is not valid JSON: {self.catalog_path} ({e})")
            raise CatalogError(f"Catalog file is not valid JSON: {self.catalog_path}") from e

        # Accept both a bare list and the {"products": [...]} shape of the products endpoint.
        if isinstance(data, dict):
            data = data.get("products")
        if not isinstance(data, list):
            raise CatalogError(f"Catalog file must contain a list of products: {self.catalog_path}")
        return data
