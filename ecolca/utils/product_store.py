"""Key-value persistence for saved products."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from ..config.paths import PRODUCTS_FILE, ensure_dir
from ..models.product import Product

logger = logging.getLogger(__name__)


class ProductStore:
    """Saves, loads and deletes products in a single JSON file.

    The file holds a flat list of serialized products; a product is found
    by scanning for its identifier. No schema versioning.
    """

    def __init__(self, path: Path = PRODUCTS_FILE):
        """Initialize the store with the JSON file location."""
        self.path = Path(path)
        ensure_dir(self.path.parent)

    def _read(self) -> List[dict]:
        """Load the raw product list; unreadable files count as empty."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("Could not read product store %s; treating as empty", self.path)
            return []
        if not isinstance(data, list):
            logger.warning("Product store %s does not hold a list; treating as empty", self.path)
            return []
        return [record for record in data if isinstance(record, dict)]

    def _write(self, records: List[dict]):
        """Write the raw product list."""
        self.path.write_text(json.dumps(records, indent=2), encoding="utf-8")

    def load_all(self) -> List[Product]:
        """Return every stored product that still validates."""
        products = []
        for record in self._read():
            try:
                products.append(Product.model_validate(record))
            except ValidationError:
                logger.warning("Skipping invalid stored product %s", record.get("id", "?"))
        return products

    def save(self, product: Product) -> Tuple[bool, str]:
        """
        Upsert a product.

        Args:
            product: Product to save; replaces any stored product with the same id

        Returns:
            Tuple of (success: bool, message: str)
        """
        records = self._read()
        payload = product.model_dump(mode="json", by_alias=True)

        for index, record in enumerate(records):
            if record.get("id") == product.id:
                records[index] = payload
                message = "Updated successfully!"
                break
        else:
            records.append(payload)
            message = "Saved successfully!"

        try:
            self._write(records)
        except OSError as e:
            logger.exception("Saving product %s failed", product.id)
            return False, f"Save failed: {e}"

        logger.info("Saved product %s (%s)", product.id, product.name)
        return True, message

    def load(self, product_id: str) -> Tuple[Optional[Product], str]:
        """
        Load a product by id.

        Returns:
            Tuple of (product or None, message: str)
        """
        for record in self._read():
            if record.get("id") == product_id:
                try:
                    return Product.model_validate(record), "Loaded successfully!"
                except ValidationError as e:
                    return None, f"Load failed: {e.error_count()} invalid field(s)."
        return None, "Product not found."

    def delete(self, product_id: str) -> Tuple[bool, str]:
        """
        Delete a product by id.

        Returns:
            Tuple of (success: bool, message: str)
        """
        records = self._read()
        remaining = [r for r in records if r.get("id") != product_id]
        if len(remaining) == len(records):
            return False, "Product not found."

        try:
            self._write(remaining)
        except OSError as e:
            logger.exception("Deleting product %s failed", product_id)
            return False, f"Delete failed: {e}"

        logger.info("Deleted product %s", product_id)
        return True, "Deleted successfully!"

    def get_summary_stats(self) -> Dict:
        """Get summary statistics about saved products."""
        products = self.load_all()

        if not products:
            return {
                "total_products": 0,
                "latest_product": None,
                "total_materials": 0,
                "total_processes": 0,
            }

        latest = max(products, key=lambda p: p.updated_at)
        return {
            "total_products": len(products),
            "latest_product": latest.name,
            "total_materials": sum(len(p.materials) for p in products),
            "total_processes": sum(len(p.processes) for p in products),
        }
