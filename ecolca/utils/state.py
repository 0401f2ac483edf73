"""Caller-owned application state for one dashboard session."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..models.product import Material, ProcessStep, Product
from ..models.results import LCAResults
from .calculations import LCACalculator
from .product_editor import ProductEditor
from .product_store import ProductStore

logger = logging.getLogger(__name__)


class NoProductSelectedError(RuntimeError):
    """Raised when an operation needs a current product and none is set."""


class LCAState:
    """Current product, saved products and the latest calculation.

    One instance per session; nothing here is shared or global. Mutations
    only change in-memory state; saving to a store is a separate, explicit
    call.
    """

    def __init__(self, products: Optional[List[Product]] = None):
        self.current_product: Optional[Product] = None
        self.products: List[Product] = list(products or [])
        self.calculations: Optional[LCAResults] = None
        self.is_calculating = False
        self.last_calculated: Optional[datetime] = None

    def _require_product(self, action: str) -> Product:
        if self.current_product is None:
            logger.warning("Cannot %s: no product selected", action)
            raise NoProductSelectedError(f"No product selected to {action}")
        return self.current_product

    def set_current_product(self, product: Product):
        """Make ``product`` the one being edited."""
        self.current_product = product

    # Material and process edits

    def add_material(self, material: Material) -> Product:
        product = self._require_product("add a material")
        self.current_product = ProductEditor.add_material(product, material)
        logger.debug("Added material %s to %s", material.id, product.id)
        return self.current_product

    def update_material(self, material_id: str, changes: Dict[str, Any]) -> Product:
        product = self._require_product("update a material")
        self.current_product = ProductEditor.update_material(product, material_id, changes)
        logger.debug("Updated material %s on %s", material_id, product.id)
        return self.current_product

    def remove_material(self, material_id: str) -> Product:
        product = self._require_product("remove a material")
        self.current_product = ProductEditor.remove_material(product, material_id)
        logger.debug("Removed material %s from %s", material_id, product.id)
        return self.current_product

    def add_process(self, process: ProcessStep) -> Product:
        product = self._require_product("add a process")
        self.current_product = ProductEditor.add_process(product, process)
        logger.debug("Added process %s to %s", process.id, product.id)
        return self.current_product

    def update_process(self, process_id: str, changes: Dict[str, Any]) -> Product:
        product = self._require_product("update a process")
        self.current_product = ProductEditor.update_process(product, process_id, changes)
        logger.debug("Updated process %s on %s", process_id, product.id)
        return self.current_product

    def remove_process(self, process_id: str) -> Product:
        product = self._require_product("remove a process")
        self.current_product = ProductEditor.remove_process(product, process_id)
        logger.debug("Removed process %s from %s", process_id, product.id)
        return self.current_product

    # Calculation

    def calculate(self, product: Optional[Product] = None) -> LCAResults:
        """Run the engine on ``product`` (or the current product).

        Raises:
            NoProductSelectedError: If no product is given and none is current.
        """
        target = product if product is not None else self._require_product("calculate")
        self.is_calculating = True
        try:
            results = LCACalculator.calculate(target)
        finally:
            self.is_calculating = False
        self.calculations = results
        self.last_calculated = datetime.now()
        logger.info("LCA calculated for %s: %.2f kg CO2e", target.id, results.total_carbon_footprint)
        return results

    def reset_calculation(self):
        """Forget the latest results."""
        self.calculations = None
        self.is_calculating = False
        self.last_calculated = None

    # Saved products

    def load_products(self, store: ProductStore) -> List[Product]:
        """Replace the saved-product list with the store's contents."""
        self.products = store.load_all()
        return self.products

    def save_product(self, store: ProductStore) -> tuple:
        """Upsert the current product into the store, then into the saved list.

        The saved list is left untouched when the store write fails.
        """
        product = self._require_product("save")
        success, message = store.save(product)
        if not success:
            return success, message
        for index, saved in enumerate(self.products):
            if saved.id == product.id:
                self.products[index] = product
                break
        else:
            self.products.append(product)
        return success, message

    def load_product(self, product_id: str) -> Optional[Product]:
        """Select a saved product by id and clear any results.

        An unknown id leaves no current product selected.
        """
        self.current_product = next((p for p in self.products if p.id == product_id), None)
        self.calculations = None
        if self.current_product is None:
            logger.warning("Saved product %s not found", product_id)
        return self.current_product

    def delete_product(self, product_id: str, store: ProductStore) -> tuple:
        """Remove a saved product from the list and the store."""
        self.products = [p for p in self.products if p.id != product_id]
        if self.current_product is not None and self.current_product.id == product_id:
            self.current_product = None
            self.calculations = None
        return store.delete(product_id)
