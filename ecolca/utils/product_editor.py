"""Add/update/remove operations on a product's materials and processes."""

from datetime import datetime
from typing import Any, Dict

from ..models.product import Material, ProcessStep, Product

INTENSITY_FIELDS = ("carbon_intensity", "energy_intensity", "water_intensity")


class ProductEditor:
    """Collection operations on a Product.

    Every operation returns a new Product with a fresh ``updated_at``; the
    input product is never modified in place.
    """

    @staticmethod
    def _touch(product: Product, **changes) -> Product:
        return product.model_copy(update={**changes, "updated_at": datetime.now()})

    @staticmethod
    def _merge(item, changes: Dict[str, Any]):
        """Partial merge that re-validates the result (field or alias names)."""
        model = type(item)
        data = item.model_dump()
        updates = {
            key if key in model.model_fields else _field_for_alias(model, key): value
            for key, value in changes.items()
        }
        # A new type or recycled flag re-derives intensities unless given explicitly
        if model is Material and {"type", "is_recycled"} & set(updates):
            for field in INTENSITY_FIELDS:
                if field not in updates:
                    data[field] = None
        data.update(updates)
        return model.model_validate(data)

    @staticmethod
    def add_material(product: Product, material: Material) -> Product:
        """Append a material."""
        return ProductEditor._touch(product, materials=[*product.materials, material])

    @staticmethod
    def update_material(product: Product, material_id: str, changes: Dict[str, Any]) -> Product:
        """Merge ``changes`` into the material with the given id."""
        materials = [
            ProductEditor._merge(m, changes) if m.id == material_id else m
            for m in product.materials
        ]
        return ProductEditor._touch(product, materials=materials)

    @staticmethod
    def remove_material(product: Product, material_id: str) -> Product:
        """Drop the material with the given id."""
        materials = [m for m in product.materials if m.id != material_id]
        return ProductEditor._touch(product, materials=materials)

    @staticmethod
    def add_process(product: Product, process: ProcessStep) -> Product:
        """Append a process step."""
        return ProductEditor._touch(product, processes=[*product.processes, process])

    @staticmethod
    def update_process(product: Product, process_id: str, changes: Dict[str, Any]) -> Product:
        """Merge ``changes`` into the process step with the given id."""
        processes = [
            ProductEditor._merge(p, changes) if p.id == process_id else p
            for p in product.processes
        ]
        return ProductEditor._touch(product, processes=processes)

    @staticmethod
    def remove_process(product: Product, process_id: str) -> Product:
        """Drop the process step with the given id."""
        processes = [p for p in product.processes if p.id != process_id]
        return ProductEditor._touch(product, processes=processes)


def _field_for_alias(model, alias: str) -> str:
    for name, info in model.model_fields.items():
        if info.alias == alias:
            return name
    raise KeyError(f"{model.__name__} has no field '{alias}'")
