"""Tests for immutable product collection edits."""

import pytest
from pydantic import ValidationError

from ecolca.utils.product_editor import ProductEditor
from tests.factories import make_material, make_process, make_product


@pytest.fixture
def product():
    return make_product(
        materials=[make_material(id="m1"), make_material(id="m2", type="steel", quantity=20)],
        processes=[make_process(id="p1")],
    )


class TestMaterials:

    def test_add_appends_and_leaves_input_untouched(self, product):
        added = ProductEditor.add_material(product, make_material(id="m3", type="glass"))
        assert [m.id for m in added.materials] == ["m1", "m2", "m3"]
        assert [m.id for m in product.materials] == ["m1", "m2"]
        assert added.updated_at >= product.updated_at

    def test_update_merges_changes(self, product):
        updated = ProductEditor.update_material(product, "m2", {"quantity": 35.5, "name": "Bolts"})
        m2 = updated.materials[1]
        assert m2.quantity == 35.5
        assert m2.name == "Bolts"
        assert m2.type == "steel"
        assert product.materials[1].quantity == 20

    def test_update_accepts_camel_case_keys(self, product):
        updated = ProductEditor.update_material(product, "m1", {"isRecycled": True})
        assert updated.materials[0].is_recycled is True

    def test_recycled_toggle_rederives_intensities(self, product):
        updated = ProductEditor.update_material(product, "m1", {"is_recycled": True})
        assert updated.materials[0].carbon_intensity == 2.1
        assert updated.materials[0].water_intensity == 450

    def test_explicit_intensity_survives_type_change(self, product):
        updated = ProductEditor.update_material(product, "m1", {"type": "wood", "carbon_intensity": 0.5})
        assert updated.materials[0].carbon_intensity == 0.5

    def test_update_unknown_id_changes_nothing(self, product):
        updated = ProductEditor.update_material(product, "nope", {"quantity": 1})
        assert [m.quantity for m in updated.materials] == [m.quantity for m in product.materials]

    def test_update_rejects_invalid_values(self, product):
        with pytest.raises(ValidationError):
            ProductEditor.update_material(product, "m1", {"recyclability": 1.5})

    def test_update_rejects_unknown_field(self, product):
        with pytest.raises(KeyError):
            ProductEditor.update_material(product, "m1", {"colour": "red"})

    def test_remove(self, product):
        removed = ProductEditor.remove_material(product, "m1")
        assert [m.id for m in removed.materials] == ["m2"]
        assert len(product.materials) == 2

    def test_remove_unknown_id_is_a_no_op(self, product):
        assert len(ProductEditor.remove_material(product, "nope").materials) == 2


class TestProcesses:

    def test_add(self, product):
        added = ProductEditor.add_process(
            product, make_process(id="p2", type="transport", distance=100, transport_mode="ship")
        )
        assert [p.id for p in added.processes] == ["p1", "p2"]
        assert len(product.processes) == 1

    def test_update(self, product):
        updated = ProductEditor.update_process(product, "p1", {"energyType": "renewable", "emissions": 2})
        assert updated.processes[0].energy_type == "renewable"
        assert updated.processes[0].emissions == 2

    def test_update_revalidates_transport_leg(self, product):
        with pytest.raises(ValidationError):
            ProductEditor.update_process(product, "p1", {"type": "transport", "distance": 50})

    def test_remove(self, product):
        assert ProductEditor.remove_process(product, "p1").processes == []

    def test_other_fields_preserved(self, product):
        updated = ProductEditor.remove_process(product, "p1")
        assert updated.id == product.id
        assert updated.materials == product.materials
        assert updated.created_at == product.created_at
