"""Tests for the session state container."""

import pytest

from ecolca.utils.product_store import ProductStore
from ecolca.utils.state import LCAState, NoProductSelectedError
from tests.factories import make_material, make_process, make_product


@pytest.fixture
def state(aluminum_product):
    s = LCAState()
    s.set_current_product(aluminum_product)
    return s


@pytest.fixture
def store(tmp_path):
    return ProductStore(tmp_path / "products.json")


class TestWithoutProduct:
    """Operations that need a current product."""

    @pytest.mark.parametrize("call", [
        lambda s: s.add_material(make_material()),
        lambda s: s.update_material("m1", {"quantity": 1}),
        lambda s: s.remove_material("m1"),
        lambda s: s.add_process(make_process()),
        lambda s: s.update_process("p1", {"emissions": 1}),
        lambda s: s.remove_process("p1"),
        lambda s: s.calculate(),
    ])
    def test_raises(self, call):
        s = LCAState()
        with pytest.raises(NoProductSelectedError):
            call(s)
        assert s.current_product is None
        assert s.calculations is None

    def test_save_raises(self, store):
        with pytest.raises(NoProductSelectedError):
            LCAState().save_product(store)
        assert store.load_all() == []

    def test_calculate_explicit_product(self, aluminum_product):
        s = LCAState()
        R = s.calculate(aluminum_product)
        assert R.total_carbon_footprint == pytest.approx(1070)
        assert s.calculations is R


class TestEditing:

    def test_add_material_replaces_current_product(self, state, aluminum_product):
        returned = state.add_material(make_material(id="m2", type="plastic"))
        assert returned is state.current_product
        assert [m.id for m in state.current_product.materials] == ["m1", "m2"]
        assert len(aluminum_product.materials) == 1

    def test_update_and_remove(self, state):
        state.update_material("m1", {"is_recycled": True})
        assert state.current_product.materials[0].is_recycled
        state.remove_material("m1")
        assert state.current_product.materials == []

    def test_process_edits(self, state):
        state.add_process(make_process(id="p2", type="use", energy_consumption=10))
        state.update_process("p2", {"energy_consumption": 20})
        assert state.current_product.processes[1].energy_consumption == 20
        state.remove_process("p1")
        assert [p.id for p in state.current_product.processes] == ["p2"]

    def test_edits_do_not_recalculate(self, state):
        state.calculate()
        before = state.calculations
        state.update_material("m1", {"is_recycled": True})
        assert state.calculations is before


class TestCalculation:

    def test_calculate_sets_results(self, state):
        R = state.calculate()
        assert state.calculations is R
        assert state.last_calculated is not None
        assert state.is_calculating is False
        assert R.total_carbon_footprint == pytest.approx(1070)

    def test_reset(self, state):
        state.calculate()
        state.reset_calculation()
        assert state.calculations is None
        assert state.last_calculated is None
        assert state.current_product is not None


class TestSavedProducts:

    def test_save_adds_then_updates(self, state, store):
        assert state.save_product(store) == (True, "Saved successfully!")
        state.update_material("m1", {"quantity": 5})
        assert state.save_product(store) == (True, "Updated successfully!")
        assert len(state.products) == 1
        assert state.products[0].materials[0].quantity == 5
        assert store.load_all()[0].materials[0].quantity == 5

    def test_failed_save_leaves_saved_list_unchanged(self, state, tmp_path):
        blocked = ProductStore(tmp_path / "blocked.json")
        blocked.path.mkdir()
        success, message = state.save_product(blocked)
        assert success is False
        assert message.startswith("Save failed")
        assert state.products == []

    def test_failed_update_keeps_previous_saved_version(self, state, store, tmp_path):
        state.save_product(store)
        saved = state.products[0]
        state.update_material("m1", {"quantity": 5})
        blocked = ProductStore(tmp_path / "blocked.json")
        blocked.path.mkdir()
        assert state.save_product(blocked)[0] is False
        assert state.products == [saved]

    def test_load_products_reads_store(self, store):
        store.save(make_product(id="a", name="A"))
        store.save(make_product(id="b", name="B"))
        s = LCAState()
        assert [p.id for p in s.load_products(store)] == ["a", "b"]
        assert [p.id for p in s.products] == ["a", "b"]

    def test_load_product_clears_results(self, state, store):
        state.save_product(store)
        state.calculate()
        loaded = state.load_product(state.current_product.id)
        assert loaded is state.current_product
        assert state.calculations is None

    def test_load_unknown_product_clears_selection(self, state):
        state.calculate()
        assert state.load_product("ghost") is None
        assert state.current_product is None
        assert state.calculations is None

    def test_delete_current_product(self, state, store):
        state.save_product(store)
        state.calculate()
        product_id = state.current_product.id
        assert state.delete_product(product_id, store) == (True, "Deleted successfully!")
        assert state.products == []
        assert state.current_product is None
        assert state.calculations is None
        assert store.load_all() == []

    def test_delete_other_product_keeps_selection(self, state, store):
        other = make_product(id="other", name="Other")
        state.products.append(other)
        store.save(other)
        state.delete_product("other", store)
        assert state.current_product is not None

    def test_initial_products(self):
        s = LCAState(products=[make_product(id="x")])
        assert [p.id for p in s.products] == ["x"]
        assert s.current_product is None
