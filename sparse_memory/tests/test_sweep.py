import pytest

from sparse_memory import Address, InvalidArgumentError, MemoryStore, constant, identity
from sparse_memory.src.utils import config_loader


def _two_node_store():
    store = MemoryStore()
    store.set_matrix((0, 0, 0), [[1, 2, 3], [4, 5, 6]])
    store.set((0, 1, 2), 5, 3, 42)
    return store


def test_sweep_constant_one():
    store = _two_node_store()
    store.sweep(constant(1))
    assert store.get_all_data((0, 0, 0)) == [[1, 1, 1], [1, 1, 1]]
    assert store.get_dimensions((0, 0, 0)) == (2, 3)
    assert store.get_dimensions((0, 1, 2)) == (6, 4)
    assert all(v == 1 for row in store.get_all_data((0, 1, 2)) for v in row)


def test_update_is_placeholder_constant():
    store = _two_node_store()
    store.update()
    for addr in store.addresses():
        assert all(v == 1 for row in store.get_all_data(addr) for v in row)


def test_update_uses_configured_value():
    store = _two_node_store()
    config_loader.set_placeholder_update_value(3)
    try:
        store.update()
    finally:
        config_loader.set_placeholder_update_value(1)
    assert store.get_all_data((0, 0, 0)) == [[3, 3, 3], [3, 3, 3]]


def test_sweep_visit_order():
    store = MemoryStore()
    store.set_matrix((1, 0, 0), [[0, 0], [0, 0]])
    store.set_matrix((0, 0, 0), [[0]])
    visited = []

    def record(address, row, col, value):
        visited.append((address, row, col))
        return value

    store.sweep(record)
    assert visited == [
        (Address(1, 0, 0), 0, 0),
        (Address(1, 0, 0), 0, 1),
        (Address(1, 0, 0), 1, 0),
        (Address(1, 0, 0), 1, 1),
        (Address(0, 0, 0), 0, 0),
    ]


def test_sweep_receives_cell_context():
    store = MemoryStore()
    store.set_matrix((2, 0, 0), [[1, 2], [3, 4]])
    store.sweep(lambda address, row, col, value: value * 10 + address.x)
    assert store.get_all_data((2, 0, 0)) == [[12, 22], [32, 42]]


def test_sweep_identity_keeps_values():
    store = _two_node_store()
    before = [store.get_all_data(a) for a in store.addresses()]
    store.sweep(identity)
    assert [store.get_all_data(a) for a in store.addresses()] == before


def test_failing_transform_leaves_store_untouched():
    store = _two_node_store()
    before = [store.get_all_data(a) for a in store.addresses()]

    def boom(address, row, col, value):
        if address == Address(0, 1, 2):
            raise RuntimeError("gate failure")
        return 0

    with pytest.raises(RuntimeError):
        store.sweep(boom)
    assert [store.get_all_data(a) for a in store.addresses()] == before


def test_non_numeric_transform_result_rejected():
    store = _two_node_store()
    with pytest.raises(InvalidArgumentError):
        store.sweep(constant("on"))
    assert store.get((0, 0, 0), 0, 0) == 1


def test_sweep_requires_callable():
    store = MemoryStore()
    with pytest.raises(InvalidArgumentError):
        store.sweep(1)


def test_sweep_on_empty_store():
    store = MemoryStore()
    store.sweep(constant(1))
    assert len(store) == 0
