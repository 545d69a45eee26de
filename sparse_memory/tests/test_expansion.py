import random

from sparse_memory import MemoryStore

ADDR = (0, 0, 0)


def test_documented_growth_scenario():
    store = MemoryStore()
    store.set_matrix(ADDR, [[1, 2, 3], [4, 5, 6]])
    assert store.get_all_data(ADDR) == [[1, 2, 3], [4, 5, 6]]
    store.set(ADDR, 5, 5, 42)
    data = store.get_all_data(ADDR)
    assert store.get_dimensions(ADDR) == (6, 6)
    assert data[5][5] == 42
    assert store.get(ADDR, 0, 0) == 1
    assert data[0] == [1, 2, 3, 0, 0, 0]
    assert data[1] == [4, 5, 6, 0, 0, 0]
    assert all(v == 0 for row in data[2:5] for v in row)


def test_random_writes_keep_grid_rectangular_and_monotonic():
    rng = random.Random(1234)
    store = MemoryStore()
    written = {}
    prev_rows, prev_cols = 0, 0
    for _ in range(200):
        r, c = rng.randrange(12), rng.randrange(12)
        v = rng.randrange(1, 100)
        store.set(ADDR, r, c, v)
        written[(r, c)] = v
        data = store.get_all_data(ADDR)
        assert len({len(row) for row in data}) == 1
        rows, cols = store.get_dimensions(ADDR)
        assert rows >= prev_rows and cols >= prev_cols
        prev_rows, prev_cols = rows, cols
    for (r, c), v in written.items():
        assert store.get(ADDR, r, c) == v


def test_value_preserved_when_growing_columns_only():
    store = MemoryStore()
    store.set(ADDR, 2, 0, 7)
    store.set(ADDR, 0, 4, 9)
    assert store.get(ADDR, 2, 0) == 7
    assert store.get_dimensions(ADDR) == (3, 5)


def test_value_preserved_when_growing_rows_only():
    store = MemoryStore()
    store.set(ADDR, 0, 3, 7)
    store.set(ADDR, 4, 1, 9)
    assert store.get(ADDR, 0, 3) == 7
    assert store.get_dimensions(ADDR) == (5, 4)
    assert store.get_all_data(ADDR)[4] == [0, 9, 0, 0]


def test_repeated_write_is_idempotent():
    store = MemoryStore()
    store.set_matrix(ADDR, [[1, 2], [3, 4]])
    store.set(ADDR, 3, 3, 5)
    before = store.get_all_data(ADDR)
    store.set(ADDR, 3, 3, 5)
    assert store.get_all_data(ADDR) == before


def test_growth_after_empty_matrix():
    store = MemoryStore()
    store.set_matrix(ADDR, [])
    store.set(ADDR, 1, 2, 3)
    assert store.get_all_data(ADDR) == [[0, 0, 0], [0, 0, 3]]
