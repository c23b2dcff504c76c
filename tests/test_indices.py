import pytest

from wasmforge.arena import TombstoneArena
from wasmforge.indices import IndexOutOfBoundsError, IndicesToIds

KINDS = ["table", "type", "func", "global", "memory", "element", "data"]


def _ids(count):
    arena = TombstoneArena()
    return [arena.alloc(n) for n in range(count)]


@pytest.mark.parametrize("kind", KINDS)
def test_push_returns_sequential_indices(kind):
    indices = IndicesToIds()
    push = getattr(indices, f"push_{kind}")
    ids = _ids(3)
    assert [push(i) for i in ids] == list(range(3))


@pytest.mark.parametrize("kind", KINDS)
def test_get_returns_pushed_id(kind):
    indices = IndicesToIds()
    push = getattr(indices, f"push_{kind}")
    get = getattr(indices, f"get_{kind}")
    ids = _ids(3)
    for i in ids:
        push(i)
    assert [get(n) for n in range(3)] == ids


@pytest.mark.parametrize("kind", KINDS)
def test_get_out_of_bounds_raises(kind):
    indices = IndicesToIds()
    (only,) = _ids(1)
    assert getattr(indices, f"push_{kind}")(only) == 0
    assert getattr(indices, f"get_{kind}")(0) == only
    with pytest.raises(IndexOutOfBoundsError, match="index `1` is out of bounds"):
        getattr(indices, f"get_{kind}")(1)


def test_kinds_are_independent():
    indices = IndicesToIds()
    (table,) = _ids(1)
    indices.push_table(table)
    assert indices.get_table(0) == table
    with pytest.raises(IndexOutOfBoundsError):
        indices.get_func(0)


def test_error_message_names_section():
    indices = IndicesToIds()
    with pytest.raises(IndexOutOfBoundsError, match="out of bounds for tables"):
        indices.get_table(5)


def test_error_is_an_index_error():
    indices = IndicesToIds()
    with pytest.raises(IndexError):
        indices.get_global(0)


def test_locals_are_per_function():
    indices = IndicesToIds()
    f1, f2 = _ids(2)
    l1, l2, l3 = _ids(3)
    assert indices.push_local(f1, l1) == 0
    assert indices.push_local(f1, l2) == 1
    assert indices.push_local(f2, l3) == 0
    assert indices.get_local(f1, 1) == l2
    assert indices.get_local(f2, 0) == l3


def test_get_local_of_unknown_function_raises():
    indices = IndicesToIds()
    (func,) = _ids(1)
    with pytest.raises(IndexOutOfBoundsError, match="function index"):
        indices.get_local(func, 0)


def test_get_local_out_of_bounds_raises():
    indices = IndicesToIds()
    func, local = _ids(2)
    indices.push_local(func, local)
    with pytest.raises(IndexOutOfBoundsError, match="out of bounds for local"):
        indices.get_local(func, 1)