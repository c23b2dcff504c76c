import pytest

from wasmforge.arena import Id
from wasmforge.tables import ModuleTables
from wasmforge.types import ValType, encode_u32


def test_add_local_and_get():
    tables = ModuleTables()
    id = tables.add_local(2, 10, ValType.FUNCREF)
    table = tables.get(id)
    assert table.id == id
    assert (table.initial, table.maximum, table.element_ty) == (2, 10, ValType.FUNCREF)
    assert table.import_id is None


def test_main_function_table_none():
    tables = ModuleTables()
    tables.add_local(1, None, ValType.EXTERNREF)
    assert tables.main_function_table() is None


def test_main_function_table_single():
    tables = ModuleTables()
    tables.add_local(1, None, ValType.EXTERNREF)
    id = tables.add_import(1, None, ValType.FUNCREF, Id(42, 0))
    assert tables.main_function_table() == id


def test_main_function_table_two_is_error():
    tables = ModuleTables()
    tables.add_local(1, None, ValType.FUNCREF)
    tables.add_local(1, None, ValType.FUNCREF)
    with pytest.raises(ValueError, match="more than one function table"):
        tables.main_function_table()


def test_main_function_table_after_delete():
    tables = ModuleTables()
    a = tables.add_local(1, None, ValType.FUNCREF)
    b = tables.add_local(1, None, ValType.FUNCREF)
    tables.delete(a)
    assert tables.main_function_table() == b
    assert len(tables) == 1


def test_encode_without_maximum():
    tables = ModuleTables()
    table = tables.get(tables.add_local(5, None, ValType.FUNCREF))
    assert table.encode() == ValType.FUNCREF.encode() + bytes([0]) + encode_u32(5)


def test_encode_with_maximum():
    tables = ModuleTables()
    table = tables.get(tables.add_local(5, 200, ValType.EXTERNREF))
    expected = ValType.EXTERNREF.encode() + bytes([1]) + encode_u32(5) + encode_u32(200)
    assert table.encode() == expected


def test_local_tables_excludes_imports():
    tables = ModuleTables()
    tables.add_import(1, None, ValType.FUNCREF, Id(42, 0))
    local = tables.add_local(1, None, ValType.EXTERNREF)
    assert [t.id for t in tables.local_tables()] == [local]
    assert len(tables) == 2


def test_get_deleted_raises():
    tables = ModuleTables()
    id = tables.add_local(1, None, ValType.FUNCREF)
    tables.delete(id)
    with pytest.raises(KeyError):
        tables.get(id)