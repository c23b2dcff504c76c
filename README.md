# wasmforge

In-memory building blocks for the parts of a WebAssembly module: function
types, memories, tables, imports, locals and the `producers` custom section,
with the binary encoding of each part.

## Installation

```
pip install wasmforge
```

To run the test suite:

```
pip install "wasmforge[test]"
pytest
```

## Modules

- `wasmforge.arena` — `TombstoneArena`, an append-only store that hands out
  `Id` values. `delete` marks an item dead and calls its `on_delete` hook
  (see the `Tombstone` mixin) without shifting other ids. Looking up a dead
  or foreign id with `arena[id]` or `delete` raises `KeyError`; `get`
  returns `None`.
- `wasmforge.indices` — `IndicesToIds`, mapping positional indices of an
  input binary (tables, types, functions, globals, memories, elements, data,
  and per-function locals) to ids. Unknown indices raise
  `IndexOutOfBoundsError`, a subclass of `IndexError`.
- `wasmforge.types` — the `ValType` enumeration (`ValType.parse("i32")`,
  `encode()`), function `Type`s, and `ModuleTypes`, which de-duplicates
  equal types on `add` and returns the type-section order from
  `emitted_types()`. Also the helpers `encode_u32` (unsigned LEB128) and
  `encode_str` (length-prefixed UTF-8).
- `wasmforge.memories` — `Memory` and `ModuleMemories` (`add_local`,
  `add_import`, `local_memories`).
- `wasmforge.tables` — `Table` and `ModuleTables` (`add_local`,
  `add_import`, `local_tables`, `main_function_table`).
- `wasmforge.imports` — `Import`, `ImportKind` (built with `function`,
  `table`, `memory`, `global_`), `ImportKindTag`, and `ModuleImports`
  (`add`, `find`, `next_id`).
- `wasmforge.locals` — `Local` and `ModuleLocals`.
- `wasmforge.producers` — `ModuleProducers`, which adds or updates
  `language`, `processed-by` and `sdk` entries, and encodes and parses the
  section payload (`encode`, `ModuleProducers.parse`).

## Example

```python
from wasmforge.types import ModuleTypes, ValType
from wasmforge.tables import ModuleTables
from wasmforge.producers import ModuleProducers

types = ModuleTypes()
add_ty = types.add([ValType.I32, ValType.I32], [ValType.I32])
assert types.find([ValType.I32, ValType.I32], [ValType.I32]) == add_ty
print(types.get(add_ty).encode().hex())   # 60027f7f017f

tables = ModuleTables()
table = tables.add_local(1, None, ValType.FUNCREF)
assert tables.main_function_table() == table

producers = ModuleProducers()
producers.add_language("Rust", "1.50")
producers.add_processed_by("wasmforge", "0.19.0")
payload = producers.encode()
assert ModuleProducers.parse(payload).fields() == producers.fields()
```

`main_function_table` returns `None` when there is no `funcref` table and
raises `ValueError` when there is more than one. `ModuleProducers.parse`
raises `ValueError` on a malformed payload.

## What this package does not do

There is no module object tying the parts together: the package does not
read or write complete `.wasm` files, does not parse sections other than
`producers`, has no functions, globals, exports, data or element segments,
no instruction representation, and no pass that removes unused items.