"""Tables of a module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .arena import Id, Tombstone, TombstoneArena
from .types import ValType, encode_u32


@dataclass(eq=False)
class Table(Tombstone):
    """A table, either defined locally or imported."""

    id: Id
    initial: int
    maximum: Optional[int]
    element_ty: ValType
    import_id: Optional[Id] = None
    elem_segments: set[Id] = field(default_factory=set)

    def encode(self) -> bytes:
        """Return the binary encoding of this table's type."""
        out = self.element_ty.encode()
        out += bytes([1 if self.maximum is not None else 0])
        out += encode_u32(self.initial)
        if self.maximum is not None:
            out += encode_u32(self.maximum)
        return out


class ModuleTables:
    """The set of tables in a module."""

    def __init__(self) -> None:
        self._arena: TombstoneArena[Table] = TombstoneArena()

    def add_import(
        self, initial: int, maximum: Optional[int], element_ty: ValType, import_id: Id
    ) -> Id:
        """Add a table that is provided by an import."""
        return self._arena.alloc_with_id(
            lambda id: Table(id, initial, maximum, element_ty, import_id)
        )

    def add_local(self, initial: int, maximum: Optional[int], element_ty: ValType) -> Id:
        """Add a table defined by the module itself."""
        return self._arena.alloc_with_id(lambda id: Table(id, initial, maximum, element_ty))

    def get(self, id: Id) -> Table:
        """Return the table for ``id``."""
        return self._arena[id]

    def delete(self, id: Id) -> None:
        """Remove a table; references to it must be removed by the caller."""
        self._arena.delete(id)

    def __iter__(self) -> Iterator[Table]:
        return iter(self._arena)

    def __len__(self) -> int:
        return len(self._arena)

    def main_function_table(self) -> Optional[Id]:
        """Return the single funcref table, or ``None`` if there is none.

        Raises ``ValueError`` if there is more than one.
        """
        found = [table.id for table in self if table.element_ty is ValType.FUNCREF]
        if not found:
            return None
        if len(found) > 1:
            raise ValueError("module contains more than one function table")
        return found[0]

    def local_tables(self) -> list[Table]:
        """Return the tables of the table section (imports excluded)."""
        return [table for table in self if table.import_id is None]