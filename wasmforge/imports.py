"""Imports of a module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from .arena import Id, Tombstone, TombstoneArena


class ImportKindTag(Enum):
    """The kind of an imported item, valued by its binary tag."""

    FUNCTION = 0x00
    TABLE = 0x01
    MEMORY = 0x02
    GLOBAL = 0x03


@dataclass(frozen=True)
class ImportKind:
    """An imported item: its kind and the id of the item it provides."""

    tag: ImportKindTag
    id: Id

    @staticmethod
    def function(id: Id) -> "ImportKind":
        """An imported function."""
        return ImportKind(ImportKindTag.FUNCTION, id)

    @staticmethod
    def table(id: Id) -> "ImportKind":
        """An imported table."""
        return ImportKind(ImportKindTag.TABLE, id)

    @staticmethod
    def memory(id: Id) -> "ImportKind":
        """An imported memory."""
        return ImportKind(ImportKindTag.MEMORY, id)

    @staticmethod
    def global_(id: Id) -> "ImportKind":
        """An imported global."""
        return ImportKind(ImportKindTag.GLOBAL, id)


@dataclass
class Import(Tombstone):
    """A named item imported into the module."""

    id: Id
    module: str
    name: str
    kind: ImportKind

    def on_delete(self) -> None:
        self.module = ""
        self.name = ""


class ModuleImports:
    """The set of imports in a module."""

    def __init__(self) -> None:
        self._arena: TombstoneArena[Import] = TombstoneArena()

    def get(self, id: Id) -> Import:
        """Return the import for ``id``."""
        return self._arena[id]

    def delete(self, id: Id) -> None:
        """Remove an import; references to it must be removed by the caller."""
        self._arena.delete(id)

    def __iter__(self) -> Iterator[Import]:
        return iter(self._arena)

    def __len__(self) -> int:
        return len(self._arena)

    def next_id(self) -> Id:
        """Return the id the next added import will receive."""
        return self._arena.next_id()

    def add(self, module: str, name: str, kind: ImportKind) -> Id:
        """Add a new import and return its id."""
        return self._arena.alloc_with_id(lambda id: Import(id, module, name, kind))

    def find(self, module: str, name: str) -> Optional[Id]:
        """Return the id of the import with this module and name, if any."""
        return next(
            (imp.id for imp in self if imp.name == name and imp.module == module),
            None,
        )