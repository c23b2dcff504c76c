"""Locals used by the functions of a module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .arena import Id, TombstoneArena
from .types import ValType


@dataclass
class Local:
    """A function local with its value type and an optional debug name."""

    id: Id
    ty: ValType
    name: Optional[str] = None


class ModuleLocals:
    """The locals of every function in a module."""

    def __init__(self) -> None:
        self._arena: TombstoneArena[Local] = TombstoneArena()

    def add(self, ty: ValType) -> Id:
        """Create a new local of the given type and return its id."""
        return self._arena.alloc_with_id(lambda id: Local(id, ty))

    def get(self, id: Id) -> Local:
        """Return the local for ``id``."""
        return self._arena[id]

    def __iter__(self) -> Iterator[Local]:
        return iter(self._arena)

    def __len__(self) -> int:
        return len(self._arena)