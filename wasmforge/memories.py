"""Linear memories of a module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .arena import Id, Tombstone, TombstoneArena
from .types import encode_u32


@dataclass(eq=False)
class Memory(Tombstone):
    """A memory, either defined locally or imported."""

    id: Id
    shared: bool
    initial: int
    maximum: Optional[int] = None
    import_id: Optional[Id] = None
    data_segments: set[Id] = field(default_factory=set)

    def on_delete(self) -> None:
        self.data_segments = set()

    def encode(self) -> bytes:
        """Return the binary encoding of this memory's limits."""
        if self.maximum is not None:
            flag = 0x03 if self.shared else 0x01
            return bytes([flag]) + encode_u32(self.initial) + encode_u32(self.maximum)
        return bytes([0x00]) + encode_u32(self.initial)


class ModuleMemories:
    """The set of memories in a module."""

    def __init__(self) -> None:
        self._arena: TombstoneArena[Memory] = TombstoneArena()

    def add_import(
        self, shared: bool, initial: int, maximum: Optional[int], import_id: Id
    ) -> Id:
        """Add a memory that is provided by an import."""
        return self._arena.alloc_with_id(
            lambda id: Memory(id, shared, initial, maximum, import_id)
        )

    def add_local(self, shared: bool, initial: int, maximum: Optional[int]) -> Id:
        """Add a memory defined by the module itself."""
        return self._arena.alloc_with_id(lambda id: Memory(id, shared, initial, maximum))

    def get(self, id: Id) -> Memory:
        """Return the memory for ``id``."""
        return self._arena[id]

    def delete(self, id: Id) -> None:
        """Remove a memory; references to it must be removed by the caller."""
        self._arena.delete(id)

    def __iter__(self) -> Iterator[Memory]:
        return iter(self._arena)

    def __len__(self) -> int:
        return len(self._arena)

    def local_memories(self) -> list[Memory]:
        """Return the memories of the memory section (imports excluded)."""
        return [memory for memory in self if memory.import_id is None]