"""Append-only arenas whose items can be marked as deleted."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

_arena_counter = itertools.count()


@dataclass(frozen=True, order=True)
class Id:
    """Identifier of an item within one particular arena."""

    arena: int
    index: int

    def __repr__(self) -> str:
        return f"Id({self.arena}:{self.index})"


class Tombstone:
    """Mixin for items that release resources when deleted from an arena.

    The item must stay in a valid state after ``on_delete``; this is a chance
    to drop held references, not to turn the item into a placeholder.
    Subclasses name the attributes to empty in ``_released`` or override
    ``on_delete``.
    """

    _released: ClassVar[tuple[str, ...]] = ()

    def on_delete(self) -> None:
        """Reset every attribute named in ``_released`` to an empty value."""
        for name in self._released:
            setattr(self, name, type(getattr(self, name))())


class TombstoneArena(Generic[T]):
    """An arena that allocates items under ids and keeps a set of dead ids."""

    def __init__(self) -> None:
        self._arena = next(_arena_counter)
        self._items: list[T] = []
        self._dead: set[int] = set()

    def alloc(self, val: T) -> Id:
        """Store ``val`` and return its new id."""
        self._items.append(val)
        return Id(self._arena, len(self._items) - 1)

    def alloc_with_id(self, f: Callable[[Id], T]) -> Id:
        """Build an item from the id it is about to receive, and store it."""
        return self.alloc(f(self.next_id()))

    def get(self, id: Id) -> Optional[T]:
        """Return the live item for ``id``, or ``None``."""
        if id in self:
            return self._items[id.index]
        return None

    def next_id(self) -> Id:
        """Return the id the next allocation will receive."""
        return Id(self._arena, len(self._items))

    def delete(self, id: Id) -> None:
        """Mark the item as deleted and let it release its resources."""
        if id not in self:
            raise KeyError(id)
        self._dead.add(id.index)
        on_delete = getattr(self._items[id.index], "on_delete", None)
        if callable(on_delete):
            on_delete()

    def items(self) -> Iterator[tuple[Id, T]]:
        """Yield ``(id, item)`` for every live item in allocation order."""
        for index, val in enumerate(self._items):
            if index not in self._dead:
                yield Id(self._arena, index), val

    def __len__(self) -> int:
        return len(self._items) - len(self._dead)

    def __contains__(self, id: object) -> bool:
        return (
            isinstance(id, Id)
            and id.arena == self._arena
            and 0 <= id.index < len(self._items)
            and id.index not in self._dead
        )

    def __iter__(self) -> Iterator[T]:
        for _, val in self.items():
            yield val

    def __getitem__(self, id: Id) -> T:
        if id not in self:
            raise KeyError(id)
        return self._items[id.index]