"""Mapping from indices of an input binary to arena ids."""

from __future__ import annotations

from .arena import Id


class IndexOutOfBoundsError(IndexError):
    """Raised when an index was not present in the parsed binary."""


class IndicesToIds:
    """Maps old indices in an input binary to the ids they were given.

    Items created after parsing have no old index.
    """

    def __init__(self) -> None:
        self._tables: list[Id] = []
        self._types: list[Id] = []
        self._funcs: list[Id] = []
        self._globals: list[Id] = []
        self._memories: list[Id] = []
        self._elements: list[Id] = []
        self._data: list[Id] = []
        self._locals: dict[Id, list[Id]] = {}

    @staticmethod
    def _push(items: list[Id], id: Id) -> int:
        items.append(id)
        return len(items) - 1

    @staticmethod
    def _get(items: list[Id], index: int, what: str) -> Id:
        if 0 <= index < len(items):
            return items[index]
        raise IndexOutOfBoundsError(f"index `{index}` is out of bounds for {what}")

    def push_table(self, id: Id) -> int:
        """Map the next table index to ``id`` and return that index."""
        return self._push(self._tables, id)

    def get_table(self, index: int) -> Id:
        """Return the table id for an old index."""
        return self._get(self._tables, index, "tables")

    def push_type(self, id: Id) -> int:
        """Map the next type index to ``id`` and return that index."""
        return self._push(self._types, id)

    def get_type(self, index: int) -> Id:
        """Return the type id for an old index."""
        return self._get(self._types, index, "types")

    def push_func(self, id: Id) -> int:
        """Map the next function index to ``id`` and return that index."""
        return self._push(self._funcs, id)

    def get_func(self, index: int) -> Id:
        """Return the function id for an old index."""
        return self._get(self._funcs, index, "funcs")

    def push_global(self, id: Id) -> int:
        """Map the next global index to ``id`` and return that index."""
        return self._push(self._globals, id)

    def get_global(self, index: int) -> Id:
        """Return the global id for an old index."""
        return self._get(self._globals, index, "globals")

    def push_memory(self, id: Id) -> int:
        """Map the next memory index to ``id`` and return that index."""
        return self._push(self._memories, id)

    def get_memory(self, index: int) -> Id:
        """Return the memory id for an old index."""
        return self._get(self._memories, index, "memories")

    def push_element(self, id: Id) -> int:
        """Map the next element index to ``id`` and return that index."""
        return self._push(self._elements, id)

    def get_element(self, index: int) -> Id:
        """Return the element id for an old index."""
        return self._get(self._elements, index, "elements")

    def push_data(self, id: Id) -> int:
        """Map the next data index to ``id`` and return that index."""
        return self._push(self._data, id)

    def get_data(self, index: int) -> Id:
        """Return the data id for an old index."""
        return self._get(self._data, index, "data")

    def push_local(self, function: Id, id: Id) -> int:
        """Map the next local index of ``function`` to ``id``."""
        return self._push(self._locals.setdefault(function, []), id)

    def get_local(self, function: Id, index: int) -> Id:
        """Return the local id for an old index within ``function``."""
        locals_ = self._locals.get(function)
        if locals_ is None:
            raise IndexOutOfBoundsError(
                f"function index `{function.index}` is out of bounds for local"
            )
        if 0 <= index < len(locals_):
            return locals_[index]
        raise IndexOutOfBoundsError(
            f"index `{index}` in function `{function.index}` is out of bounds for local"
        )