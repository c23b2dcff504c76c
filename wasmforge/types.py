"""Value types, function types and the de-duplicated type set of a module."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Iterable, Iterator, Optional

from .arena import Id, Tombstone, TombstoneArena

_FUNC_TYPE_FORM = 0x60


def encode_u32(value: int) -> bytes:
    """Encode an unsigned 32-bit integer as LEB128."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"{value} does not fit in an unsigned 32-bit integer")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def encode_str(text: str) -> bytes:
    """Encode a string as its UTF-8 length followed by its bytes."""
    data = text.encode("utf-8")
    return encode_u32(len(data)) + data


def _encode_list(items: Iterable["ValType"]) -> bytes:
    items = tuple(items)
    return encode_u32(len(items)) + b"".join(item.encode() for item in items)


class ValType(Enum):
    """A value type."""

    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"
    V128 = "v128"
    EXTERNREF = "externref"
    FUNCREF = "funcref"

    @staticmethod
    def parse(name: str) -> "ValType":
        """Return the value type with the given text name."""
        try:
            return ValType(name)
        except ValueError:
            raise ValueError("not a value type") from None

    def encode(self) -> bytes:
        """Return the binary encoding of this value type."""
        return bytes([_VALTYPE_BYTES[self]])

    def __str__(self) -> str:
        return self.value

    def _rank(self) -> int:
        return _VALTYPE_ORDER[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ValType):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ValType):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ValType):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ValType):
            return NotImplemented
        return self._rank() >= other._rank()


_VALTYPE_ORDER = {vt: rank for rank, vt in enumerate(ValType)}

_VALTYPE_BYTES = {
    ValType.I32: 0x7F,
    ValType.I64: 0x7E,
    ValType.F32: 0x7D,
    ValType.F64: 0x7C,
    ValType.V128: 0x7B,
    ValType.FUNCREF: 0x70,
    ValType.EXTERNREF: 0x6F,
}


@total_ordering
class Type(Tombstone):
    """A function type.

    Equality and hashing ignore the id and the name; ordering compares
    parameters and then results.
    """

    def __init__(
        self,
        id: Id,
        params: Iterable[ValType],
        results: Iterable[ValType],
        is_for_function_entry: bool = False,
        name: Optional[str] = None,
    ) -> None:
        self.id = id
        self.params: tuple[ValType, ...] = tuple(params)
        self.results: tuple[ValType, ...] = tuple(results)
        # Entry-block types of multi-value functions are internal only.
        self.is_for_function_entry = is_for_function_entry
        self.name = name

    @classmethod
    def for_function_entry(cls, id: Id, results: Iterable[ValType]) -> "Type":
        """Build a type for a function entry block."""
        return cls(id, (), results, is_for_function_entry=True)

    def _key(self) -> tuple:
        return (self.params, self.results, self.is_for_function_entry)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Type):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Type):
            return NotImplemented
        return (self.params, self.results) < (other.params, other.results)

    def __repr__(self) -> str:
        params = ", ".join(map(str, self.params))
        results = ", ".join(map(str, self.results))
        return f"Type({self.id!r}, ({params}) -> ({results}))"

    def on_delete(self) -> None:
        self.params = ()
        self.results = ()

    def encode(self) -> bytes:
        """Return the binary encoding of this function type."""
        if self.is_for_function_entry:
            raise ValueError("function entry types are not emitted")
        return bytes([_FUNC_TYPE_FORM]) + _encode_list(self.params) + _encode_list(self.results)


class ModuleTypes:
    """The set of de-duplicated types within a module."""

    def __init__(self) -> None:
        self._arena: TombstoneArena[Type] = TombstoneArena()
        self._by_type: dict[Type, Id] = {}

    def _insert(self, ty: Type) -> Id:
        existing = self._by_type.get(ty)
        if existing is not None:
            return existing
        id = self._arena.alloc(ty)
        self._by_type[ty] = id
        return id

    def get(self, id: Id) -> Type:
        """Return the type for ``id``."""
        return self._arena[id]

    def params_results(self, id: Id) -> tuple[tuple[ValType, ...], tuple[ValType, ...]]:
        """Return the parameters and results of a type."""
        ty = self.get(id)
        return ty.params, ty.results

    def params(self, id: Id) -> tuple[ValType, ...]:
        """Return the parameters of a type."""
        return self.get(id).params

    def results(self, id: Id) -> tuple[ValType, ...]:
        """Return the results of a type."""
        return self.get(id).results

    def by_name(self, name: str) -> Optional[Id]:
        """Return the id of the first type with the given name."""
        return next((id for id, ty in self._arena.items() if ty.name == name), None)

    def __iter__(self) -> Iterator[Type]:
        return iter(self._arena)

    def __len__(self) -> int:
        return len(self._arena)

    def delete(self, id: Id) -> None:
        """Remove a type; references to it must be removed by the caller."""
        ty = self._arena[id]
        if self._by_type.get(ty) == id:
            del self._by_type[ty]
        self._arena.delete(id)

    def add(self, params: Iterable[ValType], results: Iterable[ValType]) -> Id:
        """Add a function type, reusing an equal one if present."""
        return self._insert(Type(self._arena.next_id(), params, results))

    def add_entry_ty(self, results: Iterable[ValType]) -> Id:
        """Add a type for a multi-value function entry block."""
        return self._insert(Type.for_function_entry(self._arena.next_id(), results))

    def find(self, params: Iterable[ValType], results: Iterable[ValType]) -> Optional[Id]:
        """Return the id of an existing function type, if any."""
        params, results = tuple(params), tuple(results)
        return next(
            (
                id
                for id, ty in self._arena.items()
                if not ty.is_for_function_entry and ty.params == params and ty.results == results
            ),
            None,
        )

    def find_for_function_entry(self, results: Iterable[ValType]) -> Optional[Id]:
        """Return the id of an existing entry-block type, if any."""
        results = tuple(results)
        return next(
            (
                id
                for id, ty in self._arena.items()
                if ty.is_for_function_entry and not ty.params and ty.results == results
            ),
            None,
        )

    def emitted_types(self) -> list[Type]:
        """Return the types of the type section, in their emitted order."""
        return sorted(ty for ty in self if not ty.is_for_function_entry)