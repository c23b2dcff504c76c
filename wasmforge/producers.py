"""The ``producers`` custom section."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import encode_str, encode_u32


@dataclass
class ProducerValue:
    """A named, versioned entry of a producers field."""

    name: str
    version: str


@dataclass
class ProducerField:
    """A field of the producers section, such as ``language``."""

    name: str
    values: list[ProducerValue] = field(default_factory=list)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def u32(self) -> int:
        result = 0
        for shift in range(0, 35, 7):
            if self._pos >= len(self._data):
                raise ValueError("unexpected end of producers section")
            byte = self._data[self._pos]
            self._pos += 1
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                if result > 0xFFFFFFFF:
                    raise ValueError("integer too large in producers section")
                return result
        raise ValueError("integer representation too long in producers section")

    def str(self) -> str:
        length = self.u32()
        end = self._pos + length
        if end > len(self._data):
            raise ValueError("unexpected end of producers section")
        raw = self._data[self._pos:end]
        self._pos = end
        return raw.decode("utf-8")


class ModuleProducers:
    """Contents of the ``producers`` custom section."""

    def __init__(self) -> None:
        self._fields: list[ProducerField] = []

    def add_language(self, language: str, version: str) -> None:
        """Add or update a ``language`` entry."""
        self._field("language", language, version)

    def add_processed_by(self, tool: str, version: str) -> None:
        """Add or update a ``processed-by`` entry."""
        self._field("processed-by", tool, version)

    def add_sdk(self, sdk: str, version: str) -> None:
        """Add or update an ``sdk`` entry."""
        self._field("sdk", sdk, version)

    def _field(self, field_name: str, name: str, version: str) -> None:
        new_value = ProducerValue(name, version)
        target = next((f for f in self._fields if f.name == field_name), None)
        if target is None:
            self._fields.append(ProducerField(field_name, [new_value]))
            return
        for position, value in enumerate(target.values):
            if value.name == name:
                target.values[position] = new_value
                return
        target.values.append(new_value)

    def clear(self) -> None:
        """Remove every field."""
        self._fields.clear()

    def fields(self) -> tuple[ProducerField, ...]:
        """Return the fields in order."""
        return tuple(self._fields)

    def encode(self) -> bytes:
        """Return the section payload, or empty bytes when there are no fields."""
        if not self._fields:
            return b""
        out = bytearray(encode_u32(len(self._fields)))
        for fld in self._fields:
            out += encode_str(fld.name)
            out += encode_u32(len(fld.values))
            for value in fld.values:
                out += encode_str(value.name)
                out += encode_str(value.version)
        return bytes(out)

    @staticmethod
    def parse(data: bytes) -> "ModuleProducers":
        """Build producers from a section payload; raises ``ValueError`` if malformed."""
        reader = _Reader(data)
        producers = ModuleProducers()
        for _ in range(reader.u32()):
            name = reader.str()
            values = []
            for _ in range(reader.u32()):
                value_name = reader.str()
                values.append(ProducerValue(value_name, reader.str()))
            producers._fields.append(ProducerField(name, values))
        return producers