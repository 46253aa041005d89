"""Binary serializers: big-endian length-prefixed strings and arrays."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Any, Tuple

from codexkit.array import Array

_U64 = struct.Struct(">Q")


def _read_u64(buffer: bytes, offset: int) -> int:
    try:
        return _U64.unpack_from(buffer, offset)[0]
    except struct.error as exc:
        raise ValueError(f"buffer too short for 64-bit length at offset {offset}") from exc


class Serializer(ABC):
    """Converts entities to bytes and back."""

    def estimate_size(self, entity: Any) -> int:
        """Number of bytes ``serialize`` produces for ``entity``."""
        return len(self.serialize(entity))

    @abstractmethod
    def serialize(self, entity: Any) -> bytes:
        """Encode ``entity`` as bytes."""

    @abstractmethod
    def deserialize(self, buffer: bytes, offset: int = 0) -> Tuple[Any, int]:
        """Decode an entity at ``offset``; return it with the number of bytes consumed."""


def serialize_string(text: str) -> bytes:
    """Encode text as a big-endian u64 length followed by UTF-8 bytes and a NUL."""
    data = text.encode("utf-8") + b"\0"
    return _U64.pack(len(data)) + data


def estimate_string_size(text: str) -> int:
    """Number of bytes ``serialize_string`` produces for ``text``."""
    return _U64.size + len(text.encode("utf-8")) + 1


def deserialize_string(buffer: bytes, offset: int = 0) -> Tuple[str, int]:
    """Decode a string at ``offset``; return it with the number of bytes consumed."""
    length = _read_u64(buffer, offset)
    start = offset + _U64.size
    end = start + length
    if end > len(buffer):
        raise ValueError(
            f"string of {length} bytes at offset {offset} exceeds buffer of {len(buffer)} bytes"
        )
    data = bytes(buffer[start:end]).split(b"\0", 1)[0]
    return data.decode("utf-8"), _U64.size + length


class ArraySerializer(Serializer):
    """Serializes an :class:`Array` as length, element size, then each item."""

    def __init__(self, item_serializer: Serializer) -> None:
        self.item_serializer = item_serializer

    def estimate_size(self, entity: Array) -> int:
        return 2 * _U64.size + sum(self.item_serializer.estimate_size(item) for item in entity)

    def serialize(self, entity: Array) -> bytes:
        header = _U64.pack(len(entity)) + _U64.pack(entity.elem_size)
        return header + b"".join(self.item_serializer.serialize(item) for item in entity)

    def deserialize(self, buffer: bytes, offset: int = 0) -> Tuple[Array, int]:
        length = _read_u64(buffer, offset)
        elem_size = _read_u64(buffer, offset + _U64.size)
        position = offset + 2 * _U64.size
        array = Array(elem_size)
        for _ in range(length):
            item, consumed = self.item_serializer.deserialize(buffer, position)
            array.add(item)
            position += consumed
        return array, position - offset