# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Binary property list ("bplist00") encoder.

Layout of the output:

    "bplist00"                 8-byte magic
    object 0 .. object N-1     type-tagged objects, in flattened order
    offset table               N big-endian offsets, 1/2/4 bytes each
    trailer                    32 bytes (offset width, ref width,
                               object count, top object, table offset)

Value model:

    None                → null        (0x00)
    bool                → false/true  (0x08 / 0x09)
    int >= 0            → integer     (0x1n, 2**n bytes)
    int < 0, float      → real        (0x23, 8-byte double)
    PlistFloat          → real        (0x23, 8-byte double)
    PlistUID            → uid         (0x8n, n+1 bytes)
    str                 → ASCII (0x5_) or UTF-16BE (0x6_) string
    bytes, bytearray    → data        (0x4_)
    list, tuple         → array       (0xA_)
    dict                → dict        (0xD_), all keys first, then values

Deduplication is by identity and applies to containers only: a list or
dict instance reachable twice is written once and referenced twice.
Scalars are written once per occurrence, even when equal.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Any, Union

logger = logging.getLogger(__name__)

MAGIC = b"bplist00"
TRAILER_SIZE = 32

_NULL = 0x00
_FALSE = 0x08
_TRUE = 0x09
_INT = 0x10
_REAL_64 = 0x23
_DATA = 0x40
_ASCII = 0x50
_UTF16 = 0x60
_UID = 0x80
_ARRAY = 0xA0
_DICT = 0xD0


class PlistEncodingError(ValueError):
    """Raised for values the encoder cannot represent (bad types, cycles)."""


@dataclass(frozen=True, slots=True)
class PlistUID:
    """A keyed-archive object reference (index into ``$objects``)."""
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < 2**32:
            raise ValueError(f"UID must be 0 <= value < 2**32, got {self.value}")


@dataclass(frozen=True, slots=True)
class PlistFloat:
    """Forces a number to be written as a real, even if it is integral."""
    value: float


PlistValue = Union[
    None, bool, int, float, str, bytes, bytearray,
    PlistUID, PlistFloat, list, tuple, dict,
]


# =============================================================================
# Integer helpers
# =============================================================================


def _byte_width(value: int) -> int:
    """Smallest of 1/2/4/8 bytes that holds a non-negative integer."""
    if value < 0x100:
        return 1
    if value < 0x10000:
        return 2
    if value < 0x100000000:
        return 4
    if value < 0x10000000000000000:
        return 8
    raise PlistEncodingError(f"Integer too large for binary plist: {value}")


_WIDTH_EXPONENT = {1: 0, 2: 1, 4: 2, 8: 3}


def _encode_int(value: int) -> bytes:
    width = _byte_width(value)
    return bytes([_INT | _WIDTH_EXPONENT[width]]) + value.to_bytes(width, "big")


def _size_header(type_nibble: int, count: int) -> bytes:
    """Marker with an inline count, or 0x_F followed by an integer object."""
    if count < 15:
        return bytes([type_nibble | count])
    return bytes([type_nibble | 0x0F]) + _encode_int(count)


# =============================================================================
# Flattening
# =============================================================================


def _is_container(value: Any) -> bool:
    return isinstance(value, (list, tuple, dict))


class _Flattener:
    """
    Depth-first, pre-order walk assigning an index to every object.

    ``objects[i]`` is the value at index i. For containers, ``children[i]``
    holds the child indices (a list for arrays, a (keys, values) pair for
    dicts).
    """

    def __init__(self) -> None:
        self.objects: list[Any] = []
        self.children: dict[int, Any] = {}
        self._seen: dict[int, int] = {}
        self._active: set[int] = set()

    def visit(self, value: Any) -> int:
        if _is_container(value):
            key = id(value)
            if key in self._active:
                raise PlistEncodingError("Cyclic container reference in plist value")
            if key in self._seen:
                return self._seen[key]

        index = len(self.objects)
        self.objects.append(value)
        if not _is_container(value):
            return index

        key = id(value)
        self._seen[key] = index
        self._active.add(key)
        if isinstance(value, dict):
            key_refs = []
            value_refs = []
            for k, v in value.items():
                if not isinstance(k, str):
                    raise PlistEncodingError(f"Dict keys must be str, got {type(k).__name__}")
                key_refs.append(self.visit(k))
                value_refs.append(self.visit(v))
            self.children[index] = (key_refs, value_refs)
        else:
            self.children[index] = [self.visit(item) for item in value]
        self._active.discard(key)
        return index


# =============================================================================
# Encoding
# =============================================================================


def _encode_refs(refs: list[int], ref_size: int) -> bytes:
    return b"".join(ref.to_bytes(ref_size, "big") for ref in refs)


def _encode_object(value: Any, children: Any, ref_size: int) -> bytes:
    if value is None:
        return bytes([_NULL])
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return bytes([_TRUE if value else _FALSE])
    if isinstance(value, PlistUID):
        width = _byte_width(value.value)
        return bytes([_UID | (width - 1)]) + value.value.to_bytes(width, "big")
    if isinstance(value, PlistFloat):
        return bytes([_REAL_64]) + struct.pack(">d", value.value)
    if isinstance(value, int):
        if value >= 0:
            return _encode_int(value)
        return bytes([_REAL_64]) + struct.pack(">d", float(value))
    if isinstance(value, float):
        return bytes([_REAL_64]) + struct.pack(">d", value)
    if isinstance(value, str):
        if value.isascii():
            raw = value.encode("ascii")
            return _size_header(_ASCII, len(raw)) + raw
        raw = value.encode("utf-16-be")
        return _size_header(_UTF16, len(raw) // 2) + raw
    if isinstance(value, (bytes, bytearray)):
        return _size_header(_DATA, len(value)) + bytes(value)
    if isinstance(value, dict):
        key_refs, value_refs = children
        return (
            _size_header(_DICT, len(key_refs))
            + _encode_refs(key_refs, ref_size)
            + _encode_refs(value_refs, ref_size)
        )
    if isinstance(value, (list, tuple)):
        return _size_header(_ARRAY, len(children)) + _encode_refs(children, ref_size)
    raise PlistEncodingError(f"Unsupported plist value type: {type(value).__name__}")


def _ref_size(object_count: int) -> int:
    if object_count < 0x100:
        return 1
    if object_count < 0x10000:
        return 2
    return 4


def encode_binary_plist(root: PlistValue) -> bytes:
    """
    Encode a value graph as a binary plist.

    The root is always object 0 (the top object).

    Args:
        root: Any supported value (see module docstring)

    Returns:
        The complete ``bplist00`` byte stream

    Raises:
        PlistEncodingError: Unsupported type, non-str dict key, cyclic
            container graph, or integer wider than 8 bytes
    """
    flat = _Flattener()
    flat.visit(root)
    object_count = len(flat.objects)
    ref_size = _ref_size(object_count)

    chunks = [MAGIC]
    offsets = []
    position = len(MAGIC)
    for index, value in enumerate(flat.objects):
        encoded = _encode_object(value, flat.children.get(index), ref_size)
        offsets.append(position)
        chunks.append(encoded)
        position += len(encoded)

    offset_table_offset = position
    offset_size = _ref_size(offset_table_offset)
    chunks.append(b"".join(off.to_bytes(offset_size, "big") for off in offsets))

    chunks.append(struct.pack(
        ">6xBBQQQ",
        offset_size,
        ref_size,
        object_count,
        0,
        offset_table_offset,
    ))

    data = b"".join(chunks)
    logger.debug(
        "Encoded binary plist: %d objects, ref size %d, %d bytes",
        object_count, ref_size, len(data),
    )
    return data
