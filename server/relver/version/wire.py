"""
Wire encoding of versions.

A version travels as its id written as a variable-length integer:
seven bits per byte, least significant group first, high bit set on
every byte but the last. Ids are 32-bit; negative values take five bytes.

Invariants:
    - read_version(write_version(v)) has the same id as v
    - A vint never takes more than five bytes
    - read_version rejects negative ids
"""

from __future__ import annotations

import io
from typing import BinaryIO, Optional

from ..errors import WireFormatError
from .registry import VersionRegistry
from .resolver import from_id
from .types import Version

_MAX_VINT_BYTES = 5
_UINT32_MASK = 0xFFFFFFFF


def write_vint(value: int, out: BinaryIO) -> None:
    """Write a 32-bit integer as a vint."""
    value &= _UINT32_MASK
    buffer = bytearray()
    while value & ~0x7F:
        buffer.append((value & 0x7F) | 0x80)
        value >>= 7
    buffer.append(value)
    out.write(bytes(buffer))


def read_vint(inp: BinaryIO) -> int:
    """Read a vint written by write_vint.

    Raises:
        WireFormatError: If the stream ends early or the vint is too long
    """
    result = 0
    for position in range(_MAX_VINT_BYTES):
        chunk = inp.read(1)
        if not chunk:
            raise WireFormatError(f"Stream ended after {position} byte(s) of a vint")
        byte = chunk[0]
        result |= (byte & 0x7F) << (7 * position)
        if not byte & 0x80:
            break
    else:
        raise WireFormatError(f"vint is longer than {_MAX_VINT_BYTES} bytes")

    if result > _UINT32_MASK:
        raise WireFormatError(f"vint value {result} does not fit in 32 bits")
    # Back to signed int32
    if result & 0x80000000:
        result -= 1 << 32
    return result


def write_version(version: Version, out: BinaryIO) -> None:
    write_vint(version.id, out)


def read_version(inp: BinaryIO, registry: Optional[VersionRegistry] = None) -> Version:
    """Read a version id from the stream and resolve it.

    Raises:
        WireFormatError: If the stream is malformed or carries a negative id
    """
    version_id = read_vint(inp)
    if version_id < 0:
        raise WireFormatError(f"Negative version id {version_id} on the wire")
    return from_id(version_id, registry)


def version_to_bytes(version: Version) -> bytes:
    buffer = io.BytesIO()
    write_version(version, buffer)
    return buffer.getvalue()


def version_from_bytes(data: bytes, registry: Optional[VersionRegistry] = None) -> Version:
    return read_version(io.BytesIO(data), registry)
