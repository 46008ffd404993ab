from __future__ import annotations

from dissect.cstruct.utils import u32

from dissect.rpmheader.c_rpm import c_rpm
from dissect.rpmheader.exceptions import DecodeError

SIZE_OF_INT32 = 4
SIZE_OF_UINT16 = 2


def _decode(value: bytes) -> str:
    # Header strings are not guaranteed to be valid UTF-8, keep the original bytes recoverable
    return value.decode("utf-8", errors="surrogateescape")


def parse_string(data: bytes) -> str:
    """Parse a null terminated string, only trailing null bytes are stripped."""
    return _decode(data.rstrip(b"\x00"))


def parse_string_array(data: bytes) -> list[str]:
    """Parse a sequence of null terminated strings.

    The terminator of the last element results in an empty trailing element after splitting, which is dropped.
    Empty elements in the middle of the array are preserved.
    """
    elements = data.split(b"\x00")
    if elements and elements[-1] == b"":
        elements = elements[:-1]
    return [_decode(element) for element in elements]


def parse_int32(data: bytes) -> int:
    """Parse the first 4 bytes of ``data`` as a signed big-endian integer."""
    if len(data) < SIZE_OF_INT32:
        raise DecodeError(f"Failed to read int32: expected {SIZE_OF_INT32} bytes, got {len(data)}")
    return u32(data[:SIZE_OF_INT32], "big", sign=True)


def parse_int32_array(data: bytes, length: int) -> list[int]:
    """Parse ``length // 4`` signed big-endian 32-bit integers.

    A ``length`` that is not a multiple of 4 is rounded down, partial elements are never reconstructed.
    """
    return _parse_array(c_rpm.int32, SIZE_OF_INT32, data, length)


def parse_uint16_array(data: bytes, length: int) -> list[int]:
    """Parse ``length // 2`` unsigned big-endian 16-bit integers."""
    return _parse_array(c_rpm.uint16, SIZE_OF_UINT16, data, length)


def _parse_array(type_, size: int, data: bytes, length: int) -> list[int]:
    count = length // size
    if count <= 0:
        return []

    if len(data) < count * size:
        raise DecodeError(
            f"Failed to read {type_.__name__} array: expected {count * size} bytes for {count} elements, "
            f"got {len(data)}"
        )

    return [int(value) for value in type_[count](data)]
