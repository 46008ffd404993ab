from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO

from dissect.rpmheader.c_rpm import TYPE_SIZES, c_rpm
from dissect.rpmheader.exceptions import HeaderError
from dissect.rpmheader.helpers.logging import get_logger
from dissect.rpmheader.package import PackageInfo, new_package

log = get_logger(__name__)

# Upper bounds rpm itself enforces on imported headers
MAX_INDEX_COUNT = 0xFFFF
MAX_DATA_LENGTH = 0x0FFFFFFF


@dataclass(frozen=True)
class IndexEntry:
    """A single tag occurrence of an RPM header.

    ``length`` is the size of ``data`` in bytes. Array types do not store an element count in their payload, the
    number of elements is derived from it.
    """

    tag: int
    type: int
    data: bytes
    length: int


def read_entries(blob: bytes) -> list[IndexEntry]:
    """Read the index entries of a raw RPM header blob, in the order they are stored.

    Accepts both the blobs stored by the rpmdb backends and headers that start with the header magic, as found in
    ``.rpm`` files. Does not parse dribble entries.

    References:
        - https://github.com/rpm-software-management/rpm/blob/master/lib/header.cc @ headerImport
        - http://ftp.rpm.org/max-rpm/s1-rpm-file-format-rpm-file-format.html
    """
    fh = BytesIO(blob)

    try:
        if c_rpm.Intro(fh).magic != c_rpm.HEADER_MAGIC:
            fh.seek(0)
        header = c_rpm.Header(fh)
    except EOFError as e:
        raise HeaderError(f"Header blob too short ({len(blob)} bytes)") from e

    if header.index_count > MAX_INDEX_COUNT:
        raise HeaderError(f"Index count {header.index_count} exceeds limit of {MAX_INDEX_COUNT}")

    if header.data_length > MAX_DATA_LENGTH:
        raise HeaderError(f"Data length {header.data_length} exceeds limit of {MAX_DATA_LENGTH}")

    try:
        infos = c_rpm.EntryInfo[header.index_count](fh) if header.index_count else []
    except EOFError as e:
        raise HeaderError(f"Header index truncated, expected {header.index_count} entries") from e

    store = fh.read(header.data_length)
    if len(store) != header.data_length:
        raise HeaderError(f"Header data store truncated, expected {header.data_length} bytes, got {len(store)}")

    entries = []
    for info in infos:
        if not 0 <= info.offset <= len(store):
            raise HeaderError(f"Offset {info.offset} of tag {info.tag} outside of data store")

        length = _entry_length(info, store)
        if info.offset + length > len(store):
            raise HeaderError(f"Data of tag {info.tag} ({length} bytes at {info.offset}) exceeds data store")

        log.trace("Read tag %d (type %d, count %d, %d bytes)", info.tag, info.type, info.count, length)
        entries.append(IndexEntry(info.tag, info.type, store[info.offset : info.offset + length], length))

    return entries


def _entry_length(info: c_rpm.EntryInfo, store: bytes) -> int:
    if size := TYPE_SIZES.get(int(info.type)):
        return size * info.count

    if info.type == c_rpm.TagType.NULL:
        return 0

    if info.type == c_rpm.TagType.BIN:
        return info.count

    if info.type == c_rpm.TagType.STRING:
        count = 1
    elif info.type in (c_rpm.TagType.STRING_ARRAY, c_rpm.TagType.I18NSTRING):
        count = info.count
    else:
        raise HeaderError(f"Unknown type {info.type} for tag {info.tag}")

    end = info.offset
    for _ in range(count):
        if (end := store.find(b"\x00", end)) == -1:
            raise HeaderError(f"Unterminated string in tag {info.tag}")
        end += 1

    return end - info.offset


def parse_package(blob: bytes, strict: bool = False) -> PackageInfo:
    """Parse a raw RPM header blob into a :class:`PackageInfo`."""
    return new_package(read_entries(blob), strict=strict)
