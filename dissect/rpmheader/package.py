from __future__ import annotations

import stat
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dissect.rpmheader.c_rpm import c_rpm
from dissect.rpmheader.catalog import FILE_TAGS, PACKAGE_TAGS, TagSpec, tag_name
from dissect.rpmheader.decoders import (
    parse_int32,
    parse_int32_array,
    parse_string,
    parse_string_array,
    parse_uint16_array,
)
from dissect.rpmheader.exceptions import (
    DecodeError,
    Error,
    IndexOutOfRangeError,
    InvalidTagTypeError,
)
from dissect.rpmheader.helpers.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dissect.rpmheader.header import IndexEntry

log = get_logger(__name__)

# Literal used by rpm for "intentionally absent"
NONE_SENTINEL = "(none)"

# Only these fields follow the sentinel convention, a package can literally be named "(none)"
SENTINEL_TAGS = frozenset(int(tag) for tag in (c_rpm.Tag.SOURCERPM, c_rpm.Tag.LICENSE, c_rpm.Tag.VENDOR))


@dataclass(frozen=True)
class FileInfo:
    path: str
    mode: int = 0
    digest: str = ""
    size: int = 0

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_file(self) -> bool:
        return stat.S_ISREG(self.mode)

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)


@dataclass(frozen=True)
class PackageInfo:
    epoch: int = 0
    name: str = ""
    version: str = ""
    release: str = ""
    arch: str = ""
    source_rpm: str = ""
    size: int = 0
    license: str = ""
    vendor: str = ""
    files: tuple[FileInfo, ...] = ()

    @property
    def full_name(self) -> str:
        """Reconstruct the full name of the package, as rendered by ``rpm -qa``."""
        full_name = f"{self.name}-{self.version}-{self.release}"
        if self.arch:
            full_name += f".{self.arch}"
        return full_name

    @property
    def evr(self) -> str:
        evr = f"{self.version}-{self.release}"
        if self.epoch:
            evr = f"{self.epoch}:{evr}"
        return evr


def _check_type(entry: IndexEntry, spec: TagSpec) -> None:
    tag, declared = int(entry.tag), int(entry.type)
    if declared != spec.type:
        raise InvalidTagTypeError(
            tag,
            declared,
            int(spec.type),
            f"Invalid type {declared} for tag {tag_name(tag)} ({tag}), expected {spec.type.name}",
        )


def new_package(entries: Iterable[IndexEntry], strict: bool = False) -> PackageInfo:
    """Assemble a :class:`PackageInfo` from the index entries of a single RPM header.

    The scalar package fields are collected in one pass over the entries, after which the file list is
    reconstructed by :func:`get_files` in a second pass. If a tag occurs more than once, the last occurrence wins.

    Args:
        entries: The index entries of one header, in header order.
        strict: Passed on to :func:`get_files`.

    Raises:
        InvalidTagTypeError: If a recognized tag is stored with an unexpected type.
        DecodeError: If an integer payload is truncated.
        IndexOutOfRangeError: If a file references a non-existent directory.

    References:
        - https://github.com/rpm-software-management/rpm/blob/rpm-4.11.3-release/lib/tagexts.c
        - https://github.com/knqyf263/go-rpmdb
    """
    entries = list(entries)
    fields = {}

    for entry in entries:
        if not (spec := PACKAGE_TAGS.get(int(entry.tag))):
            continue

        _check_type(entry, spec)

        if spec.type == c_rpm.TagType.STRING:
            value = parse_string(entry.data)
            if int(spec.tag) in SENTINEL_TAGS and value == NONE_SENTINEL:
                value = ""
        else:
            try:
                value = parse_int32(entry.data)
            except DecodeError as e:
                raise DecodeError(f"Failed to parse {spec.field}: {e}") from e

        if spec.field in fields:
            log.warning(
                "Tag %s occurs more than once, overwriting %r with %r", spec.tag.name, fields[spec.field], value
            )

        fields[spec.field] = value

    try:
        files = get_files(entries, strict=strict)
    except InvalidTagTypeError as e:
        raise InvalidTagTypeError(e.tag, e.declared_type, e.expected_type, f"Failed to read package files: {e}") from e
    except Error as e:
        raise e.__class__(f"Failed to read package files: {e}") from e

    return PackageInfo(**fields, files=tuple(files))


def get_files(entries: Iterable[IndexEntry], strict: bool = False) -> list[FileInfo]:
    """Reconstruct the files of a package from the parallel file arrays in its header.

    The file at index ``i`` is described by the ``i``-th element of the base names, digests, modes and sizes
    arrays, its directory is the directory name that the ``i``-th directory index points to. The output is in
    header order.

    Without directory names or directory indexes there is no way to build a path, in which case no files are
    returned at all. Digest, mode and size arrays that are missing or shorter than the base names are filled in
    with empty defaults, unless ``strict`` is set.

    Raises:
        InvalidTagTypeError: If a file array is stored with an unexpected type.
        DecodeError: If an integer array is truncated, or an auxiliary array is too short in ``strict`` mode.
        IndexOutOfRangeError: If a directory index is missing or out of bounds.
    """
    arrays: dict[str, list] = {}

    for entry in entries:
        if not (spec := FILE_TAGS.get(int(entry.tag))):
            continue

        _check_type(entry, spec)

        if spec.type == c_rpm.TagType.STRING_ARRAY:
            arrays[spec.field] = parse_string_array(entry.data)
            continue

        try:
            if spec.type == c_rpm.TagType.INT16:
                # Modes are a bit pattern, so read them unsigned
                arrays[spec.field] = parse_uint16_array(entry.data, entry.length)
            else:
                arrays[spec.field] = parse_int32_array(entry.data, entry.length)
        except DecodeError as e:
            raise DecodeError(f"Failed to parse {spec.field}: {e}") from e

    dirnames = arrays.get("dirnames")
    dirindexes = arrays.get("dirindexes")
    if dirnames is None or dirindexes is None:
        log.debug("Header has no directory names or indexes, not reconstructing files")
        return []

    basenames = arrays.get("basenames", [])
    digests = _optional_array(arrays, "digests", len(basenames), strict)
    modes = _optional_array(arrays, "modes", len(basenames), strict)
    sizes = _optional_array(arrays, "sizes", len(basenames), strict)

    files = []
    for i, basename in enumerate(basenames):
        if i >= len(dirindexes):
            raise IndexOutOfRangeError(f"Missing directory index for file {i} ({basename!r})")

        dirindex = dirindexes[i]
        if not 0 <= dirindex < len(dirnames):
            raise IndexOutOfRangeError(
                f"Directory index {dirindex} of file {i} ({basename!r}) out of range for {len(dirnames)} directories"
            )

        files.append(
            FileInfo(
                path=dirnames[dirindex] + basename,
                mode=modes[i] if i < len(modes) else 0,
                digest=digests[i] if i < len(digests) else "",
                size=sizes[i] if i < len(sizes) else 0,
            )
        )

    return files


def _optional_array(arrays: dict[str, list], field: str, count: int, strict: bool) -> list:
    if (values := arrays.get(field)) is None:
        return []

    if len(values) < count:
        if strict:
            raise DecodeError(f"File {field} array has {len(values)} elements, expected {count}")
        log.debug("File %s array has %d elements for %d files, using defaults", field, len(values), count)

    return values
