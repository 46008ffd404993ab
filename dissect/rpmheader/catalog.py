from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from dissect.rpmheader.c_rpm import c_rpm

if TYPE_CHECKING:
    from collections.abc import Mapping


class TagRole(Enum):
    """Whether a tag holds a scalar package field or one of the parallel per-file arrays."""

    PACKAGE = "package"
    FILE = "file"


@dataclass(frozen=True)
class TagSpec:
    tag: c_rpm.Tag
    type: c_rpm.TagType
    role: TagRole
    field: str


def _spec(tag: c_rpm.Tag, type: c_rpm.TagType, role: TagRole, field: str) -> tuple[int, TagSpec]:
    return int(tag), TagSpec(tag, type, role, field)


# Expected on-disk types of the tags relevant to package and file identity. There is no distinct type code for
# arrays, so the file arrays are declared with the type of their elements.
CATALOG: Mapping[int, TagSpec] = MappingProxyType(
    dict(
        [
            _spec(c_rpm.Tag.NAME, c_rpm.TagType.STRING, TagRole.PACKAGE, "name"),
            _spec(c_rpm.Tag.VERSION, c_rpm.TagType.STRING, TagRole.PACKAGE, "version"),
            _spec(c_rpm.Tag.RELEASE, c_rpm.TagType.STRING, TagRole.PACKAGE, "release"),
            _spec(c_rpm.Tag.EPOCH, c_rpm.TagType.INT32, TagRole.PACKAGE, "epoch"),
            _spec(c_rpm.Tag.VENDOR, c_rpm.TagType.STRING, TagRole.PACKAGE, "vendor"),
            _spec(c_rpm.Tag.LICENSE, c_rpm.TagType.STRING, TagRole.PACKAGE, "license"),
            _spec(c_rpm.Tag.SIZE, c_rpm.TagType.INT32, TagRole.PACKAGE, "size"),
            _spec(c_rpm.Tag.ARCH, c_rpm.TagType.STRING, TagRole.PACKAGE, "arch"),
            _spec(c_rpm.Tag.SOURCERPM, c_rpm.TagType.STRING, TagRole.PACKAGE, "source_rpm"),
            _spec(c_rpm.Tag.FILESIZES, c_rpm.TagType.INT32, TagRole.FILE, "sizes"),
            _spec(c_rpm.Tag.FILEMODES, c_rpm.TagType.INT16, TagRole.FILE, "modes"),
            _spec(c_rpm.Tag.FILEDIGESTS, c_rpm.TagType.STRING_ARRAY, TagRole.FILE, "digests"),
            _spec(c_rpm.Tag.BASENAMES, c_rpm.TagType.STRING_ARRAY, TagRole.FILE, "basenames"),
            _spec(c_rpm.Tag.DIRINDEXES, c_rpm.TagType.INT32, TagRole.FILE, "dirindexes"),
            _spec(c_rpm.Tag.DIRNAMES, c_rpm.TagType.STRING_ARRAY, TagRole.FILE, "dirnames"),
        ]
    )
)

PACKAGE_TAGS: Mapping[int, TagSpec] = MappingProxyType(
    {tag: spec for tag, spec in CATALOG.items() if spec.role is TagRole.PACKAGE}
)
FILE_TAGS: Mapping[int, TagSpec] = MappingProxyType(
    {tag: spec for tag, spec in CATALOG.items() if spec.role is TagRole.FILE}
)


def tag_name(tag: int) -> str:
    """Return a readable name for ``tag``, falling back to its number for tags outside the catalog."""
    if spec := CATALOG.get(int(tag)):
        return spec.tag.name.lower()
    return str(tag)
