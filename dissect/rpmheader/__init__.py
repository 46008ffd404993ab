from dissect.rpmheader.catalog import CATALOG, TagRole, TagSpec
from dissect.rpmheader.exceptions import (
    DecodeError,
    Error,
    HeaderError,
    IndexOutOfRangeError,
    InvalidTagTypeError,
)
from dissect.rpmheader.header import IndexEntry, parse_package, read_entries
from dissect.rpmheader.package import FileInfo, PackageInfo, get_files, new_package

__all__ = [
    "CATALOG",
    "DecodeError",
    "Error",
    "FileInfo",
    "HeaderError",
    "IndexEntry",
    "IndexOutOfRangeError",
    "InvalidTagTypeError",
    "PackageInfo",
    "TagRole",
    "TagSpec",
    "get_files",
    "new_package",
    "parse_package",
    "read_entries",
]
