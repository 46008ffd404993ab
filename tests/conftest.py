from __future__ import annotations

import pytest

from dissect.rpmheader.c_rpm import c_rpm
from dissect.rpmheader.header import IndexEntry
from tests._utils import int32_entry, string_array_entry, string_entry, uint16_entry


@pytest.fixture
def entries() -> list[IndexEntry]:
    """Index entries of a small but complete package header."""
    return [
        string_entry(c_rpm.Tag.NAME, "alternatives"),
        string_entry(c_rpm.Tag.VERSION, "1.33"),
        string_entry(c_rpm.Tag.RELEASE, "3.fc43"),
        int32_entry(c_rpm.Tag.SIZE, 63712),
        string_entry(c_rpm.Tag.VENDOR, "Fedora Project"),
        string_entry(c_rpm.Tag.LICENSE, "GPL-2.0-only"),
        string_entry(c_rpm.Tag.ARCH, "x86_64"),
        int32_entry(c_rpm.Tag.FILESIZES, 4096, 0, 27216),
        uint16_entry(c_rpm.Tag.FILEMODES, 0o40755, 0o100644, 0o100755),
        string_array_entry(
            c_rpm.Tag.FILEDIGESTS,
            ["", "", "bb0bc09dd7f1cd8a1d67a8f6e2e4a8f6d1d2c0c9e0f8a3b6e63a8e3d1d0e2f4a"],
        ),
        string_entry(c_rpm.Tag.SOURCERPM, "chkconfig-1.33-3.fc43.src.rpm"),
        int32_entry(c_rpm.Tag.DIRINDEXES, 0, 0, 1),
        string_array_entry(c_rpm.Tag.BASENAMES, ["alternatives", "alternatives.admindir", "alternatives"]),
        string_array_entry(c_rpm.Tag.DIRNAMES, ["/etc/", "/usr/bin/"]),
    ]
