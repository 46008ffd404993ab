from __future__ import annotations

from dissect.cstruct import cstruct

# References:
# - https://github.com/rpm-software-management/rpm/blob/rpm-4.11.3-release/lib/rpmtag.h
# - https://github.com/rpm-software-management/rpm/blob/master/lib/header.cc
rpm_def = """
#define HEADER_MAGIC                0x8eade801      // b"\\x8e\\xad\\xe8\\x01"

enum TagType : uint32 {
    NULL            = 0,
    CHAR            = 1,
    INT8            = 2,
    INT16           = 3,
    INT32           = 4,
    INT64           = 5,
    STRING          = 6,
    BIN             = 7,
    STRING_ARRAY    = 8,
    I18NSTRING      = 9,
};

enum Tag : int32 {
    NAME            = 1000,
    VERSION         = 1001,
    RELEASE         = 1002,
    EPOCH           = 1003,
    SIZE            = 1009,
    VENDOR          = 1011,
    LICENSE         = 1014,
    ARCH            = 1022,
    FILESIZES       = 1028,                         // i[]
    FILEMODES       = 1030,                         // h[], read as uint16
    FILEDIGESTS     = 1035,                         // s[]
    SOURCERPM       = 1044,
    DIRINDEXES      = 1116,                         // i[]
    BASENAMES       = 1117,                         // s[]
    DIRNAMES        = 1118,                         // s[]
};

// Only present in the header section of .rpm files, not in database blobs.
struct Intro {
    uint32      magic;
    uint32      reserved;
};

struct EntryInfo {
    int32       tag;
    uint32      type;
    int32       offset;                             // relative to the start of the data store
    uint32      count;
};

struct Header {
    uint32      index_count;
    uint32      data_length;
    // EntryInfo entries[index_count];
    // char     data[data_length];
};
"""

c_rpm = cstruct(endian=">").load(rpm_def)

# Element sizes of the fixed-width types, variable sized types are absent. Keyed by plain int, cstruct enum
# members do not hash like the values they compare equal to
TYPE_SIZES: dict[int, int] = {
    int(c_rpm.TagType.CHAR): 1,
    int(c_rpm.TagType.INT8): 1,
    int(c_rpm.TagType.INT16): 2,
    int(c_rpm.TagType.INT32): 4,
    int(c_rpm.TagType.INT64): 8,
}
