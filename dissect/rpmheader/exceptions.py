from __future__ import annotations


class Error(Exception):
    """Generic dissect.rpmheader error"""

    def __init__(self, message: str | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.__cause__ = cause


class DecodeError(Error):
    """A payload is too short for the requested fixed-width read."""


class InvalidTagTypeError(Error):
    """The declared type of a header entry does not match the type expected for its tag."""

    def __init__(
        self,
        tag: int,
        declared_type: int,
        expected_type: int,
        message: str | None = None,
        cause: Exception | None = None,
    ):
        self.tag = tag
        self.declared_type = declared_type
        self.expected_type = expected_type

        if message is None:
            message = f"Invalid type {declared_type} for tag {tag}, expected {expected_type}"

        super().__init__(message, cause)


class IndexOutOfRangeError(Error):
    """A directory index addresses a non-existent directory name."""


class HeaderError(Error):
    """The raw header blob is malformed."""
