"""Exception types raised by gpxcodec."""

from __future__ import annotations


class GPXError(Exception):
    """Base class for all gpxcodec errors."""


class ParseError(GPXError):
    """Malformed XML, or element/attribute text that cannot be converted.

    Attributes:
        tag: Local name of the element or attribute being decoded, if known.
    """

    def __init__(self, message: str, tag: str | None = None) -> None:
        super().__init__(message)
        self.tag = tag


class EncodeError(GPXError):
    """Writing a serialized document to its sink failed."""
