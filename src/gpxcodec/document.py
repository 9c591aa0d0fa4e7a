"""GPX document root: reading and writing whole documents.

Output always carries the GPX 1.0 namespace header::

    <gpx version=".." creator=".."
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xmlns="http://www.topografix.com/GPX/1/0"
         xsi:schemaLocation="...">

followed by ``metadata``, ``wpt``, ``rte`` and ``trk`` children in that
order. Writing a document that was read without losing information
reproduces it exactly.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Optional

from loguru import logger

from gpxcodec.config import settings
from gpxcodec.errors import ParseError
from gpxcodec.metadata import MetadataType
from gpxcodec.route import RteType
from gpxcodec.track import TrkType
from gpxcodec.waypoint import WptType
from gpxcodec.xmlcodec import (
    ElementSchema,
    Field,
    NestedCodec,
    local_name,
    parse_xml,
    read_xml,
    serialize,
    write_text,
)

GPX_NAMESPACE = "http://www.topografix.com/GPX/1/0"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION = f"{GPX_NAMESPACE} http://www.topografix.com/GPX/1/0/gpx.xsd"


@dataclass
class GPX:
    """A GPX document: waypoints, routes and tracks plus optional metadata.

    ``version`` and ``creator`` default to the configured values for
    documents built in code; documents that are read keep their own.
    """

    version: str = field(default_factory=lambda: settings.default_version)
    creator: str = field(default_factory=lambda: settings.default_creator)
    metadata: Optional[MetadataType] = None
    wpt: list[WptType] = field(default_factory=list)
    rte: list[RteType] = field(default_factory=list)
    trk: list[TrkType] = field(default_factory=list)

    @classmethod
    def from_element(cls, elem: ET.Element) -> GPX:
        tag = local_name(elem.tag)
        if tag != "gpx":
            raise ParseError(f"expected <gpx> root element, got <{tag}>", tag=tag)
        return cls(
            version=elem.get("version", ""),
            creator=elem.get("creator", ""),
            **_GPX.decode(elem),
        )

    def to_element(self, tag: str = "gpx") -> ET.Element:
        elem = ET.Element(tag)
        elem.set("version", self.version)
        elem.set("creator", self.creator)
        elem.set("xmlns:xsi", XSI_NAMESPACE)
        elem.set("xmlns", GPX_NAMESPACE)
        elem.set("xsi:schemaLocation", SCHEMA_LOCATION)
        _GPX.encode(elem, self)
        return elem

    def to_string(self, prefix: str = "", indent: str = "") -> str:
        """Serialize to text; see :meth:`write_indent` for the formatting."""
        return serialize(self.to_element(), prefix, indent)

    def write(self, sink: Any) -> None:
        """Write compactly, with no whitespace between elements.

        Args:
            sink: Writable text stream, or binary stream (UTF-8 is written).

        Raises:
            EncodeError: If writing to the sink fails.
        """
        self.write_indent(sink, "", "")

    def write_indent(self, sink: Any, prefix: str, indent: str) -> None:
        """Write with each element on its own line.

        Every line starts with ``prefix`` followed by one ``indent`` per
        nesting level. With both empty this is the same as :meth:`write`.
        """
        write_text(sink, self.to_string(prefix, indent))
        logger.debug(
            f"Wrote GPX {self.version}: {len(self.wpt)} waypoints, "
            f"{len(self.rte)} routes, {len(self.trk)} tracks"
        )

    def write_pretty(self, sink: Any) -> None:
        """Write using the configured ``pretty_prefix``/``pretty_indent``."""
        self.write_indent(sink, settings.pretty_prefix, settings.pretty_indent)


def _loaded(gpx: GPX) -> GPX:
    logger.debug(
        f"Read GPX {gpx.version} from {gpx.creator!r}: {len(gpx.wpt)} waypoints, "
        f"{len(gpx.rte)} routes, {len(gpx.trk)} tracks"
    )
    return gpx


def read(source: Any) -> GPX:
    """Read a GPX document from a readable binary or text stream.

    Raises:
        ParseError: On malformed XML or unconvertible field values.
    """
    return _loaded(GPX.from_element(read_xml(source)))


def parse(data: str | bytes) -> GPX:
    """Parse a GPX document held in memory.

    Raises:
        ParseError: On malformed XML or unconvertible field values.
    """
    return _loaded(GPX.from_element(parse_xml(data)))


_GPX = ElementSchema(
    Field("metadata", "metadata", NestedCodec(MetadataType)),
    Field("wpt", "wpt", NestedCodec(WptType), repeated=True),
    Field("rte", "rte", NestedCodec(RteType), repeated=True),
    Field("trk", "trk", NestedCodec(TrkType), repeated=True),
)
