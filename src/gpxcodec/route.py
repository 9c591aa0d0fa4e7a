"""Route model: an ordered list of route points describing a planned path."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Optional

from gpxcodec.geometry import Layout, LineString
from gpxcodec.metadata import LinkType
from gpxcodec.waypoint import WptType
from gpxcodec.xmlcodec import INT, TEXT, ElementSchema, Field, NestedCodec

# Descriptive children shared by <rte> and <trk>, in schema order
PATH_FIELDS = (
    Field("name", "name", TEXT),
    Field("cmt", "cmt", TEXT),
    Field("desc", "desc", TEXT),
    Field("src", "src", TEXT),
    Field("link", "link", NestedCodec(LinkType), repeated=True),
    Field("number", "number", INT),
    Field("type", "type", TEXT),
)


@dataclass
class RteType:
    name: Optional[str] = None
    cmt: Optional[str] = None
    desc: Optional[str] = None
    src: Optional[str] = None
    link: list[LinkType] = field(default_factory=list)
    number: Optional[int] = None
    type: Optional[str] = None
    rtept: list[WptType] = field(default_factory=list)

    @classmethod
    def from_element(cls, elem: ET.Element) -> RteType:
        return cls(**_RTE.decode(elem))

    def to_element(self, tag: str = "rte") -> ET.Element:
        elem = ET.Element(tag)
        _RTE.encode(elem, self)
        return elem

    def geom(self, layout: Layout) -> LineString:
        """One coordinate per route point, in order."""
        return LineString(layout, [pt.geom(layout).coords for pt in self.rtept])

    @classmethod
    def from_geom(cls, line_string: LineString) -> RteType:
        return cls(rtept=[WptType.from_geom(p) for p in line_string.points()])


def new_rte_type(line_string: LineString) -> RteType:
    return RteType.from_geom(line_string)


_RTE = ElementSchema(
    *PATH_FIELDS,
    Field("rtept", "rtept", NestedCodec(WptType), repeated=True),
)
