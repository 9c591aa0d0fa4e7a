"""Track model.

A track is a list of segments, each a list of recorded track points. A
receiver that pauses and resumes logging starts a new segment; nothing
connects the last point of one segment to the first of the next, so
segments are never merged.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Optional

from gpxcodec.geometry import Layout, LineString, MultiLineString
from gpxcodec.metadata import LinkType
from gpxcodec.route import PATH_FIELDS
from gpxcodec.waypoint import WptType
from gpxcodec.xmlcodec import ElementSchema, Field, NestedCodec


@dataclass
class TrkSegType:
    trkpt: list[WptType] = field(default_factory=list)

    @classmethod
    def from_element(cls, elem: ET.Element) -> TrkSegType:
        return cls(**_TRKSEG.decode(elem))

    def to_element(self, tag: str = "trkseg") -> ET.Element:
        elem = ET.Element(tag)
        _TRKSEG.encode(elem, self)
        return elem

    def geom(self, layout: Layout) -> LineString:
        return LineString(layout, [pt.geom(layout).coords for pt in self.trkpt])

    @classmethod
    def from_geom(cls, line_string: LineString) -> TrkSegType:
        return cls(trkpt=[WptType.from_geom(p) for p in line_string.points()])


@dataclass
class TrkType:
    name: Optional[str] = None
    cmt: Optional[str] = None
    desc: Optional[str] = None
    src: Optional[str] = None
    link: list[LinkType] = field(default_factory=list)
    number: Optional[int] = None
    type: Optional[str] = None
    trkseg: list[TrkSegType] = field(default_factory=list)

    @classmethod
    def from_element(cls, elem: ET.Element) -> TrkType:
        return cls(**_TRK.decode(elem))

    def to_element(self, tag: str = "trk") -> ET.Element:
        elem = ET.Element(tag)
        _TRK.encode(elem, self)
        return elem

    def geom(self, layout: Layout) -> MultiLineString:
        """One line per segment, one coordinate per track point."""
        return MultiLineString(layout, [seg.geom(layout).coords for seg in self.trkseg])

    @classmethod
    def from_geom(cls, multi_line_string: MultiLineString) -> TrkType:
        return cls(trkseg=[TrkSegType.from_geom(ls) for ls in multi_line_string.line_strings()])


def new_trk_type(multi_line_string: MultiLineString) -> TrkType:
    return TrkType.from_geom(multi_line_string)


_TRKSEG = ElementSchema(
    Field("trkpt", "trkpt", NestedCodec(WptType), repeated=True),
)

_TRK = ElementSchema(
    *PATH_FIELDS,
    Field("trkseg", "trkseg", NestedCodec(TrkSegType), repeated=True),
)
