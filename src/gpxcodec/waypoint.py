"""Waypoint model: a single georeferenced point with optional metadata.

Used for top-level ``<wpt>``, route ``<rtept>`` and track ``<trkpt>``
elements, which share one schema.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from loguru import logger

from gpxcodec.config import settings
from gpxcodec.errors import ParseError
from gpxcodec.geometry import Layout, Point
from gpxcodec.metadata import LinkType
from gpxcodec.timecodec import m_to_time, time_to_m
from gpxcodec.xmlcodec import (
    FLOAT,
    INT,
    TEXT,
    TIME,
    ElementSchema,
    Field,
    NestedCodec,
    attr_float,
    local_name,
    set_attr,
)


@dataclass
class WptType:
    """A waypoint, route point or track point.

    ``lat``/``lon`` are always present. Every other field is ``None`` (or an
    empty list) when absent and is then left out of the XML entirely.
    ``fix`` is stored as raw text ("none", "2d", "3d", "dgps", "pgps" by the
    schema, but nothing is enforced).
    """

    lat: float
    lon: float
    ele: Optional[float] = None
    time: Optional[datetime] = None
    magvar: Optional[float] = None
    geoidheight: Optional[float] = None
    name: Optional[str] = None
    cmt: Optional[str] = None
    desc: Optional[str] = None
    src: Optional[str] = None
    link: list[LinkType] = field(default_factory=list)
    sym: Optional[str] = None
    type: Optional[str] = None
    fix: Optional[str] = None
    sat: Optional[int] = None
    hdop: Optional[float] = None
    vdop: Optional[float] = None
    pdop: Optional[float] = None
    ageofdgpsdata: Optional[float] = None
    dgpsid: list[int] = field(default_factory=list)

    @classmethod
    def from_element(cls, elem: ET.Element) -> WptType:
        lat = attr_float(elem, "lat")
        lon = attr_float(elem, "lon")
        if settings.strict_coordinates:
            _check_range(local_name(elem.tag), lat, lon)
        return cls(lat=lat, lon=lon, **_WPT.decode(elem))

    def to_element(self, tag: str = "wpt") -> ET.Element:
        elem = ET.Element(tag)
        set_attr(elem, "lat", float(self.lat))
        set_attr(elem, "lon", float(self.lon))
        _WPT.encode(elem, self)
        return elem

    def geom(self, layout: Layout) -> Point:
        """Project onto a point: X=lon, Y=lat, Z=ele, M=time.

        Dimensions the waypoint does not carry project as ``0.0``.
        """
        coords = [self.lon, self.lat]
        if layout.z_index is not None:
            coords.append(self.ele if self.ele is not None else 0.0)
        if layout.m_index is not None:
            coords.append(time_to_m(self.time) if self.time is not None else 0.0)
        return Point(layout, coords)

    @classmethod
    def from_geom(cls, point: Point) -> WptType:
        """Build a waypoint from a point; its layout decides ele and time."""
        wpt = cls(lat=point.y, lon=point.x)
        if point.layout.z_index is not None:
            wpt.ele = point.z
        if point.layout.m_index is not None:
            wpt.time = m_to_time(point.m)
        return wpt


def new_wpt_type(point: Point) -> WptType:
    return WptType.from_geom(point)


def _check_range(tag: str, lat: float, lon: float) -> None:
    if -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0:
        return
    logger.warning(f"Rejecting <{tag}> with out-of-range position lat={lat} lon={lon}")
    raise ParseError(f"<{tag}> position out of range: lat={lat} lon={lon}", tag=tag)


_WPT = ElementSchema(
    Field("ele", "ele", FLOAT),
    Field("time", "time", TIME),
    Field("magvar", "magvar", FLOAT),
    Field("geoidheight", "geoidheight", FLOAT),
    Field("name", "name", TEXT),
    Field("cmt", "cmt", TEXT),
    Field("desc", "desc", TEXT),
    Field("src", "src", TEXT),
    Field("link", "link", NestedCodec(LinkType), repeated=True),
    Field("sym", "sym", TEXT),
    Field("type", "type", TEXT),
    Field("fix", "fix", TEXT),
    Field("sat", "sat", INT),
    Field("hdop", "hdop", FLOAT),
    Field("vdop", "vdop", FLOAT),
    Field("pdop", "pdop", FLOAT),
    Field("ageofdgpsdata", "ageofdgpsdata", FLOAT),
    Field("dgpsid", "dgpsid", INT, repeated=True),
)
