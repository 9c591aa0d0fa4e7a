"""GPX document model with XML round-tripping and geometry projection.

Reads and writes GPX with xml.etree.ElementTree. Waypoints, routes and
tracks project onto ``Point``/``LineString``/``MultiLineString`` geometries
with elevation as Z and time as M.
"""

from gpxcodec.document import GPX, parse, read
from gpxcodec.errors import EncodeError, GPXError, ParseError
from gpxcodec.geometry import Layout, LineString, MultiLineString, Point
from gpxcodec.metadata import (
    BoundsType,
    CopyrightType,
    EmailType,
    LinkType,
    MetadataType,
    PersonType,
    parse_year,
)
from gpxcodec.route import RteType, new_rte_type
from gpxcodec.timecodec import format_time, m_to_time, parse_time, time_to_m
from gpxcodec.track import TrkSegType, TrkType, new_trk_type
from gpxcodec.waypoint import WptType, new_wpt_type

__version__ = "0.1.0"
__all__ = [
    "GPX", "read", "parse",
    "GPXError", "ParseError", "EncodeError",
    "Layout", "Point", "LineString", "MultiLineString",
    "WptType", "RteType", "TrkType", "TrkSegType",
    "new_wpt_type", "new_rte_type", "new_trk_type",
    "MetadataType", "PersonType", "EmailType", "LinkType",
    "CopyrightType", "BoundsType", "parse_year",
    "time_to_m", "m_to_time", "parse_time", "format_time",
]
