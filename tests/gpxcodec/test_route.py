"""Tests for the route model: rtept order, metadata, LineString projection."""

from datetime import datetime, timezone

import pytest

from conftest import decode, encode
from gpxcodec import Layout, LineString, RteType, WptType, new_rte_type

T1 = datetime(2001, 6, 2, 0, 18, 15, tzinfo=timezone.utc)
T2 = datetime(2001, 11, 7, 23, 53, 41, tzinfo=timezone.utc)

XY_ROUTE = (
    "<rte>\n"
    '\t<rtept lat="42.43095" lon="-71.107628"></rtept>\n'
    '\t<rtept lat="42.43124" lon="-71.109236"></rtept>\n'
    "</rte>"
)

XYZ_ROUTE = (
    "<rte>\n"
    '\t<rtept lat="42.43095" lon="-71.107628">\n'
    "\t\t<ele>23.4696</ele>\n"
    "\t</rtept>\n"
    '\t<rtept lat="42.43124" lon="-71.109236">\n'
    "\t\t<ele>26.56189</ele>\n"
    "\t</rtept>\n"
    "</rte>"
)

XYM_ROUTE = (
    "<rte>\n"
    '\t<rtept lat="42.43095" lon="-71.107628">\n'
    "\t\t<time>2001-06-02T00:18:15Z</time>\n"
    "\t</rtept>\n"
    '\t<rtept lat="42.43124" lon="-71.109236">\n'
    "\t\t<time>2001-11-07T23:53:41Z</time>\n"
    "\t</rtept>\n"
    "</rte>"
)

XYZM_ROUTE = (
    "<rte>\n"
    '\t<rtept lat="42.43095" lon="-71.107628">\n'
    "\t\t<ele>23.4696</ele>\n"
    "\t\t<time>2001-06-02T00:18:15Z</time>\n"
    "\t</rtept>\n"
    '\t<rtept lat="42.43124" lon="-71.109236">\n'
    "\t\t<ele>26.56189</ele>\n"
    "\t\t<time>2001-11-07T23:53:41Z</time>\n"
    "\t</rtept>\n"
    "</rte>"
)

BELLEVUE = (
    "<rte>\n"
    "\t<name>BELLEVUE</name>\n"
    "\t<desc>Bike Loop Bellevue</desc>\n"
    "\t<number>1</number>\n"
    '\t<rtept lat="42.43095" lon="-71.107628">\n'
    "\t\t<ele>23.4696</ele>\n"
    "\t\t<time>2001-06-02T00:18:15Z</time>\n"
    "\t\t<name>BELLEVUE</name>\n"
    "\t\t<cmt>BELLEVUE</cmt>\n"
    "\t\t<desc>Bellevue Parking Lot</desc>\n"
    "\t\t<sym>Parking Area</sym>\n"
    "\t\t<type>Parking</type>\n"
    "\t</rtept>\n"
    '\t<rtept lat="42.43124" lon="-71.109236">\n'
    "\t\t<ele>26.56189</ele>\n"
    "\t\t<time>2001-11-07T23:53:41Z</time>\n"
    "\t\t<name>GATE6</name>\n"
    "\t\t<desc>Gate 6</desc>\n"
    "\t\t<sym>Trailhead</sym>\n"
    "\t\t<type>Trail Head</type>\n"
    "\t</rtept>\n"
    "</rte>"
)

XYZM_COORDS = [
    [-71.107628, 42.43095, 23.4696, 991441095],
    [-71.109236, 42.43124, 26.56189, 1005177221],
]


@pytest.fixture
def bellevue() -> RteType:
    return RteType(
        name="BELLEVUE",
        desc="Bike Loop Bellevue",
        number=1,
        rtept=[
            WptType(
                lat=42.43095, lon=-71.107628, ele=23.4696, time=T1,
                name="BELLEVUE", cmt="BELLEVUE", desc="Bellevue Parking Lot",
                sym="Parking Area", type="Parking",
            ),
            WptType(
                lat=42.43124, lon=-71.109236, ele=26.56189, time=T2,
                name="GATE6", desc="Gate 6", sym="Trailhead", type="Trail Head",
            ),
        ],
    )


@pytest.mark.unit
class TestRouteDecode:
    """Route XML to RteType."""

    def test_points_in_order(self):
        rte = decode(RteType, XY_ROUTE)
        assert rte == RteType(rtept=[
            WptType(lat=42.43095, lon=-71.107628),
            WptType(lat=42.43124, lon=-71.109236),
        ])

    def test_elevation_and_time(self):
        rte = decode(RteType, XYZM_ROUTE)
        assert [p.ele for p in rte.rtept] == [23.4696, 26.56189]
        assert [p.time for p in rte.rtept] == [T1, T2]

    def test_route_metadata(self, bellevue):
        assert decode(RteType, BELLEVUE) == bellevue

    def test_empty_route(self):
        assert decode(RteType, "<rte></rte>") == RteType()


@pytest.mark.unit
class TestRouteEncode:
    """RteType to indented XML."""

    @pytest.mark.parametrize("data", [XY_ROUTE, XYZ_ROUTE, XYM_ROUTE, XYZM_ROUTE, BELLEVUE])
    def test_reencode_matches_input(self, data):
        assert encode(decode(RteType, data), "rte").split("\n") == data.split("\n")

    def test_metadata_before_points(self, bellevue):
        assert encode(bellevue, "rte") == BELLEVUE


@pytest.mark.unit
class TestRouteGeometry:
    """RteType.geom() and new_rte_type()."""

    @pytest.mark.parametrize(
        "data, layout, coords",
        [
            (XY_ROUTE, Layout.XY, [[-71.107628, 42.43095], [-71.109236, 42.43124]]),
            (XYZ_ROUTE, Layout.XYZ, [[-71.107628, 42.43095, 23.4696], [-71.109236, 42.43124, 26.56189]]),
            (XYM_ROUTE, Layout.XYM, [[-71.107628, 42.43095, 991441095], [-71.109236, 42.43124, 1005177221]]),
            (XYZM_ROUTE, Layout.XYZM, XYZM_COORDS),
        ],
    )
    def test_projection(self, data, layout, coords):
        assert decode(RteType, data).geom(layout) == LineString(layout, coords)

    @pytest.mark.parametrize(
        "data, layout",
        [
            (XY_ROUTE, Layout.XY),
            (XYZ_ROUTE, Layout.XYZ),
            (XYM_ROUTE, Layout.XYM),
            (XYZM_ROUTE, Layout.XYZM),
        ],
    )
    def test_new_from_line_string(self, data, layout):
        rte = decode(RteType, data)
        assert new_rte_type(rte.geom(layout)) == rte

    def test_bellevue_xyzm(self, bellevue):
        """Full route projects elevation and time of each point."""
        g = bellevue.geom(Layout.XYZM)
        assert g.layout is Layout.XYZM
        assert g.coords == XYZM_COORDS

    def test_new_route_keeps_only_positions(self, bellevue):
        rte = RteType.from_geom(bellevue.geom(Layout.XYZM))
        assert rte.name is None
        assert [(p.lat, p.lon, p.ele, p.time) for p in rte.rtept] == [
            (p.lat, p.lon, p.ele, p.time) for p in bellevue.rtept
        ]

    def test_empty_route_projects_empty(self):
        g = RteType().geom(Layout.XYZ)
        assert g == LineString(Layout.XYZ, [])
        assert len(g) == 0
