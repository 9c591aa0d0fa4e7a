"""Minimal geometry containers for projecting GPX entities.

Coordinates follow GeoJSON order: ``[lng, lat, ...]``. The ``Layout`` says
which extra dimensions are present:

    XY    [x, y]
    XYZ   [x, y, z]          z = elevation
    XYM   [x, y, m]          m = time, seconds since the epoch
    XYZM  [x, y, z, m]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Layout(Enum):
    XY = "XY"
    XYZ = "XYZ"
    XYM = "XYM"
    XYZM = "XYZM"

    @property
    def stride(self) -> int:
        """Number of values in one coordinate."""
        return len(self.value)

    @property
    def z_index(self) -> int | None:
        return 2 if "Z" in self.value else None

    @property
    def m_index(self) -> int | None:
        if "M" not in self.value:
            return None
        return self.stride - 1


def _check_coord(layout: Layout, coord: list[float]) -> None:
    if len(coord) != layout.stride:
        raise ValueError(
            f"{layout.value} coordinate needs {layout.stride} values, got {len(coord)}"
        )


@dataclass
class Point:
    """A single coordinate."""

    layout: Layout
    coords: list[float]

    def __post_init__(self) -> None:
        _check_coord(self.layout, self.coords)

    @property
    def x(self) -> float:
        return self.coords[0]

    @property
    def y(self) -> float:
        return self.coords[1]

    @property
    def z(self) -> float | None:
        i = self.layout.z_index
        return None if i is None else self.coords[i]

    @property
    def m(self) -> float | None:
        i = self.layout.m_index
        return None if i is None else self.coords[i]


@dataclass
class LineString:
    """An ordered sequence of coordinates."""

    layout: Layout
    coords: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        for coord in self.coords:
            _check_coord(self.layout, coord)

    def __len__(self) -> int:
        return len(self.coords)

    def points(self) -> list[Point]:
        return [Point(self.layout, list(c)) for c in self.coords]


@dataclass
class MultiLineString:
    """An ordered sequence of disjoint line strings."""

    layout: Layout
    coords: list[list[list[float]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        for line in self.coords:
            for coord in line:
                _check_coord(self.layout, coord)

    def __len__(self) -> int:
        return len(self.coords)

    def line_strings(self) -> list[LineString]:
        return [LineString(self.layout, [list(c) for c in line]) for line in self.coords]
