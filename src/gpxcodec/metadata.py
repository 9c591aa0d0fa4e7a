"""Document metadata types: link, person, email, copyright, bounds."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from gpxcodec.errors import ParseError
from gpxcodec.xmlcodec import (
    TEXT,
    TIME,
    ElementSchema,
    Field,
    NestedCodec,
    ScalarCodec,
    attr_float,
    attr_text,
    set_attr,
)

_LEADING_DIGITS = re.compile(r"[0-9]+")


def parse_year(text: str) -> int:
    """Read the leading run of digits as a year.

    Real-world producers append zone noise to ``<year>`` (``2019Z``,
    ``2011+05:00``, ``2010-07:00``); anything after the digits is ignored.

    Raises:
        ParseError: If the text does not start with a digit, or the digit
            run is too long to convert.
    """
    match = _LEADING_DIGITS.match(text.strip())
    if match is None:
        raise ParseError(f"invalid year {text!r}", tag="year")
    try:
        return int(match.group())
    except ValueError as e:
        raise ParseError(f"year has too many digits ({len(match.group())})", tag="year") from e


YEAR = ScalarCodec(parse_year, str)


@dataclass
class LinkType:
    """A hyperlink with optional text and MIME type."""

    href: str
    text: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_element(cls, elem: ET.Element) -> LinkType:
        return cls(href=attr_text(elem, "href", required=True), **_LINK.decode(elem))

    def to_element(self, tag: str = "link") -> ET.Element:
        elem = ET.Element(tag)
        set_attr(elem, "href", self.href)
        _LINK.encode(elem, self)
        return elem


@dataclass
class EmailType:
    """An email address split into ``id`` and ``domain``."""

    id: str = ""
    domain: str = ""

    @classmethod
    def from_element(cls, elem: ET.Element) -> EmailType:
        return cls(id=elem.get("id", ""), domain=elem.get("domain", ""))

    def to_element(self, tag: str = "email") -> ET.Element:
        elem = ET.Element(tag)
        set_attr(elem, "id", self.id)
        set_attr(elem, "domain", self.domain)
        return elem

    def __str__(self) -> str:
        return f"{self.id}@{self.domain}"


@dataclass
class PersonType:
    name: Optional[str] = None
    email: Optional[EmailType] = None
    link: Optional[LinkType] = None

    @classmethod
    def from_element(cls, elem: ET.Element) -> PersonType:
        return cls(**_PERSON.decode(elem))

    def to_element(self, tag: str = "author") -> ET.Element:
        elem = ET.Element(tag)
        _PERSON.encode(elem, self)
        return elem


@dataclass
class CopyrightType:
    """Copyright holder, year and license URL."""

    author: str = ""
    year: Optional[int] = None
    license: Optional[str] = None

    @classmethod
    def from_element(cls, elem: ET.Element) -> CopyrightType:
        return cls(author=elem.get("author", ""), **_COPYRIGHT.decode(elem))

    def to_element(self, tag: str = "copyright") -> ET.Element:
        elem = ET.Element(tag)
        set_attr(elem, "author", self.author)
        _COPYRIGHT.encode(elem, self)
        return elem


@dataclass
class BoundsType:
    minlat: float
    minlon: float
    maxlat: float
    maxlon: float

    @classmethod
    def from_element(cls, elem: ET.Element) -> BoundsType:
        return cls(
            minlat=attr_float(elem, "minlat"),
            minlon=attr_float(elem, "minlon"),
            maxlat=attr_float(elem, "maxlat"),
            maxlon=attr_float(elem, "maxlon"),
        )

    def to_element(self, tag: str = "bounds") -> ET.Element:
        elem = ET.Element(tag)
        for name in ("minlat", "minlon", "maxlat", "maxlon"):
            set_attr(elem, name, float(getattr(self, name)))
        return elem


@dataclass
class MetadataType:
    """Information about the GPX file itself."""

    name: Optional[str] = None
    desc: Optional[str] = None
    author: Optional[PersonType] = None
    copyright: Optional[CopyrightType] = None
    link: list[LinkType] = field(default_factory=list)
    time: Optional[datetime] = None
    keywords: Optional[str] = None
    bounds: Optional[BoundsType] = None

    @classmethod
    def from_element(cls, elem: ET.Element) -> MetadataType:
        return cls(**_METADATA.decode(elem))

    def to_element(self, tag: str = "metadata") -> ET.Element:
        elem = ET.Element(tag)
        _METADATA.encode(elem, self)
        return elem


_LINK = ElementSchema(
    Field("text", "text", TEXT),
    Field("type", "type", TEXT),
)

_PERSON = ElementSchema(
    Field("name", "name", TEXT),
    Field("email", "email", NestedCodec(EmailType)),
    Field("link", "link", NestedCodec(LinkType)),
)

_COPYRIGHT = ElementSchema(
    Field("year", "year", YEAR),
    Field("license", "license", TEXT),
)

_METADATA = ElementSchema(
    Field("name", "name", TEXT),
    Field("desc", "desc", TEXT),
    Field("author", "author", NestedCodec(PersonType)),
    Field("copyright", "copyright", NestedCodec(CopyrightType)),
    Field("link", "link", NestedCodec(LinkType), repeated=True),
    Field("time", "time", TIME),
    Field("keywords", "keywords", TEXT),
    Field("bounds", "bounds", NestedCodec(BoundsType)),
)
