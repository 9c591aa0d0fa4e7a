"""Glue between GPX model objects and xml.etree.ElementTree.

Each model type declares an ``ElementSchema``: an ordered table of its child
elements. The same table drives decoding (children in document order, matched
on local name so GPX 1.0 and 1.1 namespaces both load) and encoding (children
written in table order, ``None`` values and empty lists omitted).

Nested types provide ``from_element(elem)`` and ``to_element(tag)``.
"""

from __future__ import annotations

import io
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Callable

from loguru import logger

from gpxcodec.errors import EncodeError, ParseError
from gpxcodec.timecodec import format_time, parse_time


def local_name(tag: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix from a tag."""
    if tag[:1] == "{":
        return tag.split("}", 1)[1]
    return tag


# ---------------------------------------------------------------------------
# Scalar text conversions
# ---------------------------------------------------------------------------

def format_float(value: float) -> str:
    """Shortest round-trip text; integral values lose the ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def parse_float(text: str) -> float:
    return float(text.strip())


def parse_int(text: str) -> int:
    return int(text.strip())


class ScalarCodec:
    """Element whose text content is a single value."""

    def __init__(
        self,
        from_text: Callable[[str], Any],
        to_text: Callable[[Any], str],
    ) -> None:
        self.from_text = from_text
        self.to_text = to_text

    def decode(self, elem: ET.Element) -> Any:
        text = elem.text or ""
        try:
            return self.from_text(text)
        except ValueError as e:
            tag = local_name(elem.tag)
            raise ParseError(f"invalid <{tag}> value {text!r}", tag=tag) from e

    def encode(self, parent: ET.Element, tag: str, value: Any) -> None:
        ET.SubElement(parent, tag).text = self.to_text(value)


class NestedCodec:
    """Element decoded into a model type with its own schema."""

    def __init__(self, cls: type) -> None:
        self.cls = cls

    def decode(self, elem: ET.Element) -> Any:
        return self.cls.from_element(elem)

    def encode(self, parent: ET.Element, tag: str, value: Any) -> None:
        parent.append(value.to_element(tag))


TEXT = ScalarCodec(str, str)
FLOAT = ScalarCodec(parse_float, format_float)
INT = ScalarCodec(parse_int, str)
TIME = ScalarCodec(parse_time, format_time)


@dataclass(frozen=True)
class Field:
    """One child element of a model type.

    Attributes:
        tag: Element local name.
        name: Dataclass attribute it maps to.
        codec: ScalarCodec or NestedCodec.
        repeated: True for zero-or-more elements collected into a list.
    """

    tag: str
    name: str
    codec: ScalarCodec | NestedCodec
    repeated: bool = False


class ElementSchema:
    """Ordered child-element table for one model type."""

    def __init__(self, *fields: Field) -> None:
        self.fields = fields
        self._by_tag = {f.tag: f for f in fields}

    def decode(self, elem: ET.Element) -> dict[str, Any]:
        """Collect child values into a draft mapping of attribute -> value.

        Repeated elements append in document order; a repeated singular
        element keeps its last value.
        """
        draft: dict[str, Any] = {f.name: [] for f in self.fields if f.repeated}
        for child in elem:
            if not isinstance(child.tag, str):
                continue
            tag = local_name(child.tag)
            f = self._by_tag.get(tag)
            if f is None:
                logger.debug(f"Skipping unsupported <{tag}> in <{local_name(elem.tag)}>")
                continue
            value = f.codec.decode(child)
            if f.repeated:
                draft[f.name].append(value)
            else:
                draft[f.name] = value
        return draft

    def encode(self, parent: ET.Element, obj: Any) -> None:
        for f in self.fields:
            value = getattr(obj, f.name)
            if f.repeated:
                for item in value:
                    f.codec.encode(parent, f.tag, item)
            elif value is not None:
                f.codec.encode(parent, f.tag, value)


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------

def attr_text(elem: ET.Element, name: str, required: bool = False) -> str | None:
    value = elem.get(name)
    if value is None and required:
        tag = local_name(elem.tag)
        raise ParseError(f"<{tag}> is missing required attribute {name!r}", tag=tag)
    return value


def attr_float(elem: ET.Element, name: str, required: bool = True) -> float | None:
    value = attr_text(elem, name, required)
    if value is None:
        return None
    try:
        return parse_float(value)
    except ValueError as e:
        tag = local_name(elem.tag)
        raise ParseError(f"invalid <{tag}> {name}={value!r}", tag=tag) from e


def set_attr(elem: ET.Element, name: str, value: Any) -> None:
    """Set an attribute, skipping ``None`` and formatting floats."""
    if value is None:
        return
    if isinstance(value, float):
        value = format_float(value)
    elem.set(name, str(value))


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

def parse_xml(data: str | bytes) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise ParseError(f"malformed XML: {e}") from e


def read_xml(source: Any) -> ET.Element:
    """Parse a readable binary or text stream."""
    try:
        return ET.parse(source).getroot()
    except ET.ParseError as e:
        raise ParseError(f"malformed XML: {e}") from e


# Characters XML 1.0 cannot carry, written as U+FFFD
_ILLEGAL_XML = re.compile("[^\t\n\r\x20-\U0000d7ff\U0000e000-\U0000fffd\U00010000-\U0010ffff]")

_TEXT_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", "\r": "&#13;"})
_ATTR_ESCAPES = str.maketrans({
    "&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;",
    "\r": "&#13;", "\n": "&#10;", "\t": "&#9;",
})


def escape_text(text: str) -> str:
    """Escape element text so a parser reads back the same characters."""
    return _ILLEGAL_XML.sub("\ufffd", text).translate(_TEXT_ESCAPES)


def escape_attr(value: str) -> str:
    return _ILLEGAL_XML.sub("\ufffd", value).translate(_ATTR_ESCAPES)


def _write_element(
    elem: ET.Element, out: list[str], prefix: str, space: str, level: int
) -> None:
    tag = elem.tag
    attrs = "".join(f' {k}="{escape_attr(str(v))}"' for k, v in elem.items())
    out.append(f"<{tag}{attrs}>")
    if len(elem):
        for child in elem:
            if prefix or space:
                out.append("\n" + prefix + space * (level + 1))
            _write_element(child, out, prefix, space, level + 1)
        if prefix or space:
            out.append("\n" + prefix + space * level)
    elif elem.text:
        out.append(escape_text(elem.text))
    out.append(f"</{tag}>")


def serialize(elem: ET.Element, prefix: str = "", space: str = "") -> str:
    """Serialize a model-built tree without an XML declaration.

    Each line starts with ``prefix`` followed by one ``space`` per nesting
    level; with both empty nothing is added between elements. Empty
    elements are written as ``<tag></tag>``. Only element text of leaf
    elements is written, which is all the model trees carry.
    """
    out = [prefix]
    _write_element(elem, out, prefix, space, 0)
    return "".join(out)


def write_text(sink: Any, text: str) -> None:
    """Write to a text stream as-is, or to a binary stream as UTF-8."""
    try:
        if isinstance(sink, io.TextIOBase):
            sink.write(text)
        else:
            sink.write(text.encode("utf-8"))
    except (OSError, ValueError) as e:
        raise EncodeError(f"failed to write GPX: {e}") from e
