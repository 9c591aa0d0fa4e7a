"""Shared helpers for gpxcodec tests."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from gpxcodec.xmlcodec import serialize

TESTDATA = Path(__file__).parent / "testdata"


def decode(cls, data: str):
    """Decode a single element snippet into a model instance."""
    return cls.from_element(ET.fromstring(data))


def encode(obj, tag: str) -> str:
    """Encode a model instance as tab-indented XML text."""
    return serialize(obj.to_element(tag), "", "\t")


@pytest.fixture
def testdata() -> Path:
    return TESTDATA
