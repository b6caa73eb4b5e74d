"""Helper functions to work with qualified names and XML parsing."""
from __future__ import annotations

from typing import Optional, Union
from xml.etree import ElementTree as ET

from docx_builder.errors import XmlSchemaError, XmlSyntaxError
from docx_builder.schema import PREFIXES


def qualify(name: str, default_namespace: Optional[str] = None) -> str:
    """Turn ``w:tbl`` into ElementTree's ``{uri}tbl`` form.

    Unprefixed names land in ``default_namespace`` when one is given, which is
    how elements such as ``Properties`` resolve; unprefixed attributes are
    passed with no default and stay local.
    """
    if ":" not in name:
        if default_namespace:
            return f"{{{default_namespace}}}{name}"
        return name
    prefix, local = name.split(":", 1)
    try:
        namespace = PREFIXES[prefix]
    except KeyError:
        raise XmlSchemaError("Unknown namespace prefix", details=name) from None
    return f"{{{namespace}}}{local}"


def local_name(tag: str) -> str:
    return tag.split("}", 1)[-1]


def tag_matches(tag: str, expected: str) -> bool:
    """Compare a parsed tag with a qualified name, URI aware.

    Elements carrying no namespace at all still match on their local name so
    that bare legacy parts remain readable.
    """
    if tag == expected:
        return True
    return not tag.startswith("{") and tag == local_name(expected)


def parse_xml(data: Union[str, bytes]) -> ET.Element:
    """Parse one XML document and return its root element."""
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        raise XmlSyntaxError("Malformed XML", details=str(exc), position=exc.position) from exc
