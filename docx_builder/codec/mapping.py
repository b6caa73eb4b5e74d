"""Declarative binding between dataclasses and XML elements.

A codec-bound type is a dataclass deriving from :class:`XmlElement`. It sets
``TAG`` and describes each field with one of the helpers below; the field
metadata forms the type's manifest, which the generic :func:`write_element`
and :func:`read_element` walk in declaration order::

    @dataclass(slots=True)
    class GridColumn(XmlElement):
        TAG = "w:gridCol"

        width: Optional[int] = attr("w:w", int)

Cardinalities: ``attr`` and ``flatten_text`` are zero-or-one scalar values,
``child`` is zero-or-one (or exactly one with ``required=True``) nested
element, ``children`` is zero-or-more nested elements of one or several
types, and ``text_content`` is the element's own text node.
"""
from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass, field, fields
from enum import Enum
from functools import lru_cache
from typing import Any, ClassVar, Dict, Optional, Tuple, Type, TypeVar, Union
from xml.etree import ElementTree as ET

from docx_builder.codec.reader import XmlReader
from docx_builder.codec.writer import TextSink, XmlWriter
from docx_builder.errors import XmlSchemaError
from docx_builder.utils.logger import get_logger
from docx_builder.utils.xml_utils import local_name, qualify, tag_matches

LOGGER = get_logger(__name__)

XML_FIELD = "xml"

T = TypeVar("T", bound="XmlElement")


@dataclass(frozen=True)
class Attr:
    name: str
    kind: type = str
    required: bool = False


@dataclass(frozen=True)
class Child:
    kind: type
    required: bool = False


@dataclass(frozen=True)
class Children:
    kinds: Tuple[type, ...]


@dataclass(frozen=True)
class FlattenText:
    tag: str


@dataclass(frozen=True)
class TextContent:
    pass


FieldSpec = Union[Attr, Child, Children, FlattenText, TextContent]


def attr(name: str, kind: type = str, *, required: bool = False, default: Any = None) -> Any:
    """Bind a field to the attribute ``name``; ``None`` suppresses it."""
    metadata = {XML_FIELD: Attr(name, kind, required)}
    if required:
        return field(metadata=metadata)
    return field(default=default, metadata=metadata)


def child(kind: type, *, required: bool = False) -> Any:
    """Bind a field to a nested element of type ``kind``."""
    metadata = {XML_FIELD: Child(kind, required)}
    if required:
        return field(default_factory=kind, metadata=metadata)
    return field(default=None, metadata=metadata)


def children(*kinds: type) -> Any:
    """Bind a list field to every nested element matching one of ``kinds``."""
    return field(default_factory=list, metadata={XML_FIELD: Children(tuple(kinds))})


def flatten_text(tag: str, default: Optional[str] = None) -> Any:
    """Bind a field to a ``<tag>text</tag>`` child."""
    return field(default=default, metadata={XML_FIELD: FlattenText(tag)})


def text_content(default: str = "") -> Any:
    return field(default=default, metadata={XML_FIELD: TextContent()})


class XmlElement:
    """Base class for every type that maps onto one XML element."""

    __slots__ = ()

    TAG: ClassVar[str] = ""
    # Namespace for unprefixed names of this element and its text children.
    NAMESPACE: ClassVar[Optional[str]] = None
    # ``xmlns`` declarations written on the start tag of a root part.
    NAMESPACES: ClassVar[Tuple[Tuple[str, str], ...]] = ()
    # Root parts are preceded by the XML declaration.
    ROOT: ClassVar[bool] = False

    def to_writer(self, writer: XmlWriter) -> None:
        write_element(self, writer)

    def write_to(self, sink: TextSink) -> None:
        self.to_writer(XmlWriter(sink))

    def to_string(self) -> str:
        buffer = io.StringIO()
        self.write_to(buffer)
        return buffer.getvalue()

    def to_bytes(self) -> bytes:
        return self.to_string().encode("utf-8")

    @classmethod
    def from_element(cls: Type[T], element: ET.Element) -> T:
        return read_element(cls, element)

    @classmethod
    def from_str(cls: Type[T], text: Union[str, bytes]) -> T:
        reader = XmlReader(text)
        root = reader.read_till_element_start(cls.qualified_tag())
        return read_element(cls, root)

    @classmethod
    def from_bytes(cls: Type[T], data: bytes) -> T:
        return cls.from_str(data)

    @classmethod
    def qualified_tag(cls) -> str:
        return qualify(cls.TAG, cls.NAMESPACE)


@lru_cache(maxsize=None)
def manifest(cls: type) -> Tuple[Tuple[str, FieldSpec], ...]:
    """Return ``(field name, spec)`` pairs in declaration order."""
    return tuple((f.name, f.metadata[XML_FIELD]) for f in fields(cls) if XML_FIELD in f.metadata)


# ----------------------------------------------------------------------
# Values


_TRUE_TOKENS = frozenset({"true", "1", "on"})
_FALSE_TOKENS = frozenset({"false", "0", "off"})
_INTEGER = re.compile(r"[+-]?[0-9]+")


def encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def decode_value(raw: str, kind: type, where: str) -> Any:
    if kind is bool:
        token = raw.strip().lower()
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
        raise XmlSchemaError("Invalid boolean value", details=f"{where}={raw!r}", element=where)
    if kind is int:
        if not _INTEGER.fullmatch(raw):
            raise XmlSchemaError("Invalid integer value", details=f"{where}={raw!r}", element=where)
        return int(raw)
    if isinstance(kind, type) and issubclass(kind, Enum):
        try:
            return kind(raw)
        except ValueError:
            raise XmlSchemaError("Invalid enumeration value", details=f"{where}={raw!r}", element=where) from None
    return raw


# ----------------------------------------------------------------------
# Writing


def _has_content(value: XmlElement, specs: Tuple[Tuple[str, FieldSpec], ...]) -> bool:
    for name, spec in specs:
        current = getattr(value, name)
        if isinstance(spec, (Child, FlattenText)) and current is not None:
            return True
        if isinstance(spec, (Children, TextContent)) and current:
            return True
    return False


def write_element(value: XmlElement, writer: XmlWriter) -> None:
    """Record ``value`` and its subtree through ``writer``."""
    cls = type(value)
    specs = manifest(cls)

    if cls.ROOT:
        LOGGER.debug("[%s] Started writing.", cls.__name__)
        writer.write_declaration()

    writer.write_element_start(cls.TAG)
    for name, uri in cls.NAMESPACES:
        writer.write_attribute(name, uri)
    for name, spec in specs:
        if isinstance(spec, Attr):
            current = getattr(value, name)
            if current is not None:
                writer.write_attribute(spec.name, encode_value(current))

    if not _has_content(value, specs):
        writer.write_element_end_empty()
    else:
        writer.write_element_end_open()
        for name, spec in specs:
            current = getattr(value, name)
            if isinstance(spec, Child):
                if current is not None:
                    current.to_writer(writer)
            elif isinstance(spec, Children):
                for item in current:
                    item.to_writer(writer)
            elif isinstance(spec, FlattenText):
                if current is not None:
                    writer.write_flatten_text(spec.tag, current)
            elif isinstance(spec, TextContent):
                if current:
                    writer.write_text(current)
        writer.write_element_end_close(cls.TAG)

    if cls.ROOT:
        LOGGER.debug("[%s] Finished writing.", cls.__name__)


# ----------------------------------------------------------------------
# Reading


def _children_index(kinds: Tuple[type, ...]) -> Dict[str, type]:
    return {kind.qualified_tag(): kind for kind in kinds}


def _kind_for(tag: str, index: Dict[str, type]) -> Optional[type]:
    for expected, kind in index.items():
        if tag_matches(tag, expected):
            return kind
    return None


def read_element(cls: Type[T], element: ET.Element) -> T:
    """Rebuild an instance of ``cls`` from ``element`` and its subtree."""
    expected_tag = cls.qualified_tag()
    if not tag_matches(element.tag, expected_tag):
        raise XmlSchemaError(
            "Unexpected element",
            details=f"expected {cls.TAG}, found {local_name(element.tag)}",
            element=element.tag,
        )

    values: Dict[str, Any] = {}
    recognized = []
    for name, spec in manifest(cls):
        if isinstance(spec, Attr):
            raw = XmlReader.attribute(element, qualify(spec.name))
            if raw is None:
                if spec.required:
                    raise XmlSchemaError(
                        "Missing required attribute", details=f"{cls.TAG}@{spec.name}", element=cls.TAG
                    )
                values[name] = None
            else:
                values[name] = decode_value(raw, spec.kind, f"{cls.TAG}@{spec.name}")
        elif isinstance(spec, Child):
            tag = spec.kind.qualified_tag()
            recognized.append(tag)
            found = XmlReader.find_child(element, tag)
            if found is None:
                if spec.required:
                    raise XmlSchemaError(
                        "Missing required element", details=f"{cls.TAG}/{spec.kind.TAG}", element=cls.TAG
                    )
                values[name] = None
            else:
                values[name] = read_element(spec.kind, found)
        elif isinstance(spec, Children):
            index = _children_index(spec.kinds)
            recognized.extend(index)
            items = []
            for node in XmlReader.iter_children(element):
                kind = _kind_for(node.tag, index)
                if kind is not None:
                    items.append(read_element(kind, node))
            values[name] = items
        elif isinstance(spec, FlattenText):
            tag = qualify(spec.tag, cls.NAMESPACE)
            recognized.append(tag)
            found = XmlReader.find_child(element, tag)
            values[name] = None if found is None else XmlReader.text(found)
        elif isinstance(spec, TextContent):
            values[name] = XmlReader.text(element)

    if LOGGER.isEnabledFor(logging.DEBUG):
        for node in XmlReader.iter_children(element):
            if not any(tag_matches(node.tag, tag) for tag in recognized):
                LOGGER.debug("Skipping unsupported element in %s: %s", cls.TAG, local_name(node.tag))

    return cls(**values)
