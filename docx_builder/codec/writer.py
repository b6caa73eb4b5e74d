"""Low level XML emitter used by every codec-bound type."""
from __future__ import annotations

import re
from typing import Protocol
from xml.sax.saxutils import escape

from docx_builder.errors import XmlIOError, XmlSchemaError
from docx_builder.schema import SCHEMA_XML

# Characters XML 1.0 cannot carry, not even as character references.
_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")
_TEXT_ENTITIES = {"\r": "&#13;"}
_ATTRIBUTE_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


def _check_chars(value: str) -> str:
    if _INVALID_CHARS.search(value):
        raise XmlSchemaError("Character not allowed in XML", details=repr(value))
    return value


class TextSink(Protocol):
    def write(self, text: str) -> object:  # pragma: no cover
        ...


class XmlWriter:
    """Writes elements as compact XML text, without indentation.

    Callers drive the writer explicitly: ``write_element_start`` followed by
    any number of ``write_attribute`` calls, then either
    ``write_element_end_empty`` or ``write_element_end_open`` and, after the
    children, ``write_element_end_close``.
    """

    def __init__(self, sink: TextSink, *, declaration: bool = True) -> None:
        self.inner = sink
        self.declaration = declaration

    def write_declaration(self) -> None:
        if self.declaration:
            self._write(SCHEMA_XML)

    def write_element_start(self, tag: str) -> None:
        self._write(f"<{tag}")

    def write_attribute(self, name: str, value: str) -> None:
        value = escape(_check_chars(value), _ATTRIBUTE_ENTITIES)
        self._write(f' {name}="{value}"')

    def write_element_end_empty(self) -> None:
        self._write("/>")

    def write_element_end_open(self) -> None:
        self._write(">")

    def write_element_end_close(self, tag: str) -> None:
        self._write(f"</{tag}>")

    def write_text(self, text: str) -> None:
        self._write(escape(_check_chars(text), _TEXT_ENTITIES))

    def write_flatten_text(self, tag: str, text: str) -> None:
        """Write ``<tag>text</tag>``; empty text self-closes."""
        self.write_element_start(tag)
        if not text:
            self.write_element_end_empty()
            return
        self.write_element_end_open()
        self.write_text(text)
        self.write_element_end_close(tag)

    def _write(self, text: str) -> None:
        try:
            self.inner.write(text)
        except (OSError, ValueError) as exc:
            # closed file objects raise ValueError
            raise XmlIOError("Failed to write XML output", details=str(exc)) from exc
