"""Main document part (``/word/document.xml``) and its body."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from docx_builder.codec.mapping import XmlElement, attr, child, children
from docx_builder.model.paragraph import Paragraph
from docx_builder.model.table import Table
from docx_builder.schema import (
    DOCUMENT_PART,
    SCHEMA_MAIN,
    SCHEMA_RELATIONSHIPS_DOCUMENT,
    SCHEMA_WORDML_14,
    SCHEMA_WP,
)
from docx_builder.utils.units import inches_to_twips, mm_to_twips


class PageOrientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(slots=True)
class PageSize(XmlElement):
    """Page dimensions in twips."""

    TAG = "w:pgSz"

    width: Optional[int] = attr("w:w", int)
    height: Optional[int] = attr("w:h", int)
    orient: Optional[PageOrientation] = attr("w:orient", PageOrientation)

    @classmethod
    def letter(cls) -> "PageSize":
        return cls(width=inches_to_twips(8.5), height=inches_to_twips(11))

    @classmethod
    def a4(cls) -> "PageSize":
        return cls(width=mm_to_twips(210), height=mm_to_twips(297))


@dataclass(slots=True)
class PageMargin(XmlElement):
    TAG = "w:pgMar"

    top: Optional[int] = attr("w:top", int)
    right: Optional[int] = attr("w:right", int)
    bottom: Optional[int] = attr("w:bottom", int)
    left: Optional[int] = attr("w:left", int)
    header: Optional[int] = attr("w:header", int)
    footer: Optional[int] = attr("w:footer", int)
    gutter: Optional[int] = attr("w:gutter", int)

    @classmethod
    def uniform(cls, inches: float) -> "PageMargin":
        twips = inches_to_twips(inches)
        return cls(top=twips, right=twips, bottom=twips, left=twips)


@dataclass(slots=True)
class SectionProperty(XmlElement):
    TAG = "w:sectPr"

    page_size: Optional[PageSize] = child(PageSize)
    page_margin: Optional[PageMargin] = child(PageMargin)


BodyContent = Union[Paragraph, Table, SectionProperty]


@dataclass(slots=True)
class Body(XmlElement):
    """Block-level content in reading order."""

    TAG = "w:body"

    content: List[BodyContent] = children(Paragraph, Table, SectionProperty)

    def push(self, content: BodyContent) -> "Body":
        self.content.append(content)
        return self


@dataclass(slots=True)
class Document(XmlElement):
    """The root element of the main document part."""

    TAG = "w:document"
    ROOT = True
    PART_NAME = DOCUMENT_PART
    NAMESPACES = (
        ("xmlns:w", SCHEMA_MAIN),
        ("xmlns:w14", SCHEMA_WORDML_14),
        ("xmlns:wp", SCHEMA_WP),
        ("xmlns:r", SCHEMA_RELATIONSHIPS_DOCUMENT),
    )

    body: Body = child(Body, required=True)

    def push(self, content: BodyContent) -> "Document":
        self.body.push(content)
        return self

    def paragraphs(self) -> List[Paragraph]:
        return [item for item in self.body.content if isinstance(item, Paragraph)]

    def tables(self) -> List[Table]:
        return [item for item in self.body.content if isinstance(item, Table)]
