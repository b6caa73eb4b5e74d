"""Leaf elements that appear inside runs and paragraphs."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from docx_builder.codec.mapping import XmlElement, attr, text_content


@dataclass(slots=True)
class Tab(XmlElement):
    """Tab character inside a run."""

    TAG = "w:tab"


@dataclass(slots=True)
class CarriageReturn(XmlElement):
    TAG = "w:cr"


class BreakType(str, Enum):
    PAGE = "page"
    COLUMN = "column"
    TEXT_WRAPPING = "textWrapping"


@dataclass(slots=True)
class Break(XmlElement):
    """Line, page or column break; a plain line break carries no type."""

    TAG = "w:br"

    ty: Optional[BreakType] = attr("w:type", BreakType)


@dataclass(slots=True)
class Text(XmlElement):
    """Literal text of a run.

    Leading or trailing whitespace is only kept by consumers when
    ``xml:space="preserve"`` is set, which :meth:`of` does automatically.
    """

    TAG = "w:t"

    space: Optional[str] = attr("xml:space")
    text: str = text_content()

    @classmethod
    def of(cls, text: str) -> "Text":
        space = "preserve" if text != text.strip() else None
        return cls(space=space, text=text)


@dataclass(slots=True)
class BookmarkStart(XmlElement):
    TAG = "w:bookmarkStart"

    id: Optional[str] = attr("w:id")
    name: Optional[str] = attr("w:name")


@dataclass(slots=True)
class BookmarkEnd(XmlElement):
    TAG = "w:bookmarkEnd"

    id: Optional[str] = attr("w:id")
