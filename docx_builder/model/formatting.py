"""Formatting properties for runs, paragraphs and tables.

Each ``*Property`` block is a container whose fields are all optional; a
block with nothing set is written as a self-closing element (``<w:rPr/>``)
and reads back as an empty block, which is distinct from no block at all.
Fields follow the element order of the WordprocessingML schema.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from docx_builder.codec.mapping import XmlElement, attr, child


# ----------------------------------------------------------------------
# Shared value elements


class JustificationVal(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    BOTH = "both"
    START = "start"
    END = "end"
    DISTRIBUTE = "distribute"


@dataclass(slots=True)
class Justification(XmlElement):
    TAG = "w:jc"

    value: JustificationVal = attr("w:val", JustificationVal, required=True)


class WidthType(str, Enum):
    AUTO = "auto"
    DXA = "dxa"
    NIL = "nil"
    PCT = "pct"


@dataclass(slots=True)
class ParagraphStyleId(XmlElement):
    TAG = "w:pStyle"

    value: str = attr("w:val", required=True)


@dataclass(slots=True)
class CharacterStyleId(XmlElement):
    TAG = "w:rStyle"

    value: str = attr("w:val", required=True)


@dataclass(slots=True)
class TableStyleId(XmlElement):
    TAG = "w:tblStyle"

    value: str = attr("w:val", required=True)


# ----------------------------------------------------------------------
# Character formatting


@dataclass(slots=True)
class Bold(XmlElement):
    """``<w:b/>`` turns bold on; ``w:val="false"`` turns an inherited bold off."""

    TAG = "w:b"

    value: Optional[bool] = attr("w:val", bool)


@dataclass(slots=True)
class Italics(XmlElement):
    TAG = "w:i"

    value: Optional[bool] = attr("w:val", bool)


@dataclass(slots=True)
class Strike(XmlElement):
    TAG = "w:strike"

    value: Optional[bool] = attr("w:val", bool)


@dataclass(slots=True)
class Fonts(XmlElement):
    TAG = "w:rFonts"

    ascii: Optional[str] = attr("w:ascii")
    h_ansi: Optional[str] = attr("w:hAnsi")
    east_asia: Optional[str] = attr("w:eastAsia")
    cs: Optional[str] = attr("w:cs")

    @classmethod
    def uniform(cls, name: str) -> "Fonts":
        return cls(ascii=name, h_ansi=name, east_asia=name, cs=name)


@dataclass(slots=True)
class Color(XmlElement):
    """Text color as a hex RGB string such as ``FF0000``, or ``auto``."""

    TAG = "w:color"

    value: str = attr("w:val", required=True)


@dataclass(slots=True)
class Size(XmlElement):
    """Font size in half-points."""

    TAG = "w:sz"

    value: int = attr("w:val", int, required=True)


@dataclass(slots=True)
class Underline(XmlElement):
    TAG = "w:u"

    value: Optional[str] = attr("w:val")
    color: Optional[str] = attr("w:color")


@dataclass(slots=True)
class CharacterProperty(XmlElement):
    TAG = "w:rPr"

    style_id: Optional[CharacterStyleId] = child(CharacterStyleId)
    fonts: Optional[Fonts] = child(Fonts)
    bold: Optional[Bold] = child(Bold)
    italics: Optional[Italics] = child(Italics)
    strike: Optional[Strike] = child(Strike)
    color: Optional[Color] = child(Color)
    size: Optional[Size] = child(Size)
    underline: Optional[Underline] = child(Underline)


# ----------------------------------------------------------------------
# Paragraph formatting


@dataclass(slots=True)
class KeepNext(XmlElement):
    TAG = "w:keepNext"

    value: Optional[bool] = attr("w:val", bool)


@dataclass(slots=True)
class PageBreakBefore(XmlElement):
    TAG = "w:pageBreakBefore"

    value: Optional[bool] = attr("w:val", bool)


@dataclass(slots=True)
class Spacing(XmlElement):
    """Paragraph spacing in twentieths of a point."""

    TAG = "w:spacing"

    before: Optional[int] = attr("w:before", int)
    after: Optional[int] = attr("w:after", int)
    line: Optional[int] = attr("w:line", int)
    line_rule: Optional[str] = attr("w:lineRule")


@dataclass(slots=True)
class Indent(XmlElement):
    TAG = "w:ind"

    left: Optional[int] = attr("w:left", int)
    right: Optional[int] = attr("w:right", int)
    first_line: Optional[int] = attr("w:firstLine", int)
    hanging: Optional[int] = attr("w:hanging", int)


@dataclass(slots=True)
class ParagraphProperty(XmlElement):
    TAG = "w:pPr"

    style_id: Optional[ParagraphStyleId] = child(ParagraphStyleId)
    keep_next: Optional[KeepNext] = child(KeepNext)
    page_break_before: Optional[PageBreakBefore] = child(PageBreakBefore)
    spacing: Optional[Spacing] = child(Spacing)
    indent: Optional[Indent] = child(Indent)
    justification: Optional[Justification] = child(Justification)
    # run properties of the paragraph mark
    mark: Optional[CharacterProperty] = child(CharacterProperty)


# ----------------------------------------------------------------------
# Table formatting


@dataclass(slots=True)
class TableWidth(XmlElement):
    TAG = "w:tblW"

    width: Optional[int] = attr("w:w", int)
    ty: Optional[WidthType] = attr("w:type", WidthType)


class TableLayoutType(str, Enum):
    FIXED = "fixed"
    AUTOFIT = "autofit"


@dataclass(slots=True)
class TableLayout(XmlElement):
    TAG = "w:tblLayout"

    ty: Optional[TableLayoutType] = attr("w:type", TableLayoutType)


@dataclass(slots=True)
class TableProperty(XmlElement):
    TAG = "w:tblPr"

    style_id: Optional[TableStyleId] = child(TableStyleId)
    width: Optional[TableWidth] = child(TableWidth)
    justification: Optional[Justification] = child(Justification)
    layout: Optional[TableLayout] = child(TableLayout)


@dataclass(slots=True)
class CantSplit(XmlElement):
    TAG = "w:cantSplit"

    value: Optional[bool] = attr("w:val", bool)


@dataclass(slots=True)
class TableRowHeight(XmlElement):
    """Row height in twips; ``rule`` is ``atLeast``, ``exact`` or ``auto``."""

    TAG = "w:trHeight"

    value: Optional[int] = attr("w:val", int)
    rule: Optional[str] = attr("w:hRule")


@dataclass(slots=True)
class TableHeader(XmlElement):
    """Repeat the row at the top of every page."""

    TAG = "w:tblHeader"

    value: Optional[bool] = attr("w:val", bool)


@dataclass(slots=True)
class TableRowProperty(XmlElement):
    TAG = "w:trPr"

    cant_split: Optional[CantSplit] = child(CantSplit)
    height: Optional[TableRowHeight] = child(TableRowHeight)
    header: Optional[TableHeader] = child(TableHeader)


@dataclass(slots=True)
class TableCellWidth(XmlElement):
    TAG = "w:tcW"

    width: Optional[int] = attr("w:w", int)
    ty: Optional[WidthType] = attr("w:type", WidthType)


@dataclass(slots=True)
class GridSpan(XmlElement):
    TAG = "w:gridSpan"

    value: int = attr("w:val", int, required=True)


class VMergeType(str, Enum):
    RESTART = "restart"
    CONTINUE = "continue"


@dataclass(slots=True)
class VMerge(XmlElement):
    """Vertical merge marker; no value means ``continue``."""

    TAG = "w:vMerge"

    value: Optional[VMergeType] = attr("w:val", VMergeType)


@dataclass(slots=True)
class Shading(XmlElement):
    TAG = "w:shd"

    value: Optional[str] = attr("w:val")
    color: Optional[str] = attr("w:color")
    fill: Optional[str] = attr("w:fill")


class VAlignType(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(slots=True)
class VAlign(XmlElement):
    TAG = "w:vAlign"

    value: VAlignType = attr("w:val", VAlignType, required=True)


@dataclass(slots=True)
class TableCellProperty(XmlElement):
    TAG = "w:tcPr"

    width: Optional[TableCellWidth] = child(TableCellWidth)
    grid_span: Optional[GridSpan] = child(GridSpan)
    vertical_merge: Optional[VMerge] = child(VMerge)
    shading: Optional[Shading] = child(Shading)
    vertical_align: Optional[VAlign] = child(VAlign)
