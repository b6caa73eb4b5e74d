"""Styles part (``/word/styles.xml``): style definitions and latent styles."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from docx_builder.codec.mapping import XmlElement, attr, child, children
from docx_builder.model.formatting import CharacterProperty, ParagraphProperty
from docx_builder.schema import SCHEMA_MAIN, SCHEMA_WORDML_14, STYLES_PART


class StyleType(str, Enum):
    PARAGRAPH = "paragraph"
    CHARACTER = "character"
    TABLE = "table"
    NUMBERING = "numbering"


@dataclass(slots=True)
class StyleName(XmlElement):
    TAG = "w:name"

    value: str = attr("w:val", required=True)


@dataclass(slots=True)
class BasedOn(XmlElement):
    TAG = "w:basedOn"

    value: str = attr("w:val", required=True)


@dataclass(slots=True)
class NextStyle(XmlElement):
    TAG = "w:next"

    value: str = attr("w:val", required=True)


@dataclass(slots=True)
class Style(XmlElement):
    """A style that applies to a region of the document.

    ```python
    style = (
        Style(StyleType.PARAGRAPH, "Heading1")
        .name("Heading 1")
        .paragraph(ParagraphProperty())
        .character(CharacterProperty(bold=Bold()))
    )
    ```
    """

    TAG = "w:style"

    style_type: StyleType = attr("w:type", StyleType, required=True)
    style_id: str = attr("w:styleId", required=True)
    default: Optional[bool] = attr("w:default", bool)
    display_name: Optional[StyleName] = child(StyleName)
    parent: Optional[BasedOn] = child(BasedOn)
    next_style: Optional[NextStyle] = child(NextStyle)
    paragraph_properties: Optional[ParagraphProperty] = child(ParagraphProperty)
    character_properties: Optional[CharacterProperty] = child(CharacterProperty)

    def name(self, name: str) -> "Style":
        self.display_name = StyleName(name)
        return self

    def based_on(self, style_id: str) -> "Style":
        self.parent = BasedOn(style_id)
        return self

    def next(self, style_id: str) -> "Style":
        self.next_style = NextStyle(style_id)
        return self

    def paragraph(self, properties: ParagraphProperty) -> "Style":
        self.paragraph_properties = properties
        return self

    def character(self, properties: CharacterProperty) -> "Style":
        self.character_properties = properties
        return self


@dataclass(slots=True)
class LatentStyle(XmlElement):
    """Latent style exception; a flat attribute record."""

    TAG = "w:lsdException"

    name: Optional[str] = attr("w:name")
    locked: Optional[bool] = attr("w:locked", bool)
    priority: Optional[int] = attr("w:uiPriority", int)
    semi_hidden: Optional[bool] = attr("w:semiHidden", bool)
    unhide_when_used: Optional[bool] = attr("w:unhideWhenUsed", bool)
    q_format: Optional[bool] = attr("w:qFormat", bool)


@dataclass(slots=True)
class LatentStyles(XmlElement):
    TAG = "w:latentStyles"

    default_locked_state: Optional[bool] = attr("w:defLockedState", bool)
    default_ui_priority: Optional[int] = attr("w:defUIPriority", int)
    default_semi_hidden: Optional[bool] = attr("w:defSemiHidden", bool)
    default_unhide_when_used: Optional[bool] = attr("w:defUnhideWhenUsed", bool)
    default_q_format: Optional[bool] = attr("w:defQFormat", bool)
    count: Optional[int] = attr("w:count", int)
    exceptions: List[LatentStyle] = children(LatentStyle)

    def push(self, latent_style: LatentStyle) -> "LatentStyles":
        self.exceptions.append(latent_style)
        return self


@dataclass(slots=True)
class RunPropertyDefault(XmlElement):
    TAG = "w:rPrDefault"

    properties: Optional[CharacterProperty] = child(CharacterProperty)


@dataclass(slots=True)
class ParagraphPropertyDefault(XmlElement):
    TAG = "w:pPrDefault"

    properties: Optional[ParagraphProperty] = child(ParagraphProperty)


@dataclass(slots=True)
class DocDefaults(XmlElement):
    TAG = "w:docDefaults"

    run: Optional[RunPropertyDefault] = child(RunPropertyDefault)
    paragraph: Optional[ParagraphPropertyDefault] = child(ParagraphPropertyDefault)


@dataclass(slots=True)
class Styles(XmlElement):
    """The root element of the styles part."""

    TAG = "w:styles"
    ROOT = True
    PART_NAME = STYLES_PART
    NAMESPACES = (
        ("xmlns:w", SCHEMA_MAIN),
        ("xmlns:w14", SCHEMA_WORDML_14),
    )

    doc_defaults: Optional[DocDefaults] = child(DocDefaults)
    latent_styles: Optional[LatentStyles] = child(LatentStyles)
    styles: List[Style] = children(Style)

    def defaults(self, defaults: DocDefaults) -> "Styles":
        self.doc_defaults = defaults
        return self

    def latent(self, latent_styles: LatentStyles) -> "Styles":
        self.latent_styles = latent_styles
        return self

    def push(self, style: Style) -> "Styles":
        self.styles.append(style)
        return self

    def get(self, style_id: Optional[str]) -> Optional[Style]:
        """Return the style with the given identifier."""
        if style_id is None:
            return None
        for style in self.styles:
            if style.style_id == style_id:
                return style
        return None

    def default_for(self, style_type: StyleType) -> Optional[Style]:
        """Return the default style for the given style type if defined."""
        for style in self.styles:
            if style.style_type == style_type and style.default:
                return style
        return None
