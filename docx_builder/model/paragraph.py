"""Paragraphs and the runs of text they own."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from docx_builder.codec.mapping import XmlElement, attr, child, children
from docx_builder.model.elements import Break, BookmarkEnd, BookmarkStart, BreakType, CarriageReturn, Tab, Text
from docx_builder.model.formatting import CharacterProperty, ParagraphProperty, ParagraphStyleId

RunContent = Union[Text, Tab, Break, CarriageReturn]


@dataclass(slots=True)
class Run(XmlElement):
    """A region of text sharing one set of character properties.

    ```python
    run = Run().property(CharacterProperty(bold=Bold())).push_text("Hello").push_tab()
    ```
    """

    TAG = "w:r"

    properties: Optional[CharacterProperty] = child(CharacterProperty)
    content: List[RunContent] = children(Text, Tab, Break, CarriageReturn)

    @classmethod
    def text(cls, text: str) -> "Run":
        return cls().push_text(text)

    def property(self, properties: CharacterProperty) -> "Run":
        self.properties = properties
        return self

    def push(self, content: RunContent) -> "Run":
        self.content.append(content)
        return self

    def push_text(self, text: str) -> "Run":
        return self.push(Text.of(text))

    def push_tab(self) -> "Run":
        return self.push(Tab())

    def push_break(self, ty: Optional[BreakType] = None) -> "Run":
        return self.push(Break(ty))

    def push_carriage_return(self) -> "Run":
        return self.push(CarriageReturn())

    def iter_text(self):
        for item in self.content:
            if isinstance(item, Text):
                yield item.text
            elif isinstance(item, Tab):
                yield "\t"
            elif isinstance(item, Break):
                yield "\n"
            elif isinstance(item, CarriageReturn):
                yield "\r"


@dataclass(slots=True)
class Hyperlink(XmlElement):
    """Runs linked either to a relationship target (``r:id``) or a bookmark."""

    TAG = "w:hyperlink"

    id: Optional[str] = attr("r:id")
    anchor: Optional[str] = attr("w:anchor")
    content: List[Run] = children(Run)

    def push(self, run: Run) -> "Hyperlink":
        self.content.append(run)
        return self


ParagraphContent = Union[Run, Hyperlink, BookmarkStart, BookmarkEnd]


@dataclass(slots=True)
class Paragraph(XmlElement):
    """A paragraph of the document body or of a table cell.

    ```python
    para = Paragraph().style("Heading1").push_text("Title")
    ```
    """

    TAG = "w:p"

    properties: Optional[ParagraphProperty] = child(ParagraphProperty)
    content: List[ParagraphContent] = children(Run, Hyperlink, BookmarkStart, BookmarkEnd)

    def property(self, properties: ParagraphProperty) -> "Paragraph":
        self.properties = properties
        return self

    def style(self, style_id: str) -> "Paragraph":
        """Set the paragraph style, keeping any other paragraph properties."""
        if self.properties is None:
            self.properties = ParagraphProperty()
        self.properties.style_id = ParagraphStyleId(style_id)
        return self

    def push(self, content: ParagraphContent) -> "Paragraph":
        self.content.append(content)
        return self

    def push_text(self, text: str) -> "Paragraph":
        return self.push(Run.text(text))

    def iter_text(self):
        for item in self.content:
            if isinstance(item, Run):
                yield from item.iter_text()
            elif isinstance(item, Hyperlink):
                for run in item.content:
                    yield from run.iter_text()

    def plain_text(self) -> str:
        return "".join(self.iter_text())
