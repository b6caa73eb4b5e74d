"""Tables: grid, rows and cells."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from docx_builder.codec.mapping import XmlElement, attr, child, children
from docx_builder.model.formatting import TableCellProperty, TableProperty, TableRowProperty
from docx_builder.model.paragraph import Paragraph


@dataclass(slots=True)
class GridColumn(XmlElement):
    """Width of one grid column in twips."""

    TAG = "w:gridCol"

    width: Optional[int] = attr("w:w", int)


@dataclass(slots=True)
class TableGrid(XmlElement):
    TAG = "w:tblGrid"

    columns: List[GridColumn] = children(GridColumn)

    def push_column(self, width: Optional[int]) -> "TableGrid":
        self.columns.append(GridColumn(width))
        return self


@dataclass(slots=True)
class TableCell(XmlElement):
    TAG = "w:tc"

    properties: Optional[TableCellProperty] = child(TableCellProperty)
    content: List[Paragraph] = children(Paragraph)

    @classmethod
    def paragraph(cls, paragraph: Paragraph) -> "TableCell":
        return cls(content=[paragraph])

    def property(self, properties: TableCellProperty) -> "TableCell":
        self.properties = properties
        return self

    def push_paragraph(self, paragraph: Paragraph) -> "TableCell":
        self.content.append(paragraph)
        return self


@dataclass(slots=True)
class TableRow(XmlElement):
    TAG = "w:tr"

    properties: Optional[TableRowProperty] = child(TableRowProperty)
    cells: List[TableCell] = children(TableCell)

    def property(self, properties: TableRowProperty) -> "TableRow":
        self.properties = properties
        return self

    def push_cell(self, cell: Union[TableCell, Paragraph]) -> "TableRow":
        """Append a cell; a bare paragraph becomes a single-paragraph cell."""
        if isinstance(cell, Paragraph):
            cell = TableCell.paragraph(cell)
        self.cells.append(cell)
        return self


@dataclass(slots=True)
class Table(XmlElement):
    """A table of the document body.

    ```python
    table = (
        Table()
        .property(TableProperty())
        .push_row(TableRow().push_cell(Paragraph()).push_cell(TableCell.paragraph(Paragraph())))
    )
    ```

    The grid is not kept in sync with the rows; callers that set one are
    expected to give it as many columns as the widest row has cells.
    """

    TAG = "w:tbl"

    properties: Optional[TableProperty] = child(TableProperty)
    table_grid: Optional[TableGrid] = child(TableGrid)
    rows: List[TableRow] = children(TableRow)

    def property(self, properties: TableProperty) -> "Table":
        self.properties = properties
        return self

    def grid(self, grid: TableGrid) -> "Table":
        self.table_grid = grid
        return self

    def push_row(self, row: TableRow) -> "Table":
        self.rows.append(row)
        return self
