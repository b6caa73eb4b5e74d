"""Command line entry-point: inspect DOCX packages or write a sample one."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from docx_builder.model.document_model import Document, PageMargin, PageSize, SectionProperty
from docx_builder.model.formatting import (
    Bold,
    CharacterProperty,
    Justification,
    JustificationVal,
    ParagraphProperty,
    Size,
    TableCellProperty,
    TableProperty,
    TableRowProperty,
    TableHeader,
)
from docx_builder.model.paragraph import Hyperlink, Paragraph, Run
from docx_builder.model.properties import Core
from docx_builder.model.style_model import Style, Styles, StyleType
from docx_builder.model.table import Table, TableCell, TableGrid, TableRow
from docx_builder.package.docx_package import Docx
from docx_builder.utils.debug import DebugDumper
from docx_builder.utils.logger import configure, get_logger
from docx_builder.utils.units import inches_to_twips

LOGGER = get_logger(__name__)


def build_demo() -> Docx:
    """Assemble a small document with a heading, a link and a table."""
    docx = Docx(core=Core.stamped(creator="docx-builder"))
    docx.styles = Styles().push(
        Style(StyleType.PARAGRAPH, "Heading1")
        .name("heading 1")
        .paragraph(ParagraphProperty(justification=Justification(JustificationVal.CENTER)))
        .character(CharacterProperty(bold=Bold(), size=Size(32)))
    )
    link_id = docx.add_hyperlink("https://www.ecma-international.org/publications-and-standards/standards/ecma-376/")

    document: Document = docx.document
    document.push(Paragraph().style("Heading1").push_text("Sample document"))
    document.push(
        Paragraph()
        .push_text("Format described by ")
        .push(Hyperlink(id=link_id).push(Run.text("ECMA-376")))
    )
    document.push(
        Table()
        .property(TableProperty())
        .grid(TableGrid().push_column(inches_to_twips(3)).push_column(inches_to_twips(3)))
        .push_row(
            TableRow()
            .property(TableRowProperty(header=TableHeader()))
            .push_cell(Paragraph().push_text("Name"))
            .push_cell(TableCell.paragraph(Paragraph().push_text("Value")).property(TableCellProperty()))
        )
    )
    document.push(SectionProperty(page_size=PageSize.letter(), page_margin=PageMargin.uniform(1)))
    return docx


def dump(docx_file: str, output_dir: Optional[str] = None) -> Path:
    """Load a package and write its parsed model as JSON."""
    docx_path = Path(docx_file).resolve()
    if not docx_path.exists():
        raise FileNotFoundError(f"DOCX file not found: {docx_path}")

    LOGGER.info("Reading %s", docx_path.name)
    docx = Docx.load(docx_path)
    output_path = Path(output_dir).resolve() if output_dir else docx_path.with_suffix("")
    return DebugDumper(output_path).dump(docx)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build and inspect WordprocessingML packages")
    parser.add_argument(
        "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    dump_parser = commands.add_parser("dump", help="Write the parsed model of a .docx file as JSON")
    dump_parser.add_argument("docx_file", help="Path to the input .docx file")
    dump_parser.add_argument("--output", help="Directory to write docx_model.json into")

    demo_parser = commands.add_parser("demo", help="Write a sample .docx file")
    demo_parser.add_argument("output", help="Path of the .docx file to create")

    args = parser.parse_args(argv)
    configure(args.log_level)

    if args.command == "dump":
        target = dump(args.docx_file, args.output)
        print(target)
    else:
        build_demo().write_file(args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
