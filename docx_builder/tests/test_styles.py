"""Unit tests for the styles part."""
import unittest

from docx_builder.model.formatting import (
    Bold,
    CharacterProperty,
    Fonts,
    Italics,
    ParagraphProperty,
    Size,
    Spacing,
)
from docx_builder.model.style_model import (
    DocDefaults,
    LatentStyle,
    LatentStyles,
    ParagraphPropertyDefault,
    RunPropertyDefault,
    Style,
    Styles,
    StyleType,
)
from docx_builder.schema import SCHEMA_MAIN


class StyleTest(unittest.TestCase):
    """Style builders and serialization."""

    def test_builder_output(self) -> None:
        style = Style(StyleType.PARAGRAPH, "Heading1").name("heading 1").based_on("Normal").next("Normal")
        self.assertEqual(
            style.to_string(),
            '<w:style w:type="paragraph" w:styleId="Heading1">'
            '<w:name w:val="heading 1"/><w:basedOn w:val="Normal"/><w:next w:val="Normal"/>'
            "</w:style>",
        )

    def test_setters_replace_previous_values(self) -> None:
        style = (
            Style(StyleType.CHARACTER, "Strong")
            .name("first")
            .name("Strong")
            .character(CharacterProperty(italics=Italics()))
            .character(CharacterProperty(bold=Bold()))
        )
        self.assertEqual(style.display_name.value, "Strong")
        self.assertEqual(style.character_properties, CharacterProperty(bold=Bold()))

    def test_bare_style_self_closes(self) -> None:
        self.assertEqual(
            Style(StyleType.TABLE, "TableGrid").to_string(),
            '<w:style w:type="table" w:styleId="TableGrid"/>',
        )


class StylesPartTest(unittest.TestCase):
    """The styles root and its lookups."""

    def setUp(self) -> None:
        self.styles = (
            Styles()
            .defaults(
                DocDefaults(
                    run=RunPropertyDefault(CharacterProperty(fonts=Fonts.uniform("Calibri"), size=Size(22))),
                    paragraph=ParagraphPropertyDefault(ParagraphProperty(spacing=Spacing(after=160))),
                )
            )
            .latent(
                LatentStyles(default_locked_state=False, default_ui_priority=99, count=2)
                .push(LatentStyle(name="Normal", priority=0, q_format=True))
                .push(LatentStyle(name="heading 1", priority=9, semi_hidden=False, unhide_when_used=False))
            )
            .push(Style(StyleType.PARAGRAPH, "Normal", default=True).name("Normal"))
            .push(
                Style(StyleType.PARAGRAPH, "Heading1")
                .name("heading 1")
                .based_on("Normal")
                .paragraph(ParagraphProperty(spacing=Spacing(before=240)))
                .character(CharacterProperty(bold=Bold(), size=Size(32)))
            )
            .push(Style(StyleType.NUMBERING, "NoList").name("No List"))
        )

    def test_round_trip(self) -> None:
        xml = self.styles.to_string()
        self.assertIn(f'<w:styles xmlns:w="{SCHEMA_MAIN}"', xml)
        self.assertIn('<w:style w:type="paragraph" w:styleId="Normal" w:default="true">', xml)
        self.assertEqual(Styles.from_str(xml), self.styles)

    def test_lookup_by_id(self) -> None:
        heading = self.styles.get("Heading1")
        assert heading is not None
        self.assertEqual(heading.parent.value, "Normal")
        self.assertIsNone(self.styles.get("Missing"))
        self.assertIsNone(self.styles.get(None))

    def test_default_for_type(self) -> None:
        default = self.styles.default_for(StyleType.PARAGRAPH)
        assert default is not None
        self.assertEqual(default.style_id, "Normal")
        self.assertIsNone(self.styles.default_for(StyleType.CHARACTER))

    def test_reads_word_style_flags(self) -> None:
        xml = f"""
        <w:styles xmlns:w="{SCHEMA_MAIN}">
          <w:style w:type="character" w:styleId="Emphasis" w:default="1" w:customStyle="0">
            <w:name w:val="Emphasis"/>
            <w:uiPriority w:val="20"/>
            <w:qFormat/>
            <w:rPr><w:i/></w:rPr>
          </w:style>
        </w:styles>
        """
        style = Styles.from_str(xml).get("Emphasis")
        assert style is not None
        self.assertIs(style.default, True)
        self.assertEqual(style.style_type, StyleType.CHARACTER)
        self.assertEqual(style.character_properties, CharacterProperty(italics=Italics()))

    def test_order_of_styles_is_kept(self) -> None:
        parsed = Styles.from_str(self.styles.to_string())
        self.assertEqual([style.style_id for style in parsed.styles], ["Normal", "Heading1", "NoList"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
