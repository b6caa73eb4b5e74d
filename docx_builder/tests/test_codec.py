"""Tests for the generic XML read/write engine."""
import io
import unittest
from xml.etree import ElementTree as ET

from docx_builder.codec.mapping import decode_value, encode_value, manifest
from docx_builder.codec.reader import XmlReader
from docx_builder.codec.writer import XmlWriter
from docx_builder.errors import XmlError, XmlIOError, XmlSchemaError, XmlSyntaxError
from docx_builder.model.document_model import Document
from docx_builder.model.elements import Break, BreakType, Tab, Text
from docx_builder.model.formatting import JustificationVal
from docx_builder.model.paragraph import Hyperlink, Paragraph, Run
from docx_builder.model.style_model import LatentStyle, Styles
from docx_builder.model.table import GridColumn
from docx_builder.schema import SCHEMA_MAIN, SCHEMA_RELATIONSHIPS_DOCUMENT, SCHEMA_XML

W_NS = SCHEMA_MAIN


def reparse(value):
    """Write a fragment inside a wrapper declaring its prefixes and read it back."""
    xml = f'<root xmlns:w="{W_NS}" xmlns:r="{SCHEMA_RELATIONSHIPS_DOCUMENT}">{value.to_string()}</root>'
    return type(value).from_element(ET.fromstring(xml)[0])


class FailingSink:
    def write(self, text: str) -> None:
        raise OSError("disk full")


class XmlWriterTest(unittest.TestCase):
    """Low level emitter behaviour."""

    def test_writes_compact_elements(self) -> None:
        buffer = io.StringIO()
        writer = XmlWriter(buffer)
        writer.write_declaration()
        writer.write_element_start("a")
        writer.write_attribute("x", "1 & 2")
        writer.write_element_end_open()
        writer.write_flatten_text("b", "<text>")
        writer.write_flatten_text("c", "")
        writer.write_element_end_close("a")
        self.assertEqual(
            buffer.getvalue(),
            f'{SCHEMA_XML}<a x="1 &amp; 2"><b>&lt;text&gt;</b><c/></a>',
        )

    def test_declaration_can_be_disabled(self) -> None:
        buffer = io.StringIO()
        Document().to_writer(XmlWriter(buffer, declaration=False))
        self.assertTrue(buffer.getvalue().startswith("<w:document "))

    def test_sink_failure_is_wrapped(self) -> None:
        with self.assertRaises(XmlIOError):
            Document().write_to(FailingSink())

    def test_closed_sink_is_wrapped(self) -> None:
        buffer = io.StringIO()
        buffer.close()
        with self.assertRaises(XmlIOError):
            Document().write_to(buffer)

    def test_attributes_are_always_double_quoted(self) -> None:
        buffer = io.StringIO()
        writer = XmlWriter(buffer)
        writer.write_attribute("x", 'say "hi"\n\r\t<&>')
        self.assertEqual(buffer.getvalue(), ' x="say &quot;hi&quot;&#10;&#13;&#9;&lt;&amp;&gt;"')

    def test_carriage_return_in_text_is_a_reference(self) -> None:
        buffer = io.StringIO()
        XmlWriter(buffer).write_text("a\r\nb")
        self.assertEqual(buffer.getvalue(), "a&#13;\nb")

    def test_forbidden_characters_are_rejected(self) -> None:
        for value in ("bell\x07", "nul\x00", "vt\x0b", "esc\x1b"):
            with self.subTest(value=value):
                with self.assertRaises(XmlSchemaError):
                    Paragraph().push_text(value).to_string()
                with self.assertRaises(XmlSchemaError):
                    Hyperlink(anchor=value).to_string()


class ValueConversionTest(unittest.TestCase):
    def test_encoding(self) -> None:
        self.assertEqual(encode_value(True), "true")
        self.assertEqual(encode_value(False), "false")
        self.assertEqual(encode_value(42), "42")
        self.assertEqual(encode_value(JustificationVal.CENTER), "center")

    def test_boolean_tokens(self) -> None:
        for token in ("true", "1", "on", "TRUE"):
            self.assertIs(decode_value(token, bool, "x"), True)
        for token in ("false", "0", "off"):
            self.assertIs(decode_value(token, bool, "x"), False)
        with self.assertRaises(XmlSchemaError):
            decode_value("maybe", bool, "x")

    def test_integer_and_enum_failures(self) -> None:
        self.assertEqual(decode_value("-12", int, "x"), -12)
        self.assertEqual(decode_value("+7", int, "x"), 7)
        for raw in ("1_000", " 7 ", "\u0663", "", "1.5"):
            with self.subTest(raw=raw):
                with self.assertRaises(XmlSchemaError):
                    decode_value(raw, int, "x")
        with self.assertRaises(XmlSchemaError):
            decode_value("wide", int, "x")
        with self.assertRaises(XmlSchemaError):
            decode_value("sideways", JustificationVal, "x")


class MappingTest(unittest.TestCase):
    """Manifest driven writing and reading."""

    def test_manifest_follows_declaration_order(self) -> None:
        names = [name for name, _ in manifest(LatentStyle)]
        self.assertEqual(names, ["name", "locked", "priority", "semi_hidden", "unhide_when_used", "q_format"])

    def test_attributes_written_in_order_and_absent_ones_suppressed(self) -> None:
        style = LatentStyle(name="Normal", locked=False, priority=0, q_format=True)
        self.assertEqual(
            style.to_string(),
            '<w:lsdException w:name="Normal" w:locked="false" w:uiPriority="0" w:qFormat="true"/>',
        )

    def test_all_absent_self_closes(self) -> None:
        self.assertEqual(LatentStyle().to_string(), "<w:lsdException/>")
        self.assertEqual(Paragraph().to_string(), "<w:p/>")
        self.assertEqual(Tab().to_string(), "<w:tab/>")

    def test_present_content_never_self_closes(self) -> None:
        self.assertEqual(Run.text("Hi").to_string(), "<w:r><w:t>Hi</w:t></w:r>")

    def test_latent_style_round_trip(self) -> None:
        style = LatentStyle(
            name="Heading 1", locked=True, priority=9, semi_hidden=False, unhide_when_used=False, q_format=True
        )
        self.assertEqual(reparse(style), style)

    def test_text_escaping_and_whitespace_round_trip(self) -> None:
        run = Run().push_text(" a < b & c ").push_tab().push_break(BreakType.PAGE).push_carriage_return()
        self.assertIn('xml:space="preserve"', run.to_string())
        self.assertIn("&lt;", run.to_string())
        self.assertEqual(reparse(run), run)

    def test_carriage_returns_round_trip(self) -> None:
        document = Document().push(Paragraph().push(Run().push_text("a\rb").push_text("c\r\nd")))
        parsed = Document.from_str(document.to_string())
        self.assertEqual(parsed, document)
        self.assertEqual(parsed.paragraphs()[0].plain_text(), "a\rbc\r\nd")

    def test_attribute_quotes_and_whitespace_round_trip(self) -> None:
        link = Hyperlink(anchor='say "hi"\tand\r\nbye')
        self.assertEqual(reparse(link), link)

    def test_empty_text_round_trip(self) -> None:
        self.assertEqual(reparse(Text()), Text())

    def test_unknown_attributes_and_elements_are_skipped(self) -> None:
        xml = f"""
        <w:document xmlns:w="{W_NS}" xmlns:w14="http://schemas.microsoft.com/office/word/2010/wordml">
          <w:body>
            <w:p w14:paraId="0A1B2C3D">
              <w14:unknownExtension/>
              <w:r><w:lastRenderedPageBreak/><w:t>kept</w:t></w:r>
            </w:p>
            <w:customXml/>
          </w:body>
        </w:document>
        """
        document = Document.from_str(xml)
        self.assertEqual(len(document.body.content), 1)
        paragraph = document.body.content[0]
        self.assertIsInstance(paragraph, Paragraph)
        self.assertEqual(paragraph.plain_text(), "kept")

    def test_matching_is_namespace_uri_aware(self) -> None:
        xml = f'<x:document xmlns:x="{W_NS}"><x:body><x:p><x:r><x:tab/></x:r></x:p></x:body></x:document>'
        document = Document.from_str(xml)
        self.assertEqual(document, Document().push(Paragraph().push(Run().push_tab())))

    def test_foreign_namespace_does_not_match(self) -> None:
        xml = f'<w:document xmlns:w="{W_NS}" xmlns:o="urn:other"><w:body><o:p/></w:body></w:document>'
        self.assertEqual(Document.from_str(xml), Document())

    def test_break_type_attribute(self) -> None:
        self.assertEqual(Break(BreakType.COLUMN).to_string(), '<w:br w:type="column"/>')
        self.assertEqual(reparse(Break()), Break())


class ReadErrorTest(unittest.TestCase):
    """Syntax problems and schema problems surface as different errors."""

    def test_truncated_input_is_a_syntax_error(self) -> None:
        with self.assertRaises(XmlSyntaxError) as ctx:
            Document.from_str(f'<w:document xmlns:w="{W_NS}"><w:body>')
        self.assertIsNotNone(ctx.exception.position)

    def test_mismatched_close_is_a_syntax_error(self) -> None:
        with self.assertRaises(XmlSyntaxError):
            Document.from_str(f'<w:document xmlns:w="{W_NS}"><w:body></w:document>')

    def test_missing_required_child_is_a_schema_error(self) -> None:
        with self.assertRaises(XmlSchemaError):
            Document.from_str(f'<w:document xmlns:w="{W_NS}"/>')

    def test_unexpected_root_is_a_schema_error(self) -> None:
        with self.assertRaises(XmlSchemaError):
            Styles.from_str(f'<w:document xmlns:w="{W_NS}"><w:body/></w:document>')

    def test_bad_attribute_values_are_schema_errors(self) -> None:
        bad_bool = f'<w:styles xmlns:w="{W_NS}"><w:latentStyles><w:lsdException w:locked="maybe"/></w:latentStyles></w:styles>'
        with self.assertRaises(XmlSchemaError):
            Styles.from_str(bad_bool)
        bad_int = f'<w:root xmlns:w="{W_NS}"><w:gridCol w:w="wide"/></w:root>'
        with self.assertRaises(XmlSchemaError):
            GridColumn.from_element(ET.fromstring(bad_int)[0])

    def test_missing_required_attribute_is_a_schema_error(self) -> None:
        xml = f'<w:styles xmlns:w="{W_NS}"><w:style w:styleId="Normal"/></w:styles>'
        with self.assertRaises(XmlSchemaError):
            Styles.from_str(xml)

    def test_error_kinds_are_distinct(self) -> None:
        self.assertTrue(issubclass(XmlSyntaxError, XmlError))
        self.assertTrue(issubclass(XmlSchemaError, XmlError))
        self.assertFalse(issubclass(XmlSyntaxError, XmlSchemaError))
        self.assertFalse(issubclass(XmlSchemaError, XmlSyntaxError))

    def test_reader_reports_root_mismatch(self) -> None:
        reader = XmlReader("<a/>")
        with self.assertRaises(XmlSchemaError):
            reader.read_till_element_start(f"{{{W_NS}}}document")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
