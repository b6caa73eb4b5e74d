"""Parse XML text and locate elements by qualified name."""
from __future__ import annotations

from typing import Iterator, Optional, Union
from xml.etree import ElementTree as ET

from docx_builder.errors import XmlSchemaError
from docx_builder.utils.xml_utils import local_name, parse_xml, tag_matches


class XmlReader:
    """Holds one parsed XML document.

    Matching is done on namespace URIs, so a part that binds the expected
    namespace to a different prefix (``ap:Properties``) reads the same as the
    canonical form.
    """

    def __init__(self, text: Union[str, bytes]) -> None:
        self.root = parse_xml(text)

    def read_till_element_start(self, tag: str) -> ET.Element:
        """Return the root element if it carries the expected qualified tag."""
        if not tag_matches(self.root.tag, tag):
            raise XmlSchemaError(
                "Unexpected root element",
                details=f"expected {local_name(tag)}, found {local_name(self.root.tag)}",
                element=self.root.tag,
            )
        return self.root

    @staticmethod
    def find_child(element: ET.Element, tag: str) -> Optional[ET.Element]:
        """Scan forward over the children for the first match, skipping others."""
        for child in element:
            if tag_matches(child.tag, tag):
                return child
        return None

    @staticmethod
    def iter_children(element: ET.Element) -> Iterator[ET.Element]:
        yield from element

    @staticmethod
    def attribute(element: ET.Element, name: str) -> Optional[str]:
        value = element.attrib.get(name)
        if value is None and name.startswith("{"):
            # attributes written without a prefix by lax producers
            value = element.attrib.get(local_name(name))
        return value

    @staticmethod
    def text(element: ET.Element) -> str:
        return element.text or ""
