"""Namespace URIs, part names and the XML declaration shared by every part."""
from __future__ import annotations

from typing import Dict

SCHEMA_XML = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

SCHEMA_MAIN = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
SCHEMA_WORDML_14 = "http://schemas.microsoft.com/office/word/2010/wordml"
SCHEMA_WP = "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"
SCHEMA_RELATIONSHIPS_DOCUMENT = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

SCHEMAS_EXTENDED = "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties"
SCHEMA_DOC_PROPS_V_TYPES = "http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes"

SCHEMA_CORE = "http://schemas.openxmlformats.org/package/2006/metadata/core-properties"
SCHEMA_DC = "http://purl.org/dc/elements/1.1/"
SCHEMA_DC_TERMS = "http://purl.org/dc/terms/"
SCHEMA_DCMI_TYPE = "http://purl.org/dc/dcmitype/"
SCHEMA_XSI = "http://www.w3.org/2001/XMLSchema-instance"

SCHEMA_CONTENT_TYPES = "http://schemas.openxmlformats.org/package/2006/content-types"
SCHEMA_RELATIONSHIPS = "http://schemas.openxmlformats.org/package/2006/relationships"
SCHEMA_XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# Relationship types referenced from the package and document rels parts.
REL_TYPE_OFFICE_DOCUMENT = f"{SCHEMA_RELATIONSHIPS_DOCUMENT}/officeDocument"
REL_TYPE_STYLES = f"{SCHEMA_RELATIONSHIPS_DOCUMENT}/styles"
REL_TYPE_EXTENDED_PROPERTIES = f"{SCHEMA_RELATIONSHIPS_DOCUMENT}/extended-properties"
REL_TYPE_CORE_PROPERTIES = "http://schemas.openxmlformats.org/package/2006/relationships/metadata/core-properties"
REL_TYPE_HYPERLINK = f"{SCHEMA_RELATIONSHIPS_DOCUMENT}/hyperlink"

CONTENT_TYPE_RELATIONSHIPS = "application/vnd.openxmlformats-package.relationships+xml"
CONTENT_TYPE_XML = "application/xml"
CONTENT_TYPE_DOCUMENT = "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"
CONTENT_TYPE_STYLES = "application/vnd.openxmlformats-officedocument.wordprocessingml.styles+xml"
CONTENT_TYPE_APP = "application/vnd.openxmlformats-officedocument.extended-properties+xml"
CONTENT_TYPE_CORE = "application/vnd.openxmlformats-package.core-properties+xml"

CONTENT_TYPES_PART = "/[Content_Types].xml"
PACKAGE_RELS_PART = "/_rels/.rels"
DOCUMENT_PART = "/word/document.xml"
DOCUMENT_RELS_PART = "/word/_rels/document.xml.rels"
STYLES_PART = "/word/styles.xml"
APP_PART = "/docProps/app.xml"
CORE_PART = "/docProps/core.xml"

# Prefixes used in manifest names such as ``w:tbl`` or ``dc:title``.
PREFIXES: Dict[str, str] = {
    "w": SCHEMA_MAIN,
    "w14": SCHEMA_WORDML_14,
    "wp": SCHEMA_WP,
    "r": SCHEMA_RELATIONSHIPS_DOCUMENT,
    "vt": SCHEMA_DOC_PROPS_V_TYPES,
    "cp": SCHEMA_CORE,
    "dc": SCHEMA_DC,
    "dcterms": SCHEMA_DC_TERMS,
    "dcmitype": SCHEMA_DCMI_TYPE,
    "xsi": SCHEMA_XSI,
    "xml": SCHEMA_XML_NAMESPACE,
}
