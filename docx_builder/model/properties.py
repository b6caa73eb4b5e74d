"""Document property parts: ``/docProps/app.xml`` and ``/docProps/core.xml``."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from docx_builder.codec.mapping import XmlElement, attr, child, flatten_text, manifest, text_content
from docx_builder.schema import (
    APP_PART,
    CORE_PART,
    SCHEMA_CORE,
    SCHEMA_DC,
    SCHEMA_DC_TERMS,
    SCHEMA_DCMI_TYPE,
    SCHEMA_DOC_PROPS_V_TYPES,
    SCHEMA_XSI,
    SCHEMAS_EXTENDED,
)

DEFAULT_APPLICATION = "docx-builder"
W3CDTF = "dcterms:W3CDTF"


@dataclass(slots=True)
class App(XmlElement):
    """Application-defined file properties.

    Every field is an optional string. A default instance carries the values
    Word writes for a new blank document; :meth:`empty` has nothing set and
    is written as a self-closing ``<Properties/>``. Reading never fills in
    defaults: fields missing from the part come back as ``None``, and an
    empty element such as ``<Company/>`` comes back as ``""``.
    """

    TAG = "Properties"
    NAMESPACE = SCHEMAS_EXTENDED
    ROOT = True
    PART_NAME = APP_PART
    NAMESPACES = (
        ("xmlns", SCHEMAS_EXTENDED),
        ("xmlns:vt", SCHEMA_DOC_PROPS_V_TYPES),
    )

    template: Optional[str] = flatten_text("Template", "Normal.dotm")
    total_time: Optional[str] = flatten_text("TotalTime", "1")
    pages: Optional[str] = flatten_text("Pages", "1")
    words: Optional[str] = flatten_text("Words", "0")
    characters: Optional[str] = flatten_text("Characters", "0")
    application: Optional[str] = flatten_text("Application", DEFAULT_APPLICATION)
    doc_security: Optional[str] = flatten_text("DocSecurity", "0")
    lines: Optional[str] = flatten_text("Lines", "0")
    paragraphs: Optional[str] = flatten_text("Paragraphs", "1")
    scale_crop: Optional[str] = flatten_text("ScaleCrop", "false")
    company: Optional[str] = flatten_text("Company", "MS")
    links_up_to_date: Optional[str] = flatten_text("LinksUpToDate", "false")
    characters_with_spaces: Optional[str] = flatten_text("CharactersWithSpaces", "25")
    shared_doc: Optional[str] = flatten_text("SharedDoc", "false")
    hyperlinks_changed: Optional[str] = flatten_text("HyperlinksChanged", "false")
    app_version: Optional[str] = flatten_text("AppVersion", "12.0000")

    @classmethod
    def empty(cls) -> "App":
        return cls(**{name: None for name, _ in manifest(cls)})


@dataclass(slots=True)
class Created(XmlElement):
    TAG = "dcterms:created"

    xsi_type: Optional[str] = attr("xsi:type", default=W3CDTF)
    value: str = text_content()


@dataclass(slots=True)
class Modified(XmlElement):
    TAG = "dcterms:modified"

    xsi_type: Optional[str] = attr("xsi:type", default=W3CDTF)
    value: str = text_content()


def w3cdtf(moment: datetime) -> str:
    """Format a timestamp the way core properties store it (UTC, seconds)."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(slots=True)
class Core(XmlElement):
    """Core (Dublin Core based) file properties."""

    TAG = "cp:coreProperties"
    ROOT = True
    PART_NAME = CORE_PART
    NAMESPACES = (
        ("xmlns:cp", SCHEMA_CORE),
        ("xmlns:dc", SCHEMA_DC),
        ("xmlns:dcterms", SCHEMA_DC_TERMS),
        ("xmlns:dcmitype", SCHEMA_DCMI_TYPE),
        ("xmlns:xsi", SCHEMA_XSI),
    )

    title: Optional[str] = flatten_text("dc:title")
    subject: Optional[str] = flatten_text("dc:subject")
    creator: Optional[str] = flatten_text("dc:creator")
    keywords: Optional[str] = flatten_text("cp:keywords")
    description: Optional[str] = flatten_text("dc:description")
    last_modified_by: Optional[str] = flatten_text("cp:lastModifiedBy")
    revision: Optional[str] = flatten_text("cp:revision")
    created: Optional[Created] = child(Created)
    modified: Optional[Modified] = child(Modified)

    @classmethod
    def stamped(cls, creator: Optional[str] = None, moment: Optional[datetime] = None) -> "Core":
        """Core properties for a new document created at ``moment`` (now by default)."""
        stamp = w3cdtf(moment or datetime.now(timezone.utc))
        return cls(
            creator=creator,
            last_modified_by=creator,
            revision="1",
            created=Created(value=stamp),
            modified=Modified(value=stamp),
        )
