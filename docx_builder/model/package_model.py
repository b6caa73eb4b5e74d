"""Open Packaging Convention manifests: content types and relationships."""
from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Dict, List, Optional

from docx_builder.codec.mapping import XmlElement, attr, children
from docx_builder.schema import CONTENT_TYPES_PART, SCHEMA_CONTENT_TYPES, SCHEMA_RELATIONSHIPS


@dataclass(slots=True)
class Default(XmlElement):
    TAG = "Default"
    NAMESPACE = SCHEMA_CONTENT_TYPES

    extension: str = attr("Extension", required=True)
    content_type: str = attr("ContentType", required=True)


@dataclass(slots=True)
class Override(XmlElement):
    TAG = "Override"
    NAMESPACE = SCHEMA_CONTENT_TYPES

    part_name: str = attr("PartName", required=True)
    content_type: str = attr("ContentType", required=True)


@dataclass(slots=True)
class ContentTypes(XmlElement):
    """``[Content_Types].xml``: media type of every part in the package."""

    TAG = "Types"
    NAMESPACE = SCHEMA_CONTENT_TYPES
    ROOT = True
    PART_NAME = CONTENT_TYPES_PART
    NAMESPACES = (("xmlns", SCHEMA_CONTENT_TYPES),)

    defaults: List[Default] = children(Default)
    overrides: List[Override] = children(Override)

    def push_default(self, extension: str, content_type: str) -> "ContentTypes":
        self.defaults.append(Default(extension, content_type))
        return self

    def push_override(self, part_name: str, content_type: str) -> "ContentTypes":
        self.overrides.append(Override(part_name, content_type))
        return self

    def content_type_for(self, part_name: str) -> Optional[str]:
        """Resolve a part name through the overrides, then the extension defaults."""
        for override in self.overrides:
            if override.part_name == part_name:
                return override.content_type
        extension = posixpath.splitext(part_name)[1].lstrip(".").lower()
        for default in self.defaults:
            if default.extension.lower() == extension:
                return default.content_type
        return None


@dataclass(slots=True)
class Relationship(XmlElement):
    TAG = "Relationship"
    NAMESPACE = SCHEMA_RELATIONSHIPS

    id: str = attr("Id", required=True)
    rel_type: str = attr("Type", required=True)
    target: str = attr("Target", required=True)
    target_mode: Optional[str] = attr("TargetMode")

    @property
    def is_external(self) -> bool:
        return self.target_mode == "External"


@dataclass(slots=True)
class Relationships(XmlElement):
    """A ``.rels`` part listing the relationships of one source part."""

    TAG = "Relationships"
    NAMESPACE = SCHEMA_RELATIONSHIPS
    ROOT = True
    NAMESPACES = (("xmlns", SCHEMA_RELATIONSHIPS),)

    relationships: List[Relationship] = children(Relationship)

    def push(self, rel_type: str, target: str, *, external: bool = False) -> str:
        """Register a relationship under the next free ``rIdN`` and return the id."""
        taken = {rel.id for rel in self.relationships}
        index = len(self.relationships) + 1
        while f"rId{index}" in taken:
            index += 1
        r_id = f"rId{index}"
        self.relationships.append(Relationship(r_id, rel_type, target, "External" if external else None))
        return r_id

    def find(self, r_id: str) -> Optional[Relationship]:
        for rel in self.relationships:
            if rel.id == r_id:
                return rel
        return None

    def by_type(self, rel_type: str) -> Dict[str, Relationship]:
        return {rel.id: rel for rel in self.relationships if rel.rel_type == rel_type}

    def first_target(self, rel_type: str) -> Optional[str]:
        for rel in self.relationships:
            if rel.rel_type == rel_type:
                return rel.target
        return None


def rels_part_for(part_name: str) -> str:
    """``/word/document.xml`` -> ``/word/_rels/document.xml.rels``."""
    folder, name = posixpath.split(part_name)
    return posixpath.join(folder, "_rels", f"{name}.rels")


def resolve_target(source_part: str, target: str) -> str:
    """Resolve a relationship target relative to its source part."""
    if target.startswith("/"):
        return posixpath.normpath(target)
    base_dir = posixpath.dirname(source_part) or "/"
    return posixpath.normpath(posixpath.join(base_dir, target))

