"""DOCX container: assemble parts into a ZIP archive and load them back."""
from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterator, Mapping, Optional, Tuple, Type, TypeVar, Union

from docx_builder.codec.mapping import XmlElement
from docx_builder.errors import PackageError
from docx_builder.model.document_model import Document
from docx_builder.model.package_model import ContentTypes, Relationships, rels_part_for, resolve_target
from docx_builder.model.properties import App, Core
from docx_builder.model.style_model import Styles
from docx_builder.schema import (
    APP_PART,
    CONTENT_TYPE_APP,
    CONTENT_TYPE_CORE,
    CONTENT_TYPE_DOCUMENT,
    CONTENT_TYPE_RELATIONSHIPS,
    CONTENT_TYPE_STYLES,
    CONTENT_TYPE_XML,
    CONTENT_TYPES_PART,
    CORE_PART,
    DOCUMENT_PART,
    PACKAGE_RELS_PART,
    REL_TYPE_CORE_PROPERTIES,
    REL_TYPE_EXTENDED_PROPERTIES,
    REL_TYPE_HYPERLINK,
    REL_TYPE_OFFICE_DOCUMENT,
    REL_TYPE_STYLES,
    STYLES_PART,
)
from docx_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

P = TypeVar("P", bound=XmlElement)


def _zip_name(part_name: str) -> str:
    return part_name.lstrip("/")


def _relative_to(source_part: str, part_name: str) -> str:
    """Target of ``part_name`` as written in the rels of ``source_part``."""
    folder = source_part.rsplit("/", 1)[0]
    prefix = f"{folder}/" if folder else "/"
    if part_name.startswith(prefix):
        return part_name[len(prefix):]
    return part_name


@dataclass(slots=True)
class Docx:
    """A word-processing package made of its XML parts.

    ``document_rels`` holds relationships the caller adds to the main
    document, e.g. external hyperlink targets; the styles relationship is
    added on write.
    """

    document: Document = field(default_factory=Document)
    styles: Optional[Styles] = field(default_factory=Styles)
    app: Optional[App] = field(default_factory=App)
    core: Optional[Core] = None
    document_rels: Relationships = field(default_factory=Relationships)

    def add_hyperlink(self, url: str) -> str:
        """Register an external hyperlink target and return its ``r:id``."""
        return self.document_rels.push(REL_TYPE_HYPERLINK, url, external=True)

    # ------------------------------------------------------------------
    # Writing
    def parts(self) -> Iterator[Tuple[str, bytes]]:
        """Yield ``(part name, XML bytes)`` for every part of the package."""
        content_types = (
            ContentTypes()
            .push_default("rels", CONTENT_TYPE_RELATIONSHIPS)
            .push_default("xml", CONTENT_TYPE_XML)
            .push_override(DOCUMENT_PART, CONTENT_TYPE_DOCUMENT)
        )
        package_rels = Relationships()
        package_rels.push(REL_TYPE_OFFICE_DOCUMENT, _zip_name(DOCUMENT_PART))

        document_rels = Relationships(list(self.document_rels.relationships))
        if self.styles is not None:
            content_types.push_override(STYLES_PART, CONTENT_TYPE_STYLES)
            if not document_rels.by_type(REL_TYPE_STYLES):
                document_rels.push(REL_TYPE_STYLES, _relative_to(DOCUMENT_PART, STYLES_PART))
        if self.app is not None:
            content_types.push_override(APP_PART, CONTENT_TYPE_APP)
            package_rels.push(REL_TYPE_EXTENDED_PROPERTIES, _zip_name(APP_PART))
        if self.core is not None:
            content_types.push_override(CORE_PART, CONTENT_TYPE_CORE)
            package_rels.push(REL_TYPE_CORE_PROPERTIES, _zip_name(CORE_PART))

        yield CONTENT_TYPES_PART, content_types.to_bytes()
        yield PACKAGE_RELS_PART, package_rels.to_bytes()
        yield DOCUMENT_PART, self.document.to_bytes()
        yield rels_part_for(DOCUMENT_PART), document_rels.to_bytes()
        if self.styles is not None:
            yield STYLES_PART, self.styles.to_bytes()
        if self.app is not None:
            yield APP_PART, self.app.to_bytes()
        if self.core is not None:
            yield CORE_PART, self.core.to_bytes()

    def write(self, stream: BinaryIO) -> None:
        try:
            with zipfile.ZipFile(stream, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                for part_name, data in self.parts():
                    archive.writestr(_zip_name(part_name), data)
        except OSError as exc:
            raise PackageError("Failed to write DOCX package", details=str(exc)) from exc

    def write_file(self, path: Union[str, Path]) -> None:
        path = Path(path)
        with path.open("wb") as stream:
            self.write(stream)
        LOGGER.info("Wrote DOCX package to %s", path)

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.write(buffer)
        return buffer.getvalue()

    # ------------------------------------------------------------------
    # Reading
    @classmethod
    def load(cls, docx_path: Union[str, Path]) -> "Docx":
        """Open a DOCX archive and parse the modeled parts."""
        docx_path = Path(docx_path)
        try:
            with zipfile.ZipFile(docx_path) as archive:
                parts = {f"/{name}": archive.read(name) for name in archive.namelist()}
        except (OSError, zipfile.BadZipFile, NotImplementedError) as exc:
            raise PackageError("Failed to open DOCX package", details=f"{docx_path}: {exc}") from exc
        LOGGER.info("Loaded %d parts from %s", len(parts), docx_path.name)
        return cls.from_parts(parts)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Docx":
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as archive:
                parts = {f"/{name}": archive.read(name) for name in archive.namelist()}
        except (OSError, zipfile.BadZipFile, NotImplementedError) as exc:
            raise PackageError("Failed to open DOCX package", details=str(exc)) from exc
        return cls.from_parts(parts)

    @classmethod
    def from_parts(cls, parts: Mapping[str, bytes]) -> "Docx":
        """Build a package from part names (with leading ``/``) and payloads."""
        package_rels = _parse_optional(parts, PACKAGE_RELS_PART, Relationships) or Relationships()
        document_part = _target_part("/", package_rels, REL_TYPE_OFFICE_DOCUMENT) or DOCUMENT_PART
        document = _parse_optional(parts, document_part, Document)
        if document is None:
            raise PackageError("Required DOCX part missing", details=document_part)

        document_rels = _parse_optional(parts, rels_part_for(document_part), Relationships) or Relationships()
        styles_part = _target_part(document_part, document_rels, REL_TYPE_STYLES) or STYLES_PART
        app_part = _target_part("/", package_rels, REL_TYPE_EXTENDED_PROPERTIES) or APP_PART
        core_part = _target_part("/", package_rels, REL_TYPE_CORE_PROPERTIES) or CORE_PART

        # the styles relationship is regenerated on write
        document_rels.relationships = [rel for rel in document_rels.relationships if rel.rel_type != REL_TYPE_STYLES]

        return cls(
            document=document,
            styles=_parse_optional(parts, styles_part, Styles),
            app=_parse_optional(parts, app_part, App),
            core=_parse_optional(parts, core_part, Core),
            document_rels=document_rels,
        )


def _target_part(source_part: str, rels: Relationships, rel_type: str) -> Optional[str]:
    target = rels.first_target(rel_type)
    if target is None:
        return None
    return resolve_target(source_part, target)


def _parse_optional(parts: Mapping[str, bytes], name: str, kind: Type[P]) -> Optional[P]:
    data = parts.get(name)
    if data is None:
        LOGGER.debug("Part not present: %s", name)
        return None
    return kind.from_bytes(data)
