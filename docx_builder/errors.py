"""Exceptions raised while building, writing and reading DOCX parts."""
from __future__ import annotations

from typing import Optional, Tuple


class DocxError(Exception):
    """Base exception for docx_builder errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class XmlError(DocxError):
    """Base exception for the XML codec."""


class XmlSyntaxError(XmlError):
    """The input is not well-formed XML."""

    def __init__(self, message: str, details: Optional[str] = None, position: Optional[Tuple[int, int]] = None):
        super().__init__(message, details)
        self.position = position


class XmlSchemaError(XmlError):
    """The input is well-formed XML but does not have the expected shape."""

    def __init__(self, message: str, details: Optional[str] = None, element: Optional[str] = None):
        super().__init__(message, details)
        self.element = element


class XmlIOError(XmlError):
    """The underlying sink or source failed."""


class PackageError(DocxError):
    """The ZIP container is unreadable or lacks a required part."""
