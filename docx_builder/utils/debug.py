"""Helpers to persist the object model for debugging."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from docx_builder.package.docx_package import Docx


class DebugDumper:
    """Writes the parsed model onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, docx: Docx) -> Path:
        """Persist the package model as JSON and return the file written."""
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / "docx_model.json"
        target.write_text(json.dumps(self.serialize(docx), indent=2), encoding="utf-8")
        return target

    def serialize(self, value: Any) -> Any:
        # Element types are kept so that mixed lists (runs, hyperlinks, ...) stay readable.
        if is_dataclass(value) and not isinstance(value, type):
            payload = {"type": type(value).__name__}
            for item in fields(value):
                current = getattr(value, item.name)
                if current is None or current == []:
                    continue
                payload[item.name] = self.serialize(current)
            return payload
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, dict):
            return {k: self.serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self.serialize(v) for v in value]
        return value
