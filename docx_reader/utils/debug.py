"""Helpers to persist the parsed model for debugging."""
from __future__ import annotations

import base64
import json
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any

from docx_reader.model.document_model import ParseResult
from docx_reader.model.numbering_model import ListCounters
from docx_reader.parser.media_extractor import sniff_image_type


class DebugDumper:
    """Writes the parse result onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, result: ParseResult) -> Path:
        """Persist the parse result as JSON for offline analysis."""
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / "parse_result.json"
        target.write_text(json.dumps(self._serialize(result), indent=2, ensure_ascii=False), encoding="utf-8")
        return target

    def _serialize(self, value: Any) -> Any:
        if isinstance(value, ListCounters):
            return {f"{list_id}:{level}": count for (list_id, level), count in value.snapshot().items()}
        if is_dataclass(value):
            payload = {}
            element_type = getattr(value, "element_type", None)
            if element_type is not None:
                payload["type"] = element_type.value
            for item in fields(value):
                payload[item.name] = self._serialize(getattr(value, item.name))
            return payload
        if isinstance(value, bytes):
            return {
                "media_type": sniff_image_type(value),
                "size": len(value),
                "base64": base64.b64encode(value).decode("ascii"),
            }
        if isinstance(value, dict):
            return {str(k): self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value
