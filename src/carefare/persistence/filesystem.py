"""File-based persistence for priced quotes."""

from __future__ import annotations

import json
import re
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..config import settings

_QUOTE_ID = re.compile(r"^q_\d{8}T\d{6}Z_[0-9a-f]{8}$")


class QuoteNotFoundError(FileNotFoundError):
    """Raised when a quote id is malformed or has no stored document."""


class FileStorage:
    """Thin wrapper around the data root for storing quote documents as JSON."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.output_root = self.root / "outputs"
        self.quote_root = self.output_root / "quotes"
        self.quote_root.mkdir(parents=True, exist_ok=True)

    def make_quote_id(self) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        return f"q_{timestamp}_{uuid.uuid4().hex[:8]}"

    def quote_path(self, quote_id: str) -> Path:
        if not _QUOTE_ID.match(quote_id):
            raise QuoteNotFoundError(f"Quote '{quote_id}' not found.")
        return self.quote_root / f"{quote_id}.json"

    def save_quote(self, payload: dict[str, Any]) -> str:
        quote_id = self.make_quote_id()
        self.write_json(self.quote_path(quote_id), {**payload, "quoteId": quote_id})
        return quote_id

    def load_quote(self, quote_id: str) -> dict[str, Any]:
        path = self.quote_path(quote_id)
        if not path.exists():
            raise QuoteNotFoundError(f"Quote '{quote_id}' not found.")
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    def list_quotes(self) -> list[str]:
        return sorted((path.stem for path in self.quote_root.glob("q_*.json")), reverse=True)

    def write_json(self, path: Path, data: Any, *, indent: int = 2) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=indent)
