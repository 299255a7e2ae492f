"""Purchase file loader (JSON).

Expected format:
    {"items": [{"name": "...", "amount": 1, "price": 250}, ...],
     "recipients": ["one@example.com", ...]}

Only the envelope is checked here. Item records go through untouched: the
core validator decides which ones are usable.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from core.domain.errors import PurchaseSourceError

logger = logging.getLogger(__name__)


class PurchaseFile(BaseModel):
    items: list[Any] = Field(default_factory=list)
    recipients: list[str] = Field(default_factory=list)


def load_purchase_file(path: Path) -> PurchaseFile:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PurchaseSourceError(f"cannot read purchase file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise PurchaseSourceError(f"{path} is not UTF-8 text: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PurchaseSourceError(f"{path} is not valid JSON: {exc}") from exc

    try:
        return PurchaseFile.model_validate(data)
    except ValidationError as exc:
        raise PurchaseSourceError(f"{path} is not a purchase file: {exc.error_count()} error(s)") from exc


class JsonPurchaseSource:
    """Reads a purchase from a JSON file (loaded once, on first use)."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._purchase: PurchaseFile | None = None

    def _load(self) -> PurchaseFile:
        if self._purchase is None:
            self._purchase = load_purchase_file(self.path)
            logger.debug(
                "Loaded %s: %d item(s), %d recipient(s)",
                self.path,
                len(self._purchase.items),
                len(self._purchase.recipients),
            )
        return self._purchase

    def read_items(self) -> list[dict[str, Any]]:
        return list(self._load().items)

    def read_recipients(self) -> list[str]:
        return list(self._load().recipients)
