"""Receipt JSON export.

Why JSON:
- Other tools (spreadsheets, payment scripts) can consume the split.
- Keeps a record of rejected items next to the receipt.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.services.split_pipeline import SplitResult


def export_receipt_json(*, result: SplitResult, output_path: Path) -> Path:
    """Export a `SplitResult` to UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "total": result.total,
        "receipt": result.receipt,
        "invalid_items": [invalid.model_dump(mode="json") for invalid in result.invalid_items],
    }
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
