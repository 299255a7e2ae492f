"""Item validation.

Turns untyped records into `Item` values. Every record is validated on its
own: a bad record becomes an `InvalidItem` and the batch keeps going.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable

from pydantic import ValidationError

from core.domain.models import FieldIssue, InvalidItem, IssueKind, Item

logger = logging.getLogger(__name__)

# Pydantic error types that mean "the value is not there" rather than
# "the value has the wrong type". A blank name counts as missing.
_MISSING_ERROR_TYPES: frozenset[str] = frozenset({"missing", "string_too_short"})


def _issues_from_error(exc: ValidationError) -> list[FieldIssue]:
    issues: list[FieldIssue] = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else "item"
        kind = IssueKind.MISSING if err.get("type") in _MISSING_ERROR_TYPES else IssueKind.INVALID_TYPE
        issues.append(FieldIssue(field=field, kind=kind, message=str(err.get("msg", ""))))
    return issues


def validate_item(raw: Any, index: int = 0) -> Item | InvalidItem:
    """Validate one raw record.

    Returns either an `Item` or an `InvalidItem`; it never raises.
    """

    if not isinstance(raw, Mapping):
        return InvalidItem(
            index=index,
            raw=raw,
            issues=[
                FieldIssue(
                    field="item",
                    kind=IssueKind.INVALID_TYPE,
                    message=f"expected a mapping, got {type(raw).__name__}",
                )
            ],
        )

    try:
        return Item.model_validate(dict(raw))
    except ValidationError as exc:
        return InvalidItem(index=index, raw=dict(raw), issues=_issues_from_error(exc))


def validate_items(raw_items: Iterable[Any]) -> tuple[list[Item], list[InvalidItem]]:
    """Partition a batch into valid items and rejected records.

    Both lists keep the input order.
    """

    items: list[Item] = []
    errors: list[InvalidItem] = []

    for index, raw in enumerate(raw_items):
        outcome = validate_item(raw, index=index)
        if isinstance(outcome, Item):
            items.append(outcome)
        else:
            logger.info("Rejected item #%d (%s)", index, outcome.describe())
            errors.append(outcome)

    return items, errors
