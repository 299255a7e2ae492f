"""Purchase input contract.

Why Protocol:
- Structural typing: the terminal prompts and the JSON file reader are
  interchangeable without a shared base class.
- Tests can feed the pipeline with any small object that has these methods.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PurchaseSource(Protocol):
    """Minimal contract for something that supplies a purchase.

    Rules:
    - Items are returned raw (untyped mappings); validation is the core's job.
    - Recipients are returned as typed, duplicates included.
    """

    def read_items(self) -> list[dict[str, Any]]:
        """Return the raw item records."""

        ...

    def read_recipients(self) -> list[str]:
        """Return the recipient identifiers (emails)."""

        ...
