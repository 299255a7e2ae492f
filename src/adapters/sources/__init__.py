"""Purchase sources (concrete `PurchaseSource` implementations).

Each module reads a purchase from one kind of input.
"""

from adapters.sources.json_file import JsonPurchaseSource
from adapters.sources.terminal import TerminalPurchaseSource, to_minor_units

__all__ = [
    "JsonPurchaseSource",
    "TerminalPurchaseSource",
    "to_minor_units",
]
