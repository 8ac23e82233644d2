"""Exception hierarchy for Capture Inventory."""

from .base import InventoryError
from .config import ConfigurationError, InvalidConfigError
from .evidence import EvidenceFormatError

__all__ = [
    "InventoryError",
    "ConfigurationError",
    "InvalidConfigError",
    "EvidenceFormatError",
]
