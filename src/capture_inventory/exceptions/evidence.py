"""Evidence loading exceptions.

Only the loading boundary raises these. The derivation engine degrades to
sentinel values instead of raising.
"""

from typing import Optional

from .base import InventoryError


class EvidenceFormatError(InventoryError):
    """Raised when an evidence payload cannot be turned into records."""

    def __init__(self, reason: str, source: Optional[str] = None):
        details = {"reason": reason}
        if source:
            details["source"] = source

        super().__init__(f"Malformed evidence: {reason}", details=details)
        self.reason = reason
        self.source = source
