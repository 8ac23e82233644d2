"""Read evidence exports from disk into EvidenceRecord values."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from ..exceptions import EvidenceFormatError
from ..logging_config import get_logger
from .models import EvidenceRecord

logger = get_logger(__name__)


def parse_evidence(payload: Any, source: str = "<memory>") -> list[EvidenceRecord]:
    """Turn decoded JSON into records.

    Accepts either a bare array of records or an object carrying them under
    ``captures`` (the capture store's export shape).
    """
    if isinstance(payload, dict):
        if "captures" not in payload:
            raise EvidenceFormatError("expected a 'captures' array", source=source)
        payload = payload["captures"]
    if not isinstance(payload, list):
        raise EvidenceFormatError(
            f"expected an array of records, got {type(payload).__name__}", source=source
        )

    records = [EvidenceRecord.from_dict(item) for item in payload]
    logger.debug("Parsed %d evidence records from %s", len(records), source)
    return records


def load_evidence(path: Union[str, Path]) -> list[EvidenceRecord]:
    """Load evidence records from a JSON file.

    Raises
    ------
    EvidenceFormatError
        If the file cannot be read, is not valid JSON, or holds malformed records.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise EvidenceFormatError(f"cannot read file: {e}", source=str(path))
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise EvidenceFormatError(f"invalid JSON: {e}", source=str(path))
    return parse_evidence(payload, source=str(path))
