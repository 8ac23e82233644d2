"""JSON export of derived data.

Two payloads are produced:

    capture export    one entry per capture with its viewer-derived group
                      and variant keys, so a grouping can be reproduced
                      outside the viewer
    inventory export  the aggregated component and style lists

Both are stamped with ``SIGNATURE_VERSION`` and the export time.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from .evidence.models import EvidenceRecord
from .exceptions import InventoryError
from .identity.signature import SIGNATURE_VERSION
from .inventory.components import aggregate_components
from .inventory.styles import aggregate_styles
from .logging_config import get_logger
from .variants.grouping import compute_group_key, compute_variant_key
from .variants.models import GroupingMode

logger = get_logger(__name__)


def _timestamp(exported_at: Optional[datetime]) -> str:
    moment = exported_at or datetime.now(timezone.utc)
    return moment.isoformat()


def build_capture_export(
    records: Sequence[EvidenceRecord],
    mode: Union[GroupingMode, str],
    exported_at: Optional[datetime] = None,
) -> dict[str, Any]:
    """Stamp each capture with its group and variant key under *mode*."""
    mode = GroupingMode(mode)
    captures = [
        {
            "captureId": record.id,
            "url": record.url,
            "projectId": record.project_id,
            "elementId": record.element.element_id,
            "landmarkRole": record.scope_landmark_role,
            "createdAt": record.created_at,
            "viewerDerived": {
                "groupingMode": mode.value,
                "groupKey": compute_group_key(record, mode),
                "variantKey": compute_variant_key(record),
                "signatureVersion": SIGNATURE_VERSION,
            },
        }
        for record in records
    ]
    return {
        "exportedAt": _timestamp(exported_at),
        "signatureVersion": SIGNATURE_VERSION,
        "captures": captures,
    }


def build_inventory_export(
    records: Sequence[EvidenceRecord],
    exported_at: Optional[datetime] = None,
    stable_representatives: bool = False,
) -> dict[str, Any]:
    """Aggregate *records* and render components and styles for export."""
    components = aggregate_components(records, stable_representatives=stable_representatives)
    styles = aggregate_styles(records)
    return {
        "exportedAt": _timestamp(exported_at),
        "signatureVersion": SIGNATURE_VERSION,
        "components": [c.to_dict() for c in components],
        "styles": [s.to_dict() for s in styles],
    }


def write_export(payload: dict[str, Any], path: Union[str, Path]) -> Path:
    """Write *payload* as indented JSON, creating parent directories.

    Raises:
        InventoryError: If the file cannot be written
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as e:
        raise InventoryError(f"Cannot write export to '{target}'", details={"error": str(e)})
    logger.debug("Wrote export to %s", target)
    return target
