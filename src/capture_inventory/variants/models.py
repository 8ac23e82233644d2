"""Value types for the bucketed variant view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..evidence.models import EvidenceRecord


class GroupingMode(str, Enum):
    """How coarsely captures are grouped, from loosest to tightest."""

    NAME_ONLY = "nameOnly"  # tag + name
    NAME_PLUS_TYPE = "namePlusType"  # tag + role + name
    NAME_TYPE_PRIMITIVES = "nameTypePrimitives"  # tag + role + name + bucketed primitives


@dataclass(frozen=True)
class PrimitiveExplanation:
    padding: Optional[str] = None  # "pt8 pr12 pb8 pl12"
    colors: Optional[str] = None  # "bg240,240,240,1 bdnone c0,0,0,1"
    shadow: Optional[str] = None  # "shsome-2"

    def to_dict(self) -> dict[str, Any]:
        return {"padding": self.padding, "colors": self.colors, "shadow": self.shadow}


@dataclass(frozen=True)
class GroupExplanation:
    """Why captures share a group, read back from the group key alone."""

    tag: str
    role: Optional[str] = None
    name: Optional[str] = None
    primitives: Optional[PrimitiveExplanation] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "role": self.role,
            "name": self.name,
            "primitives": self.primitives.to_dict() if self.primitives else None,
        }


@dataclass(frozen=True)
class CaptureGroup:
    key: str
    members: tuple[EvidenceRecord, ...]
    explanation: GroupExplanation

    @property
    def count(self) -> int:
        return len(self.members)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "count": self.count,
            "explanation": self.explanation.to_dict(),
            "captureIds": [m.id for m in self.members],
        }


@dataclass(frozen=True)
class Variant:
    """Members of a group that share one full bucketed fingerprint."""

    key: str
    members: tuple[EvidenceRecord, ...]
    index: int  # 1-based display position

    @property
    def count(self) -> int:
        return len(self.members)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "index": self.index,
            "count": self.count,
            "captureIds": [m.id for m in self.members],
        }
