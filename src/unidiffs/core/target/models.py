"""Hunk target descriptors.

Usage:
    target = TargetDescriptor.region("Gamma")
    assert target.is_valid()
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TargetKind(Enum):
    """What kind of world entity a hunk targets."""

    NONE = auto()  # Unset or invalid, never resolves
    REGION = auto()  # Named region ("system" in the catalog)


@dataclass(frozen=True, slots=True)
class TargetDescriptor:
    """Symbolic reference to the entity a hunk mutates.

    Resolved to a live handle only at apply time, so a descriptor can outlive
    the entity it names (e.g. across a universe reload).
    """

    kind: TargetKind = TargetKind.NONE
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind is TargetKind.REGION and not self.name:
            raise ValueError("Region target requires a name")

    @classmethod
    def region(cls, name: str | None) -> TargetDescriptor:
        """Build a region target, or an unset one when name is missing."""
        if not name:
            return cls()
        return cls(kind=TargetKind.REGION, name=name)

    def is_valid(self) -> bool:
        return self.kind is not TargetKind.NONE

    def __str__(self) -> str:
        return self.name if self.name is not None else "<none>"
