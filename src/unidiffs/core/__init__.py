"""Core functionalities: stateless value types and pure operations.

Architecture Note:
    core/ holds immutable models (handles, targets, hunks) and pure functions
    over them. Nothing here touches the universe. For stateful services, see
    universe/, diff/ and stack/.
"""

from unidiffs.core.hunk import (
    GeneratorPayload,
    Hunk,
    HunkInversionError,
    HunkKind,
    HunkPayload,
    PlanetPayload,
    describe,
    invert,
    invert_kind,
)
from unidiffs.core.identity import EntityId, GeneratorRef
from unidiffs.core.target import TargetDescriptor, TargetKind

__all__ = [
    # Identity
    "EntityId",
    "GeneratorRef",
    # Targets
    "TargetDescriptor",
    "TargetKind",
    # Hunks
    "Hunk",
    "HunkKind",
    "HunkPayload",
    "PlanetPayload",
    "GeneratorPayload",
    "HunkInversionError",
    "invert",
    "invert_kind",
    "describe",
]
