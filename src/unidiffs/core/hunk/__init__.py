"""Hunk functionality: atomic invertible mutations."""

from unidiffs.core.hunk.models import (
    GeneratorPayload,
    Hunk,
    HunkKind,
    HunkPayload,
    PlanetPayload,
)
from unidiffs.core.hunk.operations import (
    HunkInversionError,
    describe,
    invert,
    invert_kind,
)

__all__ = [
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
