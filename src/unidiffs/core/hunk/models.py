"""Hunk models: kinds, payload variants and the hunk value itself.

A hunk is one atomic mutation inside a diff. Its payload variant must match
its kind; the pairing is checked when the hunk is built, not when applied.

Usage:
    hunk = Hunk(
        target=TargetDescriptor.region("Gamma"),
        kind=HunkKind.PLANET_ADD,
        payload=PlanetPayload("Outpost"),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from unidiffs.core.identity import GeneratorRef
from unidiffs.core.target import TargetDescriptor


class HunkKind(Enum):
    """Mutation performed by a hunk. NONE marks unrecognized catalog actions."""

    NONE = auto()
    PLANET_ADD = auto()
    PLANET_REMOVE = auto()
    GENERATOR_ADD = auto()
    GENERATOR_REMOVE = auto()

    @property
    def is_planet(self) -> bool:
        return self in (HunkKind.PLANET_ADD, HunkKind.PLANET_REMOVE)

    @property
    def is_generator(self) -> bool:
        return self in (HunkKind.GENERATOR_ADD, HunkKind.GENERATOR_REMOVE)


@dataclass(frozen=True, slots=True)
class PlanetPayload:
    """Region member to add or remove."""

    name: str | None


@dataclass(frozen=True, slots=True)
class GeneratorPayload:
    """Population generator entry keyed by (generator, chance).

    Attributes:
        generator: Generator name as written in the catalog.
        chance: Spawn chance percentage, None when the catalog value is unusable.
        ref: Registry handle, None when the name did not resolve.
    """

    generator: str | None
    chance: int | None
    ref: GeneratorRef | None = None


HunkPayload = PlanetPayload | GeneratorPayload


@dataclass(frozen=True, slots=True)
class Hunk:
    """Invertible atomic mutation of one target entity."""

    target: TargetDescriptor
    kind: HunkKind
    payload: HunkPayload

    def __post_init__(self) -> None:
        if self.kind.is_planet and not isinstance(self.payload, PlanetPayload):
            raise TypeError(
                f"{self.kind.name} hunk requires PlanetPayload, "
                f"got {type(self.payload).__name__}"
            )
        if self.kind.is_generator and not isinstance(self.payload, GeneratorPayload):
            raise TypeError(
                f"{self.kind.name} hunk requires GeneratorPayload, "
                f"got {type(self.payload).__name__}"
            )
        if not isinstance(self.payload, PlanetPayload | GeneratorPayload):
            raise TypeError(f"Invalid hunk payload: {type(self.payload).__name__}")
