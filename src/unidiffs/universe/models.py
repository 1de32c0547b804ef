"""Universe data models: regions and their attached generators."""

from __future__ import annotations

from dataclasses import dataclass, field

from unidiffs.core.identity import GeneratorRef


@dataclass(frozen=True, slots=True)
class GeneratorEntry:
    """A population generator attached to a region with a spawn chance."""

    ref: GeneratorRef
    chance: int


@dataclass(slots=True)
class Region:
    """Named world location ("system") holding members and generators.

    Attributes:
        name: Unique region name.
        members: Member ("planet") names, in insertion order.
        generators: Attached generator entries, in insertion order.
    """

    name: str
    members: list[str] = field(default_factory=list)
    generators: list[GeneratorEntry] = field(default_factory=list)
