"""Entity identity models.

Usage:
    region = EntityId(index=3, generation=0)
    pirates = GeneratorRef(name="Pirates", id=EntityId(index=4))
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Handle to a live world entity (a region or a population generator).

    The generation is bumped whenever an index is recycled, so a handle held
    across a removal never aliases the entity that reuses its slot.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))

    def __str__(self) -> str:
        return f"{self.index}v{self.generation}"


@dataclass(frozen=True, slots=True)
class GeneratorRef:
    """Handle to a registered population generator ("fleet" in the catalog)."""

    name: str
    id: EntityId

    def __str__(self) -> str:
        return self.name
