"""Universe protocols for swappable world backends.

The diff engine never owns world entities. It borrows them through these two
interfaces, which a host simulation implements over its own data:
- Universe: region lookup plus the four mutations hunks perform
- GeneratorRegistry: name lookup for population generators

Usage:
    universe = LocalUniverse()
    stack = DiffStack(universe, catalog)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from unidiffs.core.identity import EntityId, GeneratorRef


@runtime_checkable
class Universe(Protocol):
    """World-entity registry. Mutators return True when the world changed."""

    def find_region(self, name: str) -> EntityId | None:
        """Look up a live region by name."""
        ...

    def add_member(self, region: EntityId, name: str) -> bool:
        """Add a member to a region. False if already present."""
        ...

    def remove_member(self, region: EntityId, name: str) -> bool:
        """Remove a member from a region. False if not present."""
        ...

    def add_generator(self, region: EntityId, ref: GeneratorRef, chance: int) -> bool:
        """Attach a (generator, chance) entry. False if the same entry is attached."""
        ...

    def remove_generator(self, region: EntityId, ref: GeneratorRef, chance: int) -> bool:
        """Detach a (generator, chance) entry. False if not attached."""
        ...


@runtime_checkable
class GeneratorRegistry(Protocol):
    """Population generator registry."""

    def get_generator(self, name: str) -> GeneratorRef | None:
        """Look up a generator by name."""
        ...
