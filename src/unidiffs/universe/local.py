"""Local in-memory universe implementation.

Simple dict-based world registry suitable for single-process use and testing.
Regions and generators are allocated as entities so handles can go stale.

Usage:
    universe = LocalUniverse()
    gamma = universe.add_region("Gamma", members=["Gamma Prime"])
    pirates = universe.register_generator("Pirates")
    universe.add_generator(gamma, pirates, 30)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from unidiffs.core.identity import EntityId, GeneratorRef
from unidiffs.universe.allocator import EntityAllocator
from unidiffs.universe.models import GeneratorEntry, Region


class LocalUniverse:
    """In-memory universe implementing both Universe and GeneratorRegistry.

    Structure:
        _regions[entity] = Region
        _region_ids[name] = entity
        _generators[name] = GeneratorRef
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._regions: dict[EntityId, Region] = {}
        self._region_ids: dict[str, EntityId] = {}
        self._generators: dict[str, GeneratorRef] = {}

    def _get_region(self, region: EntityId) -> Region | None:
        if not self._allocator.is_alive(region):
            return None
        return self._regions.get(region)

    # Registry management

    def add_region(
        self,
        name: str,
        members: Iterable[str] = (),
        generators: Iterable[tuple[GeneratorRef, int]] = (),
    ) -> EntityId:
        """Create a region and return its handle.

        Args:
            name: Unique region name.
            members: Initial member names.
            generators: Initial (generator, chance) entries.

        Returns:
            Handle of the new region.

        Raises:
            ValueError: If a region with this name already exists.
        """
        if name in self._region_ids:
            raise ValueError(f"Region '{name}' already exists")
        entity = self._allocator.allocate()
        self._regions[entity] = Region(
            name=name,
            members=list(members),
            generators=[GeneratorEntry(ref, chance) for ref, chance in generators],
        )
        self._region_ids[name] = entity
        return entity

    def remove_region(self, name: str) -> bool:
        """Destroy a region. Returns True if it existed."""
        entity = self._region_ids.pop(name, None)
        if entity is None:
            return False
        del self._regions[entity]
        self._allocator.deallocate(entity)
        return True

    def register_generator(self, name: str) -> GeneratorRef:
        """Register a population generator, returning the existing ref if known."""
        ref = self._generators.get(name)
        if ref is None:
            ref = GeneratorRef(name=name, id=self._allocator.allocate())
            self._generators[name] = ref
        return ref

    def get_generator(self, name: str) -> GeneratorRef | None:
        return self._generators.get(name)

    # Universe protocol

    def find_region(self, name: str) -> EntityId | None:
        return self._region_ids.get(name)

    def add_member(self, region: EntityId, name: str) -> bool:
        target = self._get_region(region)
        if target is None or name in target.members:
            return False
        target.members.append(name)
        return True

    def remove_member(self, region: EntityId, name: str) -> bool:
        target = self._get_region(region)
        if target is None or name not in target.members:
            return False
        target.members.remove(name)
        return True

    def add_generator(self, region: EntityId, ref: GeneratorRef, chance: int) -> bool:
        target = self._get_region(region)
        entry = GeneratorEntry(ref, chance)
        if target is None or entry in target.generators:
            return False
        target.generators.append(entry)
        return True

    def remove_generator(self, region: EntityId, ref: GeneratorRef, chance: int) -> bool:
        target = self._get_region(region)
        entry = GeneratorEntry(ref, chance)
        if target is None or entry not in target.generators:
            return False
        target.generators.remove(entry)
        return True

    # Inspection

    def regions(self) -> Iterator[str]:
        """Iterate region names in creation order."""
        yield from self._region_ids

    def members(self, name: str) -> tuple[str, ...]:
        """Member names of a region (empty if the region does not exist)."""
        entity = self._region_ids.get(name)
        if entity is None:
            return ()
        return tuple(self._regions[entity].members)

    def generators(self, name: str) -> tuple[GeneratorEntry, ...]:
        """Generator entries of a region (empty if the region does not exist)."""
        entity = self._region_ids.get(name)
        if entity is None:
            return ()
        return tuple(self._regions[entity].generators)

    def snapshot(self) -> dict[str, Any]:
        """Order-insensitive copy of world state, for comparisons.

        Returns:
            {region name: {"members": sorted names, "generators": sorted (name, chance)}}
        """
        return {
            region.name: {
                "members": sorted(region.members),
                "generators": sorted((e.ref.name, e.chance) for e in region.generators),
            }
            for region in self._regions.values()
        }
