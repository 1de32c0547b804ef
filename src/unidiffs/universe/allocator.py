"""Entity allocation service.

EntityAllocator is a stateful service that manages entity ID lifecycle.
"""

from __future__ import annotations

from unidiffs.core.identity import EntityId


class EntityAllocator:
    """Allocates entity IDs with generation tracking for recycling.

    Freed indices are kept on a free list with their generation bumped, so a
    stale handle to a removed region never resolves to whatever reuses its slot.
    """

    def __init__(self) -> None:
        self._next_index = 0
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> EntityId:
        """Allocate new entity ID, reusing recycled slots when available.

        Returns:
            Newly allocated EntityId.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            return EntityId(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return EntityId(index=index, generation=0)

    def deallocate(self, entity: EntityId) -> None:
        """Return entity ID for reuse with incremented generation.

        Args:
            entity: Entity ID to deallocate.

        Raises:
            ValueError: If entity is not currently alive.
        """
        if not self.is_alive(entity):
            raise ValueError(f"Cannot deallocate stale entity {entity}")

        new_gen = entity.generation + 1
        self._generations[entity.index] = new_gen
        self._free_list.append((entity.index, new_gen))

    def is_alive(self, entity: EntityId) -> bool:
        """Check if entity ID is still valid (not recycled)."""
        return self._generations.get(entity.index, -1) == entity.generation
