"""Target resolution: symbolic descriptors to live entity handles."""

from __future__ import annotations

from unidiffs.core.identity import EntityId
from unidiffs.core.target import TargetDescriptor, TargetKind
from unidiffs.universe.protocol import Universe


class TargetResolver:
    """Resolves hunk targets against a universe.

    Args:
        universe: World registry used for name lookups.
    """

    def __init__(self, universe: Universe) -> None:
        self._universe = universe

    @property
    def universe(self) -> Universe:
        return self._universe

    def resolve(self, descriptor: TargetDescriptor) -> EntityId | None:
        """Resolve a descriptor to a live entity.

        Unset (NONE) descriptors never resolve.

        Returns:
            Entity handle, or None if not found.
        """
        if descriptor.kind is TargetKind.REGION and descriptor.name is not None:
            return self._universe.find_region(descriptor.name)
        return None
