"""Universe: the world entities diffs mutate.

Architecture Note:
    universe/ is a stateful service layer. The diff engine only borrows it
    through the Universe and GeneratorRegistry protocols; LocalUniverse is the
    in-memory implementation used by tests and small hosts.
"""

from unidiffs.universe.allocator import EntityAllocator
from unidiffs.universe.local import LocalUniverse
from unidiffs.universe.models import GeneratorEntry, Region
from unidiffs.universe.protocol import GeneratorRegistry, Universe
from unidiffs.universe.resolver import TargetResolver

__all__ = [
    "Universe",
    "GeneratorRegistry",
    "LocalUniverse",
    "EntityAllocator",
    "Region",
    "GeneratorEntry",
    "TargetResolver",
]
