"""Entity identity: lightweight handles to world entities."""

from unidiffs.core.identity.models import EntityId, GeneratorRef

__all__ = [
    "EntityId",
    "GeneratorRef",
]
