"""Target descriptors for hunks."""

from unidiffs.core.target.models import TargetDescriptor, TargetKind

__all__ = [
    "TargetDescriptor",
    "TargetKind",
]
