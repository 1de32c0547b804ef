"""Diff application: hunk outcomes, per-diff journals and errors.

Architecture Note:
    diff/ applies hunks to a borrowed universe and journals the outcome. The
    stack that owns records lives in stack/, which also drives the catalog.
"""

from unidiffs.diff.apply import HunkStatus, apply_hunk
from unidiffs.diff.errors import (
    CatalogMalformedError,
    DiffError,
    DiffNotFoundError,
    SaveMalformedError,
)
from unidiffs.diff.record import DiffRecord, RevertOrder

__all__ = [
    "HunkStatus",
    "apply_hunk",
    "DiffRecord",
    "RevertOrder",
    "DiffError",
    "CatalogMalformedError",
    "DiffNotFoundError",
    "SaveMalformedError",
]
