"""Hunk application against a universe.

apply_hunk only decides and performs; it returns a HunkStatus and leaves
reporting to callers (see catalog.loader.report_failures).

Usage:
    status = apply_hunk(hunk, universe)
    if not status.ok:
        record.failed.append(hunk)
"""

from __future__ import annotations

from enum import Enum, auto

import structlog

from unidiffs.core.hunk import GeneratorPayload, Hunk, HunkKind, PlanetPayload
from unidiffs.universe.protocol import Universe
from unidiffs.universe.resolver import TargetResolver

logger = structlog.get_logger(__name__)

MIN_CHANCE = 0
MAX_CHANCE = 100


class HunkStatus(Enum):
    """Outcome of applying a single hunk."""

    APPLIED = auto()
    TARGET_NOT_FOUND = auto()  # Descriptor unset or no such region
    ALREADY_PRESENT = auto()  # Add of something already there
    NOT_PRESENT = auto()  # Remove of something missing
    UNKNOWN_GENERATOR = auto()  # Generator name did not resolve
    INVALID_PAYLOAD = auto()  # Missing name or chance out of range
    UNKNOWN_KIND = auto()  # NONE kind

    @property
    def ok(self) -> bool:
        return self is HunkStatus.APPLIED


def _changed(changed: bool, add: bool) -> HunkStatus:
    if changed:
        return HunkStatus.APPLIED
    return HunkStatus.ALREADY_PRESENT if add else HunkStatus.NOT_PRESENT


def apply_hunk(
    hunk: Hunk,
    universe: Universe,
    resolver: TargetResolver | None = None,
) -> HunkStatus:
    """Apply one hunk to the universe.

    The universe is mutated only when APPLIED is returned.

    Args:
        hunk: Hunk to apply.
        universe: World registry to mutate.
        resolver: Target resolver (defaults to one over universe).

    Returns:
        HunkStatus describing the outcome.
    """
    if hunk.kind is HunkKind.NONE:
        logger.warning("Unknown hunk type", kind=hunk.kind.name, target=str(hunk.target))
        return HunkStatus.UNKNOWN_KIND

    resolver = resolver or TargetResolver(universe)
    region = resolver.resolve(hunk.target)
    if region is None:
        return HunkStatus.TARGET_NOT_FOUND

    payload = hunk.payload
    add = hunk.kind in (HunkKind.PLANET_ADD, HunkKind.GENERATOR_ADD)

    if isinstance(payload, PlanetPayload):
        if not payload.name:
            return HunkStatus.INVALID_PAYLOAD
        if add:
            return _changed(universe.add_member(region, payload.name), add)
        return _changed(universe.remove_member(region, payload.name), add)

    if isinstance(payload, GeneratorPayload):
        if payload.ref is None:
            return HunkStatus.UNKNOWN_GENERATOR
        if payload.chance is None or not MIN_CHANCE <= payload.chance <= MAX_CHANCE:
            return HunkStatus.INVALID_PAYLOAD
        if add:
            return _changed(universe.add_generator(region, payload.ref, payload.chance), add)
        return _changed(universe.remove_generator(region, payload.ref, payload.chance), add)

    return HunkStatus.INVALID_PAYLOAD  # pragma: no cover
