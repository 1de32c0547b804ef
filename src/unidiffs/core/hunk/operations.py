"""Pure hunk operations: inversion and human-readable descriptions."""

from __future__ import annotations

from dataclasses import replace

from unidiffs.core.hunk.models import GeneratorPayload, Hunk, HunkKind, PlanetPayload

_INVERSES: dict[HunkKind, HunkKind] = {
    HunkKind.PLANET_ADD: HunkKind.PLANET_REMOVE,
    HunkKind.PLANET_REMOVE: HunkKind.PLANET_ADD,
    HunkKind.GENERATOR_ADD: HunkKind.GENERATOR_REMOVE,
    HunkKind.GENERATOR_REMOVE: HunkKind.GENERATOR_ADD,
}

_LABELS: dict[HunkKind, str] = {
    HunkKind.PLANET_ADD: "planet add",
    HunkKind.PLANET_REMOVE: "planet remove",
    HunkKind.GENERATOR_ADD: "generator add",
    HunkKind.GENERATOR_REMOVE: "generator remove",
}


class HunkInversionError(ValueError):
    """Raised when a hunk's kind has no inverse."""

    pass


def invert_kind(kind: HunkKind) -> HunkKind | None:
    """Return the inverse kind, or None for kinds outside the involution table."""
    return _INVERSES.get(kind)


def invert(hunk: Hunk) -> Hunk:
    """Build the hunk that undoes this one.

    Target and payload are carried over unchanged; hunks are frozen, so the
    result never aliases mutable state with the original.

    Args:
        hunk: Hunk to invert.

    Returns:
        New hunk with the kind flipped.

    Raises:
        HunkInversionError: If the kind has no inverse (NONE).
    """
    inverse = invert_kind(hunk.kind)
    if inverse is None:
        raise HunkInversionError(f"Unknown hunk kind '{hunk.kind.name}'")
    return replace(hunk, kind=inverse)


def describe(hunk: Hunk) -> str:
    """One-line description for diagnostics.

    Example:
        >>> describe(hunk)
        "[Gamma] generator add: 'Pirates' (30% chance)"
    """
    label = _LABELS.get(hunk.kind)
    if label is None:
        return f"[{hunk.target}] unknown hunk"

    payload = hunk.payload
    if isinstance(payload, GeneratorPayload):
        chance = "?" if payload.chance is None else str(payload.chance)
        return f"[{hunk.target}] {label}: '{payload.generator}' ({chance}% chance)"
    if isinstance(payload, PlanetPayload):
        return f"[{hunk.target}] {label}: '{payload.name}'"
    return f"[{hunk.target}] {label}"  # pragma: no cover
