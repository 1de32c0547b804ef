"""Diff loader: builds hunks from catalog nodes and drives their application.

Usage:
    node = catalog.find("D1")
    record = DiffRecord(node.get("name"))
    load_diff(record, node, universe, generators=universe)
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

import structlog

from unidiffs.core.hunk import GeneratorPayload, Hunk, HunkKind, PlanetPayload, describe
from unidiffs.core.target import TargetDescriptor
from unidiffs.diff.apply import apply_hunk
from unidiffs.diff.record import DiffRecord
from unidiffs.universe.protocol import GeneratorRegistry, Universe
from unidiffs.universe.resolver import TargetResolver

logger = structlog.get_logger(__name__)

REGION_TAG = "system"
PLANET_TAG = "planet"
GENERATOR_TAG = "fleet"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_chance(text: str | None) -> int | None:
    """Parse a chance attribute, keeping a leading integer if one is present.

    Example:
        >>> parse_chance("30"), parse_chance("25%"), parse_chance("lots")
        (30, 25, None)
    """
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _action_kind(node: ET.Element, add: HunkKind, remove: HunkKind) -> HunkKind:
    action = (node.text or "").strip()
    if action == "add":
        return add
    if action == "remove":
        return remove
    return HunkKind.NONE


def parse_diff(node: ET.Element, generators: GeneratorRegistry) -> list[Hunk]:
    """Build the hunk sequence of one catalog diff, in document order.

    Unrecognized actions yield NONE hunks and unresolvable generators yield
    payloads without a ref; both fail cleanly when applied.

    Args:
        node: <unidiff> element.
        generators: Registry used to resolve <fleet name=...>.

    Returns:
        Hunks grouped by region target.
    """
    name = node.get("name")
    hunks: list[Hunk] = []

    for region_node in node.findall(REGION_TAG):
        region = region_node.get("name")
        if region is None:
            logger.warning("Unidiff has a system node without a 'name' attribute", diff=name)
        target = TargetDescriptor.region(region)

        for child in region_node:
            if child.tag == PLANET_TAG:
                hunks.append(
                    Hunk(
                        target=target,
                        kind=_action_kind(child, HunkKind.PLANET_ADD, HunkKind.PLANET_REMOVE),
                        payload=PlanetPayload(child.get("name")),
                    )
                )
            elif child.tag == GENERATOR_TAG:
                generator = child.get("name")
                ref = generators.get_generator(generator) if generator else None
                hunks.append(
                    Hunk(
                        target=target,
                        kind=_action_kind(
                            child, HunkKind.GENERATOR_ADD, HunkKind.GENERATOR_REMOVE
                        ),
                        payload=GeneratorPayload(
                            generator=generator,
                            chance=parse_chance(child.get("chance")),
                            ref=ref,
                        ),
                    )
                )

    return hunks


def patch_diff(
    record: DiffRecord,
    hunks: list[Hunk],
    universe: Universe,
    resolver: TargetResolver | None = None,
) -> None:
    """Apply hunks in order, journaling each outcome in record."""
    resolver = resolver or TargetResolver(universe)
    for hunk in hunks:
        record.record_outcome(hunk, apply_hunk(hunk, universe, resolver))


def report_failures(record: DiffRecord) -> None:
    """Log a summary line plus one line per failed hunk. Silent when none failed."""
    if not record.failed:
        return
    logger.info("Unidiff failed hunks", diff=record.name, count=len(record.failed))
    for hunk in record.failed:
        logger.info(describe(hunk), diff=record.name)


def load_diff(
    record: DiffRecord,
    node: ET.Element,
    universe: Universe,
    generators: GeneratorRegistry,
    resolver: TargetResolver | None = None,
    report: bool = True,
) -> DiffRecord:
    """Parse a catalog diff and apply it into record.

    Args:
        record: Empty record to fill.
        node: <unidiff> element.
        universe: World registry to mutate.
        generators: Generator registry for <fleet> lookups.
        resolver: Target resolver (defaults to one over universe).
        report: Whether to log failed hunks.

    Returns:
        The same record, for chaining.
    """
    patch_diff(record, parse_diff(node, generators), universe, resolver)
    if report:
        report_failures(record)
    return record
