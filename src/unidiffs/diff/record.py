"""Diff records: per-diff journals of applied and failed hunks.

Usage:
    record = DiffRecord("D1")
    record.record_outcome(hunk, apply_hunk(hunk, universe))
    ...
    record.revert(universe)
    record.destroy()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import structlog

from unidiffs.core.hunk import Hunk, HunkInversionError, describe, invert
from unidiffs.diff.apply import HunkStatus, apply_hunk
from unidiffs.universe.protocol import Universe
from unidiffs.universe.resolver import TargetResolver

logger = structlog.get_logger(__name__)


class RevertOrder(str, Enum):
    """Order in which a record's applied hunks are undone."""

    REVERSE = "reverse"
    """Last applied, first reverted. Default."""

    FORWARD = "forward"
    """Application order. Unsafe when later hunks depend on earlier ones."""


@dataclass
class DiffRecord:
    """Journal of one applied diff.

    Attributes:
        name: Diff name, unique within a DiffStack.
        applied: Hunks that mutated the world, in apply order.
        failed: Hunks that did not apply, in encounter order.
    """

    name: str
    applied: list[Hunk] = field(default_factory=list)
    failed: list[Hunk] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)

    def record_outcome(self, hunk: Hunk, status: HunkStatus) -> None:
        """Route a hunk into the applied or failed log."""
        if status.ok:
            self.applied.append(hunk)
        else:
            self.failed.append(hunk)

    def revert(
        self,
        universe: Universe,
        resolver: TargetResolver | None = None,
        order: RevertOrder = RevertOrder.REVERSE,
    ) -> list[tuple[Hunk, HunkStatus | None]]:
        """Undo every applied hunk, best effort.

        Each applied hunk is inverted and applied. A hunk that cannot be
        inverted or whose inverse fails is logged and skipped; the rest are
        still reverted. The logs themselves are left untouched.

        Args:
            universe: World registry to mutate.
            resolver: Target resolver (defaults to one over universe).
            order: Revert order (REVERSE unless configured otherwise).

        Returns:
            (hunk, status) for each hunk that could not be reverted; status is
            None when the hunk had no inverse.
        """
        resolver = resolver or TargetResolver(universe)
        hunks = list(self.applied)
        if order is RevertOrder.REVERSE:
            hunks.reverse()
        else:
            logger.warning("Reverting diff in forward order", diff=self.name)

        failures: list[tuple[Hunk, HunkStatus | None]] = []
        for hunk in hunks:
            try:
                inverse = invert(hunk)
            except HunkInversionError as e:
                logger.warning("Cannot invert hunk", diff=self.name, error=str(e))
                failures.append((hunk, None))
                continue

            status = apply_hunk(inverse, universe, resolver)
            if not status.ok:
                logger.warning(
                    "Failed to revert hunk",
                    diff=self.name,
                    hunk=describe(inverse),
                    status=status.name,
                )
                failures.append((hunk, status))
        return failures

    def destroy(self) -> None:
        """Release both logs. Does not revert; call revert() first for rollback."""
        self.applied.clear()
        self.failed.clear()
