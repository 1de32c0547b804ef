"""DiffStack: the ordered set of diffs currently applied to a universe.

Usage:
    universe = LocalUniverse()
    stack = DiffStack(universe, XmlCatalog("dat/unidiff.xml"))

    stack.apply("D1")  # triggered by a scripted event
    stack.is_applied("D1")  # True

    names = stack.persist()  # ["D1"]
    stack.restore(names)  # re-derives content from the catalog

    stack.remove("D1")  # revert and forget one diff
    stack.clear()  # revert everything, most recent first
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from unidiffs.catalog.loader import load_diff
from unidiffs.catalog.source import DiffCatalog, XmlCatalog
from unidiffs.config.settings import DiffSettings
from unidiffs.diff.errors import CatalogMalformedError, DiffError, DiffNotFoundError
from unidiffs.diff.record import DiffRecord
from unidiffs.universe.protocol import GeneratorRegistry, Universe
from unidiffs.universe.resolver import TargetResolver

logger = structlog.get_logger(__name__)


class DiffStack:
    """Session-owned stack of applied diffs.

    Records are kept in application order; the last element is the top.
    The stack owns its records but only borrows the universe.

    Args:
        universe: World registry diffs mutate.
        catalog: Diff definitions (defaults to XmlCatalog at settings.catalog_path).
        generators: Generator registry (defaults to universe when it implements one).
        settings: Session configuration (defaults to DiffSettings()).
        resolver: Target resolver (defaults to one over universe).
    """

    def __init__(
        self,
        universe: Universe,
        catalog: DiffCatalog | None = None,
        generators: GeneratorRegistry | None = None,
        settings: DiffSettings | None = None,
        resolver: TargetResolver | None = None,
    ) -> None:
        self._settings = settings or DiffSettings()
        self._universe = universe
        self._catalog = catalog or XmlCatalog(self._settings.catalog_path)

        if generators is None:
            if not isinstance(universe, GeneratorRegistry):
                raise TypeError("universe is not a GeneratorRegistry; pass generators explicitly")
            generators = universe
        self._generators = generators
        self._resolver = resolver or TargetResolver(universe)
        self._records: list[DiffRecord] = []

    @property
    def settings(self) -> DiffSettings:
        return self._settings

    @property
    def names(self) -> list[str]:
        """Applied diff names, bottom to top."""
        return [record.name for record in self._records]

    @property
    def top(self) -> DiffRecord | None:
        """Most recently applied record."""
        return self._records[-1] if self._records else None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DiffRecord]:
        return iter(list(self._records))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_applied(name)

    def get(self, name: str) -> DiffRecord | None:
        """Find an applied diff by name."""
        for record in self._records:
            if record.name == name:
                return record
        return None

    def is_applied(self, name: str) -> bool:
        return self.get(name) is not None

    def apply(self, name: str) -> DiffRecord:
        """Apply a catalog diff and push it on the stack.

        Applying an already-applied diff is a no-op. A diff whose hunks partly
        fail is still pushed with whatever succeeded. If the universe raises
        partway through, the record is pushed with the hunks applied so far,
        so remove() can still revert them, and the error propagates.

        Args:
            name: Diff name in the catalog.

        Returns:
            The record for name (existing or new).

        Raises:
            DiffNotFoundError: If the catalog has no diff called name.
            CatalogMalformedError: If the catalog cannot be read. Nothing is changed.
        """
        existing = self.get(name)
        if existing is not None:
            return existing

        try:
            node = self._catalog.find(name)
        except CatalogMalformedError as e:
            logger.error("Malformed unidiff catalog", diff=name, error=str(e))
            raise
        if node is None:
            source = getattr(self._catalog, "source", "catalog")
            logger.warning("Unidiff not found", diff=name, catalog=source)
            raise DiffNotFoundError(name, source)

        record = DiffRecord(name)
        try:
            load_diff(
                record,
                node,
                self._universe,
                self._generators,
                self._resolver,
                report=self._settings.report_failures,
            )
        finally:
            self._records.append(record)
        logger.debug(
            "Applied unidiff",
            diff=name,
            applied=len(record.applied),
            failed=len(record.failed),
        )
        return record

    def _remove_at(self, index: int) -> DiffRecord:
        record = self._records[index]
        record.revert(self._universe, self._resolver, self._settings.revert_order)
        record.destroy()
        del self._records[index]
        logger.debug("Removed unidiff", diff=record.name)
        return record

    def remove(self, name: str) -> bool:
        """Revert and drop a diff by name, wherever it sits in the stack.

        Removing from the middle does not enforce stack order; hunks of later
        diffs touching the same targets are not re-checked.

        Returns:
            True if the diff was applied.
        """
        for index, record in enumerate(self._records):
            if record.name == name:
                self._remove_at(index)
                return True
        return False

    def pop(self) -> DiffRecord | None:
        """Revert and drop the most recently applied diff.

        Returns:
            The removed (now empty) record, or None if the stack is empty.
        """
        if not self._records:
            return None
        return self._remove_at(len(self._records) - 1)

    def clear(self) -> None:
        """Revert every diff, most recent first."""
        while self._records:
            self.pop()

    def persist(self) -> list[str]:
        """Names to save, in stack order. Hunk contents are not persisted."""
        return self.names

    def restore(self, names: Iterable[str]) -> None:
        """Clear the stack, then re-apply each name from the catalog.

        Names that fail to apply are logged and skipped.
        """
        self.clear()
        for name in names:
            try:
                self.apply(name)
            except DiffError as e:
                logger.warning("Failed to restore unidiff", diff=name, error=str(e))
