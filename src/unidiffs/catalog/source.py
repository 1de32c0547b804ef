"""Diff catalog: the canonical source of diff definitions.

The catalog is re-read on every lookup so that applying or restoring a diff
always sees the current definitions.

Usage:
    catalog = XmlCatalog("dat/unidiff.xml")
    node = catalog.find("D1")

Catalog format:
    <unidiffs>
      <unidiff name="D1">
        <system name="Gamma">
          <planet name="Outpost">add</planet>
          <fleet name="Pirates" chance="30">remove</fleet>
        </system>
      </unidiff>
    </unidiffs>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Protocol, runtime_checkable

from unidiffs.diff.errors import CatalogMalformedError

ROOT_TAG = "unidiffs"
DIFF_TAG = "unidiff"


@runtime_checkable
class DiffCatalog(Protocol):
    """Source of diff definitions keyed by name."""

    def find(self, name: str) -> ET.Element | None:
        """Return the definition node for name, or None if absent.

        Raises:
            CatalogMalformedError: If the catalog itself is invalid.
        """
        ...


class XmlCatalog:
    """Diff catalog backed by an XML document.

    Args:
        path: Catalog file path.
        text: In-memory document, used instead of a file.

    Raises:
        ValueError: Unless exactly one of path and text is given.
    """

    def __init__(self, path: str | Path | None = None, *, text: str | None = None) -> None:
        if (path is None) == (text is None):
            raise ValueError("XmlCatalog needs exactly one of path or text")
        self._path = Path(path) if path is not None else None
        self._text = text

    @classmethod
    def from_string(cls, text: str) -> XmlCatalog:
        """Build a catalog over an in-memory document."""
        return cls(text=text)

    @property
    def source(self) -> str:
        """Human-readable catalog location for diagnostics."""
        return str(self._path) if self._path is not None else "<string>"

    def _read_root(self) -> ET.Element:
        """Parse the catalog and validate its top-level structure."""
        try:
            if self._path is not None:
                root = ET.parse(self._path).getroot()
            else:
                root = ET.fromstring(self._text or "")
        except OSError as e:
            raise CatalogMalformedError(f"Cannot read unidiff file {self.source}: {e}") from e
        except ET.ParseError as e:
            raise CatalogMalformedError(f"Malformed unidiff file {self.source}: {e}") from e

        if root.tag != ROOT_TAG:
            raise CatalogMalformedError(
                f"Malformed unidiff file {self.source}: missing root element '{ROOT_TAG}'"
            )
        if len(root) == 0:
            raise CatalogMalformedError(
                f"Malformed unidiff file {self.source}: does not contain elements"
            )
        return root

    def find(self, name: str) -> ET.Element | None:
        for node in self._read_root().findall(DIFF_TAG):
            if node.get("name") == name:
                return node
        return None

    def names(self) -> list[str]:
        """Names of all diffs defined in the catalog, in document order."""
        return [
            name
            for node in self._read_root().findall(DIFF_TAG)
            if (name := node.get("name")) is not None
        ]
