"""Call-level diff errors.

Hunk-level failures are never raised; they are recorded as data in the
owning DiffRecord's failed log.
"""


class DiffError(Exception):
    """Base class for errors that abort a single diff operation."""

    pass


class CatalogMalformedError(DiffError):
    """Raised when the diff catalog is unreadable or structurally invalid."""

    pass


class DiffNotFoundError(DiffError):
    """Raised when a diff name has no definition in the catalog."""

    def __init__(self, name: str, source: str = "catalog") -> None:
        super().__init__(f"Unidiff '{name}' not found in {source}")
        self.name = name
        self.source = source


class SaveMalformedError(DiffError):
    """Raised when saved diff names cannot be parsed."""

    pass
