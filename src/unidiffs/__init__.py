"""unidiffs: reversible patch stack for a persistent simulated universe.

Usage:
    from unidiffs import DiffStack, LocalUniverse, XmlCatalog

    universe = LocalUniverse()
    universe.add_region("Gamma")
    universe.register_generator("Pirates")

    stack = DiffStack(universe, XmlCatalog("dat/unidiff.xml"))
    stack.apply("D1")
    stack.remove("D1")
"""

__version__ = "0.1.0"

# Catalog
from unidiffs.catalog import DiffCatalog, XmlCatalog

# Config
from unidiffs.config import DiffSettings

# Core primitives
from unidiffs.core import (
    EntityId,
    GeneratorPayload,
    GeneratorRef,
    Hunk,
    HunkInversionError,
    HunkKind,
    PlanetPayload,
    TargetDescriptor,
    TargetKind,
    describe,
    invert,
)

# Diff application
from unidiffs.diff import (
    CatalogMalformedError,
    DiffError,
    DiffNotFoundError,
    DiffRecord,
    HunkStatus,
    RevertOrder,
    SaveMalformedError,
    apply_hunk,
)

# Stack
from unidiffs.stack import DiffStack

# Universe
from unidiffs.universe import (
    GeneratorRegistry,
    LocalUniverse,
    TargetResolver,
    Universe,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "GeneratorRef",
    "TargetDescriptor",
    "TargetKind",
    "Hunk",
    "HunkKind",
    "PlanetPayload",
    "GeneratorPayload",
    "HunkInversionError",
    "invert",
    "describe",
    # Universe
    "Universe",
    "GeneratorRegistry",
    "LocalUniverse",
    "TargetResolver",
    # Diff
    "HunkStatus",
    "apply_hunk",
    "DiffRecord",
    "RevertOrder",
    "DiffError",
    "CatalogMalformedError",
    "DiffNotFoundError",
    "SaveMalformedError",
    # Catalog
    "DiffCatalog",
    "XmlCatalog",
    # Stack
    "DiffStack",
    # Config
    "DiffSettings",
]
