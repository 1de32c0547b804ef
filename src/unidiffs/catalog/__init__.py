"""Diff catalog access and loading."""

from unidiffs.catalog.loader import (
    load_diff,
    parse_chance,
    parse_diff,
    patch_diff,
    report_failures,
)
from unidiffs.catalog.source import DiffCatalog, XmlCatalog

__all__ = [
    "DiffCatalog",
    "XmlCatalog",
    "parse_diff",
    "parse_chance",
    "patch_diff",
    "report_failures",
    "load_diff",
]
