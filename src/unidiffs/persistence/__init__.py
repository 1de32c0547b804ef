"""Persistence of applied diff names."""

from unidiffs.persistence.codec import dumps, load_diffs, loads, read_diffs, save_diffs

__all__ = [
    "save_diffs",
    "read_diffs",
    "load_diffs",
    "dumps",
    "loads",
]
