"""Configuration module using Pydantic Settings.

Usage:
    from unidiffs.config import DiffSettings

    settings = DiffSettings(revert_order="reverse")
"""

from unidiffs.config.settings import DiffSettings

__all__ = [
    "DiffSettings",
]
