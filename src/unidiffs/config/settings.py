"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for a diff
session.

Usage:
    from unidiffs.config import DiffSettings

    # Load from environment variables (UNIDIFF_*)
    settings = DiffSettings()

    # Or override with explicit values
    settings = DiffSettings(catalog_path="data/unidiff.xml")
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e

from unidiffs.diff.record import RevertOrder


class DiffSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a diff stack session.

    Attributes:
        catalog_path: Path of the XML diff catalog.
        revert_order: Order applied hunks are undone in (reverse or forward).
        report_failures: Log failed hunks after each apply.
        log_level: Level passed to configure_logging().

    Environment Variables:
        UNIDIFF_CATALOG_PATH
        UNIDIFF_REVERT_ORDER
        UNIDIFF_REPORT_FAILURES
        UNIDIFF_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="UNIDIFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    catalog_path: str = "dat/unidiff.xml"
    revert_order: RevertOrder = RevertOrder.REVERSE
    report_failures: bool = True
    log_level: str = "INFO"
