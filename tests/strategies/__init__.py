"""Hypothesis strategies for update-l10n property tests."""

from tests.strategies.locales import (
    REGIONS,
    app_names,
    supported_locales_with_region,
    unsupported_locales,
    version_strings,
)

__all__ = [
    "REGIONS",
    "app_names",
    "supported_locales_with_region",
    "unsupported_locales",
    "version_strings",
]
