"""Shared constants for update-l10n.

This module provides centralized configuration constants used by locale
negotiation, host environment detection and template formatting. Placing
constants here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Negotiation: default language and legacy tag aliases
- Host environment: variables consulted for the app display name and locale
- Cache limits: memory bounds for memoized resolution
- Templates: placeholder tokens used by message templates

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from types import MappingProxyType

from updatel10n.enums import LanguageCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Negotiation
    "DEFAULT_LANGUAGE",
    "LANGUAGE_ALIASES",
    # Host environment
    "APP_NAME_ENV_VARS",
    "LOCALE_ENV_VARS",
    "PSEUDO_LOCALES",
    "SYSTEM_LOCALE_FALLBACK",
    # Cache limits
    "MAX_RESOLUTION_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Templates
    "APP_NAME_PLACEHOLDER",
    "VERSION_PLACEHOLDER",
]

# ============================================================================
# NEGOTIATION
# ============================================================================

# Language used when no supported language matches the requested locale.
DEFAULT_LANGUAGE: LanguageCode = LanguageCode.ENGLISH

# Deprecated ISO-639 codes still reported by older runtimes.
# "no" (macrolanguage Norwegian) is served by the Bokmal translation.
LANGUAGE_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "iw": "he",
        "in": "id",
        "no": "nb",
    }
)

# ============================================================================
# HOST ENVIRONMENT
# ============================================================================

# Checked in order; first non-empty value wins. Display name before bundle name.
APP_NAME_ENV_VARS: tuple[str, ...] = ("APP_DISPLAY_NAME", "APP_NAME")

# POSIX precedence for message catalogs.
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")

# Pseudo-locales that carry no language information.
PSEUDO_LOCALES: frozenset[str] = frozenset(("", "C", "POSIX"))

# Returned by get_system_locale() when nothing usable is configured.
SYSTEM_LOCALE_FALLBACK: str = "en"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized tag -> LanguageCode resolutions.
# Locale strings come from a handful of sources per process; 256 is ample.
MAX_RESOLUTION_CACHE_SIZE: int = 256

# Maximum cached Babel Locale objects (one per supported language at most,
# plus display-name targets).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# TEMPLATES
# ============================================================================

# Positional placeholders in the alert message template.
APP_NAME_PLACEHOLDER: str = "{0}"
VERSION_PLACEHOLDER: str = "{1}"
