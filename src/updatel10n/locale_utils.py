"""Locale utilities for tag normalization and system locale detection.

Centralizes locale format handling used by negotiation and the host
environment. Everything entering the package is normalized once at the
boundary into canonical BCP-47 form (hyphen separated, ``zh-Hans-TW``);
Babel's POSIX form (``zh_Hans_TW``) is produced only when calling Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from updatel10n.constants import (
    LOCALE_ENV_VARS,
    MAX_LOCALE_CACHE_SIZE,
    PSEUDO_LOCALES,
    SYSTEM_LOCALE_FALLBACK,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "split_locale_tag",
    "to_posix",
]


def normalize_locale(locale_code: str) -> str:
    """Convert any locale identifier to canonical BCP-47 form.

    Accepts BCP-47 tags ("fr-CA"), POSIX locale names ("pt_BR.UTF-8",
    "de_DE@euro") and mixed-case input. The language subtag is lowercased,
    a 4-letter script subtag is title-cased and a region subtag (2 letters
    or 3 digits) is uppercased. Remaining subtags are lowercased.

    Args:
        locale_code: Locale identifier from the host or the caller

    Returns:
        Canonical tag, or "" when the input has no alphabetic language subtag

    Example:
        >>> normalize_locale("pt_BR.UTF-8")
        'pt-BR'
        >>> normalize_locale("ZH-hant-tw")
        'zh-Hant-TW'
        >>> normalize_locale("42")
        ''
    """
    code = locale_code.strip().split(".", 1)[0].split("@", 1)[0]
    subtags = [part for part in code.replace("_", "-").split("-") if part]
    if not subtags or not _is_language_subtag(subtags[0]):
        return ""

    canonical = [subtags[0].lower()]
    for part in subtags[1:]:
        # Classify after lowercasing: some non-ASCII letters lowercase to ASCII
        part = part.lower()
        if len(part) == 4 and part.isascii() and part.isalpha():
            canonical.append(part.title())
        elif (len(part) == 2 and part.isascii() and part.isalpha()) or (
            len(part) == 3 and part.isascii() and part.isdigit()
        ):
            canonical.append(part.upper())
        else:
            canonical.append(part)
    return "-".join(canonical)


def _is_language_subtag(part: str) -> bool:
    return 2 <= len(part) <= 8 and part.isascii() and part.isalpha()


def split_locale_tag(locale_code: str) -> tuple[str, str | None, str | None]:
    """Split a locale identifier into (language, script, region).

    Variants and extensions are dropped. Only the first script and the first
    region subtag following the language are reported.

    Example:
        >>> split_locale_tag("zh-Hant-TW")
        ('zh', 'Hant', 'TW')
        >>> split_locale_tag("fr_CA")
        ('fr', None, 'CA')
    """
    normalized = normalize_locale(locale_code)
    if not normalized:
        return "", None, None

    language, *rest = normalized.split("-")
    script: str | None = None
    region: str | None = None
    for part in rest:
        if not part.isascii():
            break
        if script is None and region is None and len(part) == 4 and part.isalpha():
            script = part
        elif region is None and (
            (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit())
        ):
            region = part
        else:
            break
    return language, script, region


def to_posix(locale_code: str) -> str:
    """Convert a BCP-47 tag to Babel's POSIX form ("zh-Hans" -> "zh_Hans")."""
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> get_babel_locale("sr-Cyrl").script
        'Cyrl'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(to_posix(normalize_locale(locale_code)))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_system_locale() -> str:
    """Detect the current user locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales. Read on every call so that
    locale changes made while the process runs are picked up.

    Returns:
        Detected locale in BCP-47 form, or "en" when nothing is configured.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None

    # Fall back to environment variables in order of precedence
    candidates = [system_locale or "", *(os.environ.get(var, "") for var in LOCALE_ENV_VARS)]
    for value in candidates:
        # Strip encoding and modifier before the pseudo-locale check (C.UTF-8)
        if value.split(".", 1)[0].split("@", 1)[0] in PSEUDO_LOCALES:
            continue
        normalized = normalize_locale(value)
        if normalized:
            return normalized

    return SYSTEM_LOCALE_FALLBACK
