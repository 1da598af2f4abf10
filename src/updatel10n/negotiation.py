"""Locale negotiation: map any locale identifier onto a supported LanguageCode.

Resolution never fails. Precedence, first match wins:

1. Exact tag (case-insensitive, ``_`` and ``-`` equivalent), after mapping
   deprecated language codes (``iw`` -> ``he``).
2. Most specific registered variant, dropping trailing subtags one at a
   time down to (but not including) the bare language: ``zh-Hans-CN`` ->
   ``zh-Hans``, ``fa-AF-x-foo`` -> ``fa-AF``.
3. Script and region combinations: ``lang-Script-REGION``, ``lang-Script``,
   ``lang-REGION`` in that order. When the bare language has no entry of
   its own the tag is first maximized with CLDR likely subtags (``zh-TW``
   -> ``zh-Hant-TW``, ``sr`` -> ``sr-Cyrl-RS``), then the bare language is,
   so ``nb-GB`` still reaches ``nb-NO``. When it does have one, only the
   subtags present in the input are used: ``fa-DE`` -> ``fa``, never the
   CLDR default region ``fa-IR``.
4. Bare primary language subtag: ``fr-CA`` -> ``fr``, ``pt-BR`` -> ``pt``.
5. DEFAULT_LANGUAGE (``en``).

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator

from updatel10n.constants import DEFAULT_LANGUAGE, LANGUAGE_ALIASES, MAX_RESOLUTION_CACHE_SIZE
from updatel10n.enums import LanguageCode
from updatel10n.locale_utils import normalize_locale, split_locale_tag

__all__ = [
    "candidate_tags",
    "clear_resolution_cache",
    "maximize_locale",
    "resolve_language",
]

logger = logging.getLogger(__name__)


def _lookup(tag: str) -> LanguageCode | None:
    try:
        return LanguageCode.from_tag(tag)
    except ValueError:
        return None


def maximize_locale(locale_code: str) -> tuple[str, str | None, str | None]:
    """Fill in the likely script and region for a locale from CLDR data.

    Subtags present in the input are kept; only missing ones are inferred.

    Args:
        locale_code: Locale identifier in any supported form

    Returns:
        (language, script, region); script and region stay None when CLDR
        has no likely-subtag entry for the language.

    Example:
        >>> maximize_locale("zh-TW")
        ('zh', 'Hant', 'TW')
        >>> maximize_locale("sr")
        ('sr', 'Cyrl', 'RS')
    """
    language, script, region = split_locale_tag(locale_code)
    if not language:
        return "", None, None

    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import get_global  # noqa: PLC0415

    likely_subtags = get_global("likely_subtags")
    keys = [
        "_".join(part for part in (language, script, region) if part),
        f"{language}_{region}" if region else None,
        f"{language}_{script}" if script else None,
        language,
    ]
    for key in keys:
        if key and key in likely_subtags:
            _, likely_script, likely_region = split_locale_tag(likely_subtags[key])
            return language, script or likely_script, region or likely_region
    return language, script, region


def candidate_tags(locale_code: str) -> Iterator[str]:
    """Yield the tags tried for a locale, most specific first.

    The default language is not included; see resolve_language().

    Example:
        >>> list(candidate_tags("fr-CA"))
        ['fr-CA', 'fr']
        >>> list(candidate_tags("zh-TW"))
        ['zh-TW', 'zh-Hant-TW', 'zh-Hant', 'zh-Hans-CN', 'zh-Hans', 'zh-CN', 'zh']
    """
    normalized = normalize_locale(locale_code)
    if not normalized:
        return

    language, _, rest = normalized.partition("-")
    language = LANGUAGE_ALIASES.get(language, language)
    subtags = [language, *rest.split("-")] if rest else [language]

    seen: set[str] = set()

    def fresh(tag: str) -> bool:
        if tag in seen:
            return False
        seen.add(tag)
        return True

    full_tag = "-".join(subtags)
    seen.add(full_tag)
    yield full_tag

    # Progressively shorter prefixes above the bare language
    for end in range(len(subtags) - 1, 1, -1):
        tag = "-".join(subtags[:end])
        if fresh(tag):
            yield tag

    subtag_sets: Iterator[tuple[str | None, str | None]]
    if _lookup(language) is not None:
        # Supported bare language: only subtags given in the input (fa-DE -> fa, not fa-IR)
        subtag_sets = iter((split_locale_tag(full_tag)[1:],))
    else:
        # Likely subtags of the full tag, then of the language alone (nb-GB -> nb-NO)
        subtag_sets = (maximize_locale(source)[1:] for source in (full_tag, language))

    for script, region in subtag_sets:
        inferred = [
            f"{language}-{script}-{region}" if script and region else None,
            f"{language}-{script}" if script else None,
            f"{language}-{region}" if region else None,
        ]
        for tag in inferred:
            if tag and fresh(tag):
                yield tag

    if fresh(language):
        yield language


@functools.lru_cache(maxsize=MAX_RESOLUTION_CACHE_SIZE)
def resolve_language(
    locale_code: str, default: LanguageCode = DEFAULT_LANGUAGE
) -> LanguageCode:
    """Resolve a locale identifier to the best supported LanguageCode.

    Total over all strings: unsupported, empty or garbage input resolves
    to ``default``. Thread-safe via lru_cache internal locking.

    Args:
        locale_code: BCP-47 tag or POSIX locale name (e.g. "fr-CA", "pt_BR.UTF-8")
        default: Language returned when nothing matches (DEFAULT_LANGUAGE)

    Returns:
        Supported LanguageCode

    Example:
        >>> resolve_language("fr-CA")
        <LanguageCode.FRENCH: 'fr'>
        >>> resolve_language("xx-YY")
        <LanguageCode.ENGLISH: 'en'>
    """
    for position, tag in enumerate(candidate_tags(locale_code)):
        match = _lookup(tag)
        if match is not None:
            if position:
                logger.debug("Locale '%s' resolved to '%s' via '%s'", locale_code, match, tag)
            return match

    logger.debug(
        "Locale '%s' has no supported language. Falling back to %s", locale_code, default
    )
    return default


def clear_resolution_cache() -> None:
    """Clear memoized resolve_language() results."""
    resolve_language.cache_clear()
