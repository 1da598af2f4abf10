"""Resolver configuration.

Provides a single frozen dataclass holding everything a
LocalizationResolver is parameterized by. Built once, immediately before
an alert is prepared, and discarded afterwards.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from updatel10n.constants import DEFAULT_LANGUAGE
from updatel10n.enums import LanguageCode
from updatel10n.host import HostEnvironment, SystemHostEnvironment

__all__ = ["ResolverConfig"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for LocalizationResolver.

    Attributes:
        app_name: Application name interpolated into the alert message.
        language_override: Language pinned for every lookup. None means the
            host's current locale is negotiated at call time.
        default_language: Language used when negotiation finds no match.

    Example:
        >>> config = ResolverConfig.create(app_name_override="Demo", language_override="de")
        >>> config.language_override
        <LanguageCode.GERMAN: 'de'>
    """

    app_name: str
    language_override: LanguageCode | None = None
    default_language: LanguageCode = DEFAULT_LANGUAGE

    @classmethod
    def create(
        cls,
        app_name_override: str | None = None,
        language_override: LanguageCode | str | None = None,
        host: HostEnvironment | None = None,
        default_language: LanguageCode = DEFAULT_LANGUAGE,
    ) -> ResolverConfig:
        """Build a configuration, reading the host app name if not overridden.

        The host is consulted for the app name exactly once, here.

        Args:
            app_name_override: Name to use instead of the host display name
            language_override: LanguageCode, or its tag ("pt-PT", "zh_hant")
            host: Host environment (defaults to SystemHostEnvironment)
            default_language: Language used when negotiation finds no match

        Returns:
            ResolverConfig

        Raises:
            ValueError: If language_override is a tag outside LanguageCode
            TypeError: If language_override is neither a LanguageCode nor a str
        """
        if app_name_override is None:
            app_name = (host or SystemHostEnvironment()).app_display_name()
            logger.debug("Using host app name: %r", app_name)
        else:
            app_name = app_name_override

        override: LanguageCode | None
        match language_override:
            case None | LanguageCode():
                override = language_override
            case str():
                override = LanguageCode.from_tag(language_override)
            case _:
                msg = (
                    "language_override must be a LanguageCode or str, "
                    f"got {type(language_override).__name__}"
                )
                raise TypeError(msg)

        return cls(
            app_name=app_name, language_override=override, default_language=default_language
        )
