"""Update alert string resolution.

LocalizationResolver produces the user-facing strings of an application
update alert: the title, the message (with app name and store version
interpolated) and the three button labels.

Architecture:
    - ResolverConfig: immutable app name and optional language override
    - HostEnvironment: current locale, read on every lookup when not pinned
    - negotiation.resolve_language: locale -> LanguageCode, never fails
    - translations.get_template: (LanguageCode, MessageKey) -> template

Thread Safety:
    All state is immutable after construction; every accessor is a pure
    read plus string substitution. An instance may be shared freely
    between threads.

Python 3.13+.
"""

from __future__ import annotations

import logging

from updatel10n.config import ResolverConfig
from updatel10n.enums import LanguageCode, MessageKey
from updatel10n.host import HostEnvironment, SystemHostEnvironment
from updatel10n.integrity import ImmutabilityViolationError, IntegrityContext
from updatel10n.messaging import AlertMessaging, AlertStrings, substitute_placeholders
from updatel10n.negotiation import resolve_language
from updatel10n.translations import get_template

__all__ = ["LocalizationResolver"]

logger = logging.getLogger(__name__)


class LocalizationResolver:
    """Localized strings for the update alert.

    Example - follow the device locale:
        >>> resolver = LocalizationResolver(app_name="Demo")
        >>> resolver.alert_message("2.3.0")  # with LANG=de_DE.UTF-8
        'Eine neue Version von Demo ist verfügbar. Bitte aktualisiere jetzt auf Version 2.3.0.'

    Example - pin the language:
        >>> resolver = LocalizationResolver(app_name="Demo", force_language="fr")
        >>> resolver.update_button_title()
        'Mettre à jour'

    Attributes:
        config: Immutable resolver configuration
        language: Language used for the next lookup
    """

    __slots__ = ("_config", "_host")

    _config: ResolverConfig
    _host: HostEnvironment

    def __init__(
        self,
        app_name: str | None = None,
        force_language: LanguageCode | str | None = None,
        *,
        host: HostEnvironment | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            app_name: Name interpolated into the alert message. If None, the
                host's display name is read once, now.
            force_language: Language used regardless of the device locale.
                If None, the host's current locale is negotiated on every call.
            host: Host environment (defaults to SystemHostEnvironment)

        Raises:
            ValueError: If force_language is a tag outside LanguageCode
        """
        resolved_host = host if host is not None else SystemHostEnvironment()
        config = ResolverConfig.create(
            app_name_override=app_name,
            language_override=force_language,
            host=resolved_host,
        )
        object.__setattr__(self, "_host", resolved_host)
        object.__setattr__(self, "_config", config)

    @classmethod
    def from_config(
        cls, config: ResolverConfig, *, host: HostEnvironment | None = None
    ) -> LocalizationResolver:
        """Create a resolver from an existing configuration."""
        resolver = cls.__new__(cls)
        resolved_host = host if host is not None else SystemHostEnvironment()
        object.__setattr__(resolver, "_host", resolved_host)
        object.__setattr__(resolver, "_config", config)
        return resolver

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"Cannot modify LocalizationResolver attribute: {name}"
        raise ImmutabilityViolationError(
            msg, IntegrityContext(component="resolver", operation="mutate", key=name)
        )

    def __delattr__(self, name: str) -> None:
        msg = f"Cannot delete LocalizationResolver attribute: {name}"
        raise ImmutabilityViolationError(
            msg, IntegrityContext(component="resolver", operation="mutate", key=name)
        )

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def app_name(self) -> str:
        return self._config.app_name

    @property
    def language(self) -> LanguageCode:
        """Language for the next lookup: the override, else the negotiated locale."""
        if self._config.language_override is not None:
            return self._config.language_override

        return resolve_language(self._host.current_locale(), self._config.default_language)

    def localized(self, key: MessageKey) -> str:
        """Unformatted template for a key in the current language."""
        return get_template(self.language, key)

    def alert_title(self) -> str:
        """Localized "Update Available"."""
        return self.localized(MessageKey.TITLE)

    def alert_message(self, current_store_version: str) -> str:
        """Localized update message for the given store version.

        The app name and version are substituted verbatim, in that order.
        The version string is not validated.

        Args:
            current_store_version: Version currently available in the store

        Returns:
            Message such as "A new version of Demo is available. Please
            update to version 2.3.0 now."
        """
        template = self.localized(MessageKey.MESSAGE)
        return substitute_placeholders(template, self._config.app_name, current_store_version)

    def skip_button_title(self) -> str:
        """Localized "Skip this version"."""
        return self.localized(MessageKey.SKIP_BUTTON)

    def next_time_button_title(self) -> str:
        """Localized "Next time"."""
        return self.localized(MessageKey.NEXT_TIME_BUTTON)

    def update_button_title(self) -> str:
        """Localized "Update"."""
        return self.localized(MessageKey.UPDATE_BUTTON)

    def alert_strings(
        self,
        current_store_version: str,
        messaging: AlertMessaging | None = None,
    ) -> AlertStrings:
        """All strings for one alert presentation.

        The language is resolved once, so every string of the returned set
        comes from the same translation even if the locale changes midway.

        Args:
            current_store_version: Version currently available in the store
            messaging: Optional custom strings replacing localized ones

        Returns:
            AlertStrings
        """
        language = self.language
        messaging = messaging or AlertMessaging()
        logger.debug(
            "Preparing alert strings in '%s' for version %s", language, current_store_version
        )

        def text(key: MessageKey) -> str:
            custom = messaging.override_for(key)
            return custom if custom is not None else get_template(language, key)

        return AlertStrings(
            title=text(MessageKey.TITLE),
            message=substitute_placeholders(
                text(MessageKey.MESSAGE), self._config.app_name, current_store_version
            ),
            skip_button=text(MessageKey.SKIP_BUTTON),
            next_time_button=text(MessageKey.NEXT_TIME_BUTTON),
            update_button=text(MessageKey.UPDATE_BUTTON),
        )

    def __repr__(self) -> str:
        return (
            f"LocalizationResolver(app_name={self._config.app_name!r}, "
            f"force_language={self._config.language_override!r}, host={self._host!r})"
        )
