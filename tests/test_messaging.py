"""Tests for custom alert messaging and the finished string set.

Python 3.13+.
"""

from dataclasses import FrozenInstanceError

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import app_names, version_strings
from updatel10n import AlertMessaging, AlertStrings, LocalizationResolver
from updatel10n.constants import APP_NAME_PLACEHOLDER, VERSION_PLACEHOLDER
from updatel10n.enums import LanguageCode, MessageKey
from updatel10n.host import StaticHostEnvironment
from updatel10n.messaging import substitute_placeholders


class TestSubstitutePlaceholders:
    """Single-pass {0}/{1} substitution."""

    def test_basic(self) -> None:
        assert substitute_placeholders("{0} {1} is out", "Demo", "2.3.0") == "Demo 2.3.0 is out"

    def test_reversed_order(self) -> None:
        assert substitute_placeholders("{1} for {0}", "Demo", "2.3.0") == "2.3.0 for Demo"

    def test_other_braces_untouched(self) -> None:
        assert substitute_placeholders("{2} {name} {", "Demo", "1") == "{2} {name} {"

    def test_no_placeholders(self) -> None:
        assert substitute_placeholders("Update", "Demo", "1") == "Update"

    def test_tokens_come_from_constants(self) -> None:
        """The substituted tokens are the shared placeholder constants."""
        template = f"{VERSION_PLACEHOLDER}:{APP_NAME_PLACEHOLDER}"
        assert substitute_placeholders(template, "Demo", "2.0") == "2.0:Demo"

    @given(app_names(), version_strings())
    def test_values_never_rescanned(self, app_name: str, version: str) -> None:
        """Property: substituted text is not treated as a template."""
        assert substitute_placeholders("{0}|{1}", app_name + "{1}", version) == (
            f"{app_name}{{1}}|{version}"
        )


class TestAlertMessaging:
    """Custom string overrides."""

    def test_defaults_are_unset(self) -> None:
        messaging = AlertMessaging()
        assert all(messaging.override_for(key) is None for key in MessageKey)

    def test_override_for_each_key(self) -> None:
        messaging = AlertMessaging(
            update_title="T",
            update_message="M",
            update_button="U",
            next_time_button="N",
            skip_button="S",
        )
        assert messaging.override_for(MessageKey.TITLE) == "T"
        assert messaging.override_for(MessageKey.MESSAGE) == "M"
        assert messaging.override_for(MessageKey.UPDATE_BUTTON) == "U"
        assert messaging.override_for(MessageKey.NEXT_TIME_BUTTON) == "N"
        assert messaging.override_for(MessageKey.SKIP_BUTTON) == "S"

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            AlertMessaging().update_title = "x"  # type: ignore[misc]


class TestAlertStrings:
    """LocalizationResolver.alert_strings."""

    def _resolver(self, locale: str = "it") -> LocalizationResolver:
        return LocalizationResolver("Demo", host=StaticHostEnvironment(locale=locale))

    def test_localized_set(self) -> None:
        strings = self._resolver().alert_strings("4.1")
        assert strings == AlertStrings(
            title="Aggiornamento disponibile",
            message="È disponibile una nuova versione di Demo. Aggiorna ora alla versione 4.1.",
            skip_button="Salta questa versione",
            next_time_button="La prossima volta",
            update_button="Aggiorna",
        )

    def test_matches_individual_accessors(self) -> None:
        resolver = self._resolver("sr-Latn")
        strings = resolver.alert_strings("2.0")
        assert strings.title == resolver.alert_title()
        assert strings.message == resolver.alert_message("2.0")
        assert strings.skip_button == resolver.skip_button_title()
        assert strings.next_time_button == resolver.next_time_button_title()
        assert strings.update_button == resolver.update_button_title()

    def test_custom_strings_replace_localized(self) -> None:
        messaging = AlertMessaging(update_title="Heads up!", update_button="Get it")
        strings = self._resolver().alert_strings("4.1", messaging)
        assert strings.title == "Heads up!"
        assert strings.update_button == "Get it"
        assert strings.skip_button == "Salta questa versione"

    def test_custom_message_uses_placeholders(self) -> None:
        messaging = AlertMessaging(update_message="{0} {1} is ready")
        strings = self._resolver().alert_strings("4.1", messaging)
        assert strings.message == "Demo 4.1 is ready"

    def test_custom_message_with_stray_braces(self) -> None:
        messaging = AlertMessaging(update_message="{0} {version} ready}")
        strings = self._resolver().alert_strings("4.1", messaging)
        assert strings.message == "Demo {version} ready}"

    @given(st.sampled_from(LanguageCode))
    def test_single_language_per_set(self, language: LanguageCode) -> None:
        """Property: every string of the set comes from the same language."""
        resolver = LocalizationResolver("Demo", language)
        strings = resolver.alert_strings("1.0")
        assert strings.title == resolver.alert_title()
        assert strings.update_button == resolver.update_button_title()

    def test_frozen(self) -> None:
        strings = self._resolver().alert_strings("1.0")
        with pytest.raises(FrozenInstanceError):
            strings.title = "x"  # type: ignore[misc]
