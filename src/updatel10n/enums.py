"""Enumerations for update-l10n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a LanguageCode can be passed
anywhere a BCP-47 tag string is expected.

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum

__all__ = [
    "LanguageCode",
    "MessageKey",
]


class LanguageCode(StrEnum):
    """Closed set of languages the update alert is translated into.

    Values are BCP-47 tags. ``PORTUGUESE_BRAZIL`` carries the bare ``pt``
    tag, so any Portuguese locale without a closer match reads Brazilian
    strings; ``pt-PT`` must be matched explicitly.

    StrEnum provides automatic string conversion: str(LanguageCode.FRENCH) == "fr"
    """

    ARABIC = "ar"
    ARMENIAN = "hy"
    BASQUE = "eu"
    CHINESE_SIMPLIFIED = "zh-Hans"
    CHINESE_TRADITIONAL = "zh-Hant"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ESTONIAN = "et"
    FINNISH = "fi"
    FRENCH = "fr"
    GERMAN = "de"
    GREEK = "el"
    HEBREW = "he"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MALAY = "ms"
    NORWEGIAN = "nb-NO"
    PERSIAN = "fa"
    PERSIAN_AFGHANISTAN = "fa-AF"
    PERSIAN_IRAN = "fa-IR"
    POLISH = "pl"
    PORTUGUESE_BRAZIL = "pt"
    PORTUGUESE_PORTUGAL = "pt-PT"
    RUSSIAN = "ru"
    SERBIAN_CYRILLIC = "sr-Cyrl"
    SERBIAN_LATIN = "sr-Latn"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWEDISH = "sv"
    THAI = "th"
    TURKISH = "tr"
    URDU = "ur"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"

    @classmethod
    def from_tag(cls, tag: str) -> LanguageCode:
        """Look up a member by tag, ignoring case and ``_``/``-`` differences.

        Args:
            tag: Locale tag such as "zh-hans", "PT_pt" or "en"

        Returns:
            Matching LanguageCode

        Raises:
            ValueError: If the tag is not one of the supported codes
        """
        member = _BY_FOLDED_TAG.get(tag.strip().replace("_", "-").casefold())
        if member is None:
            msg = f"Unsupported language code: {tag!r}"
            raise ValueError(msg)
        return member

    @property
    def primary_subtag(self) -> str:
        """Language subtag of the tag: 'zh' for zh-Hans, 'nb' for nb-NO."""
        return self.value.split("-", 1)[0]

    def display_name(self, in_language: LanguageCode | str | None = None) -> str:
        """Localized display name from CLDR data.

        Args:
            in_language: Language to render the name in. Defaults to the
                language itself (the native name, e.g. 'Deutsch').

        Returns:
            Display name such as 'français' or 'Japanese'
        """
        # Lazy import: locale_utils pulls in Babel
        from updatel10n.locale_utils import get_babel_locale  # noqa: PLC0415

        locale = get_babel_locale(self.value)
        target = locale if in_language is None else get_babel_locale(str(in_language))
        return locale.get_display_name(target) or self.value

    @property
    def is_rtl(self) -> bool:
        """True when the language is written right-to-left."""
        from updatel10n.locale_utils import get_babel_locale  # noqa: PLC0415

        return get_babel_locale(self.value).text_direction == "rtl"


class MessageKey(StrEnum):
    """Role of a string in the update alert.

    Values match the keys of the original string catalogs.
    """

    TITLE = "title"
    """Alert title: 'Update Available'"""

    MESSAGE = "message"
    """Alert body; takes the app name and the store version"""

    SKIP_BUTTON = "skipButton"
    """'Skip this version' action"""

    NEXT_TIME_BUTTON = "nextTimeButton"
    """'Next time' action"""

    UPDATE_BUTTON = "updateButton"
    """'Update' action"""

    @property
    def is_button(self) -> bool:
        """True for the three action labels."""
        return self in _BUTTON_KEYS

    @property
    def placeholder_count(self) -> int:
        """Number of positional placeholders the template must carry."""
        return 2 if self is MessageKey.MESSAGE else 0


_BY_FOLDED_TAG: dict[str, LanguageCode] = {
    member.value.casefold(): member for member in LanguageCode
}

_BUTTON_KEYS: frozenset[MessageKey] = frozenset(
    (MessageKey.SKIP_BUTTON, MessageKey.NEXT_TIME_BUTTON, MessageKey.UPDATE_BUTTON)
)
