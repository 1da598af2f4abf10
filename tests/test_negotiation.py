"""Tests for locale negotiation.

Covers the fallback chain (exact -> most specific variant -> likely
subtags -> primary subtag -> default), its totality over arbitrary input,
memoization and debug logging.

Python 3.13+.
"""

import logging

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from updatel10n.constants import DEFAULT_LANGUAGE
from updatel10n.enums import LanguageCode
from updatel10n.negotiation import (
    candidate_tags,
    clear_resolution_cache,
    maximize_locale,
    resolve_language,
)


class TestExactMatch:
    """Exact (case- and separator-insensitive) tag matches."""

    @pytest.mark.parametrize("language", list(LanguageCode))
    def test_every_supported_tag_resolves_to_itself(self, language: LanguageCode) -> None:
        """Each supported tag resolves to its own member."""
        assert resolve_language(language.value) is language

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("PT_pt", LanguageCode.PORTUGUESE_PORTUGAL),
            ("pt_PT.UTF-8", LanguageCode.PORTUGUESE_PORTUGAL),
            ("zh_hant", LanguageCode.CHINESE_TRADITIONAL),
            ("FA-ir", LanguageCode.PERSIAN_IRAN),
            ("nb_NO", LanguageCode.NORWEGIAN),
        ],
    )
    def test_case_and_separator_insensitive(self, raw: str, expected: LanguageCode) -> None:
        """POSIX and mixed-case spellings match exactly."""
        assert resolve_language(raw) is expected


class TestFallbackChain:
    """Non-exact resolution steps."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("fr-CA", LanguageCode.FRENCH),
            ("de-AT", LanguageCode.GERMAN),
            ("en-US", LanguageCode.ENGLISH),
            ("ja-JP", LanguageCode.JAPANESE),
            ("pt-BR", LanguageCode.PORTUGUESE_BRAZIL),
            ("pt-AO", LanguageCode.PORTUGUESE_BRAZIL),
            ("es-419", LanguageCode.SPANISH),
            ("fa-DE", LanguageCode.PERSIAN),
            ("fa-Arab", LanguageCode.PERSIAN),
            ("fa-Arab-DE", LanguageCode.PERSIAN),
            ("pt-Latn", LanguageCode.PORTUGUESE_BRAZIL),
        ],
    )
    def test_primary_subtag(self, raw: str, expected: LanguageCode) -> None:
        """Regional variants without their own entry use the language."""
        assert resolve_language(raw) is expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("zh-Hans-CN", LanguageCode.CHINESE_SIMPLIFIED),
            ("zh-Hant-HK", LanguageCode.CHINESE_TRADITIONAL),
            ("sr-Latn-RS", LanguageCode.SERBIAN_LATIN),
            ("fa-AF-u-nu-latn", LanguageCode.PERSIAN_AFGHANISTAN),
            ("pt-PT-x-lisbon", LanguageCode.PORTUGUESE_PORTUGAL),
        ],
    )
    def test_most_specific_variant(self, raw: str, expected: LanguageCode) -> None:
        """Trailing subtags are dropped until a registered variant matches."""
        assert resolve_language(raw) is expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("zh", LanguageCode.CHINESE_SIMPLIFIED),
            ("zh-CN", LanguageCode.CHINESE_SIMPLIFIED),
            ("zh-TW", LanguageCode.CHINESE_TRADITIONAL),
            ("zh-HK", LanguageCode.CHINESE_TRADITIONAL),
            ("sr", LanguageCode.SERBIAN_CYRILLIC),
            ("sr-RS", LanguageCode.SERBIAN_CYRILLIC),
            ("nb", LanguageCode.NORWEGIAN),
            ("nb-GB", LanguageCode.NORWEGIAN),
        ],
    )
    def test_likely_subtags(self, raw: str, expected: LanguageCode) -> None:
        """Script and region are inferred from CLDR likely subtags."""
        assert resolve_language(raw) is expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("iw", LanguageCode.HEBREW),
            ("iw-IL", LanguageCode.HEBREW),
            ("in_ID", LanguageCode.INDONESIAN),
            ("no", LanguageCode.NORWEGIAN),
            ("no-NO", LanguageCode.NORWEGIAN),
        ],
    )
    def test_deprecated_language_codes(self, raw: str, expected: LanguageCode) -> None:
        """Deprecated ISO-639 codes map to their replacements."""
        assert resolve_language(raw) is expected

    @pytest.mark.parametrize("raw", ["xx-YY", "", "   ", "123", "C", "klingon", "x-private"])
    def test_unsupported_falls_back_to_english(self, raw: str) -> None:
        """Unsupported or garbage input resolves to the default language."""
        assert resolve_language(raw) is DEFAULT_LANGUAGE
        assert DEFAULT_LANGUAGE is LanguageCode.ENGLISH

    def test_custom_default(self) -> None:
        """The fallback language can be chosen by the caller."""
        assert resolve_language("xx-YY", LanguageCode.GERMAN) is LanguageCode.GERMAN
        assert resolve_language("fr-CA", LanguageCode.GERMAN) is LanguageCode.FRENCH


class TestResolutionProperties:
    """Property-based tests for resolve_language."""

    @given(st.text())
    def test_resolution_is_total(self, raw: str) -> None:
        """Property: any string resolves to a supported LanguageCode."""
        result = resolve_language(raw)
        event(f"fallback={result is DEFAULT_LANGUAGE}")
        assert isinstance(result, LanguageCode)

    @given(st.sampled_from(LanguageCode), st.sampled_from(["US", "GB", "DE", "JP", "419"]))
    def test_region_never_changes_language_family(
        self, language: LanguageCode, region: str
    ) -> None:
        """Property: adding a region keeps the primary language."""
        result = resolve_language(f"{language.primary_subtag}-{region}")
        event(f"language={language.primary_subtag}")
        assert result.primary_subtag == language.primary_subtag

    @given(st.text())
    def test_resolution_is_deterministic(self, raw: str) -> None:
        """Property: resolution does not depend on cache state."""
        first = resolve_language(raw)
        clear_resolution_cache()
        assert resolve_language(raw) is first

    @pytest.mark.fuzz
    @given(
        st.lists(
            st.text(alphabet=st.characters(codec="ascii"), max_size=9), min_size=1, max_size=5
        )
    )
    def test_resolution_is_total_for_subtag_soup(self, subtags: list[str]) -> None:
        """Fuzz: arbitrary ASCII subtag sequences always resolve."""
        raw = "-".join(subtags)
        assert isinstance(resolve_language(raw), LanguageCode)


class TestCandidateTags:
    """Order of candidate tags."""

    def test_truncation_before_inference(self) -> None:
        """Prefixes of the requested tag come before inferred tags."""
        candidates = list(candidate_tags("zh-Hans-CN"))
        assert candidates[:2] == ["zh-Hans-CN", "zh-Hans"]
        assert candidates[-1] == "zh"

    def test_bare_language_is_last(self) -> None:
        """The bare language subtag is tried after every more specific tag."""
        candidates = list(candidate_tags("fr-CA"))
        assert candidates[0] == "fr-CA"
        assert candidates[-1] == "fr"

    def test_supported_bare_tag_comes_first(self) -> None:
        """A supported bare tag is its own only candidate."""
        assert list(candidate_tags("fa")) == ["fa"]

    def test_supported_language_never_gains_a_region(self) -> None:
        """CLDR default regions are not added when the bare language is supported."""
        assert list(candidate_tags("fa-DE")) == ["fa-DE", "fa"]
        assert "fa-IR" not in list(candidate_tags("fa-Arab"))

    def test_explicit_region_kept_when_script_dropped(self) -> None:
        """A registered language-region pair is reached past an explicit script."""
        assert resolve_language("fa-Arab-AF") is LanguageCode.PERSIAN_AFGHANISTAN

    def test_no_duplicates(self) -> None:
        """Each candidate is yielded once."""
        candidates = list(candidate_tags("sr-Cyrl-RS"))
        assert len(candidates) == len(set(candidates))

    def test_alias_applied(self) -> None:
        """Deprecated language codes are replaced before candidates are built."""
        assert all(tag.startswith("he") for tag in candidate_tags("iw-IL"))

    def test_garbage_yields_nothing(self) -> None:
        """Input without a language subtag has no candidates."""
        assert list(candidate_tags("42")) == []


class TestMaximizeLocale:
    """CLDR likely-subtag inference."""

    def test_infers_script_and_region(self) -> None:
        assert maximize_locale("zh-TW") == ("zh", "Hant", "TW")

    def test_keeps_explicit_subtags(self) -> None:
        """Subtags present in the input are never replaced."""
        language, script, _ = maximize_locale("sr-Latn")
        assert (language, script) == ("sr", "Latn")

    def test_unknown_language(self) -> None:
        """Unknown languages are returned unchanged."""
        assert maximize_locale("xx-YY") == ("xx", None, "YY")

    def test_empty(self) -> None:
        assert maximize_locale("") == ("", None, None)


class TestCachingAndLogging:
    """Memoization and debug output."""

    def test_results_are_memoized(self) -> None:
        """Repeated lookups hit the lru_cache."""
        resolve_language("fr-CA")
        resolve_language("fr-CA")
        assert resolve_language.cache_info().hits >= 1

    def test_clear_resolution_cache(self) -> None:
        resolve_language("de")
        clear_resolution_cache()
        assert resolve_language.cache_info().currsize == 0

    def test_fallback_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Falling back to the default language is logged, never raised."""
        with caplog.at_level(logging.DEBUG, logger="updatel10n.negotiation"):
            resolve_language("xx-YY")
        assert "Falling back to en" in caplog.text

    def test_subtag_match_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="updatel10n.negotiation"):
            resolve_language("fr-CA")
        assert "resolved to 'fr' via 'fr'" in caplog.text

    def test_exact_match_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="updatel10n.negotiation"):
            resolve_language("fr")
        assert caplog.text == ""
