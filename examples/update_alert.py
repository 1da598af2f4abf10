"""LocalizationResolver Example - Update Alert Strings.

Demonstrates producing the strings of an "update available" alert for
different device locales, pinned languages and custom messaging.

Scenarios covered:
1. Following the device locale
2. Locale fallback (regional variants, scripts, unsupported locales)
3. Pinning the alert language
4. Custom alert messaging
5. Listing supported languages

Python 3.13+.
"""

from __future__ import annotations

from updatel10n import (
    AlertMessaging,
    LanguageCode,
    LocalizationResolver,
    StaticHostEnvironment,
    resolve_language,
)


def example_1_device_locale() -> None:
    """Example 1: Strings follow the device locale."""
    print("=" * 60)
    print("Example 1: Device Locale")
    print("=" * 60)

    host = StaticHostEnvironment(app_name="PhotoBooth", locale="ja_JP.UTF-8")
    resolver = LocalizationResolver(host=host)

    print(f"\nResolved language: {resolver.language}")
    print(f"  title:   {resolver.alert_title()}")
    print(f"  message: {resolver.alert_message('2.3.0')}")
    print(f"  buttons: {resolver.update_button_title()} | "
          f"{resolver.next_time_button_title()} | {resolver.skip_button_title()}")


def example_2_fallback() -> None:
    """Example 2: How device locales map onto supported languages."""
    print("\n" + "=" * 60)
    print("Example 2: Locale Fallback")
    print("=" * 60)

    for locale in ["fr-CA", "pt_BR", "pt-PT", "zh-TW", "zh-Hans-CN", "sr", "nb", "iw", "xx-YY"]:
        print(f"  {locale:<12} -> {resolve_language(locale)}")


def example_3_pinned_language() -> None:
    """Example 3: Pin the language regardless of the device locale."""
    print("\n" + "=" * 60)
    print("Example 3: Pinned Language")
    print("=" * 60)

    host = StaticHostEnvironment(locale="en-US")
    resolver = LocalizationResolver("PhotoBooth", LanguageCode.GERMAN, host=host)
    print(f"\n  {resolver.alert_title()}")
    print(f"  {resolver.alert_message('2.3.0')}")


def example_4_custom_messaging() -> None:
    """Example 4: Replace individual strings with your own copy."""
    print("\n" + "=" * 60)
    print("Example 4: Custom Messaging")
    print("=" * 60)

    resolver = LocalizationResolver("PhotoBooth", "es")
    messaging = AlertMessaging(
        update_title="PhotoBooth {1}",
        update_message="{0} {1} adds batch export.",
    )
    strings = resolver.alert_strings("2.3.0", messaging)
    # Custom title is used verbatim; only the message is formatted
    print(f"\n  title:   {strings.title}")
    print(f"  message: {strings.message}")
    print(f"  update:  {strings.update_button}")


def example_5_supported_languages() -> None:
    """Example 5: Supported languages with their CLDR display names."""
    print("\n" + "=" * 60)
    print("Example 5: Supported Languages")
    print("=" * 60)

    for language in LanguageCode:
        direction = "rtl" if language.is_rtl else "ltr"
        print(f"  {language:<8} {direction}  {language.display_name('en')}")


if __name__ == "__main__":
    example_1_device_locale()
    example_2_fallback()
    example_3_pinned_language()
    example_4_custom_messaging()
    example_5_supported_languages()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
