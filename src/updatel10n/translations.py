"""Embedded translation table for the update alert.

One row per LanguageCode, one template per MessageKey. The ``message``
template takes two positional placeholders: ``{0}`` is the app name and
``{1}`` the version available in the store. Every other template is plain
text.

The table is verified when this module is imported, so a missing or
malformed template fails loudly at import time (and in the test suite)
instead of surfacing as a half-translated alert.

Python 3.13+.
"""

from __future__ import annotations

# ruff: noqa: E501 - one translation per line keeps the table reviewable

import logging
import string
from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeAlias

from updatel10n.constants import APP_NAME_PLACEHOLDER, VERSION_PLACEHOLDER
from updatel10n.enums import LanguageCode, MessageKey
from updatel10n.integrity import IntegrityContext, TranslationIntegrityError

__all__ = [
    "TRANSLATIONS",
    "get_template",
    "verify_translation_table",
]

logger = logging.getLogger(__name__)

TranslationTable: TypeAlias = Mapping[LanguageCode, Mapping[MessageKey, str]]
"""Read-only LanguageCode -> MessageKey -> template mapping."""

_L = LanguageCode
_K = MessageKey

_RAW_TRANSLATIONS: dict[LanguageCode, dict[MessageKey, str]] = {
    _L.ARABIC: {
        _K.TITLE: "تحديث متوفر",
        _K.MESSAGE: "يتوفر إصدار جديد من {0}. يرجى التحديث إلى الإصدار {1} الآن.",
        _K.SKIP_BUTTON: "تخطي هذا الإصدار",
        _K.NEXT_TIME_BUTTON: "في المرة القادمة",
        _K.UPDATE_BUTTON: "تحديث",
    },
    _L.ARMENIAN: {
        _K.TITLE: "Թարմացում է հասանելի",
        _K.MESSAGE: "{0}-ի նոր տարբերակը հասանելի է։ Խնդրում ենք հիմա թարմացնել {1} տարբերակին։",
        _K.SKIP_BUTTON: "Բաց թողնել այս տարբերակը",
        _K.NEXT_TIME_BUTTON: "Հաջորդ անգամ",
        _K.UPDATE_BUTTON: "Թարմացնել",
    },
    _L.BASQUE: {
        _K.TITLE: "Eguneraketa eskuragarri",
        _K.MESSAGE: "{0}-(r)en bertsio berri bat dago eskuragarri. Eguneratu {1} bertsiora orain.",
        _K.SKIP_BUTTON: "Saltatu bertsio hau",
        _K.NEXT_TIME_BUTTON: "Hurrengoan",
        _K.UPDATE_BUTTON: "Eguneratu",
    },
    _L.CHINESE_SIMPLIFIED: {
        _K.TITLE: "有可用的更新",
        _K.MESSAGE: "{0} 有新版本可用。请现在更新到版本 {1}。",
        _K.SKIP_BUTTON: "跳过此版本",
        _K.NEXT_TIME_BUTTON: "下一次",
        _K.UPDATE_BUTTON: "更新",
    },
    _L.CHINESE_TRADITIONAL: {
        _K.TITLE: "有可用的更新",
        _K.MESSAGE: "{0} 有新版本可供使用。請立即更新至版本 {1}。",
        _K.SKIP_BUTTON: "略過此版本",
        _K.NEXT_TIME_BUTTON: "下一次",
        _K.UPDATE_BUTTON: "更新",
    },
    _L.CROATIAN: {
        _K.TITLE: "Dostupno ažuriranje",
        _K.MESSAGE: "Dostupna je nova verzija aplikacije {0}. Molimo ažurirajte na verziju {1} sada.",
        _K.SKIP_BUTTON: "Preskoči ovu verziju",
        _K.NEXT_TIME_BUTTON: "Sljedeći put",
        _K.UPDATE_BUTTON: "Ažuriraj",
    },
    _L.CZECH: {
        _K.TITLE: "Aktualizace k dispozici",
        _K.MESSAGE: "Je k dispozici nová verze aplikace {0}. Aktualizujte prosím nyní na verzi {1}.",
        _K.SKIP_BUTTON: "Přeskočit tuto verzi",
        _K.NEXT_TIME_BUTTON: "Příště",
        _K.UPDATE_BUTTON: "Aktualizovat",
    },
    _L.DANISH: {
        _K.TITLE: "Opdatering tilgængelig",
        _K.MESSAGE: "En ny version af {0} er tilgængelig. Opdater venligst til version {1} nu.",
        _K.SKIP_BUTTON: "Spring denne version over",
        _K.NEXT_TIME_BUTTON: "Næste gang",
        _K.UPDATE_BUTTON: "Opdater",
    },
    _L.DUTCH: {
        _K.TITLE: "Update beschikbaar",
        _K.MESSAGE: "Een nieuwe versie van {0} is beschikbaar. Update nu naar versie {1}.",
        _K.SKIP_BUTTON: "Deze versie overslaan",
        _K.NEXT_TIME_BUTTON: "Volgende keer",
        _K.UPDATE_BUTTON: "Updaten",
    },
    _L.ENGLISH: {
        _K.TITLE: "Update Available",
        _K.MESSAGE: "A new version of {0} is available. Please update to version {1} now.",
        _K.SKIP_BUTTON: "Skip this version",
        _K.NEXT_TIME_BUTTON: "Next time",
        _K.UPDATE_BUTTON: "Update",
    },
    _L.ESTONIAN: {
        _K.TITLE: "Uuendus saadaval",
        _K.MESSAGE: "Rakenduse {0} uus versioon on saadaval. Palun uuenda kohe versioonile {1}.",
        _K.SKIP_BUTTON: "Jäta see versioon vahele",
        _K.NEXT_TIME_BUTTON: "Järgmine kord",
        _K.UPDATE_BUTTON: "Uuenda",
    },
    _L.FINNISH: {
        _K.TITLE: "Päivitys saatavilla",
        _K.MESSAGE: "Sovelluksesta {0} on saatavilla uusi versio. Päivitä versioon {1} nyt.",
        _K.SKIP_BUTTON: "Ohita tämä versio",
        _K.NEXT_TIME_BUTTON: "Ensi kerralla",
        _K.UPDATE_BUTTON: "Päivitä",
    },
    _L.FRENCH: {
        _K.TITLE: "Mise à jour disponible",
        _K.MESSAGE: (
            "Une nouvelle version de {0} est disponible. "
            "Veuillez effectuer la mise à jour vers la version {1} dès maintenant."
        ),
        _K.SKIP_BUTTON: "Ignorer cette version",
        _K.NEXT_TIME_BUTTON: "La prochaine fois",
        _K.UPDATE_BUTTON: "Mettre à jour",
    },
    _L.GERMAN: {
        _K.TITLE: "Update verfügbar",
        _K.MESSAGE: "Eine neue Version von {0} ist verfügbar. Bitte aktualisiere jetzt auf Version {1}.",
        _K.SKIP_BUTTON: "Diese Version überspringen",
        _K.NEXT_TIME_BUTTON: "Nächstes Mal",
        _K.UPDATE_BUTTON: "Aktualisieren",
    },
    _L.GREEK: {
        _K.TITLE: "Διαθέσιμη ενημέρωση",
        _K.MESSAGE: "Μια νέα έκδοση του {0} είναι διαθέσιμη. Ενημερώστε τώρα στην έκδοση {1}.",
        _K.SKIP_BUTTON: "Παράλειψη αυτής της έκδοσης",
        _K.NEXT_TIME_BUTTON: "Την επόμενη φορά",
        _K.UPDATE_BUTTON: "Ενημέρωση",
    },
    _L.HEBREW: {
        _K.TITLE: "עדכון זמין",
        _K.MESSAGE: "גרסה חדשה של {0} זמינה. אנא עדכן לגרסה {1} כעת.",
        _K.SKIP_BUTTON: "דלג על גרסה זו",
        _K.NEXT_TIME_BUTTON: "בפעם הבאה",
        _K.UPDATE_BUTTON: "עדכן",
    },
    _L.HUNGARIAN: {
        _K.TITLE: "Frissítés érhető el",
        _K.MESSAGE: "Elérhető a(z) {0} új verziója. Kérjük, frissíts most a(z) {1} verzióra.",
        _K.SKIP_BUTTON: "Verzió kihagyása",
        _K.NEXT_TIME_BUTTON: "Legközelebb",
        _K.UPDATE_BUTTON: "Frissítés",
    },
    _L.INDONESIAN: {
        _K.TITLE: "Pembaruan Tersedia",
        _K.MESSAGE: "Versi baru {0} telah tersedia. Silakan perbarui ke versi {1} sekarang.",
        _K.SKIP_BUTTON: "Lewati versi ini",
        _K.NEXT_TIME_BUTTON: "Lain kali",
        _K.UPDATE_BUTTON: "Perbarui",
    },
    _L.ITALIAN: {
        _K.TITLE: "Aggiornamento disponibile",
        _K.MESSAGE: "È disponibile una nuova versione di {0}. Aggiorna ora alla versione {1}.",
        _K.SKIP_BUTTON: "Salta questa versione",
        _K.NEXT_TIME_BUTTON: "La prossima volta",
        _K.UPDATE_BUTTON: "Aggiorna",
    },
    _L.JAPANESE: {
        _K.TITLE: "アップデートがあります",
        _K.MESSAGE: "{0} の新しいバージョンがあります。今すぐバージョン {1} にアップデートしてください。",
        _K.SKIP_BUTTON: "このバージョンをスキップ",
        _K.NEXT_TIME_BUTTON: "次回",
        _K.UPDATE_BUTTON: "アップデート",
    },
    _L.KOREAN: {
        _K.TITLE: "업데이트 가능",
        _K.MESSAGE: "{0}의 새 버전이 있습니다. 지금 {1} 버전으로 업데이트하세요.",
        _K.SKIP_BUTTON: "이 버전 건너뛰기",
        _K.NEXT_TIME_BUTTON: "다음에",
        _K.UPDATE_BUTTON: "업데이트",
    },
    _L.LATVIAN: {
        _K.TITLE: "Pieejams atjauninājums",
        _K.MESSAGE: "Ir pieejama jauna {0} versija. Lūdzu, atjauniniet uz versiju {1} tagad.",
        _K.SKIP_BUTTON: "Izlaist šo versiju",
        _K.NEXT_TIME_BUTTON: "Nākamreiz",
        _K.UPDATE_BUTTON: "Atjaunināt",
    },
    _L.LITHUANIAN: {
        _K.TITLE: "Galimas atnaujinimas",
        _K.MESSAGE: "Yra nauja {0} versija. Atnaujinkite į versiją {1} dabar.",
        _K.SKIP_BUTTON: "Praleisti šią versiją",
        _K.NEXT_TIME_BUTTON: "Kitą kartą",
        _K.UPDATE_BUTTON: "Atnaujinti",
    },
    _L.MALAY: {
        _K.TITLE: "Kemas Kini Tersedia",
        _K.MESSAGE: "Versi baharu {0} telah tersedia. Sila kemas kini ke versi {1} sekarang.",
        _K.SKIP_BUTTON: "Langkau versi ini",
        _K.NEXT_TIME_BUTTON: "Lain kali",
        _K.UPDATE_BUTTON: "Kemas kini",
    },
    _L.NORWEGIAN: {
        _K.TITLE: "Oppdatering tilgjengelig",
        _K.MESSAGE: "En ny versjon av {0} er tilgjengelig. Vennligst oppdater til versjon {1} nå.",
        _K.SKIP_BUTTON: "Hopp over denne versjonen",
        _K.NEXT_TIME_BUTTON: "Neste gang",
        _K.UPDATE_BUTTON: "Oppdater",
    },
    _L.PERSIAN: {
        _K.TITLE: "به‌روزرسانی موجود است",
        _K.MESSAGE: "نسخه جدیدی از {0} موجود است. لطفاً همین حالا به نسخه {1} به‌روزرسانی کنید.",
        _K.SKIP_BUTTON: "رد کردن این نسخه",
        _K.NEXT_TIME_BUTTON: "دفعه بعد",
        _K.UPDATE_BUTTON: "به‌روزرسانی",
    },
    _L.PERSIAN_AFGHANISTAN: {
        _K.TITLE: "تجدید موجود است",
        _K.MESSAGE: "نسخه جدید {0} موجود است. لطفاً همین حالا به نسخه {1} تجدید کنید.",
        _K.SKIP_BUTTON: "از این نسخه بگذرید",
        _K.NEXT_TIME_BUTTON: "دفعه بعد",
        _K.UPDATE_BUTTON: "تجدید",
    },
    _L.PERSIAN_IRAN: {
        _K.TITLE: "به‌روزرسانی موجود است",
        _K.MESSAGE: "نسخه جدیدی از {0} موجود است. لطفاً همین حالا به نسخه {1} به‌روزرسانی کنید.",
        _K.SKIP_BUTTON: "رد کردن این نسخه",
        _K.NEXT_TIME_BUTTON: "دفعه بعد",
        _K.UPDATE_BUTTON: "به‌روزرسانی",
    },
    _L.POLISH: {
        _K.TITLE: "Dostępna aktualizacja",
        _K.MESSAGE: "Dostępna jest nowa wersja aplikacji {0}. Zaktualizuj teraz do wersji {1}.",
        _K.SKIP_BUTTON: "Pomiń tę wersję",
        _K.NEXT_TIME_BUTTON: "Następnym razem",
        _K.UPDATE_BUTTON: "Aktualizuj",
    },
    _L.PORTUGUESE_BRAZIL: {
        _K.TITLE: "Atualização disponível",
        _K.MESSAGE: "Uma nova versão de {0} está disponível. Atualize para a versão {1} agora.",
        _K.SKIP_BUTTON: "Pular esta versão",
        _K.NEXT_TIME_BUTTON: "Próxima vez",
        _K.UPDATE_BUTTON: "Atualizar",
    },
    _L.PORTUGUESE_PORTUGAL: {
        _K.TITLE: "Atualização disponível",
        _K.MESSAGE: "Está disponível uma nova versão de {0}. Por favor, atualize para a versão {1} agora.",
        _K.SKIP_BUTTON: "Saltar esta versão",
        _K.NEXT_TIME_BUTTON: "Da próxima vez",
        _K.UPDATE_BUTTON: "Atualizar",
    },
    _L.RUSSIAN: {
        _K.TITLE: "Доступно обновление",
        _K.MESSAGE: "Доступна новая версия {0}. Пожалуйста, обновите до версии {1} сейчас.",
        _K.SKIP_BUTTON: "Пропустить эту версию",
        _K.NEXT_TIME_BUTTON: "В следующий раз",
        _K.UPDATE_BUTTON: "Обновить",
    },
    _L.SERBIAN_CYRILLIC: {
        _K.TITLE: "Доступно ажурирање",
        _K.MESSAGE: "Доступна је нова верзија апликације {0}. Молимо ажурирајте на верзију {1} сада.",
        _K.SKIP_BUTTON: "Прескочи ову верзију",
        _K.NEXT_TIME_BUTTON: "Следећи пут",
        _K.UPDATE_BUTTON: "Ажурирај",
    },
    _L.SERBIAN_LATIN: {
        _K.TITLE: "Dostupno ažuriranje",
        _K.MESSAGE: "Dostupna je nova verzija aplikacije {0}. Molimo ažurirajte na verziju {1} sada.",
        _K.SKIP_BUTTON: "Preskoči ovu verziju",
        _K.NEXT_TIME_BUTTON: "Sledeći put",
        _K.UPDATE_BUTTON: "Ažuriraj",
    },
    _L.SLOVENIAN: {
        _K.TITLE: "Na voljo je posodobitev",
        _K.MESSAGE: "Na voljo je nova različica aplikacije {0}. Prosimo, posodobite na različico {1} zdaj.",
        _K.SKIP_BUTTON: "Preskoči to različico",
        _K.NEXT_TIME_BUTTON: "Naslednjič",
        _K.UPDATE_BUTTON: "Posodobi",
    },
    _L.SPANISH: {
        _K.TITLE: "Actualización disponible",
        _K.MESSAGE: "Hay una nueva versión de {0} disponible. Por favor, actualiza a la versión {1} ahora.",
        _K.SKIP_BUTTON: "Saltar esta versión",
        _K.NEXT_TIME_BUTTON: "La próxima vez",
        _K.UPDATE_BUTTON: "Actualizar",
    },
    _L.SWEDISH: {
        _K.TITLE: "Uppdatering tillgänglig",
        _K.MESSAGE: "En ny version av {0} finns tillgänglig. Uppdatera till version {1} nu.",
        _K.SKIP_BUTTON: "Hoppa över den här versionen",
        _K.NEXT_TIME_BUTTON: "Nästa gång",
        _K.UPDATE_BUTTON: "Uppdatera",
    },
    _L.THAI: {
        _K.TITLE: "มีอัปเดตใหม่",
        _K.MESSAGE: "{0} มีเวอร์ชันใหม่แล้ว กรุณาอัปเดตเป็นเวอร์ชัน {1} ตอนนี้",
        _K.SKIP_BUTTON: "ข้ามเวอร์ชันนี้",
        _K.NEXT_TIME_BUTTON: "ครั้งหน้า",
        _K.UPDATE_BUTTON: "อัปเดต",
    },
    _L.TURKISH: {
        _K.TITLE: "Güncelleme Mevcut",
        _K.MESSAGE: "{0} uygulamasının yeni bir sürümü mevcut. Lütfen şimdi {1} sürümüne güncelleyin.",
        _K.SKIP_BUTTON: "Bu sürümü atla",
        _K.NEXT_TIME_BUTTON: "Bir dahaki sefere",
        _K.UPDATE_BUTTON: "Güncelle",
    },
    _L.URDU: {
        _K.TITLE: "اپ ڈیٹ دستیاب ہے",
        _K.MESSAGE: "{0} کا نیا ورژن دستیاب ہے۔ براہ کرم ابھی ورژن {1} پر اپ ڈیٹ کریں۔",
        _K.SKIP_BUTTON: "اس ورژن کو چھوڑ دیں",
        _K.NEXT_TIME_BUTTON: "اگلی بار",
        _K.UPDATE_BUTTON: "اپ ڈیٹ کریں",
    },
    _L.UKRAINIAN: {
        _K.TITLE: "Доступне оновлення",
        _K.MESSAGE: "Доступна нова версія {0}. Будь ласка, оновіть до версії {1} зараз.",
        _K.SKIP_BUTTON: "Пропустити цю версію",
        _K.NEXT_TIME_BUTTON: "Наступного разу",
        _K.UPDATE_BUTTON: "Оновити",
    },
    _L.VIETNAMESE: {
        _K.TITLE: "Đã có bản cập nhật",
        _K.MESSAGE: "Đã có phiên bản mới của {0}. Vui lòng cập nhật lên phiên bản {1} ngay bây giờ.",
        _K.SKIP_BUTTON: "Bỏ qua phiên bản này",
        _K.NEXT_TIME_BUTTON: "Lần sau",
        _K.UPDATE_BUTTON: "Cập nhật",
    },
}

_FORMATTER = string.Formatter()

# Field names of the message placeholders as string.Formatter reports them ('0', '1')
_MESSAGE_FIELDS = sorted(
    token.strip("{}") for token in (APP_NAME_PLACEHOLDER, VERSION_PLACEHOLDER)
)


def _placeholder_fields(template: str) -> list[str] | None:
    """Replacement fields in template, or None if braces are unbalanced.

    Fields with a conversion or format spec are reported in full ("0!r", "1:>5")
    so they never compare equal to a bare positional placeholder.
    """
    try:
        return [
            field_name + (f"!{conversion}" if conversion else "") + (f":{spec}" if spec else "")
            for _literal, field_name, spec, conversion in _FORMATTER.parse(template)
            if field_name is not None
        ]
    except ValueError:
        return None


def _check_template(language: LanguageCode, key: MessageKey, template: object) -> None:
    """Raise TranslationIntegrityError if one template breaks the table invariants."""
    cell = f"{language}/{key}"

    if not isinstance(template, str) or not template.strip():
        msg = f"Empty or missing translation for {cell}"
        raise TranslationIntegrityError(
            msg,
            IntegrityContext(
                component="translations",
                operation="verify",
                key=cell,
                expected="non-empty string",
                actual=repr(template),
            ),
            language=language,
            key=key,
        )

    fields = _placeholder_fields(template)
    expected = _MESSAGE_FIELDS if key.placeholder_count else []
    # Order may differ between languages; each placeholder must appear exactly once.
    if fields is None or sorted(fields) != expected:
        msg = f"Malformed placeholders in translation for {cell}: {template!r}"
        raise TranslationIntegrityError(
            msg,
            IntegrityContext(
                component="translations",
                operation="verify",
                key=cell,
                expected=repr(expected),
                actual=repr(fields),
            ),
            language=language,
            key=key,
        )


def verify_translation_table(table: Mapping[LanguageCode, Mapping[MessageKey, str]]) -> None:
    """Check that a translation table is complete and well formed.

    Invariants:
        - every LanguageCode has a row
        - every row has a non-empty template for every MessageKey
        - message templates carry {0} and {1} exactly once each
        - other templates carry no replacement fields

    Args:
        table: Table to verify

    Raises:
        TranslationIntegrityError: On the first violation, naming the
            offending (language, key) pair
    """
    for language in LanguageCode:
        row = table.get(language)
        if row is None:
            msg = f"Missing translation row for language {language}"
            raise TranslationIntegrityError(
                msg,
                IntegrityContext(component="translations", operation="verify", key=str(language)),
                language=language,
            )
        for key in MessageKey:
            _check_template(language, key, row.get(key))

    logger.debug(
        "Verified translation table: %d languages x %d keys", len(LanguageCode), len(MessageKey)
    )


verify_translation_table(_RAW_TRANSLATIONS)

TRANSLATIONS: TranslationTable = MappingProxyType(
    {language: MappingProxyType(row) for language, row in _RAW_TRANSLATIONS.items()}
)


def get_template(
    language: LanguageCode,
    key: MessageKey,
    table: TranslationTable = TRANSLATIONS,
) -> str:
    """Return the raw template for a (language, key) pair.

    Args:
        language: Resolved language
        key: Role of the string in the alert
        table: Translation table (defaults to the embedded one)

    Returns:
        Template string, unformatted

    Raises:
        TranslationIntegrityError: If the table has no template for the pair
    """
    try:
        return table[language][key]
    except KeyError:
        cell = f"{language}/{key}"
        msg = f"No translation for {cell}"
        raise TranslationIntegrityError(
            msg,
            IntegrityContext(component="translations", operation="lookup", key=cell),
            language=language,
            key=key,
        ) from None
