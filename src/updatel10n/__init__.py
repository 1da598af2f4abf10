"""update-l10n - Localized strings for application update alerts.

Resolves the title, message and button labels of an "update available"
alert for the user's locale, with a deterministic fallback chain
(exact tag -> most specific variant -> primary language -> English)
and app name / version interpolation.

Public API:
    LocalizationResolver - Per-alert string resolver
    ResolverConfig - Immutable resolver configuration
    LanguageCode - Closed set of supported languages
    MessageKey - Roles of the alert strings
    AlertMessaging - Custom strings replacing localized ones
    AlertStrings - Finished strings for one alert
    resolve_language - Locale identifier -> LanguageCode (never fails)

Exceptions:
    DataIntegrityError - Base for translation data defects
    TranslationIntegrityError - Missing or malformed template

Submodules:
    updatel10n.translations - Embedded translation table and verification
    updatel10n.negotiation - Locale negotiation
    updatel10n.host - Host environment (app name, current locale)
    updatel10n.locale_utils - Tag normalization and system locale detection
"""

from .config import ResolverConfig
from .enums import LanguageCode, MessageKey
from .host import HostEnvironment, StaticHostEnvironment, SystemHostEnvironment
from .integrity import DataIntegrityError, ImmutabilityViolationError, TranslationIntegrityError
from .messaging import AlertMessaging, AlertStrings
from .negotiation import resolve_language
from .resolver import LocalizationResolver

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("update-l10n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AlertMessaging",
    "AlertStrings",
    "DataIntegrityError",
    "HostEnvironment",
    "ImmutabilityViolationError",
    "LanguageCode",
    "LocalizationResolver",
    "MessageKey",
    "ResolverConfig",
    "StaticHostEnvironment",
    "SystemHostEnvironment",
    "TranslationIntegrityError",
    "__version__",
    "resolve_language",
]
