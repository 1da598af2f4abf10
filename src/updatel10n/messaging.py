"""Alert messaging: custom string overrides and the finished string set.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from updatel10n.constants import APP_NAME_PLACEHOLDER, VERSION_PLACEHOLDER
from updatel10n.enums import MessageKey

__all__ = [
    "AlertMessaging",
    "AlertStrings",
    "substitute_placeholders",
]

# App name and version tokens only; any other brace text is left untouched.
_PLACEHOLDER_PATTERN = re.compile(
    "|".join(re.escape(token) for token in (APP_NAME_PLACEHOLDER, VERSION_PLACEHOLDER))
)


def substitute_placeholders(template: str, app_name: str, version: str) -> str:
    """Replace {0} with app_name and {1} with version in a single pass.

    Substituted values are never scanned again, so an app name containing
    "{1}" or other brace text is inserted verbatim.

    Example:
        >>> substitute_placeholders("{0} {1} is out", "Demo", "2.3.0")
        'Demo 2.3.0 is out'
    """
    values = {APP_NAME_PLACEHOLDER: app_name, VERSION_PLACEHOLDER: version}
    return _PLACEHOLDER_PATTERN.sub(lambda match: values[match.group()], template)


@dataclass(frozen=True, slots=True)
class AlertMessaging:
    """Caller-supplied replacements for individual alert strings.

    A field left as None is localized as usual. A set field is used as-is
    in every language; ``update_message`` may use the same ``{0}`` (app
    name) and ``{1}`` (version) placeholders as the built-in templates.

    Attributes:
        update_title: Replaces the alert title
        update_message: Replaces the alert message template
        update_button: Replaces the "Update" label
        next_time_button: Replaces the "Next time" label
        skip_button: Replaces the "Skip this version" label
    """

    update_title: str | None = None
    update_message: str | None = None
    update_button: str | None = None
    next_time_button: str | None = None
    skip_button: str | None = None

    def override_for(self, key: MessageKey) -> str | None:
        """Custom string for a message key, or None to localize it."""
        match key:
            case MessageKey.TITLE:
                return self.update_title
            case MessageKey.MESSAGE:
                return self.update_message
            case MessageKey.SKIP_BUTTON:
                return self.skip_button
            case MessageKey.NEXT_TIME_BUTTON:
                return self.next_time_button
            case MessageKey.UPDATE_BUTTON:
                return self.update_button


@dataclass(frozen=True, slots=True)
class AlertStrings:
    """Finished strings for one alert presentation.

    Attributes:
        title: Alert title
        message: Alert body with app name and version filled in
        skip_button: "Skip this version" label
        next_time_button: "Next time" label
        update_button: "Update" label
    """

    title: str
    message: str
    skip_button: str
    next_time_button: str
    update_button: str
