"""Host environment: where the app display name and current locale come from.

The resolver never reads process state directly. It asks a HostEnvironment,
so callers embedding the resolver in a GUI toolkit, a web request or a test
can supply both values themselves.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from updatel10n.constants import APP_NAME_ENV_VARS
from updatel10n.locale_utils import get_system_locale

__all__ = [
    "HostEnvironment",
    "StaticHostEnvironment",
    "SystemHostEnvironment",
    "get_best_matching_app_name",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class HostEnvironment(Protocol):
    """Source of the host-provided values the resolver depends on."""

    def app_display_name(self) -> str:
        """Best available user-facing name of the application."""
        ...

    def current_locale(self) -> str:
        """Current user/device locale identifier (BCP-47 or POSIX form)."""
        ...


def get_best_matching_app_name() -> str:
    """Best available display name of the running application.

    Lookup order:
    1. APP_DISPLAY_NAME environment variable
    2. APP_NAME environment variable
    3. File stem of the running script (sys.argv[0])

    Returns:
        Application name, or "" when none is available
    """
    for var in APP_NAME_ENV_VARS:
        value = os.environ.get(var, "").strip()
        if value:
            return value

    argv0 = sys.argv[0] if sys.argv else ""
    # "-c" and "" come from interactive or inline interpreters
    if argv0 and argv0 != "-c":
        return Path(argv0).stem
    return ""


class SystemHostEnvironment:
    """HostEnvironment backed by the process environment.

    The locale is re-read on every call, so a locale change while the
    process runs is reflected in the next lookup.
    """

    __slots__ = ()

    def app_display_name(self) -> str:
        return get_best_matching_app_name()

    def current_locale(self) -> str:
        return get_system_locale()

    def __repr__(self) -> str:
        return "SystemHostEnvironment()"


@dataclass(frozen=True, slots=True)
class StaticHostEnvironment:
    """HostEnvironment with fixed values.

    Attributes:
        app_name: Value returned by app_display_name()
        locale: Value returned by current_locale()
    """

    app_name: str = ""
    locale: str = "en"

    def app_display_name(self) -> str:
        return self.app_name

    def current_locale(self) -> str:
        return self.locale
