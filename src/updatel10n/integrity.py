"""Data integrity exceptions for the embedded translation data.

These exceptions indicate BUILD DEFECTS, not user-facing errors. A missing
or malformed template can only come from an incomplete translation table,
never from runtime input, so they should propagate to the top level and
fail tests loudly.

Design:
    - Name the offending language/key cell and what was expected there
    - Immutable after construction
    - @final decorator prevents subclassing

Hierarchy:
    DataIntegrityError (base - data defects)
    ├─ ImmutabilityViolationError (mutation attempt on frozen object)
    └─ TranslationIntegrityError (missing or malformed template)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

__all__ = [
    "DataIntegrityError",
    "ImmutabilityViolationError",
    "IntegrityContext",
    "TranslationIntegrityError",
]


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Context for integrity error diagnosis.

    Attributes:
        component: System component where error occurred (translations, resolver)
        operation: Operation being performed (verify, lookup, mutate)
        key: Identifier involved, e.g. "fr/message" (optional)
        expected: Expected value (optional)
        actual: Actual value found (optional)
    """

    component: str
    operation: str
    key: str | None = None
    expected: str | None = None
    actual: str | None = None


class DataIntegrityError(Exception):
    """Base exception for defects in the embedded translation data.

    Raised when the table is incomplete or a template is malformed, and
    when code tries to change a resolver after construction. The error is
    frozen once raised, so the language, key and context reported by the
    failing check are the ones a test run or crash log sees.

    Attributes:
        context: Where the defect was found and what was expected there
    """

    __slots__ = ("_context", "_frozen")

    _context: IntegrityContext | None
    _frozen: bool

    # Set by the interpreter while the exception propagates; always writable.
    _PYTHON_EXCEPTION_ATTRS: frozenset[str] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
    ) -> None:
        """Create the error.

        Args:
            message: What is wrong, naming the language/key cell when known
            context: Component, operation and expected/actual values (optional)
        """
        super().__init__(message)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: object) -> None:
        """Allow interpreter bookkeeping only; anything else is rejected once frozen.

        Raises:
            ImmutabilityViolationError: On any other assignment after __init__
        """
        if name in self._PYTHON_EXCEPTION_ATTRS or not getattr(self, "_frozen", False):
            object.__setattr__(self, name, value)
            return
        msg = f"Cannot modify integrity error attribute: {name}"
        raise ImmutabilityViolationError(msg)

    def __delattr__(self, name: str) -> None:
        """Deleting attributes is never allowed.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete integrity error attribute: {name}"
        raise ImmutabilityViolationError(msg)

    @property
    def context(self) -> IntegrityContext | None:
        """Diagnostic context, or None when the raiser supplied none."""
        return self._context

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


@final
class ImmutabilityViolationError(DataIntegrityError):
    """Attempt to mutate an immutable object.

    Raised when code attempts to modify a frozen DataIntegrityError or
    a constructed LocalizationResolver.
    """


@final
class TranslationIntegrityError(DataIntegrityError):
    """Template missing or malformed for a (language, key) pair.

    Attributes:
        language: Language tag of the offending row
        key: Message key of the offending column
    """

    __slots__ = ("_key", "_language")

    _language: str
    _key: str

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
        *,
        language: str = "",
        key: str = "",
    ) -> None:
        """Initialize TranslationIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
            language: Language tag of the offending template
            key: Message key of the offending template
        """
        # Must set these before calling super().__init__ which freezes
        object.__setattr__(self, "_language", str(language))
        object.__setattr__(self, "_key", str(key))
        super().__init__(message, context)

    @property
    def language(self) -> str:
        """Language tag of the offending template."""
        return self._language

    @property
    def key(self) -> str:
        """Message key of the offending template."""
        return self._key

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"TranslationIntegrityError({self.args[0]!r}, "
            f"language={self._language!r}, key={self._key!r})"
        )
