"""
Exceptions for the translation service.

Only :class:`ResourceLoadError` crosses a component boundary (loader to
store). The lookup errors are recovered inside :class:`TranslationResolver`
and reported through the diagnostics sink, unless the caller opts into the
strict ``require_term`` API.
"""

from __future__ import annotations


class I18nError(Exception):
    """Base class for all translation service errors."""


class ResourceLoadError(I18nError):
    """Raised when a resource file cannot be delivered by a loader.

    Attributes:
        address: Resource address that was requested.
    """

    def __init__(self, address: str, message: str | None = None) -> None:
        self.address = address
        super().__init__(message or f"File [{address}] was not found.")


class MalformedResourceError(ResourceLoadError):
    """Raised when a resource file was read but is not a valid term tree."""

    def __init__(self, address: str, reason: str) -> None:
        super().__init__(address, f"File [{address}] could not be parsed: {reason}")


class MissingTermKeyError(I18nError):
    """Raised when a lookup is attempted without a term key."""

    def __init__(self) -> None:
        super().__init__("Term is required.")


class NoLanguageConfiguredError(I18nError):
    """Raised when no language is available to resolve a term against."""

    def __init__(self) -> None:
        super().__init__("There must be a default language defined for the application.")


class TermNotFoundError(I18nError):
    """Raised when a term key cannot be resolved in a language.

    Attributes:
        language: Language the lookup was attempted in.
        key: Dotted term key that was requested.
    """

    def __init__(self, language: str | None, key: str) -> None:
        self.language = language
        self.key = key
        super().__init__(f"Translation not found for language [{language}] and term [{key}].")
