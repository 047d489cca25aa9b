"""
Lazy-loading translation service with default-language fallback.

Resolves dotted term keys against per-language JSON resource files
(``resources.<language>.json``), loading each language on demand.
"""

from .config import I18nSettings, configure_logging, create_resolver, load_settings
from .diagnostics import DiagnosticsSink, LoggingDiagnostics
from .errors import (
    I18nError,
    MalformedResourceError,
    MissingTermKeyError,
    NoLanguageConfiguredError,
    ResourceLoadError,
    TermNotFoundError,
)
from .filters import make_i18n_filter
from .formatting import substitute_placeholders
from .loaders import FileResourceLoader, HttpResourceLoader, MappingResourceLoader, ResourceLoader
from .models import TermLookup, TermTree
from .resolver import ResolverState, TranslationResolver
from .store import ResourceStore

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("i18n-service")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    "DiagnosticsSink",
    "FileResourceLoader",
    "HttpResourceLoader",
    "I18nError",
    "I18nSettings",
    "LoggingDiagnostics",
    "MalformedResourceError",
    "MappingResourceLoader",
    "MissingTermKeyError",
    "NoLanguageConfiguredError",
    "ResolverState",
    "ResourceLoadError",
    "ResourceLoader",
    "ResourceStore",
    "TermLookup",
    "TermNotFoundError",
    "TermTree",
    "TranslationResolver",
    "configure_logging",
    "create_resolver",
    "load_settings",
    "make_i18n_filter",
    "substitute_placeholders",
]
