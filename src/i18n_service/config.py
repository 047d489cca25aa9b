"""
Configuration for the translation service.

Settings are read from environment variables, optionally seeded from a
``.env`` file:

    I18N_BASE_PATH          prefix for resource addresses (path or URL)
    I18N_DEFAULT_LANGUAGE   language to load at startup
    I18N_LOG_LEVEL          logging level for configure_logging()
    I18N_HTTP_TIMEOUT       seconds before an HTTP resource fetch times out
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .diagnostics import DiagnosticsSink
from .loaders import FileResourceLoader, HttpResourceLoader, ResourceLoader
from .resolver import TranslationResolver
from .store import ResourceStore

logger = logging.getLogger("i18n-service")


class I18nSettings(BaseModel):
    """Settings for building a translation resolver."""

    base_path: str = Field(
        default="",
        description="Prefix prepended to 'resources.<language>.json'",
    )
    default_language: str | None = Field(
        default=None,
        description="Language loaded as default at startup, if any",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name",
    )
    http_timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Timeout in seconds for HTTP resource fetches",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("default_language", mode="before")
    @classmethod
    def empty_language_is_none(cls, v: str | None) -> str | None:
        return v or None

    @property
    def is_remote(self) -> bool:
        return self.base_path.startswith(("http://", "https://"))


def load_settings(env_file: Path | str | None = None) -> I18nSettings:
    """Load settings from the environment.

    Args:
        env_file: Optional ``.env`` file; values already set in the
            environment take precedence.

    Returns:
        Validated settings.
    """
    if not load_dotenv(env_file):
        logger.debug(".env file not found, using process environment only")

    values: dict[str, str] = {}
    for field_name, env_name in (
        ("base_path", "I18N_BASE_PATH"),
        ("default_language", "I18N_DEFAULT_LANGUAGE"),
        ("log_level", "I18N_LOG_LEVEL"),
        ("http_timeout", "I18N_HTTP_TIMEOUT"),
    ):
        value = os.getenv(env_name)
        if value is not None:
            values[field_name] = value
    return I18nSettings(**values)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for hosts that have not done so."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_resolver(
    settings: I18nSettings,
    loader: ResourceLoader | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> TranslationResolver:
    """Build a store and resolver for one application session.

    When no loader is given, an HTTP loader is used for ``http(s)://`` base
    paths and a file loader otherwise. The default language is not loaded
    here; call ``set_default_language`` from within the event loop. Call
    ``await resolver.aclose()`` on shutdown to release an HTTP loader.
    """
    if loader is None:
        if settings.is_remote:
            loader = HttpResourceLoader(timeout=settings.http_timeout)
        else:
            loader = FileResourceLoader()

    store = ResourceStore(loader, diagnostics=diagnostics, base_path=settings.base_path)
    return TranslationResolver(store, diagnostics=diagnostics)
