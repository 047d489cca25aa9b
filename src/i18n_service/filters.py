"""
View-binding adapter exposing term lookup to template engines.
"""

from __future__ import annotations

from typing import Callable

from .resolver import TranslationResolver

I18nFilter = Callable[[str, str | None], str | None]


def make_i18n_filter(resolver: TranslationResolver) -> I18nFilter:
    """Build a ``(key, language=None) -> str | None`` template filter.

    Register the result with a template engine, e.g.
    ``env.filters["i18n"] = make_i18n_filter(resolver)``.
    """

    def i18n_filter(key: str, language: str | None = None) -> str | None:
        return resolver.get_term(key, language)

    return i18n_filter
