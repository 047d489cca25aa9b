"""
Term resolution against a default and a selected language.

The resolver owns the session's language state and asks the
:class:`ResourceStore` to load or evict term tables as that state changes.
Lookups never raise: a missing key, an unconfigured language or a term that
is absent from every language tried is reported through the diagnostics
sink and resolves to None, so a host renders missing text instead of
failing.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any

from .diagnostics import DiagnosticsSink
from .errors import MissingTermKeyError, NoLanguageConfiguredError, TermNotFoundError
from .formatting import substitute_placeholders
from .store import OnLoaded, ResourceStore

logger = logging.getLogger("i18n-service")


class ResolverState(str, Enum):
    """Language configuration state of a resolver."""
    UNCONFIGURED = "unconfigured"
    DEFAULT_ONLY = "default_only"
    DIVERGED = "diverged"


class TranslationResolver:
    """Resolves dotted term keys into strings for the active language.

    The default language is the fallback for every lookup. The selected
    language is the working language and starts out equal to the default;
    selecting another language loads its resources and releases those of
    the previously selected one when it is no longer referenced.

    Example:
        >>> resolver = TranslationResolver(ResourceStore(FileResourceLoader(), base_path="i18n/"))
        >>> await resolver.set_default_language("en-us")
        >>> resolver.get_term("user.name")
        'Name'
        >>> await resolver.set_selected_language("fr-fr")
        >>> resolver.get_term("greeting", None, "Ann")
        'Bonjour Ann'
    """

    def __init__(self, store: ResourceStore, diagnostics: DiagnosticsSink | None = None) -> None:
        """Initialize an unconfigured resolver.

        Args:
            store: Cache of loaded term trees.
            diagnostics: Sink for lookup problems. Defaults to the store's sink.
        """
        self.store = store
        self.diagnostics = diagnostics or store.diagnostics
        self._default_language: str | None = None
        self._selected_language: str | None = None

    # ------------------------------------------------------------------
    # Language state
    # ------------------------------------------------------------------

    @property
    def default_language(self) -> str | None:
        return self._default_language

    @property
    def selected_language(self) -> str | None:
        return self._selected_language

    def get_default_language(self) -> str | None:
        return self._default_language

    def get_selected_language(self) -> str | None:
        return self._selected_language

    @property
    def state(self) -> ResolverState:
        if self._default_language is None:
            return ResolverState.UNCONFIGURED
        if self._selected_language == self._default_language:
            return ResolverState.DEFAULT_ONLY
        return ResolverState.DIVERGED

    def set_default_language(self, language: str, on_ready: OnLoaded | None = None) -> asyncio.Task[bool]:
        """Define the fallback language and make it the selected one.

        Both languages are reassigned immediately, even when a default was
        already set; the resource file is then loaded in the background.
        Resources of the previous default and selected languages stay cached.

        Args:
            language: Language code, e.g. ``"en-us"``.
            on_ready: Optional callback invoked once the resources are loaded.

        Returns:
            Task resolving to True when the resources were loaded.
        """
        self._default_language = language
        self._selected_language = language
        logger.debug(f"Default language set to '{language}'")
        return self.store.load(language, on_ready)

    def set_selected_language(self, language: str, on_ready: OnLoaded | None = None) -> asyncio.Task[bool]:
        """Switch the working language.

        A previously selected language that is neither the default nor the
        new target is evicted first. Selecting the default or the language
        already selected changes nothing and loads nothing; ``on_ready`` still
        runs, on a later loop iteration.

        Args:
            language: Language code to select.
            on_ready: Optional callback invoked once the language is usable.

        Returns:
            Task resolving to True when the language is ready.
        """
        previous = self._selected_language

        if (
            self._default_language is not None
            and previous != self._default_language
            and previous != language
            and language != self._default_language
        ):
            self.store.evict(previous)

        if language != self._default_language and language != previous:
            self._selected_language = language
            logger.debug(f"Selected language changed from '{previous}' to '{language}'")
            return self.store.load(language, on_ready)

        return asyncio.get_running_loop().create_task(self._notify_ready(on_ready))

    @staticmethod
    async def _notify_ready(on_ready: OnLoaded | None) -> bool:
        if on_ready is not None:
            on_ready()
        return True

    async def aclose(self) -> None:
        """Release the store's loader, e.g. the HTTP client of a remote loader."""
        await self.store.aclose()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_term(self, key: str | None, language: str | None = None, *args: Any) -> str | None:
        """Resolve a term key, degrading to None on any failure.

        Args:
            key: Dotted term key, e.g. ``"user.name"``.
            language: Language for this call only; defaults to the selected
                language.
            *args: Values for the ``{0}``, ``{1}``, ... placeholders.

        Returns:
            The translated, substituted text, or None when unresolved.
        """
        try:
            return self.require_term(key, language, *args)
        except MissingTermKeyError as e:
            self.diagnostics.warn(str(e))
        except NoLanguageConfiguredError as e:
            self.diagnostics.error(str(e))
        except TermNotFoundError as e:
            self.diagnostics.warn(str(e))
        return None

    def require_term(self, key: str | None, language: str | None = None, *args: Any) -> str:
        """Resolve a term key, raising instead of degrading.

        Falls back to the default language on a miss. A miss in a per-call
        language that is neither selected nor default is reported as a
        warning before the fallback is tried.

        Raises:
            MissingTermKeyError: If ``key`` is empty or None.
            NoLanguageConfiguredError: If no language is selected or given.
            TermNotFoundError: If the default language lacks the term too.
        """
        if not key:
            raise MissingTermKeyError()

        language = language or self._selected_language
        if not language:
            raise NoLanguageConfiguredError()

        text = self._lookup(language, key)
        if text is None:
            if language != self._selected_language and language != self._default_language:
                self.diagnostics.warn(str(TermNotFoundError(language, key)))

            text = self._lookup(self._default_language, key)
            if text is None:
                raise TermNotFoundError(self._default_language, key)

        if args:
            text = substitute_placeholders(text, args)
        return text

    def _lookup(self, language: str | None, key: str) -> str | None:
        tree = self.store.get(language) if language is not None else None
        if tree is None:
            return None
        return tree.lookup(key).value
