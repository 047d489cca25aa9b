"""
In-memory cache of loaded term trees, keyed by language code.

The store fetches resource files through an injected loader, validates them
into :class:`TermTree` objects and keeps them until they are evicted. Loads
are scheduled as asyncio tasks so that completion is always delivered after
the requesting call has returned.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Callable

from pydantic import ValidationError

from .diagnostics import DiagnosticsSink, LoggingDiagnostics
from .errors import MalformedResourceError, ResourceLoadError
from .loaders import ResourceLoader
from .models import TermTree

logger = logging.getLogger("i18n-service")

OnLoaded = Callable[[], None]


class ResourceStore:
    """Language code to TermTree cache backed by a resource loader.

    Resource addresses are built as ``<base_path>resources.<language>.json``.
    ``base_path`` is a plain attribute so the host can point the store at a
    different location before the first load.

    Usage:
        store = ResourceStore(FileResourceLoader(), base_path="i18n/")
        loaded = await store.load("en-us")
        store.get("en-us").lookup("user.name")
    """

    RESOURCE_PREFIX = "resources."
    RESOURCE_SUFFIX = ".json"

    def __init__(
        self,
        loader: ResourceLoader,
        diagnostics: DiagnosticsSink | None = None,
        base_path: str = "",
    ) -> None:
        """Initialize an empty store.

        Args:
            loader: Transport used to read resource files.
            diagnostics: Sink for load failures. Defaults to logging.
            base_path: Prefix prepended to every resource address.
        """
        self.loader = loader
        self.diagnostics = diagnostics or LoggingDiagnostics()
        self.base_path = base_path
        self._resources: dict[str, TermTree] = {}
        self._pending: set[asyncio.Task[bool]] = set()

    def resource_address(self, language: str) -> str:
        return f"{self.base_path}{self.RESOURCE_PREFIX}{language}{self.RESOURCE_SUFFIX}"

    def load(self, language: str, on_loaded: OnLoaded | None = None) -> asyncio.Task[bool]:
        """Schedule loading of a language's resource file.

        Must be called with a running event loop. The returned task resolves
        to True once the tree is stored and ``on_loaded`` has run, or to
        False when the resource could not be loaded; in that case nothing is
        stored, ``on_loaded`` is not invoked and an error naming the
        resource address is reported. A cached language is fetched again and
        replaced when the new content arrives.

        Args:
            language: Language code to load.
            on_loaded: Optional callback invoked once after a successful load.

        Returns:
            The task performing the load.
        """
        task = asyncio.get_running_loop().create_task(self._load(language, on_loaded))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _load(self, language: str, on_loaded: OnLoaded | None) -> bool:
        address = self.resource_address(language)
        try:
            tree = await self._fetch(address)
        except ResourceLoadError as e:
            self.diagnostics.error(str(e))
            return False

        self._resources[language] = tree
        logger.debug(f"Loaded {sum(1 for _ in tree.keys())} terms for language '{language}' from {address}")

        if on_loaded is not None:
            on_loaded()
        return True

    async def _fetch(self, address: str) -> TermTree:
        content = await self.loader.read_resource(address)
        try:
            return TermTree.from_data(json.loads(content))
        except json.JSONDecodeError as e:
            raise MalformedResourceError(address, f"invalid JSON ({e})") from None
        except ValidationError as e:
            raise MalformedResourceError(
                address, f"expected nested object of strings ({e.error_count()} errors)"
            ) from None
        except RecursionError:
            raise MalformedResourceError(address, "content is nested too deeply") from None

    def has(self, language: str) -> bool:
        return language in self._resources

    def get(self, language: str) -> TermTree | None:
        return self._resources.get(language)

    def evict(self, language: str) -> None:
        """Drop the cached tree for a language. No-op if it is not cached."""
        if self._resources.pop(language, None) is not None:
            logger.debug(f"Evicted resources for language '{language}'")

    @property
    def languages(self) -> list[str]:
        """Language codes currently cached."""
        return list(self._resources)

    async def aclose(self) -> None:
        """Close the loader if it holds resources such as an HTTP client."""
        aclose = getattr(self.loader, "aclose", None)
        if aclose is not None:
            await aclose()

    async def wait_idle(self) -> None:
        """Wait until every load scheduled so far has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def __contains__(self, language: object) -> bool:
        return language in self._resources

    def __len__(self) -> int:
        return len(self._resources)
