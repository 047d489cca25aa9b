"""
Resource loaders that fetch the raw content of language resource files.

A loader only knows how to turn a resource address into text. Parsing,
caching and reporting failures belong to :class:`ResourceStore`.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Protocol

import httpx

from .errors import ResourceLoadError

logger = logging.getLogger("i18n-service")


class ResourceLoader(Protocol):
    """Protocol for resource transports, enabling easy mocking in tests."""

    async def read_resource(self, address: str) -> str:
        """Read the content stored at ``address``.

        Args:
            address: Resource address, e.g. ``"i18n/resources.en-us.json"``.

        Returns:
            The raw text content.

        Raises:
            ResourceLoadError: If the resource is missing or unreadable.
        """
        ...


class FileResourceLoader:
    """Reads resource files from the local file system.

    Addresses are treated as file paths, resolved against ``root`` when one
    is given. Reads run in a worker thread so the event loop never blocks.
    """

    def __init__(self, root: Path | str | None = None, encoding: str = "utf-8") -> None:
        self.root = Path(root) if root is not None else None
        self.encoding = encoding

    def _path_for(self, address: str) -> Path:
        path = Path(address)
        if self.root is not None and not path.is_absolute():
            path = self.root / path
        return path

    async def read_resource(self, address: str) -> str:
        path = self._path_for(address)
        logger.debug(f"Reading resource file {path}")
        try:
            return await asyncio.to_thread(path.read_text, encoding=self.encoding)
        except FileNotFoundError:
            raise ResourceLoadError(address) from None
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceLoadError(address, f"Failed to read file [{address}]: {e}") from None


class HttpResourceLoader:
    """Fetches resource files over HTTP(S) with httpx.

    When no client is supplied the loader creates one and closes it in
    :meth:`aclose`; an injected client stays owned by the caller.

    Usage:
        async with HttpResourceLoader() as loader:
            text = await loader.read_resource("https://cdn.example.com/resources.en-us.json")
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 10.0) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self.timeout = timeout

    async def read_resource(self, address: str) -> str:
        logger.debug(f"Fetching resource {address}")
        try:
            response = await self._client.get(address, timeout=self.timeout)
            if response.status_code == 404:
                raise ResourceLoadError(address)
            response.raise_for_status()
        except httpx.TimeoutException:
            raise ResourceLoadError(
                address, f"Timed out fetching [{address}] after {self.timeout}s"
            ) from None
        except httpx.HTTPStatusError as e:
            raise ResourceLoadError(
                address,
                f"Fetching [{address}] returned HTTP {e.response.status_code}: {e.response.reason_phrase}",
            ) from None
        except httpx.RequestError as e:
            raise ResourceLoadError(address, f"Failed to connect for [{address}]: {e}") from None

        return response.text

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpResourceLoader:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


class MappingResourceLoader:
    """Serves resources from an in-memory mapping of address to content.

    Suitable for bundled assets and tests. Values may be raw JSON text or
    already-parsed mappings, which are serialized back to JSON on read.
    """

    def __init__(self, resources: Mapping[str, str | Mapping[str, Any]] | None = None) -> None:
        self.resources: dict[str, str | Mapping[str, Any]] = dict(resources or {})
        self.requests: list[str] = []

    async def read_resource(self, address: str) -> str:
        self.requests.append(address)
        await asyncio.sleep(0)
        if address not in self.resources:
            raise ResourceLoadError(address)
        content = self.resources[address]
        if isinstance(content, str):
            return content
        return json.dumps(content)
