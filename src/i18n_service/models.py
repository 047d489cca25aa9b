"""
Data models for loaded term tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Union

from pydantic import ConfigDict, RootModel, StrictStr


@dataclass(frozen=True)
class TermLookup:
    """Result of descending into a term tree.

    Attributes:
        found: Whether the key addressed a string leaf.
        value: The leaf string when found, otherwise None.
    """
    found: bool
    value: str | None = None

    @classmethod
    def missing(cls) -> TermLookup:
        return cls(found=False)


class TermTree(RootModel[dict[str, Union[StrictStr, "TermTree"]]]):
    """One language's terms as a nested mapping of string leaves.

    Built from the parsed JSON object of a resource file. Values are either
    plain strings (leaves) or nested TermTree instances, so a key such as
    ``"user.name"`` addresses ``root["user"]["name"]``.

    Example:
        >>> tree = TermTree.from_data({"user": {"name": "Name"}})
        >>> tree.lookup("user.name")
        TermLookup(found=True, value='Name')
        >>> tree.lookup("user").found
        False
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_data(cls, data: Any) -> TermTree:
        """Validate parsed resource content into a tree.

        Args:
            data: Parsed JSON value.

        Returns:
            The validated TermTree.

        Raises:
            pydantic.ValidationError: If the document is not an object, or a
                leaf is anything other than a string.
        """
        return cls.model_validate(data)

    def lookup(self, key: str) -> TermLookup:
        """Resolve a dotted key to a leaf string.

        A path that is missing any segment, or that ends on a nested
        mapping rather than a leaf, is reported as not found.
        """
        node: TermTree | str = self
        for segment in key.split("."):
            if not isinstance(node, TermTree) or segment not in node.root:
                return TermLookup.missing()
            node = node.root[segment]
        if isinstance(node, str):
            return TermLookup(found=True, value=node)
        return TermLookup.missing()

    def keys(self, prefix: str = "") -> Iterator[str]:
        """Yield the dotted key of every leaf in the tree."""
        for name, child in self.root.items():
            path = f"{prefix}{name}"
            if isinstance(child, TermTree):
                yield from child.keys(f"{path}.")
            else:
                yield path


TermTree.model_rebuild()
