"""
Positional placeholder substitution for resolved terms.
"""

from __future__ import annotations

from typing import Any, Sequence


def substitute_placeholders(text: str, args: Sequence[Any]) -> str:
    """Replace ``{0}``, ``{1}``, ... with the matching positional argument.

    Arguments are consumed in order starting at index 0 and only the first
    occurrence of each token is replaced. Surplus arguments are ignored and
    placeholders without an argument are left untouched. There is no
    escaping for literal ``{N}`` text.

    Args:
        text: Resolved term text.
        args: Values to insert, stringified with ``str()``.

    Returns:
        The text with placeholders replaced.

    Example:
        >>> substitute_placeholders("Hi {0}, meet {1}", ["Ann", "Bob"])
        'Hi Ann, meet Bob'
    """
    for index, value in enumerate(args):
        text = text.replace(f"{{{index}}}", str(value), 1)
    return text
