# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Decorator registering tag kit factory methods."""

from __future__ import annotations

import re
from functools import wraps
from typing import Any, Callable

# Tag names in a tags= spec: letters, digits, '_', '-', ':'
_TAG_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_:\-]*$')


def _parse_tags(tags: str | tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Parse a tags specification into a tuple of tag names.

    Args:
        tags: Comma-separated string ('h1, h2') or a sequence of names.

    Returns:
        Tuple of tag names, in the given order, without duplicates.

    Raises:
        ValueError: If a name is empty or malformed.

    Examples:
        >>> _parse_tags('h1, h2')
        ('h1', 'h2')
        >>> _parse_tags(('br',))
        ('br',)
    """
    if isinstance(tags, str):
        items = tags.split(',')
    else:
        items = list(tags)

    parsed: list[str] = []
    for item in items:
        tag = item.strip()
        if not _TAG_PATTERN.match(tag):
            raise ValueError(f"Invalid tag name in element spec: '{item}'")
        if tag not in parsed:
            parsed.append(tag)
    return tuple(parsed)


def element(tags: str | tuple[str, ...] | list[str] | None = None) -> Callable:
    """Decorator marking a TagKit method as the factory for one or more tags.

    The decorated method receives the tag name as its first argument after
    self, followed by the caller's arguments, and returns a TagNode.

    Args:
        tags: Tag names served by the method, comma-separated or as a
            sequence. If None, the method name is the tag.

    Example::

        class MyKit(TagKit):
            @element(tags='h1, h2, h3')
            def heading(self, tag, text):
                return TagNode(tag, text)

            @element(tags='br, hr')
            def void(self, tag, **attr):
                return TagNode(tag, attributes=attr.items())
    """
    parsed = _parse_tags(tags) if tags is not None else None

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return func(*args, **kwargs)

        # _element_tags: tuple of tag names, or None to use the method name
        wrapper._element_tags = parsed
        wrapper._is_element = True

        return wrapper

    return decorator
