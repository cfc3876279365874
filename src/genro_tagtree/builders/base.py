# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagKit - Base class for collections of tag factories."""

from __future__ import annotations

from abc import ABC
from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Iterable

if TYPE_CHECKING:
    from ..node import TagNode


def attr_pairs(attr: dict[str, Any]) -> list[tuple[str, Any]]:
    """Turn keyword attributes into ordered (key, value) pairs.

    A single trailing underscore is stripped so Python keywords can be
    used: class_='box' becomes ('class', 'box').
    """
    pairs = []
    for key, value in attr.items():
        if key.endswith('_') and len(key) > 1:
            key = key[:-1]
        pairs.append((key, value))
    return pairs


class TagKit(ABC):
    """Abstract base class for tag kits.

    A tag kit provides factory methods producing pre-populated TagNodes
    for common markup kinds. Use the @element decorator to register them:

    1. Single tag (method name used):
        @element()
        def caption(self, tag, text=''):
            return TagNode(tag, text)

    2. Multiple tags pointing to same method:
        @element(tags='h1, h2, h3')
        def heading(self, tag, text=''):
            return TagNode(tag, text)

    The class automatically builds a _element_tags dict mapping
    tag names to methods via __init_subclass__.

    Usage::

        kit = MyKit()
        kit.h2('Subtitle')          # calls heading() with tag='h2'
        kit.make('h1', 'Title')     # same, by name
    """

    # Class-level dict mapping tag -> method name
    _element_tags: dict[str, str] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build the _element_tags dict from @element decorated methods."""
        super().__init_subclass__(**kwargs)

        # Start with parent's tags if any
        cls._element_tags = {}
        for base in cls.__mro__[1:]:
            if hasattr(base, '_element_tags'):
                cls._element_tags.update(base._element_tags)
                break

        # Scan class methods for @element decorated ones
        for name, method in cls.__dict__.items():
            if name.startswith('_'):
                continue
            if not callable(method) or not getattr(method, '_is_element', False):
                continue

            element_tags = method._element_tags
            if element_tags is None:
                # No explicit tags, use method name
                cls._element_tags[name] = name
            else:
                for tag in element_tags:
                    cls._element_tags[tag] = name

    def __getattr__(self, name: str) -> Callable[..., TagNode]:
        """Look up tag in _element_tags and return a factory bound to it."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        if name in type(self)._element_tags:
            return partial(self.make, name)

        raise AttributeError(
            f"'{type(self).__name__}' has no element '{name}'"
        )

    @property
    def tags(self) -> frozenset[str]:
        """All tag names this kit can build."""
        return frozenset(type(self)._element_tags)

    def has_element(self, tag: str) -> bool:
        """True if the kit has a factory for tag."""
        return tag in type(self)._element_tags

    def make(self, tag: str, *args: Any, **attr: Any) -> TagNode:
        """Build a node for tag with its registered factory.

        Raises:
            AttributeError: If the kit has no factory for tag.
        """
        method_name = type(self)._element_tags.get(tag)
        if method_name is None:
            raise AttributeError(
                f"'{type(self).__name__}' has no element '{tag}'"
            )
        return getattr(self, method_name)(tag, *args, **attr)

    @staticmethod
    def node(
        tag: str,
        text: str = '',
        children: Iterable[TagNode] | None = None,
        attr: dict[str, Any] | None = None,
    ) -> TagNode:
        """Create a TagNode with keyword attributes converted by attr_pairs()."""
        from ..node import TagNode

        return TagNode(tag, text, children=children, attributes=attr_pairs(attr or {}))
