# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagBuilder - Fluent builder for TagNode trees."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable

from .config import RenderConfig, resolve_indent_width
from .exceptions import InvalidArgumentError
from .node import Attribute, TagNode
from .render import render_node

if TYPE_CHECKING:
    from .builders.base import TagKit

logger = logging.getLogger(__name__)


class TagBuilder:
    """Builder pattern for a TagNode tree with chainable appends.

    Every mutating method returns the builder, and build() hands out a
    detached copy so a snapshot never changes after it was taken.

    Can be used in two ways:

    1. Plain appends:

        >>> html = TagBuilder('ul').append_leaf('li', 'hello').append_leaf('li', 'world')
        >>> print(html.render(), end='')
        <ul>
          <li>
            hello
          </li>
          <li>
            world
          </li>
        </ul>

    2. With a tag kit for dynamic tag methods::

        from genro_tagtree.builders import HtmlTags

        page = TagBuilder('body', kit=HtmlTags())
        page.h1('My Title').p('Some text').img('link/to/image.jpg')
        node = page.build()
    """

    __slots__ = ('_root', '_kit')

    def __init__(self, root_name: str, kit: TagKit | None = None) -> None:
        """Initialize a TagBuilder.

        Args:
            root_name: Name of the root node.
            kit: Optional TagKit providing tag methods (builder.li(...) etc.).

        Raises:
            InvalidArgumentError: If root_name is not a valid tag name.
        """
        self._root = TagNode(root_name)
        self._kit = kit

    def __repr__(self) -> str:
        return f"TagBuilder({self._root.name!r}, children={len(self._root.children)})"

    def __str__(self) -> str:
        return self.render()

    @property
    def root(self) -> TagNode:
        """The node being assembled (not a copy)."""
        return self._root

    @property
    def kit(self) -> TagKit | None:
        """The tag kit used for dynamic tag methods, if any."""
        return self._kit

    def __getattr__(self, name: str) -> Any:
        """Dynamic tag method access via the kit.

        If a kit is set and provides the tag, returns a callable that builds
        the node through the kit and appends it. Real methods on TagBuilder
        take precedence; for clashing names use builder.kit.make(tag, ...)
        with append_node().
        """
        if not name.startswith('_'):
            kit = self._kit
            if kit is not None and kit.has_element(name):
                return self._make_tag_method(name)

        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )

    def _make_tag_method(self, tag: str) -> Callable[..., TagBuilder]:
        """Create a method appending a kit-built node for tag."""

        def tag_method(*args: Any, **attr: Any) -> TagBuilder:
            return self.append_node(self._kit.make(tag, *args, **attr))

        tag_method.__name__ = tag
        return tag_method

    def append_leaf(
        self,
        name: str,
        text: str = '',
        attributes: Iterable[Attribute] | None = None,
    ) -> TagBuilder:
        """Append a new leaf node to the root.

        Args:
            name: Name of the new node.
            text: Its text payload.
            attributes: Optional (key, value) pairs, kept in order.

        Returns:
            The builder, for chaining.
        """
        return self.append_node(TagNode(name, text, attributes=attributes))

    def append_node(self, subtree: TagNode | TagBuilder) -> TagBuilder:
        """Append a prebuilt subtree to the root.

        A TagNode is moved under the root (detached from any previous
        parent). A TagBuilder is built first, so the passed builder and
        this one stay independent.

        Returns:
            The builder, for chaining.

        Raises:
            InvalidArgumentError: If subtree is neither a TagNode nor a
                TagBuilder, or contains the root.
        """
        if isinstance(subtree, TagBuilder):
            subtree = subtree.build()
        elif not isinstance(subtree, TagNode):
            raise InvalidArgumentError(
                f"subtree must be a TagNode or TagBuilder, not {type(subtree).__name__}"
            )
        self._root.add_child(subtree)
        return self

    def add_attribute(self, key: str, value: Any) -> TagBuilder:
        """Append an attribute to the root node.

        Returns:
            The builder, for chaining.
        """
        self._root.add_attribute(key, value)
        return self

    def build(self) -> TagNode:
        """Return a detached copy of the accumulated tree.

        The builder stays usable; later appends do not affect the copy.
        """
        snapshot = self._root.copy()
        logger.debug(
            "Built <%s> snapshot with %d children", snapshot.name, len(snapshot.children)
        )
        return snapshot

    def render(
        self, indent_width: int | None = None, config: RenderConfig | None = None
    ) -> str:
        """Render the accumulated tree; same text as build().render(0)."""
        return render_node(self._root, 0, resolve_indent_width(indent_width, config))
