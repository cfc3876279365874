# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagNode - a single element of a markup tree."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from .config import RenderConfig, check_non_negative, resolve_indent_width
from .exceptions import InvalidArgumentError
from .render import render_node

logger = logging.getLogger(__name__)

Attribute = tuple[str, Any]


def validate_name(name: Any, what: str = 'tag name') -> str:
    """Check that name is a non-empty string without whitespace.

    Raises:
        InvalidArgumentError: If name is not a usable identifier.
    """
    if not isinstance(name, str):
        raise InvalidArgumentError(
            f"{what} must be a string, not {type(name).__name__}"
        )
    if not name:
        raise InvalidArgumentError(f"{what} must not be empty")
    if any(ch.isspace() for ch in name):
        raise InvalidArgumentError(f"{what} must not contain whitespace: {name!r}")
    return name


class TagNode:
    """A node in a markup tree.

    Each node has:
    - name: The element name, e.g. 'ul' or 'img'
    - text: Optional text payload ('' when absent)
    - attributes: Ordered (key, value) pairs, duplicates allowed
    - children: Ordered child nodes, each owned by exactly this node
    - parent: The owning node, or None for a root

    A node has at most one parent. Adding a node that already belongs to
    another parent moves it there; adding a node under itself or under one
    of its descendants is rejected, so the tree is always acyclic.

    Example:
        >>> ul = TagNode('ul', children=[TagNode('li', 'hello')])
        >>> print(ul.render(), end='')
        <ul>
          <li>
            hello
          </li>
        </ul>
    """

    __slots__ = ('_name', '_text', '_attributes', '_children', '_parent')

    def __init__(
        self,
        name: str,
        text: str | None = '',
        children: Iterable[TagNode] | None = None,
        attributes: Iterable[Attribute] | None = None,
    ) -> None:
        """Initialize a TagNode.

        Args:
            name: Element name. Must be non-empty and contain no whitespace.
            text: Text payload. None is the same as ''.
            children: Nodes to attach, in order (ownership moves here).
            attributes: (key, value) pairs to append, in order.

        Raises:
            InvalidArgumentError: If name is invalid or a child is not a TagNode.
        """
        self._name = validate_name(name)
        self._text = '' if text is None else str(text)
        self._attributes: list[Attribute] = []
        self._children: list[TagNode] = []
        self._parent: TagNode | None = None

        if attributes:
            for key, value in attributes:
                self.add_attribute(key, value)
        if children:
            for child in children:
                self.add_child(child)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return (
            f"TagNode({self._name!r}, text={self._text!r}, "
            f"attributes={len(self._attributes)}, children={len(self._children)})"
        )

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagNode):
            return NotImplemented
        stack: list[tuple[TagNode, TagNode]] = [(self, other)]
        while stack:
            left, right = stack.pop()
            if (
                left._name != right._name
                or left._text != right._text
                or left._attributes != right._attributes
                or len(left._children) != len(right._children)
            ):
                return False
            stack.extend(zip(left._children, right._children))
        return True

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> TagNode:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> TagNode:
        return self.copy()

    # ==================== Properties ====================

    @property
    def name(self) -> str:
        """The element name."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if self._parent is not None:
            raise InvalidArgumentError(
                f"Cannot rename '{self._name}': node is attached to '{self._parent.name}'"
            )
        self._name = validate_name(value)

    @property
    def parent(self) -> TagNode | None:
        """The owning node, or None for a root. Changed only by add_child/remove_child."""
        return self._parent

    @property
    def text(self) -> str:
        """The text payload ('' when absent)."""
        return self._text

    @text.setter
    def text(self, value: str | None) -> None:
        self._text = '' if value is None else str(value)

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        """Attribute pairs in insertion order."""
        return tuple(self._attributes)

    @property
    def children(self) -> tuple[TagNode, ...]:
        """Child nodes in insertion order."""
        return tuple(self._children)

    @property
    def is_self_closing(self) -> bool:
        """True if the node renders as a single <name .../> line."""
        return not self._text and not self._children

    @property
    def depth(self) -> int:
        """Number of ancestors (0 for a root)."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    @property
    def root(self) -> TagNode:
        """The topmost ancestor (self for a root)."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    # ==================== Attributes ====================

    def add_attribute(self, key: str, value: Any) -> None:
        """Append an attribute pair.

        No validation and no de-duplication: a repeated key is rendered
        again, after the earlier ones.
        """
        self._attributes.append((key, value))

    def get_attr(self, key: str, default: Any = None) -> Any:
        """Return the value of the first attribute named key."""
        for attr_key, value in self._attributes:
            if attr_key == key:
                return value
        return default

    # ==================== Children ====================

    def add_child(self, child: TagNode) -> TagNode:
        """Attach child as the last child of this node.

        If child already has a parent it is detached from it first.

        Returns:
            This node, for chaining.

        Raises:
            InvalidArgumentError: If child is not a TagNode, or is this node
                or one of its ancestors.
        """
        if not isinstance(child, TagNode):
            raise InvalidArgumentError(
                f"child must be a TagNode, not {type(child).__name__}"
            )
        node: TagNode | None = self
        while node is not None:
            if node is child:
                raise InvalidArgumentError(
                    f"Cannot add '{child.name}' under '{self._name}': it would create a cycle"
                )
            node = node.parent

        if child.parent is not None:
            logger.debug(
                "Moving <%s> from <%s> to <%s>", child.name, child.parent.name, self._name
            )
            child._parent._detach(child)

        child._parent = self
        self._children.append(child)
        return self

    def remove_child(self, child: TagNode) -> TagNode:
        """Detach child from this node and return it.

        Raises:
            InvalidArgumentError: If child is not a child of this node.
        """
        if child.parent is not self:
            raise InvalidArgumentError(
                f"'{getattr(child, 'name', child)}' is not a child of '{self._name}'"
            )
        self._detach(child)
        child._parent = None
        return child

    def _detach(self, child: TagNode) -> None:
        """Remove child from the children list by identity."""
        for i, existing in enumerate(self._children):
            if existing is child:
                del self._children[i]
                return

    # ==================== Traversal ====================

    def walk(self) -> Iterator[tuple[int, TagNode]]:
        """Iterate (depth, node) pairs in pre-order, starting with (0, self)."""
        stack: list[tuple[int, TagNode]] = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            for child in reversed(node._children):
                stack.append((depth + 1, child))

    def copy(self) -> TagNode:
        """Return a detached deep copy of this subtree."""
        clone = TagNode(self._name, self._text, attributes=self._attributes)
        stack: list[tuple[TagNode, TagNode]] = [(self, clone)]
        while stack:
            source, target = stack.pop()
            for child in source._children:
                child_clone = TagNode(child._name, child._text, attributes=child._attributes)
                # fresh nodes: no previous owner, no cycle possible
                child_clone._parent = target
                target._children.append(child_clone)
                stack.append((child, child_clone))
        return clone

    def as_dict(self) -> dict[str, Any]:
        """Convert the subtree to a plain nested dict.

        Empty text, attributes and children are omitted. Attributes are a
        list of [key, value] pairs so duplicate keys survive.

        Example:
            >>> TagNode('li', 'hello').as_dict()
            {'name': 'li', 'text': 'hello'}
        """
        def node_dict(node: TagNode) -> dict[str, Any]:
            data: dict[str, Any] = {'name': node._name}
            if node._text:
                data['text'] = node._text
            if node._attributes:
                data['attributes'] = [[key, value] for key, value in node._attributes]
            return data

        result = node_dict(self)
        stack: list[tuple[TagNode, dict[str, Any]]] = [(self, result)]
        while stack:
            node, data = stack.pop()
            if node._children:
                data['children'] = [node_dict(child) for child in node._children]
                stack.extend(zip(node._children, data['children']))
        return result

    # ==================== Rendering ====================

    def render(
        self,
        indent: int = 0,
        indent_width: int | None = None,
        config: RenderConfig | None = None,
    ) -> str:
        """Render the subtree in canonical indented form.

        Args:
            indent: Nesting depth of this node in the output.
            indent_width: Spaces per level (overrides config).
            config: RenderConfig to take the indent width from.

        Returns:
            Newline-terminated text. Text and attribute values are emitted
            verbatim, without escaping.
        """
        check_non_negative(indent, "indent")
        return render_node(self, indent, resolve_indent_width(indent_width, config))
