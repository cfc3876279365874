# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlTags - factories for common HTML elements.

Instead of one class per element, a single kit maps tag names to a
handful of factory methods that pre-populate name, text and attributes.

Example:
    Creating a page::

        from genro_tagtree.builders import html_tags as t

        page = t.html(
            t.head(t.title('My Page')),
            t.body(
                t.h1('My Title'),
                t.h2('My Subtitle'),
                t.p('Some text'),
                t.img('link/to/an/image.jpg'),
                t.blockquote('This is my image', 'This is my source'),
            ),
        )
        print(page.render())

References:
    - WHATWG HTML Standard: https://html.spec.whatwg.org/
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidArgumentError
from .base import TagKit
from .decorators import element

if TYPE_CHECKING:
    from ..node import TagNode


class Direction(str, Enum):
    """Text direction for <bdo>."""

    LTR = 'ltr'
    RTL = 'rtl'


class HtmlTags(TagKit):
    """Tag kit for HTML elements.

    Usage::

        t = HtmlTags()
        t.ul(t.li('hello'), t.li('world'))
        t.img('x.jpg', alt='x')
        t.div(t.p('Hi'), class_='box')

    Keyword attributes are rendered in call order; a trailing underscore
    is dropped (class_ -> class).
    """

    @element(tags=(
        'h1, h2, h3, h4, h5, h6, p, title, li, span, em, strong, bdi, '
        'cite, code, pre, label, option, td, th, caption, button'
    ))
    def text_element(self, tag: str, text: str = '', **attr: Any) -> TagNode:
        """Element holding a line of text."""
        return self.node(tag, text, attr=attr)

    @element(tags=(
        'head, body, div, section, article, header, footer, nav, main, '
        'ul, ol, table, tr, form'
    ))
    def container(self, tag: str, *children: TagNode, **attr: Any) -> TagNode:
        """Element wrapping the given children."""
        return self.node(tag, children=children, attr=attr)

    @element(tags='html')
    def document(self, tag: str, *children: TagNode, **attr: Any) -> TagNode:
        """The <html> root.

        Without attributes it gets lang="en"; any given attributes replace
        that default entirely.
        """
        if not attr:
            attr = {'lang': 'en'}
        return self.node(tag, children=children, attr=attr)

    @element(tags='br, hr, meta, link, input')
    def void(self, tag: str, **attr: Any) -> TagNode:
        """Element without content, rendered self-closing."""
        return self.node(tag, attr=attr)

    @element(tags='img')
    def image(self, tag: str, src: str, **attr: Any) -> TagNode:
        return self.node(tag, attr={'src': src, **attr})

    @element(tags='a')
    def anchor(self, tag: str, text: str, href: str, **attr: Any) -> TagNode:
        return self.node(tag, text, attr={'href': href, **attr})

    @element(tags='abbr')
    def abbreviation(self, tag: str, acronym: str, definition: str) -> TagNode:
        """Abbreviation: the acronym is the text, the definition its title."""
        return self.node(tag, acronym, attr={'title': definition})

    @element(tags='bdo')
    def direction_override(
        self, tag: str, direction: Direction | str, text: str
    ) -> TagNode:
        """Text rendered in a forced direction.

        Raises:
            InvalidArgumentError: If direction is not 'ltr' or 'rtl'.
        """
        try:
            direction = Direction(direction)
        except ValueError:
            raise InvalidArgumentError(
                f"direction must be 'ltr' or 'rtl', got {direction!r}"
            ) from None
        return self.node(tag, text, attr={'dir': direction.value})

    @element(tags='blockquote')
    def quotation(
        self, tag: str, text: str, source: str | None = None, **attr: Any
    ) -> TagNode:
        """Quoted text; source, when given, becomes the cite attribute."""
        if source is not None:
            attr = {'cite': source, **attr}
        return self.node(tag, text, attr=attr)


# Shared instance for module-level use: ``from ... import html_tags as t``
html_tags = HtmlTags()
