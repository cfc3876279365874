# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Building markup three ways: fluent builder, tag kit, and class declaration.

Usage:
    python examples/html_page/page.py
"""

from __future__ import annotations

from genro_tagtree import CodeBuilder, Direction, HtmlTags, TagBuilder
from genro_tagtree.builders import html_tags as t


def list_with_builder() -> str:
    """The classic fluent example: a list of two items."""
    return TagBuilder('ul').append_leaf('li', 'hello').append_leaf('li', 'world').render()


def page_with_kit() -> str:
    """A nested page assembled from tag kit factories."""
    page = t.html(
        t.head(t.title('My Page')),
        t.body(
            t.h1('My Title'),
            t.h2('My Subtitle'),
            t.p('Some text'),
            t.img('link/to/an/image.jpg'),
            t.blockquote('This is my image', 'This is my source'),
            t.p(t.abbr('WHO', 'World Health Organization').text),
            t.bdo(Direction.RTL, 'This text will go right-to-left.'),
        ),
    )
    return page.render()


def menu_with_builder_and_kit() -> str:
    """A builder whose tag methods come from a kit."""
    menu = TagBuilder('nav', kit=HtmlTags()).add_attribute('class', 'main')
    menu.a('Home', '/').a('About', '/about').hr()
    return menu.render(indent_width=4)


def person_class() -> str:
    return str(CodeBuilder('Person').add_field('name', 'string').add_field('age', 'int'))


if __name__ == '__main__':
    for section in (list_with_builder, page_with_kit, menu_with_builder_and_kit):
        print(f"== {section.__name__}")
        print(section(), end='')
    print("== person_class")
    print(person_class())
