# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TagTree - Markup trees with fluent builders and canonical rendering.

A small library for assembling trees of named, attributed nodes and
rendering them to deterministic indented text.
"""

import logging

__version__ = "0.1.0"

from .builder import TagBuilder
from .builders import CodeBuilder, Direction, HtmlTags, TagKit, element, html_tags
from .config import DEFAULT_INDENT_WIDTH, RenderConfig
from .exceptions import InvalidArgumentError, InvalidDocumentError, TagTreeError
from .loading import load_file, node_from_dict
from .node import TagNode
from .specification import (
    And,
    Leaf,
    Or,
    all_of,
    any_of,
    field_equals,
    filter_items,
    is_satisfied,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "TagNode",
    "TagBuilder",
    # Configuration
    "RenderConfig",
    "DEFAULT_INDENT_WIDTH",
    # Tag kits
    "TagKit",
    "HtmlTags",
    "html_tags",
    "Direction",
    "element",
    "CodeBuilder",
    # Loading
    "node_from_dict",
    "load_file",
    # Specifications
    "Leaf",
    "And",
    "Or",
    "is_satisfied",
    "field_equals",
    "all_of",
    "any_of",
    "filter_items",
    # Exceptions
    "TagTreeError",
    "InvalidArgumentError",
    "InvalidDocumentError",
]
