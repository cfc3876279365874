# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builders for TagTree - tag kit base class and domain-specific implementations."""

from .base import TagKit, attr_pairs
from .code import CodeBuilder
from .decorators import element
from .html import Direction, HtmlTags, html_tags

__all__ = [
    'TagKit',
    'attr_pairs',
    'element',
    'CodeBuilder',
    'Direction',
    'HtmlTags',
    'html_tags',
]
