# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Rendering configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidArgumentError

#: Spaces per nesting level used when no width is given.
DEFAULT_INDENT_WIDTH = 2


def check_non_negative(value: int, what: str) -> int:
    """Return value if it is a non-negative int, else raise InvalidArgumentError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{what} must be an int, not {type(value).__name__}"
        )
    if value < 0:
        raise InvalidArgumentError(f"{what} must be >= 0, got {value}")
    return value


@dataclass(frozen=True)
class RenderConfig:
    """Options for the canonical renderer.

    Attributes:
        indent_width: Number of spaces added per nesting level.
    """

    indent_width: int = DEFAULT_INDENT_WIDTH

    def __post_init__(self) -> None:
        check_non_negative(self.indent_width, "indent_width")


def resolve_indent_width(
    indent_width: int | None, config: RenderConfig | None
) -> int:
    """Pick the indent width from an explicit value, a config, or the default.

    An explicit indent_width wins over config.
    """
    if indent_width is not None:
        return check_non_negative(indent_width, "indent_width")
    if config is not None:
        return config.indent_width
    return DEFAULT_INDENT_WIDTH
