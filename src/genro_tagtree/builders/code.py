# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""CodeBuilder - Builder for class declarations with typed fields."""

from __future__ import annotations

from ..config import RenderConfig, resolve_indent_width
from ..exceptions import InvalidArgumentError
from ..node import validate_name


class CodeBuilder:
    """Builds the text of a class declaration field by field.

    Example:
        >>> cb = CodeBuilder('Person').add_field('name', 'string').add_field('age', 'int')
        >>> print(cb.render())
        class Person
        {
          string name;
          int age;
        };
    """

    __slots__ = ('_class_name', '_fields')

    def __init__(self, class_name: str) -> None:
        self._class_name = validate_name(class_name, 'class name')
        self._fields: list[tuple[str, str]] = []

    def __repr__(self) -> str:
        return f"CodeBuilder({self._class_name!r}, fields={len(self._fields)})"

    def __str__(self) -> str:
        return self.render()

    @property
    def class_name(self) -> str:
        return self._class_name

    @property
    def fields(self) -> tuple[tuple[str, str], ...]:
        """(name, type_name) pairs in insertion order."""
        return tuple(self._fields)

    def add_field(self, name: str, type_name: str) -> CodeBuilder:
        """Append a field declaration; returns the builder."""
        if not isinstance(type_name, str) or not type_name.strip():
            raise InvalidArgumentError(f"field type must be a non-empty string: {type_name!r}")
        self._fields.append((validate_name(name, 'field name'), type_name.strip()))
        return self

    def render(
        self, indent_width: int | None = None, config: RenderConfig | None = None
    ) -> str:
        """Render the declaration; the result has no trailing newline."""
        spaces = ' ' * resolve_indent_width(indent_width, config)
        lines = [f"class {self._class_name}", "{"]
        lines.extend(f"{spaces}{type_name} {name};" for name, type_name in self._fields)
        lines.append("};")
        return "\n".join(lines)
