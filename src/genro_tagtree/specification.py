# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Specification combinators for filtering collections.

A specification is a small expression tree:

- Leaf(predicate): tests one item
- And(left, right): both sides must hold (right is skipped if left fails)
- Or(left, right): either side must hold (right is skipped if left holds)

A single evaluator, is_satisfied(), walks the tree. New criteria
are added by writing new leaves, never by editing the filter.

Example::

    green = field_equals('color', 'green')
    large = field_equals('size', 'large')
    names = [p.name for p in filter_items(products, And(green, large))]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Iterable, Union

from .exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Leaf:
    """A single test on an item."""

    predicate: Callable[[Any], bool]
    description: str = ''


@dataclass(frozen=True)
class And:
    """Satisfied when both left and right are."""

    left: Specification
    right: Specification


@dataclass(frozen=True)
class Or:
    """Satisfied when left or right is."""

    left: Specification
    right: Specification


Specification = Union[Leaf, And, Or]


def is_satisfied(spec: Specification, item: Any) -> bool:
    """Evaluate spec against item, left to right with short-circuit.

    Raises:
        InvalidArgumentError: If spec (or a nested part) is not a Leaf, And or Or.
    """
    if isinstance(spec, Leaf):
        return bool(spec.predicate(item))
    if isinstance(spec, And):
        return is_satisfied(spec.left, item) and is_satisfied(spec.right, item)
    if isinstance(spec, Or):
        return is_satisfied(spec.left, item) or is_satisfied(spec.right, item)
    raise InvalidArgumentError(
        f"Not a specification: {type(spec).__name__}"
    )


def field_equals(field: str, value: Any) -> Leaf:
    """Leaf testing item.field == value (item[field] for mappings)."""

    def predicate(item: Any) -> bool:
        if isinstance(item, Mapping):
            return item.get(field) == value
        return getattr(item, field, None) == value

    return Leaf(predicate, f"{field} == {value!r}")


def all_of(*specs: Specification) -> Specification:
    """Combine specs with And, folding from the left."""
    if not specs:
        raise InvalidArgumentError("all_of() needs at least one specification")
    return reduce(And, specs)


def any_of(*specs: Specification) -> Specification:
    """Combine specs with Or, folding from the left."""
    if not specs:
        raise InvalidArgumentError("any_of() needs at least one specification")
    return reduce(Or, specs)


def filter_items(items: Iterable[Any], spec: Specification) -> list[Any]:
    """Return the items satisfying spec, keeping their order."""
    return [item for item in items if is_satisfied(spec, item)]
