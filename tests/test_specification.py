# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for specification combinators."""

from dataclasses import dataclass

import pytest

from genro_tagtree import (
    And,
    InvalidArgumentError,
    Leaf,
    Or,
    all_of,
    any_of,
    field_equals,
    filter_items,
    is_satisfied,
)


@dataclass
class Product:
    name: str
    color: str
    size: str


APPLE = Product('Apple', 'green', 'small')
TREE = Product('Tree', 'green', 'large')
HOUSE = Product('House', 'blue', 'large')
PRODUCTS = [APPLE, TREE, HOUSE]


class TestEvaluation:
    """Tests for is_satisfied()."""

    def test_leaf(self):
        """Test a leaf applies its predicate."""
        spec = Leaf(lambda p: p.size == 'small')
        assert is_satisfied(spec, APPLE)
        assert not is_satisfied(spec, TREE)

    def test_leaf_result_is_bool(self):
        """Test truthy predicate results are normalized."""
        assert is_satisfied(Leaf(lambda p: p.name), APPLE) is True

    def test_and(self):
        """Test And requires both sides."""
        spec = And(field_equals('color', 'green'), field_equals('size', 'large'))
        assert [p.name for p in filter_items(PRODUCTS, spec)] == ['Tree']

    def test_or(self):
        """Test Or requires either side."""
        spec = Or(field_equals('color', 'blue'), field_equals('size', 'small'))
        assert [p.name for p in filter_items(PRODUCTS, spec)] == ['Apple', 'House']

    def test_and_short_circuits(self):
        """Test the right side of And is skipped when the left fails."""
        calls = []
        right = Leaf(lambda p: calls.append(p) or True)
        assert not is_satisfied(And(Leaf(lambda p: False), right), APPLE)
        assert calls == []

    def test_or_short_circuits(self):
        """Test the right side of Or is skipped when the left holds."""
        calls = []
        right = Leaf(lambda p: calls.append(p) or True)
        assert is_satisfied(Or(Leaf(lambda p: True), right), APPLE)
        assert calls == []

    def test_left_evaluated_first(self):
        """Test evaluation order is left then right."""
        order = []
        left = Leaf(lambda p: order.append('left') or True)
        right = Leaf(lambda p: order.append('right') or True)
        is_satisfied(And(left, right), APPLE)
        assert order == ['left', 'right']

    def test_nested(self):
        """Test nested combinators."""
        spec = Or(
            And(field_equals('color', 'green'), field_equals('size', 'small')),
            field_equals('name', 'House'),
        )
        assert filter_items(PRODUCTS, spec) == [APPLE, HOUSE]

    def test_not_a_specification(self):
        """Test unknown node kinds are rejected."""
        with pytest.raises(InvalidArgumentError, match='Not a specification'):
            is_satisfied(lambda p: True, APPLE)
        with pytest.raises(InvalidArgumentError):
            is_satisfied(And(field_equals('color', 'green'), 'oops'), APPLE)


class TestHelpers:
    """Tests for field_equals, all_of, any_of, filter_items."""

    def test_field_equals_mapping(self):
        """Test field_equals works on mappings too."""
        spec = field_equals('color', 'red')
        assert is_satisfied(spec, {'color': 'red'})
        assert not is_satisfied(spec, {'size': 'red'})

    def test_field_equals_missing_attribute(self):
        """Test a missing attribute does not match."""
        assert not is_satisfied(field_equals('weight', 3), APPLE)

    def test_field_equals_description(self):
        """Test the leaf carries a readable description."""
        assert field_equals('color', 'green').description == "color == 'green'"

    def test_all_of_folds_left(self):
        """Test all_of builds nested And nodes."""
        a, b, c = (field_equals('x', i) for i in range(3))
        assert all_of(a, b, c) == And(And(a, b), c)
        assert all_of(a) is a

    def test_any_of_folds_left(self):
        """Test any_of builds nested Or nodes."""
        a, b, c = (field_equals('x', i) for i in range(3))
        assert any_of(a, b, c) == Or(Or(a, b), c)

    def test_all_of_any_of_need_arguments(self):
        """Test empty combinations are rejected."""
        with pytest.raises(InvalidArgumentError):
            all_of()
        with pytest.raises(InvalidArgumentError):
            any_of()

    def test_filter_keeps_order(self):
        """Test filter_items preserves input order."""
        large = field_equals('size', 'large')
        assert filter_items(reversed(PRODUCTS), large) == [HOUSE, TREE]

    def test_specs_are_immutable(self):
        """Test specification nodes are frozen."""
        spec = And(field_equals('a', 1), field_equals('b', 2))
        with pytest.raises(AttributeError):
            spec.left = None
