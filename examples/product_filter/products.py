# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Filtering products with specification combinators.

New criteria are new leaves; the filter itself never changes.

Usage:
    python examples/product_filter/products.py
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from genro_tagtree import And, Or, field_equals, filter_items


class Color(Enum):
    RED = 'red'
    GREEN = 'green'
    BLUE = 'blue'


class Size(Enum):
    SMALL = 'small'
    MEDIUM = 'medium'
    LARGE = 'large'


@dataclass
class Product:
    name: str
    color: Color
    size: Size


PRODUCTS = [
    Product('Apple', Color.GREEN, Size.SMALL),
    Product('Tree', Color.GREEN, Size.LARGE),
    Product('House', Color.BLUE, Size.LARGE),
]


if __name__ == '__main__':
    green = field_equals('color', Color.GREEN)
    large = field_equals('size', Size.LARGE)

    for product in filter_items(PRODUCTS, green):
        print(f"{product.name} is green")

    for product in filter_items(PRODUCTS, And(green, large)):
        print(f"{product.name} is green and large")

    for product in filter_items(PRODUCTS, Or(field_equals('color', Color.BLUE), green)):
        print(f"{product.name} is blue or green")
