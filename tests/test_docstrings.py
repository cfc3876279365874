# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests that the interactive examples in docstrings run as written."""

import doctest

import pytest

from genro_tagtree import builder, loading, node, render, specification
from genro_tagtree.builders import base, code, decorators, html

MODULES = [builder, loading, node, render, specification, base, code, decorators, html]


class TestDocstringExamples:
    """Tests for docstring examples."""

    @pytest.mark.parametrize('module', MODULES, ids=lambda m: m.__name__)
    def test_examples_pass(self, module):
        """Test every >>> example in the module produces its shown output."""
        result = doctest.testmod(module, optionflags=doctest.NORMALIZE_WHITESPACE)
        assert result.failed == 0

    def test_examples_present(self):
        """Test the runnable examples are actually collected."""
        attempted = sum(doctest.testmod(m).attempted for m in (node, builder, code))
        assert attempted > 0
