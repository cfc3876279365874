# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagTree exceptions."""

from __future__ import annotations


class TagTreeError(Exception):
    """Base exception for TagTree errors."""

    pass


class InvalidArgumentError(TagTreeError, ValueError):
    """Raised when a caller-supplied value violates a precondition.

    Examples: an empty tag name, a negative indentation, attaching a
    node under one of its own descendants.
    """

    pass


class InvalidDocumentError(TagTreeError):
    """Raised when a loaded tree document is malformed."""

    pass
