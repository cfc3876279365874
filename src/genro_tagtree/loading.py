# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading TagNode trees from plain data and files.

A tree document is a nested mapping::

    name: ul
    attributes:            # optional; list of pairs or a mapping
      - [class, menu]
    text: ''               # optional
    children:              # optional
      - {name: li, text: hello}
      - {name: li, text: world}

JSON files use the same structure.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .exceptions import InvalidArgumentError, InvalidDocumentError
from .node import TagNode

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({'name', 'text', 'attributes', 'children'})


def _load_attributes(data: Any, path: str) -> list[tuple[str, Any]]:
    """Normalize a document's attributes to ordered pairs."""
    if isinstance(data, Mapping):
        return list(data.items())
    if not isinstance(data, list):
        raise InvalidDocumentError(
            f"{path}: attributes must be a list of pairs or a mapping, "
            f"not {type(data).__name__}"
        )
    pairs = []
    for i, pair in enumerate(data):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise InvalidDocumentError(
                f"{path}.attributes[{i}]: expected a [key, value] pair, got {pair!r}"
            )
        pairs.append((pair[0], pair[1]))
    return pairs


def node_from_dict(data: Mapping[str, Any], path: str = '$') -> TagNode:
    """Build a TagNode tree from a nested mapping.

    Args:
        data: Mapping with 'name' and optional 'text', 'attributes',
            'children' keys.
        path: Location of data in the document, for error messages.

    Returns:
        The root TagNode.

    Raises:
        InvalidDocumentError: If the structure is malformed or a name is invalid.

    Example:
        >>> node_from_dict({'name': 'ul', 'children': [{'name': 'li', 'text': 'a'}]})
        TagNode('ul', text='', attributes=0, children=1)
    """
    if not isinstance(data, Mapping):
        raise InvalidDocumentError(
            f"{path}: expected a mapping, not {type(data).__name__}"
        )
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise InvalidDocumentError(
            f"{path}: unknown keys {sorted(unknown)}. "
            f"Allowed: {sorted(_KNOWN_KEYS)}"
        )
    if 'name' not in data:
        raise InvalidDocumentError(f"{path}: missing 'name'")

    text = data.get('text')
    attributes = _load_attributes(data.get('attributes') or [], path)
    try:
        node = TagNode(data['name'], text, attributes=attributes)
    except InvalidArgumentError as e:
        raise InvalidDocumentError(f"{path}: {e}") from e

    children = data.get('children') or []
    if not isinstance(children, list):
        raise InvalidDocumentError(
            f"{path}.children: expected a list, not {type(children).__name__}"
        )
    for i, child in enumerate(children):
        node.add_child(node_from_dict(child, f"{path}.children[{i}]"))
    return node


def load_file(path: str | Path) -> TagNode:
    """Load a tree document from a .json, .yaml or .yml file.

    Raises:
        InvalidDocumentError: If the suffix is unsupported, the bytes are
            not UTF-8, or the content cannot be parsed or is malformed.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    try:
        content = path.read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise InvalidDocumentError(f"{path} is not valid UTF-8: {e}") from e

    try:
        if suffix == '.json':
            data = json.loads(content)
        elif suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(content)
        else:
            raise InvalidDocumentError(
                f"Unsupported file type '{suffix}': use .json, .yaml or .yml"
            )
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InvalidDocumentError(f"Cannot parse {path}: {e}") from e

    logger.debug("Loaded tree document %s", path)
    return node_from_dict(data)
