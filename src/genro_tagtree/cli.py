# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface: render tree documents.

Usage:
    genro-tagtree render page.yaml
    genro-tagtree render page.json --indent-width 4
    python -m genro_tagtree render page.yaml -v
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import DEFAULT_INDENT_WIDTH, RenderConfig
from .exceptions import TagTreeError
from .loading import load_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='genro-tagtree',
        description='Render markup trees described in JSON or YAML files',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    commands = parser.add_subparsers(dest='command', required=True)

    render = commands.add_parser('render', help='Render a tree document to stdout')
    render.add_argument('file', help='Tree document (.json, .yaml or .yml)')
    render.add_argument('--indent-width', type=int, default=DEFAULT_INDENT_WIDTH,
                        help=f'Spaces per nesting level (default: {DEFAULT_INDENT_WIDTH})')
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        config = RenderConfig(indent_width=args.indent_width)
        node = load_file(args.file)
        output = node.render(config=config)
    except (TagTreeError, OSError) as e:
        logger.debug("render failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
