"""Command-line interface for threading record collections.

This module provides the ``thread-keys`` command, which loads records from
JSON or YAML, assigns hierarchy keys and writes the sorted result.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from thread_keys.engine import sort_thread
from thread_keys.exceptions import ThreadKeyError
from thread_keys.loader import load_items
from thread_keys.models import ThreadSortOptions
from thread_keys.writers import BaseWriter, JsonWriter, TreeWriter

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Configures root logging for command-line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
    )


def build_options(args: argparse.Namespace) -> ThreadSortOptions:
    """Builds ThreadSortOptions from parsed arguments."""
    values: Dict[str, Any] = {}
    for name in ('end_of_record', 'delimiter', 'key_field'):
        value = getattr(args, name, None)
        if value is not None:
            values[name] = value
    return ThreadSortOptions(**values)


def _load(args: argparse.Namespace, options: ThreadSortOptions) -> List[Any]:
    """Loads records named by --input, exiting if the file is missing."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)
    return load_items(input_path, options)


def _emit(
    writer: BaseWriter,
    items: List[Any],
    output: Optional[str],
    **options
) -> None:
    """Writes items with writer to the output file, or to stdout."""
    if output is None:
        sys.stdout.write(writer.write_to_string(items, **options))
        return
    writer.write(items, Path(output), **options)
    logger.info("Wrote %s", output)


def cmd_sort(args: argparse.Namespace):
    """Handles the 'sort' command."""
    try:
        options = build_options(args)
        items = _load(args, options)
        sort_thread(items, options)
        if args.tree:
            _emit(TreeWriter(), items, args.output, thread_options=options)
        else:
            _emit(
                JsonWriter(),
                items,
                args.output,
                indent=args.indent,
                thread_options=options,
            )
    except ThreadKeyError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_format(args: argparse.Namespace):
    """Handles the 'format' command."""
    try:
        options = build_options(args)
        items = _load(args, options)
        _emit(TreeWriter(), items, args.output, thread_options=options)
    except ThreadKeyError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Adds input, output and key-format arguments to a subcommand."""
    parser.add_argument('-i', '--input', required=True, help='Path to the input JSON or YAML file.')
    parser.add_argument('-o', '--output', help='Path for the output file. Default: stdout.')
    parser.add_argument('--delimiter', help='Separator between depth segments. Default: "/".')
    parser.add_argument('--key-field', dest='key_field', help='Record field holding the key. Default: "key".')


def create_parser() -> argparse.ArgumentParser:
    """Builds the argument parser."""
    parser = argparse.ArgumentParser(
        prog='thread-keys',
        description='Assign sortable hierarchy keys to threaded records.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Key and sort comments, writing JSON to stdout
  thread-keys sort -i comments.json

  # Key records that store their key as "order" and print the tree
  thread-keys sort -i comments.yaml --key-field order --tree

  # Render an already keyed file
  thread-keys format -i sorted.json
        """
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging.')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.required = True

    sort_parser = subparsers.add_parser(
        'sort',
        help='Assign missing keys and sort records by key.',
        description='Loads records, assigns a hierarchy key to every record without one and writes them sorted by key. Existing keys are never changed.'
    )
    _add_common_arguments(sort_parser)
    sort_parser.add_argument('--end-of-record', dest='end_of_record', help='Marker appended to every key. Default: ".".')
    sort_parser.add_argument('--tree', action='store_true', help='Write the indented tree view instead of JSON.')
    sort_parser.add_argument('--indent', type=int, default=2, help='JSON indentation level. Default: 2.')
    sort_parser.set_defaults(func=cmd_sort)

    format_parser = subparsers.add_parser(
        'format',
        help='Render keyed records as an indented tree.',
        description='Renders records in file order using the depth encoded in their keys. No keys are assigned.'
    )
    _add_common_arguments(format_parser)
    format_parser.set_defaults(func=cmd_format)

    return parser


def main(argv: Optional[List[str]] = None):
    """The main command-line interface entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    args.func(args)


if __name__ == '__main__':
    main()
