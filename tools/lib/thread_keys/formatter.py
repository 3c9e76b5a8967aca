"""Plain-text rendering of threaded collections."""

from typing import Any, List

from thread_keys._internal.key_codec import key_depth
from thread_keys._internal.record_access import RecordAccessor
from thread_keys.models import OptionsLike, resolve_options

INDENT = '  '


def format_thread(items: List[Any], options: OptionsLike = None) -> str:
    """Returns an indented listing of items, one line per item.

    Indentation is two spaces per depth level, read from each item's key.
    Items are rendered in their current order; call sort_thread first.

    Args:
        items: Keyed records.
        options: ThreadSortOptions, a mapping of option names, or None.

    Returns:
        Newline-joined lines like ``  - item 7 (parent 2)``.
    """
    resolved = resolve_options(options)
    access = RecordAccessor(resolved)
    return '\n'.join(
        _format_line(item, access, resolved.delimiter) for item in items
    )


def _format_line(item: Any, access: RecordAccessor, delimiter: str) -> str:
    """Renders a single item line."""
    depth = key_depth(access.get_key(item), delimiter)
    line = f"{INDENT * depth} - item {access.get_id(item)}"
    parent_id = access.get_parent(item)
    if parent_id:
        line += f" (parent {parent_id})"
    return line
