"""Sortable hierarchy keys for threaded records.

This library assigns every record of a flat, parent-referencing collection
(threaded comments, for instance) a key whose plain string order is the
preorder traversal of the thread. Records that already have a key keep it,
so new replies can be threaded into an existing collection cheaply.

Typical usage example:

    from thread_keys import format_thread, sort_thread

    comments = [
        {'id': '1'},
        {'id': '2', 'parent': '1'},
        {'id': '3'},
    ]
    sort_thread(comments)
    print(format_thread(comments))
"""

# Public API exports
__all__ = [
    # Exceptions
    'ThreadKeyError',
    'ParentNotFoundError',
    'InvalidOptionsError',
    'ThreadInputError',
    # Models
    'ThreadItem',
    'ThreadSortOptions',
    # Engine
    'ThreadKeyEngine',
    'sort_thread',
    'compare_thread',
    # Rendering
    'format_thread',
    # I/O
    'load_items',
    'JsonWriter',
    'TreeWriter',
]

from thread_keys.exceptions import (
    ThreadKeyError,
    ParentNotFoundError,
    InvalidOptionsError,
    ThreadInputError,
)

from thread_keys.models import ThreadItem, ThreadSortOptions

from thread_keys.engine import ThreadKeyEngine, compare_thread, sort_thread
from thread_keys.formatter import format_thread
from thread_keys.loader import load_items
from thread_keys.writers import JsonWriter, TreeWriter
