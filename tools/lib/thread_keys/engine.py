"""Incremental hierarchy key assignment for threaded records.

This module provides ThreadKeyEngine, which gives every record of a flat,
parent-referencing collection a sortable hierarchy key, and sort_thread,
the functional entry point.

Keys look like ``00/03/01.``: one zero-padded base-36 sibling index per
depth level, joined by the delimiter and terminated by the end-of-record
marker. Sorting by key yields a preorder traversal of the thread. Records
that already carry a key are never rekeyed, so new replies can be threaded
into an existing collection.

Typical usage example:

    comments.sort(key=lambda c: c['posted_at'])
    sort_thread(comments)
    print(format_thread(comments))
"""

import logging
from functools import cmp_to_key
from typing import Any, Dict, List, Optional

from thread_keys._internal.key_codec import (
    build_key,
    parse_segment,
    split_segments,
    strip_end_of_record,
)
from thread_keys._internal.record_access import RecordAccessor
from thread_keys.exceptions import ParentNotFoundError
from thread_keys.models import (
    OptionsLike,
    ThreadSortOptions,
    resolve_options,
)

logger = logging.getLogger(__name__)

NO_INDEX = -1


class ThreadKeyEngine:
    """Assigns hierarchy keys to records of one collection.

    The engine borrows the caller's list and mutates it in place: keys are
    written onto the records and sort() reorders the list itself.

    Recursion depth equals thread depth. Cyclic parent chains are not
    detected and end in RecursionError.
    """

    def __init__(self, items: List[Any], options: OptionsLike = None) -> None:
        """Initializes engine for a collection.

        Args:
            items: Records to thread. Mapping or attribute records.
            options: ThreadSortOptions, a mapping of option names, or None.

        Raises:
            InvalidOptionsError: If options are invalid.
        """
        self._items = items
        self._options = resolve_options(options)
        self._access = RecordAccessor(self._options)
        self._index: Optional[Dict[Any, Any]] = None
        self._max_key: Optional[str] = None
        self._max_child_keys: Dict[Any, str] = {}
        self._assigned = 0

    @property
    def options(self) -> ThreadSortOptions:
        """Returns the resolved ThreadSortOptions."""
        return self._options

    def sort(self) -> List[Any]:
        """Keys every record, then sorts the collection by key.

        Returns:
            The same list object, sorted in place.

        Raises:
            ParentNotFoundError: On an internal consistency fault. Keys
                written before the fault are kept.
        """
        self.assign_all()
        self._items.sort(key=cmp_to_key(self.compare))
        return self._items

    def assign_all(self) -> int:
        """Keys every unkeyed record in collection order.

        Returns:
            Number of keys written by this call.
        """
        self._prepare()
        before = self._assigned
        for item in self._items:
            self.assign(item)
        written = self._assigned - before
        logger.debug(
            "Assigned %d new keys across %d items", written, len(self._items)
        )
        return written

    def assign(self, item: Any) -> None:
        """Ensures item carries a key, keying its ancestors first.

        No-op when the item already has a key.
        """
        if self._index is None:
            self._prepare()
        if self._access.get_key(item) is not None:
            return

        if self._is_root(item):
            key = self._next_root_key()
        else:
            key = self._next_child_key(item)

        self._access.set_key(item, key)
        self._record_key(self._access.get_parent(item), key)
        self._assigned += 1

    def compare(self, a: Any, b: Any) -> int:
        """Compares two records by key; unkeyed records compare equal."""
        return _compare_keys(self._access.get_key(a), self._access.get_key(b))

    def _prepare(self) -> None:
        """Builds the id index and the running key maxima."""
        self._index = {}
        self._max_key = None
        self._max_child_keys = {}
        for item in self._items:
            # First occurrence wins, as in a front-to-back scan.
            self._index.setdefault(self._access.get_id(item), item)
            key = self._access.get_key(item)
            if key:
                self._record_key(self._access.get_parent(item), key)

    def _record_key(self, parent_id: Any, key: str) -> None:
        """Folds a newly seen key into the overall and sibling maxima."""
        if not key:
            return
        if self._max_key is None or key > self._max_key:
            self._max_key = key
        if parent_id is None:
            return
        current = self._max_child_keys.get(parent_id)
        if current is None or key > current:
            self._max_child_keys[parent_id] = key

    def _find(self, item_id: Any) -> Optional[Any]:
        """Returns the record with the given id, or None."""
        return self._index.get(item_id)

    def _is_root(self, item: Any) -> bool:
        """Returns True if the item has no resolvable parent."""
        parent_id = self._access.get_parent(item)
        if parent_id is None:
            return True
        if self._find(parent_id) is None:
            logger.debug(
                "Item %r references unknown parent %r; threading as root",
                self._access.get_id(item),
                parent_id,
            )
            return True
        return False

    def _next_root_key(self) -> str:
        """Computes the key following the highest top-level index."""
        n = self._index_from_key(self._max_key, last=False)
        return build_key('', n + 1, self._options.end_of_record)

    def _next_child_key(self, item: Any) -> str:
        """Computes the key following the highest keyed sibling."""
        parent_id = self._access.get_parent(item)
        parent = self._find(parent_id)
        if parent is None:
            raise ParentNotFoundError(
                f"Parent {parent_id!r} of item "
                f"{self._access.get_id(item)!r} not found"
            )

        self.assign(parent)

        parent_key = strip_end_of_record(
            self._access.get_key(parent), self._options.end_of_record
        )
        prefix = parent_key + self._options.delimiter
        n = self._index_from_key(self._max_child_keys.get(parent_id), last=True)
        return build_key(prefix, n + 1, self._options.end_of_record)

    def _index_from_key(self, key: Optional[str], last: bool) -> int:
        """Parses the first or last segment of a full key.

        Returns NO_INDEX when there is no key or the segment holds no
        base-36 digit. In the latter case numbering restarts at ``00``,
        which may duplicate a key already present in the collection.
        """
        stripped = strip_end_of_record(key, self._options.end_of_record)
        if not stripped:
            return NO_INDEX
        segments = split_segments(stripped, self._options.delimiter)
        segment = segments[-1] if last else segments[0]
        index = parse_segment(segment)
        if index is None:
            logger.warning(
                "Cannot parse segment %r of key %r; starting a new sequence",
                segment,
                key,
            )
            return NO_INDEX
        return index


def sort_thread(items: List[Any], options: OptionsLike = None) -> List[Any]:
    """Gives unkeyed records a hierarchy key and sorts by key.

    Top-level records keep the relative order they are passed in; pass the
    collection already sorted by the sibling ordering you want (date,
    score, etc.).

    Args:
        items: Records with id, parent and optional key fields.
        options: ThreadSortOptions, a mapping of option names, or None.

    Returns:
        The same list object, sorted in place.

    Raises:
        InvalidOptionsError: If options are invalid.
        ParentNotFoundError: On an internal consistency fault.
    """
    return ThreadKeyEngine(items, options).sort()


def compare_thread(a: Any, b: Any, options: OptionsLike = None) -> int:
    """Compares two records by hierarchy key.

    Returns:
        -1, 0 or 1. Records lacking a key compare equal to anything.
    """
    access = RecordAccessor(resolve_options(options))
    return _compare_keys(access.get_key(a), access.get_key(b))


def _compare_keys(key_a: Optional[str], key_b: Optional[str]) -> int:
    """Compares full keys by code point, marker included."""
    if key_a is None or key_b is None:
        return 0
    return (key_a > key_b) - (key_a < key_b)
