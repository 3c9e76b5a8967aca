"""Indented text tree writer."""

from typing import Any, List

from thread_keys.formatter import format_thread
from thread_keys.models import OptionsLike
from thread_keys.writers.base_writer import BaseWriter


class TreeWriter(BaseWriter):
    """Renders records as the indented listing of format_thread."""

    def write_to_string(
        self,
        items: List[Any],
        thread_options: OptionsLike = None,
        **_options
    ) -> str:
        """Renders items to text.

        Args:
            items: Keyed records, already sorted.
            thread_options: Options naming the delimiter and fields.
            **_options: Additional options (ignored).

        Returns:
            Text listing with a trailing newline.
        """
        text = format_thread(items, thread_options)
        return text + '\n' if text else text
