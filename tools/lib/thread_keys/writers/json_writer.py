"""JSON thread writer."""

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, List

from thread_keys.models import OptionsLike, ThreadItem, resolve_options
from thread_keys.writers.base_writer import BaseWriter


class JsonWriter(BaseWriter):
    """Serializes records, keys included, to a JSON list."""

    def write_to_string(
        self,
        items: List[Any],
        indent: int = 2,
        thread_options: OptionsLike = None,
        **_options
    ) -> str:
        """Serializes items to JSON string.

        Args:
            items: Mapping, ThreadItem or dataclass records.
            indent: JSON indentation level.
            thread_options: Options naming the key field of ThreadItem
                records.
            **_options: Additional options (ignored).

        Returns:
            JSON string with a trailing newline.
        """
        key_field = resolve_options(thread_options).key_field
        records = [self._record_to_dict(item, key_field) for item in items]
        return json.dumps(records, ensure_ascii=False, indent=indent) + '\n'

    def _record_to_dict(self, item: Any, key_field: str) -> Dict[str, Any]:
        """Converts a record to a JSON-serializable dictionary."""
        if isinstance(item, ThreadItem):
            return item.to_dict(key_field)
        if is_dataclass(item):
            return asdict(item)
        return dict(item)
