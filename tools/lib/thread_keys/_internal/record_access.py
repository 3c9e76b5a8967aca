"""Field access for threaded records.

Records may be mappings (e.g. dicts decoded from JSON) or plain objects
with attributes. RecordAccessor hides the difference from the engine and
the formatter.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, Optional

from thread_keys.models import ThreadSortOptions


class RecordAccessor:
    """Reads and writes the id, parent and key fields of a record."""

    def __init__(self, options: ThreadSortOptions) -> None:
        self._id_field = options.id_field
        self._parent_field = options.parent_field
        self._key_field = options.key_field

    def get_id(self, record: Any) -> Any:
        """Returns the record identifier."""
        return self._read(record, self._id_field)

    def get_parent(self, record: Any) -> Optional[Any]:
        """Returns the parent identifier, or None for an explicit root."""
        return self._read(record, self._parent_field)

    def get_key(self, record: Any) -> Optional[str]:
        """Returns the hierarchy key, or None if unkeyed."""
        return self._read(record, self._key_field)

    def set_key(self, record: Any, key: str) -> None:
        """Writes the hierarchy key onto the record in place."""
        if isinstance(record, MutableMapping):
            record[self._key_field] = key
        else:
            setattr(record, self._key_field, key)

    @staticmethod
    def _read(record: Any, field_name: str) -> Any:
        """Reads a field from a mapping or an attribute object."""
        if isinstance(record, Mapping):
            return record.get(field_name)
        return getattr(record, field_name, None)
