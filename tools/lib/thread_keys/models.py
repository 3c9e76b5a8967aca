"""Domain models for threaded record sorting.

This module defines the ThreadItem record and the ThreadSortOptions
configuration object shared by the engine, the formatter and the CLI.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Union

from thread_keys.exceptions import InvalidOptionsError

BASE36_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'

_CAMEL_CASE_NAMES = {
    'endOfRecord': 'end_of_record',
    'idField': 'id_field',
    'parentField': 'parent_field',
    'keyField': 'key_field',
}


@dataclass
class ThreadItem:
    """A record in a threaded collection.

    Mutable: the engine writes ``key`` in place, once.

    Attributes:
        id: Unique identifier within the collection.
        parent: Identifier of the parent record, or None for a root.
        key: Hierarchy key, or None if not yet threaded.
    """

    id: str
    parent: Optional[str] = None
    key: Optional[str] = None

    def to_dict(self, key_field: str = 'key') -> Dict[str, Any]:
        """Returns the record as a plain dictionary.

        Args:
            key_field: Name the key is stored and emitted under. The engine
                sets it as an attribute when threading with a custom
                ``key_field``, e.g. ``order``.
        """
        data: Dict[str, Any] = {'id': self.id}
        if self.parent is not None:
            data['parent'] = self.parent
        key = getattr(self, key_field, None)
        if key is not None:
            data[key_field] = key
        return data


@dataclass(frozen=True)
class ThreadSortOptions:
    """Options controlling key generation and record field access.

    Attributes:
        end_of_record: Marker appended to every full key.
        delimiter: Separator between depth segments.
        id_field: Name of the identifier field on records.
        parent_field: Name of the parent reference field on records.
        key_field: Name of the hierarchy key field on records.
    """

    end_of_record: str = '.'
    delimiter: str = '/'
    id_field: str = 'id'
    parent_field: str = 'parent'
    key_field: str = 'key'

    def __post_init__(self) -> None:
        self._validate_marker(self.end_of_record)
        self._validate_delimiter(self.delimiter, self.end_of_record)
        for name in ('id_field', 'parent_field', 'key_field'):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidOptionsError(
                    f"{name} must be a non-empty string, got {value!r}"
                )

    @staticmethod
    def _validate_marker(value: Any) -> None:
        """Validates the single-character end-of-record marker."""
        if not isinstance(value, str) or len(value) != 1:
            raise InvalidOptionsError(
                f"end_of_record must be a single character, got {value!r}"
            )
        if value.lower() in BASE36_DIGITS:
            raise InvalidOptionsError(
                f"end_of_record must not be a base-36 digit, got {value!r}"
            )

    @staticmethod
    def _validate_delimiter(value: Any, end_of_record: str) -> None:
        """Validates the segment delimiter, which may be several characters."""
        if not isinstance(value, str) or not value:
            raise InvalidOptionsError(
                f"delimiter must be a non-empty string, got {value!r}"
            )
        if any(char in BASE36_DIGITS for char in value.lower()):
            raise InvalidOptionsError(
                f"delimiter must not contain base-36 digits, got {value!r}"
            )
        if end_of_record in value:
            raise InvalidOptionsError(
                f"delimiter {value!r} must not contain end_of_record "
                f"{end_of_record!r}"
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'ThreadSortOptions':
        """Builds options from a mapping of option names.

        Accepts snake_case field names as well as the camelCase spelling
        (``endOfRecord``) used by JSON configuration.

        Args:
            mapping: Partial option values. Missing names keep defaults.

        Returns:
            New ThreadSortOptions instance.

        Raises:
            InvalidOptionsError: If a name is unknown or a value invalid.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for name, value in mapping.items():
            field_name = _CAMEL_CASE_NAMES.get(name, name)
            if field_name not in known:
                raise InvalidOptionsError(f"Unknown thread sort option: {name}")
            values[field_name] = value
        return cls(**values)


OptionsLike = Union[ThreadSortOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike) -> ThreadSortOptions:
    """Normalizes None, a mapping or an options object to ThreadSortOptions."""
    if options is None:
        return ThreadSortOptions()
    if isinstance(options, ThreadSortOptions):
        return options
    return ThreadSortOptions.from_mapping(options)
