"""Loading threaded records from JSON and YAML files.

Files hold either a list of records or a mapping with an ``items`` list.
Record shape is checked with JSON Schema before anything is threaded.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from jsonschema import validators

from thread_keys.exceptions import ThreadInputError
from thread_keys.models import OptionsLike, resolve_options

logger = logging.getLogger(__name__)

YAML_SUFFIXES = ('.yaml', '.yml')


def build_items_schema(options: OptionsLike = None) -> Dict[str, Any]:
    """Returns the JSON schema for a list of records.

    Args:
        options: Options naming the id, parent and key fields.

    Returns:
        JSON schema dictionary.
    """
    resolved = resolve_options(options)
    nullable_string = {'type': ['string', 'null']}
    return {
        '$schema': 'http://json-schema.org/draft-07/schema#',
        'type': 'array',
        'items': {
            'type': 'object',
            'required': [resolved.id_field],
            'properties': {
                resolved.id_field: {'type': 'string'},
                resolved.parent_field: nullable_string,
                resolved.key_field: nullable_string,
            },
        },
    }


ITEMS_SCHEMA = build_items_schema()


def load_items(path: Path, options: OptionsLike = None) -> List[Dict[str, Any]]:
    """Loads and validates records from a JSON or YAML file.

    Args:
        path: Input file. ``.yaml``/``.yml`` are read as YAML, anything
            else as JSON.
        options: Options naming the record fields.

    Returns:
        List of record dictionaries.

    Raises:
        ThreadInputError: If the file cannot be read, parsed or validated.
    """
    path = Path(path)
    data = _read_document(path)
    if isinstance(data, dict) and 'items' in data:
        data = data['items']

    errors = validate_items(data, options)
    if errors:
        raise ThreadInputError(
            f"Invalid thread records in {path}:\n  " + '\n  '.join(errors)
        )

    logger.info("Loaded %d records from %s", len(data), path)
    return data


def _read_document(path: Path) -> Any:
    """Parses a JSON or YAML document."""
    try:
        with path.open('r', encoding='utf-8') as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except OSError as e:
        raise ThreadInputError(f"Cannot read {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ThreadInputError(f"Cannot parse {path}: {e}") from e


def validate_items(data: Any, options: OptionsLike = None) -> List[str]:
    """Validates decoded records against the items schema.

    Args:
        data: Decoded document.
        options: Options naming the record fields.

    Returns:
        Error messages with their JSON paths (empty if valid).
    """
    schema = build_items_schema(options)
    validator_class = validators.validator_for(schema)
    validator = validator_class(schema)

    errors = []
    for error in validator.iter_errors(data):
        location = '.'.join(str(p) for p in error.path) if error.path else 'root'
        errors.append(f"{location}: {error.message}")
    return errors
