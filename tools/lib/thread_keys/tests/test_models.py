"""Tests for ThreadItem and ThreadSortOptions."""

import pytest

from thread_keys.exceptions import InvalidOptionsError, ThreadKeyError
from thread_keys.models import ThreadItem, ThreadSortOptions, resolve_options


class TestThreadSortOptions:
    """Tests for option defaults and validation."""

    def test_defaults(self):
        options = ThreadSortOptions()
        assert options.end_of_record == '.'
        assert options.delimiter == '/'
        assert options.key_field == 'key'

    @pytest.mark.parametrize('value', ['', '..', None])
    def test_rejects_non_single_character_marker(self, value):
        with pytest.raises(InvalidOptionsError):
            ThreadSortOptions(end_of_record=value)

    @pytest.mark.parametrize('value', ['0', 'a', 'Z', ':a:', '/1'])
    def test_rejects_base36_delimiter(self, value):
        with pytest.raises(InvalidOptionsError):
            ThreadSortOptions(delimiter=value)

    def test_rejects_equal_marker_and_delimiter(self):
        with pytest.raises(InvalidOptionsError):
            ThreadSortOptions(end_of_record='/', delimiter='/')

    def test_rejects_delimiter_containing_marker(self):
        with pytest.raises(InvalidOptionsError, match='must not contain end_of_record'):
            ThreadSortOptions(delimiter='/./')

    @pytest.mark.parametrize('value', ['::', '--', ' / '])
    def test_accepts_multi_character_delimiter(self, value):
        assert ThreadSortOptions(delimiter=value).delimiter == value

    def test_rejects_empty_field_name(self):
        with pytest.raises(InvalidOptionsError):
            ThreadSortOptions(key_field='')

    def test_invalid_options_error_is_value_error(self):
        with pytest.raises(ValueError):
            ThreadSortOptions(delimiter='')
        assert issubclass(InvalidOptionsError, ThreadKeyError)

    def test_from_mapping_accepts_camel_case(self):
        options = ThreadSortOptions.from_mapping(
            {'endOfRecord': '!', 'delimiter': ':'}
        )
        assert options.end_of_record == '!'
        assert options.delimiter == ':'

    def test_from_mapping_accepts_snake_case(self):
        options = ThreadSortOptions.from_mapping({'key_field': 'order'})
        assert options.key_field == 'order'

    def test_from_mapping_rejects_unknown_name(self):
        with pytest.raises(InvalidOptionsError, match='eor'):
            ThreadSortOptions.from_mapping({'eor': '.'})

    def test_resolve_options(self):
        options = ThreadSortOptions(delimiter=':')
        assert resolve_options(options) is options
        assert resolve_options(None) == ThreadSortOptions()
        assert resolve_options({'delimiter': ':'}) == options


class TestThreadItem:
    """Tests for the ThreadItem record."""

    def test_to_dict_omits_missing_fields(self):
        assert ThreadItem('1').to_dict() == {'id': '1'}

    def test_to_dict_includes_parent_and_key(self):
        item = ThreadItem('2', parent='1', key='00/00.')
        assert item.to_dict() == {'id': '2', 'parent': '1', 'key': '00/00.'}

    def test_to_dict_uses_custom_key_field(self):
        item = ThreadItem('1')
        item.order = '00.'
        assert item.to_dict('order') == {'id': '1', 'order': '00.'}
