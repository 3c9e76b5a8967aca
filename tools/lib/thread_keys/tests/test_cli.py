"""Tests for the thread-keys command line."""

import json
from pathlib import Path
from unittest import mock

import pytest

from thread_keys.cli import create_parser, main
from thread_keys.writers import JsonWriter


class TestCli:
    """Tests for CLI commands."""

    def test_sort_writes_json_to_stdout(self, comments_path, capsys):
        main(['sort', '-i', str(comments_path)])

        data = json.loads(capsys.readouterr().out)
        assert [item['id'] for item in data][:4] == ['1', '2', '3', '7']
        assert data[9]['id'] == '9'

    def test_sort_tree(self, comments_path, capsys):
        main(['sort', '-i', str(comments_path), '--tree'])

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == ' - item 1'
        assert lines[3] == '     - item 7 (parent 2)'

    def test_sort_to_file(self, comments_path, tmp_path: Path):
        output_path = tmp_path / 'sorted.json'

        main(['sort', '-i', str(comments_path), '-o', str(output_path)])

        with output_path.open('r', encoding='utf-8') as f:
            data = json.load(f)
        assert data[7]['id'] == '10'

    def test_sort_tree_to_file(self, comments_path, tmp_path: Path, capsys):
        output_path = tmp_path / 'out' / 'tree.txt'

        main(['sort', '-i', str(comments_path), '--tree', '-o', str(output_path)])

        lines = output_path.read_text(encoding='utf-8').splitlines()
        assert lines[7] == '     - item 10 (parent 5)'
        assert capsys.readouterr().out == ''

    def test_output_file_goes_through_writer(self, comments_path, tmp_path: Path):
        output_path = tmp_path / 'sorted.json'

        with mock.patch.object(JsonWriter, 'write', autospec=True) as write:
            main(['sort', '-i', str(comments_path), '-o', str(output_path)])

        write.assert_called_once()
        assert write.call_args.args[2] == output_path

    def test_sort_custom_key_field(self, comments_path, capsys):
        main(['sort', '-i', str(comments_path), '--key-field', 'order'])

        data = json.loads(capsys.readouterr().out)
        assert data[1]['order'] == '00/00.'

    def test_format_keyed_file(self, tmp_path: Path, capsys):
        path = tmp_path / 'keyed.json'
        path.write_text(
            json.dumps([
                {'id': 'a', 'key': '00.'},
                {'id': 'b', 'parent': 'a', 'key': '00/00.'},
            ]),
            encoding='utf-8',
        )

        main(['format', '-i', str(path)])

        assert capsys.readouterr().out == ' - item a\n   - item b (parent a)\n'

    def test_missing_input_exits(self, tmp_path: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['sort', '-i', str(tmp_path / 'absent.json')])

        assert exc_info.value.code == 1
        assert 'Input file not found' in capsys.readouterr().err

    def test_invalid_options_exit(self, comments_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['sort', '-i', str(comments_path), '--delimiter', '.'])

        assert exc_info.value.code == 1
        assert 'must not contain end_of_record' in capsys.readouterr().err

    def test_invalid_records_exit(self, tmp_path: Path, capsys):
        path = tmp_path / 'bad.json'
        path.write_text(json.dumps([{'parent': '1'}]), encoding='utf-8')

        with pytest.raises(SystemExit) as exc_info:
            main(['format', '-i', str(path)])

        assert exc_info.value.code == 1
        assert 'Invalid thread records' in capsys.readouterr().err

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args([])
        assert exc_info.value.code != 0
