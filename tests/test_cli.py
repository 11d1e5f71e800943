"""Integration tests for the CLI."""

import os

import pytest

from rgss_serializer.cli import build_parser, main, split_targets
from rgss_serializer.domain.enums import Direction, ProjectVersion


class TestCLI:
    """End-to-end tests for argument handling."""

    def test_runs_direction(self, project_dir, capsys):
        assert main(['data_bin_to_text', str(project_dir)]) == 0
        assert (project_dir / 'YAML' / 'Actors.yaml').exists()
        assert 'Done! Converted 4, skipped 0' in capsys.readouterr().out

    def test_multiple_directions_in_order(self, project_dir, capsys):
        assert main(['scripts_bin_to_text', 'data_bin_to_text', str(project_dir)]) == 0
        out = capsys.readouterr().out
        assert out.index('scripts_bin_to_text') < out.index('data_bin_to_text')
        assert 'Converted 1, skipped 1' in out

    def test_force_flag(self, project_dir, capsys):
        main(['data_bin_to_text', str(project_dir)])
        capsys.readouterr()
        main(['-f', 'data_bin_to_text', str(project_dir)])
        assert 'Converted 4, skipped 0' in capsys.readouterr().out

    def test_missing_project_returns_error(self, tmp_path, capsys):
        assert main(['data_bin_to_text', str(tmp_path / 'nope')]) == 1
        assert 'Error:' in capsys.readouterr().err

    def test_missing_direction_exits(self, project_dir):
        with pytest.raises(SystemExit) as exc_info:
            main([str(project_dir)])
        assert exc_info.value.code == 2

    def test_multiple_directories_exit(self, project_dir, tmp_path):
        with pytest.raises(SystemExit):
            main(['data_bin_to_text', str(project_dir), str(tmp_path)])

    def test_missing_directory_exits(self):
        with pytest.raises(SystemExit):
            main(['data_bin_to_text'])


class TestParser:

    def setup_method(self):
        self.parser = build_parser()

    def test_defaults(self):
        args = self.parser.parse_args(['all_bin_to_text', 'proj'])
        assert args.version is ProjectVersion.ACE
        assert args.line_width == 130
        assert args.table_width == 20
        assert args.force is False

    def test_version_flags(self):
        assert self.parser.parse_args(['-x', 'd']).version is ProjectVersion.XP
        assert self.parser.parse_args(['--vx', 'd']).version is ProjectVersion.VX

    def test_versions_are_exclusive(self):
        with pytest.raises(SystemExit):
            self.parser.parse_args(['-x', '-v', 'd'])

    def test_widths(self):
        args = self.parser.parse_args(['-l', '-1', '--table-width', '8', 'd'])
        assert args.line_width == -1
        assert args.table_width == 8

    def test_no_force(self):
        assert self.parser.parse_args(['--no-force', 'd']).force is False

    def test_split_targets(self):
        directions, path = split_targets(self.parser, ['save_bin_to_text', os.sep + 'game', 'all_text_to_bin'])
        assert directions == [Direction.SAVE_BIN_TO_TEXT, Direction.ALL_TEXT_TO_BIN]
        assert path == os.sep + 'game'
