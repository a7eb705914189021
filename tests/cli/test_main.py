"""Tests for the CLI entry point and argument parsing."""
import json

import pytest

from scene_core import __version__
from scene_core.cli import main as cli_main
from scene_core.cli.main import create_parser, main


class TestParser:
    """Tests for create_parser."""

    def test_commands_registered(self):
        """Test every subcommand parses and sets its handler."""
        parser = create_parser()
        for argv in (['sun'], ['terminator'], ['clouds', 'x.png'], ['noise', '1', '2'],
                     ['latlon', '1', '2'], ['timezones'], ['country', '1', '2'],
                     ['tower'], ['planets']):
            args = parser.parse_args(argv)
            assert args.command == argv[0]
            assert callable(args.func)

    def test_global_options(self):
        """Test quiet and verbose flags."""
        args = create_parser().parse_args(['-q', '-vv', 'tower'])
        assert args.quiet is True
        assert args.verbose == 2

    def test_tower_modes_exclusive(self):
        """Test tower modes cannot be combined."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(['tower', '--floor', '3', '--layers'])

    def test_version(self, capsys):
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc:
            main(['--version'])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    """Tests for main dispatch and exit codes."""

    def test_no_command(self, capsys):
        """Test help is shown without a command."""
        assert main([]) == 0
        assert 'threescape' in capsys.readouterr().out

    def test_dispatch(self, capsys):
        """Test a command runs through main."""
        assert main(['tower', '--floor', '66', '-f', 'json']) == 0
        assert json.loads(capsys.readouterr().out)['floor'] == 66

    def test_command_error(self):
        """Test command failures become exit code 1."""
        assert main(['noise', '0', '0', '--octaves', '0']) == 1

    def test_unwritable_output(self, tmp_path, capsys):
        """Test a missing output directory maps to the file-not-found exit code."""
        out = tmp_path / "missing" / "clouds.png"
        assert main(['-q', 'clouds', str(out), '--size', '4', '--octaves', '1']) == 3
        assert 'File not found' in capsys.readouterr().err

    def test_console_script(self, monkeypatch, capsys):
        """Test the console script wrapper reads sys.argv."""
        monkeypatch.setattr('sys.argv', ['threescape', 'latlon', '0', '0'])
        assert cli_main() == 0
        assert capsys.readouterr().out.startswith('x=1.000000')
