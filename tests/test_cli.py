"""Tests for the bytefmt command line."""

import json

import pytest
from click.testing import CliRunner

from bytefmt import main, format_value
from byte_size import Options


@pytest.fixture
def runner():
    return CliRunner()


class TestMain:
    """Tests for the main command."""

    def test_single_value(self, runner):
        """Should print the formatted value."""
        result = runner.invoke(main, ['--format', 'plain', '1337'])
        assert result.exit_code == 0
        assert result.output == "1.34kB\n"

    def test_several_values(self, runner):
        """Should print one line per value."""
        result = runner.invoke(main, ['--format', 'plain', '1337', '0', '1000000'])
        assert result.exit_code == 0
        assert result.output == "1.34kB\n0B\n1MB\n"

    def test_flags(self, runner):
        """Should map flags onto formatting options."""
        result = runner.invoke(main, ['--format', 'plain', '--binary', '--space', '1337'])
        assert result.output == "1.31 KiB\n"

        result = runner.invoke(main, ['--format', 'plain', '--bits', '--signed', '1337'])
        assert result.output == "+1.34kbit\n"

    def test_fraction_digits(self, runner):
        """Should pass fraction digit bounds through."""
        result = runner.invoke(main, ['--format', 'plain', '--min-fraction-digits', '2', '1500'])
        assert result.output == "1.50kB\n"

    def test_negative_after_double_dash(self, runner):
        """Should accept negative values after --."""
        result = runner.invoke(main, ['--format', 'plain', '--', '-1337'])
        assert result.exit_code == 0
        assert result.output == "-1.34kB\n"

    def test_stdin(self, runner):
        """Should read values from stdin when none are given."""
        result = runner.invoke(main, ['--format', 'plain'], input="1337\n\n1000000\n")
        assert result.exit_code == 0
        assert result.output == "1.34kB\n1MB\n"

    def test_environment_defaults(self, runner):
        """Should read option defaults from BYTEFMT_* variables."""
        result = runner.invoke(main, ['--format', 'plain', '1337'], env={'BYTEFMT_BINARY': '1'})
        assert result.output == "1.31KiB\n"

    def test_invalid_value(self, runner):
        """Should report unparsable values and exit with an error."""
        result = runner.invoke(main, ['--format', 'plain', '1337', 'abc'])
        assert result.exit_code == 1
        assert "1.34kB" in result.output
        assert "could not parse 'abc' as a number" in result.output

    def test_non_finite_value(self, runner):
        """Should report infinite values."""
        result = runner.invoke(main, ['--format', 'plain', 'inf'])
        assert result.exit_code == 1
        assert "expected a finite number, got float: inf" in result.output

    def test_jsonl(self, runner):
        """Should emit JSONL records."""
        result = runner.invoke(main, ['--format', 'jsonl', '--with-options', '1337'])
        assert result.exit_code == 0

        records = [json.loads(line) for line in result.output.splitlines()]
        assert records[0]["type"] == "options"
        assert records[1] == {"type": "result", "value": "1337", "formatted": "1.34kB", "error": None}

    def test_terminal(self, runner):
        """Should render a table."""
        result = runner.invoke(main, ['--format', 'terminal', '1337'])
        assert result.exit_code == 0
        assert "1.34kB" in result.output

    def test_output_file(self, runner):
        """Should write to the given file."""
        with runner.isolated_filesystem():
            result = runner.invoke(main, ['--format', 'plain', '-o', 'sizes.txt', '2048'])
            assert result.exit_code == 0
            with open('sizes.txt') as f:
                assert f.read() == "2.05kB\n"

    def test_version(self, runner):
        """Should print the version."""
        result = runner.invoke(main, ['--version'])
        assert result.exit_code == 0
        assert "1.0.0" in result.output


class TestFormatValue:
    """Tests for format_value function."""

    def test_success(self):
        """Should fill in the formatted string."""
        assert format_value("1337", Options()) == {'value': '1337', 'formatted': '1.34kB', 'error': None}

    def test_parse_error(self):
        """Should capture parse failures."""
        result = format_value("12 MB", Options())
        assert result['formatted'] is None
        assert "could not parse" in result['error']

    def test_nan(self):
        """Should capture non-finite input."""
        result = format_value("nan", Options())
        assert result['formatted'] is None
        assert result['error'] == "expected a finite number, got float: nan"
