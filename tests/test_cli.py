"""
Tests for the command line interface
"""

import json
from decimal import Decimal
import pytest
from unittest.mock import patch
from click.testing import CliRunner

from digit_groups import __version__
from digit_groups.cli import main, parse_grouping, parse_number
from digit_groups.policy import ConfigurationError


@pytest.fixture
def config_file(tmp_path):
    """Point the settings manager at a temporary file"""
    path = tmp_path / "settings.json"
    with patch('digit_groups.settings.CONFIG_FILE', path):
        yield path


@pytest.fixture
def runner():
    return CliRunner()


class TestParsing:
    """Test argument parsing helpers"""

    def test_parse_grouping(self):
        assert parse_grouping("3") == (3,)
        assert parse_grouping("3, 2") == (3, 2)
        assert parse_grouping("") == ()

    def test_parse_grouping_invalid(self):
        with pytest.raises(ConfigurationError):
            parse_grouping("3,x")

    def test_parse_number(self):
        assert parse_number("42") == 42
        assert isinstance(parse_number("42"), int)
        assert parse_number("-1.5") == -1.5
        with pytest.raises(ValueError):
            parse_number("abc")

    def test_parse_number_very_long_integer(self):
        """Test integers too long for int() keep all their digits"""
        digits = '9' * 5000
        number = parse_number(digits)
        assert number == Decimal(digits)
        assert parse_number('-' + digits) == -Decimal(digits)
        with pytest.raises(ValueError):
            parse_number('1' * 5000 + 'x')


class TestMain:
    """Test the digit-groups command"""

    def test_version(self, runner, config_file):
        result = runner.invoke(main, ['--version'])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_default_commas(self, runner, config_file):
        """Test numbers are formatted one per line"""
        result = runner.invoke(main, ['1234567', '999', '1234.5'])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1,234,567", "999", "1,234.5"]

    def test_negative_number(self, runner, config_file):
        """Test negative values are not mistaken for options"""
        result = runner.invoke(main, ['-1234'])
        assert result.exit_code == 0
        assert result.output.strip() == "-1,234"

    def test_predefined_policy(self, runner, config_file):
        result = runner.invoke(main, ['--policy', 'indian', '1234567890'])
        assert result.exit_code == 0
        assert result.output.strip() == "1,23,45,67,890"

    def test_overrides(self, runner, config_file):
        """Test ad-hoc grouping and separators"""
        result = runner.invoke(main, [
            '-g', '3,2', '--no-repeat', '--separator', ' ',
            '--fraction-grouping', '2', '--fraction-separator', '_',
            '1234567890.1234'
        ])
        assert result.exit_code == 0
        assert result.output.strip() == "12345 67 890.12_34"

    def test_text_mode(self, runner, config_file):
        result = runner.invoke(main, ['--policy', 'hex', '--text', 'deadbeef'])
        assert result.exit_code == 0
        assert result.output.strip() == "dead beef"

    def test_invalid_grouping(self, runner, config_file):
        """Test a zero group size exits with an error"""
        result = runner.invoke(main, ['-g', '0', '1234'])
        assert result.exit_code == 1
        assert "grouping" in result.output

    def test_unknown_policy(self, runner, config_file):
        result = runner.invoke(main, ['--policy', 'klingon', '1234'])
        assert result.exit_code == 1
        assert "Unknown policy" in result.output

    def test_not_a_number(self, runner, config_file):
        result = runner.invoke(main, ['12a'])
        assert result.exit_code == 1
        assert "Not a number" in result.output

    def test_very_long_integer_argument(self, runner, config_file):
        """Test a huge integer argument is grouped, not turned into a float"""
        result = runner.invoke(main, ['1' + '0' * 5000])
        assert result.exit_code == 0
        assert result.output.strip().replace(',', '') == '1' + '0' * 5000

    def test_save_rejects_builtin_name(self, runner, config_file):
        """Test a saved policy cannot hide behind a built-in name"""
        result = runner.invoke(main, ['-g', '2', '--save', 'Comma'])
        assert result.exit_code == 1
        assert "built-in" in result.output
        assert not config_file.exists()

    def test_save_and_reuse(self, runner, config_file):
        """Test a saved policy is written and usable by name"""
        result = runner.invoke(main, ['--separator', "'", '--save', 'swiss'])
        assert result.exit_code == 0
        saved = json.loads(config_file.read_text(encoding='utf-8'))
        assert saved['policies']['swiss']['digit_separator'] == "'"

        result = runner.invoke(main, ['--policy', 'swiss', '1234567'])
        assert result.exit_code == 0
        assert result.output.strip() == "1'234'567"

    def test_delete(self, runner, config_file):
        runner.invoke(main, ['--separator', ' ', '--save', 'spaced'])

        result = runner.invoke(main, ['--delete', 'spaced'])
        assert result.exit_code == 0

        result = runner.invoke(main, ['--delete', 'spaced'])
        assert result.exit_code == 1

    def test_list_policies(self, runner, config_file):
        """Test the policy table lists built-in names"""
        result = runner.invoke(main, ['--list-policies'])
        assert result.exit_code == 0
        assert "comma" in result.output
        assert "indian" in result.output
