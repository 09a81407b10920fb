"""
Unit tests for the URI commands (parse, normalize, to-path, from-path,
contains, equals).
"""

import json

import pytest
import yaml
from click.testing import CliRunner

from docuri.cli.main import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every command where no settings file exists."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestParseCommand:
    """Test the parse command."""

    def test_parse_json(self, runner):
        result = runner.invoke(main, ["parse", "file://localhost/tmp/my%20doc.txt?x=%41", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["scheme"] == "file"
        assert data["authority"] == "localhost"
        assert data["path"] == "/tmp/my doc.txt"
        assert data["query"] == "x=%41"
        assert data["fragment"] is None
        assert data["serialized"] == "file://localhost/tmp/my%20doc.txt?x=%41"
        assert data["normalized"] == "file:///tmp/my%20doc.txt?x=%41"
        assert data["filesystem_path"] == "/tmp/my doc.txt"

    def test_parse_json_non_file_uri(self, runner):
        result = runner.invoke(main, ["parse", "http://example.com/a", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["filesystem_path"] is None

    def test_parse_table(self, runner):
        result = runner.invoke(main, ["parse", "file:///tmp/x#top"])

        assert result.exit_code == 0
        assert "URI components" in result.output
        assert "/tmp/x" in result.output
        assert "top" in result.output


class TestNormalizeCommand:
    """Test the normalize command."""

    def test_normalize(self, runner):
        result = runner.invoke(main, ["normalize", "file://localhost/home/user/"])

        assert result.exit_code == 0
        assert result.output.strip() == "file:///home/user"

    def test_normalize_glob(self, runner):
        result = runner.invoke(main, ["normalize", "--glob", "file:///src/%2A%2A/%2A.py"])

        assert result.exit_code == 0
        assert result.output.strip() == "file:///src/**/*.py"

    def test_normalize_windows(self, runner):
        result = runner.invoke(main, ["--platform", "windows", "normalize", "file:///C:/Users/Me"])

        assert result.exit_code == 0
        assert result.output.strip() == "file:///c%3A/users/me"


class TestPathCommands:
    """Test to-path and from-path."""

    def test_to_path(self, runner):
        result = runner.invoke(main, ["to-path", "file:///tmp/a%20b"])

        assert result.exit_code == 0
        assert result.output.strip() == "/tmp/a b"

    def test_to_path_windows(self, runner):
        result = runner.invoke(main, ["--platform", "windows", "to-path", "file:///C:/Users/me/doc.txt"])

        assert result.exit_code == 0
        assert result.output.strip() == "C:\\Users\\me\\doc.txt"

    def test_to_path_unsupported(self, runner):
        result = runner.invoke(main, ["to-path", "http://example.com/a"])

        assert result.exit_code == 2
        assert "Not a file URI" in result.output

    def test_from_path(self, runner):
        result = runner.invoke(main, ["from-path", "/tmp/my doc.txt"])

        assert result.exit_code == 0
        assert result.output.strip() == "file:///tmp/my%20doc.txt"

    def test_from_path_windows(self, runner):
        result = runner.invoke(main, ["--platform", "windows", "from-path", "C:\\a b\\c.txt"])

        assert result.exit_code == 0
        assert result.output.strip() == "file:///C%3A/a%20b/c.txt"

    def test_platform_from_settings(self, runner, isolated_cwd):
        config = isolated_cwd / ".docuri" / "config.yaml"
        config.parent.mkdir()
        config.write_text(yaml.dump({"platform": "windows"}))

        result = runner.invoke(main, ["to-path", "file:///C:/a"])

        assert result.exit_code == 0
        assert result.output.strip() == "C:\\a"

    def test_platform_option_beats_settings(self, runner, isolated_cwd):
        config = isolated_cwd / "settings.yaml"
        config.write_text(yaml.dump({"platform": "windows"}))

        result = runner.invoke(main, ["--config", str(config), "--platform", "posix", "to-path", "file:///C:/a"])

        assert result.exit_code == 0
        assert result.output.strip() == "/C:/a"

    def test_invalid_settings(self, runner, isolated_cwd):
        config = isolated_cwd / "settings.yaml"
        config.write_text(yaml.dump({"platform": "amiga"}))

        result = runner.invoke(main, ["--config", str(config), "to-path", "file:///a"])

        assert result.exit_code == 4
        assert "Invalid settings" in result.output


class TestCompareCommands:
    """Test contains and equals."""

    def test_contains(self, runner):
        result = runner.invoke(main, ["contains", "file:///home/user", "file://localhost/home/user/doc.txt"])

        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_contains_prefix_only(self, runner):
        result = runner.invoke(main, ["contains", "file:///home/user", "file:///home/username"])

        assert result.exit_code == 1
        assert result.output.strip() == "false"

    def test_equals(self, runner):
        result = runner.invoke(main, ["equals", "file:///a/", "file://localhost/a"])

        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_not_equals(self, runner):
        result = runner.invoke(main, ["equals", "file:///a", "file:///b"])

        assert result.exit_code == 1
        assert result.output.strip() == "false"
