"""Tests for the resolve_comment command line tool."""

from __future__ import annotations

import importlib.util
import io
import json
from pathlib import Path
from types import ModuleType
from unittest.mock import patch

import pytest

SCRIPT_PATH = Path(__file__).parents[3] / "scripts" / "resolve_comment.py"


@pytest.fixture(scope="module")
def cli() -> ModuleType:
    spec = importlib.util.spec_from_file_location("resolve_comment", SCRIPT_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def quiet_environment():
    """Keep LOG_LEVEL and ALIAS_OVERRIDES_FILE from the host out of the tool."""
    with patch.dict("os.environ", {}, clear=True):
        yield


def run(cli: ModuleType, argv: list[str]) -> int:
    """Run main() without reconfiguring the root logger or reading a local .env."""
    with patch.object(cli, "configure_logging"), patch.object(cli, "load_dotenv"):
        return cli.main(argv)


class TestMain:
    """Test the command line entry point."""

    def test_text_output(self, cli, region_roster_file, capsys):
        exit_code = run(cli, ["--roster-file", str(region_roster_file), "@Peacock @Mani Pedi @Newguy"])

        assert exit_code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "official   Peacock",
            "official   Manny Pedi",
            "UNKNOWN    Newguy",
            "TOTAL      2 official, 1 unofficial",
        ]

    def test_json_output(self, cli, region_roster_file, capsys):
        exit_code = run(cli, ["--roster-file", str(region_roster_file), "--json", "Spreadem Super"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == [
            {"is_official": True, "name": "Spread'em", "unknown_name": None},
            {"is_official": False, "name": None, "unknown_name": "Super"},
        ]

    def test_reads_comment_from_stdin(self, cli, region_roster_file, capsys):
        with patch("sys.stdin", io.StringIO("Denali\nPAX: 2\n@Herbie\n@Potts\n")):
            exit_code = run(cli, ["--roster-file", str(region_roster_file)])

        assert exit_code == 0
        assert "TOTAL      2 official, 0 unofficial" in capsys.readouterr().out

    def test_archived_members_not_matched(self, cli, region_roster_file, capsys):
        run(cli, ["--roster-file", str(region_roster_file), "@Bandwagon"])
        assert "UNKNOWN    Bandwagon" in capsys.readouterr().out

    def test_skip_role_labels(self, cli, region_roster_file, capsys):
        run(cli, ["--roster-file", str(region_roster_file), "--skip-role-labels", "VQ Peacock 15"])
        assert capsys.readouterr().out.splitlines()[-1] == "TOTAL      1 official, 0 unofficial"

    def test_overrides_file(self, cli, tmp_path, capsys):
        roster = tmp_path / "roster.txt"
        roster.write_text("Deuce\n", encoding="utf-8")
        overrides = tmp_path / "aliases.json"
        overrides.write_text(json.dumps([{"mention": "Duece", "canonical": "Deuce"}]), encoding="utf-8")

        run(cli, ["--roster-file", str(roster), "--overrides-file", str(overrides), "@Duece"])
        assert "official   Deuce" in capsys.readouterr().out

    def test_overrides_file_from_environment(self, cli, tmp_path, capsys):
        roster = tmp_path / "roster.txt"
        roster.write_text("Deuce\n", encoding="utf-8")
        overrides = tmp_path / "aliases.json"
        overrides.write_text(json.dumps([{"mention": "Duece", "canonical": "Deuce"}]), encoding="utf-8")

        with patch.dict("os.environ", {"ALIAS_OVERRIDES_FILE": str(overrides)}):
            run(cli, ["--roster-file", str(roster), "@Duece"])
        assert "official   Deuce" in capsys.readouterr().out


class TestConfigErrors:
    """Configuration problems exit with status 2 and a message on stderr."""

    def test_missing_roster_file(self, cli, tmp_path, capsys):
        exit_code = run(cli, ["--roster-file", str(tmp_path / "missing.txt"), "@Peacock"])

        assert exit_code == cli.EXIT_CONFIG_ERROR
        assert "ERROR: Cannot read roster file" in capsys.readouterr().err

    def test_alias_collision(self, cli, tmp_path, capsys):
        roster = tmp_path / "roster.txt"
        roster.write_text("Peacock\npeacock\n", encoding="utf-8")

        exit_code = run(cli, ["--roster-file", str(roster), "@Peacock"])

        assert exit_code == 2
        assert "maps to both" in capsys.readouterr().err

    def test_malformed_overrides_file(self, cli, region_roster_file, tmp_path, capsys):
        overrides = tmp_path / "aliases.json"
        overrides.write_text("{not json", encoding="utf-8")

        exit_code = run(cli, ["--roster-file", str(region_roster_file), "--overrides-file", str(overrides), "x"])

        assert exit_code == 2
        assert "Invalid JSON" in capsys.readouterr().err


class TestFormatRecords:
    def test_empty(self, cli):
        assert cli.format_records([]) == "TOTAL      0 official, 0 unofficial"
