# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from name_validator.cli import app

runner = CliRunner()


def test_check_json_output():
    result = runner.invoke(app, ["check", "Dr. Jane Doe Jr", "Smith, John Michael", "--json"])
    assert result.exit_code == 0, result.output

    data = json.loads(result.stdout)
    assert data[0]["honorific"] == "Dr"
    assert data[0]["suffix"] == "JR"
    assert data[1]["isCommaFormat"] is True
    assert data[1]["middleName"] == "Michael"


def test_check_table_output():
    result = runner.invoke(app, ["check", "Ludwig van Beethoven"])
    assert result.exit_code == 0, result.output
    assert "Names" in result.stdout


def test_split_writes_outputs(tmp_path):
    src = tmp_path / "people.csv"
    src.write_text("Name\nJohn Smith\ntest user\n", encoding="utf-8")
    full = tmp_path / "full.csv"

    result = runner.invoke(app, ["split", str(src), "--full-report", str(full)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "people_split.csv").exists()
    assert full.exists()
    assert "Total rows" in result.stdout


def test_split_with_filter_and_custom_out(tmp_path):
    src = tmp_path / "people.csv"
    src.write_text("Name\nJohn Smith\ntest user\n", encoding="utf-8")
    out = tmp_path / "clean.csv"

    result = runner.invoke(app, ["split", str(src), "--filter", "--out", str(out), "--chunk-size", "1"])
    assert result.exit_code == 0, result.output

    lines = out.read_text(encoding="utf-8-sig").splitlines()
    assert lines == ["First_Name,Last_Name", "John,Smith"]


def test_split_without_detectable_column_exits_2(tmp_path):
    src = tmp_path / "ab.csv"
    src.write_text("a,b\n1,2\n", encoding="utf-8")

    result = runner.invoke(app, ["split", str(src)])
    assert result.exit_code == 2


def test_stats_command(tmp_path):
    src = tmp_path / "people.csv"
    src.write_text("id,Full Name\n1,John Smith\n2,王小明\n", encoding="utf-8")

    result = runner.invoke(app, ["stats", str(src)])
    assert result.exit_code == 0, result.output
    assert "Full Name" in result.stdout
    assert not (tmp_path / "people_split.csv").exists()
