"""Integration tests for the command line."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from paliscript.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_scripts(runner: CliRunner):
    result = runner.invoke(cli, ["scripts"])

    assert result.exit_code == 0
    assert result.output.split() == ["THAI", "KHMER", "MYANMAR", "SINHALA", "DEVANAGARI"]


def test_convert_argument(runner: CliRunner):
    result = runner.invoke(cli, ["convert", "-s", "devanagari", "Namo"])

    assert result.exit_code == 0
    assert result.output == "नमो\n"


def test_convert_stdin_defaults_to_thai(runner: CliRunner):
    result = runner.invoke(cli, ["convert"], input="kha\n")

    assert result.exit_code == 0
    assert result.output == "ข\n"


def test_convert_numbers(runner: CliRunner):
    result = runner.invoke(cli, ["convert", "-s", "DEVANAGARI", "--numbers", "12"])

    assert result.output == "१२\n"


def test_convert_pali_only_thai(runner: CliRunner):
    result = runner.invoke(cli, ["convert", "--pali-only-thai", "ña"])

    assert result.output == "\uf70f\n"


def test_unknown_script_rejected(runner: CliRunner):
    result = runner.invoke(cli, ["convert", "-s", "latin", "ka"])

    assert result.exit_code == 2


def test_settings_override(runner: CliRunner, tmp_path: Path):
    config = tmp_path / "settings.yaml"
    config.write_text("conversion:\n  script: KHMER\n", encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(config), "convert", "kā"])

    assert result.exit_code == 0
    assert result.output == "កា\n"


def test_missing_settings_file(runner: CliRunner, tmp_path: Path):
    result = runner.invoke(cli, ["--config", str(tmp_path / "missing.yaml"), "scripts"])

    assert result.exit_code == 1


def test_malformed_settings_file(runner: CliRunner, tmp_path: Path):
    config = tmp_path / "bad.yaml"
    config.write_text("logging: [unclosed\n", encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(config), "convert", "ka"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error: Invalid settings file" in result.output


def test_file_command_name_clash(runner: CliRunner, tmp_path: Path):
    for folder in ("a", "b"):
        (tmp_path / folder).mkdir()
        (tmp_path / folder / "sutta.txt").write_text("ka\n", encoding="utf-8")

    result = runner.invoke(
        cli,
        ["file", str(tmp_path / "a" / "sutta.txt"), str(tmp_path / "b" / "sutta.txt"), "-o", str(tmp_path / "out")],
    )

    assert result.exit_code == 1
    assert "Error: Sources would overwrite each other" in result.output


def test_file_command(runner: CliRunner, tmp_path: Path):
    src = tmp_path / "sutta.txt"
    src.write_text("evaṃ me sutaṃ\n", encoding="utf-8")
    out_dir = tmp_path / "out"

    result = runner.invoke(cli, ["file", str(src), "-o", str(out_dir), "-s", "sinhala", "--workers", "1"])

    assert result.exit_code == 0, result.output
    assert (out_dir / "sutta.sinhala.txt").read_text(encoding="utf-8") == "එවං මෙ සුතං\n"


def test_jsonl_command(runner: CliRunner, tmp_path: Path):
    src = tmp_path / "in.jsonl"
    src.write_text('{"pali": "ka"}\n', encoding="utf-8")
    dst = tmp_path / "out.jsonl"

    result = runner.invoke(cli, ["jsonl", str(src), str(dst), "-f", "pali", "-s", "thai", "-s", "myanmar"])

    assert result.exit_code == 0, result.output
    assert json.loads(dst.read_text(encoding="utf-8")) == {
        "pali": "ka",
        "pali_thai": "ก",
        "pali_myanmar": "က",
    }


def test_table_command_error(runner: CliRunner, tmp_path: Path):
    src = tmp_path / "in.csv"
    src.write_text("word\nna\n", encoding="utf-8")

    result = runner.invoke(cli, ["table", str(src), str(tmp_path / "out.csv"), "-c", "text"])

    assert result.exit_code == 1


def test_table_command(runner: CliRunner, tmp_path: Path):
    src = tmp_path / "in.csv"
    src.write_text("text\nna\n", encoding="utf-8")
    dst = tmp_path / "out.csv"

    result = runner.invoke(cli, ["table", str(src), str(dst), "-s", "devanagari"])

    assert result.exit_code == 0, result.output
    assert dst.read_text(encoding="utf-8").splitlines() == ["text,text_devanagari", "na,न"]


def test_check_command(runner: CliRunner, tmp_path: Path):
    src = tmp_path / "in.txt"
    src.write_text("namo\nśāsana\n", encoding="utf-8")

    result = runner.invoke(cli, ["check", str(src), "-s", "thai"])
    assert result.exit_code == 0
    assert "1/2 lines" in result.output
    assert "U+015B" in result.output

    strict = runner.invoke(cli, ["check", str(src), "--strict"])
    assert strict.exit_code == 1
