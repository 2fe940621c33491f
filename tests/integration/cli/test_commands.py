"""Integration tests for the format, check, and inspect commands"""

import json

from typer.testing import CliRunner

from mdoutline.cli.cli import app


MESSY = "# Title\n- item one\n      - sub item\n- item two\n"
CLEAN = "# Title\n\t- item one\n\t\t- sub item\n\t- item two\n"


def test_format_prints_to_stdout(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "notes.md").write_text(MESSY)

    result = CliRunner().invoke(app, ["format", "notes.md"])

    assert result.exit_code == 0, result.output
    assert result.output == CLEAN
    assert (tmp_path / "notes.md").read_text() == MESSY


def test_format_in_place(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "notes.md").write_text(MESSY)

    result = CliRunner().invoke(app, ["format", "--in-place", "."])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "notes.md").read_text() == CLEAN
    assert "1 changed" in result.output


def test_format_stdin_with_spaces(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(
        app, ["format", "-", "--indent-style", "space", "--indent-size", "2"], input=MESSY,
    )
    assert result.exit_code == 0, result.output
    assert result.output == "# Title\n  - item one\n    - sub item\n  - item two\n"


def test_format_diff(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "notes.md").write_text(MESSY)

    result = CliRunner().invoke(app, ["format", "--diff", "notes.md"])

    assert result.exit_code == 0, result.output
    assert "--- a/notes.md" in result.output
    assert "+\t\t- sub item" in result.output


def test_format_invalid_style_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "notes.md").write_text(MESSY)
    result = CliRunner().invoke(app, ["format", "--indent-style", "dots", "notes.md"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_format_missing_path_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(app, ["format", "missing.md"])
    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_check_reports_unformatted(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "messy.md").write_text(MESSY)
    (tmp_path / "clean.md").write_text(CLEAN)

    result = CliRunner().invoke(app, ["check", "."])

    assert result.exit_code == 1
    assert "would reformat: messy.md (3 reindented, 0 rewritten)" in result.output
    assert "clean.md" not in result.output
    assert "Checked 2 file(s), 1 would change" in result.output


def test_check_passes_on_clean_tree(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "clean.md").write_text(CLEAN)
    result = CliRunner().invoke(app, ["check", "clean.md"])
    assert result.exit_code == 0, result.output


def test_inspect_outputs_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "notes.md").write_text(MESSY)

    result = CliRunner().invoke(app, ["inspect", "notes.md"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    lines = data["blocks"][1]["lines"]
    assert [l["indent_level"] for l in lines] == [1, 2, 1]
    assert lines[1]["line_type"] == "list_bullet_point"
    assert lines[1]["raw_indent"] == 6


def test_format_in_place_rejects_stdin(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(app, ["format", "--in-place", "-"], input=MESSY)
    assert result.exit_code == 1
    assert "Cannot rewrite stdin in place" in result.output
    assert "Formatted" not in result.output
