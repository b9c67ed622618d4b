"""Tests for the CLI entry points."""

import json
from pathlib import Path

from click.testing import CliRunner

from matchup_graph import __version__
from matchup_graph.cli import cli
from matchup_graph.render.constants import CONFERENCE_COLORS

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
EXAMPLE_JSON = EXAMPLES_DIR / "minnesota_notre_dame.json"


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_info():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(EXAMPLE_JSON)])
    assert result.exit_code == 0, result.output
    assert "Teams: 10" in result.output
    assert "Games: 10" in result.output
    assert "Connections: 10" in result.output
    assert "CONFERENCE, NON_CONFERENCE" in result.output


def test_info_invalid_file(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(bad)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_path_shows_canonical_path_and_layers():
    runner = CliRunner()
    result = runner.invoke(cli, ["path", str(EXAMPLE_JSON), "min", "nd"])
    assert result.exit_code == 0, result.output
    assert "Path: Minnesota -> Oregon -> USC -> Notre Dame" in result.output
    assert "Hops: 3" in result.output
    assert "[1.5] Purdue" in result.output
    assert "Crossings:" in result.output


def test_path_no_connection():
    runner = CliRunner()
    result = runner.invoke(cli, ["path", str(EXAMPLE_JSON), "min", "bama", "-d", "6"])
    assert result.exit_code == 0, result.output
    assert "No connection within 6 degrees" in result.output


def test_path_category_filter():
    runner = CliRunner()
    result = runner.invoke(
        cli, ["path", str(EXAMPLE_JSON), "min", "nd", "--category", "CONFERENCE"]
    )
    assert result.exit_code == 0, result.output
    assert "No connection" in result.output


def test_path_unknown_team():
    runner = CliRunner()
    result = runner.invoke(cli, ["path", str(EXAMPLE_JSON), "min", "nobody"])
    assert result.exit_code == 1
    assert "unknown team 'nobody'" in result.output


def test_path_rejects_degree_out_of_range():
    runner = CliRunner()
    result = runner.invoke(cli, ["path", str(EXAMPLE_JSON), "min", "nd", "-d", "9"])
    assert result.exit_code != 0


def test_layout_json_stdout():
    runner = CliRunner()
    result = runner.invoke(cli, ["layout", str(EXAMPLE_JSON), "min", "nd"])
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert doc["shortest_path"] == ["min", "ore", "usc", "nd"]
    assert doc["degrees"]["pur"] == 1.5
    assert doc["empty"] is False
    assert set(doc["positions"]) == {"min", "ore", "pur", "usc", "nd"}


def test_layout_json_file(tmp_path):
    out = tmp_path / "layout.json"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["layout", str(EXAMPLE_JSON), "min", "nd", "-d", "5", "-o", str(out)]
    )
    assert result.exit_code == 0, result.output
    doc = json.loads(out.read_text())
    assert "mich" in doc["positions"]
    assert f"-> {out}" in result.output


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(EXAMPLE_JSON), "min", "nd", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    content = out.read_text()
    assert "<svg" in content
    assert "Minnesota vs Notre Dame" in content
    assert "Rendered 5 teams" in result.output


def test_render_default_output(tmp_path):
    """render command names the file after the two teams when no -o given."""
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(cli, ["render", str(EXAMPLE_JSON), "min", "nd"])
        assert result.exit_code == 0, result.output
        assert Path("min_nd.svg").exists()


def test_render_empty(tmp_path):
    out = tmp_path / "empty.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(EXAMPLE_JSON), "min", "bama", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "No connection within 3 degrees" in result.output
    assert "No connection between Minnesota and Alabama" in out.read_text()


def test_render_light_theme_and_display_degree(tmp_path):
    out = tmp_path / "light.svg"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["render", str(EXAMPLE_JSON), "min", "nd", "-o", str(out),
         "--theme", "light", "--display-degree", "1"],
    )
    assert result.exit_code == 0, result.output
    content = out.read_text()
    assert "Purdue" not in content


def test_verbose_streams_events():
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "path", str(EXAMPLE_JSON), "min", "nd"])
    assert result.exit_code == 0, result.output
    assert "[subgraph.built]" in result.output
    assert "[layers.bridge] node=pur" in result.output


def test_render_uses_conferences_and_edge_stats(tmp_path):
    out = tmp_path / "styled.svg"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["render", str(EXAMPLE_JSON), "min", "nd", "-o", str(out), "--theme", "light"]
    )
    assert result.exit_code == 0, result.output
    content = out.read_text()
    # Oregon, Purdue and USC are Big Ten teams
    assert CONFERENCE_COLORS["b1g"] in content
    assert "1 (lev: 0.90)" in content
