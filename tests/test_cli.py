"""Tests for the relgraph CLI (render / dot / inspect)."""

from __future__ import annotations

import json
from pathlib import Path

import graphviz
import pytest
from typer.testing import CliRunner

from cli.main import app
from relgraph.config import settings

runner = CliRunner()

FIXTURE = Path(__file__).parent / "fixtures" / "contoso.json"


@pytest.fixture
def fake_render(monkeypatch):
    """Stub out the Graphviz executables; write marker files instead."""

    def _render(self, filename=None, directory=None, format=None, cleanup=False, **kwargs):
        path = Path(directory) / f"{filename}.{format}"
        path.write_bytes(b"rendered")
        return str(path)

    monkeypatch.setattr(graphviz.Graph, "render", _render)


def test_inspect_prints_tree():
    """inspect lists every cluster, the key nodes and the edges."""
    result = runner.invoke(app, ["inspect", "--input", str(FIXTURE)])
    assert result.exit_code == 0
    assert "ContosoSales" in result.stdout
    assert "Contact (contact)" in result.stdout
    assert "Marketing List (list)" in result.stdout
    assert "accountid (Key)" in result.stdout
    assert "contact-parentcustomerid --[*|1]--> account-accountid" in result.stdout
    assert "contact-contactid --[*|*]--> list-listid" in result.stdout


def test_inspect_verbose_lists_skipped_lookups():
    """inspect --verbose also shows lookups that could not be resolved."""
    quiet = runner.invoke(app, ["inspect", "--input", str(FIXTURE)])
    assert "unresolved_lookup" not in quiet.stdout

    verbose = runner.invoke(app, ["inspect", "--input", str(FIXTURE), "--verbose"])
    assert verbose.exit_code == 0
    assert "unresolved_lookup" in verbose.stdout
    assert "msdyn_region" in verbose.stdout


def test_dot_prints_source():
    """dot writes the undirected DOT source to stdout."""
    result = runner.invoke(app, ["dot", "--input", str(FIXTURE)])
    assert result.exit_code == 0
    assert result.stdout.startswith("graph ContosoSales {")
    assert "subgraph cluster_contact {" in result.stdout


def test_render_writes_files(tmp_path, fake_render):
    """render writes one SVG and one PNG into the output directory."""
    out_dir = tmp_path / "diagrams"
    result = runner.invoke(
        app, ["render", "--input", str(FIXTURE), "--output", str(out_dir), "--basename", "erd"]
    )
    assert result.exit_code == 0
    assert (out_dir / "erd.svg").exists()
    assert (out_dir / "erd.png").exists()
    assert "Clusters: 4  Edges: 3" in result.stdout


def test_render_reports_warnings(tmp_path, fake_render):
    """Metadata gaps are echoed as warnings but do not fail the command."""
    doc = json.loads(FIXTURE.read_text(encoding="utf-8"))
    doc["tables"][3]["primary_column"] = None  # 'list' loses its key
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(doc), encoding="utf-8")

    result = runner.invoke(app, ["render", "--input", str(path), "--output", str(tmp_path)])
    assert result.exit_code == 0
    assert "missing_primary_key" in result.stdout


def test_render_fails_when_graphviz_missing(tmp_path, monkeypatch):
    """A rendering failure aborts with exit code 1."""

    def _boom(self, *args, **kwargs):
        raise graphviz.ExecutableNotFound(["dot"])

    monkeypatch.setattr(graphviz.Graph, "render", _boom)
    result = runner.invoke(app, ["render", "--input", str(FIXTURE), "--output", str(tmp_path)])
    assert result.exit_code == 1
    assert "Graphviz failed" in result.stdout


def test_missing_input_file(tmp_path):
    """An unreadable metadata document exits with code 1."""
    result = runner.invoke(app, ["inspect", "--input", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "not found" in result.stdout


def test_input_not_utf8(tmp_path):
    """A document that is not UTF-8 is reported instead of crashing."""
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"name": "\xff"}')
    result = runner.invoke(app, ["inspect", "--input", str(path)])
    assert result.exit_code == 1
    assert "[inspect] ❌" in result.stdout
    assert "not valid UTF-8" in result.stdout


def test_unknown_log_level_is_a_usage_error():
    """An unknown --log-level is rejected before any command runs."""
    result = runner.invoke(app, ["--log-level", "bogus", "inspect", "--input", str(FIXTURE)])
    assert result.exit_code == 2
    assert "BOGUS" in result.output


def test_unknown_log_level_from_settings(monkeypatch):
    """A bad RELGRAPH_LOG_LEVEL is reported the same way."""
    monkeypatch.setattr(settings, "log_level", "loud")
    result = runner.invoke(app, ["inspect", "--input", str(FIXTURE)])
    assert result.exit_code == 2
    assert "LOUD" in result.output
