"""
End-to-end tests for the ``bfpaths`` command-line tool.
"""

import json

import pytest

from bfpaths.cli import main

EXAMPLE = "4\nA 2 B 4 C 1\nB 1 C -2\nC 0\nD 0\n"


@pytest.fixture
def graph_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    p = tmp_path / "graph.txt"
    p.write_text(EXAMPLE, encoding="utf-8")
    return p


def test_writes_default_output_files_and_timings(graph_file, capsys):
    code = main([str(graph_file)])

    assert code == 0
    out = capsys.readouterr().out
    assert "loading graph took" in out
    assert "bellman-ford took" in out
    assert "writing paths/costs took" in out
    assert (graph_file.parent / "output.txt").read_text() == "A:0\nB:4\nC:1\nD:INF\n"
    assert (graph_file.parent / "paths.txt").read_text() == "A:\nB:A\nC:A\n"


def test_custom_output_paths(graph_file, tmp_path):
    d = tmp_path / "d.txt"
    p = tmp_path / "p.txt"

    assert main([str(graph_file), "--distances-out", str(d), "--paths-out", str(p)]) == 0
    assert d.read_text().startswith("A:0\n")
    assert p.read_text().startswith("A:\n")
    assert not (tmp_path / "output.txt").exists()


def test_missing_argument_prints_usage_and_fails(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])

    assert exc.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_unreadable_file_is_an_input_error(tmp_path, capsys):
    code = main([str(tmp_path / "nope.txt")])

    assert code == 64
    assert capsys.readouterr().err.startswith("error: cannot open graph file")


def test_non_positive_vertex_count_is_an_input_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    p = tmp_path / "bad.txt"
    p.write_text("0\n", encoding="utf-8")

    assert main([str(p)]) == 64
    assert "vertex count must be positive" in capsys.readouterr().err
    assert not (tmp_path / "output.txt").exists()


def test_negative_max_rounds_is_a_config_error(graph_file, capsys):
    assert main([str(graph_file), "--max-rounds", "-1"]) == 64
    assert "max_rounds" in capsys.readouterr().err


def test_show_graph_prints_adjacency(graph_file, capsys):
    assert main([str(graph_file), "--show-graph"]) == 0
    out = capsys.readouterr().out
    assert "A->B:4,C:1," in out
    assert "D->" in out


def test_json_log_reports_run_summary(graph_file, capsys):
    assert main([str(graph_file), "--log-level", "info", "--log-json"]) == 0

    events = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
    run = [e for e in events if e["event"] == "run"][0]
    assert run["n"] == 4
    assert run["m"] == 3
    assert run["rounds"] == 2
    assert run["converged"] is True
    assert "edges_relaxed" in run


def test_profile_report_goes_to_stderr(graph_file, tmp_path, capsys):
    prof = tmp_path / "run.prof"

    assert main([str(graph_file), "--profile", "--profile-out", str(prof)]) == 0
    assert "function calls" in capsys.readouterr().err
    assert prof.exists()


def test_maximal_weight_is_not_an_internal_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    p = tmp_path / "big.txt"
    p.write_text("2\nA 1 B 9223372036854775807\nB 0\n", encoding="utf-8")

    assert main([str(p)]) == 0
    assert (tmp_path / "output.txt").read_text() == "A:0\nB:INF\n"
    assert (tmp_path / "paths.txt").read_text() == "A:\n"
