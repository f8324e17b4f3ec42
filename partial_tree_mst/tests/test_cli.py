import pytest
from click.testing import CliRunner

from partial_tree_mst import cli as cli_module
from partial_tree_mst.cli import cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli_module, "configure_logging", lambda **kwargs: None)


def test_run_prints_tree(tmp_path) -> None:
    path = tmp_path / "triangle.txt"
    path.write_text("3\nA\nB\nC\nA B 1\nB C 2\nA C 3\n")

    result = CliRunner().invoke(cli, ["run", str(path), "--verify"])

    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if line.startswith("{")]
    assert len(lines) == 2
    assert "total weight: 3" in result.output


def test_run_disconnected_graph(tmp_path) -> None:
    path = tmp_path / "split.txt"
    path.write_text("4 A B C D A B 1 C D 1")

    result = CliRunner().invoke(cli, ["run", str(path)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_run_malformed_file(tmp_path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("2 A B A B")

    result = CliRunner().invoke(cli, ["run", str(path)])

    assert result.exit_code == 1
    assert "incomplete edge" in result.output


def test_benchmark_command(tmp_path) -> None:
    result = CliRunner().invoke(
        cli, ["benchmark", "--sizes", "4,8", "--iterations", "1", "--seed", "2",
              "--output", str(tmp_path)]
    )

    assert result.exit_code == 0, result.output
    rows = [
        line.split("\t") for line in result.output.splitlines()
        if line.startswith(("partial_tree\t", "kruskal\t"))
    ]
    assert {(name, size) for name, size, _ in rows} == {
        ("partial_tree", "4"), ("partial_tree", "8"),
        ("kruskal", "4"), ("kruskal", "8"),
    }
    assert len(list(tmp_path.glob("*.json"))) == 2


def test_benchmark_rejects_bad_sizes() -> None:
    result = CliRunner().invoke(cli, ["benchmark", "--sizes", "a,b"])
    assert result.exit_code == 2
