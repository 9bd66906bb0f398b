"""Tests for multiorder.io and the command-line entry point."""
import io

from multiorder.cli import main
from multiorder.io.pathsets import parse_path_line, read_edgelist_graph, read_paths

EDGES_TXT = "1 2\n2 4\n2 3\n3 1\n4 1\n4 2\n"


# --- readers ---

def test_parse_path_line_separators():
    assert parse_path_line("1 2 3") == (1, 2, 3)
    assert parse_path_line("1,2, 3\n") == (1, 2, 3)
    assert parse_path_line("7") == (7,)


def test_parse_path_line_blank_and_comment():
    assert parse_path_line("") == ()
    assert parse_path_line("   \n") == ()
    assert parse_path_line("# header") == ()
    assert parse_path_line("4 2 # trailing") == (4, 2)


def test_read_paths_from_lines():
    src = io.StringIO("# sample\n1 2\n\n1 2\n3 1 2\n")
    assert read_paths(src) == [(1, 2), (1, 2), (3, 1, 2)]


def test_read_paths_from_file(tmp_path):
    f = tmp_path / "paths.txt"
    f.write_text("1 2 3\n4,2,4\n")
    assert read_paths(str(f)) == [(1, 2, 3), (4, 2, 4)]


def test_read_edgelist_graph(tmp_path):
    f = tmp_path / "edges.txt"
    f.write_text(EDGES_TXT)
    G = read_edgelist_graph(str(f))
    assert G.is_directed()
    assert sorted(G.nodes()) == [1, 2, 3, 4]
    assert G.number_of_edges() == 6
    assert G.has_edge(4, 2) and not G.has_edge(3, 4)


# --- cli ---

def _write(tmp_path, paths_txt, edges_txt=EDGES_TXT):
    p = tmp_path / "paths.txt"
    e = tmp_path / "edges.txt"
    p.write_text(paths_txt)
    e.write_text(edges_txt)
    return str(p), str(e)


def test_cli_selects_order(tmp_path, capsys):
    p, e = _write(tmp_path, "1 2 3\n" * 10 + "4 2 4\n" * 10)
    assert main([p, e]) == 0
    assert capsys.readouterr().out.strip() == "order=1 stopped_reason=significant"


def test_cli_max_order(tmp_path, capsys):
    p, e = _write(tmp_path, "1 2 3\n" * 5 + "1 2 4\n" * 5)
    assert main([p, e, "--max-order", "1", "--significance", "0.05"]) == 0
    assert capsys.readouterr().out.strip() == "order=1 stopped_reason=k_cap"


def test_cli_empty_sample(tmp_path, capsys):
    p, e = _write(tmp_path, "# nothing\n")
    assert main([p, e]) == 1
    assert "error:" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt"), str(tmp_path / "nope2.txt")]) == 1
    assert "error:" in capsys.readouterr().err
