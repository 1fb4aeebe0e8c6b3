from pathlib import Path

import pytest

from gridroute.search.contracts import CellState, MalformedGridError
from gridroute.search.grid_loader import (
    GridPaths,
    load_grid_file,
    parse_grid_line,
    parse_grid_text,
)


def test_parse_line_with_and_without_trailing_comma() -> None:
    expected = [CellState.EMPTY, CellState.OBSTACLE, CellState.EMPTY]
    assert parse_grid_line("0,1,0,") == expected
    assert parse_grid_line(" 0, 1 ,0 ") == expected
    assert parse_grid_line("0,2,0") == expected


@pytest.mark.parametrize("line", ["", "   ", "0,x,0,", "0,,1,", "0;1;0"])
def test_parse_line_rejects_bad_rows(line: str) -> None:
    with pytest.raises(MalformedGridError):
        parse_grid_line(line)


def test_parse_text_builds_rectangular_grid() -> None:
    grid = parse_grid_text("0,1,0,0,\n0,1,0,0,\n0,0,0,1,\n\n")

    assert grid.rows == 3
    assert grid.cols == 4
    assert grid.count(CellState.OBSTACLE) == 3


def test_parse_text_rejects_ragged_rows() -> None:
    with pytest.raises(MalformedGridError, match="Line 2"):
        parse_grid_text("0,0,0,\n0,0,\n")


def test_parse_text_rejects_empty_and_gapped_input() -> None:
    with pytest.raises(MalformedGridError):
        parse_grid_text("")
    with pytest.raises(MalformedGridError, match="Line 2"):
        parse_grid_text("0,0,\n\n0,0,\n")


def test_load_grid_file(tmp_path: Path) -> None:
    path = tmp_path / "board.txt"
    path.write_text("0,1,\n0,0,\n", encoding="utf-8")

    grid = load_grid_file(path)

    assert grid.rows == 2
    assert grid.status(0, 1) == CellState.OBSTACLE


def test_load_missing_grid_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_grid_file(tmp_path / "missing.txt")


def test_grid_paths_resolve_bare_names(tmp_path: Path) -> None:
    (tmp_path / "b.txt").write_text("0,\n", encoding="utf-8")
    (tmp_path / "a.txt").write_text("0,\n", encoding="utf-8")
    paths = GridPaths(base_dir=tmp_path)

    assert paths.resolve("no_such_board_here.txt") == tmp_path / "no_such_board_here.txt"
    assert paths.resolve(tmp_path / "a.txt") == tmp_path / "a.txt"
    assert paths.list_grid_files() == ["a.txt", "b.txt"]
    assert GridPaths(base_dir=tmp_path / "absent").list_grid_files() == []
