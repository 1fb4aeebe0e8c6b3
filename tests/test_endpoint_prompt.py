from rich.console import Console
from rich.prompt import Prompt

from gridroute.render.endpoint_prompt import (
    check_endpoint,
    parse_coordinate,
    prompt_endpoints,
)
from gridroute.search.grid import Grid


def test_parse_coordinate() -> None:
    assert parse_coordinate("1 2") == (1, 2)
    assert parse_coordinate(" 3,4 ") == (3, 4)
    assert parse_coordinate("1") is None
    assert parse_coordinate("a b") is None
    assert parse_coordinate("1 2 3") is None


def test_check_endpoint() -> None:
    grid = Grid.from_rows([[0, 1], [0, 0]])
    assert check_endpoint(grid, (1, 1)) is None
    assert "not empty" in (check_endpoint(grid, (0, 1)) or "")
    assert "not on the grid" in (check_endpoint(grid, (2, 0)) or "")


def test_prompt_endpoints_reasks_until_valid(monkeypatch) -> None:
    grid = Grid.from_rows([[0, 1, 0], [0, 0, 0], [0, 0, 0]])
    answers = iter(["9 9", "0 1", "nope", "0 0", "0 0", "2 2"])
    monkeypatch.setattr(Prompt, "ask", lambda *args, **kwargs: next(answers))
    console = Console(width=100, record=True)

    start, goal = prompt_endpoints(grid, console=console)
    output = console.export_text()

    assert start == (0, 0)
    assert goal == (2, 2)
    assert output.count("Invalid input!") == 4
    assert '"2 2"' in output


def test_prompt_endpoints_asks_only_for_missing_cell(monkeypatch) -> None:
    grid = Grid.from_rows([[0, 0], [0, 0]])
    questions: list[str] = []
    answers = iter(["1 1", "0 1"])

    def fake_ask(question, **kwargs):
        questions.append(question)
        return next(answers)

    monkeypatch.setattr(Prompt, "ask", fake_ask)
    console = Console(width=100, record=True)

    start, goal = prompt_endpoints(grid, console=console, start=(1, 1))

    assert (start, goal) == ((1, 1), (0, 1))
    assert len(questions) == 2
    assert all("finishing" in question for question in questions)
    assert "cannot be the same cell" in console.export_text()

    answers = iter(["1 0"])
    questions.clear()
    start, goal = prompt_endpoints(grid, console=console, goal=(0, 0))

    assert (start, goal) == ((1, 0), (0, 0))
    assert questions and "starting" in questions[0]
