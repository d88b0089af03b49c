from dataclasses import replace

import pytest

from calendar_solver.api import resolve_puzzle_asset
from calendar_solver.cli import main
from calendar_solver.layout import default_puzzle
from calendar_solver.yaml_io import load_puzzle_yaml, write_puzzle_yaml


@pytest.fixture
def mini_config(tmp_path, mini_puzzle) -> str:
    path = tmp_path / "mini.yaml"
    write_puzzle_yaml(path, mini_puzzle)
    return str(path)


def test_solves_date(mini_config, capsys):
    assert main(["--config", mini_config, "--month", "1", "--day", "3"]) == 0
    out = capsys.readouterr().out
    assert "Jan  1  1\n  3  2  2" in out
    assert "Solved in 2 nodes" in out


def test_unsolvable_date_exits_1(mini_config, capsys):
    assert main(["--config", mini_config, "--month", "1", "--day", "2"]) == 1
    assert "No solution found." in capsys.readouterr().out


def test_node_limit_exits_1(mini_config, capsys):
    args = ["--config", mini_config, "--month", "1", "--day", "3", "--max-nodes", "1"]
    assert main(args) == 1
    assert "Search stopped after 1 nodes." in capsys.readouterr().out


def test_explicit_reserved_cells(mini_config):
    assert main(["--config", mini_config, "--reserve", "0,0", "--reserve", "1,0"]) == 0


def test_invalid_input_exits_2(mini_config, capsys):
    assert main(["--config", mini_config, "--month", "2", "--day", "1"]) == 2
    assert "Invalid input" in capsys.readouterr().out
    assert main(["--config", mini_config, "--reserve", "0,0"]) == 2
    assert "Invalid puzzle" in capsys.readouterr().out
    assert main(["--config", mini_config, "--reserve", "0,0", "--reserve", "4,4"]) == 2


def test_bad_cell_argument_is_rejected(mini_config):
    with pytest.raises(SystemExit):
        main(["--config", mini_config, "--reserve", "a,b"])


def test_survey(mini_config, capsys):
    assert main(["--config", mini_config, "--survey"]) == 0
    out = capsys.readouterr().out
    assert "3/5 dates solvable" in out
    assert "Jan 2: unsolvable" in out


def test_write_template(tmp_path, capsys):
    target = tmp_path / "template.yaml"
    assert main(["--write-template", "--config", str(target)]) == 0
    assert load_puzzle_yaml(target) == default_puzzle()
    assert "Wrote template config" in capsys.readouterr().out


def test_puzzle_without_dates_is_solved_with_no_reservations(capsys):
    strip = str(resolve_puzzle_asset("tetromino_strip"))
    assert main(["--config", strip]) == 0
    out = capsys.readouterr().out
    assert "  1  1  1  1  2  2  2  2" in out
    assert "Solved in 2 nodes" in out


def test_survey_without_dates(capsys):
    strip = str(resolve_puzzle_asset("tetromino_strip"))
    assert main(["--config", strip, "--survey"]) == 0
    assert "nothing to survey" in capsys.readouterr().out


def test_survey_with_wrong_reserved_count_exits_2(tmp_path, mini_puzzle, capsys):
    path = tmp_path / "three.yaml"
    write_puzzle_yaml(path, replace(mini_puzzle, reserved_count=3))
    assert main(["--config", str(path), "--survey"]) == 2
    assert "Invalid puzzle: Expected 3 reserved cells, got 2" in capsys.readouterr().out


@pytest.mark.parametrize(
    "text",
    [
        "rows: [6, x]\npieces: [{id: 1, cells: [[0, 0]]}]\n",
        "rows: [2]\npieces: []\n",
        "rows: [6\n",
    ],
)
def test_malformed_config_exits_2(tmp_path, capsys, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    assert main(["--config", str(path)]) == 2
    assert "Invalid" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["--month", "--day"])
def test_month_and_day_go_together(mini_config, flag):
    with pytest.raises(SystemExit):
        main(["--config", mini_config, flag, "1"])
