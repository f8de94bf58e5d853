"""Tests for the command line interface."""

import json

import pytest

from treetiles.cli import main, parse_weight


def test_parse_weight_accepts_labels():
    item = parse_weight("docs=2.5")
    assert (item.label, item.weight) == ("docs", 2.5)
    assert parse_weight("4").label == ""


def test_weights_print_json_tiles(capsys):
    assert main(["3", "big=1", "--bounds", "0", "0", "100", "100", "--json"]) == 0
    tiles = json.loads(capsys.readouterr().out)
    assert [tile["label"] for tile in tiles] == ["item0", "big"]
    assert (tiles[0]["x"], tiles[0]["y"], tiles[0]["width"], tiles[0]["height"]) == (0, 0, 100, 75)
    assert (tiles[1]["x"], tiles[1]["y"], tiles[1]["width"], tiles[1]["height"]) == (0, 75, 100, 25)


def test_weights_print_tab_separated_lines(capsys):
    assert main(["1", "1", "--bounds", "0", "0", "200", "100"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].split("\t") == ["item0", "0.0000", "0.0000", "100.0000", "100.0000"]
    assert lines[1].split("\t") == ["item1", "100.0000", "0.0000", "100.0000", "100.0000"]


def test_tree_file_is_laid_out_recursively(tmp_path, capsys):
    tree_file = tmp_path / "tree.json"
    tree_file.write_text(
        json.dumps({"name": "root", "children": [{"name": "a", "value": 1}, {"name": "b", "value": 1}]}),
        encoding="utf-8",
    )
    assert main(["--tree", str(tree_file), "--bounds", "0", "0", "200", "100", "--json"]) == 0
    tiles = json.loads(capsys.readouterr().out)
    assert [tile["label"] for tile in tiles] == ["root", "root/a", "root/b"]
    assert [tile["depth"] for tile in tiles] == [0, 1, 1]


def test_invalid_weight_reports_error(capsys):
    assert main(["neg=-1"]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_missing_tree_file_reports_error(tmp_path, capsys):
    assert main(["--tree", str(tmp_path / "nope.json")]) == 2
    assert "error:" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["abc"], ["1", "--tree", "x.json"], ["1", "--log-level", "chatty"]])
def test_usage_errors_exit_with_status_2(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
