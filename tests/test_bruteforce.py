import random

import pytest

from classicalgos.bruteforce import main, solve_bruteforce
from classicalgos.dynamic import solve_dynamic
from classicalgos.generator import generate_problem
from classicalgos.knapsack_items import Item, parse_problem

ITEMS = [Item("A", 10, 5), Item("B", 20, 10), Item("C", 15, 10)]


def test_worked_example():
    result = solve_bruteforce(ITEMS, 15)
    assert result.profit == 30
    assert result.weight == 15
    assert [item.name for item in result.items] == ["Item1", "Item2"]
    assert result.count == len(result.items)


def test_nothing_fits():
    result = solve_bruteforce([Item("A", 5, 10)], 3)
    assert result.items == []
    assert result.profit == 0
    assert result.count == 0


def test_items_are_labelled_by_position():
    result = solve_bruteforce([Item("x", 1, 1), Item("y", 2, 1)], 2)
    assert [item.name for item in result.items] == ["Item1", "Item2"]
    assert [item.profit for item in result.items] == [1, 2]


@pytest.mark.parametrize("seed", range(8))
def test_matches_dynamic_optimum(seed):
    items, capacity = generate_problem(random.Random(seed))
    result = solve_bruteforce(items, capacity)
    assert result.weight <= capacity
    assert result.profit == sum(item.profit for item in result.items)
    assert result.weight == sum(item.weight for item in result.items)
    assert result.profit == solve_dynamic(items, capacity).profit


def test_main_writes_report(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "in.txt"
    source.write_text("3 15\nA 10 5\nB 20 10\nC 15 10")
    assert main([str(source)]) == 0
    lines = (tmp_path / "output1.txt").read_text().splitlines()
    assert lines[0] == "2 30 15"
    assert lines[1:] == ["Item1 10 5", "Item2 20 10"]
    items, _ = parse_problem(source.read_text())
    assert len(items) == 3


def test_main_usage_and_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert not (tmp_path / "output1.txt").exists()