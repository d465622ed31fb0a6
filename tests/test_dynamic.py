import random

import pytest

from classicalgos.bruteforce import solve_bruteforce
from classicalgos.dynamic import main, solve_dynamic
from classicalgos.generator import generate_problem
from classicalgos.knapsack_items import Item

ITEMS = [Item("A", 10, 5), Item("B", 20, 10), Item("C", 15, 10)]


def test_worked_example():
    result = solve_dynamic(ITEMS, 15)
    assert result.profit == 30
    assert result.weight == 15
    assert result.items == [Item("A", 10, 5), Item("B", 20, 10)]
    assert result.count == len([item for item in ITEMS if item.weight <= result.weight])


@pytest.mark.parametrize("seed", range(8))
def test_profit_is_optimal_and_weight_minimal(seed):
    items, capacity = generate_problem(random.Random(seed))
    result = solve_dynamic(items, capacity)
    assert result.profit == solve_bruteforce(items, capacity).profit
    assert result.weight <= capacity
    assert solve_bruteforce(items, result.weight).profit == result.profit
    assert solve_bruteforce(items, result.weight - 1).profit < result.profit


@pytest.mark.parametrize("seed", range(5))
def test_listed_items_fit_capacity(seed):
    items, capacity = generate_problem(random.Random(seed))
    result = solve_dynamic(items, capacity)
    assert all(item.weight <= capacity for item in result.items)
    assert result.count == sum(1 for item in items if item.weight <= result.weight)


def test_zero_capacity_gives_nothing():
    result = solve_dynamic(ITEMS, 0)
    assert result.profit == 0
    assert result.weight == 0
    assert result.count == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        solve_dynamic(ITEMS, -1)


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        solve_dynamic([Item("A", 1, -2)], 5)


def test_main_writes_report(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "in.txt"
    source.write_text("3 15\nA 10 5\nB 20 10\nC 15 10")
    assert main([str(source)]) == 0
    lines = (tmp_path / "output2.txt").read_text().splitlines()
    assert lines == ["3 30 15", "A 10 5", "B 20 10"]
    assert "output2.txt" in capsys.readouterr().out


def test_main_usage_and_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert not (tmp_path / "output2.txt").exists()