"""Tests for fill-rate and trial summary metrics."""

import pytest

from rota.grid import Grid
from rota.model import AssignmentResult
from utils.metrics import compute_gini, fill_rate, occupancy_by_station, summarize_trials


def make_result(occupants, unassigned=()) -> AssignmentResult:
    grid = Grid(["A", "B"], ["1", "2"])
    for (i, j), who in occupants.items():
        grid.slot_at(i, j).claim(who)
    attempts = [1] * len(occupants) + [1001] * len(unassigned)
    return AssignmentResult(grid=grid, unassigned=list(unassigned), attempts=attempts)


def test_fill_rate_counts_occupied_share() -> None:
    snap = {"A": {"1": "ana", "2": None}, "B": {"1": "ben", "2": "cy"}}

    assert fill_rate(snap) == pytest.approx(0.75)
    assert fill_rate({}) == 0.0


def test_occupancy_by_station() -> None:
    snap = {"A": {"1": "ana", "2": None}, "B": {"1": None, "2": None}}

    assert occupancy_by_station(snap) == {"A": 1, "B": 0}


def test_gini_even_and_skewed() -> None:
    assert compute_gini([2, 2]) == pytest.approx(0.0)
    assert compute_gini([0, 0]) == 0.0
    assert compute_gini([0, 4]) == pytest.approx(0.5)


def test_summarize_trials() -> None:
    full = make_result({(0, 0): "a", (0, 1): "b", (1, 0): "c", (1, 1): "d"})
    partial = make_result({(0, 0): "a", (1, 1): "b"}, unassigned=["c"])

    summary = summarize_trials([full, partial])

    assert summary["trials"] == 2
    assert summary["fill_rate_mean"] == pytest.approx(0.75)
    assert summary["complete_share"] == pytest.approx(0.5)
    assert summary["unassigned_mean"] == pytest.approx(0.5)
    assert summary["attempts_max"] == 1001
    assert summary["gini_mean"] == pytest.approx(0.0)


def test_summarize_no_trials() -> None:
    assert summarize_trials([])["trials"] == 0
