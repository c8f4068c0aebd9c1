# rota/assign.py
"""
Randomized bounded-retry placement
- every individual draws uniform (station, timeslot) coordinates until it
  claims an empty slot or runs out of retries
- no backtracking: a full run can leave slots empty even when capacity suffices
- individuals are processed strictly in the given order; shuffling is the
  caller's job (see shuffle_individuals / run_once)
"""
from typing import List, Optional, Sequence
import numpy as np

from rota.grid import Grid
from rota.model import AssignmentResult, ConfigurationError, Params

MAX_RETRIES = 1000


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def shuffle_individuals(individuals: Sequence[str], rng) -> List[str]:
    """Return a shuffled copy; the input sequence is left as is."""
    order = rng.permutation(len(individuals))
    return [individuals[int(k)] for k in order]


class Assigner:
    def __init__(self, rng=None, max_retries: int = MAX_RETRIES):
        if max_retries < 0:
            raise ConfigurationError(f"max_retries must be >= 0, got {max_retries}")
        self.rng = rng if rng is not None else make_rng()
        self.max_retries = max_retries

    def assign(self, grid: Grid, individuals: Sequence[str]) -> AssignmentResult:
        n_stations, n_timeslots = grid.shape
        if n_stations < 1 or n_timeslots < 1:
            raise ConfigurationError(
                f"cannot assign into a {n_stations}x{n_timeslots} grid "
                "(need at least one station and one timeslot)"
            )

        result = AssignmentResult(grid=grid)
        for individual in individuals:
            result.attempts.append(self._place(grid, individual, result.unassigned))
        return result

    def _place(self, grid: Grid, individual: str, unassigned: List[str]) -> int:
        """Try one individual; returns the number of claim attempts made."""
        n_stations, n_timeslots = grid.shape
        retries = 0
        while True:
            station = int(self.rng.integers(0, n_stations))
            timeslot = int(self.rng.integers(0, n_timeslots))
            if retries > self.max_retries:
                unassigned.append(individual)
                return retries
            if grid.slot_at(station, timeslot).claim(individual):
                return retries + 1
            retries += 1


def run_once(
    stations: Sequence[str],
    timeslots: Sequence[str],
    individuals: Sequence[str],
    params: Params,
    rng=None
) -> AssignmentResult:
    rng = rng if rng is not None else make_rng(params.seed)
    grid = Grid(stations, timeslots)
    ordered = shuffle_individuals(individuals, rng) if params.shuffle else list(individuals)
    return Assigner(rng=rng, max_retries=params.max_retries).assign(grid, ordered)
