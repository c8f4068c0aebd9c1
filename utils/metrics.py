# utils/metrics.py
import numpy as np
from typing import Dict, List, Optional, Sequence

from rota.model import AssignmentResult


def fill_rate(snapshot: Dict[str, Dict[str, Optional[str]]]) -> float:
    cells = [v for row in snapshot.values() for v in row.values()]
    if not cells:
        return 0.0
    return sum(v is not None for v in cells) / len(cells)


def occupancy_by_station(snapshot: Dict[str, Dict[str, Optional[str]]]) -> Dict[str, int]:
    return {s: sum(v is not None for v in row.values()) for s, row in snapshot.items()}


def compute_gini(values: List[float]) -> float:
    """0 = placements spread evenly across stations, -> 1 = piled onto one."""
    arr = np.array(values, dtype=float)
    if arr.size == 0 or np.all(arr == 0):
        return 0.0
    arr = np.sort(arr)
    n = arr.size
    cum = np.cumsum(arr)
    return (n + 1 - 2 * np.sum(cum) / cum[-1]) / n


def summarize_trials(results: Sequence[AssignmentResult]) -> Dict[str, float]:
    if not results:
        return dict(trials=0, fill_rate_mean=0.0, complete_share=0.0,
                    unassigned_mean=0.0, attempts_max=0, gini_mean=0.0)
    snaps = [r.grid.snapshot() for r in results]
    attempts = [a for r in results for a in r.attempts]
    return dict(
        trials=len(results),
        fill_rate_mean=float(np.mean([fill_rate(s) for s in snaps])),
        complete_share=float(np.mean([r.complete for r in results])),
        unassigned_mean=float(np.mean([len(r.unassigned) for r in results])),
        attempts_max=int(max(attempts)) if attempts else 0,
        gini_mean=float(np.mean([compute_gini(list(occupancy_by_station(s).values())) for s in snaps])),
    )
