# rota/grid.py
"""
Station x timeslot slot grid:
- Grid: station -> timeslot -> Slot, built fully empty
- slot_at: indexed access for the assigner (stable first-seen order)
- snapshot / to_frame: read-only views for reporting and CSV export
"""
from typing import Dict, Iterator, List, Optional, Sequence, Tuple
import pandas as pd

from rota.model import Slot


class Grid:
    def __init__(self, stations: Sequence[str], timeslots: Sequence[str]):
        # dict keys: duplicate names collapse into the first occurrence
        timeslot_keys = list(dict.fromkeys(timeslots))
        self._slots: Dict[str, Dict[str, Slot]] = {}
        for s in stations:
            if s in self._slots:
                continue
            self._slots[s] = {t: Slot(station=s, timeslot=t) for t in timeslot_keys}
        self._stations: List[str] = list(self._slots.keys())
        self._timeslots: List[str] = timeslot_keys

    # ---------- dimensions ----------

    @property
    def stations(self) -> Tuple[str, ...]:
        return tuple(self._stations)

    @property
    def timeslots(self) -> Tuple[str, ...]:
        return tuple(self._timeslots)

    @property
    def station_count(self) -> int:
        return len(self._stations)

    @property
    def timeslot_count(self) -> int:
        # timeslots exist only under stations; no rows -> no columns to assign into
        return len(self._timeslots) if self._stations else 0

    @property
    def shape(self) -> Tuple[int, int]:
        return self.station_count, self.timeslot_count

    @property
    def size(self) -> int:
        return self.station_count * self.timeslot_count

    @property
    def occupied_count(self) -> int:
        return sum(1 for slot in self if slot.is_occupied)

    # ---------- access ----------

    def slot_at(self, station_index: int, timeslot_index: int) -> Slot:
        """Slot at 0-based (station, timeslot) position. Negative indices are not wrapped."""
        if not 0 <= station_index < self.station_count:
            raise IndexError(
                f"station index {station_index} out of range for {self.station_count} stations"
            )
        if not 0 <= timeslot_index < self.timeslot_count:
            raise IndexError(
                f"timeslot index {timeslot_index} out of range for {self.timeslot_count} timeslots"
            )
        station = self._stations[station_index]
        return self._slots[station][self._timeslots[timeslot_index]]

    def __iter__(self) -> Iterator[Slot]:
        for row in self._slots.values():
            yield from row.values()

    # ---------- views ----------

    def snapshot(self) -> Dict[str, Dict[str, Optional[str]]]:
        """station -> timeslot -> occupant, None marks an empty slot."""
        return {
            s: {t: slot.occupant for t, slot in row.items()}
            for s, row in self._slots.items()
        }

    def to_frame(self) -> pd.DataFrame:
        rows = [(slot.station, slot.timeslot, slot.occupant) for slot in self]
        return pd.DataFrame(rows, columns=["station", "timeslot", "individual"])

    def __repr__(self) -> str:
        return (f"Grid(stations={self.station_count}, timeslots={self.timeslot_count}, "
                f"occupied={self.occupied_count})")
