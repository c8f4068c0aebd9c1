# rota/model.py
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from rota.grid import Grid


class ConfigurationError(ValueError):
    """Raised before any assignment when the grid or params cannot be used."""


@dataclass
class Slot:
    station: str
    timeslot: str
    occupant: Optional[str] = None

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None

    def claim(self, individual: str) -> bool:
        if self.occupant is not None:
            return False
        self.occupant = individual
        return True


@dataclass
class Params:
    max_retries: int = 1000   # failed claims allowed per individual before giving up
    seed: Optional[int] = None  # None -> fresh entropy every run
    shuffle: bool = True

    input_path: str = "input.txt"
    output_path: str = "schedule.txt"
    output_dir: str = ""
    trials: int = 1
    plot: bool = False

    def __post_init__(self):
        for name in ("max_retries", "trials"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.seed is not None and (
                isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0):
            raise ConfigurationError(f"seed must be a non-negative integer or null, got {self.seed!r}")
        for name in ("shuffle", "plot"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be true or false, got {getattr(self, name)!r}")
        for name in ("input_path", "output_path", "output_dir"):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"{name} must be a string, got {getattr(self, name)!r}")
        if self.max_retries < 0:
            raise ConfigurationError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.trials < 1:
            raise ConfigurationError(f"trials must be >= 1, got {self.trials}")


@dataclass
class AssignmentResult:
    grid: "Grid"
    unassigned: List[str] = field(default_factory=list)
    attempts: List[int] = field(default_factory=list)

    @property
    def placed(self) -> int:
        return len(self.attempts) - len(self.unassigned)

    @property
    def complete(self) -> bool:
        return not self.unassigned
