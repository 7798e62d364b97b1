from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class SatStatus(Enum):
    SATISFIABLE = "sat"
    UNSATISFIABLE = "unsat"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class SatResult:
    """Outcome of one engine run.

    model maps every variable of the formula to its truth value and is
    only populated for SATISFIABLE results.
    """

    status: SatStatus
    model: Dict[int, bool] = field(default_factory=dict)
    solve_time: float = 0.0

    @property
    def is_satisfiable(self) -> bool:
        # A timeout counts as unsatisfiable.
        return self.status is SatStatus.SATISFIABLE
