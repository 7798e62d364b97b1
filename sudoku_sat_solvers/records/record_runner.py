import logging
import sys
from typing import Dict, Iterable, List, Optional

from ..solvers import BoxShape, SudokuError, SudokuSATSolver, flatten
from .record_reader import read_records

log = logging.getLogger(__name__)


class RecordRunner:
    def __init__(
        self,
        engine: str = "z3",
        timeout: int = 120,
        box_shape: Optional[BoxShape] = None,
        out=None,
    ):
        self.engine = engine
        self.timeout = timeout
        self.box_shape = box_shape
        self.out = out or sys.stdout
        self.last_satisfiable = False
        self.error: Optional[SudokuError] = None

    def run_record(self, record) -> Dict:
        """Solve one record and collect the result."""
        solver = SudokuSATSolver(
            record.grid,
            values=record.values,
            box_shape=self.box_shape,
            engine=self.engine,
            timeout=self.timeout,
        )
        solution = solver.solve()
        self.last_satisfiable = solver.is_satisfiable

        return {
            "line": record.line,
            "status": solver.result.status.value,
            "solution": solution,
            "solve_time": solver.solve_time,
            "clauses": solver.num_clauses,
        }

    def run(self, lines: Iterable[str]) -> List[Dict]:
        """Solve every record, printing each grid and a final summary line."""
        results = []
        self.error = None
        self.last_satisfiable = False

        try:
            for record in read_records(lines):
                result = self.run_record(record)
                results.append(result)
                solution = result["solution"]
                print(flatten(solution) if solution else None, file=self.out)
        except (SudokuError, OSError, UnicodeDecodeError) as e:
            log.error("Stopped reading input: %s", e)
            self.error = e

        print("satisfying" if self.last_satisfiable else "not solvable", file=self.out)
        return results
