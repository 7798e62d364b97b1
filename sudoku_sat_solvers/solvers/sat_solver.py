import logging
from typing import List, Optional

from .cvc5_solver import CVC5Engine
from .sat_result import SatResult
from .solution_decoder import decode_solution
from .sudoku_encoder import encode_puzzle
from .sudoku_error import SudokuError
from .utils import BoxShape, validate_grid, validate_solution
from .z3_solver import Z3Engine

log = logging.getLogger(__name__)

ENGINES = {
    "z3": Z3Engine,
    "cvc5": CVC5Engine,
}


def create_engine(name: str, timeout=120):
    """Instantiate an engine by name."""
    try:
        engine_class = ENGINES[name.lower()]
    except KeyError:
        raise SudokuError(
            f"Unknown engine {name!r}: expected one of {', '.join(sorted(ENGINES))}"
        )
    return engine_class(timeout=timeout)


class SudokuSATSolver:
    def __init__(
        self,
        sudoku: List[List[int]],
        values: Optional[int] = None,
        box_shape: Optional[BoxShape] = None,
        engine: str = "z3",
        timeout: int = 120,
    ) -> None:
        if timeout <= 0:
            raise SudokuError("Timeout must be positive")

        if not sudoku or not isinstance(sudoku, list):
            raise SudokuError("Invalid Sudoku puzzle: input must be a non-empty list")

        self.size = len(sudoku)
        self.values = values if values is not None else self.size
        if self.values <= 0:
            raise SudokuError("Number of values must be positive")

        validate_grid(sudoku, self.values)
        self.box_shape = box_shape or BoxShape.for_size(self.size)
        self.box_shape.check(self.size)

        self.sudoku = sudoku
        self.engine = create_engine(engine, timeout)
        self.timeout = timeout
        self.result: Optional[SatResult] = None
        self.num_clauses = 0
        self.solve_time = 0

    def encode(self):
        """Build a fresh formula for this puzzle."""
        formula = encode_puzzle(self.sudoku, self.values, self.box_shape)
        self.num_clauses = len(formula)
        return formula

    def solve(self) -> Optional[List[List[int]]]:
        """Solve the puzzle, returning the filled grid or None if there is none."""
        formula = self.encode()
        self.result = self.engine.solve(formula)
        self.solve_time = self.result.solve_time

        log.debug(
            "%s: %s in %.3fs (%d clauses)",
            self.engine.name,
            self.result.status.value,
            self.solve_time,
            self.num_clauses,
        )

        if not self.result.is_satisfiable:
            return None

        solution = decode_solution(self.result.model, self.size, self.values)
        if not validate_solution(solution, self.sudoku, self.box_shape):
            raise SudokuError("Generated solution is invalid")
        return solution

    @property
    def is_satisfiable(self) -> bool:
        return self.result is not None and self.result.is_satisfiable
