from typing import Iterable, List, Sequence, Tuple

from .sudoku_error import ClauseError
from .utils import BoxShape, box_cells, get_var

Clause = Tuple[int, ...]
Cell = Tuple[int, int]


class CNFFormula:
    """Conjunction of clauses over variables 1..num_vars.

    Built once per puzzle and handed to an engine; clauses are never
    removed or changed after they are added.
    """

    def __init__(self, num_vars: int) -> None:
        if num_vars <= 0:
            raise ClauseError("Formula must have at least one variable")
        self.num_vars = num_vars
        self._clauses: List[Clause] = []

    @property
    def clauses(self) -> Sequence[Clause]:
        return tuple(self._clauses)

    def add_clause(self, literals: Iterable[int]) -> Clause:
        """Append a clause, raising ClauseError if it is malformed."""
        clause = tuple(literals)
        if not clause:
            raise ClauseError("Clause must not be empty")

        for lit in clause:
            if not isinstance(lit, int) or isinstance(lit, bool):
                raise ClauseError(f"Literal {lit!r} is not an integer")
            if lit == 0:
                raise ClauseError("Literal 0 is not a valid variable")
            if abs(lit) > self.num_vars:
                raise ClauseError(
                    f"Literal {lit} is outside variable range 1..{self.num_vars}"
                )

        self._clauses.append(clause)
        return clause

    def __len__(self) -> int:
        return len(self._clauses)

    def __iter__(self):
        return iter(self._clauses)


class SolverUtils:
    """Pairwise CNF encoding of the Sudoku rules."""

    @staticmethod
    def row_cells(row: int, size: int) -> List[Cell]:
        return [(row, col) for col in range(size)]

    @staticmethod
    def col_cells(col: int, size: int) -> List[Cell]:
        return [(row, col) for row in range(size)]

    @staticmethod
    def box_cells(box: int, size: int, shape: BoxShape) -> List[Cell]:
        return box_cells(box, size, shape)

    @staticmethod
    def at_least_one_in_region(
        formula: CNFFormula, cells: Sequence[Cell], k: int, size: int, values: int
    ) -> None:
        """Value index k appears in some cell of the region."""
        formula.add_clause(get_var(i, j, k, size, values) for i, j in cells)

    @staticmethod
    def at_most_one_in_region(
        formula: CNFFormula, cells: Sequence[Cell], k: int, size: int, values: int
    ) -> None:
        """Value index k appears in at most one cell of the region."""
        for a in range(len(cells)):
            for b in range(a + 1, len(cells)):
                (i1, j1), (i2, j2) = cells[a], cells[b]
                formula.add_clause(
                    [
                        -get_var(i1, j1, k, size, values),
                        -get_var(i2, j2, k, size, values),
                    ]
                )

    @staticmethod
    def at_least_one_value(
        formula: CNFFormula, row: int, col: int, size: int, values: int
    ) -> None:
        formula.add_clause(get_var(row, col, k, size, values) for k in range(values))

    @staticmethod
    def at_most_one_value(
        formula: CNFFormula, row: int, col: int, size: int, values: int
    ) -> None:
        for k1 in range(values):
            for k2 in range(k1 + 1, values):
                formula.add_clause(
                    [
                        -get_var(row, col, k1, size, values),
                        -get_var(row, col, k2, size, values),
                    ]
                )

    @staticmethod
    def add_sudoku_rules(
        formula: CNFFormula, size: int, values: int, shape: BoxShape
    ) -> None:
        """Emit the cell, row, column and box families, in that order."""
        # Cell constraints
        for i in range(size):
            for j in range(size):
                SolverUtils.at_least_one_value(formula, i, j, size, values)
                SolverUtils.at_most_one_value(formula, i, j, size, values)

        regions = (
            [SolverUtils.row_cells(row, size) for row in range(size)],
            [SolverUtils.col_cells(col, size) for col in range(size)],
            [SolverUtils.box_cells(box, size, shape) for box in range(size)],
        )

        # Row, column and box constraints
        for family in regions:
            for k in range(values):
                for cells in family:
                    SolverUtils.at_least_one_in_region(formula, cells, k, size, values)
                    SolverUtils.at_most_one_in_region(formula, cells, k, size, values)
