from math import comb

import pytest

from sudoku_sat_solvers.solvers.solver_utils import CNFFormula, SolverUtils
from sudoku_sat_solvers.solvers.sudoku_error import ClauseError, SudokuError
from sudoku_sat_solvers.solvers.utils import BoxShape, get_var


@pytest.fixture
def formula_9x9():
    return CNFFormula(9 * 9 * 9)


# CNFFormula Tests
def test_formula_add_clause(formula_9x9):
    clause = formula_9x9.add_clause([1, -2, 3])
    assert clause == (1, -2, 3)
    assert len(formula_9x9) == 1
    assert list(formula_9x9) == [(1, -2, 3)]


def test_formula_clauses_are_read_only(formula_9x9):
    formula_9x9.add_clause([1])
    clauses = formula_9x9.clauses
    assert clauses == ((1,),)
    assert isinstance(clauses, tuple)


@pytest.mark.parametrize(
    "clause,message",
    [
        ([], "must not be empty"),
        ([1, 0], "Literal 0"),
        ([730], "outside variable range"),
        ([-730], "outside variable range"),
        (["1"], "not an integer"),
        ([True], "not an integer"),
    ],
)
def test_formula_rejects_malformed_clause(formula_9x9, clause, message):
    with pytest.raises(ClauseError, match=message):
        formula_9x9.add_clause(clause)
    assert len(formula_9x9) == 0


def test_clause_error_is_sudoku_error():
    with pytest.raises(SudokuError):
        CNFFormula(0)


# Clause family Tests
def test_at_most_one_value_clause_count(formula_9x9):
    for i in range(9):
        for j in range(9):
            SolverUtils.at_most_one_value(formula_9x9, i, j, 9, 9)
    assert len(formula_9x9) == 9 * 9 * comb(9, 2) == 2916
    assert all(len(c) == 2 and all(lit < 0 for lit in c) for c in formula_9x9)


def test_at_least_one_value(formula_9x9):
    SolverUtils.at_least_one_value(formula_9x9, 2, 3, 9, 9)
    assert formula_9x9.clauses == (
        tuple(get_var(2, 3, k, 9, 9) for k in range(9)),
    )


def test_at_least_one_in_row(formula_9x9):
    cells = SolverUtils.row_cells(4, 9)
    SolverUtils.at_least_one_in_region(formula_9x9, cells, 0, 9, 9)
    assert formula_9x9.clauses == (tuple(get_var(4, j, 0, 9, 9) for j in range(9)),)


def test_at_most_one_in_column(formula_9x9):
    cells = SolverUtils.col_cells(1, 9)
    SolverUtils.at_most_one_in_region(formula_9x9, cells, 6, 9, 9)
    assert len(formula_9x9) == comb(9, 2)
    assert formula_9x9.clauses[0] == (-get_var(0, 1, 6, 9, 9), -get_var(1, 1, 6, 9, 9))


def test_at_most_one_in_box(formula_9x9):
    cells = SolverUtils.box_cells(8, 9, BoxShape(3, 3))
    SolverUtils.at_most_one_in_region(formula_9x9, cells, 0, 9, 9)
    assert len(formula_9x9) == comb(9, 2)
    pairs = {frozenset(c) for c in formula_9x9}
    assert frozenset((-get_var(6, 6, 0, 9, 9), -get_var(8, 8, 0, 9, 9))) in pairs
    # Cells outside the box never appear
    assert all(abs(lit) >= get_var(6, 6, 0, 9, 9) for c in formula_9x9 for lit in c)


def test_add_sudoku_rules_clause_count(formula_9x9):
    SolverUtils.add_sudoku_rules(formula_9x9, 9, 9, BoxShape(3, 3))

    cell = 81 * (1 + comb(9, 2))
    regions = 3 * 9 * 9 * (1 + comb(9, 2))
    assert len(formula_9x9) == cell + regions


def test_add_sudoku_rules_order(formula_9x9):
    SolverUtils.add_sudoku_rules(formula_9x9, 9, 9, BoxShape(3, 3))
    clauses = formula_9x9.clauses

    # Cell families come first: at-least-one-value for cell (0,0)
    assert clauses[0] == tuple(range(1, 10))
    assert clauses[1] == (-1, -2)
    # Then the row families, starting with value index 0 in row 0
    first_row_clause = 81 * (1 + comb(9, 2))
    assert clauses[first_row_clause] == tuple(get_var(0, j, 0, 9, 9) for j in range(9))


def test_add_sudoku_rules_variables_in_range():
    formula = CNFFormula(6 * 6 * 6)
    SolverUtils.add_sudoku_rules(formula, 6, 6, BoxShape(2, 3))
    used = {abs(lit) for clause in formula for lit in clause}
    assert used == set(range(1, 6 * 6 * 6 + 1))
    assert all(len(clause) > 0 for clause in formula)
