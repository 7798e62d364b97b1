class SudokuError(Exception):
    """Base error raised by the Sudoku SAT encoder and solvers."""


class ClauseError(SudokuError):
    """A clause could not be added to a formula.

    Raised for empty clauses, zero or non-integer literals and literals
    referring to variables outside the formula. Always a bug in the code
    building the clause, never a property of the puzzle.
    """


class PuzzleFormatError(SudokuError):
    """An input record could not be parsed into a puzzle."""
