import logging
import time

from z3 import Bool, Not, Or, Solver, is_true, sat, unsat

from .sat_result import SatResult, SatStatus
from .solver_utils import CNFFormula
from .sudoku_error import SudokuError

log = logging.getLogger(__name__)


class Z3Engine:
    """Decide a CNF formula with the Z3 SMT solver."""

    name = "z3"

    def __init__(self, timeout=120) -> None:
        if timeout <= 0:
            raise SudokuError("Timeout must be positive")

        self.timeout = timeout
        self.solver = None
        self.variables = None

    def create_variables(self, num_vars):
        """Set self.variables to a Z3 Bool per variable id 1..num_vars."""
        self.solver = Solver()
        self.solver.set("timeout", max(1, int(self.timeout * 1000)))
        try:
            self.variables = {v: Bool(f"x_{v}") for v in range(1, num_vars + 1)}
        except Exception as e:
            raise SudokuError(f"Failed to create Z3 variables: {str(e)}")

    def _literal(self, lit):
        var = self.variables[abs(lit)]
        return var if lit > 0 else Not(var)

    def encode_formula(self, formula: CNFFormula):
        """Assert every clause of the formula."""
        if not self.solver or self.variables is None:
            raise SudokuError("Solver not initialized properly")

        try:
            for clause in formula:
                literals = [self._literal(lit) for lit in clause]
                if len(literals) == 1:
                    self.solver.add(literals[0])
                else:
                    self.solver.add(Or(literals))
        except Exception as e:
            raise SudokuError(f"Failed to encode clauses: {str(e)}")

    def extract_model(self, model):
        """Evaluate every variable, completing the model where Z3 left it open."""
        return {
            v: is_true(model.evaluate(var, model_completion=True))
            for v, var in self.variables.items()
        }

    def solve(self, formula: CNFFormula) -> SatResult:
        start_time = time.time()
        self.create_variables(formula.num_vars)
        self.encode_formula(formula)

        try:
            result = self.solver.check()
            if result == sat:
                model = self.extract_model(self.solver.model())
                return SatResult(
                    SatStatus.SATISFIABLE, model, time.time() - start_time
                )
            if result == unsat:
                return SatResult(
                    SatStatus.UNSATISFIABLE, solve_time=time.time() - start_time
                )

            log.debug("Z3 returned unknown: %s", self.solver.reason_unknown())
            return SatResult(SatStatus.TIMEOUT, solve_time=time.time() - start_time)

        except SudokuError:
            raise
        except Exception as e:
            raise SudokuError(f"Critical solver error: {str(e)}")
