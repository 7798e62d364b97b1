import time

from cvc5 import Kind, Solver

from .sat_result import SatResult, SatStatus
from .solver_utils import CNFFormula
from .sudoku_error import SudokuError


class CVC5Engine:
    """Decide a CNF formula with cvc5, one Boolean constant per variable."""

    name = "cvc5"

    def __init__(self, timeout=120):
        if timeout <= 0:
            raise SudokuError("Timeout must be positive")

        self.timeout = timeout
        self.solver = None
        self.variables = None
        self.solve_time = 0

    def create_variables(self, num_vars):
        """Set self.variables to a cvc5 Boolean constant per variable id."""
        self.solver = Solver()
        self.solver.setOption("produce-models", "true")
        self.solver.setOption("tlimit-per", str(max(1, int(self.timeout * 1000))))
        self.solver.setLogic("QF_UF")

        bool_sort = self.solver.getBooleanSort()
        self.variables = {
            v: self.solver.mkConst(bool_sort, f"x_{v}") for v in range(1, num_vars + 1)
        }

    def encode_formula(self, formula: CNFFormula):
        """Assert every clause of the formula."""
        for clause in formula:
            literals = [
                self.variables[lit]
                if lit > 0
                else self.solver.mkTerm(Kind.NOT, self.variables[-lit])
                for lit in clause
            ]
            if len(literals) == 1:
                self.solver.assertFormula(literals[0])
            else:
                self.solver.assertFormula(self.solver.mkTerm(Kind.OR, *literals))

    def extract_model(self):
        return {
            v: self.solver.getValue(var).getBooleanValue()
            for v, var in self.variables.items()
        }

    def cleanup(self):
        """Clean up solver resources."""
        if self.solver:
            self.solver = None
        self.variables = None

    def solve(self, formula: CNFFormula) -> SatResult:
        start_time = time.time()
        try:
            self.create_variables(formula.num_vars)
            self.encode_formula(formula)

            result = self.solver.checkSat()
            self.solve_time = time.time() - start_time

            if result.isSat():
                return SatResult(
                    SatStatus.SATISFIABLE, self.extract_model(), self.solve_time
                )
            if result.isUnsat():
                return SatResult(SatStatus.UNSATISFIABLE, solve_time=self.solve_time)
            return SatResult(SatStatus.TIMEOUT, solve_time=self.solve_time)

        except Exception as e:
            raise SudokuError(f"Critical solver error: {str(e)}")
        finally:
            self.cleanup()
