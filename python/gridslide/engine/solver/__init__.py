from gridslide.engine.solver.solver import (
    FailureCode,
    SolveResult,
    Solver,
    failure_code,
    is_failure,
)

__all__ = ["FailureCode", "SolveResult", "Solver", "failure_code", "is_failure"]
