"""Shortest blank-slide transformations between two labelled grids."""

from gridslide.engine.solver import FailureCode, Solver, failure_code, is_failure

solve = Solver.solve

__all__ = ["FailureCode", "Solver", "failure_code", "is_failure", "solve"]
