from gridslide.engine.heuristic.heuristic import nearest_manhattan, occurrences

__all__ = ["nearest_manhattan", "occurrences"]
