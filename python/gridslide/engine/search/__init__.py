from gridslide.engine.search.search import SearchResult, best_first, reconstruct_path

__all__ = ["SearchResult", "best_first", "reconstruct_path"]
