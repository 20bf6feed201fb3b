"""Path search algorithms over rate graphs."""

from dexrate.algorithms.best_rate import all_pairs_best_paths, best_path, best_rate

__all__ = ["all_pairs_best_paths", "best_path", "best_rate"]
