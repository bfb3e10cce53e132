from __future__ import annotations
import csv, logging, os, statistics
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence
from .tsp import TSPInstance
from .search import ExhaustiveSearch, SearchConfig, expected_leaf_count

LOG = logging.getLogger(__name__)

def run_repeated_trials(n: int, width: int = 100, cfg: Optional[SearchConfig] = None,
                        n_runs: int = 5, base_seed: int = 42):
    if n < 1:
        raise ValueError(f"Need at least one city, got n={n}")
    cfg = cfg or SearchConfig()
    lengths = []
    times = []
    best_tours = []
    leaves = 0
    for r in range(n_runs):
        instance = TSPInstance.random_points(n, width=width, seed=base_seed + r, name=f"trial{r}")
        solver = ExhaustiveSearch(instance.distance_matrix(), SearchConfig(**asdict(cfg)))
        res = solver.run()
        lengths.append(res.best_length)
        times.append(res.elapsed_sec)
        best_tours.append(res.best_tour)
        leaves = res.leaf_count
    stats = {
        "n": n,
        "n_runs": n_runs,
        "fold_reflections": cfg.fold_reflections,
        "leaf_count": leaves,
        "mean_length": statistics.mean(lengths),
        "std_length": statistics.stdev(lengths) if len(lengths) > 1 else 0.0,
        "min_length": min(lengths),
        "max_length": max(lengths),
        "median_length": statistics.median(lengths),
        "mean_time": statistics.mean(times),
    }
    return stats, list(zip(lengths, times, best_tours))

def run_size_sweep(sizes: Sequence[int], width: int = 100, cfg: Optional[SearchConfig] = None,
                   n_runs: int = 3, base_seed: int = 100, csv_path: Optional[str] = None) -> List[Dict[str, Any]]:
    if not sizes:
        raise ValueError("No sizes to sweep")
    rows = []
    for n in sizes:
        stats, _ = run_repeated_trials(n, width=width, cfg=cfg, n_runs=n_runs, base_seed=base_seed)
        LOG.info("n=%d: %d tours, mean %.4fs", n, stats["leaf_count"], stats["mean_time"])
        rows.append(stats)
        if csv_path is not None:
            write_header = not os.path.exists(csv_path)
            with open(csv_path, "a", newline="") as f:
                w = csv.DictWriter(f, fieldnames=stats.keys())
                if write_header:
                    w.writeheader()
                w.writerow(stats)
    return rows

__all__ = ["run_repeated_trials", "run_size_sweep", "expected_leaf_count"]
