from .tsp import TSPInstance, build_distance_matrix
from .search import ExhaustiveSearch, SearchConfig, SearchResult, brute_force, expected_leaf_count
from .display import format_grid, format_plot, format_path
from .experiments import run_repeated_trials, run_size_sweep
