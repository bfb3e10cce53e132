# solve.py
# Exact shortest closed tour over a handful of random cities.
#
# Usage:
#   python solve.py --n 8 --seed 7
#   python solve.py --debug --show-all     # trace every tour, not only new minima
#
import argparse
import logging

from bruteforce_tsp import TSPInstance, ExhaustiveSearch, SearchConfig
from bruteforce_tsp.display import format_grid, format_plot, format_path, format_city_table, GRAPH_PIXELS

CITY_COUNT = 6
MAP_WIDTH = 100


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=CITY_COUNT, help="number of cities")
    ap.add_argument("--width", type=int, default=MAP_WIDTH, help="map width; coordinates lie in [0, width)")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--debug", action="store_true", help="print the plot, the grid and every new minimum")
    ap.add_argument("--show-all", action="store_true", help="with --debug, print every complete tour")
    ap.add_argument("--pixels", type=int, default=GRAPH_PIXELS, help="side of the ASCII plot")
    ap.add_argument("--fold-reflections", action="store_true", help="score each tour and its reverse once")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.n < 1:
        ap.error("--n must be at least 1")

    inst = TSPInstance.random_points(args.n, width=args.width, seed=args.seed, name=f"solve{args.n}")
    if args.debug:
        print(format_city_table(inst.coords, args.width, args.pixels))
        print()
        print(format_plot(inst.coords, args.width, args.pixels))

    D = inst.distance_matrix()
    if args.debug:
        print(format_grid(D))

    on_tour = on_new_min = None
    if args.debug:
        if args.show_all:
            def on_tour(tour, length):
                print(format_path(tour))

        def on_new_min(tour, length):
            if not args.show_all:
                print(format_path(tour))
            print(f"\t\t\tNew min: {length}")

    cfg = SearchConfig(fold_reflections=args.fold_reflections)
    res = ExhaustiveSearch(D, cfg, on_tour=on_tour, on_new_min=on_new_min).run()

    print(f"Optimal path length: {res.best_length}")
    print(format_path(res.best_tour))
    print(f"Tours evaluated: {res.leaf_count} in {res.elapsed_sec:.3f}s")


if __name__ == "__main__":
    main()
