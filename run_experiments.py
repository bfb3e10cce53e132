# run_experiments.py
import os, json, argparse, logging
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from bruteforce_tsp import SearchConfig
from bruteforce_tsp.experiments import run_repeated_trials, run_size_sweep

OUTDIR = os.path.dirname(os.path.abspath(__file__))


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def plot_runtime(df, save_path):
    """Mean runtime per size on a log axis, with a log-linear fit per configuration."""
    plt.figure()
    for fold, group in df.groupby("fold_reflections"):
        label = "folded reflections" if fold else "all (n-1)! orderings"
        ns = group["n"].to_numpy()
        times = group["mean_time"].to_numpy()
        plt.plot(ns, times, "o", label=label)
        mask = times > 0
        if mask.sum() >= 2:
            slope, intercept = np.polyfit(ns[mask], np.log(times[mask]), 1)
            xs = np.linspace(ns.min(), ns.max(), 50)
            plt.plot(xs, np.exp(intercept + slope * xs), "-", label=f"{label} fit (x{np.exp(slope):.1f}/city)")
    plt.yscale("log")
    plt.xlabel("Number of cities")
    plt.ylabel("Mean search time [s]")
    plt.title("Exhaustive search runtime")
    plt.legend()
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_scatter(details_by_n, save_path):
    plt.figure()
    sizes = sorted(details_by_n.keys())
    for i, n in enumerate(sizes, start=1):
        lengths = [L for (L, t, tour) in details_by_n[n]]
        x = np.random.normal(loc=i, scale=0.03, size=len(lengths))
        plt.plot(x, lengths, "o")
    plt.xticks(range(1, len(sizes) + 1), [str(n) for n in sizes])
    plt.xlabel("Number of cities")
    plt.ylabel("Optimal tour length")
    plt.title("Optimal lengths across random instances")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--min-n", type=int, default=3)
    ap.add_argument("--max-n", type=int, default=9)
    ap.add_argument("--width", type=int, default=100)
    ap.add_argument("--runs", type=int, default=3)
    ap.add_argument("--seed", type=int, default=100)
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    sizes = list(range(args.min_n, args.max_n + 1))
    configs = [SearchConfig(fold_reflections=False, record_history=False),
               SearchConfig(fold_reflections=True, record_history=False)]

    # size sweep for both enumeration modes
    records = []
    sweep_csv = os.path.join(OUTDIR, "size_sweep.csv")
    for cfg in configs:
        rows = run_size_sweep(sizes, width=args.width, cfg=cfg, n_runs=args.runs,
                              base_seed=args.seed, csv_path=sweep_csv)
        records.extend(rows)
    print("Sizes evaluated:", len(records))

    df_summary = pd.DataFrame.from_records(records)
    summary_csv = os.path.join(OUTDIR, "results_summary.csv")
    df_summary.to_csv(summary_csv, index=False)
    plot_runtime(df_summary, os.path.join(OUTDIR, "runtime_vs_n.png"))

    # distribution of optimal lengths per size
    details_by_n = {}
    for n in sizes:
        stats, details = run_repeated_trials(n, width=args.width, cfg=configs[1],
                                             n_runs=args.runs, base_seed=args.seed)
        print(n, json.dumps(stats, indent=2))
        details_by_n[n] = details
    plot_scatter(details_by_n, os.path.join(OUTDIR, "results_distribution.png"))


if __name__ == "__main__":
    main()
