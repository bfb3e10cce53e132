import os, argparse, logging
import matplotlib.pyplot as plt
import imageio

from bruteforce_tsp import TSPInstance, ExhaustiveSearch, SearchConfig


def tour_to_xy(coords, tour):
    xs = [coords[i][0] for i in tour] + [coords[tour[0]][0]]
    ys = [coords[i][1] for i in tour] + [coords[tour[0]][1]]
    return xs, ys


def draw_tour(coords, tour, title, path):
    cx = [c[0] for c in coords]
    cy = [c[1] for c in coords]
    xs, ys = tour_to_xy(coords, tour)

    plt.figure(figsize=(5, 5))
    plt.plot(cx, cy, "o")
    plt.plot(xs, ys, "-")
    for i, (x, y) in enumerate(coords):
        plt.annotate(str(i), (x, y), textcoords="offset points", xytext=(4, 4))
    plt.title(title)
    plt.axis("equal")
    plt.tight_layout()
    plt.savefig(path, dpi=120, bbox_inches="tight")
    plt.close()


def visualize(inst, cfg, outdir):
    """Save the optimal tour and a GIF with one frame per new-minimum event."""
    os.makedirs(outdir, exist_ok=True)
    res = ExhaustiveSearch(inst.distance_matrix(), cfg).run()

    coords = inst.coords
    best_png = os.path.join(outdir, f"{inst.name}_best.png")
    draw_tour(coords, res.best_tour, f"{inst.name} optimal tour\nlength={res.best_length:.2f}", best_png)
    print("Saved:", best_png)

    frames = []
    for k, (tour, L) in enumerate(zip(res.history_best_tours, res.history_best_lengths)):
        frame_path = os.path.join(outdir, f"{inst.name}_frame_{k:03d}.png")
        draw_tour(coords, tour, f"new minimum #{k+1}\nlength={L:.2f}", frame_path)
        frames.append(frame_path)

    gif_path = os.path.join(outdir, f"{inst.name}_minima.gif")
    with imageio.get_writer(gif_path, mode="I", duration=0.6) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))

    print("Saved:", gif_path)
    return res


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--n", type=int, default=8, help="number of cities")
    p.add_argument("--width", type=int, default=100)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--fold-reflections", action="store_true")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    inst = TSPInstance.random_points(args.n, width=args.width, seed=args.seed, name=f"viz{args.n}")
    cfg = SearchConfig(fold_reflections=args.fold_reflections, record_history=True)
    visualize(inst, cfg, args.outdir)


if __name__ == "__main__":
    main()
