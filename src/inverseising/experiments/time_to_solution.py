from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from inverseising.model.gbm import GBM, fit, infer
from inverseising.utils.convert import decode
from inverseising.utils.io import save_json
from inverseising.utils.logging import configure_logging, log_event

logger = logging.getLogger(__name__)

DEFAULT_SIZES = [2, 3, 4, 5, 6, 7, 8, 9, 10, 20, 50, 70, 90, 100]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Time pseudo-likelihood fits against unit count")
    parser.add_argument("--output-dir", type=Path, default=Path("results/time_to_solution"))
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES)
    parser.add_argument("--n-samples", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=0)
    return parser.parse_args()


def run(sizes: list[int], n_samples: int, seed: int) -> list[dict[str, float | int | bool]]:
    """Fit fully ferromagnetic data for each size and record wall-clock time."""

    rows: list[dict[str, float | int | bool]] = []
    for n_unit in sizes:
        samples = np.ones((n_samples, n_unit), dtype=np.float64)
        model = GBM(n_unit, rng=seed + n_unit)

        t0 = time.perf_counter()
        ctx = fit(model, samples, delta=0.0)
        seconds = time.perf_counter() - t0

        recovered = all(v == 1 for v in decode(infer(model)).values())
        rows.append(
            {
                "n_unit": n_unit,
                "seconds": seconds,
                "iterations": ctx.iterations,
                "recovered": recovered,
            }
        )
        log_event(logger, "tts_size", n_unit=n_unit, seconds=seconds, recovered=recovered)
    return rows


def main() -> None:
    args = parse_args()
    configure_logging()

    output_dir: Path = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    rows = run(args.sizes, n_samples=args.n_samples, seed=args.seed)
    save_json(output_dir / "tts_metrics.json", {"rows": rows})

    fig, ax = plt.subplots(figsize=(6.0, 4.0))
    ax.plot([r["n_unit"] for r in rows], [r["seconds"] for r in rows], ".-")
    ax.set_xlabel("num_unit")
    ax.set_ylabel("Wall-clock seconds")
    ax.set_title("Pseudo-likelihood fit time")
    ax.grid(alpha=0.3)
    fig.tight_layout()
    fig.savefig(output_dir / "tts_plot.png", dpi=150)
    plt.close(fig)


if __name__ == "__main__":
    main()
