from __future__ import annotations

from inverseising import anneal, dprint

if __name__ == "__main__":
    h = {"a": 1}
    J = {("a", "b"): -1}
    response = anneal(h, J, n_read=10, seed=0)

    print("Annealing run complete")
    print(f"Best energy: {response.best_energy:.3f}")
    dprint(response.sample, reorder=True)
