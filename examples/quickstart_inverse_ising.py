from __future__ import annotations

from inverseising import GBM, decode, dprint, fit, infer

if __name__ == "__main__":
    samples = [[1, -1, -1], [-1, 1, 1]]
    model = GBM(3, rng=0)
    ctx = fit(model, samples)

    print(f"Fit finished after {ctx.iterations} iterations (converged={ctx.converged})")
    dprint(decode(infer(model)))
