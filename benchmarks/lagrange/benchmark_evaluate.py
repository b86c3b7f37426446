"""Benchmark Lagrange interpolant evaluation.

Compares the product form (O(N^2) per point) with the barycentric form
(O(N) per point) across degrees, and times the dense-sampling diagnostics.
"""

import time

import torch

from torchlagrange import (
    lagrange_interpolant,
    lagrange_interpolant_barycentric_evaluate,
    lagrange_interpolant_evaluate,
    lagrange_interpolant_lebesgue_constant,
)


def benchmark_evaluate(
    degree: int,
    n_points: int = 10000,
    n_iterations: int = 10,
    device: str = "cpu",
    method: str = "product",
) -> float:
    """Benchmark interpolant evaluation at given degree.

    Parameters
    ----------
    degree : int
        Degree of the interpolant.
    n_points : int
        Number of evaluation points.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').
    method : str
        'product' or 'barycentric'.

    Returns
    -------
    float
        Average time per evaluation in milliseconds.
    """
    interp = lagrange_interpolant(
        degree, "chebyshev_gauss_lobatto", device=device
    )
    x = torch.rand(n_points, dtype=torch.float64, device=device) * 2 - 1

    if method == "product":
        evaluate_fn = lagrange_interpolant_evaluate
    elif method == "barycentric":
        evaluate_fn = lagrange_interpolant_barycentric_evaluate
    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(2):
        _ = evaluate_fn(interp, x, torch.exp)

    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = evaluate_fn(interp, x, torch.exp)

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return (elapsed / n_iterations) * 1000


def benchmark_lebesgue_constant(
    degree: int,
    kind: str = "chebyshev_gauss_lobatto",
    n_iterations: int = 5,
) -> float:
    """Average time of one Lebesgue constant estimate in milliseconds."""
    interp = lagrange_interpolant(degree, kind)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = lagrange_interpolant_lebesgue_constant(interp)

    elapsed = time.perf_counter() - start
    return (elapsed / n_iterations) * 1000


def main():
    degrees = [4, 8, 16, 32, 64, 128]

    print("Lagrange evaluation benchmark (10000 points)")
    print("=" * 60)
    print(f"{'Degree':>8} {'Product':>12} {'Barycentric':>12} {'Speedup':>10}")
    print("-" * 60)

    for degree in degrees:
        product_time = benchmark_evaluate(degree, method="product")
        barycentric_time = benchmark_evaluate(degree, method="barycentric")
        speedup = product_time / barycentric_time

        print(
            f"{degree:>8} {product_time:>10.3f}ms "
            f"{barycentric_time:>10.3f}ms {speedup:>9.2f}x"
        )

    print()
    print("Lebesgue constant estimate (10000 stations)")
    print("=" * 60)

    for degree in degrees:
        elapsed = benchmark_lebesgue_constant(degree)
        print(f"{degree:>8} {elapsed:>10.3f}ms")


if __name__ == "__main__":
    main()
