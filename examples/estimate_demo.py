#!/usr/bin/env python3
"""Simple Rejection Sampling Example

Estimate P(-5 <= X <= 5) for X ~ N(0, 1) by throwing points into the
rectangle [-5, 5] x [0, 0.5].
"""

from intpdf import RejectionSampler

if __name__ == "__main__":
    # Create sampler
    sampler = RejectionSampler()

    # One million trials with a fixed seed
    result = sampler.estimate(n_samples=1_000_000, random_state=42)

    print(f"Estimate:        {result.estimate:.6f}  (expected: ~1.0)")
    print(f"Accepted:        {result.accepted} / {result.n_samples}")
    print(f"Acceptance rate: {result.acceptance_rate:.6f}  (expected: ~0.2)")

    # Same number of trials spread over four worker processes
    parallel = RejectionSampler(n_workers=4).estimate(
        n_samples=1_000_000, random_state=42
    )
    print(f"Parallel:        {parallel.estimate:.6f}")
