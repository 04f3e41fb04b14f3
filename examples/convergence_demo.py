import time

import numpy as np
from matplotlib import pyplot as plt

import intpdf

SAMPLE_SIZES = [100, 1000, 10000, 100000, 1000000, 10000000]
N_REPEATS = 10

mean_errors = []
spreads = []
run_times = []

for N_SAMPLES in SAMPLE_SIZES:
    print(f"\n{'=' * 60}")
    print(f"Testing with {N_SAMPLES:,} samples")
    print(f"{'=' * 60}")

    start = time.time()
    estimates = np.array(
        [intpdf.estimate(N_SAMPLES, random_state=seed).estimate for seed in range(N_REPEATS)]
    )
    elapsed = (time.time() - start) / N_REPEATS
    run_times.append(elapsed)

    mean_errors.append(np.mean(np.abs(estimates - 1.0)))
    spreads.append(np.std(estimates))
    print(f"Estimates: {np.round(estimates, 6)}")
    print(f"Mean |error|: {mean_errors[-1]:.6f}")
    print(f"Std across runs: {spreads[-1]:.6f}")
    print(f"Time per run: {elapsed:.6f} seconds")

# Standard error of a binomial proportion scaled by the rectangle area
theory = [5.0 * np.sqrt(0.2 * 0.8 / n) for n in SAMPLE_SIZES]

plt.figure(figsize=(8, 6), dpi=100, layout="constrained")
plt.loglog(SAMPLE_SIZES, mean_errors, "o-", label="Mean |error|", linewidth=2, markersize=8)
plt.loglog(SAMPLE_SIZES, spreads, "s-", label="Std across runs", linewidth=2, markersize=8)
plt.loglog(SAMPLE_SIZES, theory, "k--", label="5·sqrt(p(1-p)/N)", linewidth=1)

plt.xlabel("Number of Samples", fontsize=12)
plt.ylabel("Error", fontsize=12)
plt.title("Rejection Sampling Convergence", fontsize=14)
plt.legend(fontsize=11)
plt.show()
