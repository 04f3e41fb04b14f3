"""
Command-line interface for intpdf.

Usage:
    intpdf          # 5000 samples
    intpdf 1000000
"""

import logging

import click

from . import DEFAULT_N_SAMPLES, estimate


@click.command()
@click.argument(
    'n_samples',
    type=click.IntRange(min=0),
    default=DEFAULT_N_SAMPLES,
    required=False,
)
def main(n_samples):
    """
    Estimate the standard normal mass on [-5, 5] by rejection sampling.

    N_SAMPLES: Number of random trials (default: 5000)
    """
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    result = estimate(n_samples)
    click.echo(f"{result.estimate:.6f}")


if __name__ == '__main__':
    main()
