"""Seeding utilities for reproducible deals.

Random tables are dealt from a NumPy Generator built from an explicit
seed. No global RNG state is touched.
"""

import random
from typing import Optional

import numpy as np


def resolve_seed(seed: Optional[int] = None) -> int:
    """Pick the seed to deal with.

    Args:
        seed: The seed value to use. If None, a random seed will be generated
              and returned for later reproducibility.

    Returns:
        The seed value to use (useful when seed=None was passed).

    Example:
        >>> from holdem import resolve_seed
        >>> resolve_seed(42)  # Deterministic
        42
        >>> seed = resolve_seed()  # Random seed, but returns it for logging
    """
    if seed is None:
        seed = random.randint(0, 2**32 - 1)
    return seed


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a NumPy Generator; the same seed gives the same draws."""
    return np.random.default_rng(seed)
