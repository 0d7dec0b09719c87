"""
Shared random source for shuffles and coordinate picks.

Every engine function accepts an explicit ``rng`` (a numpy Generator).
When a caller passes none, the process default returned by get_rng() is
used. It is created on first use from config.DEFAULT_SEED, so unseeded
runs are reproducible; seed() replaces it.
"""
import numpy as np

from ..config import DEFAULT_SEED

_default_rng = None


def seed(value: int) -> np.random.Generator:
    """Reseed the process-wide random source used when no rng is passed."""
    global _default_rng
    _default_rng = np.random.default_rng(value)
    return _default_rng


def get_rng(rng: np.random.Generator = None) -> np.random.Generator:
    """Return `rng` if given, otherwise the process default (seeding it if needed)."""
    if rng is not None:
        return rng
    if _default_rng is None:
        return seed(DEFAULT_SEED)
    return _default_rng


def rand_int(rng: np.random.Generator, max_exclusive: int) -> int:
    return int(rng.integers(max_exclusive))


def shuffled(rng: np.random.Generator, values) -> list:
    """Return a uniformly random permutation of `values` as a new list."""
    return [values[i] for i in rng.permutation(len(values))]
