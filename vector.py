# vector.py

"""
2D vector helpers.

Vectors are plain float64 NumPy arrays of shape (2,), the same representation
the particle pools use for their rows, so values move between a single
Particle and a ParticleGroup without conversion.

Data Contract:
- All functions are pure: inputs are never modified, a new array is returned.
- random_unit_vector draws from the caller's np.random.Generator only.
"""

import numpy as np


def vector(x: float, y: float) -> np.ndarray:
    return np.array([x, y], dtype=np.float64)


def zero() -> np.ndarray:
    return np.zeros(2, dtype=np.float64)


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=np.float64) + b


def sub(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=np.float64) - b


def scale(v: np.ndarray, k: float) -> np.ndarray:
    return np.asarray(v, dtype=np.float64) * k


def length(v: np.ndarray) -> float:
    return float(np.hypot(v[0], v[1]))


def random_unit_vector(rng: np.random.Generator) -> np.ndarray:
    """
    Returns a unit-length vector pointing in a random direction.

    Both components are drawn uniformly from [-1, 1) and the result is
    normalised, so directions are uniform over the square rather than the
    circle (a slight bias towards the diagonals). That bias is part of the
    look of the bursts. A zero-length sample is re-drawn.
    """
    while True:
        x = rng.uniform(-1.0, 1.0)
        y = rng.uniform(-1.0, 1.0)
        norm = np.hypot(x, y)
        if norm > 0.0:
            return np.array([x / norm, y / norm], dtype=np.float64)
