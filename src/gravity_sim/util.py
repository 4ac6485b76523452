# MIT License (see LICENSE)
"""
Small vector helpers shared by the force kernel and the data model.

All vectors are numpy float64 arrays of shape (2,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def zeros2() -> np.ndarray:
    return np.zeros(2, dtype=np.float64)


def norm2(v: np.ndarray) -> np.float64:
    """
    Squared magnitude of a 2D vector.

    Returned as np.float64 so a zero value still divides to inf/nan
    instead of raising ZeroDivisionError.
    """
    return np.float64(v[0] * v[0] + v[1] * v[1])


def is_finite(v: np.ndarray) -> bool:
    return bool(np.all(np.isfinite(v)))
