import numba
import numpy as np


@numba.njit
def magnitude(v):
    return np.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


@numba.njit
def normalize(v):
    return v / magnitude(v)


@numba.njit
def dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


@numba.njit
def cross(a, b):
    # right-handed
    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0]
    ], dtype=np.float64)


@numba.njit
def approx_equal(a, b, epsilon):
    for i in range(a.shape[0]):
        if np.abs(a[i] - b[i]) > epsilon:
            return False
    return True
