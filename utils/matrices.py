'''
Cofactor expansion kernels for small square matrices
'''
import numba
import numpy as np


@numba.njit
def submatrix(m, row, col):
    # drop `row` and `col`, callers check the indices
    n = m.shape[0]
    sub = np.empty((n - 1, n - 1), dtype=np.float64)
    sub_row = 0
    for r in range(n):
        if r == row:
            continue
        sub_col = 0
        for c in range(n):
            if c == col:
                continue
            sub[sub_row, sub_col] = m[r, c]
            sub_col += 1
        sub_row += 1
    return sub


@numba.njit
def minor_2x2(m):
    return m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]


@numba.njit
def signed(value, row, col):
    if (row + col) % 2 == 0:
        return value
    return -value


@numba.njit
def cofactor_3x3(m, row, col):
    return signed(minor_2x2(submatrix(m, row, col)), row, col)


@numba.njit
def determinant_3x3(m):
    det = 0.0
    for col in range(3):
        det += cofactor_3x3(m, 0, col) * m[0, col]
    return det


@numba.njit
def cofactor_4x4(m, row, col):
    return signed(determinant_3x3(submatrix(m, row, col)), row, col)


@numba.njit
def determinant_4x4(m):
    det = 0.0
    for col in range(4):
        det += cofactor_4x4(m, 0, col) * m[0, col]
    return det


@numba.njit
def inverse_4x4(m, det):
    # transpose of the cofactor matrix over the determinant
    inv = np.empty((4, 4), dtype=np.float64)
    for row in range(4):
        for col in range(4):
            inv[col, row] = cofactor_4x4(m, row, col) / det
    return inv


@numba.njit
def multiply_4x4(a, b):
    product = np.zeros((4, 4), dtype=np.float64)
    for row in range(4):
        for col in range(4):
            for k in range(4):
                product[row, col] += a[row, k] * b[k, col]
    return product


@numba.njit
def transform_4x4(m, x, y, z, w):
    out = np.empty(4, dtype=np.float64)
    for row in range(4):
        out[row] = m[row, 0] * x + m[row, 1] * y + m[row, 2] * z + m[row, 3] * w
    return out
