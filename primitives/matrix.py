import numpy as np

from primitives.tuples import Point3D, Vector3D
from utils.constants import EPSILON
from utils.matrices import (submatrix, cofactor_4x4, determinant_4x4, inverse_4x4, multiply_4x4,
                            transform_4x4)
from utils.vectors import approx_equal


class NonInvertibleMatrixError(ValueError):
    pass


class Matrix:
    """
    Immutable 4x4 affine transform stored row-major.

    Multiplying by a Point3D treats it as w=1 so translations apply, a
    Vector3D as w=0 so they don't. The fourth row of the product is not
    checked, a non-affine matrix still returns the operand's type.
    """
    __slots__ = ('m',)

    def __init__(self, rows):
        m = np.array(rows, dtype=np.float64, order="C")
        if m.shape != (4, 4):
            raise ValueError(f"Matrix needs 4x4 values, got shape {m.shape}")
        m.flags.writeable = False
        self.m = m

    @classmethod
    def translation(cls, offset):
        m = np.identity(4, dtype=np.float64)
        m[0, 3] = offset.x
        m[1, 3] = offset.y
        m[2, 3] = offset.z
        return cls(m)

    def __getitem__(self, index):
        value = self.m[index]
        if isinstance(value, np.ndarray):
            return value
        return float(value)

    def multiply(self, other):
        return Matrix(multiply_4x4(self.m, other.m))

    def apply(self, tup):
        x, y, z, w = transform_4x4(self.m, tup.x, tup.y, tup.z, tup.w)
        return type(tup).from_homogeneous(x, y, z, w)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, (Point3D, Vector3D)):
            return self.apply(other)
        return NotImplemented

    __matmul__ = __mul__

    def transpose(self):
        return Matrix(self.m.T)

    def submatrix(self, row, col):
        self._check_index(row, col)
        sub = submatrix(self.m, row, col)
        sub.flags.writeable = False
        return sub

    def cofactor(self, row, col):
        self._check_index(row, col)
        return float(cofactor_4x4(self.m, row, col))

    def determinant(self):
        return float(determinant_4x4(self.m))

    def is_invertible(self):
        return self.determinant() != 0.0

    def inverse(self):
        det = self.determinant()
        if det == 0.0:
            raise NonInvertibleMatrixError(f"cannot invert a matrix with determinant 0:\n{self.m}")
        return Matrix(inverse_4x4(self.m, det))

    @staticmethod
    def _check_index(row, col):
        if not 0 <= row <= 3:
            raise IndexError(f"submatrix row out of bounds: {row} not in 0..3")
        if not 0 <= col <= 3:
            raise IndexError(f"submatrix col out of bounds: {col} not in 0..3")

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return approx_equal(self.m.ravel(), other.m.ravel(), EPSILON)

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self.m.tolist()!r})"


IDENTITY = Matrix(np.identity(4, dtype=np.float64))
