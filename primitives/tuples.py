import numbers

import numpy as np

from utils.constants import EPSILON
from utils.vectors import magnitude, normalize, dot, cross, approx_equal


def _components(x, y, z):
    xyz = np.array([x, y, z], dtype=np.float64)
    xyz.flags.writeable = False
    return xyz


class _Tuple3D:
    """
    Shared storage for the 3D value types. Components live in a read-only
    float64 array; `w` is the implicit homogeneous coordinate and is never
    stored.
    """
    __slots__ = ('xyz',)

    w = None
    # iterable, so numpy would otherwise broadcast np.float64 * Vector3D into an ndarray
    __array_ufunc__ = None

    def __init__(self, x, y, z):
        self.xyz = _components(x, y, z)

    @classmethod
    def from_array(cls, xyz):
        return cls(xyz[0], xyz[1], xyz[2])

    @classmethod
    def from_homogeneous(cls, x, y, z, w):
        # w is implied by the type, the matrix product's fourth row is dropped
        return cls(x, y, z)

    @property
    def x(self):
        return float(self.xyz[0])

    @property
    def y(self):
        return float(self.xyz[1])

    @property
    def z(self):
        return float(self.xyz[2])

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if not -3 <= index < 3:
            raise IndexError(f"{type(self).__name__} index out of range: {index}")
        return float(self.xyz[index])

    def __len__(self):
        return 3

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return approx_equal(self.xyz, other.xyz, EPSILON)

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"


class Vector3D(_Tuple3D):
    """A free displacement in 3D space (w = 0)."""
    __slots__ = ()

    w = 0.0

    def __add__(self, other):
        if isinstance(other, Vector3D):
            return Vector3D.from_array(self.xyz + other.xyz)
        if isinstance(other, Point3D):
            return Point3D.from_array(self.xyz + other.xyz)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3D):
            return Vector3D.from_array(self.xyz - other.xyz)
        return NotImplemented

    def __neg__(self):
        return Vector3D.from_array(-self.xyz)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector3D.from_array(self.xyz * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError(f"cannot divide {self!r} by zero")
        return Vector3D.from_array(self.xyz / scalar)

    def magnitude(self):
        return float(magnitude(self.xyz))

    def normalize(self):
        if self.magnitude() == 0.0:
            raise ValueError(f"cannot normalize zero-magnitude vector {self!r}")
        return Vector3D.from_array(normalize(self.xyz))

    def dot(self, other):
        return float(dot(self.xyz, other.xyz))

    def cross(self, other):
        return Vector3D.from_array(cross(self.xyz, other.xyz))

    def __str__(self):
        return f"<{self.x:.4f}, {self.y:.4f}, {self.z:.4f}>"


class Point3D(_Tuple3D):
    """A fixed location in 3D space (w = 1)."""
    __slots__ = ()

    w = 1.0

    def __add__(self, other):
        if isinstance(other, Vector3D):
            return Point3D.from_array(self.xyz + other.xyz)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point3D):
            return Vector3D.from_array(self.xyz - other.xyz)
        if isinstance(other, Vector3D):
            return Point3D.from_array(self.xyz - other.xyz)
        return NotImplemented

    def translate(self, offset):
        """Move `offset` by this point; vectors are unaffected."""
        # primitives.matrix imports this module for the Point3D/Vector3D operands
        from primitives.matrix import Matrix
        return Matrix.translation(self) * offset

    def __str__(self):
        return f"[{self.x:.4f}, {self.y:.4f}, {self.z:.4f}]"
