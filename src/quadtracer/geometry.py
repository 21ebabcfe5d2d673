# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

import math
from dataclasses import dataclass, field

from quadtracer.misc import are_close


def _are_xyz_close(a, b, epsilon=1e-5):
    # This works thanks to Python's duck typing: `Vec`, `Point` and `Normal`
    # all expose the same three fields
    return (are_close(a.x, b.x, epsilon=epsilon) and
            are_close(a.y, b.y, epsilon=epsilon) and
            are_close(a.z, b.z, epsilon=epsilon))


def _add_xyz(a, b, return_type):
    return return_type(a.x + b.x, a.y + b.y, a.z + b.z)


def _sub_xyz(a, b, return_type):
    return return_type(a.x - b.x, a.y - b.y, a.z - b.z)


def _mul_scalar_xyz(scalar, xyz, return_type):
    return return_type(scalar * xyz.x, scalar * xyz.y, scalar * xyz.z)


def _get_xyz_element(self, item):
    assert (item >= 0) and (item < 3), f"wrong vector index {item}"

    if item == 0:
        return self.x
    elif item == 1:
        return self.y

    return self.z


@dataclass
class Vec:
    """A 3D vector.

    This class has three floating-point fields: `x`, `y`, and `z`."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def is_close(self, other, epsilon=1e-5):
        """Return True if the object and 'other' have roughly the same direction and orientation"""
        assert isinstance(other, Vec)
        return _are_xyz_close(self, other, epsilon=epsilon)

    def __add__(self, other):
        """Sum two vectors, or one vector and one point"""
        if isinstance(other, Vec):
            return _add_xyz(self, other, Vec)
        elif isinstance(other, Point):
            return _add_xyz(self, other, Point)
        else:
            raise TypeError(f"Unable to run Vec.__add__ on a {type(self)} and a {type(other)}.")

    def __sub__(self, other):
        """Subtract one vector from another"""
        if isinstance(other, Vec):
            return _sub_xyz(self, other, Vec)
        else:
            raise TypeError(f"Unable to run Vec.__sub__ on a {type(self)} and a {type(other)}.")

    def __mul__(self, scalar):
        """Compute the product between a vector and a scalar"""
        return _mul_scalar_xyz(scalar=scalar, xyz=self, return_type=Vec)

    def __rmul__(self, scalar):
        return _mul_scalar_xyz(scalar=scalar, xyz=self, return_type=Vec)

    def __getitem__(self, item):
        """Return the i-th component of a vector, starting from 0"""
        return _get_xyz_element(self, item)

    def __neg__(self):
        """Return the reversed vector"""
        return Vec(-self.x, -self.y, -self.z)

    def dot(self, other):
        """Compute the dot product between two vectors

        `other` can be a :class:`.Vec` or a :class:`.Normal`."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def squared_norm(self):
        """Return the squared norm (Euclidean length) of a vector

        This is faster than `Vec.norm` if you just need the squared norm."""
        return self.x ** 2 + self.y ** 2 + self.z ** 2

    def norm(self):
        """Return the norm (Euclidean length) of a vector"""
        return math.sqrt(self.squared_norm())

    def cross(self, other):
        """Compute the cross (outer) product between two vectors"""
        return Vec(x=self.y * other.z - self.z * other.y,
                   y=self.z * other.x - self.x * other.z,
                   z=self.x * other.y - self.y * other.x)

    def normalize(self):
        """Return a vector with the same direction as this one and unit length"""
        norm = self.norm()
        return Vec(self.x / norm, self.y / norm, self.z / norm)

    def to_normal(self):
        """Convert a vector into a :class:`.Normal`"""
        return Normal(self.x, self.y, self.z)


@dataclass
class Point:
    """A point in 3D space

    This class has three floating-point fields: `x`, `y`, and `z`."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def is_close(self, other, epsilon=1e-5):
        """Return True if the object and 'other' have roughly the same position"""
        assert isinstance(other, Point)
        return _are_xyz_close(self, other, epsilon=epsilon)

    def __add__(self, other):
        """Sum a point and a vector"""
        if isinstance(other, Vec):
            return _add_xyz(self, other, Point)
        else:
            raise TypeError(f"Unable to run Point.__add__ on a {type(self)} and a {type(other)}.")

    def __sub__(self, other):
        """Subtract a vector from a point, or compute the vector joining two points"""
        if isinstance(other, Vec):
            return _sub_xyz(self, other, Point)
        elif isinstance(other, Point):
            return _sub_xyz(self, other, Vec)
        else:
            raise TypeError(f"Unable to run __sub__ on a {type(self)} and a {type(other)}.")

    def __mul__(self, scalar):
        """Multiply the point by a scalar value"""
        return _mul_scalar_xyz(scalar=scalar, xyz=self, return_type=Point)

    def __getitem__(self, item):
        """Return the i-th component of a point, starting from 0"""
        return _get_xyz_element(self, item)

    def to_vec(self):
        """Convert a `Point` into a `Vec`"""
        return Vec(self.x, self.y, self.z)

    def distance(self, other: "Point") -> float:
        """Return the Euclidean distance between two points"""
        return (self - other).norm()


@dataclass
class Normal:
    """A normal vector in 3D space

    This class has three floating-point fields: `x`, `y`, and `z`."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __neg__(self):
        return Normal(-self.x, -self.y, -self.z)

    def __getitem__(self, item):
        return _get_xyz_element(self, item)

    def is_close(self, other, epsilon=1e-5):
        """Return True if the object and 'other' have roughly the same direction and orientation"""
        assert isinstance(other, Normal)
        return _are_xyz_close(self, other, epsilon=epsilon)

    def to_vec(self) -> Vec:
        """Convert a normal into a :class:`Vec` type"""
        return Vec(self.x, self.y, self.z)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def squared_norm(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self):
        return math.sqrt(self.squared_norm())

    def normalize(self):
        norm = self.norm()
        return Normal(self.x / norm, self.y / norm, self.z / norm)


ORIGIN = Point(0.0, 0.0, 0.0)

VEC_X = Vec(1.0, 0.0, 0.0)
VEC_Y = Vec(0.0, 1.0, 0.0)
VEC_Z = Vec(0.0, 0.0, 1.0)


@dataclass
class Vec2d:
    """A 2D vector used to represent a point on a surface

    The fields are named `u` and `v` to distinguish them from the usual 3D coordinates `x`, `y`, `z`."""
    u: float = 0.0
    v: float = 0.0

    def is_close(self, other: "Vec2d", epsilon=1e-5):
        """Check whether two `Vec2d` points are roughly the same or not"""
        return (abs(self.u - other.u) < epsilon) and (abs(self.v - other.v) < epsilon)


def create_onb_from_z(normal):
    """Create a orthonormal basis (ONB) from a vector representing the z axis (which must be normalized)

    Return a tuple containing the three vectors (e1, e2, e3) of the basis. The result is such
    that e3 = normal.

    The `normal` vector must be *normalized*, otherwise this method won't work.

    The algorithm is due to Duff et al. (2017), «Building an Orthonormal Basis, Revisited»."""
    sign = math.copysign(1.0, normal.z)
    a = -1.0 / (sign + normal.z)
    b = normal.x * normal.y * a

    e1 = Vec(1.0 + sign * normal.x * normal.x * a, sign * b, -sign * normal.x)
    e2 = Vec(b, sign + normal.y * normal.y * a, -normal.y)

    return e1, e2, Vec(normal.x, normal.y, normal.z)


def normal_from_3_points(p0: Point, p1: Point, p2: Point) -> Normal:
    """Return the unit normal of the triangle (p0, p1, p2), assuming counter-clockwise order"""
    return (p1 - p0).cross(p2 - p0).normalize().to_normal()


@dataclass
class Frame:
    """A coordinate frame

    The frame is made by an `origin` (a :class:`.Point`) and three orthonormal
    vectors `u`, `v`, `w`, which play the role of the «x», «y», and «z» axes.
    Cameras use frames where `w` points *away* from the viewing direction."""

    origin: Point = field(default_factory=Point)
    u: Vec = field(default_factory=lambda: Vec(1.0, 0.0, 0.0))
    v: Vec = field(default_factory=lambda: Vec(0.0, 1.0, 0.0))
    w: Vec = field(default_factory=lambda: Vec(0.0, 0.0, 1.0))

    @staticmethod
    def create_orthonormal_basis(position: Point, look_at: Point, up: Vec) -> "Frame":
        """Build the frame of an observer placed in `position` and looking at `look_at`

        The vector `up` tells which direction should appear vertical; it does not need to be
        orthogonal to the viewing direction, but it must not be parallel to it."""
        w = (position - look_at).normalize()
        u = up.cross(w).normalize()
        v = w.cross(u).normalize()
        return Frame(origin=position, u=u, v=v, w=w)

    def to_world_coords(self, point: Point) -> Point:
        """Convert a point expressed in this frame into world coordinates"""
        return self.origin + self.to_world_vector(point.to_vec())

    def to_frame_coords(self, point: Point) -> Point:
        """Convert a point expressed in world coordinates into this frame"""
        local = self.to_frame_vector(point - self.origin)
        return Point(local.x, local.y, local.z)

    def to_world_vector(self, vec: Vec) -> Vec:
        """Convert a vector expressed in this frame into world coordinates"""
        return self.u * vec.x + self.v * vec.y + self.w * vec.z

    def to_frame_vector(self, vec: Vec) -> Vec:
        """Convert a vector expressed in world coordinates into this frame"""
        return Vec(vec.dot(self.u), vec.dot(self.v), vec.dot(self.w))

    def __str__(self):
        return f"origin {self.origin}\nu {self.u}\nv {self.v}\nw {self.w}"
