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

from dataclasses import dataclass
from math import sqrt
from typing import List

from quadtracer.geometry import Vec


def quadratic(a: float, b: float, c: float) -> List[float]:
    """Solve the equation ``a t² + b t + c = 0``

    Return a list with the real roots, sorted in ascending order: two roots if the
    discriminant is positive, one if it is zero, none if it is negative. If `a` is
    zero, the equation is solved as a linear one; no root is returned if `b` is zero
    too.

        >>> quadratic(1, 4, 3)
        [-3.0, -1.0]
    """
    if a == 0.0:
        return [] if b == 0.0 else [-c / b]

    delta = b * b - 4.0 * a * c
    if delta < 0.0:
        return []

    if delta == 0.0:
        return [-b / (2.0 * a)]

    sqrt_delta = sqrt(delta)
    t1 = (-b - sqrt_delta) / (2.0 * a)
    t2 = (-b + sqrt_delta) / (2.0 * a)
    return [min(t1, t2), max(t1, t2)]


@dataclass(frozen=True)
class QuadricParameters:
    """The ten coefficients of a quadric surface

    A quadric is the set of points satisfying the equation

        A x² + B y² + C z² + D xy + E xz + F yz + G x + H y + I z + J = 0

    where (x, y, z) are measured from the center of the surface. The default
    coefficients describe a sphere with unit radius. Use the static methods
    (:meth:`.sphere`, :meth:`.cylinder_y`, etc.) to build the parameters of the
    most common surfaces."""

    A: float = 1.0
    B: float = 1.0
    C: float = 1.0
    D: float = 0.0
    E: float = 0.0
    F: float = 0.0
    G: float = 0.0
    H: float = 0.0
    I: float = 0.0
    J: float = -1.0

    @staticmethod
    def from_list(items) -> "QuadricParameters":
        if len(items) != 10:
            raise ValueError(f"a quadric needs 10 coefficients, got {len(items)}")

        return QuadricParameters(*items)

    @staticmethod
    def sphere(radius: float) -> "QuadricParameters":
        return QuadricParameters(1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -radius * radius)

    @staticmethod
    def ellipsoid(size: Vec) -> "QuadricParameters":
        """Ellipsoid whose semi-axes along x, y, z are the components of `size`"""
        return QuadricParameters(1.0 / size.x ** 2, 1.0 / size.y ** 2, 1.0 / size.z ** 2,
                                 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0)

    @staticmethod
    def cylinder_x(radius: float) -> "QuadricParameters":
        r2 = radius * radius
        return QuadricParameters(0.0, 1.0 / r2, 1.0 / r2, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0)

    @staticmethod
    def cylinder_y(radius: float) -> "QuadricParameters":
        r2 = radius * radius
        return QuadricParameters(1.0 / r2, 0.0, 1.0 / r2, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0)

    @staticmethod
    def cylinder_z(radius: float) -> "QuadricParameters":
        r2 = radius * radius
        return QuadricParameters(1.0 / r2, 1.0 / r2, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0)

    @staticmethod
    def cone_y(radius: float) -> "QuadricParameters":
        """Double cone with its apex in the origin and its axis along y

        The radius of a section grows by `radius` for every unit of distance from the apex."""
        r2 = radius * radius
        return QuadricParameters(1.0 / r2, -1.0, 1.0 / r2, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    def coefficients(self, origin: Vec, direction: Vec):
        """Return the coefficients (Aq, Bq, Cq) of the equation in `t` for a ray

        `origin` is the origin of the ray relative to the center of the quadric, and `direction`
        is the direction of the ray. The points of the ray lying on the surface are the roots of
        ``Aq t² + Bq t + Cq = 0``."""
        ox, oy, oz = origin.x, origin.y, origin.z
        dx, dy, dz = direction.x, direction.y, direction.z

        aq = (self.A * dx * dx + self.B * dy * dy + self.C * dz * dz +
              self.D * dx * dy + self.E * dx * dz + self.F * dy * dz)

        bq = (2.0 * (self.A * ox * dx + self.B * oy * dy + self.C * oz * dz) +
              self.D * (ox * dy + oy * dx) +
              self.E * (ox * dz + oz * dx) +
              self.F * (oy * dz + oz * dy) +
              self.G * dx + self.H * dy + self.I * dz)

        cq = (self.A * ox * ox + self.B * oy * oy + self.C * oz * oz +
              self.D * ox * oy + self.E * ox * oz + self.F * oy * oz +
              self.G * ox + self.H * oy + self.I * oz + self.J)

        return aq, bq, cq

    def gradient(self, local_point: Vec) -> Vec:
        """Return the (non-normalized) gradient of the quadric function at a point relative to its center"""
        x, y, z = local_point.x, local_point.y, local_point.z
        return Vec(2.0 * self.A * x + self.D * y + self.E * z + self.G,
                   2.0 * self.B * y + self.D * x + self.F * z + self.H,
                   2.0 * self.C * z + self.E * x + self.F * y + self.I)

    def evaluate(self, local_point: Vec) -> float:
        """Return the value of the quadric function at a point relative to its center (zero on the surface)"""
        x, y, z = local_point.x, local_point.y, local_point.z
        return (self.A * x * x + self.B * y * y + self.C * z * z +
                self.D * x * y + self.E * x * z + self.F * y * z +
                self.G * x + self.H * y + self.I * z + self.J)
