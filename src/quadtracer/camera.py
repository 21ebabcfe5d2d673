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

from math import pi, tan

from quadtracer.geometry import Point, Vec, Vec2d, Frame, VEC_Y
from quadtracer.ray import Ray


class RaytracingCamera:
    """An abstract class representing an observer

    Concrete subclasses are :class:`.PerspectiveCamera` and :class:`.OrthographicCamera`.

    The camera holds a :class:`.Frame`, whose origin is the position of the eye and whose `w`
    axis points *away* from the viewing direction, and the extents of the projection plane
    (`left`, `right`, `bottom`, `top`) for an image with `nx` × `ny` pixels. Call
    :meth:`.calculate_viewing_parameters` whenever the size of the image changes.
    """

    def __init__(self, position: Point, look_at: Point, up: Vec = VEC_Y):
        self.frame = Frame()
        self.change_configuration(position, look_at, up)

        self.nx = 1
        self.ny = 1
        self.left = -1.0
        self.right = 1.0
        self.bottom = -1.0
        self.top = 1.0

    def change_configuration(self, position: Point, look_at: Point, up: Vec = VEC_Y):
        """Move the camera to `position`, looking at `look_at`

        `up` must not be parallel to the viewing direction."""
        self.frame = Frame.create_orthonormal_basis(position, look_at, up)

    def projection_plane_coordinates(self, x: float, y: float) -> Vec2d:
        """Return the (u, v) coordinates on the projection plane of the pixel (x, y)

        Pixel coordinates can be fractional; the center of pixel (x, y) is at (x + 0.5, y + 0.5)."""
        u = self.left + (self.right - self.left) * (x + 0.5) / self.nx
        v = self.bottom + (self.top - self.bottom) * (y + 0.5) / self.ny
        return Vec2d(u, v)

    def calculate_viewing_parameters(self, width: int, height: int):
        """Compute the extents of the projection plane for an image with the given size

        This is an abstract method. You should redefine it in derived classes."""
        raise NotImplementedError(
            f"RaytracingCamera.calculate_viewing_parameters(width={width}, height={height}) is not implemented"
        )

    def get_ray(self, x: float, y: float) -> Ray:
        """Return the ray passing through the pixel (x, y)

        This is an abstract method. You should redefine it in derived classes."""
        raise NotImplementedError(f"RaytracingCamera.get_ray(x={x}, y={y}) is not implemented")

    def __str__(self):
        return f"Camera info:\nFrame\n{self.frame}"


class PerspectiveCamera(RaytracingCamera):
    """A camera implementing a perspective 3D → 2D projection

    `fov` is the vertical field of view, in radians. All the rays start from the position of
    the eye."""

    def __init__(self, position: Point, look_at: Point, up: Vec = VEC_Y, fov: float = pi / 2):
        super().__init__(position, look_at, up)
        self.fov = fov
        self.dist_to_plane = 1.0
        self.calculate_viewing_parameters(1, 1)

    def calculate_viewing_parameters(self, width: int, height: int):
        self.nx = width
        self.ny = height
        self.dist_to_plane = 1.0 / tan(self.fov / 2.0)
        self.top = 1.0
        self.bottom = -self.top
        self.right = self.top * (width / height)
        self.left = -self.right

    def set_fov(self, fov: float, width: int, height: int):
        """Change the field of view (in radians) and recompute the viewing parameters"""
        self.fov = fov
        self.calculate_viewing_parameters(width, height)

    def get_ray(self, x: float, y: float) -> Ray:
        uv = self.projection_plane_coordinates(x, y)
        direction = self.frame.w * (-self.dist_to_plane) + self.frame.u * uv.u + self.frame.v * uv.v
        return Ray(origin=self.frame.origin, dir=direction)

    def __str__(self):
        return super().__str__() + f"\nFOV {self.fov}"


class OrthographicCamera(RaytracingCamera):
    """A camera implementing an orthographic 3D → 2D projection

    All the rays are parallel to the viewing direction; `pixels_per_world_unit` tells how many
    pixels span one unit of length on the projection plane."""

    def __init__(self, position: Point, look_at: Point, up: Vec = VEC_Y, pixels_per_world_unit: float = 1.0):
        super().__init__(position, look_at, up)
        self.pixels_per_world_unit = pixels_per_world_unit
        self.calculate_viewing_parameters(1, 1)

    def calculate_viewing_parameters(self, width: int, height: int):
        self.nx = width
        self.ny = height
        self.right = width / (2.0 * self.pixels_per_world_unit)
        self.left = -self.right
        self.top = height / (2.0 * self.pixels_per_world_unit)
        self.bottom = -self.top

    def get_ray(self, x: float, y: float) -> Ray:
        uv = self.projection_plane_coordinates(x, y)
        origin = self.frame.origin + self.frame.u * uv.u + self.frame.v * uv.v
        return Ray(origin=origin, dir=-self.frame.w)

    def __str__(self):
        return super().__str__() + f"\nPixels per world unit {self.pixels_per_world_unit}"
