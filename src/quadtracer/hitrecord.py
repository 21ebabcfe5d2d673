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

from dataclasses import dataclass, field
from math import inf
from typing import List, Union

from quadtracer.geometry import Point, Normal, Vec2d


@dataclass
class HitRecord:
    """
    A class holding information about a ray-shape intersection

    The parameters defined in this dataclass are the following:

    -   `t`: a floating-point value specifying the distance from the origin of the ray where the hit happened.
        The default value, `math.inf`, means that there was no hit at all: in this case, the other fields
        carry no meaningful information
    -   `world_point`: a :class:`.Point` object holding the world coordinates of the hit point
    -   `normal`: a :class:`.Normal` object holding the orientation of the normal to the surface where the hit happened
    -   `surface_point`: a :class:`.Vec2d` object holding the (u, v) coordinates of the hit point on the surface
    -   `material`: a copy of the :class:`.Material` of the visible shape that was hit
    -   `texture`: the texture associated with the visible shape, or `None`

    A `HitRecord` evaluates to `False` in a boolean context if it represents a missed hit, so you
    can write ``if hit: ...``.
    """
    t: float = inf
    world_point: Point = field(default_factory=Point)
    normal: Normal = field(default_factory=Normal)
    surface_point: Vec2d = field(default_factory=Vec2d)
    material: Union["Material", None] = None
    texture: Union["Texture", None] = None

    @property
    def is_hit(self) -> bool:
        """True if this record represents an actual intersection"""
        return self.t < inf

    def __bool__(self):
        return self.is_hit

    def is_close(self, other: Union["HitRecord", None], epsilon=1e-5) -> bool:
        """Check whether two `HitRecord` represent the same hit event or not"""
        if not other:
            return False

        return (
                self.world_point.is_close(other.world_point) and
                self.normal.is_close(other.normal) and
                self.surface_point.is_close(other.surface_point) and
                (abs(self.t - other.t) < epsilon)
        )

    @staticmethod
    def get_closest(hits: List["HitRecord"]) -> "HitRecord":
        """Return the closest hit in front of the ray's origin (``t > 0``), or a «no hit» record"""
        closest = HitRecord()
        for hit in hits:
            if 0.0 < hit.t < closest.t:
                closest = hit

        return closest
