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
from math import acos

from quadtracer.colors import Color, BLACK, WHITE
from quadtracer.geometry import Point, Vec, Normal, Frame
from quadtracer.materials import Material
from quadtracer.misc import clamp


@dataclass
class AttenuationParameters:
    """The coefficients of the attenuation of a light with the distance

    The attenuation factor at distance `d` is ``1 / (constant + linear d + quadratic d²)``."""

    constant: float = 1.0
    linear: float = 0.0
    quadratic: float = 0.0

    def factor(self, distance: float) -> float:
        return 1.0 / (self.constant + self.linear * distance + self.quadratic * distance * distance)

    def __str__(self):
        return f"({self.constant}, {self.linear}, {self.quadratic})"


@dataclass
class LightColor:
    """The ambient, diffuse, and specular components of the color of a light"""

    ambient: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    diffuse: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    specular: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))

    @staticmethod
    def from_color(color: Color) -> "LightColor":
        """Build a light whose three components are all equal to `color`"""
        return LightColor(ambient=Color(color.r, color.g, color.b),
                          diffuse=Color(color.r, color.g, color.b),
                          specular=Color(color.r, color.g, color.b))


PURE_WHITE_LIGHT = LightColor.from_color(WHITE)
STANDARD_WHITE_LIGHT = LightColor(ambient=Color(0.2, 0.2, 0.2), diffuse=Color(1.0, 1.0, 1.0),
                                  specular=Color(1.0, 1.0, 1.0))
TEST_LIGHT = LightColor(ambient=Color(0.3, 0.2, 0.1), diffuse=Color(1.0, 1.0, 1.0), specular=Color(0.5, 0.6, 0.7))


def ambient_color(material_color: Color, light_color: Color) -> Color:
    """Ambient term of the Phong model"""
    return (material_color * light_color).clamp(0.0, 1.0)


def diffuse_color(material_color: Color, light_color: Color, l: Vec, n: Normal) -> Color:
    """Diffuse (Lambertian) term of the Phong model

    `l` is the unit vector pointing from the surface to the light, `n` the unit normal. Surfaces
    facing away from the light get no diffuse contribution."""
    return (material_color * light_color * max(0.0, l.dot(n))).clamp(0.0, 1.0)


def specular_color(material_color: Color, light_color: Color, shininess: float, r: Vec, v: Vec) -> Color:
    """Specular term of the Phong model

    `r` is the direction of the reflected light and `v` the unit vector pointing towards the eye."""
    return (material_color * light_color * (max(0.0, v.dot(r)) ** shininess)).clamp(0.0, 1.0)


def total_color(material: Material, light_color: LightColor, v: Vec, n: Normal,
                light_pos: Point, point: Point,
                attenuation_is_on: bool = False,
                attenuation_params: AttenuationParameters = AttenuationParameters()) -> Color:
    """Compute the color produced by one light at a point, using the Phong lighting model

    The ambient term is never attenuated. The result is clamped to [0, 1]."""
    l = (light_pos - point).normalize()
    n_vec = n.to_vec()
    r = (n_vec * (2.0 * l.dot(n_vec)) - l).normalize()

    ambient = ambient_color(material.ambient, light_color.ambient)
    diffuse = diffuse_color(material.diffuse, light_color.diffuse, l, n)
    specular = specular_color(material.specular, light_color.specular, material.shininess, r, v)

    if attenuation_is_on:
        factor = attenuation_params.factor(light_pos.distance(point))
        diffuse = diffuse * factor
        specular = specular * factor

    return (ambient + diffuse + specular).clamp(0.0, 1.0)


class LightSource:
    """A generic light source

    This is an abstract class: concrete lights must redefine :meth:`.LightSource.illuminate`."""

    def __init__(self, light_color: LightColor = PURE_WHITE_LIGHT):
        self.light_color = light_color
        self.is_on = True

    def world_position(self, eye_frame: Frame) -> Point:
        """Return the position of the light in world coordinates, used to cast shadow rays"""
        raise NotImplementedError(
            "LightSource.world_position is an abstract method and cannot be called directly"
        )

    def illuminate(self, point: Point, normal: Normal, material: Material,
                   eye_frame: Frame, in_shadow: bool) -> Color:
        """Return the color this light produces at a point of a surface

        `eye_frame` is the frame of the camera (the origin is the position of the eye)."""
        raise NotImplementedError(
            "LightSource.illuminate is an abstract method and cannot be called directly"
        )


class PositionalLight(LightSource):
    """A point light placed at a given position

    If `is_tied_to_world` is False, `position` is expressed in the frame of the camera, so that the
    light moves together with the observer: use :meth:`.world_position` to get its actual position."""

    def __init__(self, position: Point, light_color: LightColor = PURE_WHITE_LIGHT):
        super().__init__(light_color)
        self.position = position
        self.attenuation_is_on = False
        self.attenuation_params = AttenuationParameters()
        self.is_tied_to_world = True

    def world_position(self, eye_frame: Frame) -> Point:
        if self.is_tied_to_world:
            return self.position

        return eye_frame.to_world_coords(self.position)

    def _lit_color(self, point: Point, normal: Normal, material: Material,
                   eye_frame: Frame, in_shadow: bool) -> Color:
        if in_shadow:
            return ambient_color(material.ambient, self.light_color.ambient)

        v = (eye_frame.origin - point).normalize()
        return total_color(material, self.light_color, v, normal,
                           self.world_position(eye_frame), point,
                           self.attenuation_is_on, self.attenuation_params)

    def illuminate(self, point: Point, normal: Normal, material: Material,
                   eye_frame: Frame, in_shadow: bool) -> Color:
        if not self.is_on:
            return Color(BLACK.r, BLACK.g, BLACK.b)

        return self._lit_color(point, normal, material, eye_frame, in_shadow)

    def __str__(self):
        return "\n".join([
            "ON" if self.is_on else "OFF",
            "WORLD" if self.is_tied_to_world else "CAMERA",
            f" position {self.position}",
            f" ambient {self.light_color.ambient}",
            f" diffuse {self.light_color.diffuse}",
            f" specular {self.light_color.specular}",
            f"Attenuation: {'ON' if self.attenuation_is_on else 'OFF'} {self.attenuation_params}",
        ])


def cos_between(a: Vec, b: Vec) -> float:
    """Return the cosine of the angle between two (non null) vectors"""
    return clamp(a.dot(b) / (a.norm() * b.norm()), -1.0, 1.0)


class SpotLight(PositionalLight):
    """A positional light emitting only within a cone

    `spot_direction` is the axis of the cone, and `fov` is its full opening angle (in radians).
    Points outside the cone receive no light at all, not even the ambient term."""

    def __init__(self, position: Point, spot_direction: Vec, fov: float,
                 light_color: LightColor = PURE_WHITE_LIGHT):
        super().__init__(position, light_color)
        self.spot_direction = spot_direction.normalize()
        self.fov = fov

    def is_within_cone(self, point: Point, eye_frame: Frame) -> bool:
        direction = point - self.world_position(eye_frame)
        if direction.squared_norm() == 0.0:
            return True

        return acos(cos_between(direction, self.spot_direction)) <= self.fov / 2.0

    def illuminate(self, point: Point, normal: Normal, material: Material,
                   eye_frame: Frame, in_shadow: bool) -> Color:
        if (not self.is_on) or (not self.is_within_cone(point, eye_frame)):
            return Color(BLACK.r, BLACK.g, BLACK.b)

        return self._lit_color(point, normal, material, eye_frame, in_shadow)

    def __str__(self):
        return super().__str__() + f"\n FOV {self.fov}"
