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

from copy import deepcopy
from dataclasses import dataclass, field

from quadtracer.colors import Color, BLACK, WHITE, RED, GREEN, BLUE, YELLOW, CYAN, MAGENTA, GRAY, LIGHT_GRAY


@dataclass
class Material:
    """A material for the Phong lighting model

    The fields are the following:

    -   `ambient`, `diffuse`, `specular`: three :class:`.Color` objects modulating the
        corresponding components of each light
    -   `shininess`: the exponent used in the specular term
    -   `alpha`: the opacity of the material (1 means fully opaque)

    Materials can be scaled and summed, which is handy to blend two of them. These
    operations apply to every field, `alpha` included, and they do not try to be
    physically meaningful."""

    ambient: Color = field(default_factory=lambda: Color(0.2, 0.2, 0.2))
    diffuse: Color = field(default_factory=lambda: Color(0.8, 0.8, 0.8))
    specular: Color = field(default_factory=lambda: Color(0.0, 0.0, 0.0))
    shininess: float = 1.0
    alpha: float = 1.0

    @staticmethod
    def from_color(color: Color) -> "Material":
        """Create a flat material, which only reflects ambient light"""
        return Material(ambient=deepcopy(color), diffuse=Color(0.0, 0.0, 0.0), specular=Color(0.0, 0.0, 0.0),
                        shininess=0.0)

    @staticmethod
    def make_transparent(alpha: float, color: Color) -> "Material":
        """Create a flat material with the specified opacity"""
        result = Material.from_color(color)
        result.alpha = alpha
        return result

    @staticmethod
    def from_list(items) -> "Material":
        """Build a material from ten numbers: ambient RGB, diffuse RGB, specular RGB, and shininess"""
        if len(items) != 10:
            raise ValueError(f"a material needs 10 components, got {len(items)}")

        return Material(
            ambient=Color(*items[0:3]),
            diffuse=Color(*items[3:6]),
            specular=Color(*items[6:9]),
            shininess=items[9],
        )

    def __mul__(self, weight):
        return Material(
            ambient=self.ambient * weight,
            diffuse=self.diffuse * weight,
            specular=self.specular * weight,
            shininess=self.shininess,
            alpha=self.alpha * weight,
        )

    def __rmul__(self, weight):
        return self * weight

    def __add__(self, other):
        return Material(
            ambient=self.ambient + other.ambient,
            diffuse=self.diffuse + other.diffuse,
            specular=self.specular + other.specular,
            shininess=self.shininess,
            alpha=self.alpha + other.alpha,
        )

    def __sub__(self, other):
        return Material(
            ambient=self.ambient - other.ambient,
            diffuse=self.diffuse - other.diffuse,
            specular=self.specular - other.specular,
            shininess=self.shininess,
            alpha=self.alpha - other.alpha,
        )

    def is_close(self, other, epsilon=1e-6):
        return (self.ambient.is_close(other.ambient, epsilon=epsilon) and
                self.diffuse.is_close(other.diffuse, epsilon=epsilon) and
                self.specular.is_close(other.specular, epsilon=epsilon) and
                abs(self.shininess - other.shininess) < epsilon and
                abs(self.alpha - other.alpha) < epsilon)


# The classic table of OpenGL materials. Shininess values are already
# multiplied by 128
BRASS = Material.from_list([0.329412, 0.223529, 0.027451, 0.780392, 0.568627, 0.113725,
                            0.992157, 0.941176, 0.807843, 27.8974])
BRONZE = Material.from_list([0.2125, 0.1275, 0.054, 0.714, 0.4284, 0.18144,
                             0.393548, 0.271906, 0.166721, 25.6])
POLISHED_BRONZE = Material.from_list([0.25, 0.148, 0.06475, 0.4, 0.2368, 0.1036,
                                      0.774597, 0.458561, 0.200621, 76.8])
CHROME = Material.from_list([0.25, 0.25, 0.25, 0.4, 0.4, 0.4,
                             0.774597, 0.774597, 0.774597, 76.8])
COPPER = Material.from_list([0.19125, 0.0735, 0.0225, 0.7038, 0.27048, 0.0828,
                             0.256777, 0.137622, 0.086014, 12.8])
POLISHED_COPPER = Material.from_list([0.2295, 0.08825, 0.0275, 0.5508, 0.2118, 0.066,
                                      0.580594, 0.223257, 0.0695701, 51.2])
GOLD = Material.from_list([0.24725, 0.1995, 0.0745, 0.75164, 0.60648, 0.22648,
                           0.628281, 0.555802, 0.366065, 51.2])
POLISHED_GOLD = Material.from_list([0.24725, 0.2245, 0.0645, 0.34615, 0.3143, 0.0903,
                                    0.797357, 0.723991, 0.208006, 83.2])
TIN = Material.from_list([0.105882, 0.058824, 0.113725, 0.427451, 0.470588, 0.541176,
                          0.333333, 0.333333, 0.521569, 9.84615])
SILVER = Material.from_list([0.19225, 0.19225, 0.19225, 0.50754, 0.50754, 0.50754,
                             0.508273, 0.508273, 0.508273, 51.2])
POLISHED_SILVER = Material.from_list([0.23125, 0.23125, 0.23125, 0.2775, 0.2775, 0.2775,
                                      0.773911, 0.773911, 0.773911, 89.6])
EMERALD = Material.from_list([0.0215, 0.1745, 0.0215, 0.07568, 0.61424, 0.07568,
                              0.633, 0.727811, 0.633, 76.8])
JADE = Material.from_list([0.135, 0.2225, 0.1575, 0.54, 0.89, 0.63,
                           0.316228, 0.316228, 0.316228, 12.8])
OBSIDIAN = Material.from_list([0.05375, 0.05, 0.06625, 0.18275, 0.17, 0.22525,
                               0.332741, 0.328634, 0.346435, 38.4])
PEARL = Material.from_list([0.25, 0.20725, 0.20725, 1.0, 0.829, 0.829,
                            0.296648, 0.296648, 0.296648, 11.264])
RUBY = Material.from_list([0.1745, 0.01175, 0.01175, 0.61424, 0.04136, 0.04136,
                           0.727811, 0.626959, 0.626959, 76.8])
TURQUOISE = Material.from_list([0.1, 0.18725, 0.1745, 0.396, 0.74151, 0.69102,
                                0.297254, 0.30829, 0.306678, 12.8])
BLACK_PLASTIC = Material.from_list([0.0, 0.0, 0.0, 0.01, 0.01, 0.01,
                                    0.5, 0.5, 0.5, 32.0])
CYAN_PLASTIC = Material.from_list([0.0, 0.1, 0.06, 0.0, 0.50980392, 0.50980392,
                                   0.50196078, 0.50196078, 0.50196078, 32.0])
GREEN_PLASTIC = Material.from_list([0.0, 0.0, 0.0, 0.1, 0.35, 0.1,
                                    0.45, 0.55, 0.45, 32.0])
RED_PLASTIC = Material.from_list([0.0, 0.0, 0.0, 0.5, 0.0, 0.0,
                                  0.7, 0.6, 0.6, 32.0])
WHITE_PLASTIC = Material.from_list([0.0, 0.0, 0.0, 0.55, 0.55, 0.55,
                                    0.7, 0.7, 0.7, 32.0])
YELLOW_PLASTIC = Material.from_list([0.0, 0.0, 0.0, 0.5, 0.5, 0.0,
                                     0.6, 0.6, 0.5, 32.0])
BLACK_RUBBER = Material.from_list([0.02, 0.02, 0.02, 0.01, 0.01, 0.01,
                                   0.4, 0.4, 0.4, 10.0])
CYAN_RUBBER = Material.from_list([0.0, 0.05, 0.05, 0.4, 0.5, 0.5,
                                  0.04, 0.7, 0.7, 10.0])
GREEN_RUBBER = Material.from_list([0.0, 0.05, 0.0, 0.4, 0.5, 0.4,
                                   0.04, 0.7, 0.04, 10.0])
RED_RUBBER = Material.from_list([0.05, 0.0, 0.0, 0.5, 0.4, 0.4,
                                 0.7, 0.04, 0.04, 10.0])
WHITE_RUBBER = Material.from_list([0.05, 0.05, 0.05, 0.5, 0.5, 0.5,
                                   0.7, 0.7, 0.7, 10.0])
YELLOW_RUBBER = Material.from_list([0.05, 0.05, 0.0, 0.5, 0.5, 0.4,
                                    0.7, 0.7, 0.04, 10.0])

# Flat materials, only reacting to ambient light
BLACK_MATERIAL = Material.from_color(BLACK)
WHITE_MATERIAL = Material.from_color(WHITE)
RED_MATERIAL = Material.from_color(RED)
GREEN_MATERIAL = Material.from_color(GREEN)
BLUE_MATERIAL = Material.from_color(BLUE)
YELLOW_MATERIAL = Material.from_color(YELLOW)
CYAN_MATERIAL = Material.from_color(CYAN)
MAGENTA_MATERIAL = Material.from_color(MAGENTA)
GRAY_MATERIAL = Material.from_color(GRAY)
LIGHT_GRAY_MATERIAL = Material.from_color(LIGHT_GRAY)
