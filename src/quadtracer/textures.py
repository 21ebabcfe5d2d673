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

from math import floor

from quadtracer.colors import Color
from quadtracer.framebuffer import FrameBuffer


class Texture:
    """A «texture»

    This abstract class represents a function that associates a color with each point
    (u, v) of the unit square. Call the method :meth:`.Texture.sample` to retrieve the
    color. The ray tracer clamps `u` and `v` to [0, 1] before calling it."""

    def sample(self, u: float, v: float) -> Color:
        """Return the color of the texture at the specified coordinates"""
        raise NotImplementedError("Method Texture.sample is abstract and cannot be called")


class UniformTexture(Texture):
    """A uniform texture: the same color over the whole surface"""

    def __init__(self, color=Color()):
        self.color = color

    def sample(self, u: float, v: float) -> Color:
        return self.color


class CheckeredTexture(Texture):
    """A checkered texture

    The number of rows/columns in the checkered pattern is tunable, but you cannot have a different number of
    repetitions along the u/v directions."""

    def __init__(self, color1: Color, color2: Color, num_of_steps=10):
        self.color1 = color1
        self.color2 = color2
        self.num_of_steps = num_of_steps

    def sample(self, u: float, v: float) -> Color:
        int_u = int(floor(u * self.num_of_steps))
        int_v = int(floor(v * self.num_of_steps))

        return self.color1 if ((int_u % 2) == (int_v % 2)) else self.color2


class ImageTexture(Texture):
    """A texture backed by an image

    The image must be a :class:`.FrameBuffer` (or any object with `width`, `height`, and
    `get_pixel`). Coordinate (0, 0) is the bottom-left corner of the image."""

    def __init__(self, image: FrameBuffer):
        self.image = image

    def sample(self, u: float, v: float) -> Color:
        col = int(u * self.image.width)
        row = int(v * self.image.height)

        if col >= self.image.width:
            col = self.image.width - 1

        if row >= self.image.height:
            row = self.image.height - 1

        # Nearest-neighbour lookup
        return self.image.get_pixel(col, row)


def load_image_texture(stream) -> ImageTexture:
    """Decode an image file (PNG, JPEG, PPM, ...) and wrap it in an :class:`.ImageTexture`

    The decoding is done by Pillow. Colors are converted into floating-point values in [0, 1]."""
    from PIL import Image

    with Image.open(stream) as img:
        rgb = img.convert("RGB")
        image = FrameBuffer(rgb.width, rgb.height)
        for y in range(rgb.height):
            for x in range(rgb.width):
                r, g, b = rgb.getpixel((x, y))
                # Pillow puts row 0 at the top, while the framebuffer puts it at the bottom
                image.set_pixel(x, rgb.height - 1 - y, Color(r / 255, g / 255, b / 255))

    return ImageTexture(image)
