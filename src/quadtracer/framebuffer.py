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
from copy import copy

from quadtracer.colors import Color, BLACK


def _to_byte(value: float, gamma: float) -> int:
    value = min(max(value, 0.0), 1.0)
    return int(255 * math.pow(value, 1 / gamma))


class FrameBuffer:
    """A 2D grid of colors, used as the image sink of the ray tracer

    This class has the following members:

    -   `width` (int): number of columns in the 2D matrix of colors
    -   `height` (int): number of rows in the 2D matrix of colors
    -   `clear_color` (`Color`): the color used by :meth:`.FrameBuffer.clear`
    -   `pixels` (array of `Color`): the 2D matrix, represented as a 1D array

    Pixel (0, 0) is the *bottom-left* corner of the image, as it happens with the
    viewing parameters of the cameras.
    """

    def __init__(self, width=0, height=0, clear_color: Color = BLACK):
        """Create an image with the specified resolution, filled with `clear_color`"""
        (self.width, self.height) = (width, height)
        self.clear_color = clear_color
        self.pixels = [copy(clear_color) for i in range(self.width * self.height)]

    def valid_coordinates(self, x, y):
        """Return True if ``(x, y)`` are coordinates within the 2D matrix"""
        return ((x >= 0) and (x < self.width) and
                (y >= 0) and (y < self.height))

    def pixel_offset(self, x, y):
        """Return the position in the 1D array of the specified pixel"""
        return y * self.width + x

    def get_pixel(self, x, y):
        """Return the `Color` value for a pixel in the image"""
        assert self.valid_coordinates(x, y)
        return self.pixels[self.pixel_offset(x, y)]

    def set_pixel(self, x, y, new_color):
        """Set the new color for a pixel in the image"""
        assert self.valid_coordinates(x, y)
        self.pixels[self.pixel_offset(x, y)] = new_color

    def set_clear_color(self, clear_color: Color):
        self.clear_color = clear_color

    def clear(self):
        """Fill the whole image with the clear color"""
        for i in range(len(self.pixels)):
            self.pixels[i] = copy(self.clear_color)

    def resize(self, width, height):
        """Change the size of the image; the content is lost, and the image is cleared"""
        (self.width, self.height) = (width, height)
        self.pixels = [copy(self.clear_color) for i in range(self.width * self.height)]

    def write_ldr_image(self, stream, format, gamma=1.0):
        """Save the image in a LDR format (PNG, JPEG, ...) using Pillow

        Color components are clamped to [0, 1] before being converted to bytes. The
        bottom row of the framebuffer becomes the last row of the file."""
        from PIL import Image
        img = Image.new("RGB", (self.width, self.height))

        for y in range(self.height):
            for x in range(self.width):
                cur_color = self.get_pixel(x, y)
                img.putpixel(xy=(x, self.height - 1 - y), value=(
                    _to_byte(cur_color.r, gamma),
                    _to_byte(cur_color.g, gamma),
                    _to_byte(cur_color.b, gamma),
                ))

        img.save(stream, format=format)
