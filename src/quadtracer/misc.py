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

from math import fmod, pi

EPSILON = 1.0e-3
"""Distance used to move secondary rays off a surface, so that they do not hit it again"""


def are_close(num1, num2, epsilon=1e-6):
    """Return True if the two numbers differ by less than `epsilon`"""
    return abs(num1 - num2) < epsilon


def clamp(value, lo=0.0, hi=1.0):
    """Force `value` to lie within the interval [lo, hi]"""
    return max(lo, min(value, hi))


def in_range_exclusive(value, lo, hi):
    """Return True if `lo < value < hi`"""
    return lo < value < hi


def in_range_inclusive(value, lo, hi):
    """Return True if `lo <= value <= hi`"""
    return lo <= value <= hi


def normalize_radians(angle_rad):
    """Map an angle to the range [0, 2π)"""
    result = fmod(angle_rad, 2.0 * pi)
    return result + 2.0 * pi if result < 0.0 else result
