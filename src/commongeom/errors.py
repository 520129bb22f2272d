## exception taxonomy for commongeom
## Copyright (c) 2023 commongeom contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Exceptions raised by commongeom.

Every exception derives from :class:`GeometryError` and from the
built-in exception a caller would naturally catch for the same
condition, so ``except ValueError`` keeps working for input validation.

Relation outcomes such as *parallel*, *collinear* or *disjoint* are not
errors; they are values of the enumerations in
:mod:`commongeom.relations`.
"""


class GeometryError(Exception):
    """Base class for all commongeom exceptions."""


class InvalidGeometryError(GeometryError, ValueError):
    """Degenerate input rejected when a shape is constructed."""


class UnknownAnchorError(GeometryError, KeyError):
    """A rectangle anchor name that is not one of the nine known anchors."""

    def __init__(self, anchor):
        super().__init__(anchor)
        self.anchor = anchor

    def __str__(self):
        return 'unknown anchor point: {!r}'.format(self.anchor)


class NonConvexError(GeometryError, ValueError):
    """A convex-only algorithm received a non-convex polygon."""


class ConfigurationError(GeometryError, ValueError):
    """Invalid tolerance configuration."""


__all__ = [
    'GeometryError',
    'InvalidGeometryError',
    'UnknownAnchorError',
    'NonConvexError',
    'ConfigurationError',
]
