## epsilon-tolerant scalar predicates and tolerance configuration
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

"""tolerance context and epsilon-aware scalar comparisons

====================
OVERVIEW
====================

Every geometric comparison in **commongeom** routes through the
predicates defined here rather than through raw ``==`` or ``<``.
Floating point error from rotations and intersections accumulates, and
a fixed absolute epsilon absorbs it.

The tolerance is a value, not a global: each predicate takes a ``tol``
keyword argument holding a :class:`Tolerance`, and defaults to
``DEFAULT_TOLERANCE``. Shapes remember the tolerance they were built
with and hand it down to the queries they run.

**NOTE:** epsilon is *absolute*.  Coordinates with very large or very
small magnitudes get degraded precision.  Scale your data, or build a
``Tolerance`` with a suitable epsilon.

comparison semantics
====================

Given ``eps = tol.epsilon``:

* ``eq(a, b)``  is ``|a - b| <= eps``
* ``lt(a, b)``  is ``a < b + eps``
* ``leq(a, b)`` is ``a <= b + eps``
* ``gt(a, b)``  is ``a + eps > b``
* ``geq(a, b)`` is ``a + eps >= b``
* ``sign(x)``   is ``0`` when ``|x| <= eps``, otherwise ``-1`` or ``+1``

``lt`` and ``gt`` are therefore permissive: values within epsilon of
each other compare as ordered both ways.  Use ``is_positive(b - a)``
when a strict, tolerance-aware ordering is required.

configuration files
===================

``load_tolerance()`` reads a YAML or JSON document such as ::

   tolerance:
     epsilon: 1.0e-6
     infinity: 1.0e12
     y_axis: down

The ``tolerance`` section is optional; a bare top-level mapping with the
same keys is accepted too.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Union

from commongeom.errors import ConfigurationError

logger = logging.getLogger(__name__)


class YAxis(Enum):
    """Orientation of the Y axis.

    ``UP`` is the mathematical convention. ``DOWN`` is the screen
    convention, where "top" means the smallest y coordinate.
    """

    UP = 'up'
    DOWN = 'down'


@dataclass(frozen=True)
class Tolerance:
    """Immutable numeric tolerance context."""

    epsilon: float = 1e-8
    infinity: float = 1e20
    y_axis: YAxis = YAxis.UP

    def __post_init__(self):
        if isinstance(self.y_axis, str):
            object.__setattr__(self, 'y_axis', _parse_y_axis(self.y_axis))
        if not isinstance(self.y_axis, YAxis):
            raise ConfigurationError('bad y_axis value: {!r}'.format(self.y_axis))
        if not _isgoodnum(self.epsilon) or self.epsilon <= 0:
            raise ConfigurationError('epsilon must be a positive number, got {!r}'.format(self.epsilon))
        if not _isgoodnum(self.infinity) or self.infinity <= self.epsilon:
            raise ConfigurationError('infinity must be a number larger than epsilon, got {!r}'.format(self.infinity))

    @property
    def y_up(self) -> bool:
        return self.y_axis is YAxis.UP

    def with_epsilon(self, epsilon: float) -> "Tolerance":
        return replace(self, epsilon=epsilon)

    def with_y_axis(self, y_axis: Union[YAxis, str]) -> "Tolerance":
        return replace(self, y_axis=_parse_y_axis(y_axis))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Tolerance":
        """Build a tolerance from a mapping, rejecting unknown keys."""

        if not isinstance(data, Mapping):
            raise ConfigurationError('tolerance configuration must be a mapping')
        known = {'epsilon', 'infinity', 'y_axis'}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError('unknown tolerance keys: {}'.format(sorted(unknown)))
        kwargs = {}
        for key in ('epsilon', 'infinity'):
            if key in data:
                try:
                    kwargs[key] = float(data[key])
                except (TypeError, ValueError) as exc:
                    raise ConfigurationError('bad {} value: {!r}'.format(key, data[key])) from exc
        if 'y_axis' in data:
            kwargs['y_axis'] = _parse_y_axis(data['y_axis'])
        return cls(**kwargs)

    def to_mapping(self) -> dict:
        return {
            'epsilon': self.epsilon,
            'infinity': self.infinity,
            'y_axis': self.y_axis.value,
        }


def _isgoodnum(n) -> bool:
    return (not isinstance(n, bool)) and isinstance(n, (int, float)) and math.isfinite(n)


def _parse_y_axis(value) -> YAxis:
    if isinstance(value, YAxis):
        return value
    try:
        return YAxis(str(value).strip().lower())
    except ValueError as exc:
        raise ConfigurationError("y_axis must be 'up' or 'down', got {!r}".format(value)) from exc


DEFAULT_TOLERANCE = Tolerance()


def load_tolerance(path: Union[str, Path]) -> Tolerance:
    """Load a :class:`Tolerance` from a YAML or JSON file."""

    path = Path(path)
    with path.open('r', encoding='utf-8') as fp:
        if path.suffix == '.json':
            data = json.load(fp)
        else:
            import yaml
            data = yaml.safe_load(fp)
    if data is None:
        data = {}
    if isinstance(data, Mapping) and 'tolerance' in data:
        data = data['tolerance'] or {}
    tol = Tolerance.from_mapping(data)
    logger.debug('loaded tolerance %s from %s', tol, path)
    return tol


def save_tolerance(tol: Tolerance, path: Union[str, Path]) -> None:
    """Write ``tol`` under a ``tolerance`` section of a YAML or JSON file."""

    path = Path(path)
    document = {'tolerance': tol.to_mapping()}
    with path.open('w', encoding='utf-8') as fp:
        if path.suffix == '.json':
            json.dump(document, fp, indent=2)
        else:
            import yaml
            yaml.safe_dump(document, fp, sort_keys=False)


## operations on scalars
## ---------------------

def eq(x: float, y: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """are two scalars the same within epsilon"""
    return abs(x - y) <= tol.epsilon


def neq(x: float, y: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return abs(x - y) > tol.epsilon


def lt(x: float, y: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """``x`` is less than ``y`` or within epsilon of it"""
    return x < y + tol.epsilon


def leq(x: float, y: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return x <= y + tol.epsilon


def gt(x: float, y: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """``x`` is greater than ``y`` or within epsilon of it"""
    return x + tol.epsilon > y


def geq(x: float, y: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return x + tol.epsilon >= y


def is_zero(x: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return abs(x) <= tol.epsilon


def is_nonzero(x: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return abs(x) > tol.epsilon


def is_positive(x: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return x > tol.epsilon


def is_negative(x: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return x < -tol.epsilon


def is_nonpositive(x: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return x <= tol.epsilon


def is_nonnegative(x: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return x >= -tol.epsilon


def sign(x: float, *, tol: Tolerance = DEFAULT_TOLERANCE) -> int:
    """Sign of ``x``, which is zero whenever ``|x| <= epsilon``.

    ``math.copysign`` never reports zero for tiny residues; this does.
    """
    if is_zero(x, tol=tol):
        return 0
    return -1 if x < 0 else 1


def modulo(x: int, n: int) -> int:
    """Non-negative remainder of ``x`` divided by ``n``."""
    return ((x % n) + n) % n


__all__ = [
    'YAxis',
    'Tolerance',
    'DEFAULT_TOLERANCE',
    'load_tolerance',
    'save_tolerance',
    'eq',
    'neq',
    'lt',
    'leq',
    'gt',
    'geq',
    'is_zero',
    'is_nonzero',
    'is_positive',
    'is_negative',
    'is_nonpositive',
    'is_nonnegative',
    'sign',
    'modulo',
]
