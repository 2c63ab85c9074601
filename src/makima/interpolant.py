# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Modified Akima piecewise-cubic interpolant"""

import logging

import numpy as np

from makima.exceptions import InvalidInputError, OutOfDomainError
from makima.slopes import estimate_slopes


LOG = logging.getLogger('makima.interpolant')


class Makima:
    """Piecewise-cubic Hermite interpolant with Akima-family slopes

    The interpolant is built once from samples (x, y), x strictly increasing, and
    may then be evaluated anywhere on [x[0], x[-1]].  Node slopes are estimated by
    makima.slopes.estimate_slopes.  The sample and slope arrays are read-only after
    construction, so an instance can be shared between threads.

    Makima(x, y) copies its arguments; Makima.from_arrays(x, y) adopts them.

    """

    def __init__(self, x, y, copy=True):
        if copy:
            x = np.array(x, dtype=float)
            y = np.array(y, dtype=float)
        else:
            x = np.asarray(x, dtype=float)
            y = np.asarray(y, dtype=float)
        validate_samples(x, y)
        s = estimate_slopes(x, y)
        for array in (x, y, s):
            array.setflags(write=False)
        self._x = x
        self._y = y
        self._s = s
        LOG.debug('makima interpolant on %s samples over [%s, %s]', len(x), x[0], x[-1])

    @classmethod
    def from_arrays(cls, x, y):
        """Create an interpolant that takes over arrays x and y

        float64 arrays are used without copying and are made read-only; the caller
        should not hold on to them expecting to write.

        """
        return cls(x, y, copy=False)

    @classmethod
    def from_points(cls, points):
        """Create an interpolant from (x, y) pairs"""
        points = list(points)
        if not points:
            raise InvalidInputError('Must be at least two data points.', check='count')
        x, y = zip(*points)
        return cls(x, y)

    @property
    def x(self):
        """Abscissas (read-only)"""
        return self._x

    @property
    def y(self):
        """Ordinates (read-only)"""
        return self._y

    @property
    def slopes(self):
        """Estimated derivative at each node (read-only)"""
        return self._s

    def __len__(self):
        return len(self._x)

    def domain(self):
        """End points of interpolant domain (x_start, x_end)"""
        return (float(self._x[0]), float(self._x[-1]))

    def index(self, x):
        """Index i of the interval [x_i, x_{i+1}) containing x

        Values at or beyond the last abscissa give the last interval, n - 2, and
        values below the first give 0.

        """
        i = np.clip(np.searchsorted(self._x, x, side='right') - 1, 0, len(self._x) - 2)
        if np.ndim(i) == 0:
            return int(i)
        return i

    def __call__(self, x, der=0):
        """Evaluate interpolant (der=0) or its first derivative (der=1) at x

        x may be a scalar or an array; the result has the same shape.  Raises
        OutOfDomainError if any x is outside [x[0], x[-1]].

        """
        if der not in (0, 1):
            raise ValueError(f'Derivative order must be 0 or 1, not {der}')
        xq = np.asarray(x, dtype=float)
        lower, upper = self.domain()
        outside = ~((xq >= lower) & (xq <= upper))
        if outside.any():
            raise OutOfDomainError(float(xq[outside][0]), lower, upper)

        i = self.index(xq)
        x0 = self._x[i]
        dx = self._x[i + 1] - x0
        y0 = self._y[i]
        y1 = self._y[i + 1]
        s0 = self._s[i]
        s1 = self._s[i + 1]
        t = (xq - x0) / dx
        if der == 0:
            # Hermite basis y0 h00 + dx s0 h10 + y1 h01 + dx s1 h11, factored
            value = (1 - t) * (1 - t) * (y0 * (1 + 2 * t) + s0 * dx * t) + t * t * (
                y1 * (3 - 2 * t) + dx * s1 * (t - 1)
            )
            # t = 1 is only reached at the last node
            value = np.where(xq == upper, self._y[-1], value)
        else:
            value = (
                6 * t * (1 - t) * (y1 - y0) / dx
                + s0 * (1 - t) * (1 - 3 * t)
                + s1 * t * (3 * t - 2)
            )
        if np.ndim(value) == 0:
            return float(value)
        return value

    def describe_nodes(self):
        """List of {'x', 'y', 'slope'} dicts, one per node"""
        return [
            {'x': xv, 'y': yv, 'slope': sv}
            for xv, yv, sv in zip(
                self._x.tolist(), self._y.tolist(), self._s.tolist()
            )
        ]

    def __str__(self):
        return (
            "(x,y,y') = {"
            + ',  '.join(
                f'({node["x"]}, {node["y"]}, {node["slope"]})'
                for node in self.describe_nodes()
            )
            + '}'
        )

    def __repr__(self):
        return f'{type(self).__name__}(n={len(self)}, domain={self.domain()})'


def validate_samples(x, y):
    """Check that x, y are valid samples for interpolation

    Raises InvalidInputError on the first failed check, in order: one-dimensional
    arrays, equal lengths, at least two points, strictly increasing x, finite
    values.

    """
    if x.ndim != 1 or y.ndim != 1:
        raise InvalidInputError(
            f'Abscissas and ordinates must be one-dimensional, got shapes '
            f'{x.shape} and {y.shape}',
            check='shape',
        )
    if len(x) != len(y):
        raise InvalidInputError(
            'There must be the same number of ordinates as abscissas: '
            f'{len(x)} != {len(y)}',
            check='size',
        )
    if len(x) < 2:
        raise InvalidInputError('Must be at least two data points.', check='count')
    # Negated so that nan also fails
    (not_increasing,) = np.nonzero(~(np.diff(x) > 0))
    if not_increasing.size:
        index = int(not_increasing[0]) + 1
        raise InvalidInputError(
            'Abscissas must be listed in strictly increasing order '
            f'x0 < x1 < ... < x_{{n-1}}; x[{index}] = {x[index]} follows '
            f'x[{index - 1}] = {x[index - 1]}',
            check='monotonic',
            index=index,
        )
    (non_finite,) = np.nonzero(~(np.isfinite(x) & np.isfinite(y)))
    if non_finite.size:
        index = int(non_finite[0])
        raise InvalidInputError(
            f'non-finite value in samples at index {index}: '
            f'({x[index]}, {y[index]})',
            check='finite',
            index=index,
        )
