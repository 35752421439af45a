# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

r""" Piecewise linear interpolation on a :class:`~poromat.table.SampleTable`.

The evaluation is split in two steps: first the segment
:math:`[x_i, x_{i+1}]` bracketing the query is located, then the value (or
the slope) of the straight line through the two samples of that segment is
computed. Queries outside the tabulated range are assigned to the closest
boundary segment, hence the plain functions extrapolate linearly. The
``*_clamped`` variants extend the curve with its first and last values
instead.

All the functions accept either scalars or :class:`numpy.ndarray` queries.
"""

from __future__ import annotations

import numpy as np

from typing import Union

from .table import SampleTable

ArrayAndScalar = Union[np.ndarray, float]
IndexArrayAndScalar = Union[np.ndarray, int]


def find_segment_index(table: SampleTable, x: float) -> int:
    r"""Bisection search of the segment containing ``x``.

    Returns the index :math:`i \in [0, n - 2]` such that
    :math:`x_i \le x \le x_{i+1}` if ``x`` lies in the tabulated range, 0 if
    ``x`` is on the left of the first sample and :math:`n - 2` if it is on
    the right of the last one.

    Parameters
    ----------
    table
        The samples of the curve
    x
        A scalar query
    """

    xs = table.x
    n = len(xs) - 1
    assert n >= 1, "At least two samples are needed"

    if xs[n] < x:
        return n - 1
    elif xs[0] > x:
        return 0

    low, high = 0, n
    while low + 1 < high:
        mid = (low + high) // 2
        if xs[mid] < x:
            low = mid
        else:
            high = mid

    return low


def locate(table: SampleTable, x: ArrayAndScalar) -> IndexArrayAndScalar:
    """Array-aware version of :func:`find_segment_index`.

    For array queries the bisection is performed by
    :func:`numpy.searchsorted`: the first index ``j`` with ``x_j >= x``
    gives the segment ``j - 1``, clipped to the boundary segments. NaN
    queries get the segment 0, as in the bisection.
    """

    if np.ndim(x) == 0:
        return find_segment_index(table, x)  # type: ignore[arg-type]

    n = len(table.x) - 1
    assert n >= 1, "At least two samples are needed"

    x = np.asarray(x)
    idx = np.clip(np.searchsorted(table.x, x, side="left") - 1, 0, n - 1)

    # searchsorted sorts NaN after every sample
    return np.where(np.isnan(x), 0, idx)


def eval_segment(
    table: SampleTable, seg_idx: IndexArrayAndScalar, x: ArrayAndScalar
) -> ArrayAndScalar:
    r"""The value in ``x`` of the line through the samples ``seg_idx`` and
    ``seg_idx + 1``

    .. math::

        y = y_i + \left(y_{i+1} - y_i \right)
            \frac{x - x_i}{x_{i+1} - x_i}
    """

    x0 = table.x[seg_idx]
    x1 = table.x[seg_idx + 1]
    y0 = table.y[seg_idx]
    y1 = table.y[seg_idx + 1]

    alpha = (x - x0) / (x1 - x0)

    return y0 + (y1 - y0) * alpha


def eval_segment_derivative(
    table: SampleTable, seg_idx: IndexArrayAndScalar
) -> ArrayAndScalar:
    r"""The slope of the segment ``seg_idx``

    .. math::

        \dv{y}{x} = \frac{y_{i+1} - y_i}{x_{i+1} - x_i}
    """

    x0 = table.x[seg_idx]
    x1 = table.x[seg_idx + 1]
    y0 = table.y[seg_idx]
    y1 = table.y[seg_idx + 1]

    return (y1 - y0) / (x1 - x0)


def evaluate(table: SampleTable, x: ArrayAndScalar) -> ArrayAndScalar:
    """Interpolated value in ``x``, extrapolated linearly out of range"""

    return eval_segment(table, locate(table, x), x)


def evaluate_derivative(
    table: SampleTable, x: ArrayAndScalar
) -> ArrayAndScalar:
    """Slope of the curve in ``x``. Out of range it is the slope of the
    closest boundary segment"""

    return eval_segment_derivative(table, locate(table, x))


def evaluate_clamped(table: SampleTable, x: ArrayAndScalar) -> ArrayAndScalar:
    """Interpolated value in ``x``. Out of range, the value of the closest
    boundary sample is returned"""

    y_front = table.y[0]
    y_back = table.y[-1]

    if np.ndim(x) == 0:
        if x < table.x[0]:
            return y_front
        elif x > table.x[-1]:
            return y_back

        return evaluate(table, x)

    x = np.asarray(x)
    values = evaluate(table, x)
    values = np.where(x < table.x[0], y_front, values)

    return np.where(x > table.x[-1], y_back, values)


def evaluate_derivative_clamped(
    table: SampleTable, x: ArrayAndScalar
) -> ArrayAndScalar:
    """Slope of the curve in ``x``. Out of range the curve is flat, hence the
    slope is 0"""

    zero = table.dtype.type(0)

    if np.ndim(x) == 0:
        if x < table.x[0] or x > table.x[-1]:
            return zero

        return evaluate_derivative(table, x)

    x = np.asarray(x)
    slopes = evaluate_derivative(table, x)
    outside = (x < table.x[0]) | (x > table.x[-1])

    return np.where(outside, zero, slopes)
