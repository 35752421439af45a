# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Sampled curves used by the tabulated material laws """

from __future__ import annotations

import logging

import numpy as np

from typing import Iterable, Iterator, Sequence, Tuple

from .errors import TableError

logger = logging.getLogger(__name__)

Sample = Tuple[float, float]


class SampleTable:
    r"""An immutable, ordered sequence of :math:`(x, y)` samples of a curve.

    The abscissae must be sorted in ascending order and at least two samples
    are needed to define a segment. Repeated abscissae are allowed inside the
    table (a jump in the curve), but not at its two ends.

    >>> table = SampleTable([0.2, 0.5, 0.8], [5000, 1000, 200])
    >>> len(table)
    3
    >>> table.front
    (0.2, 5000.0)

    Attributes
    ----------
    x
        A read-only :class:`numpy.ndarray` with the abscissae of the samples
    y
        A read-only :class:`numpy.ndarray` with the values of the samples
    """

    __slots__ = ("x", "y")

    x: np.ndarray
    y: np.ndarray

    def __init__(
        self,
        x: Sequence[float],
        y: Sequence[float],
        dtype=np.float64,
    ):
        x_arr = np.array(x, dtype=dtype)
        y_arr = np.array(y, dtype=dtype)

        if x_arr.ndim != 1 or y_arr.ndim != 1:
            raise TableError("Samples must be one-dimensional sequences")

        if len(x_arr) != len(y_arr):
            raise TableError(
                f"Mismatched number of abscissae ({len(x_arr)}) and values "
                f"({len(y_arr)})"
            )

        if len(x_arr) < 2:
            raise TableError(
                f"At least two samples are needed, got {len(x_arr)}"
            )

        if not (np.all(np.isfinite(x_arr)) and np.all(np.isfinite(y_arr))):
            raise TableError("Samples must be finite numbers")

        if np.any(np.diff(x_arr) < 0):
            raise TableError("Abscissae must be sorted in ascending order")

        # The boundary segments are used for extrapolation
        if x_arr[0] == x_arr[1] or x_arr[-2] == x_arr[-1]:
            raise TableError(
                "The first and the last segments must have a non-zero width"
            )

        x_arr.flags.writeable = False
        y_arr.flags.writeable = False

        object.__setattr__(self, "x", x_arr)
        object.__setattr__(self, "y", y_arr)

        logger.debug(
            f"Built table of {len(x_arr)} samples on "
            f"[{x_arr[0]}, {x_arr[-1]}]"
        )

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Sample], dtype=np.float64
    ) -> SampleTable:
        """Build a table from an iterable of :math:`(x, y)` pairs"""

        pairs = list(pairs)
        if pairs and any(len(p) != 2 for p in pairs):
            raise TableError("Each sample must be a (x, y) pair")

        x = [p[0] for p in pairs]
        y = [p[1] for p in pairs]

        return cls(x, y, dtype=dtype)

    @classmethod
    def coerce(cls, samples, dtype=np.float64) -> SampleTable:
        """Returns ``samples`` if it is already a :class:`SampleTable` of the
        right precision, otherwise builds one from a sequence of pairs"""

        if isinstance(samples, SampleTable):
            if samples.dtype == np.dtype(dtype):
                return samples
            return cls(samples.x, samples.y, dtype=dtype)

        return cls.from_pairs(samples, dtype=dtype)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self) -> int:
        return len(self.x)

    def __getitem__(self, idx: int) -> Sample:
        return (self.x[idx].item(), self.y[idx].item())

    def __iter__(self) -> Iterator[Sample]:
        return zip(self.x.tolist(), self.y.tolist())

    def __eq__(self, other) -> bool:
        if not isinstance(other, SampleTable):
            return NotImplemented

        return np.array_equal(self.x, other.x) and np.array_equal(
            self.y, other.y
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        samples = ", ".join(f"({x:g}, {y:g})" for x, y in self)
        return f"{type(self).__name__}([{samples}])"

    @property
    def dtype(self) -> np.dtype:
        return self.x.dtype

    @property
    def front(self) -> Sample:
        """The first sample"""
        return self[0]

    @property
    def back(self) -> Sample:
        """The last sample"""
        return self[-1]

    @property
    def min_x(self) -> float:
        return self.x[0].item()

    @property
    def max_x(self) -> float:
        return self.x[-1].item()
