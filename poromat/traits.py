# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Configuration records shared by the material laws: the number of fluid
phases, which index denotes which phase, and the floating point precision
used for the computations """

import numpy as np

from dataclasses import dataclass, field
from typing import Type

from .errors import ConfigurationError


def _check_scalar(scalar) -> Type[np.floating]:
    try:
        dtype = np.dtype(scalar)
    except TypeError as e:
        raise ConfigurationError(f"Invalid scalar type: {scalar!r}") from e

    if not np.issubdtype(dtype, np.floating):
        raise ConfigurationError(
            f"The scalar type must be a floating point type, got {dtype}"
        )

    return dtype.type


def _check_integer(name: str, value):
    integral = isinstance(value, (int, np.integer))
    if not integral or isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class NullMaterialTraits:
    """Traits for material laws that do not distinguish the phases

    Attributes
    ----------
    num_phases
        The number of fluid phases
    scalar
        The numpy floating point type used for the computations
    """

    num_phases: int
    scalar: Type[np.floating] = np.float64

    def __post_init__(self):
        _check_integer("num_phases", self.num_phases)
        if self.num_phases < 1:
            raise ConfigurationError(
                f"At least one fluid phase is needed, got {self.num_phases}"
            )
        object.__setattr__(self, "num_phases", int(self.num_phases))
        object.__setattr__(self, "scalar", _check_scalar(self.scalar))


@dataclass(frozen=True)
class TwoPhaseMaterialTraits:
    """Traits for two-phase material laws.

    The indices are the positions of the phases in the fluid state and in the
    arrays returned by the laws, so they must lie in ``[0, num_phases)`` and
    be different from each other.

    Attributes
    ----------
    wetting_phase_idx
        The index of the wetting phase
    non_wetting_phase_idx
        The index of the non-wetting phase
    scalar
        The numpy floating point type used for the computations

    >>> traits = TwoPhaseMaterialTraits(0, 1)
    >>> traits.num_phases
    2
    """

    wetting_phase_idx: int
    non_wetting_phase_idx: int
    scalar: Type[np.floating] = np.float64
    num_phases: int = field(default=2, init=False)

    def __post_init__(self):
        w = self.wetting_phase_idx
        n = self.non_wetting_phase_idx

        _check_integer("wetting_phase_idx", w)
        _check_integer("non_wetting_phase_idx", n)

        if not (0 <= w < self.num_phases):
            raise ConfigurationError(
                f"wetting_phase_idx is out of range: {w}"
            )

        if not (0 <= n < self.num_phases):
            raise ConfigurationError(
                f"non_wetting_phase_idx is out of range: {n}"
            )

        if w == n:
            raise ConfigurationError(
                "wetting_phase_idx and non_wetting_phase_idx must be different"
            )

        object.__setattr__(self, "scalar", _check_scalar(self.scalar))

    @property
    def w(self) -> int:
        """Shorthand for :attr:`wetting_phase_idx`"""
        return self.wetting_phase_idx

    @property
    def n(self) -> int:
        """Shorthand for :attr:`non_wetting_phase_idx`"""
        return self.non_wetting_phase_idx
