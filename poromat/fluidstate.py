# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" The thermodynamic state of the fluids filling the pores, as seen by the
material laws. Only saturations, pressures and temperature are stored: the
laws never read anything else from it. """

from __future__ import annotations

import numpy as np

from typing import Type, Union

from .fields import Fields
from .state import State, StateTemplate
from .traits import NullMaterialTraits, TwoPhaseMaterialTraits

ArrayAndScalar = Union[np.ndarray, float]
Traits = Union[NullMaterialTraits, TwoPhaseMaterialTraits]


def _plain(value) -> ArrayAndScalar:
    value = np.asarray(value)
    return value[()] if value.ndim == 0 else value


class FluidState(State):
    """A :class:`State` storing, for each phase index ``i``, the saturation
    ``Si`` and the pressure ``pi``, plus the temperature ``T`` shared by all
    the phases.

    The state can be a single point or an array of points, the last axis
    being the one of the fields. All the accessors return plain
    :class:`numpy.ndarray` objects (or scalars for single points).
    """

    num_phases: int

    def _check_phase(self, phase_idx: int):
        if not (0 <= phase_idx < self.num_phases):
            raise IndexError(
                f"Phase index {phase_idx} out of range for a "
                f"{self.num_phases}-phase fluid state"
            )

    def _field(self, name: str) -> int:
        return self.fields.by_name(name)

    def saturation(self, phase_idx: int) -> ArrayAndScalar:
        """The saturation of phase ``phase_idx``"""
        self._check_phase(phase_idx)
        return _plain(self[..., self._field(f"S{phase_idx}")])

    def set_saturation(self, phase_idx: int, value: ArrayAndScalar):
        self._check_phase(phase_idx)
        self[..., self._field(f"S{phase_idx}")] = value

    def pressure(self, phase_idx: int) -> ArrayAndScalar:
        """The pressure of phase ``phase_idx``"""
        self._check_phase(phase_idx)
        return _plain(self[..., self._field(f"p{phase_idx}")])

    def set_pressure(self, phase_idx: int, value: ArrayAndScalar):
        self._check_phase(phase_idx)
        self[..., self._field(f"p{phase_idx}")] = value

    def temperature(self) -> ArrayAndScalar:
        return _plain(self[..., self._field("T")])

    def set_temperature(self, value: ArrayAndScalar):
        self[..., self._field("T")] = value

    @classmethod
    def from_saturations(
        cls,
        *saturations: ArrayAndScalar,
        p: ArrayAndScalar = 1e5,
        T: ArrayAndScalar = 293.15,
    ) -> FluidState:
        """Build a state from one saturation per phase, in phase index order.
        All the phases get the same pressure ``p``."""

        if len(saturations) != cls.num_phases:
            raise ValueError(
                f"Expected {cls.num_phases} saturations, "
                f"got {len(saturations)}"
            )

        shape = np.broadcast(*saturations, p, T).shape
        state = cls.zeros(shape)

        for phase_idx, s in enumerate(saturations):
            state.set_saturation(phase_idx, s)
            state.set_pressure(phase_idx, p)

        state.set_temperature(T)

        return state  # type: ignore[return-value]


def FluidStateTemplate(num_phases: int) -> Type[FluidState]:
    """A factory of :class:`FluidState` classes for ``num_phases`` phases

    >>> Q = FluidStateTemplate(3)
    >>> Q.fields.names()
    ['S0', 'S1', 'S2', 'p0', 'p1', 'p2', 'T']
    """

    if num_phases < 1:
        raise ValueError("At least one phase is needed")

    names = [f"S{i}" for i in range(num_phases)]
    names += [f"p{i}" for i in range(num_phases)]
    names.append("T")

    state_cls = StateTemplate(
        *names, base=FluidState, name=f"FluidState{num_phases}P"
    )
    state_cls.num_phases = num_phases

    return state_cls  # type: ignore[return-value]


class TwoPhaseFields(Fields):
    S0 = 0
    S1 = 1
    p0 = 2
    p1 = 3
    T = 4


class TwoPhaseFluidState(FluidState):
    """The :class:`FluidState` of a two-phase system

    >>> traits = TwoPhaseMaterialTraits(0, 1)
    >>> fs = TwoPhaseFluidState.from_saturation(traits, 0.3)
    >>> float(fs.saturation(1))
    0.7
    """

    fields = TwoPhaseFields
    num_phases = 2

    @classmethod
    def from_saturation(
        cls,
        traits: TwoPhaseMaterialTraits,
        sw: ArrayAndScalar,
        p: ArrayAndScalar = 1e5,
        T: ArrayAndScalar = 293.15,
    ) -> TwoPhaseFluidState:
        """Build a consistent state from the wetting phase saturation, i.e.
        with :math:`S_n = 1 - S_w`"""

        sw = np.asarray(sw, dtype=float)
        saturations = [sw, sw]
        saturations[traits.wetting_phase_idx] = sw
        saturations[traits.non_wetting_phase_idx] = 1 - sw

        return cls.from_saturations(  # type: ignore[return-value]
            *saturations, p=p, T=T
        )


def fluid_state_for(traits: Traits) -> Type[FluidState]:
    """Returns the :class:`FluidState` class matching the number of phases of
    the given traits"""

    if traits.num_phases == 2:
        return TwoPhaseFluidState

    return FluidStateTemplate(traits.num_phases)
