# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" The interface shared by all the material laws """

from __future__ import annotations

import numpy as np

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Type, Union

from poromat.fluidstate import FluidState

ArrayAndScalar = Union[np.ndarray, float]


@dataclass(frozen=True)
class Capabilities:
    """Describes what a material law provides and on which quantities its
    results depend. Consumers are expected to query it instead of checking
    the concrete class of the law.

    Attributes
    ----------
    implements_two_phase_api
        The law provides the two-phase convenience API based on a fluid
        state (e.g. :meth:`pcnw`, :meth:`krw`, :meth:`krn`)
    implements_two_phase_sat_api
        The law provides the two-phase convenience API based only on the
        wetting phase saturation (e.g. ``two_phase_sat_pcnw``)
    is_saturation_dependent
        The results depend on the phase saturations
    is_pressure_dependent
        The results depend on the absolute pressure
    is_temperature_dependent
        The results depend on the temperature
    is_composition_dependent
        The results depend on the phase composition
    """

    implements_two_phase_api: bool = False
    implements_two_phase_sat_api: bool = False
    is_saturation_dependent: bool = False
    is_pressure_dependent: bool = False
    is_temperature_dependent: bool = False
    is_composition_dependent: bool = False


class MaterialLaw(ABC):
    """An Abstract Base Class representing a material law, i.e. the
    relations giving the capillary pressures and the relative permeabilities
    of the fluid phases from the state of the fluids in the porous medium.

    All the methods taking a fluid state return an array whose last axis has
    one entry per phase, indexed by phase index. The leading axes are the
    ones of the fluid state.

    Attributes
    ----------
    capabilities
        The :class:`Capabilities` of the law
    num_phases
        The number of fluid phases handled by the law
    scalar
        The floating point type of the results
    """

    capabilities: Capabilities
    num_phases: int
    scalar: Type[np.floating]

    def _check_phase(self, phase_idx: int):
        if not (0 <= phase_idx < self.num_phases):
            raise IndexError(f"Phase index out of range: {phase_idx}")

    def _zeros(self, fs: FluidState) -> np.ndarray:
        shape = fs.shape[:-1] + (self.num_phases,)
        return np.zeros(shape, dtype=self.scalar)

    @abstractmethod
    def capillary_pressures(self, fs: FluidState) -> np.ndarray:
        """The capillary pressure of each phase with respect to the
        reference phase"""
        raise NotImplementedError

    @abstractmethod
    def saturations(self, fs: FluidState) -> np.ndarray:
        """The saturations of the phases computed from their pressure
        differences"""
        raise NotImplementedError

    @abstractmethod
    def relative_permeabilities(self, fs: FluidState) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def dcapillary_pressures_dsaturation(
        self, fs: FluidState, sat_phase_idx: int
    ) -> np.ndarray:
        """Derivative of all the capillary pressures with respect to the
        saturation of phase ``sat_phase_idx``"""
        raise NotImplementedError

    @abstractmethod
    def dcapillary_pressures_dpressure(
        self, fs: FluidState, p_phase_idx: int
    ) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def dcapillary_pressures_dtemperature(self, fs: FluidState) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def dcapillary_pressures_dmole_fraction(
        self, fs: FluidState, phase_idx: int, comp_idx: int
    ) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def drelative_permeabilities_dsaturation(
        self, fs: FluidState, sat_phase_idx: int
    ) -> np.ndarray:
        """Derivative of all the relative permeabilities with respect to the
        saturation of phase ``sat_phase_idx``"""
        raise NotImplementedError

    @abstractmethod
    def drelative_permeabilities_dpressure(
        self, fs: FluidState, p_phase_idx: int
    ) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def drelative_permeabilities_dtemperature(
        self, fs: FluidState
    ) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def drelative_permeabilities_dmole_fraction(
        self, fs: FluidState, phase_idx: int, comp_idx: int
    ) -> np.ndarray:
        raise NotImplementedError


class SaturationOnlyLaw(MaterialLaw):
    """A mixin for the laws that depend only on the saturations: all the
    derivatives with respect to pressure, temperature and composition are
    identically zero"""

    def dcapillary_pressures_dpressure(
        self, fs: FluidState, p_phase_idx: int
    ) -> np.ndarray:
        self._check_phase(p_phase_idx)
        return self._zeros(fs)

    def dcapillary_pressures_dtemperature(self, fs: FluidState) -> np.ndarray:
        return self._zeros(fs)

    def dcapillary_pressures_dmole_fraction(
        self, fs: FluidState, phase_idx: int, comp_idx: int
    ) -> np.ndarray:
        self._check_phase(phase_idx)
        return self._zeros(fs)

    def drelative_permeabilities_dpressure(
        self, fs: FluidState, p_phase_idx: int
    ) -> np.ndarray:
        self._check_phase(p_phase_idx)
        return self._zeros(fs)

    def drelative_permeabilities_dtemperature(
        self, fs: FluidState
    ) -> np.ndarray:
        return self._zeros(fs)

    def drelative_permeabilities_dmole_fraction(
        self, fs: FluidState, phase_idx: int, comp_idx: int
    ) -> np.ndarray:
        self._check_phase(phase_idx)
        return self._zeros(fs)


class TwoPhaseLaw(MaterialLaw):
    """The two-phase convenience API of a law that sets
    :attr:`Capabilities.implements_two_phase_api` and
    :attr:`Capabilities.implements_two_phase_sat_api`.

    The fluid-state methods read the saturations from a fluid state, the
    ``two_phase_sat_*`` ones take directly the wetting phase saturation
    :math:`S_w` (or the capillary pressure, for the inversions).
    """

    @abstractmethod
    def pcnw(self, fs: FluidState) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def dpcnw_dsw(self, fs: FluidState) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def sw(self, fs: FluidState) -> ArrayAndScalar:
        raise NotImplementedError

    def sn(self, fs: FluidState) -> ArrayAndScalar:
        return 1 - self.sw(fs)

    @abstractmethod
    def krw(self, fs: FluidState) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def dkrw_dsw(self, fs: FluidState) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def krn(self, fs: FluidState) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def dkrn_dsw(self, fs: FluidState) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def two_phase_sat_pcnw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def two_phase_sat_dpcnw_dsw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def two_phase_sat_sw(self, pc: ArrayAndScalar) -> ArrayAndScalar:
        raise NotImplementedError

    def two_phase_sat_sn(self, pc: ArrayAndScalar) -> ArrayAndScalar:
        return 1 - self.two_phase_sat_sw(pc)

    @abstractmethod
    def two_phase_sat_krw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def two_phase_sat_dkrw_dsw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def two_phase_sat_krn(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        raise NotImplementedError

    @abstractmethod
    def two_phase_sat_dkrn_dsw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        raise NotImplementedError
