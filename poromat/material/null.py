# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" A material law that does not interact with the fluids """

import logging

import numpy as np

from poromat.errors import UnsupportedOperationError
from poromat.fluidstate import FluidState
from poromat.traits import NullMaterialTraits

from .law import (
    ArrayAndScalar,
    Capabilities,
    SaturationOnlyLaw,
    TwoPhaseLaw,
)

logger = logging.getLogger(__name__)


class NullMaterial(SaturationOnlyLaw, TwoPhaseLaw):
    r"""A material law without capillary effects, where the relative
    permeability of each phase is its saturation

    .. math::

        p_{c,\alpha} = 0 \qquad
        k_{r,\alpha} = \min\left(\max\left(S_\alpha, 0\right), 1\right)

    The two-phase APIs are available only if the law has two phases, in which
    case phase 0 plays the role of the wetting phase.
    """

    def __init__(self, traits: NullMaterialTraits):
        self.traits = traits
        self.num_phases = traits.num_phases
        self.scalar = traits.scalar

        two_phase = self.num_phases == 2
        self.capabilities = Capabilities(
            implements_two_phase_api=two_phase,
            implements_two_phase_sat_api=two_phase,
            is_saturation_dependent=True,
        )

        logger.debug(f"Created {type(self).__name__} with {traits}")

    def _check_two_phase(self):
        if self.num_phases != 2:
            raise UnsupportedOperationError(
                "The two-phase API needs exactly two phases, this law has "
                f"{self.num_phases}"
            )

    @staticmethod
    def _clamp(s: ArrayAndScalar) -> ArrayAndScalar:
        return np.clip(s, 0.0, 1.0)

    @staticmethod
    def _dclamp(s: ArrayAndScalar) -> ArrayAndScalar:
        return np.where((s > 0) & (s < 1), 1.0, 0.0)

    def capillary_pressures(self, fs: FluidState) -> np.ndarray:
        return self._zeros(fs)

    def saturations(self, fs: FluidState) -> np.ndarray:
        raise UnsupportedOperationError(
            "The saturations cannot be computed from capillary pressures "
            "that are identically zero"
        )

    def relative_permeabilities(self, fs: FluidState) -> np.ndarray:
        values = self._zeros(fs)
        for phase_idx in range(self.num_phases):
            values[..., phase_idx] = self._clamp(fs.saturation(phase_idx))

        return values

    def dcapillary_pressures_dsaturation(
        self, fs: FluidState, sat_phase_idx: int
    ) -> np.ndarray:
        self._check_phase(sat_phase_idx)
        return self._zeros(fs)

    def drelative_permeabilities_dsaturation(
        self, fs: FluidState, sat_phase_idx: int
    ) -> np.ndarray:
        self._check_phase(sat_phase_idx)
        values = self._zeros(fs)
        values[..., sat_phase_idx] = self._dclamp(
            fs.saturation(sat_phase_idx)
        )

        return values

    # Two-phase API

    def pcnw(self, fs: FluidState) -> ArrayAndScalar:
        self._check_two_phase()
        return np.zeros_like(fs.saturation(0), dtype=self.scalar)

    def dpcnw_dsw(self, fs: FluidState) -> ArrayAndScalar:
        self._check_two_phase()
        return np.zeros_like(fs.saturation(0), dtype=self.scalar)

    def sw(self, fs: FluidState) -> ArrayAndScalar:
        raise UnsupportedOperationError("Not implemented: sw()")

    def krw(self, fs: FluidState) -> ArrayAndScalar:
        self._check_two_phase()
        return self._clamp(fs.saturation(0))

    def dkrw_dsw(self, fs: FluidState) -> ArrayAndScalar:
        self._check_two_phase()
        return self._dclamp(fs.saturation(0))

    def krn(self, fs: FluidState) -> ArrayAndScalar:
        self._check_two_phase()
        return self._clamp(fs.saturation(1))

    def dkrn_dsw(self, fs: FluidState) -> ArrayAndScalar:
        self._check_two_phase()
        return -self._dclamp(1 - np.asarray(fs.saturation(0)))

    def two_phase_sat_pcnw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        self._check_two_phase()
        return np.zeros_like(sw, dtype=self.scalar)

    def two_phase_sat_dpcnw_dsw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        self._check_two_phase()
        return np.zeros_like(sw, dtype=self.scalar)

    def two_phase_sat_sw(self, pc: ArrayAndScalar) -> ArrayAndScalar:
        raise UnsupportedOperationError("Not implemented: two_phase_sat_sw()")

    def two_phase_sat_krw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        self._check_two_phase()
        return self._clamp(sw)

    def two_phase_sat_dkrw_dsw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        self._check_two_phase()
        return self._dclamp(sw)

    def two_phase_sat_krn(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        self._check_two_phase()
        return self._clamp(1 - np.asarray(sw))

    def two_phase_sat_dkrn_dsw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        self._check_two_phase()
        return -self._dclamp(1 - np.asarray(sw))
