# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" A tabulated, piecewise linear two-phase material law, i.e. capillary
pressure and relative permeability curves given as sample points and
interpolated linearly, as commonly done by reservoir simulators. """

from __future__ import annotations

import logging

import numpy as np

from poromat.errors import (
    ConfigurationError,
    TableError,
    UnsupportedOperationError,
)
from poromat.fluidstate import FluidState
from poromat.interpolation import (
    evaluate,
    evaluate_clamped,
    evaluate_derivative,
    evaluate_derivative_clamped,
)
from poromat.table import SampleTable
from poromat.traits import TwoPhaseMaterialTraits

from .law import (
    ArrayAndScalar,
    Capabilities,
    SaturationOnlyLaw,
    TwoPhaseLaw,
)

logger = logging.getLogger(__name__)


class PiecewiseLinearTwoPhaseMaterialParams:
    r"""The parameters of a :class:`PiecewiseLinearTwoPhaseMaterial`: three
    independent :class:`SampleTable` objects, all indexed by the wetting
    phase saturation :math:`S_w`.

    Attributes
    ----------
    traits
        The :class:`TwoPhaseMaterialTraits` of the law
    pcnw_samples
        The capillary pressure :math:`p_{c,nw} = p_n - p_w` as a function of
        :math:`S_w`
    krw_samples
        The wetting phase relative permeability as a function of :math:`S_w`
    krn_samples
        The non-wetting phase relative permeability as a function of
        :math:`S_w` (i.e. of :math:`1 - S_n`)
    """

    def __init__(
        self,
        traits: TwoPhaseMaterialTraits,
        pcnw_samples,
        krw_samples,
        krn_samples,
    ):
        """
        Parameters
        ----------
        traits
            The :class:`TwoPhaseMaterialTraits` of the law
        pcnw_samples
            A :class:`SampleTable` or a sequence of :math:`(S_w, p_c)` pairs
        krw_samples
            A :class:`SampleTable` or a sequence of :math:`(S_w, k_{rw})`
            pairs
        krn_samples
            A :class:`SampleTable` or a sequence of :math:`(S_w, k_{rn})`
            pairs
        """

        if not isinstance(traits, TwoPhaseMaterialTraits):
            raise ConfigurationError(
                "A piecewise linear law needs TwoPhaseMaterialTraits, got "
                f"{type(traits).__name__}"
            )

        self.traits = traits
        self.pcnw_samples = SampleTable.coerce(pcnw_samples, traits.scalar)
        self.krw_samples = SampleTable.coerce(krw_samples, traits.scalar)
        self.krn_samples = SampleTable.coerce(krn_samples, traits.scalar)

        logger.debug(
            f"Configured piecewise linear law with {len(self.pcnw_samples)} "
            f"pc, {len(self.krw_samples)} krw and {len(self.krn_samples)} "
            "krn samples"
        )

    @classmethod
    def from_saturation_table(
        cls, traits: TwoPhaseMaterialTraits, table
    ) -> PiecewiseLinearTwoPhaseMaterialParams:
        r"""Build the parameters from a single table whose rows are
        :math:`(S_w, k_{rw}, k_{rn}, p_{c,nw})`, i.e. the layout of the
        ``SWOF`` keyword of the ECLIPSE simulator

        >>> traits = TwoPhaseMaterialTraits(0, 1)
        >>> Params = PiecewiseLinearTwoPhaseMaterialParams
        >>> params = Params.from_saturation_table(
        ...     traits, [[0.2, 0.0, 1.0, 5000], [1.0, 1.0, 0.0, 0]]
        ... )
        >>> params.krw_samples.back
        (1.0, 1.0)
        """

        table = np.asarray(table, dtype=traits.scalar)
        if table.ndim != 2 or table.shape[1] != 4:
            raise TableError(
                "A saturation table needs four columns: Sw, krw, krn, pcnw"
            )

        sw, krw, krn, pcnw = table.T

        return cls(
            traits,
            pcnw_samples=SampleTable(sw, pcnw, dtype=traits.scalar),
            krw_samples=SampleTable(sw, krw, dtype=traits.scalar),
            krn_samples=SampleTable(sw, krn, dtype=traits.scalar),
        )

    def __setattr__(self, name, value):
        if name in self.__dict__:
            raise AttributeError(f"{name} cannot be reassigned")
        super().__setattr__(name, value)

    def __repr__(self):
        return (
            f"{type(self).__name__}(traits={self.traits!r}, "
            f"pcnw_samples={self.pcnw_samples!r}, "
            f"krw_samples={self.krw_samples!r}, "
            f"krn_samples={self.krn_samples!r})"
        )


class PiecewiseLinearTwoPhaseMaterial(SaturationOnlyLaw, TwoPhaseLaw):
    r"""Implementation of a tabulated, piecewise linear two-phase law.

    The capillary pressure is extrapolated linearly out of the tabulated
    saturation range, while the relative permeabilities are kept constant
    at the value of the closest sample (and their derivatives are zero
    there), so that they never leave their tabulated bounds.

    The capillary pressure of the wetting phase is the reference, hence it
    is identically zero.

    .. code-block:: python

        traits = TwoPhaseMaterialTraits(
            wetting_phase_idx=0, non_wetting_phase_idx=1
        )
        params = PiecewiseLinearTwoPhaseMaterialParams(
            traits,
            pcnw_samples=[(0.2, 5000), (0.5, 1000), (0.8, 200)],
            krw_samples=[(0.2, 0.0), (1.0, 1.0)],
            krn_samples=[(0.0, 1.0), (0.8, 0.0)],
        )
        law = PiecewiseLinearTwoPhaseMaterial(params)

        law.two_phase_sat_pcnw(0.35)  # 3000

    Attributes
    ----------
    params
        The :class:`PiecewiseLinearTwoPhaseMaterialParams` of the law
    """

    capabilities = Capabilities(
        implements_two_phase_api=True,
        implements_two_phase_sat_api=True,
        is_saturation_dependent=True,
        is_pressure_dependent=False,
        is_temperature_dependent=False,
        is_composition_dependent=False,
    )

    num_phases = 2

    def __init__(self, params: PiecewiseLinearTwoPhaseMaterialParams):
        self.params = params
        self.traits = params.traits
        self.scalar = params.traits.scalar

        logger.debug(f"Created {type(self).__name__} with {self.traits}")

    @property
    def w(self) -> int:
        return self.traits.wetting_phase_idx

    @property
    def n(self) -> int:
        return self.traits.non_wetting_phase_idx

    # Fluid state API

    def capillary_pressures(self, fs: FluidState) -> np.ndarray:
        values = self._zeros(fs)
        values[..., self.n] = self.pcnw(fs)

        return values

    def saturations(self, fs: FluidState) -> np.ndarray:
        raise UnsupportedOperationError(
            "A piecewise linear capillary pressure curve cannot be inverted: "
            "saturations() is not implemented"
        )

    def relative_permeabilities(self, fs: FluidState) -> np.ndarray:
        values = self._zeros(fs)
        values[..., self.w] = self.krw(fs)
        values[..., self.n] = self.krn(fs)

        return values

    def dcapillary_pressures_dsaturation(
        self, fs: FluidState, sat_phase_idx: int
    ) -> np.ndarray:
        self._check_phase(sat_phase_idx)
        values = self._zeros(fs)

        if sat_phase_idx == self.w:
            values[..., self.n] = self.dpcnw_dsw(fs)

        return values

    def drelative_permeabilities_dsaturation(
        self, fs: FluidState, sat_phase_idx: int
    ) -> np.ndarray:
        self._check_phase(sat_phase_idx)
        values = self._zeros(fs)

        if sat_phase_idx == self.w:
            values[..., self.w] = self.dkrw_dsw(fs)
        else:
            # The krn curve is tabulated against 1 - Sn
            sw = 1 - fs.saturation(self.n)
            values[..., self.n] = -self.two_phase_sat_dkrn_dsw(sw)

        return values

    def pcnw(self, fs: FluidState) -> ArrayAndScalar:
        """The capillary pressure :math:`p_n - p_w`"""
        return self.two_phase_sat_pcnw(fs.saturation(self.w))

    def dpcnw_dsw(self, fs: FluidState) -> ArrayAndScalar:
        return self.two_phase_sat_dpcnw_dsw(fs.saturation(self.w))

    def sw(self, fs: FluidState) -> ArrayAndScalar:
        raise UnsupportedOperationError("Not implemented: sw()")

    def krw(self, fs: FluidState) -> ArrayAndScalar:
        """The relative permeability of the wetting phase"""
        return self.two_phase_sat_krw(fs.saturation(self.w))

    def dkrw_dsw(self, fs: FluidState) -> ArrayAndScalar:
        return self.two_phase_sat_dkrw_dsw(fs.saturation(self.w))

    def krn(self, fs: FluidState) -> ArrayAndScalar:
        """The relative permeability of the non-wetting phase"""
        return self.two_phase_sat_krn(1 - fs.saturation(self.n))

    def dkrn_dsw(self, fs: FluidState) -> ArrayAndScalar:
        return self.two_phase_sat_dkrn_dsw(fs.saturation(self.w))

    # Saturation API

    def two_phase_sat_pcnw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        """The capillary pressure as a function of the wetting phase
        saturation. Linear extrapolation out of range."""
        return evaluate(self.params.pcnw_samples, sw)

    def two_phase_sat_dpcnw_dsw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        r""":math:`\pdv{p_{c,nw}}{S_w}`. Out of range, it is the slope of the
        closest boundary segment."""
        return evaluate_derivative(self.params.pcnw_samples, sw)

    def two_phase_sat_sw(self, pc: ArrayAndScalar) -> ArrayAndScalar:
        raise UnsupportedOperationError("Not implemented: two_phase_sat_sw()")

    def two_phase_sat_krw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        return evaluate_clamped(self.params.krw_samples, sw)

    def two_phase_sat_dkrw_dsw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        return evaluate_derivative_clamped(self.params.krw_samples, sw)

    def two_phase_sat_krn(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        return evaluate_clamped(self.params.krn_samples, sw)

    def two_phase_sat_dkrn_dsw(self, sw: ArrayAndScalar) -> ArrayAndScalar:
        return evaluate_derivative_clamped(self.params.krn_samples, sw)
