# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import pickle

import numpy as np
import pytest

from poromat.fluidstate import (
    FluidState,
    FluidStateTemplate,
    TwoPhaseFluidState,
    fluid_state_for,
)
from poromat.traits import NullMaterialTraits


def test_from_saturation(traits):
    fs = TwoPhaseFluidState.from_saturation(traits, 0.25, p=2e5, T=300)

    assert fs.saturation(traits.wetting_phase_idx) == 0.25
    assert fs.saturation(traits.non_wetting_phase_idx) == 0.75
    assert fs.pressure(0) == 2e5
    assert fs.pressure(1) == 2e5
    assert fs.temperature() == 300


def test_from_saturation_array(traits):
    sw = np.linspace(0, 1, 11)
    fs = TwoPhaseFluidState.from_saturation(traits, sw)

    assert fs.shape == (11, len(TwoPhaseFluidState.fields))
    np.testing.assert_allclose(
        fs.saturation(traits.non_wetting_phase_idx), 1 - sw
    )


def test_accessors_return_plain_arrays(traits):
    fs = TwoPhaseFluidState.from_saturation(traits, np.full((4, 3), 0.5))

    s = fs.saturation(0)

    assert type(s) is np.ndarray
    assert s.shape == (4, 3)


def test_setters():
    fs = TwoPhaseFluidState.zeros()

    fs.set_saturation(1, 0.4)
    fs.set_pressure(0, 1e6)
    fs.set_temperature(350)

    assert fs[fs.fields.S1] == 0.4
    assert fs[fs.fields.p0] == 1e6
    assert fs[fs.fields.T] == 350


@pytest.mark.parametrize("phase_idx", (-1, 2))
def test_invalid_phase(phase_idx):
    fs = TwoPhaseFluidState.zeros()

    with pytest.raises(IndexError):
        fs.saturation(phase_idx)

    with pytest.raises(IndexError):
        fs.set_pressure(phase_idx, 1.0)


def test_template():
    Q = FluidStateTemplate(3)

    assert Q.num_phases == 3
    assert Q.fields.names() == ["S0", "S1", "S2", "p0", "p1", "p2", "T"]

    fs = Q.from_saturations(0.2, 0.3, 0.5)

    assert fs.saturation(2) == 0.5


def test_wrong_number_of_saturations():
    with pytest.raises(ValueError):
        TwoPhaseFluidState.from_saturations(0.2, 0.3, 0.5)


def test_fluid_state_for():
    assert fluid_state_for(NullMaterialTraits(2)) is TwoPhaseFluidState
    assert fluid_state_for(NullMaterialTraits(1)).num_phases == 1


def test_pickling(traits):
    fs = TwoPhaseFluidState.from_saturation(traits, 0.3)

    restored = pickle.loads(pickle.dumps(fs))

    assert type(restored) is TwoPhaseFluidState
    assert restored.saturation(0) == fs.saturation(0)


def test_pickling_template():
    fs = FluidStateTemplate(3).from_saturations(0.2, 0.3, 0.5)

    restored = pickle.loads(pickle.dumps(fs))

    assert isinstance(restored, FluidState)
    assert restored.num_phases == 3
    assert restored.fields.names() == fs.fields.names()
    assert restored.saturation(1) == 0.3
    assert restored.pressure(2) == fs.pressure(2)
