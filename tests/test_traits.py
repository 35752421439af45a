# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import dataclasses

import numpy as np
import pytest

from poromat.errors import ConfigurationError
from poromat.traits import NullMaterialTraits, TwoPhaseMaterialTraits


def test_two_phase_traits():
    traits = TwoPhaseMaterialTraits(1, 0)

    assert traits.num_phases == 2
    assert traits.w == 1
    assert traits.n == 0
    assert traits.scalar is np.float64


@pytest.mark.parametrize(
    "w, n",
    ((0, 0), (1, 1), (-1, 0), (0, 2), (2, 3)),
)
def test_invalid_phase_indices(w, n):
    with pytest.raises(ConfigurationError):
        TwoPhaseMaterialTraits(w, n)


@pytest.mark.parametrize("idx", (0.0, True, "0"))
def test_non_integer_phase_indices(idx):
    with pytest.raises(ConfigurationError):
        TwoPhaseMaterialTraits(idx, 1)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        TwoPhaseMaterialTraits(0, 0)


@pytest.mark.parametrize("scalar", (np.float32, "float32", np.float64))
def test_scalar(scalar):
    traits = TwoPhaseMaterialTraits(0, 1, scalar=scalar)

    assert np.dtype(traits.scalar) == np.dtype(scalar)


@pytest.mark.parametrize("scalar", (np.int64, bool, "not-a-type"))
def test_invalid_scalar(scalar):
    with pytest.raises(ConfigurationError):
        TwoPhaseMaterialTraits(0, 1, scalar=scalar)


def test_frozen():
    traits = TwoPhaseMaterialTraits(0, 1)

    with pytest.raises(dataclasses.FrozenInstanceError):
        traits.wetting_phase_idx = 1


def test_null_traits():
    assert NullMaterialTraits(3).num_phases == 3

    with pytest.raises(ConfigurationError):
        NullMaterialTraits(0)


@pytest.mark.parametrize("num_phases", (2.7, 2.0, True, "2"))
def test_null_traits_non_integer_phases(num_phases):
    with pytest.raises(ConfigurationError):
        NullMaterialTraits(num_phases)


def test_null_traits_numpy_integer():
    traits = NullMaterialTraits(np.int64(3))

    assert traits.num_phases == 3
    assert type(traits.num_phases) is int
