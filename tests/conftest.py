# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import matplotlib
import numpy as np
import pytest

from poromat.material import (
    PiecewiseLinearTwoPhaseMaterial,
    PiecewiseLinearTwoPhaseMaterialParams,
)
from poromat.table import SampleTable
from poromat.traits import TwoPhaseMaterialTraits

matplotlib.use("Agg")


def pytest_addoption(parser):
    parser.addoption(
        "--plot",
        action="store_true",
        help=(
            "Some tests can plot the material laws. Set to true if you want "
            "to see them"
        ),
    )

    parser.addoption(
        "--bench",
        action="store_true",
        help="Run benchmarks instead of unit tests",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--bench"):
        skip_reason = pytest.mark.skip(
            reason="Running Benchmarks, not unit tests"
        )
        for item in items:
            if "bench" not in item.keywords and isinstance(
                item, pytest.Function
            ):
                item.add_marker(skip_reason)
    else:
        skip_reason = pytest.mark.skip(reason="Skipping benchmarks")

        for item in items:
            if "bench" in item.keywords:
                item.add_marker(skip_reason)


@pytest.fixture
def plot(request):
    yield request.config.getoption("--plot")


@pytest.fixture
def rng():
    yield np.random.default_rng(42)


@pytest.fixture(params=((0, 1), (1, 0)), ids=("w0-n1", "w1-n0"))
def traits(request):
    """Both possible assignments of the phase indices"""
    w, n = request.param

    yield TwoPhaseMaterialTraits(wetting_phase_idx=w, non_wetting_phase_idx=n)


@pytest.fixture
def pc_table():
    yield SampleTable([0.2, 0.5, 0.8], [5000, 1000, 200])


@pytest.fixture
def krw_table():
    yield SampleTable([0.2, 1.0], [0.0, 1.0])


@pytest.fixture
def krn_table():
    yield SampleTable([0.0, 0.4, 0.8], [1.0, 0.3, 0.0])


@pytest.fixture
def params(traits, pc_table, krw_table, krn_table):
    yield PiecewiseLinearTwoPhaseMaterialParams(
        traits,
        pcnw_samples=pc_table,
        krw_samples=krw_table,
        krn_samples=krn_table,
    )


@pytest.fixture
def law(params):
    yield PiecewiseLinearTwoPhaseMaterial(params)
