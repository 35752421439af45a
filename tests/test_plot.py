# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import matplotlib.pyplot as plt
import numpy as np
import pytest

from poromat.errors import UnsupportedOperationError
from poromat.material import NullMaterial
from poromat.plot import plot_curves
from poromat.traits import NullMaterialTraits


def test_plot_curves(law, plot):
    fig = plot_curves(law, num_points=11)

    ax_pc, ax_kr = fig.axes
    pc_line = ax_pc.get_lines()[0]
    krw_line, krn_line = ax_kr.get_lines()

    np.testing.assert_allclose(pc_line.get_xdata(), np.linspace(0, 1, 11))
    np.testing.assert_allclose(
        pc_line.get_ydata(), law.two_phase_sat_pcnw(np.linspace(0, 1, 11))
    )
    assert np.all(krw_line.get_ydata() >= 0)
    assert np.all(krn_line.get_ydata() <= 1)

    if plot:
        plt.show()

    plt.close(fig)


def test_plot_on_given_axes(law):
    fig, axes = plt.subplots(2, 1)

    assert plot_curves(law, axes=axes) is fig

    plt.close(fig)


def test_plot_needs_two_phase_api():
    law = NullMaterial(NullMaterialTraits(3))

    with pytest.raises(UnsupportedOperationError):
        plot_curves(law)
