# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Display the curves of a two-phase material law with matplotlib """

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np

from typing import Optional, Sequence, TYPE_CHECKING

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .errors import UnsupportedOperationError

if TYPE_CHECKING:
    from .material import MaterialLaw


def plot_curves(
    law: MaterialLaw,
    num_points: int = 101,
    axes: Optional[Sequence[Axes]] = None,
) -> Figure:
    r"""Plot :math:`p_{c,nw}(S_w)` on a first axis and
    :math:`k_{rw}(S_w)`, :math:`k_{rn}(S_w)` on a second one, over
    :math:`S_w \in [0, 1]`.

    Parameters
    ----------
    law
        A material law implementing the two-phase saturation API
    num_points
        The number of saturation values where the curves are evaluated
    axes
        Two :class:`Axes` to draw on. If not provided, a new figure with two
        side-by-side axes is created

    Returns
    -------
    fig
        The :class:`Figure` holding the axes
    """

    if not law.capabilities.implements_two_phase_sat_api:
        raise UnsupportedOperationError(
            f"{type(law).__name__} does not implement the two-phase "
            "saturation API"
        )

    if axes is None:
        fig, (ax_pc, ax_kr) = plt.subplots(1, 2, figsize=(10, 4))
    else:
        ax_pc, ax_kr = axes
        fig = ax_pc.figure

    sw = np.linspace(0, 1, num_points)

    ax_pc.plot(sw, law.two_phase_sat_pcnw(sw), label=r"$p_{c,nw}$")
    ax_pc.set_xlabel(r"$S_w$")
    ax_pc.set_ylabel(r"$p_{c,nw}$")
    ax_pc.legend()

    ax_kr.plot(sw, law.two_phase_sat_krw(sw), label=r"$k_{rw}$")
    ax_kr.plot(sw, law.two_phase_sat_krn(sw), label=r"$k_{rn}$")
    ax_kr.set_xlabel(r"$S_w$")
    ax_kr.set_ylabel(r"$k_r$")
    ax_kr.legend()

    return fig
