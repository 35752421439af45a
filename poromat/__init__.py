# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Capillary pressure and relative permeability laws for multi-phase flow
in porous media """

import logging

from .errors import (  # noqa: F401
    ConfigurationError,
    PoromatError,
    TableError,
    UnsupportedOperationError,
)
from .fluidstate import (  # noqa: F401
    FluidState,
    FluidStateTemplate,
    TwoPhaseFluidState,
)
from .material import (  # noqa: F401
    Capabilities,
    MaterialLaw,
    NullMaterial,
    PiecewiseLinearTwoPhaseMaterial,
    PiecewiseLinearTwoPhaseMaterialParams,
)
from .table import SampleTable  # noqa: F401
from .traits import NullMaterialTraits, TwoPhaseMaterialTraits  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
