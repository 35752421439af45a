# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from .law import Capabilities, MaterialLaw, TwoPhaseLaw  # noqa: F401
from .null import NullMaterial  # noqa: F401
from .piecewise_linear import (  # noqa: F401
    PiecewiseLinearTwoPhaseMaterial,
    PiecewiseLinearTwoPhaseMaterialParams,
)

__all__ = [
    "Capabilities",
    "MaterialLaw",
    "NullMaterial",
    "PiecewiseLinearTwoPhaseMaterial",
    "PiecewiseLinearTwoPhaseMaterialParams",
    "TwoPhaseLaw",
]
