# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Exceptions raised by the material laws and their configuration objects """


class PoromatError(Exception):
    """Base class for all the errors raised by :mod:`poromat`"""


class ConfigurationError(PoromatError, ValueError):
    """Raised when a traits or parameter object is built with invalid
    values (e.g. out-of-range or repeated phase indices)"""


class TableError(ConfigurationError):
    """Raised when a :class:`~poromat.table.SampleTable` cannot be built
    from the provided samples"""


class UnsupportedOperationError(PoromatError, NotImplementedError):
    """Raised when an operation is not defined for a given material law,
    e.g. the inversion of a non-invertible capillary pressure curve"""
