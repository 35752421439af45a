# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import sys

import numpy as np

from typing import Collection, Type

from .fields import Fields


def unpickle_state(cls_name, d, array, base=None, attrs=None):
    Q = StateTemplate(*d.keys(), base=base or State, name=cls_name)
    for name, value in (attrs or {}).items():
        setattr(Q, name, value)

    return array.view(Q)


def _importable(cls) -> bool:
    module = sys.modules.get(cls.__module__)
    return getattr(module, cls.__qualname__, None) is cls


class State(np.ndarray):
    """:class:`State` is a subclass of :class:`numpy.ndarray` whose last axis
    is addressed by name through the :attr:`fields` attribute.

    A :class:`State` class is usually generated with :func:`StateTemplate`

    >>> Q = StateTemplate("S0", "S1")
    >>> state = np.array([0.3, 0.7]).view(Q)
    >>> assert state[state.fields.S0] == 0.3
    >>> assert state[state.fields.S1] == 0.7

    or directly providing key-value arguments

    >>> state = State(S0=0.3, S1=0.7)
    >>> assert state[state.fields.S1] == 0.7

    A :class:`State` can be multidimensional, e.g. one entry per mesh cell.
    The last dimension must match the number of fields

    >>> state = np.random.random((10, 10, 2)).view(Q)
    >>> assert np.array_equal(state[..., state.fields.S0], state[..., 0])
    """

    fields: Type[Fields]
    _FIELDS_ENUM_NAME = "FieldsEnum"

    def __new__(cls, *args, **kwargs):
        if args and kwargs:
            raise TypeError(
                "A State can be defined using positional arguments OR "
                "keyword arguments, not both"
            )

        if kwargs:
            cls = StateTemplate(*kwargs.keys(), base=cls)
            args = tuple(kwargs.values())

        return np.asarray(args, dtype=float).view(cls)

    def __reduce__(self):
        cls = type(self)
        if _importable(cls):
            return super().__reduce__()

        # Classes built at runtime cannot be pickled, rebuild them on their
        # closest importable base
        base = next(c for c in cls.__mro__[1:] if _importable(c))
        enum_dict = {f.name: f.value for f in self.fields}
        attrs = {
            name: value
            for name, value in vars(cls).items()
            if not name.startswith("_") and name != "fields"
        }
        return (
            unpickle_state,
            (cls.__name__, enum_dict, self.view(np.ndarray), base, attrs),
        )

    @classmethod
    def list_to_enum(cls, fields: Collection[str]) -> Type[Fields]:
        """Convert a list of textual fields to the :class:`Fields` stored in
        :attr:`fields`"""

        return Fields(  # type: ignore
            cls._FIELDS_ENUM_NAME, dict(zip(fields, range(len(fields))))
        )

    @classmethod
    def zeros(cls, shape=()) -> State:
        """An all-zeros state with ``shape`` leading dimensions"""

        if isinstance(shape, int):
            shape = (shape,)

        return np.zeros(tuple(shape) + (len(cls.fields),)).view(cls)


def StateTemplate(
    *fields: str, base: Type[State] = State, name: str = "DerivedState"
) -> Type[State]:
    r"""A factory for a :class:`State`.

    It creates a :class:`State` subclass whose variables can be accessed by
    name through the attribute :attr:`fields`, and not only by index.

    Parameters
    ----------
    fields
        A list of (scalar) fields composing the state
    base
        The :class:`State` subclass to derive from
    name
        The name of the generated class

    >>> Q = StateTemplate("S0", "S1", "p0", "p1")
    >>> zero = Q(0, 0, 0, 0)
    >>> assert zero[Q.fields.p1] == 0
    """
    state_fields: Type[Fields] = base.list_to_enum(fields)
    state_cls = type(name, (base,), {"fields": state_fields})

    return state_cls
