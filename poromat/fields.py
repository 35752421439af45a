# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Named integer indices used to address the last axis of a
:class:`~poromat.state.State` """

import sys

from typing import Dict, List, Optional

from aenum import (
    is_sunder,
    is_dunder,
    is_descriptor,
    is_private_name,
)


class Field(int):
    """An :class:`int` that also remembers the name it was declared with"""

    name: str
    value: int

    def __new__(cls, name: str, value: int):
        obj = super().__new__(cls, value)
        obj.name = name
        obj.value = value

        return obj

    def __repr__(self):
        return f"<{self.name}: {self.value}>"


class FieldsMeta(type):
    """A lightweight replacement of :class:`enum.EnumMeta`. Every public class
    attribute becomes a :class:`Field`, and the class itself can be iterated,
    indexed and measured like a sequence of fields"""

    _field_values: List[Field]
    _field_names: List[str]
    _by_name: Dict[str, Field]

    def __new__(cls, name, bases, clsdict):
        fields = {
            k: Field(k, v)
            for (k, v) in clsdict.items()
            if not (
                is_sunder(k)
                or is_dunder(k)
                or is_private_name(name, k)
                or is_descriptor(v)
            )
        }

        namespace = {k: v for (k, v) in clsdict.items() if k not in fields}
        namespace.update(fields)

        fields_cls = super().__new__(cls, name, bases, namespace)

        ordered = sorted(fields.values(), key=int)
        fields_cls._field_values = ordered
        fields_cls._field_names = [f.name for f in ordered]
        fields_cls._by_name = {f.name: f for f in ordered}

        return fields_cls

    def __iter__(cls):
        return iter(cls._field_values)

    def __call__(
        cls,
        clsname: Optional[str] = None,
        fields: Optional[dict] = None,
        *args,
        **kwargs,
    ):
        """Functional creation, as in ``Fields("Name", {"a": 0, "b": 1})``"""
        if fields is None:
            raise TypeError(
                "Fields classes are enumerations and cannot be instantiated"
            )

        metacls = cls.__class__
        obj = metacls.__new__(metacls, clsname, (cls,), dict(fields))

        obj.__module__ = sys._getframe(1).f_globals["__name__"]

        return obj

    def __getitem__(cls, idx):
        return cls._field_values[idx]

    def __len__(cls):
        return len(cls._field_values)

    def __contains__(cls, name: str) -> bool:
        return name in cls._by_name

    def names(cls) -> List[str]:
        """Returns the field names, sorted by index"""

        return cls._field_names

    def by_name(cls, name: str) -> Field:
        """Returns the :class:`Field` declared as ``name``

        Raises
        ------
        KeyError
            If no field with that name exists
        """

        return cls._by_name[name]


class Fields(metaclass=FieldsMeta):
    pass
