# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import pytest

from poromat.fields import Fields


@pytest.fixture
def fields():
    class PhaseFields(Fields):
        S1 = 1
        S0 = 0

    yield PhaseFields


def test_functional_api():
    fields = Fields("Test", {"S0": 0, "S1": 1})

    assert fields.S0 == 0
    assert fields.S1 == 1
    assert len(fields) == 2


def test_no_init():
    with pytest.raises(TypeError):
        Fields()


def test_int_type(fields):
    for f in fields:
        assert isinstance(f, int)


def test_sorted_by_value(fields):
    assert fields.names() == ["S0", "S1"]
    assert [f.value for f in fields] == [0, 1]


def test_by_name(fields):
    assert fields.by_name("S1") is fields.S1

    with pytest.raises(KeyError):
        fields.by_name("T")


def test_contains(fields):
    assert "S0" in fields
    assert "p0" not in fields


def test_field_getitem():
    fields = Fields("Test", {"a": 0, "b": 1, "c": 2, "d": 3})

    assert set(fields[2:4]) == {fields.c, fields.d}
    assert fields[0].name == "a"


def test_methods_are_not_fields():
    class WithMethod(Fields):
        a = 0

        def describe(self):
            return "a"

    assert WithMethod.names() == ["a"]
