# SPDX-FileCopyrightText: 2024-2026 PoroMat Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import pickle
import numpy as np
import pytest

from poromat.state import State, StateTemplate


@pytest.fixture
def QTemplate():
    yield StateTemplate("S0", "S1", "p0", "p1")


@pytest.fixture()
def Q(QTemplate):
    yield QTemplate(0, 0, 0, 0)


def test_list_to_enum():
    Fields = State.list_to_enum(["S0", "S1"])

    assert Fields.S0 == 0
    assert Fields.S1 == 1


def test_kwargs_init():
    state = State(S0=0.3, S1=0.7)

    assert state[state.fields.S0] == 0.3
    assert state[state.fields.S1] == 0.7


def test_args_and_kwargs():
    with pytest.raises(TypeError):
        State(0.3, S1=0.7)


def test_pickling(Q):
    restored_state = pickle.loads(pickle.dumps(Q))

    assert np.array_equal(restored_state, Q)
    assert restored_state.fields.names() == Q.fields.names()


def test_set_attributes(Q):
    Q[Q.fields.p1] = 1.5

    assert Q[Q.fields.p1] == 1.5


def test_multiple_instances(QTemplate):
    Q = QTemplate(0, 0, 0, 0)
    W = QTemplate(0, 0, 0, 0)

    Q[Q.fields.p0] = 1.5

    assert W[W.fields.p0] == 0.0
    assert Q[Q.fields.p0] == 1.5


def test_reverse_view(QTemplate):
    Q = np.array([0, 1, 2, 3]).view(QTemplate)

    assert Q[Q.fields.S0] == 0
    assert Q[Q.fields.S1] == 1
    assert Q[Q.fields.p0] == 2
    assert Q[Q.fields.p1] == 3


def test_zeros(QTemplate):
    state = QTemplate.zeros((3, 2))

    assert state.shape == (3, 2, 4)
    assert isinstance(state, QTemplate)
    assert np.all(state == 0)


def test_multidimensional(QTemplate):
    state = np.random.random((10, 10, 4)).view(QTemplate)

    assert np.array_equal(state[..., state.fields.p1], state[..., 3])
