# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from immers import produce, apply, FieldPatchError, NoneCreateMismatch
from immers.patch_format import op_patch, op_somechange, op_nonecreate, op_somecreate
from immers.patchables import Boxed, int32

from .utils import (
    Node, Test, node_record, test_record, make_chain,
    check_symmetric_produce_and_apply)


def test_boxed_passes_through():
    boxed = Boxed(int32)
    assert produce(boxed, 1, 1) is None
    assert produce(boxed, 1, 2) == produce(int32, 1, 2)
    assert apply(boxed, 1, 2) == 2

    boxed_record = Boxed(test_record)
    a, b = Test(1, None, 3), Test(1, 2, 3)
    assert produce(boxed_record, a, b) == produce(test_record, a, b)
    check_symmetric_produce_and_apply(boxed_record, a, b)


def test_boxed_resolves_lazily():
    calls = []

    def target():
        calls.append(1)
        return int32

    boxed = Boxed(target)
    assert calls == []
    assert boxed.name == "Boxed[...]"
    assert produce(boxed, 1, 2) == 2
    assert produce(boxed, 2, 3) == 3
    assert calls == [1]
    assert boxed.name == "Boxed[int32]"


def test_boxed_target_must_be_patchable():
    boxed = Boxed(lambda: int)
    with pytest.raises(TypeError):
        produce(boxed, 1, 2)


def test_recursive_record():
    a = make_chain(1, 2, 3)
    b = make_chain(1, 5, 3, 4)
    p = produce(node_record, a, b)
    assert p == [
        op_patch("next", op_somechange([
            op_patch("value", 5),
            op_patch("next", op_somechange([
                op_patch("next", op_somecreate(Node(4))),
            ])),
        ])),
    ]
    check_symmetric_produce_and_apply(node_record, a, b)
    check_symmetric_produce_and_apply(node_record, make_chain(1), make_chain(1, 2, 3))
    assert produce(node_record, make_chain(1, 2), make_chain(1, 2)) is None


def test_recursive_record_error_path():
    p = produce(node_record, make_chain(1, 2), make_chain(1))
    assert p == [op_patch("next", op_nonecreate())]
    with pytest.raises(FieldPatchError) as excinfo:
        apply(node_record, make_chain(1), p)
    assert isinstance(excinfo.value.inner, NoneCreateMismatch)
    assert excinfo.value.path() == ["next"]
