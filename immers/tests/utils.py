# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
from dataclasses import dataclass

from immers import produce, apply, is_valid_patch
from immers.patchables import (
    Boxed, Field, Optional, Record, int16, int64, uint16, uint32, int32,
    float32, string)


@dataclass
class Test:
    __test__ = False  # not a pytest test class

    foo: int = 0
    bar: int = None
    baz: int = 0


test_record = Record("Test", [
    Field("foo", uint32),
    Field("bar", Optional(uint16)),
    Field("baz", int16),
], factory=Test)


@dataclass
class Outer:
    name: str = ""
    child: Test = None


outer_record = Record("Outer", [
    Field("name", string),
    Field("child", Optional(test_record)),
], factory=Outer)


# Positional record, values are lists
foo_record = Record.positional("Foo", uint32, int32, float32, factory=lambda: [0, 0, 0.0])


@dataclass
class Node:
    value: int = 0
    next: "Node" = None


node_record = Record("Node", [
    Field("value", int64),
    Field("next", Optional(Boxed(lambda: node_record))),
], factory=Node)


def make_chain(*values):
    "Build a linked list of Nodes holding values."
    head = None
    for v in reversed(values):
        head = Node(v, head)
    return head


def check_produce_and_apply(patchable, a, b):
    "Check that apply(copy of a, produce(a, b)) reproduces b."
    p = produce(patchable, a, b)
    if a == b:
        assert p is None
        return
    assert p is not None
    assert is_valid_patch(patchable, p, deep=True)
    saved = copy.deepcopy(p)
    result = apply(patchable, patchable.copy(a), p, atomic=False, validate=True)
    assert result == b
    # Applying must not consume or alter the patch
    assert p == saved


def check_symmetric_produce_and_apply(patchable, a, b):
    "Check that patching reproduces b from a and vice versa."
    check_produce_and_apply(patchable, a, b)
    check_produce_and_apply(patchable, b, a)


def patch_keys(patch):
    return [e.key for e in patch]
