# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..errors import (
    PatchError, SomePatchMismatch, SomeCreateMismatch, NoneCreateMismatch,
    WithinSome)
from ..log import PatchFormatError
from ..patch_format import (
    PatchOp, op_somechange, op_somecreate, op_nonecreate,
    validate_optional_entry)
from .base import Patchable
from .delegate import Boxed
from .primitives import Primitive

__all__ = ["Optional"]


class Optional(Patchable):
    """Combinator for values that are either None or hold an inner value.

    Patches are single entries of one of three kinds:

    somechange
        both sides hold a value, entry carries the inner patch
    somecreate
        before is None, entry carries the value to create
    nonecreate
        before holds a value, after is None

    Keeping creation apart from change means a patch never has to
    guess whether it updates an existing value or makes a new one.
    """

    def __init__(self, inner):
        # None marks absence, so a held value can never itself be None
        if _admits_none(inner, resolve=False):
            raise TypeError("Optional cannot wrap %r, it can hold None" % (inner,))
        self._inner = inner
        self._checked = not _is_lazy(inner)

    @property
    def inner(self):
        if not self._checked:
            if _admits_none(self._inner, resolve=True):
                raise TypeError("Optional cannot wrap %r, it can hold None" % (self._inner,))
            self._checked = True
        return self._inner

    @property
    def name(self):
        return "Optional[{}]".format(self._inner.name)

    def produce(self, a, b):
        if a is not None:
            if b is not None:
                p = self.inner.produce(a, b)
                return op_somechange(p) if p is not None else None
            return op_nonecreate()
        if b is not None:
            return op_somecreate(self.inner.copy(b))
        return None

    def apply(self, obj, patch):
        op = getattr(patch, "op", None)
        if op == PatchOp.SOME_CHANGE:
            if obj is None:
                raise SomePatchMismatch()
            try:
                return self.inner.apply(obj, patch.patch)
            except PatchError as e:
                raise WithinSome(e) from e
        elif op == PatchOp.SOME_CREATE:
            if obj is not None:
                raise SomeCreateMismatch()
            return self.inner.copy(patch.value)
        elif op == PatchOp.NONE_CREATE:
            if obj is None:
                raise NoneCreateMismatch()
            return None
        else:
            raise PatchFormatError("Invalid op {}.".format(op))

    def validate_patch(self, patch, deep=False):
        validate_optional_entry(patch)
        if not deep:
            return
        if patch.op == PatchOp.SOME_CHANGE:
            self.inner.validate_patch(patch.patch, deep=deep)
        elif patch.op == PatchOp.SOME_CREATE:
            if patch.value is None:
                raise PatchFormatError("somecreate cannot create None.")
            self.inner.validate_value(patch.value)

    def validate_value(self, value):
        if value is not None:
            self.inner.validate_value(value)

    def copy(self, obj):
        if obj is None:
            return None
        return self.inner.copy(obj)


def _is_lazy(patchable):
    while isinstance(patchable, Boxed):
        if patchable._resolved is None:
            return True
        patchable = patchable._resolved
    return False


def _admits_none(patchable, resolve):
    """Whether None is a valid value of patchable.

    Boxed targets are followed, unresolved ones only if resolve is true.
    """
    while isinstance(patchable, Boxed):
        if patchable._resolved is None and not resolve:
            return False
        patchable = patchable.target
    if isinstance(patchable, Optional):
        return True
    return isinstance(patchable, Primitive) and type(None) in patchable.pytypes
