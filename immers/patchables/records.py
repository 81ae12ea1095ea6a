# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import immers.log
from ..errors import PatchError, FieldPatchError
from ..log import PatchFormatError
from ..patch_format import PatchOp, RecordPatchBuilder, validate_record_patch
from .base import Patchable

__all__ = ["Field", "Record"]


class Field(object):
    """Registration of one record field.

    A str key names an attribute, an int key a position
    in an indexable (mutable) sequence.
    """

    def __init__(self, key, patchable):
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            raise TypeError("Field key must be str or int, got %r" % (key,))
        if not isinstance(patchable, Patchable):
            raise TypeError("Field %r needs a Patchable, got %r" % (key, patchable))
        self.key = key
        self.patchable = patchable

    @property
    def positional(self):
        return isinstance(self.key, int)

    def get(self, obj):
        if self.positional:
            return obj[self.key]
        return getattr(obj, self.key)

    def set(self, obj, value):
        if self.positional:
            obj[self.key] = value
        else:
            setattr(obj, self.key, value)

    def __repr__(self):
        return "Field({!r}, {!r})".format(self.key, self.patchable)


class Record(Patchable):
    """Aggregate combinator over an ordered table of fields.

    The patch of a record is a list with one entry per changed field,
    in field declaration order. Applying a patch walks its entries in
    order and stops at the first field that fails, raising a
    FieldPatchError for it. Fields patched before the failure keep
    their new values; see immers.patching.apply for an atomic variant.
    """

    def __init__(self, name, fields, factory=None):
        fields = list(fields)
        keys = [f.key for f in fields]
        if len(set(keys)) != len(keys):
            raise ValueError("Record %s declares duplicate field keys: %r" % (name, keys))
        if len({f.positional for f in fields}) > 1:
            raise ValueError("Record %s mixes named and positional fields" % name)
        self.name = name
        self.fields = fields
        self.factory = factory
        self._by_key = {f.key: f for f in fields}

    @classmethod
    def positional(cls, name, *patchables, factory=None):
        "Create a record of fields addressed by position 0, 1, ..."
        return cls(name, [Field(i, p) for i, p in enumerate(patchables)], factory=factory)

    @property
    def keys(self):
        return [f.key for f in self.fields]

    def field(self, key):
        try:
            return self._by_key[key]
        except (KeyError, TypeError):
            raise PatchFormatError("Record {} has no field '{}'.".format(self.name, key))

    def produce(self, a, b):
        di = RecordPatchBuilder()
        for f in self.fields:
            di.patch(f.key, f.patchable.produce(f.get(a), f.get(b)))
        return di.validated()

    def apply(self, obj, patch):
        if not isinstance(patch, list):
            raise PatchFormatError("Record patch must be a list.")
        for e in patch:
            op = getattr(e, "op", None)
            if op != PatchOp.PATCH:
                raise PatchFormatError("Invalid op {}.".format(op))
            f = self.field(e.get("key"))
            if e.get("patch") is None:
                raise PatchFormatError("Field entry '{}' expects a present patch.".format(f.key))
            try:
                value = f.patchable.apply(f.get(obj), e.patch)
            except PatchError as err:
                immers.log.debug("Applying patch to %s failed at field %r", self.name, f.key)
                raise FieldPatchError(self.name, f.key, err) from err
            f.set(obj, value)
        return obj

    def validate_patch(self, patch, deep=False):
        validate_record_patch(patch, self.keys)
        if deep:
            for e in patch:
                self._by_key[e.key].patchable.validate_patch(e.patch, deep=deep)

    def validate_value(self, value):
        for f in self.fields:
            try:
                v = f.get(value)
            except (AttributeError, LookupError, TypeError):
                raise PatchFormatError(
                    "Value {!r} has no field '{}' of record {}.".format(value, f.key, self.name))
            f.patchable.validate_value(v)

    def copy(self, obj):
        if self.factory is None:
            return copy.deepcopy(obj)
        new = self.factory()
        for f in self.fields:
            f.set(new, f.patchable.copy(f.get(obj)))
        return new

    def assign(self, target, source):
        "Set every field of target to the value of the same field in source."
        for f in self.fields:
            f.set(target, f.get(source))
        return target
