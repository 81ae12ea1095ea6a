# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from ..log import PatchFormatError
from .base import Patchable

__all__ = [
    "Primitive", "integer",
    "uint8", "int8", "uint16", "int16", "uint32", "int32",
    "uint64", "int64", "usize", "isize",
    "float32", "float64", "boolean", "unit", "char", "string",
    ]


class Primitive(Patchable):
    """Leaf rule: patches are whole replacement values.

    pytypes is the Python type (or tuple of types) accepted for values,
    check an optional predicate values must satisfy as well.
    Applying a primitive patch cannot fail.
    """

    def __init__(self, pytypes, name=None, check=None, exclude=()):
        if not isinstance(pytypes, tuple):
            pytypes = (pytypes,)
        self.pytypes = pytypes
        self.exclude = exclude
        self.check = check
        self.name = name or "|".join(t.__name__ for t in pytypes)

    def check_value(self, value):
        if (not isinstance(value, self.pytypes) or
                (self.exclude and isinstance(value, self.exclude))):
            raise TypeError("Expecting a value of type {}, got {!r}".format(
                self.name, value))
        if self.check is not None and not self.check(value):
            raise ValueError("Value {!r} is out of range for {}".format(
                value, self.name))

    def produce(self, a, b):
        self.check_value(a)
        self.check_value(b)
        if a == b:
            return None
        return copy.deepcopy(b)

    def apply(self, obj, patch):
        return copy.deepcopy(patch)

    def validate_patch(self, patch, deep=False):
        # Any value is a full replacement, only the value type is checked
        self.validate_value(patch)

    def validate_value(self, value):
        try:
            self.check_value(value)
        except (TypeError, ValueError) as e:
            raise PatchFormatError(str(e))


def integer(bits, signed=True, name=None):
    "Create an integer leaf limited to the range of the given width."
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        default_name = "int%d" % bits
    else:
        lo, hi = 0, (1 << bits) - 1
        default_name = "uint%d" % bits
    return Primitive(int, name=name or default_name,
                     check=lambda x: lo <= x <= hi, exclude=(bool,))


uint8 = integer(8, signed=False)
int8 = integer(8)
uint16 = integer(16, signed=False)
int16 = integer(16)
uint32 = integer(32, signed=False)
int32 = integer(32)
uint64 = integer(64, signed=False)
int64 = integer(64)
usize = integer(64, signed=False, name="usize")
isize = integer(64, name="isize")

# Python floats are double precision, float32 only names the intent
float32 = Primitive((float, int), name="float32", exclude=(bool,))
float64 = Primitive((float, int), name="float64", exclude=(bool,))

boolean = Primitive(bool, name="bool")
unit = Primitive(type(None), name="unit")
char = Primitive(str, name="char", check=lambda x: len(x) == 1)
string = Primitive(str, name="str")
