# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .base import Patchable
from .primitives import (
    Primitive, integer,
    uint8, int8, uint16, int16, uint32, int32, uint64, int64, usize, isize,
    float32, float64, boolean, unit, char, string,
)
from .optional import Optional
from .delegate import Boxed
from .records import Field, Record

__all__ = [
    "Patchable", "Primitive", "integer",
    "uint8", "int8", "uint16", "int16", "uint32", "int32",
    "uint64", "int64", "usize", "isize",
    "float32", "float64", "boolean", "unit", "char", "string",
    "Optional", "Boxed", "Field", "Record",
    ]
