# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .errors import (
    PatchError, OptionalPatchError, SomePatchMismatch, SomeCreateMismatch,
    NoneCreateMismatch, WithinSome, FieldPatchError)
from .log import PatchFormatError
from .patchables import (
    Patchable, Primitive, Optional, Boxed, Field, Record)
from .patching import produce, apply, is_valid_patch


__all__ = [
    "__version__",
    "produce", "apply", "is_valid_patch",
    "Patchable", "Primitive", "Optional", "Boxed", "Field", "Record",
    "PatchError", "OptionalPatchError", "SomePatchMismatch",
    "SomeCreateMismatch", "NoneCreateMismatch", "WithinSome",
    "FieldPatchError", "PatchFormatError",
    ]
