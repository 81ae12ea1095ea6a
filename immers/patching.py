# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import immers.log
from .config import build_config
from .errors import PatchError
from .log import PatchFormatError
from .patchables import Boxed, Record


__all__ = ["produce", "apply", "is_valid_patch"]


def produce(patchable, a, b):
    """Produce a patch turning a into b, or None if they are equivalent.

    patchable describes the type of a and b, e.g. a Record or
    Optional(int32). The patch is plain tagged data owning copies of
    any values it carries.
    """
    p = patchable.produce(a, b)
    if p is not None:
        immers.log.debug("Produced patch for %s", patchable.name)
    return p


def _resolve(patchable):
    while isinstance(patchable, Boxed):
        patchable = patchable.target
    return patchable


def apply(patchable, obj, patch, atomic=None, validate=None):
    """Apply patch to obj and return the patched value.

    Records are patched in place, other values are immutable or replaced
    wholesale, so always use the returned value.

    If atomic is true, the patch is applied to a copy of obj and the
    result transferred to obj only if every entry applied; a failure
    then leaves obj untouched. Otherwise fields patched before a failing
    field keep their new values.

    If validate is true, the patch structure is checked against
    patchable before anything is applied.

    atomic and validate default to the configured Patching options.

    Raises a PatchError if the patch does not fit obj, and a
    PatchFormatError if the patch is malformed.
    """
    if atomic is None or validate is None:
        defaults = build_config('patching')
        if atomic is None:
            atomic = defaults['atomic']
        if validate is None:
            validate = defaults['validate']

    if validate:
        patchable.validate_patch(patch, deep=True)

    if not atomic:
        return patchable.apply(obj, patch)

    scratch = patchable.copy(obj)
    try:
        result = patchable.apply(scratch, patch)
    except (PatchError, PatchFormatError):
        immers.log.debug("Atomic apply to %s failed, value left unchanged", patchable.name)
        raise
    target = _resolve(patchable)
    if isinstance(target, Record):
        return target.assign(obj, result)
    return result


def is_valid_patch(patchable, patch, deep=False):
    """Checks whether patch is a well formed patch for patchable.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        patchable.validate_patch(patch, deep=deep)
    except PatchFormatError as e:
        immers.log.debug("Invalid patch for %s: %s", patchable.name, e)
        return False
    return True
