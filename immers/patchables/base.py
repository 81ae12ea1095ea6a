# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy


class Patchable(object):
    """Describes how values of one type are diffed and patched.

    A patchable is a descriptor for a type, not a value of that type:
    built-in scalars cannot carry methods of their own, so both
    operations take the values as arguments.

    Subclasses implement:

    produce(a, b)
        Return None if a and b are equivalent, otherwise a patch
        which turns (a copy of) a into b when applied.

    apply(obj, patch)
        Return obj patched with patch. Mutable values are patched
        in place and returned, immutable ones are replaced by the
        returned value. Raises a PatchError if patch does not fit
        the current state of obj.

    Applying a patch to any value other than the one it was produced
    from may fail or give an unspecified result.
    """

    name = None

    def produce(self, a, b):
        raise NotImplementedError

    def apply(self, obj, patch):
        raise NotImplementedError

    def validate_patch(self, patch, deep=False):
        """Raise a PatchFormatError if patch is not a patch for this type.

        Nested patches are only checked if deep is true.
        """
        raise NotImplementedError

    def validate_value(self, value):
        """Raise a PatchFormatError if value is not a value of this type.

        Used for the values carried by creation patches.
        """
        raise NotImplementedError

    def copy(self, obj):
        "Duplicate a value of this type."
        return copy.deepcopy(obj)

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, self.name)
