# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .base import Patchable

__all__ = ["Boxed"]


class Boxed(Patchable):
    """Pass-through to another patchable.

    target is a patchable, or a callable returning one which is
    resolved on first use. The latter lets a record hold fields of
    its own type:

        node = Record("Node", [
            Field("value", int64),
            Field("next", Optional(Boxed(lambda: node))),
        ])

    Patches and errors are those of the target.
    """

    def __init__(self, target):
        self._target = target
        self._resolved = target if isinstance(target, Patchable) else None

    @property
    def target(self):
        if self._resolved is None:
            resolved = self._target()
            if not isinstance(resolved, Patchable):
                raise TypeError("Boxed target must resolve to a Patchable, got %r" % (resolved,))
            self._resolved = resolved
        return self._resolved

    @property
    def name(self):
        # Avoid resolving here, repr of a recursive record would not terminate
        if self._resolved is None:
            return "Boxed[...]"
        return "Boxed[{}]".format(self._resolved.name)

    def produce(self, a, b):
        return self.target.produce(a, b)

    def apply(self, obj, patch):
        return self.target.apply(obj, patch)

    def validate_patch(self, patch, deep=False):
        return self.target.validate_patch(patch, deep=deep)

    def validate_value(self, value):
        return self.target.validate_value(value)

    def copy(self, obj):
        return self.target.copy(obj)
