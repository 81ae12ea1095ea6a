# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Errors raised when a patch does not fit the value it is applied to.

Errors nest the same way patchables do: a failing optional inside a
record field raises a FieldPatchError wrapping a WithinSome wrapping
the innermost mismatch. The message of the outermost error spells out
the whole chain, e.g.::

    within 'child' => within `Some` => within 'size' => got a creation ...
"""


class PatchError(Exception):
    """Base class for patches that cannot be applied to a value."""

    inner = None

    def path(self):
        """List the steps from this error down to the failing location."""
        steps = []
        err = self
        while err is not None:
            step = err._step()
            if step is not None:
                steps.append(step)
            err = err.inner
        return steps

    def root(self):
        "Return the innermost error of the chain."
        err = self
        while err.inner is not None:
            err = err.inner
        return err

    def _step(self):
        return None


class OptionalPatchError(PatchError):
    pass


class SomePatchMismatch(OptionalPatchError):
    def __str__(self):
        return ("got patch for member of variant `Some` "
                "but the value was not this variant")


class SomeCreateMismatch(OptionalPatchError):
    def __str__(self):
        return ("got a creation patch for member variant `Some` "
                "but the value was already this variant")


class NoneCreateMismatch(OptionalPatchError):
    def __str__(self):
        return ("got a creation patch for member variant `None` "
                "but the value was already this variant")


class WithinSome(OptionalPatchError):
    def __init__(self, inner):
        super().__init__(inner)
        self.inner = inner

    def __str__(self):
        return "within `Some` => {}".format(self.inner)

    def _step(self):
        return "Some"


class FieldPatchError(PatchError):
    """A field of a record failed to apply its entry.

    `record` is the name the record was registered with,
    `key` the field name or position.
    """

    def __init__(self, record, key, inner):
        super().__init__(record, key, inner)
        self.record = record
        self.key = key
        self.inner = inner

    def __str__(self):
        return "within '{}' => {}".format(self.key, self.inner)

    def _step(self):
        return self.key
