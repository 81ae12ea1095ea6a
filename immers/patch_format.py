# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import PatchFormatError


class PatchEntry(dict):
    """Tagged fragment of a patch.

    Minimal class providing attribute access to patch entry keys,
    while staying a plain dict for inspection and json conversion.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    PATCH = "patch"
    SOME_CHANGE = "somechange"
    SOME_CREATE = "somecreate"
    NONE_CREATE = "nonecreate"


def op_patch(key, patch):
    "Create a patch entry to patch the field at key with patch."
    assert patch is not None, "Patch op needs a present field patch"
    return PatchEntry(op=PatchOp.PATCH, key=key, patch=patch)

def op_somechange(patch):
    "Create a patch entry to patch the value held by an optional."
    assert patch is not None, "Change op needs a present inner patch"
    return PatchEntry(op=PatchOp.SOME_CHANGE, patch=patch)

def op_somecreate(value):
    "Create a patch entry to make an absent optional hold value."
    return PatchEntry(op=PatchOp.SOME_CREATE, value=value)

def op_nonecreate():
    "Create a patch entry to clear an optional holding a value."
    return PatchEntry(op=PatchOp.NONE_CREATE)


class RecordPatchBuilder(object):
    """Collects field entries of a record patch.

    Fields must be visited in declaration order, the
    builder keeps entries in the order they are appended.
    """

    # Valid values for the op field in record patch entries
    OPS = (
        PatchOp.PATCH,
        )

    def __init__(self):
        self._patch = []
        self._keys = set()

    def validated(self):
        "Return the collected patch, or None if no field changed."
        return self._patch or None

    def append(self, entry):
        # Simplifies some algorithms
        if entry is None:
            return

        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, PatchEntry)
        assert "op" in entry
        assert entry.op in RecordPatchBuilder.OPS
        assert "key" in entry
        assert entry.key not in self._keys, 'multiple patch entries target same field: %r' % (entry.key,)

        self._keys.add(entry.key)
        self._patch.append(entry)

    def patch(self, key, patch):
        if patch is not None:
            self.append(op_patch(key, patch))


OPTIONAL_OPS = (
    PatchOp.SOME_CHANGE,
    PatchOp.SOME_CREATE,
    PatchOp.NONE_CREATE,
    )


def validate_optional_entry(e):
    """Check that e is a well formed optional patch entry.

    Raises a PatchFormatError if not well formed.
    Nested patches are not checked.
    """
    if not isinstance(e, PatchEntry):
        raise PatchFormatError("Optional patch '{}' is not a patch entry.".format(e))
    op = e.get("op")
    if op == PatchOp.SOME_CHANGE:
        if e.get("patch") is None:
            raise PatchFormatError("somechange expects a present inner patch.")
    elif op == PatchOp.SOME_CREATE:
        if "value" not in e:
            raise PatchFormatError("somecreate expects a value to create.")
    elif op == PatchOp.NONE_CREATE:
        pass  # no argument
    else:
        raise PatchFormatError("Unknown optional patch op '{}'.".format(op))


def validate_record_patch(patch, keys=None):
    """Check that patch is a well formed record patch.

    If keys is given, it is the sequence of declared field keys,
    and entries must name declared fields in declaration order.

    Raises a PatchFormatError if not well formed.
    Field patches are not checked.
    """
    if not isinstance(patch, list):
        raise PatchFormatError("Record patch must be a list.")
    if not patch:
        raise PatchFormatError("Record patch must not be empty, use None for no change.")
    positions = {k: i for i, k in enumerate(keys)} if keys is not None else None
    last = -1
    seen = set()
    for e in patch:
        if not isinstance(e, PatchEntry):
            raise PatchFormatError("Record patch entry '{}' is not a patch entry.".format(e))
        op = e.get("op")
        if op not in RecordPatchBuilder.OPS:
            raise PatchFormatError("Unknown record patch op '{}'.".format(op))
        key = e.get("key")
        if not isinstance(key, (str, int)) or isinstance(key, bool):
            msg = ("Invalid record patch key '{}' of type '{}'. "
                   "Expecting str for named fields or int for positional fields.")
            raise PatchFormatError(msg.format(key, type(key)))
        if key in seen:
            raise PatchFormatError("Multiple patch entries target field '{}'.".format(key))
        seen.add(key)
        if e.get("patch") is None:
            raise PatchFormatError("Field entry '{}' expects a present patch.".format(key))
        if positions is not None:
            if key not in positions:
                raise PatchFormatError("Unknown field '{}'.".format(key))
            if positions[key] < last:
                raise PatchFormatError(
                    "Field '{}' is out of declaration order.".format(key))
            last = positions[key]


def to_patch_entries(patch):
    """Recursively convert tagged dicts to PatchEntry objects with attribute access.

    Use on patches loaded from json. Only dicts carrying an op are
    converted, and values to create are left as loaded.
    """
    if isinstance(patch, dict) and "op" in patch:
        e = PatchEntry(patch)
        if "patch" in e:
            e.patch = to_patch_entries(e.patch)
        return e
    elif isinstance(patch, list):
        return [to_patch_entries(e) for e in patch]
    else:
        return patch
