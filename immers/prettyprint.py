# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import io
import pprint
import sys

import colorama

from .config import build_config
from .log import PatchFormatError
from .patch_format import PatchOp
from .patchables import Boxed, Optional, Record


# Indentation offset in pretty-print
IND = "  "

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=None, use_color=None):
        self.out = sys.stdout if out is None else out
        if use_color is None:
            use_color = build_config('prettyprint')['use_color']
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


def _resolve(patchable):
    while isinstance(patchable, Boxed):
        patchable = patchable.target
    return patchable


def format_value(v):
    "Format simple value for printing."
    return pprint.pformat(v)


def pretty_print_multiline(text, prefix, config):
    for line in text.splitlines(False):
        config.out.write("%s%s\n" % (prefix, line))


def pretty_print_value(patchable, value, prefix, config):
    """Print a value of the type described by patchable with all lines prefixed.

    Records are printed field by field, other values with pprint.
    """
    patchable = _resolve(patchable)
    if isinstance(patchable, Optional) and value is not None:
        pretty_print_value(patchable.inner, value, prefix, config)
    elif isinstance(patchable, Record):
        for f in patchable.fields:
            v = f.get(value)
            inner = _resolve(f.patchable)
            if isinstance(inner, Optional) and v is not None:
                inner = _resolve(inner.inner)
            if isinstance(inner, Record):
                config.out.write("%s%s:\n" % (prefix, f.key))
                pretty_print_value(inner, v, prefix + IND, config)
            else:
                config.out.write("%s%s: %s\n" % (prefix, f.key, format_value(v)))
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_patch_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path or "/", config.RESET))


def pretty_print_replacement(patchable, a, b, path, config):
    pretty_print_patch_action("replaced", path, config)
    pretty_print_value(patchable, a, config.REMOVE, config)
    pretty_print_value(patchable, b, config.ADD, config)
    config.out.write(config.RESET)


def pretty_print_optional_patch(patchable, a, e, path, config):
    op = getattr(e, "op", None)
    if op == PatchOp.SOME_CHANGE:
        pretty_print_patch(patchable.inner, a, e.patch, path, config)
    elif op == PatchOp.SOME_CREATE:
        pretty_print_patch_action("created", path, config)
        pretty_print_value(patchable.inner, e.value, config.ADD, config)
        config.out.write(config.RESET)
    elif op == PatchOp.NONE_CREATE:
        pretty_print_patch_action("cleared", path, config)
        pretty_print_value(patchable.inner, a, config.REMOVE, config)
        config.out.write(config.RESET)
    else:
        raise PatchFormatError("Invalid op {}.".format(op))


def pretty_print_record_patch(patchable, a, patch, path, config):
    for e in patch:
        f = patchable.field(e.key)
        subpath = "/".join((path, str(f.key)))
        pretty_print_patch(f.patchable, f.get(a), e.patch, subpath, config)


def pretty_print_patch(patchable, a, patch, path="", config=None):
    """Pretty-print a patch as applied to the value a.

    Parameters
    ----------

    patchable: Patchable
        Describes the type of a
    a: object
        The value the patch was produced from
    patch: patch
        The patch describing the transformation from a
    path: str
        Location of a, prefixed to the field keys in the output
    config: PrettyPrintConfig
        Config object determining where and how output is written
    """
    if config is None:
        config = PrettyPrintConfig()
    if patch is None:
        return
    patchable = _resolve(patchable)
    if isinstance(patchable, Record):
        pretty_print_record_patch(patchable, a, patch, path, config)
    elif isinstance(patchable, Optional):
        pretty_print_optional_patch(patchable, a, patch, path, config)
    else:
        pretty_print_replacement(patchable, a, patch, path, config)


def patch_to_text(patchable, a, patch, use_color=False):
    "Return the pretty-printed patch as a string."
    out = io.StringIO()
    config = PrettyPrintConfig(out=out, use_color=use_color)
    pretty_print_patch(patchable, a, patch, config=config)
    return out.getvalue()
