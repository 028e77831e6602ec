# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import json
import pprint
import sys

import colorama

from .config import build_config, Namespace
from .ops import OpType, Text


# Indentation offset in pretty-print
IND = "  "

ELLIPSIS = '...'

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
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            max_text_width=60,
            ):
        self.out = out
        self.use_color = use_color
        self.max_text_width = max_text_width

    @classmethod
    def from_config(cls, out=sys.stdout):
        "Create a config from the 'prettyprint' entrypoint settings."
        ns = Namespace(build_config('prettyprint'))
        return cls(out=out, use_color=ns.use_color, max_text_width=ns.max_text_width)

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

DefaultConfig = PrettyPrintConfig()


def format_text(text, config=DefaultConfig):
    "Quote text for a single line, truncated to the configured width."
    width = config.max_text_width
    if width and len(text) > width:
        text = text[:max(width - len(ELLIPSIS), 0)] + ELLIPSIS
    return json.dumps(text, ensure_ascii=False)


def format_attributes(attributes):
    "Format attributes as a compact, sorted json object. Empty string for None."
    if not attributes:
        return ''
    return json.dumps(dict(attributes), sort_keys=True, separators=(', ', ': '))


def format_op(op, config=DefaultConfig):
    """Describe a single op without prefix or newline."""
    if op.type == OpType.INSERT:
        if isinstance(op.content, Text):
            desc = 'insert %s' % format_text(op.content.value, config)
        else:
            desc = 'insert embed %s' % json.dumps(op.content.to_python(), sort_keys=True)
    elif op.type == OpType.RETAIN:
        desc = 'retain %d' % op.length
    else:
        desc = 'delete %d' % op.length
    attrs = format_attributes(op.attributes)
    if attrs:
        desc += ' ' + attrs
    return desc


def pretty_print_op(op, prefix="", config=DefaultConfig):
    if op.type == OpType.INSERT:
        marker = config.ADD
    elif op.type == OpType.DELETE:
        marker = config.REMOVE
    else:
        marker = config.KEEP
    config.out.write("%s%s%s%s\n" % (prefix, marker, format_op(op, config), config.RESET))


def pretty_print_delta(delta, prefix="", config=DefaultConfig):
    """Print a header line followed by one line per op.

        ## delta with 2 ops, length 4
        +  insert "abc" {"bold": true}
        -  delete 1
    """
    n = len(delta.ops)
    config.out.write("%s%sdelta with %d op%s, length %d%s\n" % (
        prefix, config.INFO, n, '' if n == 1 else 's', delta.length(), config.RESET))
    for op in delta.ops:
        pretty_print_op(op, prefix, config)


def format_value(v):
    "Format simple value for printing, using pprint for anything but strings."
    if not isinstance(v, str):
        return pprint.pformat(v)
    return v


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)
