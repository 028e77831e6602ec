# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .attributes import AttributeMap, of
from .ops import Op, OpType, Insert, Retain, Delete, Text, Embed
from .ops import op_insert, op_retain, op_delete
from .delta import Delta
from .delta_utils import is_canonical
from .log import DeltaFormatError


__all__ = [
    "__version__",
    "AttributeMap", "of",
    "Op", "OpType", "Insert", "Retain", "Delete", "Text", "Embed",
    "op_insert", "op_retain", "op_delete",
    "Delta", "is_canonical",
    "DeltaFormatError",
    ]
