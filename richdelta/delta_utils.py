# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import math

from .ops import OpType, Insert, Retain, Delete, Text
from .log import DeltaFormatError


def op_length(op):
    """Count how many positions a single op covers.

    Text inserts count characters, embeds count 1,
    retains and deletes count their length.
    """
    if op.type in (OpType.INSERT, OpType.RETAIN, OpType.DELETE):
        return op.length
    raise DeltaFormatError("Invalid op '{}'".format(op))


def is_noop(op):
    "Whether op has no effect: zero length retain/delete or empty text insert."
    if op.type == OpType.INSERT:
        return isinstance(op.content, Text) and not op.content.value
    return op.length == 0


def can_merge(existing, new):
    """Check whether new can be folded into existing.

    Both must be the same op type. Inserts only merge when both carry
    text, and inserts and retains need matching attributes.
    """
    if existing.type != new.type:
        return False
    if existing.type == OpType.DELETE:
        return True
    if existing.type == OpType.INSERT:
        if not (isinstance(existing.content, Text) and isinstance(new.content, Text)):
            return False
    # Attributes are normalized at construction, None means empty
    return existing.attributes == new.attributes


def combine_ops(existing, new):
    """Combines two mergeable ops into a new one that does the same
    """
    assert can_merge(existing, new), "Invalid use of combine_ops"
    if existing.type == OpType.INSERT:
        return Insert(existing.content.value + new.content.value, existing.attributes)
    elif existing.type == OpType.RETAIN:
        return Retain(existing.length + new.length, existing.attributes)
    return Delete(existing.length + new.length)


def is_canonical(ops):
    """Whether ops is in minimal form.

    That is: no zero-effect ops, and no neighbouring pair that
    push would merge or move an insert in front of.
    """
    prev = None
    for op in ops:
        if is_noop(op):
            return False
        if prev is not None:
            if can_merge(prev, op):
                return False
            if prev.type == OpType.DELETE and op.type == OpType.INSERT:
                return False
        prev = op
    return True


class OpIterator(object):
    """Walks a list of ops, handing out pieces of a requested length.

    Text inserts, retains and deletes are split at the requested
    length, embeds are handed out whole.
    """

    def __init__(self, ops):
        self.ops = ops
        self.index = 0
        self.offset = 0

    def has_next(self):
        return self.peek_length() < math.inf

    def peek(self):
        if self.index < len(self.ops):
            return self.ops[self.index]
        return None

    def peek_length(self):
        "Length left in the current op, or infinity when exhausted."
        op = self.peek()
        if op is None:
            return math.inf
        return op_length(op) - self.offset

    def peek_type(self):
        "Type of the current op. An exhausted iterator acts as an endless retain."
        op = self.peek()
        if op is None:
            return OpType.RETAIN
        return op.type

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        return self.next()

    def next(self, length=None):
        """Return the next piece of at most length, or None when exhausted."""
        op = self.peek()
        if op is None:
            return None
        if length is None:
            length = math.inf
        offset = self.offset
        remaining = op_length(op) - offset
        if length >= remaining:
            length = remaining
            self.index += 1
            self.offset = 0
        else:
            self.offset += length

        if op.type == OpType.DELETE:
            return Delete(length)
        elif op.type == OpType.RETAIN:
            return Retain(length, op.attributes)
        if isinstance(op.content, Text):
            return Insert(op.content.value[offset:offset + length], op.attributes)
        # Embeds have length 1, so they are never split
        return op
