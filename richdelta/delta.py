# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""The Delta type: an ordered list of ops kept in minimal form.

Every op goes through `Delta.push`, which looks only at the tail of
the list and either drops the op, merges it into the last op, moves
an insert in front of trailing deletes, or appends it.
"""

import math

from .delta_utils import OpIterator, can_merge, combine_ops, is_noop, op_length
from .log import DeltaFormatError, debug
from .ops import OpType, Insert, Retain, Delete, validate_op, validate_ops


class Delta(object):
    """An ordered list of insert, retain and delete ops.

    Can be created empty, from a sequence of ops (taken as is,
    without normalizing), or from another Delta (copied).
    """

    __hash__ = None

    def __init__(self, ops=None):
        if ops is None:
            ops = []
        elif isinstance(ops, Delta):
            # Ops are immutable, so a new list is a full value copy
            ops = list(ops.ops)
        else:
            ops = list(ops)
            validate_ops(ops)
        self.ops = ops

    def insert(self, content, attributes=None):
        "Insert text or an embed, optionally formatted."
        return self.push(Insert(content, attributes))

    def delete(self, length):
        return self.push(Delete(length))

    def retain(self, length, attributes=None):
        return self.push(Retain(length, attributes))

    def push(self, op):
        """Append op, keeping the ops in minimal form.

        Returns self to allow chaining.
        """
        validate_op(op)
        if is_noop(op):
            debug("Dropping no-op %r", op)
            return self

        ops = self.ops
        if not ops:
            ops.append(op)
            return self

        last = ops[-1]
        if can_merge(last, op):
            ops[-1] = combine_ops(last, op)
            return self

        if op.type == OpType.INSERT and last.type == OpType.DELETE:
            # Inserts go before a trailing run of deletes
            index = len(ops) - 1
            while index > 0 and ops[index - 1].type == OpType.DELETE:
                index -= 1
            debug("Moving %r before %d trailing deletes", op, len(ops) - index)
            if index > 0 and can_merge(ops[index - 1], op):
                ops[index - 1] = combine_ops(ops[index - 1], op)
            else:
                ops.insert(index, op)
            return self

        ops.append(op)
        return self

    def chop(self):
        """Remove a trailing retain without attributes, it has no effect."""
        if self.ops:
            last = self.ops[-1]
            if last.type == OpType.RETAIN and last.attributes is None:
                self.ops.pop()
        return self

    def length(self):
        "Total number of positions covered by all ops."
        return sum(op_length(op) for op in self.ops)

    def change_length(self):
        "How much the length of a document changes when this delta is applied."
        length = 0
        for op in self.ops:
            if op.type == OpType.INSERT:
                length += op.length
            elif op.type == OpType.DELETE:
                length -= op.length
        return length

    def is_document(self):
        "Whether this delta only consists of inserts."
        return all(op.type == OpType.INSERT for op in self.ops)

    def concat(self, other):
        """Return a new delta with the ops of other appended.

        The first op of other is pushed, so it may merge with
        the tail of this delta.
        """
        if not isinstance(other, Delta):
            raise DeltaFormatError("Can only concat a Delta, not '{}'.".format(other))
        delta = Delta(self)
        if other.ops:
            delta.push(other.ops[0])
            delta.ops.extend(other.ops[1:])
        return delta

    def slice(self, start=0, end=None):
        """Return the ops covering positions [start, end) as a new delta.

        Ops crossing the boundaries are split.
        """
        if end is None:
            end = math.inf
        ops = []
        it = OpIterator(self.ops)
        index = 0
        while index < end and it.has_next():
            if index < start:
                op = it.next(start - index)
            else:
                op = it.next(end - index)
                ops.append(op)
            index += op_length(op)
        return Delta(ops)

    def filter(self, predicate):
        return [op for op in self.ops if predicate(op)]

    def partition(self, predicate):
        """Split ops into those passing predicate and the rest."""
        passed, failed = [], []
        for op in self.ops:
            (passed if predicate(op) else failed).append(op)
        return passed, failed

    def map(self, func):
        return [func(op) for op in self.ops]

    def __len__(self):
        return len(self.ops)

    def __iter__(self):
        return iter(self.ops)

    def __getitem__(self, index):
        return self.ops[index]

    def __eq__(self, other):
        if not isinstance(other, Delta):
            return NotImplemented
        return self.ops == other.ops

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __add__(self, other):
        if not isinstance(other, Delta):
            return NotImplemented
        return self.concat(other)

    def __copy__(self):
        return Delta(self)

    def __deepcopy__(self, memo):
        return Delta(self)

    def __repr__(self):
        return "Delta(%r)" % (self.ops,)
