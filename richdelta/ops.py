# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping
from types import MappingProxyType

from .attributes import normalize_attributes
from .log import DeltaFormatError


class OpType:
    "Collection of valid values for the type field of ops."
    INSERT = "insert"
    RETAIN = "retain"
    DELETE = "delete"


# Leaf values allowed inside embed payloads
embed_leaf_types = (str, int, float, bool, type(None))


def _freeze(value):
    """Read-only deep copy of an embed payload.

    Mappings become read-only proxies and lists become tuples.
    """
    if isinstance(value, Mapping):
        if not all(isinstance(k, str) for k in value):
            raise DeltaFormatError(
                "Embed mappings must have string keys, got '{}'.".format(value))
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if not isinstance(value, embed_leaf_types):
        raise DeltaFormatError("Unsupported value in embed: {!r}.".format(value))
    return value


def _payload_key(value):
    """Hashable stand-in for a frozen payload, values tagged with their type."""
    if isinstance(value, Mapping):
        return (Mapping, frozenset((k, _payload_key(v)) for k, v in value.items()))
    if isinstance(value, tuple):
        return (tuple, tuple(_payload_key(v) for v in value))
    return (type(value), value)


def _thaw(value):
    "Plain dicts and lists from a frozen payload."
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


class Text(object):
    """Plain text content of an insert."""

    __slots__ = ("value",)

    def __init__(self, value):
        if not isinstance(value, str):
            raise DeltaFormatError("Text content must be a string, not '{}'.".format(value))
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Text is immutable")

    def __len__(self):
        return len(self.value)

    def __eq__(self, other):
        if not isinstance(other, Text):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((Text, self.value))

    def __repr__(self):
        return "Text(%r)" % (self.value,)


class Embed(object):
    """Opaque non-text content of an insert, e.g. an image reference.

    The payload is either an integer token or a mapping with string
    keys. Mappings are deep-copied and frozen, nested mappings
    become read-only proxies and lists become tuples.
    An embed always has length 1.
    """

    __slots__ = ("value",)

    def __init__(self, value):
        if isinstance(value, Embed):
            value = value.value
        if isinstance(value, bool):
            raise DeltaFormatError("Embed content cannot be a boolean.")
        if isinstance(value, Mapping):
            value = _freeze(value)
        elif not isinstance(value, int):
            raise DeltaFormatError(
                "Embed content must be an int or a mapping, not '{}'.".format(value))
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Embed is immutable")

    def __len__(self):
        return 1

    def __eq__(self, other):
        if not isinstance(other, Embed):
            return NotImplemented
        return _payload_key(self.value) == _payload_key(other.value)

    def __hash__(self):
        return hash((Embed, _payload_key(self.value)))

    def to_python(self):
        "The payload as plain dicts and lists."
        return _thaw(self.value)

    def __repr__(self):
        return "Embed(%r)" % (self.to_python(),)


def as_content(content):
    """Coerce raw insert content into Text or Embed.

    Strings become Text, ints and mappings become Embed.
    Raises DeltaFormatError for anything else.
    """
    if isinstance(content, (Text, Embed)):
        return content
    if isinstance(content, str):
        return Text(content)
    return Embed(content)


def _check_length(length, op_type):
    if isinstance(length, bool) or not isinstance(length, int):
        raise DeltaFormatError(
            "{} expects an integer length, not '{}'.".format(op_type, length))
    if length < 0:
        raise DeltaFormatError(
            "{} length must be non-negative, got {}.".format(op_type, length))
    return length


class Op(object):
    """Base of the three op variants. Ops are immutable values.

    Use the variant classes or the factories `Op.insert`,
    `Op.retain` and `Op.delete` to create them.
    """

    __slots__ = ()

    type = None
    attributes = None

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def __delattr__(self, name):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def _key(self):
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, Op):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((type(self),) + self._key())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def is_insert(self):
        return self.type == OpType.INSERT

    def is_retain(self):
        return self.type == OpType.RETAIN

    def is_delete(self):
        return self.type == OpType.DELETE


class Insert(Op):
    __slots__ = ("content", "attributes")

    type = OpType.INSERT

    def __init__(self, content, attributes=None):
        object.__setattr__(self, "content", as_content(content))
        object.__setattr__(self, "attributes", normalize_attributes(attributes))

    @property
    def length(self):
        return len(self.content)

    @property
    def is_text(self):
        return isinstance(self.content, Text)

    @property
    def text(self):
        "The inserted string, or None for an embed."
        if isinstance(self.content, Text):
            return self.content.value
        return None

    def _key(self):
        return (self.content, self.attributes)

    def __repr__(self):
        if isinstance(self.content, Text):
            value = self.content.value
        else:
            value = self.content.to_python()
        if self.attributes is None:
            return "Insert(%r)" % (value,)
        return "Insert(%r, %r)" % (value, self.attributes.to_dict())


class Retain(Op):
    __slots__ = ("length", "attributes")

    type = OpType.RETAIN

    def __init__(self, length, attributes=None):
        object.__setattr__(self, "length", _check_length(length, "retain"))
        object.__setattr__(self, "attributes", normalize_attributes(attributes))

    def _key(self):
        return (self.length, self.attributes)

    def __repr__(self):
        if self.attributes is None:
            return "Retain(%d)" % self.length
        return "Retain(%d, %r)" % (self.length, self.attributes.to_dict())


class Delete(Op):
    __slots__ = ("length",)

    type = OpType.DELETE

    def __init__(self, length):
        object.__setattr__(self, "length", _check_length(length, "delete"))

    def _key(self):
        return (self.length,)

    def __repr__(self):
        return "Delete(%d)" % self.length


def op_insert(content, attributes=None):
    "Create an op inserting text or an embed, optionally formatted."
    return Insert(content, attributes)

def op_retain(length, attributes=None):
    "Create an op keeping length items, optionally applying attributes."
    return Retain(length, attributes)

def op_delete(length):
    "Create an op removing length items."
    return Delete(length)


Op.insert = staticmethod(op_insert)
Op.retain = staticmethod(op_retain)
Op.delete = staticmethod(op_delete)


def is_valid_ops(ops):
    """Checks whether a sequence of ops is well formed.

    Returns a boolean indicating the well-formedness of the ops.
    """
    try:
        validate_ops(ops)
    except DeltaFormatError:
        return False
    return True


def validate_ops(ops):
    """Check whether ops is a sequence of well formed ops.

    Raises a DeltaFormatError if not well formed.
    """
    if isinstance(ops, (str, bytes, Mapping)) or not hasattr(ops, "__iter__"):
        raise DeltaFormatError("Ops must be a sequence of Op, not '{}'.".format(ops))
    for op in ops:
        validate_op(op)


def validate_op(op):
    """Check that op is one of the op variants.

    Raises a DeltaFormatError if not.
    """
    if not isinstance(op, (Insert, Retain, Delete)):
        raise DeltaFormatError("'{}' is not an op.".format(op))
