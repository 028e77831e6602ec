# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping

from .log import DeltaFormatError


# Attribute values are scalars only, None marks a format to be removed
attribute_value_types = (str, int, float, bool, type(None))


def _tagged(mapping):
    "Pair each value with its type, so True, 1 and 1.0 stay distinct."
    return {k: (type(v), v) for k, v in mapping.items()}


class AttributeMap(Mapping):
    """Immutable mapping of formatting attributes attached to an op.

    Can be built from a mapping, from alternating key/value arguments,
    or from keyword arguments::

        AttributeMap({"bold": True})
        AttributeMap("bold", True, "color", "red")
        AttributeMap(bold=True)

    An empty AttributeMap is equal to None, since ops treat
    "no attributes" and "empty attributes" the same way.
    """

    __slots__ = ("_data",)

    def __init__(self, *args, **kwargs):
        if len(args) == 1 and isinstance(args[0], Mapping):
            items = list(args[0].items())
        elif len(args) % 2 == 0:
            items = list(zip(args[0::2], args[1::2]))
        else:
            raise DeltaFormatError(
                "AttributeMap expects a mapping or key/value pairs, got %d arguments." % len(args))
        items.extend(kwargs.items())

        data = {}
        for key, value in items:
            if not isinstance(key, str):
                raise DeltaFormatError(
                    "Attribute names must be strings, not '{}'.".format(key))
            if not isinstance(value, attribute_value_types):
                raise DeltaFormatError(
                    "Unsupported value for attribute '{}': {!r}.".format(key, value))
            data[key] = value
        object.__setattr__(self, "_data", data)

    @classmethod
    def of(cls, *pairs):
        "Build from alternating key/value arguments."
        return cls(*pairs)

    def __setattr__(self, name, value):
        raise AttributeError("AttributeMap is immutable")

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def is_empty(self):
        return not self._data

    def equals(self, other):
        """Pairwise key/value equality, where None counts as empty."""
        if other is None:
            return not self._data
        if not isinstance(other, Mapping):
            return False
        return _tagged(self) == _tagged(other)

    def __eq__(self, other):
        if other is not None and not isinstance(other, Mapping):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        if not self._data:
            return hash(None)
        return hash(frozenset(_tagged(self).items()))

    def __repr__(self):
        return "AttributeMap(%r)" % (self._data,)

    def to_dict(self):
        return dict(self._data)


of = AttributeMap.of


def normalize_attributes(attributes):
    """Collapse None and empty attribute mappings to None.

    Any other mapping is returned as an AttributeMap.
    """
    if attributes is None:
        return None
    if not isinstance(attributes, AttributeMap):
        if not isinstance(attributes, Mapping):
            raise DeltaFormatError(
                "Attributes must be a mapping, not '{}'.".format(attributes))
        attributes = AttributeMap(attributes)
    if attributes.is_empty():
        return None
    return attributes


def attributes_equal(a, b):
    "Compare two attribute values where None and empty are the same."
    return normalize_attributes(a) == normalize_attributes(b)
