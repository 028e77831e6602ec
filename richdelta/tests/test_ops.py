# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from richdelta import (
    AttributeMap, DeltaFormatError, Op, OpType, Insert, Retain, Delete,
    Text, Embed, of,
)
from richdelta.ops import as_content, validate_ops, is_valid_ops


def test_insert_text():
    op = Op.insert("test")
    assert isinstance(op, Insert)
    assert op.type == OpType.INSERT
    assert op.content == Text("test")
    assert op.text == "test"
    assert op.is_text
    assert op.length == 4
    assert op.attributes is None


def test_insert_embed():
    op = Op.insert(1)
    assert op.content == Embed(1)
    assert op.text is None
    assert not op.is_text
    assert op.length == 1

    op = Op.insert({"image": "https://example.org/a.png"})
    assert op.content == Embed({"image": "https://example.org/a.png"})
    assert op.length == 1


@pytest.mark.parametrize("content", [None, True, 1.5, ["a"], {1: "a"}, b"abc"])
def test_insert_rejects_unsupported_content(content):
    with pytest.raises(DeltaFormatError):
        Op.insert(content)


def test_embed_payload_is_copied_and_read_only():
    payload = {"image": "a.png"}
    op = Op.insert(payload)
    payload["image"] = "b.png"
    assert op.content.value["image"] == "a.png"
    with pytest.raises(TypeError):
        op.content.value["image"] = "c.png"


def test_int_and_mapping_embeds_differ():
    assert Embed(1) != Embed({"a": 1})
    assert Op.insert(1) != Op.insert({"a": 1})


@pytest.mark.parametrize("attributes", [None, {}, AttributeMap()])
def test_empty_attributes_normalized(attributes):
    assert Op.insert("a", attributes) == Op.insert("a")
    assert Op.insert("a", attributes).attributes is None
    assert Op.retain(2, attributes) == Op.retain(2)
    assert Op.retain(2, attributes).attributes is None


def test_attributes_from_dict():
    op = Op.retain(1, {"bold": True})
    assert isinstance(op.attributes, AttributeMap)
    assert op == Op.retain(1, of("bold", True))


def test_equality():
    assert Op.insert("a") == Insert("a")
    assert Op.insert("a") != Op.insert("b")
    assert Op.insert("a", of("bold", True)) != Op.insert("a")
    assert Op.retain(1) != Op.delete(1)
    assert Op.delete(3) == Delete(3)
    assert Op.retain(3, of("bold", True)) == Retain(3, {"bold": True})
    assert Op.insert(1) != Op.retain(1)
    assert Op.insert("a") != "a"


def test_text_and_embed_insert_differ():
    assert Op.insert("1") != Op.insert(1)


def test_hashable():
    ops = {Op.insert("a"), Op.insert("a", {}), Op.retain(2, of("bold", True)),
           Op.retain(2, {"bold": True}), Op.delete(1), Op.insert({"a": [1, 2]})}
    assert len(ops) == 4


@pytest.mark.parametrize("factory", [Op.retain, Op.delete])
@pytest.mark.parametrize("length", [-1, 1.0, "1", True, None])
def test_invalid_lengths(factory, length):
    with pytest.raises(DeltaFormatError):
        factory(length)


def test_zero_length_is_legal():
    assert Op.retain(0).length == 0
    assert Op.delete(0).length == 0
    assert Op.insert("").length == 0


def test_ops_are_immutable():
    op = Op.retain(1)
    with pytest.raises(AttributeError):
        op.length = 2
    with pytest.raises(AttributeError):
        del op.length
    op = Op.insert("a")
    with pytest.raises(AttributeError):
        op.content = Text("b")


def test_type_predicates():
    assert Op.insert("a").is_insert()
    assert Op.retain(1).is_retain()
    assert Op.delete(1).is_delete()
    assert not Op.delete(1).is_insert()


def test_repr():
    assert repr(Op.insert("a")) == "Insert('a')"
    assert repr(Op.insert("a", of("bold", True))) == "Insert('a', {'bold': True})"
    assert repr(Op.retain(2)) == "Retain(2)"
    assert repr(Op.delete(1)) == "Delete(1)"


def test_as_content():
    assert as_content("a") == Text("a")
    assert as_content(3) == Embed(3)
    t = Text("x")
    assert as_content(t) is t


def test_validate_ops():
    validate_ops([Op.insert("a"), Op.delete(1)])
    assert is_valid_ops([])
    assert not is_valid_ops([Op.insert("a"), "b"])
    assert not is_valid_ops("abc")
    with pytest.raises(DeltaFormatError):
        validate_ops([{"insert": "a"}])


def test_attribute_value_types_kept_apart():
    assert Op.insert("a", {"bold": True}) != Op.insert("a", {"bold": 1})
    assert Op.retain(1, {"size": 1}) != Op.retain(1, {"size": 1.0})


def test_nested_embed_payload_is_frozen():
    op = Op.insert({"image": {"src": "a.png", "sizes": [1, 2]}})
    with pytest.raises(TypeError):
        op.content.value["image"]["src"] = "b.png"
    with pytest.raises(AttributeError):
        op.content.value["image"]["sizes"].append(3)
    assert op.content.to_python() == {"image": {"src": "a.png", "sizes": [1, 2]}}


def test_nested_embed_payload_is_copied():
    payload = {"image": {"src": "a.png"}}
    op = Op.insert(payload)
    payload["image"]["src"] = "b.png"
    assert op.content.value["image"]["src"] == "a.png"


def test_nested_embed_hash_is_stable():
    op = Op.insert({"image": {"src": "a.png", "sizes": [1, 2]}})
    assert hash(op) == hash(Op.insert({"image": {"src": "a.png", "sizes": (1, 2)}}))
    assert op == Op.insert({"image": {"src": "a.png", "sizes": [1, 2]}})


def test_embed_value_types_kept_apart():
    assert Op.insert({"width": 1}) != Op.insert({"width": True})
    assert Op.insert({"width": 1}) != Op.insert({"width": 1.0})


@pytest.mark.parametrize("payload", [
    {"tags": {"a", "b"}},
    {"image": {1: "a.png"}},
    {"image": [object()]},
])
def test_embed_rejects_unsupported_nested_values(payload):
    with pytest.raises(DeltaFormatError):
        Op.insert(payload)


def test_embed_repr_nested():
    assert repr(Op.insert({"image": {"sizes": [1]}})) == "Insert({'image': {'sizes': [1]}})"
