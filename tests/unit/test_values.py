import pytest

from json_value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    to_python,
)


def test_variants_do_not_compare_across_kinds():
    assert JsonBool(True) != JsonNumber(1.0)
    assert JsonNumber(1.0) != JsonString("1.0")
    assert JsonNull() != JsonBool(False)
    assert JsonArray([]) != JsonObject({})
    assert JsonNull() == JsonNull()


def test_leaf_values_are_hashable():
    assert len({JsonNumber(1.0), JsonNumber(1.0), JsonString("a")}) == 2


def test_containers_are_unhashable():
    with pytest.raises(TypeError):
        hash(JsonArray([]))
    with pytest.raises(TypeError):
        hash(JsonObject({}))


def test_values_are_immutable():
    num = JsonNumber(2.0)
    with pytest.raises(AttributeError):
        num.value = 3.0
    arr = JsonArray([num])
    assert isinstance(arr.items, tuple)
    obj = JsonObject({"a": num})
    with pytest.raises(TypeError):
        obj.members["b"] = num


def test_object_copies_its_members():
    members = {"a": JsonNull()}
    obj = JsonObject(members)
    members["b"] = JsonNull()
    assert "b" not in obj
    assert len(obj) == 1


def test_object_equality_ignores_key_order():
    a = JsonObject({"x": JsonNull(), "y": JsonBool(False)})
    b = JsonObject({"y": JsonBool(False), "x": JsonNull()})
    assert a == b


def test_to_python():
    tree = JsonObject({
        "n": JsonNull(),
        "b": JsonBool(True),
        "num": JsonNumber(30),
        "s": JsonString("x"),
        "arr": JsonArray([JsonNumber(1), JsonArray([])]),
    })
    assert to_python(tree) == {"n": None, "b": True, "num": 30.0, "s": "x", "arr": [1.0, []]}


def test_to_python_rejects_foreign_objects():
    with pytest.raises(TypeError):
        to_python({"a": 1})


def test_repr():
    assert repr(JsonArray([JsonNumber(1), JsonString("a")])) == "JsonArray([JsonNumber(1.0), JsonString('a')])"
    assert repr(JsonObject({"k": JsonNull()})) == "JsonObject({'k': JsonNull()})"
