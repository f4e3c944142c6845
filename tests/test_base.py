import json

import pytest

from resourcekit.base import ResourceBase
from resourcekit.hashing import fnv1a


class ResourceObject(ResourceBase):
    def __init__(self):
        super().__init__()
        self.id = 0
        self.str = ""

    def to_dict(self):
        return {
            "_resourceBase": super().to_dict(),
            "_impl": {"id": self.id, "str": self.str},
        }

    def load_dict(self, data):
        super().load_dict(data.get("_resourceBase", {}))
        impl = data.get("_impl", {})
        self.id = impl.get("id", self.id)
        self.str = impl.get("str", self.str)
        return self


def test_defaults():
    obj = ResourceObject()
    assert ResourceBase.to_dict(obj) == {"_name": ""}
    assert obj.name == ""
    assert obj.name_hash == 0
    assert obj.id == 0
    assert obj.str == ""


def test_initialize_sets_name_and_hash():
    obj = ResourceObject()
    obj.initialize("testObject")
    assert obj.name == "testObject"
    assert obj.name_hash == fnv1a("testObject")


def test_type_hash_follows_type_name():
    assert ResourceObject.type_hash() == fnv1a(ResourceObject.type_name())
    assert ResourceObject.type_hash() != ResourceBase.type_hash()
    assert ResourceObject.type_name().endswith("ResourceObject")


def test_serialize_layout():
    obj = ResourceObject()
    ResourceBase.initialize(obj, "testObject")
    obj.id = 15
    obj.str = "check"
    assert ResourceBase.serialize(obj) == (
        '{"_resourceBase":{"_name":"testObject"},"_impl":{"id":15,"str":"check"}}'
    )


def test_serialize_after_change():
    obj = ResourceObject()
    ResourceBase.initialize(obj, "testObject")
    obj.id = 15
    obj.str = "check"
    obj.id = 19
    obj.str = "tyjhtj"
    assert json.loads(ResourceBase.serialize(obj))["_impl"] == {
        "id": 19,
        "str": "tyjhtj",
    }


def test_round_trip():
    obj = ResourceObject()
    ResourceBase.initialize(obj, "testObject")
    obj.id = 19
    obj.str = "tyjhtj"
    text = ResourceBase.serialize(obj)
    copy = ResourceObject.deserialize(text)
    assert isinstance(copy, ResourceObject)
    assert copy is not obj
    assert (copy.name, copy.name_hash, copy.id, copy.str) == (
        "testObject",
        fnv1a("testObject"),
        19,
        "tyjhtj",
    )


def test_base_serialize_only_name():
    base = ResourceBase()
    base.initialize("plain")
    assert base.serialize() == '{"_name":"plain"}'


def test_deserialize_invalid_json_raises():
    with pytest.raises(ValueError):
        ResourceBase.deserialize("{not json")


def test_load_dict_rejects_non_object():
    with pytest.raises(TypeError):
        ResourceBase().load_dict([1, 2])


def test_load_dict_rejects_non_string_name():
    with pytest.raises(TypeError):
        ResourceBase().load_dict({"_name": 5})