import pytest

from scrivi.ids import ObjectID
from scrivi.objects import (
    CharacterObject,
    ItemObject,
    LocationObject,
    ObjectKind,
    RuleObject,
    TimelineObject,
    WorldObjectFields,
    object_kind_subdir,
    world_object_fields,
)


@pytest.mark.parametrize(
    "kind, subdir",
    [
        (ObjectKind.CHARACTER, "characters"),
        (ObjectKind.LOCATION, "locations"),
        (ObjectKind.ITEM, "items"),
        (ObjectKind.RULE, "rules"),
        (ObjectKind.TIMELINE, "timelines"),
    ],
)
def test_subdir(kind, subdir):
    assert object_kind_subdir(kind) == subdir


@pytest.mark.parametrize(
    "cls, kind",
    [
        (CharacterObject, ObjectKind.CHARACTER),
        (LocationObject, ObjectKind.LOCATION),
        (ItemObject, ObjectKind.ITEM),
        (RuleObject, ObjectKind.RULE),
        (TimelineObject, ObjectKind.TIMELINE),
    ],
)
def test_concrete_kinds(cls, kind):
    obj = cls(object_id=ObjectID("o1"), display_name="Thing")
    assert obj.kind is kind
    assert isinstance(obj, WorldObjectFields)


def test_world_object_fields_returns_shared_fields():
    obj = LocationObject(object_id=ObjectID("loc"), display_name="Harbor")
    fields = world_object_fields(obj)
    assert fields.object_id == ObjectID("loc")
    assert fields.display_name == "Harbor"


def test_world_object_fields_rejects_other_values():
    with pytest.raises(TypeError):
        world_object_fields(WorldObjectFields())
    with pytest.raises(TypeError):
        world_object_fields("character")


def test_collections_are_independent():
    a = CharacterObject()
    b = CharacterObject()
    a.tags.append("hero")
    a.attributes["age"] = "30"
    assert b.tags == []
    assert b.attributes == {}


def test_same_fields_different_kinds_differ():
    assert CharacterObject(display_name="X") != ItemObject(display_name="X")
    assert ItemObject(display_name="X") == ItemObject(display_name="X")