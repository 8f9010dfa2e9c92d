"""World objects: characters, locations, items, rules and timelines."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from scrivi.ids import ObjectID
from scrivi.model import ISO8601Timestamp, Slug, _CreationStamp, _WireEnum


class ObjectKind(_WireEnum):
    CHARACTER = enum.auto()
    LOCATION = enum.auto()
    ITEM = enum.auto()
    RULE = enum.auto()
    TIMELINE = enum.auto()


def object_kind_subdir(kind: ObjectKind) -> str:
    """Directory name under which objects of the kind are stored."""
    return f"{ObjectKind(kind).value}s"


@dataclass
class WorldObjectFields(_CreationStamp):
    """Fields shared by every world object."""

    kind: ClassVar[ObjectKind]

    object_id: ObjectID = ObjectID()
    slug: Slug = ""
    display_name: str = ""
    status: str = ""

    modified_at: ISO8601Timestamp = ""
    modified_by_identity_id: str = ""
    modified_by_persona_id: str = ""
    modified_by_display_name: str = ""

    notes: str = ""
    tags: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def __init_subclass__(cls, kind: ObjectKind, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.kind = kind


class CharacterObject(WorldObjectFields, kind=ObjectKind.CHARACTER):
    """A character in the story world."""


class LocationObject(WorldObjectFields, kind=ObjectKind.LOCATION):
    """A place in the story world."""


class ItemObject(WorldObjectFields, kind=ObjectKind.ITEM):
    """An item in the story world."""


class RuleObject(WorldObjectFields, kind=ObjectKind.RULE):
    """A rule of the story world."""


class TimelineObject(WorldObjectFields, kind=ObjectKind.TIMELINE):
    """A timeline of the story world."""


WorldObject = Union[CharacterObject, LocationObject, ItemObject, RuleObject, TimelineObject]

_WORLD_OBJECT_TYPES = (CharacterObject, LocationObject, ItemObject, RuleObject, TimelineObject)


def world_object_fields(obj: WorldObject) -> WorldObjectFields:
    """Return the shared fields of any world object."""
    if not isinstance(obj, _WORLD_OBJECT_TYPES):
        raise TypeError(f"not a world object: {type(obj).__name__}")
    return obj