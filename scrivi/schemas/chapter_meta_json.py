"""The chapter metadata document (schema scrivi.chapter.v1)."""

from __future__ import annotations

from dataclasses import dataclass, field

from scrivi.ids import ChapterID, SceneID
from scrivi.jsondoc import JsonDoc
from scrivi.model import ISO8601Timestamp, Slug
from scrivi.schemas.schema_utils import parse_and_validate_schema, require_field

SCHEMA = "scrivi.chapter.v1"


@dataclass
class SceneRef:
    scene_id: SceneID = field(default_factory=SceneID)
    metadata_path: str = ""


@dataclass
class ChapterMetaData:
    chapter_id: ChapterID = field(default_factory=ChapterID)
    title: str = ""
    slug: Slug = ""
    display_label: str = ""
    status: str = ""
    created_at: ISO8601Timestamp = ""
    created_by_identity_id: str = ""
    created_by_persona_id: str = ""
    created_by_display_name: str = ""
    scenes: list[SceneRef] = field(default_factory=list)


def serialize_chapter_meta(data: ChapterMetaData) -> str:
    """Serialise chapter metadata to JSON text."""
    created_by = JsonDoc()
    created_by.set_string("identityID", data.created_by_identity_id)
    created_by.set_string("personaID", data.created_by_persona_id)
    created_by.set_string("displayNameAtCreation", data.created_by_display_name)

    doc = JsonDoc()
    doc.set_string("schema", SCHEMA)
    doc.set_string("chapterID", data.chapter_id.value)
    doc.set_string("title", data.title)
    doc.set_string("slug", data.slug)
    doc.set_string("displayLabel", data.display_label)
    doc.set_string("status", data.status)
    doc.set_string("createdAt", data.created_at)
    doc.set_sub_doc("createdBy", created_by)

    for scene in data.scenes:
        ref = JsonDoc()
        ref.set_string("sceneID", scene.scene_id.value)
        ref.set_string("metadataPath", scene.metadata_path)
        doc.append_to_array("scenes", ref)

    return doc.dump()


def parse_chapter_meta(text: str | bytes) -> ChapterMetaData:
    """Parse chapter metadata JSON text; raises ScriviError if invalid."""
    doc = parse_and_validate_schema(text, SCHEMA)
    for key in ("chapterID", "title", "displayLabel", "status"):
        require_field(doc, key)

    created_by = doc.get_sub_doc("createdBy")
    scenes = [
        SceneRef(
            scene_id=SceneID(item.get_string("sceneID")),
            metadata_path=item.get_string("metadataPath"),
        )
        for item in doc.array_items("scenes")
    ]

    return ChapterMetaData(
        chapter_id=ChapterID(doc.get_string("chapterID")),
        title=doc.get_string("title"),
        slug=doc.get_string("slug"),
        display_label=doc.get_string("displayLabel"),
        status=doc.get_string("status"),
        created_at=doc.get_string("createdAt"),
        created_by_identity_id=created_by.get_string("identityID"),
        created_by_persona_id=created_by.get_string("personaID"),
        created_by_display_name=created_by.get_string("displayNameAtCreation"),
        scenes=scenes,
    )