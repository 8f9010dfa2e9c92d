"""The scene metadata document (schema scrivi.scene.v1)."""

from __future__ import annotations

from dataclasses import dataclass, field

from scrivi.ids import SceneID
from scrivi.jsondoc import JsonDoc
from scrivi.model import ISO8601Timestamp, Slug
from scrivi.schemas.schema_utils import parse_and_validate_schema, require_field

SCHEMA = "scrivi.scene.v1"


@dataclass
class SceneMetaData:
    scene_id: SceneID = field(default_factory=SceneID)
    title: str = ""
    slug: Slug = ""
    status: str = ""
    created_at: ISO8601Timestamp = ""
    created_by_identity_id: str = ""
    created_by_persona_id: str = ""
    created_by_display_name: str = ""
    modified_at: ISO8601Timestamp = ""
    modified_by_identity_id: str = ""
    modified_by_persona_id: str = ""
    modified_by_display_name: str = ""
    content_path: str = ""
    word_count: int = 0
    character_count: int = 0


def serialize_scene_meta(data: SceneMetaData) -> str:
    """Serialise scene metadata to JSON text."""
    created_by = JsonDoc()
    created_by.set_string("identityID", data.created_by_identity_id)
    created_by.set_string("personaID", data.created_by_persona_id)
    created_by.set_string("displayNameAtCreation", data.created_by_display_name)

    modified_by = JsonDoc()
    modified_by.set_string("identityID", data.modified_by_identity_id)
    modified_by.set_string("personaID", data.modified_by_persona_id)
    modified_by.set_string("displayNameAtModification", data.modified_by_display_name)

    content = JsonDoc()
    content.set_string("path", data.content_path)
    content.set_string("format", "markdown")
    content.set_string("encoding", "utf-8")
    content.set_string("encryption", "none")

    stats = JsonDoc()
    stats.set_int("wordCount", data.word_count)
    stats.set_int("characterCount", data.character_count)

    doc = JsonDoc()
    doc.set_string("schema", SCHEMA)
    doc.set_string("sceneID", data.scene_id.value)
    doc.set_string("title", data.title)
    doc.set_string("slug", data.slug)
    doc.set_string("status", data.status)
    doc.set_string("createdAt", data.created_at)
    doc.set_string("modifiedAt", data.modified_at)
    doc.set_sub_doc("createdBy", created_by)
    doc.set_sub_doc("modifiedBy", modified_by)
    doc.set_sub_doc("content", content)
    doc.set_sub_doc("stats", stats)
    return doc.dump()


def parse_scene_meta(text: str | bytes) -> SceneMetaData:
    """Parse scene metadata JSON text; raises ScriviError if invalid."""
    doc = parse_and_validate_schema(text, SCHEMA)
    for key in ("sceneID", "title", "status"):
        require_field(doc, key)

    created_by = doc.get_sub_doc("createdBy")
    modified_by = doc.get_sub_doc("modifiedBy")
    stats = doc.get_sub_doc("stats")

    return SceneMetaData(
        scene_id=SceneID(doc.get_string("sceneID")),
        title=doc.get_string("title"),
        slug=doc.get_string("slug"),
        status=doc.get_string("status"),
        created_at=doc.get_string("createdAt"),
        created_by_identity_id=created_by.get_string("identityID"),
        created_by_persona_id=created_by.get_string("personaID"),
        created_by_display_name=created_by.get_string("displayNameAtCreation"),
        modified_at=doc.get_string("modifiedAt"),
        modified_by_identity_id=modified_by.get_string("identityID"),
        modified_by_persona_id=modified_by.get_string("personaID"),
        modified_by_display_name=modified_by.get_string("displayNameAtModification"),
        content_path=doc.get_sub_doc("content").get_string("path"),
        word_count=stats.get_int("wordCount"),
        character_count=stats.get_int("characterCount"),
    )