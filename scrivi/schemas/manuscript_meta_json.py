"""The manuscript metadata document (schema scrivi.manuscript.v1)."""

from __future__ import annotations

from dataclasses import dataclass, field

from scrivi.ids import ChapterID, ManuscriptID
from scrivi.jsondoc import JsonDoc
from scrivi.model import ISO8601Timestamp
from scrivi.schemas.schema_utils import parse_and_validate_schema, require_field

SCHEMA = "scrivi.manuscript.v1"


@dataclass
class ChapterRef:
    chapter_id: ChapterID = field(default_factory=ChapterID)
    path: str = ""


@dataclass
class ManuscriptMetaData:
    manuscript_id: ManuscriptID = field(default_factory=ManuscriptID)
    title: str = ""
    created_at: ISO8601Timestamp = ""
    created_by_identity_id: str = ""
    created_by_persona_id: str = ""
    created_by_display_name: str = ""
    chapters: list[ChapterRef] = field(default_factory=list)


def serialize_manuscript_meta(data: ManuscriptMetaData) -> str:
    """Serialise manuscript metadata to JSON text."""
    created_by = JsonDoc()
    created_by.set_string("identityID", data.created_by_identity_id)
    created_by.set_string("personaID", data.created_by_persona_id)
    created_by.set_string("displayNameAtCreation", data.created_by_display_name)

    structure = JsonDoc()
    for chapter in data.chapters:
        ref = JsonDoc()
        ref.set_string("chapterID", chapter.chapter_id.value)
        ref.set_string("path", chapter.path)
        structure.append_to_array("chapters", ref)

    doc = JsonDoc()
    doc.set_string("schema", SCHEMA)
    doc.set_string("manuscriptID", data.manuscript_id.value)
    doc.set_string("title", data.title)
    doc.set_string("createdAt", data.created_at)
    doc.set_sub_doc("createdBy", created_by)
    doc.set_sub_doc("structure", structure)
    return doc.dump()


def parse_manuscript_meta(text: str | bytes) -> ManuscriptMetaData:
    """Parse manuscript metadata JSON text; raises ScriviError if invalid."""
    doc = parse_and_validate_schema(text, SCHEMA)
    for key in ("manuscriptID", "title"):
        require_field(doc, key)

    created_by = doc.get_sub_doc("createdBy")
    structure = doc.get_sub_doc("structure")
    chapters = [
        ChapterRef(
            chapter_id=ChapterID(item.get_string("chapterID")),
            path=item.get_string("path"),
        )
        for item in structure.array_items("chapters")
    ]

    return ManuscriptMetaData(
        manuscript_id=ManuscriptID(doc.get_string("manuscriptID")),
        title=doc.get_string("title"),
        created_at=doc.get_string("createdAt"),
        created_by_identity_id=created_by.get_string("identityID"),
        created_by_persona_id=created_by.get_string("personaID"),
        created_by_display_name=created_by.get_string("displayNameAtCreation"),
        chapters=chapters,
    )