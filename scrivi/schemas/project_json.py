"""The project.json document (schema scrivi.project.v1)."""

from __future__ import annotations

from dataclasses import dataclass

from scrivi.ids import ProjectID
from scrivi.jsondoc import JsonDoc
from scrivi.model import Slug, _CreationStamp
from scrivi.schemas.schema_utils import parse_and_validate_schema, require_field

SCHEMA = "scrivi.project.v1"


@dataclass
class ProjectJsonData(_CreationStamp):
    project_id: ProjectID = ProjectID()
    title: str = ""
    slug: Slug = ""

    manuscript_path: str = ""
    members_path: str = ""
    personas_path: str = ""

    git_snapshots_enabled: bool = False


def _strings(**values: str) -> JsonDoc:
    doc = JsonDoc()
    for key, value in values.items():
        doc.set_string(key, value)
    return doc


def serialize_project(data: ProjectJsonData) -> str:
    """Serialise project data to JSON text."""
    git_snapshots = JsonDoc()
    git_snapshots.set_bool("enabled", data.git_snapshots_enabled)
    features = JsonDoc()
    features.set_sub_doc("gitSnapshots", git_snapshots)

    doc = _strings(
        schema=SCHEMA,
        projectID=data.project_id.value,
        title=data.title,
        slug=data.slug,
        createdAt=data.created_at,
    )
    sections = {
        "createdBy": _strings(
            identityID=data.created_by_identity_id,
            personaID=data.created_by_persona_id,
            displayNameAtCreation=data.created_by_display_name,
        ),
        "manuscript": _strings(path=data.manuscript_path),
        "identities": _strings(membersPath=data.members_path, personasPath=data.personas_path),
        "features": features,
    }
    for key, section in sections.items():
        doc.set_sub_doc(key, section)
    return doc.dump()


def parse_project(text: str | bytes) -> ProjectJsonData:
    """Parse project JSON text; raises ScriviError if invalid."""
    doc = parse_and_validate_schema(text, SCHEMA)
    for key in ("projectID", "title", "createdAt"):
        require_field(doc, key)

    created_by = doc.get_sub_doc("createdBy")
    identities = doc.get_sub_doc("identities")
    git_snapshots = doc.get_sub_doc("features").get_sub_doc("gitSnapshots")

    return ProjectJsonData(
        project_id=ProjectID(doc.get_string("projectID")),
        title=doc.get_string("title"),
        slug=doc.get_string("slug"),
        created_at=doc.get_string("createdAt"),
        created_by_identity_id=created_by.get_string("identityID"),
        created_by_persona_id=created_by.get_string("personaID"),
        created_by_display_name=created_by.get_string("displayNameAtCreation"),
        manuscript_path=doc.get_sub_doc("manuscript").get_string("path"),
        members_path=identities.get_string("membersPath"),
        personas_path=identities.get_string("personasPath"),
        git_snapshots_enabled=git_snapshots.get_bool("enabled"),
    )