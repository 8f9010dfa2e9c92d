"""The project personas document (schema scrivi.projectPersonas.v1)."""

from __future__ import annotations

from dataclasses import dataclass, field

from scrivi.ids import PersonaID
from scrivi.jsondoc import JsonDoc
from scrivi.model import ISO8601Timestamp
from scrivi.schemas.schema_utils import parse_and_validate_schema, require_field

SCHEMA = "scrivi.projectPersonas.v1"


@dataclass
class PersonaEntry:
    persona_id: PersonaID = field(default_factory=PersonaID)
    display_name: str = ""
    persona_kind: str = ""
    controlled_by_identity_id: str = ""
    created_at: ISO8601Timestamp = ""
    status: str = ""


@dataclass
class ProjectPersonasData:
    personas: list[PersonaEntry] = field(default_factory=list)


def serialize_project_personas(data: ProjectPersonasData) -> str:
    """Serialise the persona list to JSON text."""
    doc = JsonDoc()
    doc.set_string("schema", SCHEMA)
    for persona in data.personas:
        entry = JsonDoc()
        entry.set_string("personaID", persona.persona_id.value)
        entry.set_string("displayName", persona.display_name)
        entry.set_string("personaKind", persona.persona_kind)
        entry.set_string("createdAt", persona.created_at)
        entry.set_string("status", persona.status)
        controller = JsonDoc()
        controller.set_string("value", persona.controlled_by_identity_id)
        entry.append_to_array("controlledBy", controller)
        doc.append_to_array("personas", entry)
    return doc.dump()


def parse_project_personas(text: str | bytes) -> ProjectPersonasData:
    """Parse personas JSON text; raises ScriviError if invalid."""
    doc = parse_and_validate_schema(text, SCHEMA)
    require_field(doc, "personas")

    personas = []
    for item in doc.array_items("personas"):
        controller = ""
        if item.array_size("controlledBy") > 0:
            controller = item.array_item("controlledBy", 0).get_string("value")
        personas.append(
            PersonaEntry(
                persona_id=PersonaID(item.get_string("personaID")),
                display_name=item.get_string("displayName"),
                persona_kind=item.get_string("personaKind"),
                controlled_by_identity_id=controller,
                created_at=item.get_string("createdAt"),
                status=item.get_string("status"),
            )
        )
    return ProjectPersonasData(personas=personas)