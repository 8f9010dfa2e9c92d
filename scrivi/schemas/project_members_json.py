"""The project members document (schema scrivi.projectMembers.v1)."""

from __future__ import annotations

from dataclasses import dataclass, field

from scrivi.ids import IdentityID
from scrivi.jsondoc import JsonDoc
from scrivi.model import ISO8601Timestamp
from scrivi.schemas.schema_utils import parse_and_validate_schema, require_field

SCHEMA = "scrivi.projectMembers.v1"


@dataclass
class MemberEntry:
    identity_id: IdentityID = field(default_factory=IdentityID)
    role: str = ""
    status: str = ""
    default_persona_id: str = ""
    joined_at: ISO8601Timestamp = ""


@dataclass
class ProjectMembersData:
    members: list[MemberEntry] = field(default_factory=list)


def serialize_project_members(data: ProjectMembersData) -> str:
    """Serialise the member list to JSON text."""
    doc = JsonDoc()
    doc.set_string("schema", SCHEMA)
    for member in data.members:
        entry = JsonDoc()
        entry.set_string("identityID", member.identity_id.value)
        entry.set_string("role", member.role)
        entry.set_string("status", member.status)
        entry.set_string("defaultPersonaID", member.default_persona_id)
        entry.set_string("joinedAt", member.joined_at)
        doc.append_to_array("members", entry)
    return doc.dump()


def parse_project_members(text: str | bytes) -> ProjectMembersData:
    """Parse members JSON text; raises ScriviError if invalid."""
    doc = parse_and_validate_schema(text, SCHEMA)
    require_field(doc, "members")
    return ProjectMembersData(
        members=[
            MemberEntry(
                identity_id=IdentityID(item.get_string("identityID")),
                role=item.get_string("role"),
                status=item.get_string("status"),
                default_persona_id=item.get_string("defaultPersonaID"),
                joined_at=item.get_string("joinedAt"),
            )
            for item in doc.array_items("members")
        ]
    )