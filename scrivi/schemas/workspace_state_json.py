"""The per-device workspace state document (schema scrivi.workspaceState.v1)."""

from __future__ import annotations

from dataclasses import dataclass, field

from scrivi.ids import ProjectID
from scrivi.jsondoc import JsonDoc
from scrivi.model import ISO8601Timestamp
from scrivi.schemas.schema_utils import parse_and_validate_schema, require_field

SCHEMA = "scrivi.workspaceState.v1"


@dataclass
class WorkspaceStateData:
    """Workspace state; the last-writing-surface fields apply when has_last_writing_surface."""

    project_id: ProjectID = field(default_factory=ProjectID)
    device_id: str = ""
    identity_id: str = ""
    active_persona_id: str = ""
    last_opened_at: ISO8601Timestamp = ""

    has_last_writing_surface: bool = False
    last_scene_id: str = ""
    last_content_path: str = ""
    cursor_anchor: int = 0
    cursor_focus: int = 0
    scroll_position: float = 0.0


def serialize_workspace_state(data: WorkspaceStateData) -> str:
    """Serialise workspace state to JSON text.

    The scroll position is stored in thousandths, truncated to an integer.
    """
    doc = JsonDoc()
    doc.set_string("schema", SCHEMA)
    doc.set_string("projectID", data.project_id.value)
    doc.set_string("deviceID", data.device_id)
    doc.set_string("identityID", data.identity_id)
    doc.set_string("activePersonaID", data.active_persona_id)
    doc.set_string("lastOpenedAt", data.last_opened_at)

    if data.has_last_writing_surface:
        cursor = JsonDoc()
        cursor.set_int("anchor", data.cursor_anchor)
        cursor.set_int("focus", data.cursor_focus)

        surface = JsonDoc()
        surface.set_string("sceneID", data.last_scene_id)
        surface.set_string("contentPath", data.last_content_path)
        surface.set_sub_doc("cursor", cursor)
        surface.set_int("scrollPosition", int(data.scroll_position * 1000))

        doc.set_sub_doc("lastWritingSurface", surface)

    return doc.dump()


def parse_workspace_state(text: str | bytes) -> WorkspaceStateData:
    """Parse workspace state JSON text; raises ScriviError if invalid."""
    doc = parse_and_validate_schema(text, SCHEMA)
    for key in ("projectID", "deviceID", "identityID"):
        require_field(doc, key)

    data = WorkspaceStateData(
        project_id=ProjectID(doc.get_string("projectID")),
        device_id=doc.get_string("deviceID"),
        identity_id=doc.get_string("identityID"),
        active_persona_id=doc.get_string("activePersonaID"),
        last_opened_at=doc.get_string("lastOpenedAt"),
    )

    if doc.contains("lastWritingSurface"):
        surface = doc.get_sub_doc("lastWritingSurface")
        cursor = surface.get_sub_doc("cursor")
        data.has_last_writing_surface = True
        data.last_scene_id = surface.get_string("sceneID")
        data.last_content_path = surface.get_string("contentPath")
        data.scroll_position = surface.get_int("scrollPosition") / 1000.0
        data.cursor_anchor = cursor.get_int("anchor")
        data.cursor_focus = cursor.get_int("focus")

    return data