"""Core value types shared across the project model."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from scrivi.ids import ChapterID, IdentityID, PersonaID, ProjectID, SceneID

Utf8Text = str
ISO8601Timestamp = str
Slug = str
RelativePath = str
AbsolutePath = str


class _WireEnum(enum.Enum):
    """Enum whose automatic values are the camelCase form of the member name."""

    def _generate_next_value_(name, start, count, last_values):  # noqa: N805
        first, *rest = name.lower().split("_")
        return first + "".join(part.capitalize() for part in rest)


class ManuscriptStatus(_WireEnum):
    DRAFT = enum.auto()
    REVISED = enum.auto()
    FINAL = enum.auto()
    ARCHIVED = enum.auto()


class PersonaKind(_WireEnum):
    INDIVIDUAL = enum.auto()
    GROUP = enum.auto()


class ProjectRole(_WireEnum):
    OWNER = enum.auto()
    EDITOR = enum.auto()
    READER = enum.auto()


class MemberStatus(_WireEnum):
    ACTIVE = enum.auto()
    REMOVED = enum.auto()


class OpenMode(_WireEnum):
    """How a project may be opened."""

    NORMAL_EDIT = enum.auto()
    EDIT_WITH_WARNINGS = enum.auto()
    REPAIR_REQUIRED = enum.auto()
    READ_ONLY = enum.auto()
    CANNOT_OPEN = enum.auto()


@dataclass
class _CreationStamp:
    """When and by whom something was created."""

    created_at: ISO8601Timestamp = ""
    created_by_identity_id: str = ""
    created_by_persona_id: str = ""
    created_by_display_name: str = ""


@dataclass
class TextSelection:
    anchor: int = 0
    focus: int = 0


@dataclass
class ScrollPosition:
    value: float = 0.0


@dataclass
class AuthorshipRef:
    """Who performed an action: identity, persona and display name."""

    identity_id: IdentityID = IdentityID()
    persona_id: PersonaID = PersonaID()
    display_name: str = ""


@dataclass
class LastWritingSurface:
    scene_id: SceneID = SceneID()
    content_path: RelativePath = ""
    selection: TextSelection = field(default_factory=TextSelection)
    scroll: ScrollPosition = field(default_factory=ScrollPosition)


@dataclass
class WorkspaceState:
    project_id: ProjectID = ProjectID()
    device_id: str = ""
    identity_id: IdentityID = IdentityID()
    active_persona_id: PersonaID = PersonaID()
    last_writing_surface: Optional[LastWritingSurface] = None
    last_opened_at: ISO8601Timestamp = ""


@dataclass
class ProjectSummary:
    project_id: ProjectID = ProjectID()
    title: str = ""
    slug: Slug = ""
    root_path: AbsolutePath = ""
    git_snapshots_enabled: bool = False


@dataclass
class SceneSummary:
    scene_id: SceneID = SceneID()
    chapter_id: ChapterID = ChapterID()
    title: str = ""
    slug: Slug = ""
    status: ManuscriptStatus = ManuscriptStatus.DRAFT
    metadata_path: RelativePath = ""
    content_path: RelativePath = ""