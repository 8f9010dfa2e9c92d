"""Repair issues reported when a project's files need attention."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from scrivi.ids import ChapterID, ProjectID, SceneID
from scrivi.model import _WireEnum


class RepairSeverity(_WireEnum):
    INFO = enum.auto()
    WARNING = enum.auto()
    BLOCKING = enum.auto()


class RepairCategory(_WireEnum):
    NONE = enum.auto()
    SAFE_EXTERNAL_EDIT = enum.auto()
    UNREGISTERED_MANUSCRIPT_FILE = enum.auto()
    MISSING_CONTENT = enum.auto()
    MISSING_METADATA = enum.auto()
    POSSIBLE_RENAME = enum.auto()
    ORPHAN_METADATA = enum.auto()
    CORRUPT_METADATA = enum.auto()
    UNSUPPORTED_SCHEMA = enum.auto()
    GIT_STATE_CHANGED = enum.auto()
    MERGE_CONFLICT = enum.auto()
    UNKNOWN_FILE = enum.auto()
    UNKNOWN_ISSUE = enum.auto()


class RepairActionKind(_WireEnum):
    NONE = enum.auto()
    RELOAD_EXTERNAL_VERSION = enum.auto()
    KEEP_CURRENT_VERSION = enum.auto()
    SAVE_CURRENT_VERSION_AS_COPY = enum.auto()
    IMPORT_AS_NEW_SCENE = enum.auto()
    ATTACH_TO_EXISTING_SCENE = enum.auto()
    REGENERATE_METADATA = enum.auto()
    RESTORE_FROM_SNAPSHOT = enum.auto()
    CREATE_EMPTY_CONTENT_FILE = enum.auto()
    RELINK_TO_FILE = enum.auto()
    MARK_MISSING = enum.auto()
    REMOVE_FROM_PROJECT = enum.auto()
    MOVE_TO_INBOX = enum.auto()
    IGNORE = enum.auto()
    DELETE_AFTER_CONFIRMATION = enum.auto()
    OPEN_READ_ONLY = enum.auto()
    CANCEL_OPEN = enum.auto()


@dataclass
class RepairAction:
    kind: RepairActionKind = RepairActionKind.NONE
    label: str = ""
    detail: str = ""


@dataclass
class RepairIssue:
    issue_id: str = ""

    severity: RepairSeverity = RepairSeverity.INFO
    category: RepairCategory = RepairCategory.NONE

    title: str = ""
    message: str = ""
    path: str = ""
    related_path: str = ""

    project_id: ProjectID = ProjectID()
    chapter_id: ChapterID = ChapterID()
    scene_id: SceneID = SceneID()

    suggested_actions: list[RepairAction] = field(default_factory=list)