"""Result objects returned by the core's operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from scrivi.assets import AssetMeta
from scrivi.comments import Comment
from scrivi.ids import (
    ChapterID,
    CommitID,
    IdentityID,
    ManuscriptID,
    ObjectID,
    PersonaID,
    ProjectID,
    SceneID,
    SnapshotID,
)
from scrivi.model import (
    AbsolutePath,
    ISO8601Timestamp,
    OpenMode,
    ProjectSummary,
    RelativePath,
    SceneSummary,
    ScrollPosition,
    Slug,
    TextSelection,
    Utf8Text,
    WorkspaceState,
)
from scrivi.objects import CharacterObject, WorldObject
from scrivi.repair import RepairActionKind, RepairIssue


@dataclass
class _Warnings:
    warnings: list[RepairIssue] = field(default_factory=list)


@dataclass
class _RepairIssues:
    repair_issues: list[RepairIssue] = field(default_factory=list)


@dataclass
class _ChangeReport(_RepairIssues):
    has_unsnapshotted_changes: bool = False


@dataclass
class _ObjectOutcome:
    object_id: ObjectID = ObjectID()


@dataclass
class _CommentOutcome:
    comment_id: str = ""


@dataclass
class EnsureIdentityResult:
    identity_id: IdentityID = IdentityID()
    default_persona_id: PersonaID = PersonaID()
    display_name: str = ""
    created_new_identity: bool = False


@dataclass
class CreateProjectResult(_Warnings):
    project: ProjectSummary = field(default_factory=ProjectSummary)

    manuscript_id: ManuscriptID = ManuscriptID()
    first_chapter_id: ChapterID = ChapterID()
    first_scene_id: SceneID = SceneID()

    first_scene_metadata_path: RelativePath = ""
    first_scene_content_path: RelativePath = ""

    workspace_state: WorkspaceState = field(default_factory=WorkspaceState)

    git_initialized: bool = False
    initial_snapshot_id: Optional[SnapshotID] = None


@dataclass
class OpenProjectResult(_RepairIssues):
    mode: OpenMode = OpenMode.CANNOT_OPEN

    project: ProjectSummary = field(default_factory=ProjectSummary)

    workspace_state: Optional[WorkspaceState] = None
    active_scene: Optional[SceneSummary] = None
    active_scene_markdown: Utf8Text = ""

    restored_selection: TextSelection = field(default_factory=TextSelection)
    restored_scroll: ScrollPosition = field(default_factory=ScrollPosition)


@dataclass
class SaveSceneResult(_ChangeReport):
    scene_id: SceneID = SceneID()

    saved: bool = False
    metadata_updated: bool = False
    workspace_state_updated: bool = False

    word_count: int = 0
    character_count: int = 0


@dataclass
class ExternalChangeScanResult(_ChangeReport):
    project_id: ProjectID = ProjectID()

    indexes_dirty: bool = False
    git_status_checked: bool = False


@dataclass
class EnableGitResult(_Warnings):
    git_initialized: bool = False
    already_repository: bool = False
    initial_snapshot_id: SnapshotID = SnapshotID()
    initial_commit_id: CommitID = CommitID()


@dataclass
class CreateSnapshotResult:
    snapshot_id: SnapshotID = SnapshotID()
    commit_id: CommitID = CommitID()
    created_at: ISO8601Timestamp = ""
    created: bool = False


@dataclass
class ApplyRepairResult(_Warnings):
    issue_id: str = ""
    action_applied: RepairActionKind = RepairActionKind.NONE
    resolved: bool = False
    detail: str = ""


@dataclass
class CreateObjectResult(_ObjectOutcome):
    slug: Slug = ""
    path: AbsolutePath = ""


@dataclass
class OpenObjectResult:
    object: WorldObject = field(default_factory=CharacterObject)
    path: AbsolutePath = ""


@dataclass
class SaveObjectResult(_ObjectOutcome):
    saved: bool = False


@dataclass
class DeleteObjectResult(_ObjectOutcome):
    deleted: bool = False


@dataclass
class ImportAssetResult:
    asset_id: str = ""
    asset_path: AbsolutePath = ""
    sidecar_path: AbsolutePath = ""


@dataclass
class ListAssetsResult:
    assets: list[AssetMeta] = field(default_factory=list)


@dataclass
class RemoveAssetResult:
    asset_id: str = ""
    deleted: bool = False


@dataclass
class AddCommentResult(_CommentOutcome):
    added: bool = False


@dataclass
class ListCommentsResult:
    comments: list[Comment] = field(default_factory=list)
    scope_kind: str = ""
    target_id: str = ""


@dataclass
class ResolveCommentResult(_CommentOutcome):
    resolved: bool = False


@dataclass
class InboxEntry:
    filename: str = ""
    absolute_path: AbsolutePath = ""


@dataclass
class ListInboxResult:
    entries: list[InboxEntry] = field(default_factory=list)


@dataclass
class ImportFromInboxResult:
    """Outcome of an inbox action: "importAsAsset", "ignored" or "deleted"."""

    action_taken: str = ""
    result_path: str = ""
    asset_id: str = ""