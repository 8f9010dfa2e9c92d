"""Request objects accepted by the core's operations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from scrivi.assets import AssetCategory
from scrivi.ids import IdentityID, ObjectID, ProjectID, SceneID
from scrivi.model import (
    AbsolutePath,
    AuthorshipRef,
    RelativePath,
    ScrollPosition,
    Slug,
    TextSelection,
    Utf8Text,
    _WireEnum,
)
from scrivi.objects import CharacterObject, ObjectKind, WorldObject
from scrivi.repair import RepairActionKind


@dataclass
class _InProject:
    project_root_path: AbsolutePath = ""


@dataclass
class _WithAppSupport:
    app_support_root: AbsolutePath = ""


@dataclass
class _ByAuthor:
    author: AuthorshipRef = field(default_factory=AuthorshipRef)


@dataclass
class _ObjectRef(_InProject):
    object_kind: ObjectKind = ObjectKind.CHARACTER
    object_id: ObjectID = ObjectID()


@dataclass
class _CommentScope(_InProject):
    """A comment target; scope_kind is "scene" or "object"."""

    scope_kind: str = ""
    target_id: str = ""


@dataclass
class EnsureIdentityRequest(_WithAppSupport):
    requested_display_name: str = ""


@dataclass
class CreateProjectRequest(_InProject, _WithAppSupport, _ByAuthor):
    title: str = ""
    slug: Slug = ""

    initial_chapter_title: str = "Chapter 1"
    initial_chapter_slug: str = "chapter-001"
    initial_scene_title: str = "Opening Scene"
    initial_scene_slug: str = "001-opening-scene"

    enable_git_snapshots: bool = False


@dataclass
class OpenProjectRequest(_InProject, _WithAppSupport):
    current_identity_id: Optional[IdentityID] = None


@dataclass
class SaveSceneRequest(_InProject, _WithAppSupport, _ByAuthor):
    project_id: ProjectID = ProjectID()

    scene_id: SceneID = SceneID()
    scene_metadata_path: RelativePath = ""
    scene_content_path: RelativePath = ""

    markdown: Utf8Text = ""
    selection: TextSelection = field(default_factory=TextSelection)
    scroll: ScrollPosition = field(default_factory=ScrollPosition)

    previously_loaded_content_hash: Optional[str] = None


@dataclass
class ExternalChangeScanRequest(_InProject, _WithAppSupport):
    include_git_status: bool = True


@dataclass
class EnableGitRequest(_InProject, _ByAuthor):
    initial_snapshot_label: str = "Initial project"


@dataclass
class CreateSnapshotRequest(_InProject, _ByAuthor):
    label: str = ""
    note: str = ""


@dataclass
class ApplyRepairRequest(_InProject, _WithAppSupport, _ByAuthor):
    issue_id: str = ""
    action_kind: RepairActionKind = RepairActionKind.NONE
    target_path: str = ""


@dataclass
class CreateObjectRequest(_InProject, _ByAuthor):
    """Create a world object; an empty slug is derived from the display name."""

    object_kind: ObjectKind = ObjectKind.CHARACTER
    display_name: str = ""
    slug: Slug = ""


@dataclass
class OpenObjectRequest(_ObjectRef):
    """Open one world object."""


@dataclass
class SaveObjectRequest(_InProject, _ByAuthor):
    """Save a full world object whose ID names an existing file."""

    object: WorldObject = field(default_factory=CharacterObject)


@dataclass
class DeleteObjectRequest(_ObjectRef):
    """Delete one world object."""


@dataclass
class ImportAssetRequest(_InProject, _ByAuthor):
    source_path: AbsolutePath = ""
    category: AssetCategory = AssetCategory.OTHER
    title: str = ""


@dataclass
class ListAssetsRequest(_InProject):
    """List assets, filtered by category when one is given."""

    category: Optional[AssetCategory] = None


@dataclass
class RemoveAssetRequest(_InProject):
    asset_id: str = ""


@dataclass
class AddCommentRequest(_CommentScope, _ByAuthor):
    body: str = ""


@dataclass
class ListCommentsRequest(_CommentScope):
    """List the comments on one target."""


@dataclass
class ResolveCommentRequest(_CommentScope):
    comment_id: str = ""
    resolver: AuthorshipRef = field(default_factory=AuthorshipRef)


class InboxAction(_WireEnum):
    """What to do with a file dropped into the inbox."""

    IMPORT_AS_ASSET = enum.auto()
    IGNORE = enum.auto()
    DELETE_FILE = enum.auto()


@dataclass
class ListInboxRequest(_InProject):
    """List the files waiting in the inbox."""


@dataclass
class ImportFromInboxRequest(_InProject, _ByAuthor):
    """Act on an inbox file; asset_category applies when importing as an asset."""

    filename: str = ""
    action: InboxAction = InboxAction.IMPORT_AS_ASSET
    asset_category: AssetCategory = AssetCategory.OTHER