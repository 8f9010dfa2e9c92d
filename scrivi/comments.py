"""Comments attached to scenes and world objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from scrivi.model import ISO8601Timestamp, _CreationStamp


@dataclass
class Comment(_CreationStamp):
    comment_id: str = ""
    body: str = ""
    resolved: bool = False

    resolved_at: Optional[ISO8601Timestamp] = None
    resolved_by_identity_id: Optional[str] = None
    resolved_by_persona_id: Optional[str] = None
    resolved_by_display_name: Optional[str] = None


@dataclass
class CommentThread:
    """Comments on one target; scope_kind is "scene" or "object"."""

    schema: str = ""
    scope_kind: str = ""
    target_id: str = ""
    comments: list[Comment] = field(default_factory=list)