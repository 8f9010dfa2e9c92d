"""Strongly typed identifiers for project entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class _Identifier:
    value: str = ""

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return bool(self.value)


class ProjectID(_Identifier):
    """Identifier of a project."""


class ManuscriptID(_Identifier):
    """Identifier of a manuscript."""


class ChapterID(_Identifier):
    """Identifier of a chapter."""


class SceneID(_Identifier):
    """Identifier of a scene."""


class IdentityID(_Identifier):
    """Identifier of a local identity."""


class PersonaID(_Identifier):
    """Identifier of a persona."""


class SnapshotID(_Identifier):
    """Identifier of a snapshot."""


class CommitID(_Identifier):
    """Identifier of a version-control commit."""


class ObjectID(_Identifier):
    """Identifier of a world object."""