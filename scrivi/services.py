"""Interfaces for the platform services the core depends on."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

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
from scrivi.model import AbsolutePath, ISO8601Timestamp, RelativePath, Utf8Text

SecretBytes = bytes


class Clock(ABC):
    @abstractmethod
    def now_utc(self) -> ISO8601Timestamp:
        """Current time as an ISO 8601 UTC timestamp."""


class UUIDProvider(ABC):
    @abstractmethod
    def new_project_id(self) -> ProjectID: ...

    @abstractmethod
    def new_manuscript_id(self) -> ManuscriptID: ...

    @abstractmethod
    def new_chapter_id(self) -> ChapterID: ...

    @abstractmethod
    def new_scene_id(self) -> SceneID: ...

    @abstractmethod
    def new_identity_id(self) -> IdentityID: ...

    @abstractmethod
    def new_persona_id(self) -> PersonaID: ...

    @abstractmethod
    def new_snapshot_id(self) -> SnapshotID: ...

    @abstractmethod
    def new_object_id(self) -> ObjectID: ...


class FileSystem(ABC):
    """File access; implementations raise ScriviError on failure."""

    @abstractmethod
    def exists(self, path: AbsolutePath) -> bool: ...

    @abstractmethod
    def is_directory(self, path: AbsolutePath) -> bool: ...

    @abstractmethod
    def create_directories(self, path: AbsolutePath) -> None: ...

    @abstractmethod
    def read_text_file(self, path: AbsolutePath) -> Utf8Text: ...

    @abstractmethod
    def atomic_write_text_file(self, path: AbsolutePath, text: str) -> None: ...

    @abstractmethod
    def list_directory(self, path: AbsolutePath) -> list[AbsolutePath]: ...

    @abstractmethod
    def remove_file(self, path: AbsolutePath) -> None: ...


class SecureStore(ABC):
    """Secret storage; implementations raise ScriviError on failure."""

    @abstractmethod
    def contains_secret(self, key: str) -> bool: ...

    @abstractmethod
    def put_secret(self, key: str, value: SecretBytes) -> None: ...

    @abstractmethod
    def get_secret(self, key: str) -> SecretBytes: ...


@dataclass
class GitAuthor:
    name: str = ""
    email: str = ""


@dataclass
class CommitRequest:
    message: str = ""
    author: GitAuthor = field(default_factory=GitAuthor)


@dataclass
class GitStatus:
    is_repository: bool = False
    has_uncommitted_changes: bool = False
    changed_files: list[RelativePath] = field(default_factory=list)
    untracked_files: list[RelativePath] = field(default_factory=list)


class GitProvider(ABC):
    """Version-control access; implementations raise ScriviError on failure."""

    @abstractmethod
    def is_repository(self, root_path: AbsolutePath) -> bool: ...

    @abstractmethod
    def init_repository(self, root_path: AbsolutePath) -> None: ...

    @abstractmethod
    def add_all(self, root_path: AbsolutePath) -> None: ...

    @abstractmethod
    def commit(self, root_path: AbsolutePath, request: CommitRequest) -> CommitID: ...

    @abstractmethod
    def status(self, root_path: AbsolutePath) -> GitStatus: ...


class LogLevel(enum.IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class Logger(ABC):
    @abstractmethod
    def log(self, level: LogLevel, message: str) -> None: ...


@dataclass
class CoreServices:
    """The set of services handed to the core; any may be absent."""

    file_system: Optional[FileSystem] = None
    secure_store: Optional[SecureStore] = None
    clock: Optional[Clock] = None
    uuid_provider: Optional[UUIDProvider] = None
    git_provider: Optional[GitProvider] = None
    logger: Optional[Logger] = None