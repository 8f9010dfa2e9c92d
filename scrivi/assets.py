"""Imported asset categories and metadata."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from scrivi.model import ISO8601Timestamp, Slug, _WireEnum


class AssetCategory(_WireEnum):
    IMAGE = enum.auto()
    AUDIO = enum.auto()
    VIDEO = enum.auto()
    DOCUMENT = enum.auto()
    OTHER = enum.auto()


_PLURAL_SUBDIRS = {AssetCategory.IMAGE: "images", AssetCategory.DOCUMENT: "documents"}


def asset_category_subdir(category: AssetCategory) -> str:
    """Directory name under which assets of the category are stored."""
    return _PLURAL_SUBDIRS.get(category, category.value)


def asset_category_string(category: AssetCategory) -> str:
    """Wire name of the category."""
    return category.value


def asset_category_from_string(text: str) -> AssetCategory:
    """Category for a wire name; unknown names map to OTHER."""
    try:
        return AssetCategory(text)
    except ValueError:
        return AssetCategory.OTHER


@dataclass
class AssetMeta:
    asset_id: str = ""
    slug: Slug = ""
    filename: str = ""
    category: AssetCategory = AssetCategory.OTHER
    mime_type: str = ""
    imported_at: ISO8601Timestamp = ""

    imported_by_identity_id: str = ""
    imported_by_persona_id: str = ""
    imported_by_display_name: str = ""

    title: str = ""
    notes: str = ""
    tags: list[str] = field(default_factory=list)