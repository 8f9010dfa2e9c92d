import json

import pytest

from scrivi.errors import ErrorCode, ScriviError
from scrivi.ids import ChapterID, SceneID
from scrivi.schemas.chapter_meta_json import (
    ChapterMetaData,
    SceneRef,
    parse_chapter_meta,
    serialize_chapter_meta,
)


def _sample() -> ChapterMetaData:
    return ChapterMetaData(
        chapter_id=ChapterID("ch-1"),
        title="Chapter 1",
        slug="chapter-001",
        display_label="Chapter One",
        status="draft",
        created_at="2024-01-01T00:00:00Z",
        created_by_identity_id="ident-1",
        created_by_persona_id="persona-1",
        created_by_display_name="Ada",
        scenes=[
            SceneRef(SceneID("sc-1"), "scenes/001.meta.json"),
            SceneRef(SceneID("sc-2"), "scenes/002.meta.json"),
        ],
    )


def test_round_trip():
    data = _sample()
    assert parse_chapter_meta(serialize_chapter_meta(data)) == data


def test_wire_layout():
    raw = json.loads(serialize_chapter_meta(_sample()))
    assert raw["schema"] == "scrivi.chapter.v1"
    assert raw["displayLabel"] == "Chapter One"
    assert raw["createdBy"]["displayNameAtCreation"] == "Ada"
    assert raw["scenes"][1] == {"sceneID": "sc-2", "metadataPath": "scenes/002.meta.json"}


def test_no_scenes_omits_array_and_parses_empty():
    data = _sample()
    data.scenes = []
    text = serialize_chapter_meta(data)
    assert "scenes" not in json.loads(text)
    assert parse_chapter_meta(text).scenes == []


@pytest.mark.parametrize("key", ["chapterID", "title", "displayLabel", "status"])
def test_missing_required_field(key):
    raw = json.loads(serialize_chapter_meta(_sample()))
    del raw[key]
    with pytest.raises(ScriviError) as info:
        parse_chapter_meta(json.dumps(raw))
    assert info.value.code == ErrorCode.VALIDATION_ERROR
    assert key in info.value.message


def test_wrong_schema():
    raw = json.loads(serialize_chapter_meta(_sample()))
    raw["schema"] = "scrivi.scene.v1"
    with pytest.raises(ScriviError) as info:
        parse_chapter_meta(json.dumps(raw))
    assert info.value.code == ErrorCode.VALIDATION_ERROR


def test_malformed_json():
    with pytest.raises(ScriviError) as info:
        parse_chapter_meta("{not json")
    assert info.value.code == ErrorCode.PARSE_ERROR


def test_optional_fields_default_when_absent():
    text = json.dumps(
        {
            "schema": "scrivi.chapter.v1",
            "chapterID": "c",
            "title": "T",
            "displayLabel": "L",
            "status": "draft",
        }
    )
    parsed = parse_chapter_meta(text)
    assert parsed.slug == ""
    assert parsed.created_by_identity_id == ""
    assert parsed.chapter_id == ChapterID("c")