import json

import pytest

from scrivi.errors import ErrorCode, ScriviError
from scrivi.ids import SceneID
from scrivi.schemas.scene_meta_json import (
    SceneMetaData,
    parse_scene_meta,
    serialize_scene_meta,
)


def _sample() -> SceneMetaData:
    return SceneMetaData(
        scene_id=SceneID("sc-1"),
        title="Opening Scene",
        slug="001-opening-scene",
        status="draft",
        created_at="2024-01-01T00:00:00Z",
        created_by_identity_id="id-1",
        created_by_persona_id="p-1",
        created_by_display_name="Ada",
        modified_at="2024-01-02T00:00:00Z",
        modified_by_identity_id="id-2",
        modified_by_persona_id="p-2",
        modified_by_display_name="Grace",
        content_path="scenes/001-opening-scene.md",
        word_count=42,
        character_count=250,
    )


def test_round_trip():
    data = _sample()
    assert parse_scene_meta(serialize_scene_meta(data)) == data


def test_content_block_constants():
    raw = json.loads(serialize_scene_meta(_sample()))
    assert raw["schema"] == "scrivi.scene.v1"
    assert raw["content"] == {
        "path": "scenes/001-opening-scene.md",
        "format": "markdown",
        "encoding": "utf-8",
        "encryption": "none",
    }
    assert raw["modifiedBy"]["displayNameAtModification"] == "Grace"
    assert raw["stats"] == {"wordCount": 42, "characterCount": 250}


@pytest.mark.parametrize("key", ["sceneID", "title", "status"])
def test_missing_required_field(key):
    raw = json.loads(serialize_scene_meta(_sample()))
    del raw[key]
    with pytest.raises(ScriviError) as info:
        parse_scene_meta(json.dumps(raw))
    assert info.value.code == ErrorCode.VALIDATION_ERROR


def test_non_integer_stats_default_to_zero():
    raw = json.loads(serialize_scene_meta(_sample()))
    raw["stats"] = {"wordCount": "many", "characterCount": 1.5}
    parsed = parse_scene_meta(json.dumps(raw))
    assert (parsed.word_count, parsed.character_count) == (0, 0)


def test_wrong_schema():
    raw = json.loads(serialize_scene_meta(_sample()))
    raw["schema"] = "scrivi.chapter.v1"
    with pytest.raises(ScriviError) as info:
        parse_scene_meta(json.dumps(raw))
    assert info.value.code == ErrorCode.VALIDATION_ERROR