import json

import pytest

from scrivi.errors import ErrorCode, ScriviError
from scrivi.ids import ChapterID, ManuscriptID
from scrivi.schemas.manuscript_meta_json import (
    ChapterRef,
    ManuscriptMetaData,
    parse_manuscript_meta,
    serialize_manuscript_meta,
)


def _sample() -> ManuscriptMetaData:
    return ManuscriptMetaData(
        manuscript_id=ManuscriptID("m-1"),
        title="Draft",
        created_at="2024-01-02T03:04:05Z",
        created_by_identity_id="i-1",
        created_by_persona_id="per-1",
        created_by_display_name="Ann",
        chapters=[
            ChapterRef(ChapterID("c-1"), "chapters/chapter-001/chapter.json"),
            ChapterRef(ChapterID("c-2"), "chapters/chapter-002/chapter.json"),
        ],
    )


def test_round_trip_preserves_chapter_order():
    data = _sample()
    parsed = parse_manuscript_meta(serialize_manuscript_meta(data))
    assert parsed == data
    assert [ref.chapter_id.value for ref in parsed.chapters] == ["c-1", "c-2"]


def test_serialized_layout():
    raw = json.loads(serialize_manuscript_meta(_sample()))
    assert raw["schema"] == "scrivi.manuscript.v1"
    assert raw["manuscriptID"] == "m-1"
    assert raw["structure"]["chapters"][1]["path"] == "chapters/chapter-002/chapter.json"
    assert raw["createdBy"]["identityID"] == "i-1"


def test_round_trip_without_chapters():
    data = ManuscriptMetaData(manuscript_id=ManuscriptID("m"), title="T")
    parsed = parse_manuscript_meta(serialize_manuscript_meta(data))
    assert parsed == data
    assert parsed.chapters == []


@pytest.mark.parametrize("missing", ["manuscriptID", "title"])
def test_missing_required_field(missing):
    raw = json.loads(serialize_manuscript_meta(_sample()))
    del raw[missing]
    with pytest.raises(ScriviError) as info:
        parse_manuscript_meta(json.dumps(raw))
    assert info.value.code is ErrorCode.VALIDATION_ERROR
    assert missing in info.value.message


def test_wrong_schema_rejected():
    raw = json.loads(serialize_manuscript_meta(_sample()))
    raw["schema"] = "scrivi.project.v1"
    with pytest.raises(ScriviError) as info:
        parse_manuscript_meta(json.dumps(raw))
    assert info.value.code is ErrorCode.VALIDATION_ERROR


def test_malformed_json_rejected():
    with pytest.raises(ScriviError) as info:
        parse_manuscript_meta("[")
    assert info.value.code is ErrorCode.PARSE_ERROR