import dataclasses

import pytest

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


def test_default_value_is_empty():
    defaults = [
        ProjectID(),
        ManuscriptID(),
        ChapterID(),
        SceneID(),
        IdentityID(),
        PersonaID(),
        SnapshotID(),
        CommitID(),
        ObjectID(),
    ]
    assert [d.value for d in defaults] == [""] * 9
    assert not any(defaults)


def test_equal_values_compare_equal():
    assert ProjectID("abc") == ProjectID("abc")
    assert ProjectID("abc") != ProjectID("abd")
    assert ManuscriptID("abc") == ManuscriptID("abc")
    assert ChapterID("abc") != ChapterID("abd")
    assert SceneID("abc") == SceneID("abc")
    assert IdentityID("abc") != IdentityID("abd")
    assert PersonaID("abc") == PersonaID("abc")
    assert SnapshotID("abc") != SnapshotID("abd")
    assert CommitID("abc") == CommitID("abc")
    assert ObjectID("abc") != ObjectID("abd")


def test_str_is_value():
    values = [
        str(ProjectID("xyz")),
        str(ManuscriptID("xyz")),
        str(ChapterID("xyz")),
        str(SceneID("xyz")),
        str(IdentityID("xyz")),
        str(PersonaID("xyz")),
        str(SnapshotID("xyz")),
        str(CommitID("xyz")),
        str(ObjectID("xyz")),
    ]
    assert values == ["xyz"] * 9


def test_different_kinds_with_same_value_differ():
    assert ProjectID("same") != SceneID("same")


def test_ids_are_hashable_keys():
    mapping = {SceneID("a"): 1, SceneID("b"): 2}
    assert mapping[SceneID("a")] == 1
    assert len({ChapterID("x"), ChapterID("x")}) == 1


def test_ids_are_immutable():
    pid = ProjectID("p")
    with pytest.raises(dataclasses.FrozenInstanceError):
        pid.value = "q"
    assert pid.value == "p"