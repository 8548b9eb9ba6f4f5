"""Tests for building, encoding and validating changes."""

import pytest

from dynalist_api.errors import ChangeError
from dynalist_api.models.change import (
    Change,
    ChangeScope,
    delete_file,
    delete_node,
    edit_file,
    edit_node,
    inbox_item,
    insert_file,
    insert_node,
    move_file,
    move_node,
    new_change,
    validate_changes,
)
from dynalist_api.models.enums import Action, FileType


def test_new_change_sets_only_action() -> None:
    change = new_change(Action.EDIT)

    assert change.to_dict() == {"action": "edit"}


def test_bare_change_round_trip_keeps_fields_unset() -> None:
    decoded = Change.from_dict(new_change(Action.DELETE).to_dict())

    assert decoded == Change(action=Action.DELETE)
    assert all(
        getattr(decoded, name) is None
        for name in ("index", "node_id", "parent_id", "content", "type", "file_id", "title")
    )


def test_file_edit_change_serializes_exactly_given_fields() -> None:
    change = new_change(Action.EDIT, file_id="F1", title="new title")

    assert change.to_dict() == {"action": "edit", "file_id": "F1", "title": "new title"}


def test_new_change_accepts_string_action_and_type() -> None:
    change = new_change("edit", file_id="F1", title="x", type="folder")

    assert change.action is Action.EDIT
    assert change.type is FileType.FOLDER
    assert change.to_dict()["type"] == "folder"


def test_new_change_rejects_unknown_field() -> None:
    with pytest.raises(ChangeError, match="colour"):
        new_change(Action.EDIT, colour=3)


def test_falsy_values_are_sent() -> None:
    change = new_change(Action.EDIT, node_id="n1", checked=False, content="", index=0)

    assert change.to_dict() == {
        "action": "edit",
        "index": 0,
        "node_id": "n1",
        "content": "",
        "checked": False,
    }


def test_to_dict_uses_wire_field_order() -> None:
    change = Change(
        action=Action.INSERT,
        note="n",
        content="c",
        parent_id="p",
        index=2,
    )

    assert list(change.to_dict()) == ["action", "index", "parent_id", "content", "note"]


def test_from_dict_rejects_missing_action() -> None:
    with pytest.raises(ChangeError, match="no action"):
        Change.from_dict({"node_id": "n1"})


def test_insert_node_without_index_appends() -> None:
    change = insert_node("root", "hello")

    assert change.to_dict() == {"action": "insert", "parent_id": "root", "content": "hello"}


def test_insert_node_with_options() -> None:
    change = insert_node("root", "todo", index=0, note="soon", checked=False, checkbox=True)

    assert change.to_dict() == {
        "action": "insert",
        "index": 0,
        "parent_id": "root",
        "content": "todo",
        "note": "soon",
        "checked": False,
        "checkbox": True,
    }


def test_edit_node_requires_a_field() -> None:
    with pytest.raises(ChangeError, match="edit change needs one of"):
        edit_node("n1")


def test_edit_node_checked_only() -> None:
    assert edit_node("n1", checked=True).to_dict() == {
        "action": "edit",
        "node_id": "n1",
        "checked": True,
    }


def test_move_and_delete_node() -> None:
    assert move_node("n1", "n2", 3).to_dict() == {
        "action": "move",
        "index": 3,
        "node_id": "n1",
        "parent_id": "n2",
    }
    assert delete_node("n1").to_dict() == {"action": "delete", "node_id": "n1"}


def test_file_changes() -> None:
    assert insert_file("folder1", "New doc").to_dict() == {
        "action": "insert",
        "parent_id": "folder1",
        "type": "document",
        "title": "New doc",
    }
    assert edit_file("F1", "Renamed", type=FileType.FOLDER).to_dict() == {
        "action": "edit",
        "type": "folder",
        "file_id": "F1",
        "title": "Renamed",
    }
    assert move_file("F1", "folder2", 0).to_dict() == {
        "action": "move",
        "index": 0,
        "parent_id": "folder2",
        "file_id": "F1",
    }
    assert delete_file("F1").to_dict() == {"action": "delete", "file_id": "F1"}


def test_node_id_is_not_allowed_in_file_scope() -> None:
    change = new_change(Action.DELETE, node_id="n1")

    problems = change.problems(ChangeScope.FILE)

    assert "'node_id' cannot be used in a file change" in problems
    assert "delete change needs 'file_id'" in problems


def test_file_id_is_not_allowed_in_node_scope() -> None:
    change = new_change(Action.EDIT, file_id="F1", content="x")

    with pytest.raises(ChangeError, match="'file_id' cannot be used in a node change"):
        change.validate(ChangeScope.NODE)


def test_insert_cannot_name_existing_target() -> None:
    change = new_change(Action.INSERT, node_id="n1", parent_id="root", content="x")

    assert change.problems(ChangeScope.NODE) == ["insert change cannot name an existing 'node_id'"]


def test_move_requires_parent_and_index() -> None:
    change = new_change(Action.MOVE, node_id="n1")

    assert change.problems(ChangeScope.NODE) == [
        "move change needs 'parent_id'",
        "move change needs 'index'",
    ]


def test_delete_cannot_carry_content() -> None:
    change = new_change(Action.DELETE, node_id="n1", content="x")

    assert change.problems(ChangeScope.NODE) == ["delete change cannot carry 'content'"]


def test_unknown_action_is_invalid() -> None:
    change = new_change("archive", node_id="n1")

    assert change.problems(ChangeScope.NODE) == ["unknown action 'archive'"]


def test_inbox_item() -> None:
    change = inbox_item("remember this", note="details")

    assert change.to_dict() == {
        "action": "insert",
        "content": "remember this",
        "note": "details",
    }


def test_inbox_item_rejects_parent() -> None:
    change = new_change(Action.INSERT, content="x", parent_id="root")

    with pytest.raises(ChangeError, match="inbox item"):
        change.validate(ChangeScope.INBOX)


def test_validate_changes_reports_positions() -> None:
    changes = [delete_node("n1"), new_change(Action.DELETE), delete_node("n2")]

    with pytest.raises(ChangeError) as excinfo:
        validate_changes(changes, ChangeScope.NODE)

    assert excinfo.value.problems == ["change #1: delete change needs 'node_id'"]


def test_validate_changes_accepts_empty_batch() -> None:
    validate_changes([], ChangeScope.FILE)
