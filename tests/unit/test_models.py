"""Tests for File and Node entities."""

import pytest

from dynalist_api.models.entities import File, Node, build_index, walk_tree
from dynalist_api.models.enums import FileType, Permission
from tests.unit.payloads import DOCUMENT, FILE_LIST


def test_file_from_dict() -> None:
    folder = File.from_dict(FILE_LIST["files"][0])

    assert folder.id == "folder1"
    assert folder.type is FileType.FOLDER
    assert folder.is_folder
    assert folder.permission is Permission.OWNER
    assert folder.collapsed is False
    assert folder.children == ("doc1", "folder2")


def test_file_defaults_when_fields_absent() -> None:
    doc = File.from_dict({"id": "d", "title": "T", "type": "document"})

    assert doc.is_document
    assert doc.permission is Permission.NO_ACCESS
    assert doc.collapsed is None
    assert doc.children == ()


def test_document_with_children_is_rejected() -> None:
    with pytest.raises(ValueError, match="cannot have children"):
        File(id="d", title="T", type=FileType.DOCUMENT, children=("x",))


def test_file_is_frozen() -> None:
    f = File(id="d", title="T", type=FileType.DOCUMENT)
    with pytest.raises(AttributeError):
        f.title = "changed"  # type: ignore[misc]


def test_file_to_dict_omits_absent_fields() -> None:
    f = File(id="d", title="T", type=FileType.DOCUMENT, permission=Permission.READ_ONLY)

    assert f.to_dict() == {"id": "d", "title": "T", "type": "document", "permission": 1}


def test_node_minimal_has_absent_optionals() -> None:
    node = Node.from_dict({"id": "n1", "content": "hi"})

    assert node == Node(id="n1", content="hi")
    assert node.note is None
    assert node.checked is None
    assert node.collapsed is None
    assert node.parent is None
    assert node.children == ()


def test_node_from_dict_full() -> None:
    node = Node.from_dict(DOCUMENT["nodes"][1])

    assert node.note == "2 litres"
    assert node.checked is True
    assert node.checkbox is True
    assert node.parent == "root"
    assert node.children == ("n1a",)
    assert node.created == 1001


def test_node_rejects_wrong_field_type() -> None:
    with pytest.raises(TypeError, match="checked"):
        Node.from_dict({"id": "n1", "checked": "yes"})


def test_node_to_dict_keeps_explicit_false() -> None:
    node = Node(id="n1", content="", checked=False)

    assert node.to_dict() == {"id": "n1", "content": "", "checked": False}


def test_walk_tree_is_preorder_with_depth() -> None:
    nodes = [Node.from_dict(n) for n in DOCUMENT["nodes"]]

    walked = [(depth, node.id) for depth, node in walk_tree(nodes)]

    assert walked == [(0, "root"), (1, "n1"), (2, "n1a"), (1, "n2")]


def test_walk_tree_skips_missing_children() -> None:
    nodes = [Node(id="root", children=("gone", "a")), Node(id="a")]

    assert [n.id for _, n in walk_tree(nodes)] == ["root", "a"]


def test_walk_tree_without_root_yields_nothing() -> None:
    assert list(walk_tree([Node(id="a")])) == []


def test_build_index() -> None:
    nodes = [Node(id="a"), Node(id="b")]

    assert set(build_index(nodes)) == {"a", "b"}


def test_walk_tree_stops_on_cycles() -> None:
    nodes = [
        Node(id="root", children=("a",)),
        Node(id="a", children=("b", "root")),
        Node(id="b", children=("a", "b")),
    ]

    walked = [(depth, n.id) for depth, n in walk_tree(nodes)]

    assert walked == [(0, "root"), (1, "a"), (2, "b")]


def test_walk_tree_over_files() -> None:
    files = [File.from_dict(f) for f in FILE_LIST["files"]]

    walked = [(depth, f.id) for depth, f in walk_tree(files, "folder1")]

    assert walked == [(0, "folder1"), (1, "doc1"), (1, "folder2"), (2, "doc2")]
