"""File-tree and outline entities returned by the API."""

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from dynalist_api.models.enums import FileType, Permission


def _optional(data: dict[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    """Return ``data[key]`` if present, checking its type. Absent or null gives None."""
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        msg = f"field {key!r} has type {type(value).__name__}, expected {kind}"
        raise TypeError(msg)
    return value


def _id_list(data: dict[str, Any], key: str) -> tuple[str, ...]:
    raw = _optional(data, key, list) or []
    if not all(isinstance(x, str) for x in raw):
        msg = f"field {key!r} must be a list of ids"
        raise TypeError(msg)
    return tuple(raw)


def _sparse(pairs: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    return {k: v for k, v in pairs if v is not None}


@dataclass(frozen=True)
class File:
    """An entry in the file tree: a document or a folder."""

    id: str
    title: str
    type: FileType
    permission: Permission = Permission.NO_ACCESS
    collapsed: bool | None = None
    children: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.type == FileType.DOCUMENT and self.children:
            msg = f"document {self.id!r} cannot have children"
            raise ValueError(msg)

    @property
    def is_folder(self) -> bool:
        return self.type == FileType.FOLDER

    @property
    def is_document(self) -> bool:
        return self.type == FileType.DOCUMENT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "File":
        permission = _optional(data, "permission", int)
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            type=FileType(data["type"]),
            permission=Permission(permission) if permission is not None else Permission.NO_ACCESS,
            collapsed=_optional(data, "collapsed", bool),
            children=_id_list(data, "children"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _sparse(
            [
                ("id", self.id),
                ("title", self.title),
                ("type", self.type.value),
                ("permission", int(self.permission)),
                ("collapsed", self.collapsed),
                ("children", list(self.children) or None),
            ]
        )


@dataclass(frozen=True)
class Node:
    """A single item in a document outline.

    ``parent`` is a back-reference; ownership goes through ``children``,
    whose order is the display order.
    """

    id: str
    content: str = ""
    note: str | None = None
    checked: bool | None = None
    checkbox: bool | None = None
    heading: int | None = None
    color: int | None = None
    collapsed: bool | None = None
    parent: str | None = None
    created: int | None = None
    modified: int | None = None
    children: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Node":
        return cls(
            id=data["id"],
            content=_optional(data, "content", str) or "",
            note=_optional(data, "note", str),
            checked=_optional(data, "checked", bool),
            checkbox=_optional(data, "checkbox", bool),
            heading=_optional(data, "heading", int),
            color=_optional(data, "color", int),
            collapsed=_optional(data, "collapsed", bool),
            parent=_optional(data, "parent", str),
            created=_optional(data, "created", int),
            modified=_optional(data, "modified", int),
            children=_id_list(data, "children"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _sparse(
            [
                ("id", self.id),
                ("content", self.content),
                ("note", self.note),
                ("checked", self.checked),
                ("checkbox", self.checkbox),
                ("heading", self.heading),
                ("color", self.color),
                ("collapsed", self.collapsed),
                ("parent", self.parent),
                ("created", self.created),
                ("modified", self.modified),
                ("children", list(self.children) or None),
            ]
        )


class TreeItem(Protocol):
    """Anything linked to its children by id: a File or a Node."""

    @property
    def id(self) -> str: ...

    @property
    def children(self) -> tuple[str, ...]: ...


T = TypeVar("T", bound=TreeItem)


def build_index(items: Iterable[T]) -> dict[str, T]:
    """Map id to item."""
    return {item.id: item for item in items}


def walk_tree(items: Iterable[T], root_id: str = "root") -> Iterator[tuple[int, T]]:
    """Yield ``(depth, item)`` in display order, starting at ``root_id``.

    Ids referenced in ``children`` but missing from ``items`` are skipped, and
    each id is visited once even if ``children`` links form a cycle.
    """
    index = build_index(items)
    if root_id not in index:
        return
    seen: set[str] = set()
    # Pre-order, same order as shown in UI
    todo: deque[tuple[int, str]] = deque([(0, root_id)])
    while todo:
        depth, item_id = todo.popleft()
        item = index.get(item_id)
        if item is None or item_id in seen:
            continue
        seen.add(item_id)
        yield depth, item
        todo.extendleft((depth + 1, cid) for cid in reversed(item.children))
