"""Change: one mutation sent to ``doc/edit``, ``file/edit`` or ``inbox/add``.

Every field except ``action`` is optional, and ``None`` means "not supplied".
The API treats a missing ``checked`` differently from ``checked: false``, so
``to_dict`` drops ``None`` fields but keeps falsy values.
"""

from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any

from dynalist_api.errors import ChangeError
from dynalist_api.models.enums import Action, FileType


class ChangeScope(StrEnum):
    """What a batch of changes is applied to."""

    NODE = "node"  # doc/edit
    FILE = "file"  # file/edit
    INBOX = "inbox"  # inbox/add


# Fields that only make sense inside a document outline.
_NODE_ONLY = ("node_id", "content", "note", "checked", "checkbox", "heading", "color")
# Fields that only make sense in the file tree.
_FILE_ONLY = ("file_id", "title", "type")


@dataclass
class Change:
    """A single change. Field order is the wire order."""

    action: Action
    index: int | None = None
    node_id: str | None = None
    parent_id: str | None = None
    content: str | None = None
    type: FileType | None = None
    file_id: str | None = None
    title: str | None = None
    note: str | None = None
    checked: bool | None = None
    checkbox: bool | None = None
    heading: int | None = None
    color: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Encode for the wire, omitting unset fields."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, StrEnum):
                value = value.value
            out[f.name] = value
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Change":
        unknown = set(data) - _FIELD_NAMES
        if unknown:
            raise ChangeError([f"unknown change field {name!r}" for name in sorted(unknown)])
        if "action" not in data:
            raise ChangeError(["change has no action"])
        kwargs = dict(data)
        kwargs["action"] = Action(kwargs["action"])
        if kwargs.get("type") is not None:
            kwargs["type"] = FileType(kwargs["type"])
        return cls(**kwargs)

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not None

    def problems(self, scope: ChangeScope) -> list[str]:
        """List the reasons this change is invalid for ``scope``; empty if valid."""
        if scope == ChangeScope.INBOX:
            return self._inbox_problems()

        problems: list[str] = []
        foreign = _FILE_ONLY if scope == ChangeScope.NODE else _NODE_ONLY
        for name in foreign:
            if self.is_set(name):
                problems.append(f"{name!r} cannot be used in a {scope} change")

        target = "node_id" if scope == ChangeScope.NODE else "file_id"
        editable = (
            ("content", "note", "checked", "checkbox", "heading", "color")
            if scope == ChangeScope.NODE
            else ("title",)
        )

        def need(*names: str) -> None:
            for name in names:
                if not self.is_set(name):
                    problems.append(f"{self.action} change needs {name!r}")

        if self.action == Action.INSERT:
            need("parent_id")
            if scope == ChangeScope.NODE:
                need("content")
            else:
                need("title", "type")
            if self.is_set(target):
                problems.append(f"insert change cannot name an existing {target!r}")
        elif self.action == Action.EDIT:
            need(target)
            if not any(self.is_set(name) for name in editable):
                problems.append(f"edit change needs one of {editable!r}")
        elif self.action == Action.MOVE:
            need(target, "parent_id", "index")
        elif self.action == Action.DELETE:
            need(target)
            for name in ("index", "parent_id", *editable):
                if self.is_set(name):
                    problems.append(f"delete change cannot carry {name!r}")
        else:
            problems.append(f"unknown action {self.action.value!r}")
        return problems

    def _inbox_problems(self) -> list[str]:
        problems = []
        if not self.is_set("content"):
            problems.append("inbox item needs 'content'")
        for name in ("node_id", "parent_id", "file_id", "title", "type"):
            if self.is_set(name):
                problems.append(f"{name!r} cannot be used in an inbox item")
        return problems

    def validate(self, scope: ChangeScope) -> "Change":
        """Raise ChangeError if this change is invalid for ``scope``."""
        problems = self.problems(scope)
        if problems:
            raise ChangeError(problems)
        return self


_FIELD_NAMES = frozenset(f.name for f in fields(Change))


def new_change(action: Action | str, **values: Any) -> Change:
    """Create a change with ``action`` and only the given fields set."""
    unknown = set(values) - (_FIELD_NAMES - {"action"})
    if unknown:
        raise ChangeError([f"unknown change field {name!r}" for name in sorted(unknown)])
    if values.get("type") is not None:
        values["type"] = FileType(values["type"])
    return Change(action=Action(action), **values)


def validate_changes(changes: list[Change], scope: ChangeScope) -> None:
    """Validate a batch, reporting every bad change by position."""
    problems: list[str] = []
    for i, change in enumerate(changes):
        problems.extend(f"change #{i}: {p}" for p in change.problems(scope))
    if problems:
        raise ChangeError(problems)


# --- Outline (doc/edit) changes ---


def insert_node(
    parent_id: str,
    content: str,
    *,
    index: int | None = None,
    note: str | None = None,
    checked: bool | None = None,
    checkbox: bool | None = None,
    heading: int | None = None,
    color: int | None = None,
) -> Change:
    """Insert a node under ``parent_id``. Without ``index`` it is appended."""
    return Change(
        action=Action.INSERT,
        parent_id=parent_id,
        content=content,
        index=index,
        note=note,
        checked=checked,
        checkbox=checkbox,
        heading=heading,
        color=color,
    ).validate(ChangeScope.NODE)


def edit_node(
    node_id: str,
    *,
    content: str | None = None,
    note: str | None = None,
    checked: bool | None = None,
    checkbox: bool | None = None,
    heading: int | None = None,
    color: int | None = None,
) -> Change:
    return Change(
        action=Action.EDIT,
        node_id=node_id,
        content=content,
        note=note,
        checked=checked,
        checkbox=checkbox,
        heading=heading,
        color=color,
    ).validate(ChangeScope.NODE)


def move_node(node_id: str, parent_id: str, index: int) -> Change:
    return Change(
        action=Action.MOVE, node_id=node_id, parent_id=parent_id, index=index
    ).validate(ChangeScope.NODE)


def delete_node(node_id: str) -> Change:
    return Change(action=Action.DELETE, node_id=node_id).validate(ChangeScope.NODE)


# --- File tree (file/edit) changes ---


def insert_file(
    parent_id: str,
    title: str,
    type: FileType = FileType.DOCUMENT,
    *,
    index: int | None = None,
) -> Change:
    """Create a document or folder inside folder ``parent_id``."""
    return Change(
        action=Action.INSERT, parent_id=parent_id, title=title, type=type, index=index
    ).validate(ChangeScope.FILE)


def edit_file(file_id: str, title: str, *, type: FileType | None = None) -> Change:
    return Change(action=Action.EDIT, file_id=file_id, title=title, type=type).validate(
        ChangeScope.FILE
    )


def move_file(
    file_id: str, parent_id: str, index: int, *, type: FileType | None = None
) -> Change:
    return Change(
        action=Action.MOVE, file_id=file_id, parent_id=parent_id, index=index, type=type
    ).validate(ChangeScope.FILE)


def delete_file(file_id: str, *, type: FileType | None = None) -> Change:
    return Change(action=Action.DELETE, file_id=file_id, type=type).validate(ChangeScope.FILE)


# --- Inbox ---


def inbox_item(
    content: str,
    *,
    note: str | None = None,
    index: int | None = None,
    checked: bool | None = None,
    checkbox: bool | None = None,
    heading: int | None = None,
    color: int | None = None,
) -> Change:
    """Build an item for ``inbox/add``; ``index`` of None appends."""
    return Change(
        action=Action.INSERT,
        content=content,
        note=note,
        index=index,
        checked=checked,
        checkbox=checkbox,
        heading=heading,
        color=color,
    ).validate(ChangeScope.INBOX)
