"""Enumerations used on the Dynalist wire.

The API may grow new codes and actions, so every enum here is open: an
unknown value decodes to a pseudo-member that keeps the raw value and
reports ``known`` as False instead of raising.
"""

from enum import IntEnum, StrEnum
from typing import Any

_UNKNOWN = "UNKNOWN"


def _unknown_member(cls: Any, base: type, value: Any) -> Any:
    member = base.__new__(cls, value)
    member._name_ = _UNKNOWN
    member._value_ = value
    return member


class Action(StrEnum):
    """Kind of mutation carried by a change."""

    INSERT = "insert"
    EDIT = "edit"
    MOVE = "move"
    DELETE = "delete"

    @classmethod
    def _missing_(cls, value: object) -> "Action | None":
        if isinstance(value, str):
            return _unknown_member(cls, str, value)  # type: ignore[no-any-return]
        return None

    @property
    def known(self) -> bool:
        return self._name_ != _UNKNOWN


class FileType(StrEnum):
    """Entry type in the file tree."""

    DOCUMENT = "document"
    FOLDER = "folder"

    @classmethod
    def _missing_(cls, value: object) -> "FileType | None":
        if isinstance(value, str):
            return _unknown_member(cls, str, value)  # type: ignore[no-any-return]
        return None

    @property
    def known(self) -> bool:
        return self._name_ != _UNKNOWN


_CODE_DESCRIPTIONS = {
    "Ok": "Request succeeded.",
    "Invalid": "Your request is not valid JSON.",
    "TooManyRequests": "You've hit the limit on how many requests you can send.",
    "InvalidToken": "Your secret token is invalid.",
    "LockFail": "Server unable to handle the request.",
    "Unauthorized": "You don't have permission to access this document.",
    "NotFound": "The document you're requesting is not found.",
    "NodeNotFound": "The node (item) you're requesting is not found.",
    "NoInbox": "Inbox location is not configured, or invalid.",
}


class Code(StrEnum):
    """Status code in the ``_code`` field of every response."""

    OK = "Ok"
    INVALID = "Invalid"
    TOO_MANY_REQUESTS = "TooManyRequests"
    INVALID_TOKEN = "InvalidToken"
    LOCK_FAIL = "LockFail"
    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "NotFound"
    NODE_NOT_FOUND = "NodeNotFound"
    NO_INBOX = "NoInbox"

    @classmethod
    def _missing_(cls, value: object) -> "Code | None":
        if isinstance(value, str):
            return _unknown_member(cls, str, value)  # type: ignore[no-any-return]
        return None

    @property
    def known(self) -> bool:
        return self._name_ != _UNKNOWN

    @property
    def description(self) -> str:
        return _CODE_DESCRIPTIONS.get(self.value, f"Unknown response code {self.value!r}.")


class Permission(IntEnum):
    """Access level on a file, ordered from none to owner."""

    NO_ACCESS = 0
    READ_ONLY = 1
    EDIT_RIGHTS = 2
    MANAGE = 3
    OWNER = 4

    @classmethod
    def _missing_(cls, value: object) -> "Permission | None":
        if isinstance(value, int) and not isinstance(value, bool):
            return _unknown_member(cls, int, value)  # type: ignore[no-any-return]
        return None

    @property
    def known(self) -> bool:
        return self._name_ != _UNKNOWN

    def can_read(self) -> bool:
        return self >= Permission.READ_ONLY

    def can_edit(self) -> bool:
        return self >= Permission.EDIT_RIGHTS

    def can_manage(self) -> bool:
        return self >= Permission.MANAGE


class Endpoint(StrEnum):
    """Path of each API operation, relative to the base URL."""

    FILE_LIST = "file/list"
    FILE_EDIT = "file/edit"
    DOC_READ = "doc/read"
    DOC_CHECK_FOR_UPDATES = "doc/check_for_updates"
    DOC_EDIT = "doc/edit"
    INBOX_ADD = "inbox/add"
