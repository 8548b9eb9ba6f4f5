"""Wire-level data model: enums, entities, changes and responses."""

from dynalist_api.models.change import Change, ChangeScope, new_change
from dynalist_api.models.entities import File, Node
from dynalist_api.models.enums import Action, Code, Endpoint, FileType, Permission
from dynalist_api.models.responses import (
    DocEditResponse,
    DocumentResponse,
    EditResponse,
    FileEditResponse,
    FileListResponse,
    InboxResponse,
    Response,
    VersionsResponse,
    decode_response,
)

__all__ = [
    "Action",
    "Change",
    "ChangeScope",
    "Code",
    "DocEditResponse",
    "DocumentResponse",
    "EditResponse",
    "Endpoint",
    "File",
    "FileEditResponse",
    "FileListResponse",
    "FileType",
    "InboxResponse",
    "Node",
    "Permission",
    "Response",
    "VersionsResponse",
    "decode_response",
    "new_change",
]
