"""Protocols for dependency injection in the client and the CLI."""

from collections.abc import Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from dynalist_api.models.change import Change
from dynalist_api.models.responses import (
    DocEditResponse,
    DocumentResponse,
    FileEditResponse,
    FileListResponse,
    InboxResponse,
    VersionsResponse,
)


@runtime_checkable
class HttpResponseProtocol(Protocol):
    """The parts of ``requests.Response`` the client reads."""

    status_code: int
    content: bytes

    def raise_for_status(self) -> None:
        """Raise if the status indicates an HTTP error."""
        ...

    def json(self, **kwargs: Any) -> Any:
        """Parse the body as JSON."""
        ...


@runtime_checkable
class SessionProtocol(Protocol):
    """HTTP transport used by the client, normally a ``requests.Session``."""

    def post(self, url: str, data: Any = None, **kwargs: Any) -> Any:
        """Send a POST request."""
        ...


@runtime_checkable
class ClientProtocol(Protocol):
    """Protocol for Dynalist API clients."""

    def list_files(self) -> FileListResponse:
        """Fetch the file tree."""
        ...

    def edit_files(self, changes: Iterable[Change]) -> FileEditResponse:
        """Apply changes to the file tree."""
        ...

    def read_document(self, file_id: str) -> DocumentResponse:
        """Fetch one document's outline."""
        ...

    def check_for_updates(self, file_ids: Sequence[str]) -> VersionsResponse:
        """Fetch the current version of each document."""
        ...

    def edit_document(self, file_id: str, changes: Iterable[Change]) -> DocEditResponse:
        """Apply changes to a document outline."""
        ...

    def add_to_inbox(self, change: Change) -> InboxResponse:
        """Append an item to the inbox."""
        ...
