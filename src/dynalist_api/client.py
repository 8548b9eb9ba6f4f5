"""Dynalist API client."""

import json
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar, cast

import requests
from loguru import logger

from dynalist_api.config import API_BASE_URL, DEFAULT_TIMEOUT, JSON_MEDIA_TYPE, resolve_token
from dynalist_api.errors import ConfigurationError, ResponseDecodeError, TransportError
from dynalist_api.limits import Limit, limit_for
from dynalist_api.models.change import Change, ChangeScope, validate_changes
from dynalist_api.models.enums import Endpoint
from dynalist_api.models.responses import (
    DocEditResponse,
    DocumentResponse,
    FileEditResponse,
    FileListResponse,
    InboxResponse,
    Response,
    VersionsResponse,
)
from dynalist_api.protocols import HttpResponseProtocol, SessionProtocol

R = TypeVar("R", bound=Response)


class DynalistClient:
    """Typed access to the Dynalist API.

    Every call is a single POST round trip. Response codes are returned as-is:
    a ``TooManyRequests`` or ``LockFail`` answer is a normal return value and
    the caller decides whether to back off. Only transport and decoding
    problems raise.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        session: SessionProtocol | None = None,
        base_url: str = API_BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        if token is None:
            token = resolve_token()
        token = token.strip()
        if not token:
            raise ConfigurationError("Dynalist token is empty")
        self._token = token
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.sess: SessionProtocol = session if session is not None else requests.Session()
        logger.debug("API ready: base_url {!r}, timeout {!r}", self.base_url, self.timeout)

    @property
    def token(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def list_files(self) -> FileListResponse:
        """Fetch every file and folder visible to the token."""
        return self._call(Endpoint.FILE_LIST, {}, FileListResponse)

    def edit_files(self, changes: Iterable[Change]) -> FileEditResponse:
        """Create, rename, move or delete files and folders.

        ``results`` in the response follows the order of ``changes``.
        """
        batch = list(changes)
        validate_changes(batch, ChangeScope.FILE)
        args = {"changes": [c.to_dict() for c in batch]}
        return self._call(Endpoint.FILE_EDIT, args, FileEditResponse)

    def read_document(self, file_id: str) -> DocumentResponse:
        """Fetch the title and every node of a document."""
        return self._call(Endpoint.DOC_READ, {"file_id": file_id}, DocumentResponse)

    def check_for_updates(self, file_ids: Sequence[str]) -> VersionsResponse:
        """Fetch the current version number of each document."""
        return self._call(
            Endpoint.DOC_CHECK_FOR_UPDATES, {"file_ids": list(file_ids)}, VersionsResponse
        )

    def edit_document(self, file_id: str, changes: Iterable[Change]) -> DocEditResponse:
        """Insert, edit, move or delete nodes in a document.

        ``results`` in the response follows the order of ``changes``.
        """
        batch = list(changes)
        validate_changes(batch, ChangeScope.NODE)
        args = {"file_id": file_id, "changes": [c.to_dict() for c in batch]}
        return self._call(Endpoint.DOC_EDIT, args, DocEditResponse)

    def add_to_inbox(self, change: Change) -> InboxResponse:
        """Append an item to the configured inbox location."""
        change.validate(ChangeScope.INBOX)
        return self._call(Endpoint.INBOX_ADD, change.to_dict(), InboxResponse)

    @staticmethod
    def limit(endpoint: Endpoint | str) -> Limit:
        """Advisory rate limit of ``endpoint``; not enforced by the client."""
        return limit_for(endpoint)

    def _call(self, endpoint: Endpoint, args: dict[str, Any], kind: type[R]) -> R:
        logger.debug("Making request: {!r} {}", endpoint.value, repr(args)[:32])
        data = self._post(endpoint, {"token": self._token, **args})
        response = cast(R, kind.from_dict(data))
        logger.debug("{} -> {}", endpoint.value, response.code)
        return response

    def _post(self, endpoint: Endpoint, body: dict[str, Any]) -> Any:
        """POST ``body`` to ``endpoint`` and return the parsed JSON."""
        url = self.base_url + endpoint.value
        try:
            r: HttpResponseProtocol = self.sess.post(
                url,
                data=json.dumps(body),
                headers={"Content-Type": JSON_MEDIA_TYPE, "Accept": JSON_MEDIA_TYPE},
                timeout=self.timeout,
            )
            r.raise_for_status()
        except requests.RequestException as e:
            msg = f"{endpoint.value} request failed: {e}"
            raise TransportError(msg) from e

        if not r.content:
            raise TransportError("no body in the response")

        try:
            return r.json()
        except ValueError as e:
            msg = f"{endpoint.value} returned invalid JSON: {e}"
            raise ResponseDecodeError(msg) from e
