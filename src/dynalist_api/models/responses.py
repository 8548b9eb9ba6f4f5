"""Typed responses, one class per endpoint.

Each endpoint answers with the common ``_code``/``_msg`` envelope plus its own
payload. Payload fields are only read when the code is Ok, so a failed call
never carries stale or partial data.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar

from dynalist_api.errors import ApiError, ResponseDecodeError
from dynalist_api.models.change import Change
from dynalist_api.models.entities import File, Node
from dynalist_api.models.enums import Code, Endpoint


def _typed(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        msg = f"field {key!r} has type {type(value).__name__}, expected {kind.__name__}"
        raise TypeError(msg)
    return value


def _typed_list(data: dict[str, Any], key: str, kind: type) -> tuple[Any, ...]:
    items = _typed(data, key, list, [])
    if not all(isinstance(x, kind) for x in items):
        msg = f"field {key!r} must be a list of {kind.__name__}"
        raise TypeError(msg)
    return tuple(items)


@dataclass(frozen=True)
class Response:
    """Envelope shared by every endpoint."""

    endpoint: ClassVar[Endpoint | None] = None

    code: Code
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.code == Code.OK

    def raise_for_code(self) -> None:
        """Raise ApiError unless the code is Ok."""
        if not self.ok:
            raise ApiError(self.code, self.message)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Response":
        if not isinstance(data, dict):
            msg = f"response must be a JSON object, got {type(data).__name__}"
            raise ResponseDecodeError(msg, body=data)
        if not isinstance(data.get("_code"), str):
            raise ResponseDecodeError("response has no '_code'", body=data)

        code = Code(data["_code"])
        try:
            message = _typed(data, "_msg", str, "")
            payload = cls._decode_payload(data) if code == Code.OK else {}
        except (KeyError, TypeError, ValueError) as e:
            msg = f"malformed {cls.__name__} payload: {e}"
            raise ResponseDecodeError(msg, body=data) from e
        return cls(code=code, message=message, **payload)

    @classmethod
    def _decode_payload(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class FileListResponse(Response):
    endpoint = Endpoint.FILE_LIST

    root_file_id: str | None = None
    files: tuple[File, ...] = ()

    @classmethod
    def _decode_payload(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {
            "root_file_id": _typed(data, "root_file_id", str, None),
            "files": tuple(File.from_dict(f) for f in _typed(data, "files", list, [])),
        }

    def by_id(self) -> dict[str, File]:
        return {f.id: f for f in self.files}

    @property
    def root(self) -> File | None:
        if self.root_file_id is None:
            return None
        return self.by_id().get(self.root_file_id)


@dataclass(frozen=True)
class EditResponse(Response):
    """Result of ``file/edit`` or ``doc/edit``.

    ``results[i]`` tells whether the i-th submitted change was applied.
    """

    results: tuple[bool, ...] = ()
    new_node_ids: tuple[str, ...] = ()
    created: tuple[str, ...] = ()

    @classmethod
    def _decode_payload(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {
            "results": _typed_list(data, "results", bool),
            "new_node_ids": _typed_list(data, "new_node_ids", str),
            "created": _typed_list(data, "created", str),
        }

    def pair(self, changes: Sequence[Change]) -> list[tuple[Change, bool]]:
        """Match each submitted change with its result, in submission order."""
        if len(changes) != len(self.results):
            msg = f"{len(changes)} changes submitted but {len(self.results)} results returned"
            raise ResponseDecodeError(msg)
        return list(zip(changes, self.results, strict=True))

    @property
    def all_applied(self) -> bool:
        return self.ok and all(self.results)


@dataclass(frozen=True)
class FileEditResponse(EditResponse):
    endpoint = Endpoint.FILE_EDIT


@dataclass(frozen=True)
class DocEditResponse(EditResponse):
    endpoint = Endpoint.DOC_EDIT


@dataclass(frozen=True)
class DocumentResponse(Response):
    endpoint = Endpoint.DOC_READ

    file_id: str | None = None
    title: str = ""
    version: int | None = None
    nodes: tuple[Node, ...] = ()

    @classmethod
    def _decode_payload(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {
            "file_id": _typed(data, "file_id", str, None),
            "title": _typed(data, "title", str, ""),
            "version": _typed(data, "version", int, None),
            "nodes": tuple(Node.from_dict(n) for n in _typed(data, "nodes", list, [])),
        }

    def node(self, node_id: str) -> Node | None:
        return next((n for n in self.nodes if n.id == node_id), None)


@dataclass(frozen=True)
class VersionsResponse(Response):
    endpoint = Endpoint.DOC_CHECK_FOR_UPDATES

    versions: dict[str, int] = field(default_factory=dict)

    @classmethod
    def _decode_payload(cls, data: dict[str, Any]) -> dict[str, Any]:
        versions = _typed(data, "versions", dict, {})
        for file_id, version in versions.items():
            if not isinstance(version, int) or isinstance(version, bool):
                msg = f"version of {file_id!r} must be an integer"
                raise TypeError(msg)
        return {"versions": dict(versions)}


@dataclass(frozen=True)
class InboxResponse(Response):
    endpoint = Endpoint.INBOX_ADD

    file_id: str | None = None
    node_id: str | None = None
    index: int | None = None

    @classmethod
    def _decode_payload(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {
            "file_id": _typed(data, "file_id", str, None),
            "node_id": _typed(data, "node_id", str, None),
            "index": _typed(data, "index", int, None),
        }


RESPONSE_TYPES: dict[Endpoint, type[Response]] = {
    cls.endpoint: cls
    for cls in (
        FileListResponse,
        FileEditResponse,
        DocumentResponse,
        VersionsResponse,
        DocEditResponse,
        InboxResponse,
    )
    if cls.endpoint is not None
}


def decode_response(endpoint: Endpoint | str, data: Any) -> Response:
    """Decode a parsed JSON body into the response type of ``endpoint``."""
    return RESPONSE_TYPES[Endpoint(endpoint)].from_dict(data)
