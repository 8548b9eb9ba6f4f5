"""Advisory rate limits published for each endpoint.

Nothing here blocks or counts requests. A caller-side throttler reads these
descriptors and decides when to send.
"""

from dataclasses import dataclass

from dynalist_api.models.enums import Endpoint


@dataclass(frozen=True)
class Limit:
    """Sustained rate of one request per ``interval`` seconds, with ``burst`` allowance."""

    interval: float
    burst: int

    @property
    def per_minute(self) -> float:
        return 60.0 / self.interval

    @property
    def per_second(self) -> float:
        return 1.0 / self.interval


_LIMITS: dict[Endpoint, Limit] = {
    Endpoint.FILE_LIST: Limit(interval=10.0, burst=10),
    Endpoint.FILE_EDIT: Limit(interval=1.0, burst=50),
    Endpoint.DOC_READ: Limit(interval=1.0, burst=50),
    Endpoint.DOC_CHECK_FOR_UPDATES: Limit(interval=1.0, burst=50),
    Endpoint.DOC_EDIT: Limit(interval=1.0, burst=20),
    Endpoint.INBOX_ADD: Limit(interval=10.0, burst=10),
}

# Applies to the total number of changes sent across file/edit and doc/edit.
_CHANGE_LIMIT = Limit(interval=0.25, burst=500)


def limit_for(endpoint: Endpoint | str) -> Limit:
    """Return the limit of ``endpoint`` (an Endpoint or its path)."""
    return _LIMITS[Endpoint(endpoint)]


def change_limit() -> Limit:
    return _CHANGE_LIMIT


def limit_file_list() -> Limit:
    return _LIMITS[Endpoint.FILE_LIST]


def limit_file_edit() -> Limit:
    return _LIMITS[Endpoint.FILE_EDIT]


def limit_doc_read() -> Limit:
    return _LIMITS[Endpoint.DOC_READ]


def limit_check_for_updates() -> Limit:
    return _LIMITS[Endpoint.DOC_CHECK_FOR_UPDATES]


def limit_doc_edit() -> Limit:
    return _LIMITS[Endpoint.DOC_EDIT]


def limit_inbox_add() -> Limit:
    return _LIMITS[Endpoint.INBOX_ADD]


def all_limits() -> dict[str, Limit]:
    """All limits keyed by endpoint path, plus ``"changes"``."""
    table = {str(endpoint): limit for endpoint, limit in _LIMITS.items()}
    table["changes"] = _CHANGE_LIMIT
    return table
