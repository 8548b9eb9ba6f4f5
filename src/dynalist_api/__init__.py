"""Client for the Dynalist API."""

from loguru import logger

from dynalist_api.client import DynalistClient
from dynalist_api.errors import (
    ApiError,
    ChangeError,
    ConfigurationError,
    DynalistError,
    ResponseDecodeError,
    TransportError,
)
from dynalist_api.limits import Limit, change_limit, limit_for
from dynalist_api.models import (
    Action,
    Change,
    ChangeScope,
    Code,
    Endpoint,
    File,
    FileType,
    Node,
    Permission,
    new_change,
)
from dynalist_api.protocols import ClientProtocol, SessionProtocol

# Silent unless the application opts in (see logging_config.configure_logging).
logger.disable("dynalist_api")

__all__ = [
    "Action",
    "ApiError",
    "Change",
    "ChangeError",
    "ChangeScope",
    "ClientProtocol",
    "Code",
    "ConfigurationError",
    "DynalistClient",
    "DynalistError",
    "Endpoint",
    "File",
    "FileType",
    "Limit",
    "Node",
    "Permission",
    "ResponseDecodeError",
    "SessionProtocol",
    "TransportError",
    "change_limit",
    "limit_for",
    "new_change",
]
