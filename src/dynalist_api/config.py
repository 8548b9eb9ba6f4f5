"""Configuration constants for the Dynalist API client."""

import os
from collections.abc import Mapping
from pathlib import Path

from dynalist_api.errors import ConfigurationError

API_BASE_URL: str = "https://dynalist.io/api/v1/"

# Environment variable checked before the token files.
TOKEN_ENV_VAR: str = "DYNALIST_TOKEN"

# API token location. First file found is used.
API_TOKEN_FILES: list[Path] = [
    Path("~/.config/dynalist-backup-token.txt").expanduser(),
    Path("~/.config/secret/dynalist-backup-token.txt").expanduser(),
    Path(f"/run/user/{os.getuid()}/dynalist-token"),
]

# Seconds, handed to requests for both connect and read.
DEFAULT_TIMEOUT: float = 30.0

JSON_MEDIA_TYPE: str = "application/json"


def resolve_token(environ: Mapping[str, str] | None = None) -> str:
    """Find the API token in the environment or in the token files.

    Raises:
        ConfigurationError: If neither source yields a non-empty token.
    """
    env = os.environ if environ is None else environ
    token = env.get(TOKEN_ENV_VAR, "").strip()
    if token:
        return token

    for token_path in API_TOKEN_FILES:
        try:
            token = token_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            continue
        if token:
            return token

    msg = (
        f"Cannot find dynalist token: ${TOKEN_ENV_VAR} is not set "
        f"and none of {[str(p) for p in API_TOKEN_FILES]!r} exist"
    )
    raise ConfigurationError(msg)
