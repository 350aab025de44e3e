import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_UNIT = "MB"
TOKEN_ENV_VAR = "GITHUB_TOKEN"


@dataclass(frozen=True)
class Config:
    """Settings for one invocation, built from the command line."""
    repositories: Tuple[str, ...]
    token: Optional[str] = None
    unit: str = DEFAULT_UNIT
    verbose: bool = False
    json_output: bool = False
    api_url: str = DEFAULT_API_URL
    full_size: bool = False
    debug: bool = False


def resolve_token(token: Optional[str] = None) -> Optional[str]:
    """Return the explicit token, or fall back to GITHUB_TOKEN (a .env file is honoured)."""
    if token:
        return token
    load_dotenv()
    return os.getenv(TOKEN_ENV_VAR) or None
