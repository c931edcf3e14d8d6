from ._token_provider import TokenProvider
from ._utils import is_token_expired, parse_access_token, update_env_file

__all__ = [
    "TokenProvider",
    "is_token_expired",
    "parse_access_token",
    "update_env_file",
]
