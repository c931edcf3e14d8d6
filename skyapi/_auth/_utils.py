import base64
import binascii
import json
import time
from pathlib import Path
from typing import Optional

from ..models.exceptions import AuthError
from ._models import AccessTokenData


def parse_access_token(access_token: str) -> AccessTokenData:
    """Decodes the payload of a JWT access token without verifying it.

    Raises:
        AuthError: If the token is not a well-formed JWT.
    """
    token_parts = access_token.split(".")
    if len(token_parts) != 3:
        raise AuthError("Invalid access token: expected three segments")
    try:
        payload = base64.urlsafe_b64decode(
            token_parts[1] + "=" * (-len(token_parts[1]) % 4)
        )
        claims = json.loads(payload)
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise AuthError(f"Invalid access token: {e}") from e

    if not isinstance(claims, dict):
        raise AuthError("Invalid access token: payload is not an object")

    return claims  # type: ignore[return-value]


def token_expiry(access_token: str) -> Optional[float]:
    """Returns the `exp` claim of the token in seconds since epoch, if any."""
    exp = parse_access_token(access_token).get("exp")
    if exp is None:
        return None
    try:
        return float(exp)
    except (TypeError, ValueError) as e:
        raise AuthError(f"Invalid access token: bad exp claim {exp!r}") from e


def is_token_expired(access_token: str) -> bool:
    exp = token_expiry(access_token)
    if exp is None:
        return False
    return time.time() * 1000 >= exp * 1000


def update_env_file(env_contents: dict[str, str], env_path: Optional[Path] = None):
    env_path = env_path or Path.cwd() / ".env"
    if env_path.exists():
        with open(env_path, "r") as f:
            for line in f:
                if "=" in line:
                    key, value = line.strip().split("=", 1)
                    if key not in env_contents:
                        env_contents[key] = value
    lines = [f"{key}={value}\n" for key, value in env_contents.items()]
    with open(env_path, "w") as f:
        f.writelines(lines)
