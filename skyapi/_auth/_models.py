from typing import TypedDict


class TokenRequest(TypedDict):
    """TypedDict for the client credentials grant request body."""

    grant_type: str
    client_id: str
    client_secret: str
    audience: str


class TokenData(TypedDict, total=False):
    """TypedDict for the token endpoint response."""

    access_token: str
    token_type: str
    expires_in: int
    scope: str


class AccessTokenData(TypedDict, total=False):
    """TypedDict for the decoded access token payload."""

    iss: str
    sub: str
    aud: str
    exp: float
    iat: float
