from typing import Optional

from pydantic import BaseModel, ConfigDict

from ._utils.constants import DEFAULT_API_VERSION, DEFAULT_RETRIES, DEFAULT_TIMEOUT


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    env: Optional[str] = None
    origin: Optional[str] = None
    domain: Optional[str] = None
    tenant: Optional[str] = None
    key: Optional[str] = None
    secret: Optional[str] = None
    audience: Optional[str] = None
    token: Optional[str] = None
    version: int = DEFAULT_API_VERSION
    retries: int = DEFAULT_RETRIES
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        if self.origin:
            return self.origin.rstrip("/")
        return f"https://{self.domain}"

    @property
    def token_base_url(self) -> Optional[str]:
        if self.origin:
            return self.origin.rstrip("/")
        if self.tenant:
            return f"https://{self.tenant}"
        if self.domain:
            return f"https://{self.domain}"
        return None

    @property
    def has_credentials(self) -> bool:
        return bool(self.key and self.secret)
