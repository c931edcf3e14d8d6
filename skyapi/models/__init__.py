from .errors import BaseUrlMissingError, InvalidConfigurationError
from .exceptions import ApiError, AuthError, SkyApiError

__all__ = [
    "ApiError",
    "AuthError",
    "BaseUrlMissingError",
    "InvalidConfigurationError",
    "SkyApiError",
]
