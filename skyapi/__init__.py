"""SkyAPI SDK for Python.

This package provides a Python interface to the SkyAPI drone data platform:
datasets, processing jobs, measurements, exports and the services around them.


The main entry point is the SkyApi class, which provides access to all SDK functionality.

Example:
```python
    # First set these environment variables:
    # export SKYAPI_DOMAIN="api.example.com"
    # export SKYAPI_TENANT="auth.example.com"
    # export SKYAPI_KEY="your-client-id"
    # export SKYAPI_SECRET="your-client-secret"

    from skyapi import SkyApi
    sdk = SkyApi()
    # Retrieve a processing job
    sdk.processes.retrieve("b7f1c2d4-2f0e-4e8b-a0c1-7d2d1f0e9a33")
```
"""

from ._skyapi import SkyApi
from .models import (
    ApiError,
    AuthError,
    BaseUrlMissingError,
    InvalidConfigurationError,
    SkyApiError,
)

__all__ = [
    "SkyApi",
    "ApiError",
    "AuthError",
    "BaseUrlMissingError",
    "InvalidConfigurationError",
    "SkyApiError",
]
