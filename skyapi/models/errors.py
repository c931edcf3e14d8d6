class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message=(
            "SkyAPI base URL is not configured. "
            "Set SKYAPI_ORIGIN or SKYAPI_DOMAIN."
        ),
    ):
        self.message = message
        super().__init__(self.message)


class InvalidConfigurationError(Exception):
    def __init__(self, message="Invalid SkyAPI configuration."):
        self.message = message
        super().__init__(self.message)
