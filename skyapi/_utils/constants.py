# Environment variables
ENV_ENV = "SKYAPI_ENV"
ENV_ORIGIN = "SKYAPI_ORIGIN"
ENV_DOMAIN = "SKYAPI_DOMAIN"
ENV_TENANT = "SKYAPI_TENANT"
ENV_KEY = "SKYAPI_KEY"
ENV_SECRET = "SKYAPI_SECRET"
ENV_AUDIENCE = "SKYAPI_AUDIENCE"
ENV_TOKEN = "SKYAPI_TOKEN"
ENV_VERSION = "SKYAPI_VERSION"
ENV_RETRIES = "SKYAPI_RETRIES"
ENV_LOG_FORMAT = "SKYAPI_LOG_FORMAT"
ENV_DISABLE_SSL_VERIFY = "SKYAPI_DISABLE_SSL_VERIFY"
ENV_DEBUG = "DEBUG"

# Headers
HEADER_ENV = "x-dh-env"
HEADER_AUTHORIZATION = "authorization"
HEADER_CONTENT_TYPE = "content-type"
HEADER_USER_AGENT = "user-agent"

# Content types
CONTENT_TYPE_JSON = "application/json"

# OAuth
TOKEN_PATH = "/v1/oauth/token"
GRANT_TYPE_CLIENT_CREDENTIALS = "client_credentials"

# Logging
LOGGER_NAME = "skyapi"
DEBUG_NAMESPACE = "skyapi"
TRACE_TYPE = "skyapi"

DEFAULT_API_VERSION = 2
DEFAULT_RETRIES = 3
DEFAULT_TIMEOUT = 30.0
