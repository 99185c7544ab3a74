"""Default configuration values."""

DEFAULT_INGESTION_ENDPOINT = "https://api2.amplitude.com/2/httpapi"
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_SERVER_NAME = "amplitude-analytics"
DEFAULT_SERVER_VERSION = "1.0.0"
