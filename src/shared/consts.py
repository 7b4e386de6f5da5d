from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 100

REQUEST_ID_HEADER = "X-Request-ID"
ERROR_CODE_HEADER = "X-Error-Code"
