# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    NO_FILES = ErrorInfo("No files provided", status.HTTP_400_BAD_REQUEST)
    FILE_TOO_LARGE = ErrorInfo(
        "File too large", status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    )
    ANALYSIS_FAILED = ErrorInfo(
        "Analysis failed", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
