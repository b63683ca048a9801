"""flipt-demo featureflag library."""

from .client import FlagClient
from .exceptions import (
    EvaluationRejected,
    EvaluationUnavailable,
    FlagClientError,
    FlagClientErrorCodes,
    InvalidFlagValue,
)
from .http_client import HttpFlagClient
from .identity import new_entity_id
from .memory import InMemoryFlagClient
from .models import EvaluationRequest, EvaluationResponse, FlagClientConfig
from .parse import parse_bool

__all__ = [
    "EvaluationRejected",
    "EvaluationRequest",
    "EvaluationResponse",
    "EvaluationUnavailable",
    "FlagClient",
    "FlagClientConfig",
    "FlagClientError",
    "FlagClientErrorCodes",
    "HttpFlagClient",
    "InMemoryFlagClient",
    "InvalidFlagValue",
    "new_entity_id",
    "parse_bool",
]
