"""flipt-demo items library."""

from .app import build_flag_client, build_items_resource
from .config import AppConfig, ConfigError, ConfigErrorCodes, load
from .controller import ItemsResource
from .exceptions import (
    AccessGateDenied,
    AccessGateError,
    GateEvaluationFailed,
    ItemsError,
    ItemsErrorCodes,
    NotFound,
    UnsupportedRepresentation,
    ValidationFailed,
    status_for,
)
from .gate import (
    CREATION_ENABLED,
    UPPERCASE_ITEM_NAME,
    GateOnError,
    GateSettings,
    require_enabled,
    resolve_gate,
    transform_field,
)
from .logger import configure_logging
from .models import FieldError, Item, ValidationErrors, bind_item
from .pagination import PageRequest, PageResponse
from .render import HTML, JAVASCRIPT, Renderer, Responder, Response
from .store import InMemoryItemStore, ItemStore, validate_item

__all__ = [
    "AccessGateDenied",
    "AccessGateError",
    "AppConfig",
    "CREATION_ENABLED",
    "ConfigError",
    "ConfigErrorCodes",
    "FieldError",
    "GateEvaluationFailed",
    "GateOnError",
    "GateSettings",
    "HTML",
    "InMemoryItemStore",
    "Item",
    "ItemStore",
    "ItemsError",
    "ItemsErrorCodes",
    "ItemsResource",
    "JAVASCRIPT",
    "NotFound",
    "PageRequest",
    "PageResponse",
    "Renderer",
    "Responder",
    "Response",
    "UPPERCASE_ITEM_NAME",
    "UnsupportedRepresentation",
    "ValidationErrors",
    "ValidationFailed",
    "bind_item",
    "build_flag_client",
    "build_items_resource",
    "configure_logging",
    "load",
    "require_enabled",
    "resolve_gate",
    "status_for",
    "transform_field",
    "validate_item",
]
