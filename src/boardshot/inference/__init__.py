"""Server-side move inference."""

from boardshot.inference.config import ConfigError, ServerSettings, load_settings
from boardshot.inference.fences import strip_code_fences
from boardshot.inference.service import (
    PARSE_FAILURE_MESSAGE,
    InferenceError,
    InvalidImageError,
    ModelCallError,
    MoveInferenceService,
    ResponseParseError,
    parse_move_result,
)

__all__ = [
    "PARSE_FAILURE_MESSAGE",
    "ConfigError",
    "InferenceError",
    "InvalidImageError",
    "ModelCallError",
    "MoveInferenceService",
    "ResponseParseError",
    "ServerSettings",
    "load_settings",
    "parse_move_result",
    "strip_code_fences",
]
