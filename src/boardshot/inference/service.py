"""Board-image move inference backed by a Gemini multimodal model."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import TYPE_CHECKING, Any, Protocol

from google import genai
from google.genai import types
from pydantic import ValidationError

from boardshot.core.moves import MoveResult
from boardshot.core.wire import DEFAULT_MIME_TYPE, MoveResultPayload
from boardshot.inference.config import DEFAULT_MODEL
from boardshot.inference.fences import strip_code_fences
from boardshot.inference.prompt import MOVES_PROMPT

if TYPE_CHECKING:
    from boardshot.inference.config import ServerSettings

_log = logging.getLogger(__name__)

PARSE_FAILURE_MESSAGE = "Failed to parse AI response as JSON."

SAFETY_SETTINGS = (
    types.SafetySetting(
        category=types.HarmCategory.HARM_CATEGORY_HARASSMENT,
        threshold=types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    ),
)


class InferenceError(Exception):
    """Base class for move inference failures."""


class InvalidImageError(InferenceError):
    """The image payload was rejected before reaching the model."""


class ModelCallError(InferenceError):
    """The model call itself failed (transport, quota, provider error)."""


class ResponseParseError(InferenceError):
    """The model answered, but not with a valid move-result object."""

    def __init__(self, message: str = PARSE_FAILURE_MESSAGE) -> None:
        super().__init__(message)


class GenerativeModels(Protocol):
    """The slice of ``genai.Client().models`` used by the service."""

    def generate_content(self, *, model: str, contents: Any, config: Any) -> Any: ...


class MoveInferenceService:
    """Asks a multimodal model for the best move of each side.

    Stateless apart from its client handle, so one instance may serve any
    number of concurrent requests.
    """

    __slots__ = ("_models", "_model_name")

    def __init__(self, models: GenerativeModels, *, model_name: str = DEFAULT_MODEL) -> None:
        self._models = models
        self._model_name = model_name

    @classmethod
    def from_settings(cls, settings: ServerSettings) -> MoveInferenceService:
        client = genai.Client(api_key=settings.api_key)
        return cls(client.models, model_name=settings.model)

    @property
    def model_name(self) -> str:
        return self._model_name

    def infer(
        self,
        image_base64: str,
        mime_type: str = DEFAULT_MIME_TYPE,
    ) -> MoveResult:
        """Return the suggested moves for the board in *image_base64*.

        Raises:
            InvalidImageError: empty payload, non-image type, or bad base64.
            ModelCallError: the model could not be reached or errored.
            ResponseParseError: the answer was not a valid move result.
        """
        image_bytes = _decode_image(image_base64, mime_type)
        image_part = types.Part.from_bytes(data=image_bytes, mime_type=mime_type)

        _log.info(
            "Requesting moves model=%s mime=%s bytes=%d",
            self._model_name,
            mime_type,
            len(image_bytes),
        )
        try:
            response = self._models.generate_content(
                model=self._model_name,
                contents=[MOVES_PROMPT, image_part],
                config=types.GenerateContentConfig(
                    safety_settings=list(SAFETY_SETTINGS),
                ),
            )
        except Exception as exc:
            _log.exception("Model call failed model=%s", self._model_name)
            raise ModelCallError(str(exc) or type(exc).__name__) from exc

        return parse_move_result(_response_text(response))


def parse_move_result(response_text: str | None) -> MoveResult:
    """Strip fences from *response_text*, parse it, and validate the shape."""
    if not response_text:
        # Safety blocks and refusals come back without text.
        _log.warning("Model returned no text")
        raise ResponseParseError

    cleaned = strip_code_fences(response_text)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        _log.warning("Model answer is not JSON: %.200r", response_text)
        raise ResponseParseError from exc

    try:
        payload = MoveResultPayload.model_validate(parsed)
    except ValidationError as exc:
        _log.warning(
            "Model answer failed schema validation (%d errors): %.200r",
            exc.error_count(),
            response_text,
        )
        raise ResponseParseError from exc

    return payload.to_result()


def _decode_image(image_base64: str, mime_type: str) -> bytes:
    if not image_base64:
        raise InvalidImageError("Image payload is empty")
    if not mime_type.startswith("image/"):
        raise InvalidImageError(f"Unsupported content type: {mime_type}")
    try:
        image_bytes = base64.b64decode(image_base64, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidImageError("Image payload is not valid base64") from exc
    if not image_bytes:
        raise InvalidImageError("Image payload is empty")
    return image_bytes


def _response_text(response: Any) -> str | None:
    # ``response.text`` raises on some blocked candidates in older SDKs.
    try:
        return response.text
    except ValueError:
        return None
