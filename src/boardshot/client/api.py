"""HTTP client for the Boardshot move API."""

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from boardshot.core.moves import MoveResult
from boardshot.core.wire import DEFAULT_MIME_TYPE, MoveResultPayload, MovesRequest

_LOGGER = logging.getLogger(__name__)

MOVES_PATH = "/api/moves"
DEFAULT_TIMEOUT_S = 60.0


class MovesApiError(Exception):
    """Raised for any failed move request (transport, HTTP status, body)."""


class MovesApiClient:
    """Posts board images to the move API and returns parsed results."""

    __slots__ = ("_base_url", "_timeout_s", "_session")

    def __init__(
        self,
        base_url: str,
        *,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}{MOVES_PATH}"

    def fetch_moves(
        self,
        image_base64: str,
        mime_type: str = DEFAULT_MIME_TYPE,
    ) -> MoveResult:
        """Request moves for one encoded image; raises :class:`MovesApiError`."""
        body = MovesRequest.model_validate(
            {"imageBase64": image_base64, "mimeType": mime_type}
        )
        try:
            resp = self._session.post(
                self.endpoint,
                json=body.model_dump(by_alias=True),
                timeout=self._timeout_s,
            )
        except requests.Timeout as exc:
            raise MovesApiError(
                f"Request timed out after {self._timeout_s:g} s"
            ) from exc
        except requests.RequestException as exc:
            raise MovesApiError(f"Could not reach server: {exc}") from exc

        if not resp.ok:
            raise MovesApiError(_error_detail(resp))

        try:
            payload = MoveResultPayload.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            _LOGGER.warning("Malformed response body from %s", self.endpoint)
            raise MovesApiError("Server returned an invalid response") from exc
        return payload.to_result()

    def close(self) -> None:
        self._session.close()


def _error_detail(resp: requests.Response) -> str:
    try:
        detail = resp.json().get("detail")
    except (ValueError, AttributeError):
        detail = None
    if isinstance(detail, str) and detail:
        return detail
    return f"HTTP {resp.status_code}"
