"""Client-side access to the move API."""

from boardshot.client.api import DEFAULT_TIMEOUT_S, MovesApiClient, MovesApiError

__all__ = ["DEFAULT_TIMEOUT_S", "MovesApiClient", "MovesApiError"]
