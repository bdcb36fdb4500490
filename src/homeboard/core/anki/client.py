"""AnkiConnect client for reading review stats from Anki desktop."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

ANKI_CONNECT_VERSION = 6
OFFLINE_MESSAGE = "AnkiConnect is offline or unreachable"


class AnkiConnectError(Exception):
    """AnkiConnect could not be reached or reported an error."""


class AnkiConnectClient:
    """Client for the AnkiConnect HTTP API (JSON body of action + version)."""

    def __init__(
        self,
        host: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.host = host
        self._transport = transport

    async def invoke(self, action: str, **params: Any) -> Any:
        """
        Call an AnkiConnect action and return its `result`.

        Params are only sent when given, so parameterless actions post the
        bare `{action, version}` body.

        Raises:
            AnkiConnectError: On network failure, an invalid host, non-success status,
                an unparseable reply or an `error` in the reply
        """
        payload: dict[str, Any] = {"action": action, "version": ANKI_CONNECT_VERSION}
        if params:
            payload["params"] = params

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self.host, json=payload)
        except httpx.RequestError as e:
            raise AnkiConnectError(str(e) or "AnkiConnect offline") from e
        except (httpx.InvalidURL, OSError, OverflowError, ValueError) as e:
            # Malformed host or port, raised before any request is sent
            raise AnkiConnectError(f"Cannot reach AnkiConnect at {self.host}: {e}") from e

        if not response.is_success:
            raise AnkiConnectError(OFFLINE_MESSAGE)

        try:
            data = response.json()
        except json.JSONDecodeError as e:
            raise AnkiConnectError(
                f"Invalid response from AnkiConnect for action '{action}': {response.text[:200]}"
            ) from e

        if not isinstance(data, dict):
            raise AnkiConnectError(f"Unexpected response from AnkiConnect for action '{action}'")

        if data.get("error"):
            raise AnkiConnectError(str(data["error"]))

        return data.get("result")

    async def cards_reviewed_today(self) -> int:
        """Number of cards reviewed today (0 when Anki reports nothing)."""
        result = await self.invoke("getNumCardsReviewedToday")
        return int(result or 0)
