"""Remote companion strategy: forwards the message to a hosted chat endpoint.

Request body ``{message, chapterNumber, chapterTitle}``; a 2xx response
carries ``{response}``, anything else carries ``{error}``.
"""

import logging
from typing import Any

import httpx

from capstone.config import settings
from capstone.errors import CompanionError, QuotaExceededError, RateLimitError

logger = logging.getLogger(__name__)

SERVICE_NAME = "companion-endpoint"


def _json_body(response: httpx.Response) -> dict[str, Any] | None:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


class RemoteCompanion:
    """Replies by POSTing to ``COMPANION_ENDPOINT_URL``.

    One request per message: no retry and no cancellation. Every failure is
    raised as a CompanionError; 429 and 402 get their own subclasses so the
    caller can word the notice differently.
    """

    name = "remote"

    def __init__(
        self,
        endpoint: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        self.endpoint = endpoint or settings.companion_endpoint_url
        self.api_key = settings.companion_api_key if api_key is None else api_key
        self.timeout = timeout or settings.companion_timeout
        self._client = client

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _post(self, client: httpx.Client, payload: dict[str, Any]) -> httpx.Response:
        return client.post(self.endpoint, json=payload, headers=self._headers())

    def reply(self, message: str, chapter_number: int, chapter_title: str) -> str:
        payload = {
            "message": message,
            "chapterNumber": chapter_number,
            "chapterTitle": chapter_title,
        }
        logger.info(f"Sending companion request for chapter {chapter_number} to {self.endpoint}")

        try:
            if self._client is not None:
                response = self._post(self._client, payload)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = self._post(client, payload)
        except httpx.RequestError as e:
            raise CompanionError(
                f"Companion request failed: {e}",
                service=SERVICE_NAME,
            ) from e

        return self._parse(response)

    def _parse(self, response: httpx.Response) -> str:
        body = _json_body(response)
        status = response.status_code

        if not response.is_success:
            error = (body or {}).get("error")
            text = error if isinstance(error, str) and error else None
            if status == 429:
                raise RateLimitError(
                    text or "Rate limit exceeded. Please try again in a moment.",
                    service=SERVICE_NAME,
                    response_body=response.text,
                )
            if status == 402:
                raise QuotaExceededError(
                    text or "AI credits depleted. Please add credits to continue.",
                    service=SERVICE_NAME,
                    response_body=response.text,
                )
            raise CompanionError(
                text or f"Companion endpoint returned HTTP {status}",
                service=SERVICE_NAME,
                status_code=status,
                response_body=response.text,
            )

        reply = (body or {}).get("response")
        if not isinstance(reply, str) or not reply:
            raise CompanionError(
                "Companion endpoint returned a malformed response",
                service=SERVICE_NAME,
                status_code=status,
                response_body=response.text,
            )
        return reply
