"""HTTP Content Moderator.

외부 moderation API 클라이언트.

요청:  POST {api_url}  {"text": "..."}
응답:  {"disallowed": true | false}

HTTP 오류나 형식이 맞지 않는 응답은 예외로 전파합니다 (clean으로 간주하지 않음).
"""

from __future__ import annotations

import logging

import httpx

from apps.quest.application.quest.ports import ContentModerator

logger = logging.getLogger(__name__)


class ModerationResponseError(ValueError):
    """Moderation API 응답 형식 오류."""


class HttpContentModerator(ContentModerator):
    """외부 moderation API 어댑터."""

    def __init__(
        self,
        api_url: str,
        http_client: httpx.AsyncClient,
        api_key: str | None = None,
    ):
        """초기화.

        Args:
            api_url: moderation 엔드포인트 URL
            http_client: HTTP 클라이언트 (외부 주입)
            api_key: Bearer 토큰 (optional)
        """
        self._api_url = api_url
        self._client = http_client
        self._headers = {"Content-Type": "application/json"}
        if api_key:
            self._headers["Authorization"] = f"Bearer {api_key}"

    async def is_disallowed(self, text: str) -> bool:
        try:
            response = await self._client.post(
                self._api_url,
                json={"text": text},
                headers=self._headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Moderation API HTTP error",
                extra={"status": e.response.status_code},
            )
            raise

        data = response.json()
        disallowed = data.get("disallowed") if isinstance(data, dict) else None
        if not isinstance(disallowed, bool):
            raise ModerationResponseError("Moderation API response missing boolean 'disallowed'")

        logger.debug("Moderation API completed", extra={"disallowed": disallowed})
        return disallowed

    async def close(self) -> None:
        await self._client.aclose()
