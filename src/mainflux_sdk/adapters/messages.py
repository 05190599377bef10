"""Messages client.

Publishing goes through the HTTP adapter and authenticates with the thing
key; reading goes through the readers service with a user token.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from mainflux_sdk.adapters.http_client import ServiceClient, thing_key
from mainflux_sdk.core.config import SDKSettings
from mainflux_sdk.core.domain.models import MessagesPage, MessagesPageMetadata, Response, SenMLMessage

SENML_CONTENT_TYPE = "application/senml+json"


class Messages(ServiceClient):
    """Messages API client.

    The base URL is the HTTP adapter; `readers_url` is used for `read`.
    """

    def __init__(
        self,
        http_adapter_url: str,
        *,
        readers_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        settings: SDKSettings | None = None,
    ) -> None:
        super().__init__(http_adapter_url, http_client=http_client, settings=settings)
        self._readers_url = readers_url or http_adapter_url

    async def send(
        self,
        channel_id: str,
        message: str | list[SenMLMessage] | list[dict[str, Any]],
        key: str,
        *,
        subtopic: str | None = None,
    ) -> Response:
        """Publish `message` (a SenML JSON string or records) on `channel_id`."""

        if isinstance(message, str):
            content = message
        else:
            content = json.dumps(
                [m.to_payload() if isinstance(m, SenMLMessage) else m for m in message]
            )
        path = f"channels/{channel_id}/messages"
        if subtopic:
            path = f"{path}/{subtopic.strip('/')}"
        return await self._request_status(
            "Message sent successfully",
            "POST",
            path,
            headers={"Content-Type": SENML_CONTENT_TYPE, **thing_key(key)},
            content=content,
        )

    async def read(self, channel_id: str, query: MessagesPageMetadata, token: str) -> MessagesPage:
        return await self._request_model(
            MessagesPage,
            "GET",
            f"channels/{channel_id}/messages",
            headers=self._headers(token),
            params=query,
            base_url=self._readers_url,
        )
