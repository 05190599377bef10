"""httpx wrapper shared by every resource client.

Why a wrapper:
- Standardises headers, URL resolution and error mapping for all services.
- Easy to test: a caller-owned `httpx.AsyncClient` (or respx) can stand in
  for the network.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, TypeVar
from urllib.parse import urljoin

import httpx
from pydantic import BaseModel

from mainflux_sdk.core.config import SDKSettings
from mainflux_sdk.core.domain.models import DTO, Response
from mainflux_sdk.core.errors import handle_error
from mainflux_sdk.core.logging import get_logger

logger = get_logger(__name__)

CONTENT_TYPE = "application/json"

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_async_client(
    settings: SDKSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the SDK defaults.

    The timeout comes from settings; `None` leaves requests unbounded so the
    caller's transport decides.
    """

    settings = settings or SDKSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": CONTENT_TYPE,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        follow_redirects=True,
    )


def bearer(token: str | None) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def thing_key(key: str) -> dict[str, str]:
    return {"Authorization": f"Thing {key}"}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def query_params(params: DTO | Mapping[str, Any] | None) -> dict[str, str]:
    """Turn page metadata into string query parameters (None values dropped)."""

    if params is None:
        return {}
    raw = params.to_payload() if isinstance(params, DTO) else dict(params)
    return {key: _stringify(value) for key, value in raw.items() if value is not None}


def resolve(base_url: str, path: str) -> str:
    """Resolve `path` against `base_url` like a browser `new URL(path, base)`."""

    return urljoin(base_url, path)


def raise_for_error(response: httpx.Response) -> None:
    """Raise `SDKError` for a non-2xx response.

    The error body must be JSON; decode failures propagate unchanged.
    """

    if response.is_success:
        return
    body = response.json()
    message: str | None = None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
    if not message:
        message = response.reason_phrase
    logger.warning(
        "api_error",
        method=response.request.method,
        url=str(response.request.url),
        status_code=response.status_code,
        error_message=message,
    )
    raise handle_error(message, response.status_code)


class ServiceClient:
    """Base of every resource client: one base URL, one request per call.

    When `http_client` is given it is reused for every call and never
    closed here; otherwise each call opens and closes its own client.
    """

    content_type = CONTENT_TYPE

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        settings: SDKSettings | None = None,
    ) -> None:
        self._base_url = base_url
        self._http_client = http_client
        self._settings = settings

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self, token: str | None = None, *, content_type: bool = True) -> dict[str, str]:
        headers: dict[str, str] = {}
        if content_type:
            headers["Content-Type"] = self.content_type
        if token is not None:
            headers.update(bearer(token))
        return headers

    async def _send(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        params: DTO | Mapping[str, Any] | None = None,
        body: DTO | Mapping[str, Any] | list[Any] | None = None,
        content: str | bytes | None = None,
        base_url: str | None = None,
    ) -> httpx.Response:
        url = resolve(base_url or self._base_url, path)
        kwargs: dict[str, Any] = {"headers": headers or {}}
        query = query_params(params)
        if query:
            kwargs["params"] = query
        if body is not None:
            if isinstance(body, DTO):
                payload: Any = body.to_payload()
            elif isinstance(body, Mapping):
                # Absent fields are left out of the body, never sent as null.
                payload = {key: value for key, value in body.items() if value is not None}
            else:
                payload = body
            kwargs["content"] = json.dumps(payload)
        elif content is not None:
            kwargs["content"] = content

        logger.debug("api_request", method=method, url=url, params=query or None)
        if self._http_client is not None:
            response = await self._http_client.request(method, url, **kwargs)
        else:
            async with build_async_client(self._settings) as client:
                response = await client.request(method, url, **kwargs)

        raise_for_error(response)
        return response

    async def _request_model(self, model: type[ModelT], method: str, path: str, **kwargs: Any) -> ModelT:
        response = await self._send(method, path, **kwargs)
        return model.model_validate(response.json())

    async def _request_status(self, message: str, method: str, path: str, **kwargs: Any) -> Response:
        """For endpoints whose success has no body: status code plus a fixed message."""

        response = await self._send(method, path, **kwargs)
        return Response(status=response.status_code, message=message)
