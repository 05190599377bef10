"""Health endpoint, exposed by every platform service."""

from __future__ import annotations

from mainflux_sdk.adapters.http_client import ServiceClient
from mainflux_sdk.core.domain.models import HealthInfo


class Health(ServiceClient):
    async def health(self) -> HealthInfo:
        return await self._request_model(HealthInfo, "GET", "health", headers=self._headers())
