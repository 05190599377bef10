"""Journal client: audit trail of operations performed on an entity."""

from __future__ import annotations

from mainflux_sdk.adapters.http_client import ServiceClient
from mainflux_sdk.core.domain.models import JournalsPage, JournalsPageMetadata


class Journal(ServiceClient):
    journals_endpoint = "journal"

    async def journal(
        self,
        entity_type: str,
        entity_id: str,
        domain_id: str,
        query: JournalsPageMetadata,
        token: str,
    ) -> JournalsPage:
        """Journals of one entity (e.g. entity_type "thing") inside `domain_id`."""

        return await self._request_model(
            JournalsPage,
            "GET",
            f"{domain_id}/{self.journals_endpoint}/{entity_type}/{entity_id}",
            headers=self._headers(token),
            params=query,
        )
