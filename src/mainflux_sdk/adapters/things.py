"""Things service client (devices and applications that exchange messages)."""

from __future__ import annotations

from mainflux_sdk.adapters.http_client import ServiceClient, thing_key
from mainflux_sdk.core.domain.models import (
    Identity,
    PageMetadata,
    Response,
    Thing,
    ThingsPage,
    UsersPage,
)


class Things(ServiceClient):
    """Things API client."""

    things_endpoint = "things"

    async def create(self, thing: Thing, token: str) -> Thing:
        return await self._request_model(
            Thing, "POST", self.things_endpoint, headers=self._headers(token), body=thing
        )

    async def create_things(self, things: list[Thing], token: str) -> list[Thing]:
        """Create several things in one request."""

        response = await self._send(
            "POST",
            f"{self.things_endpoint}/bulk",
            headers=self._headers(token),
            body=[thing.to_payload() for thing in things],
        )
        data = response.json()
        # The service answers either with a bare list or with {"things": [...]}.
        if isinstance(data, dict):
            data = data.get("things") or []
        return [Thing.model_validate(item) for item in data]

    async def things(self, query: PageMetadata, token: str) -> ThingsPage:
        return await self._request_model(
            ThingsPage, "GET", self.things_endpoint, headers=self._headers(token), params=query
        )

    async def thing(self, thing_id: str, token: str) -> Thing:
        return await self._request_model(
            Thing, "GET", f"{self.things_endpoint}/{thing_id}", headers=self._headers(token)
        )

    async def update(self, thing: Thing, token: str) -> Thing:
        """Update name and metadata of `thing.id`."""

        return await self._request_model(
            Thing, "PATCH", f"{self.things_endpoint}/{thing.id}", headers=self._headers(token), body=thing
        )

    async def update_thing_secret(self, thing: Thing, token: str) -> Thing:
        secret = thing.credentials.secret if thing.credentials else None
        return await self._request_model(
            Thing,
            "PATCH",
            f"{self.things_endpoint}/{thing.id}/secret",
            headers=self._headers(token),
            body={"secret": secret},
        )

    async def update_thing_tags(self, thing: Thing, token: str) -> Thing:
        return await self._request_model(
            Thing,
            "PATCH",
            f"{self.things_endpoint}/{thing.id}/tags",
            headers=self._headers(token),
            body={"tags": thing.tags},
        )

    async def disable(self, thing: Thing, token: str) -> Thing:
        return await self._request_model(
            Thing, "POST", f"{self.things_endpoint}/{thing.id}/disable", headers=self._headers(token)
        )

    async def enable(self, thing: Thing, token: str) -> Thing:
        return await self._request_model(
            Thing, "POST", f"{self.things_endpoint}/{thing.id}/enable", headers=self._headers(token)
        )

    async def things_by_channel(self, channel_id: str, query: PageMetadata, token: str) -> ThingsPage:
        """Things connected to `channel_id`."""

        return await self._request_model(
            ThingsPage,
            "GET",
            f"channels/{channel_id}/{self.things_endpoint}",
            headers=self._headers(token),
            params=query,
        )

    async def things_permissions(self, thing_id: str, token: str) -> Thing:
        """The thing with only its `permissions` filled for the caller."""

        return await self._request_model(
            Thing, "GET", f"{self.things_endpoint}/{thing_id}/permissions", headers=self._headers(token)
        )

    async def identify_thing(self, key: str) -> Identity:
        """Resolve a thing key to the thing id. Authenticates with the key itself."""

        return await self._request_model(
            Identity, "POST", "identify", headers={"Content-Type": self.content_type, **thing_key(key)}
        )

    async def share_thing(self, thing_id: str, relation: str, user_ids: list[str], token: str) -> Response:
        return await self._request_status(
            "Thing shared successfully",
            "POST",
            f"{self.things_endpoint}/{thing_id}/share",
            headers=self._headers(token),
            body={"relation": relation, "user_ids": user_ids},
        )

    async def unshare_thing(self, thing_id: str, relation: str, user_ids: list[str], token: str) -> Response:
        return await self._request_status(
            "Thing unshared successfully",
            "POST",
            f"{self.things_endpoint}/{thing_id}/unshare",
            headers=self._headers(token),
            body={"relation": relation, "user_ids": user_ids},
        )

    async def list_thing_users(self, thing_id: str, query: PageMetadata, token: str) -> UsersPage:
        return await self._request_model(
            UsersPage,
            "GET",
            f"{self.things_endpoint}/{thing_id}/users",
            headers=self._headers(token),
            params=query,
        )

    async def delete_thing(self, thing_id: str, token: str) -> Response:
        return await self._request_status(
            "Thing deleted successfully",
            "DELETE",
            f"{self.things_endpoint}/{thing_id}",
            headers=self._headers(token, content_type=False),
        )
