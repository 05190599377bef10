"""Channels client.

Channels live in the things service: they group things and users and carry
the messages things publish. Connecting a thing to a channel allows it to
publish and subscribe there.
"""

from __future__ import annotations

from mainflux_sdk.adapters.http_client import ServiceClient
from mainflux_sdk.core.domain.models import (
    Channel,
    ChannelsPage,
    GroupsPage,
    PageMetadata,
    Response,
    UsersPage,
)


class Channels(ServiceClient):
    """Channels API client."""

    channels_endpoint = "channels"

    async def create(self, channel: Channel, token: str) -> Channel:
        return await self._request_model(
            Channel, "POST", self.channels_endpoint, headers=self._headers(token), body=channel
        )

    async def create_channels(self, channels: list[Channel], token: str) -> list[Channel]:
        response = await self._send(
            "POST",
            f"{self.channels_endpoint}/bulk",
            headers=self._headers(token),
            body=[channel.to_payload() for channel in channels],
        )
        data = response.json()
        if isinstance(data, dict):
            data = data.get("channels") or []
        return [Channel.model_validate(item) for item in data]

    async def channel(self, channel_id: str, token: str) -> Channel:
        return await self._request_model(
            Channel, "GET", f"{self.channels_endpoint}/{channel_id}", headers=self._headers(token)
        )

    async def channels(self, query: PageMetadata, token: str) -> ChannelsPage:
        return await self._request_model(
            ChannelsPage, "GET", self.channels_endpoint, headers=self._headers(token), params=query
        )

    async def channels_by_thing(self, thing_id: str, query: PageMetadata, token: str) -> ChannelsPage:
        """Channels `thing_id` is connected to."""

        return await self._request_model(
            ChannelsPage,
            "GET",
            f"things/{thing_id}/{self.channels_endpoint}",
            headers=self._headers(token),
            params=query,
        )

    async def update(self, channel: Channel, token: str) -> Channel:
        return await self._request_model(
            Channel,
            "PUT",
            f"{self.channels_endpoint}/{channel.id}",
            headers=self._headers(token),
            body=channel,
        )

    async def enable(self, channel: Channel, token: str) -> Channel:
        return await self._request_model(
            Channel, "POST", f"{self.channels_endpoint}/{channel.id}/enable", headers=self._headers(token)
        )

    async def disable(self, channel: Channel, token: str) -> Channel:
        return await self._request_model(
            Channel, "POST", f"{self.channels_endpoint}/{channel.id}/disable", headers=self._headers(token)
        )

    async def connect(self, thing_ids: list[str], channel_ids: list[str], token: str) -> Response:
        """Connect every listed thing to every listed channel."""

        return await self._request_status(
            "Things connected successfully",
            "POST",
            "connect",
            headers=self._headers(token),
            body={"thing_ids": thing_ids, "channel_ids": channel_ids},
        )

    async def disconnect(self, thing_ids: list[str], channel_ids: list[str], token: str) -> Response:
        return await self._request_status(
            "Things disconnected successfully",
            "POST",
            "disconnect",
            headers=self._headers(token),
            body={"thing_ids": thing_ids, "channel_ids": channel_ids},
        )

    async def connect_thing(self, thing_id: str, channel_id: str, token: str) -> Response:
        return await self._request_status(
            "Thing connected successfully",
            "POST",
            f"{self.channels_endpoint}/{channel_id}/things/{thing_id}/connect",
            headers=self._headers(token),
        )

    async def disconnect_thing(self, thing_id: str, channel_id: str, token: str) -> Response:
        return await self._request_status(
            "Thing disconnected successfully",
            "POST",
            f"{self.channels_endpoint}/{channel_id}/things/{thing_id}/disconnect",
            headers=self._headers(token),
        )

    async def add_user_to_channel(
        self, channel_id: str, user_ids: list[str], relation: str, token: str
    ) -> Response:
        return await self._request_status(
            "User added successfully",
            "POST",
            f"{self.channels_endpoint}/{channel_id}/users/assign",
            headers=self._headers(token),
            body={"user_ids": user_ids, "relation": relation},
        )

    async def remove_user_from_channel(
        self, channel_id: str, user_ids: list[str], relation: str, token: str
    ) -> Response:
        return await self._request_status(
            "User removed successfully",
            "POST",
            f"{self.channels_endpoint}/{channel_id}/users/unassign",
            headers=self._headers(token),
            body={"user_ids": user_ids, "relation": relation},
        )

    async def add_user_group_to_channel(self, channel_id: str, group_ids: list[str], token: str) -> Response:
        return await self._request_status(
            "User group added successfully",
            "POST",
            f"{self.channels_endpoint}/{channel_id}/groups/assign",
            headers=self._headers(token),
            body={"group_ids": group_ids},
        )

    async def remove_user_group_from_channel(
        self, channel_id: str, group_ids: list[str], token: str
    ) -> Response:
        return await self._request_status(
            "User group removed successfully",
            "POST",
            f"{self.channels_endpoint}/{channel_id}/groups/unassign",
            headers=self._headers(token),
            body={"group_ids": group_ids},
        )

    async def list_channel_users(self, channel_id: str, query: PageMetadata, token: str) -> UsersPage:
        return await self._request_model(
            UsersPage,
            "GET",
            f"{self.channels_endpoint}/{channel_id}/users",
            headers=self._headers(token),
            params=query,
        )

    async def list_channel_user_groups(self, channel_id: str, query: PageMetadata, token: str) -> GroupsPage:
        return await self._request_model(
            GroupsPage,
            "GET",
            f"{self.channels_endpoint}/{channel_id}/groups",
            headers=self._headers(token),
            params=query,
        )

    async def channel_permissions(self, channel_id: str, token: str) -> Channel:
        return await self._request_model(
            Channel, "GET", f"{self.channels_endpoint}/{channel_id}/permissions", headers=self._headers(token)
        )

    async def delete_channel(self, channel_id: str, token: str) -> Response:
        return await self._request_status(
            "Channel deleted successfully",
            "DELETE",
            f"{self.channels_endpoint}/{channel_id}",
            headers=self._headers(token, content_type=False),
        )
