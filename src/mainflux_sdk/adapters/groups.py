"""Groups client (user groups, hosted by the users service)."""

from __future__ import annotations

from mainflux_sdk.adapters.http_client import ServiceClient
from mainflux_sdk.core.domain.models import (
    ChannelsPage,
    Group,
    GroupsPage,
    PageMetadata,
    Response,
    UsersPage,
)


class Groups(ServiceClient):
    """Groups API client.

    Groups form a tree: `parents` and `children` walk it from a given group,
    `level` in the query bounds the depth.
    """

    groups_endpoint = "groups"

    async def create(self, group: Group, token: str) -> Group:
        return await self._request_model(
            Group, "POST", self.groups_endpoint, headers=self._headers(token), body=group
        )

    async def group(self, group_id: str, token: str) -> Group:
        return await self._request_model(
            Group, "GET", f"{self.groups_endpoint}/{group_id}", headers=self._headers(token)
        )

    async def groups(self, query: PageMetadata, token: str) -> GroupsPage:
        return await self._request_model(
            GroupsPage, "GET", self.groups_endpoint, headers=self._headers(token), params=query
        )

    async def parents(self, group_id: str, query: PageMetadata, token: str) -> GroupsPage:
        return await self._request_model(
            GroupsPage,
            "GET",
            f"{self.groups_endpoint}/{group_id}/parents",
            headers=self._headers(token),
            params=query,
        )

    async def children(self, group_id: str, query: PageMetadata, token: str) -> GroupsPage:
        return await self._request_model(
            GroupsPage,
            "GET",
            f"{self.groups_endpoint}/{group_id}/children",
            headers=self._headers(token),
            params=query,
        )

    async def update(self, group: Group, token: str) -> Group:
        return await self._request_model(
            Group, "PUT", f"{self.groups_endpoint}/{group.id}", headers=self._headers(token), body=group
        )

    async def enable(self, group: Group, token: str) -> Group:
        return await self._request_model(
            Group, "POST", f"{self.groups_endpoint}/{group.id}/enable", headers=self._headers(token)
        )

    async def disable(self, group: Group, token: str) -> Group:
        return await self._request_model(
            Group, "POST", f"{self.groups_endpoint}/{group.id}/disable", headers=self._headers(token)
        )

    async def add_user_to_group(self, group_id: str, user_ids: list[str], relation: str, token: str) -> Response:
        return await self._request_status(
            "User added successfully",
            "POST",
            f"{self.groups_endpoint}/{group_id}/users/assign",
            headers=self._headers(token),
            body={"user_ids": user_ids, "relation": relation},
        )

    async def remove_user_from_group(
        self, group_id: str, user_ids: list[str], relation: str, token: str
    ) -> Response:
        return await self._request_status(
            "User removed successfully",
            "POST",
            f"{self.groups_endpoint}/{group_id}/users/unassign",
            headers=self._headers(token),
            body={"user_ids": user_ids, "relation": relation},
        )

    async def list_group_users(self, group_id: str, query: PageMetadata, token: str) -> UsersPage:
        return await self._request_model(
            UsersPage,
            "GET",
            f"{self.groups_endpoint}/{group_id}/users",
            headers=self._headers(token),
            params=query,
        )

    async def list_group_channels(self, group_id: str, query: PageMetadata, token: str) -> ChannelsPage:
        return await self._request_model(
            ChannelsPage,
            "GET",
            f"{self.groups_endpoint}/{group_id}/channels",
            headers=self._headers(token),
            params=query,
        )

    async def group_permissions(self, group_id: str, token: str) -> Group:
        return await self._request_model(
            Group, "GET", f"{self.groups_endpoint}/{group_id}/permissions", headers=self._headers(token)
        )

    async def delete_group(self, group_id: str, token: str) -> Response:
        return await self._request_status(
            "Group deleted successfully",
            "DELETE",
            f"{self.groups_endpoint}/{group_id}",
            headers=self._headers(token, content_type=False),
        )
