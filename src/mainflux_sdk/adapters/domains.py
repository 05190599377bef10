"""Domains client.

A domain is the tenant boundary: things, channels and groups belong to one.
"""

from __future__ import annotations

from mainflux_sdk.adapters.http_client import ServiceClient
from mainflux_sdk.core.domain.models import Domain, DomainsPage, PageMetadata, Response, UsersPage


class Domains(ServiceClient):
    domains_endpoint = "domains"

    async def create(self, domain: Domain, token: str) -> Domain:
        return await self._request_model(
            Domain, "POST", self.domains_endpoint, headers=self._headers(token), body=domain
        )

    async def domain(self, domain_id: str, token: str) -> Domain:
        return await self._request_model(
            Domain, "GET", f"{self.domains_endpoint}/{domain_id}", headers=self._headers(token)
        )

    async def domains(self, query: PageMetadata, token: str) -> DomainsPage:
        return await self._request_model(
            DomainsPage, "GET", self.domains_endpoint, headers=self._headers(token), params=query
        )

    async def update(self, domain: Domain, token: str) -> Domain:
        return await self._request_model(
            Domain, "PATCH", f"{self.domains_endpoint}/{domain.id}", headers=self._headers(token), body=domain
        )

    async def enable(self, domain: Domain, token: str) -> Response:
        return await self._request_status(
            "Domain enabled successfully",
            "POST",
            f"{self.domains_endpoint}/{domain.id}/enable",
            headers=self._headers(token),
        )

    async def disable(self, domain: Domain, token: str) -> Response:
        return await self._request_status(
            "Domain disabled successfully",
            "POST",
            f"{self.domains_endpoint}/{domain.id}/disable",
            headers=self._headers(token),
        )

    async def domain_permissions(self, domain_id: str, token: str) -> Domain:
        return await self._request_model(
            Domain, "GET", f"{self.domains_endpoint}/{domain_id}/permissions", headers=self._headers(token)
        )

    async def list_domain_users(self, domain_id: str, query: PageMetadata, token: str) -> UsersPage:
        return await self._request_model(
            UsersPage,
            "GET",
            f"{self.domains_endpoint}/{domain_id}/users",
            headers=self._headers(token),
            params=query,
        )

    async def add_user_to_domain(
        self, domain_id: str, user_ids: list[str], relation: str, token: str
    ) -> Response:
        """Grant `relation` (e.g. administrator, member) on the domain to each user."""

        return await self._request_status(
            "User added successfully",
            "POST",
            f"{self.domains_endpoint}/{domain_id}/users/assign",
            headers=self._headers(token),
            body={"user_ids": user_ids, "relation": relation},
        )

    async def remove_user_from_domain(
        self, domain_id: str, user_ids: list[str], relation: str, token: str
    ) -> Response:
        return await self._request_status(
            "User removed successfully",
            "POST",
            f"{self.domains_endpoint}/{domain_id}/users/unassign",
            headers=self._headers(token),
            body={"user_ids": user_ids, "relation": relation},
        )

    async def list_user_domains(self, user_id: str, query: PageMetadata, token: str) -> DomainsPage:
        return await self._request_model(
            DomainsPage,
            "GET",
            f"users/{user_id}/{self.domains_endpoint}",
            headers=self._headers(token),
            params=query,
        )
