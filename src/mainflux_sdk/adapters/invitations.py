"""Invitations client: invite users into a domain and accept invitations."""

from __future__ import annotations

from mainflux_sdk.adapters.http_client import ServiceClient
from mainflux_sdk.core.domain.models import Invitation, InvitationsPage, PageMetadata, Response


class Invitations(ServiceClient):
    invitations_endpoint = "invitations"

    def _invitation_path(self, user_id: str, domain_id: str) -> str:
        return f"{self.invitations_endpoint}/users/{user_id}/domains/{domain_id}"

    async def send_invitation(self, invitation: Invitation, token: str) -> Response:
        return await self._request_status(
            "Invitation sent successfully",
            "POST",
            self.invitations_endpoint,
            headers=self._headers(token),
            body=invitation,
        )

    async def invitation(self, user_id: str, domain_id: str, token: str) -> Invitation:
        return await self._request_model(
            Invitation, "GET", self._invitation_path(user_id, domain_id), headers=self._headers(token)
        )

    async def invitations(self, query: PageMetadata, token: str) -> InvitationsPage:
        return await self._request_model(
            InvitationsPage, "GET", self.invitations_endpoint, headers=self._headers(token), params=query
        )

    async def accept_invitation(self, domain_id: str, token: str) -> Response:
        """Accept the invitation into `domain_id` for the user owning `token`."""

        return await self._request_status(
            "Invitation accepted successfully",
            "POST",
            f"{self.invitations_endpoint}/accept",
            headers=self._headers(token),
            body={"domain_id": domain_id},
        )

    async def delete_invitation(self, user_id: str, domain_id: str, token: str) -> Response:
        return await self._request_status(
            "Invitation deleted successfully",
            "DELETE",
            self._invitation_path(user_id, domain_id),
            headers=self._headers(token, content_type=False),
        )
