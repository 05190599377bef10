"""Users service client.

Creates and manages users: registration, login and token refresh,
profile updates, enable/disable, password reset and user search.
"""

from __future__ import annotations

import httpx

from mainflux_sdk.adapters.http_client import ServiceClient
from mainflux_sdk.core.config import SDKSettings
from mainflux_sdk.core.domain.models import (
    ChannelsPage,
    ClientsPage,
    GroupsPage,
    Login,
    PageMetadata,
    Response,
    Token,
    User,
    UsersPage,
)


class Users(ServiceClient):
    """Users API client.

    `clients_url` points at the service that lists the clients and channels
    of a user; it defaults to `users_url`.
    """

    users_endpoint = "users"
    search_endpoint = "search"

    def __init__(
        self,
        users_url: str,
        *,
        clients_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        settings: SDKSettings | None = None,
    ) -> None:
        super().__init__(users_url, http_client=http_client, settings=settings)
        self._clients_url = clients_url or users_url

    async def create(self, user: User, token: str | None = None) -> User:
        """Create a new user.

        Example body::

            User(email="admin@example.com", first_name="John", last_name="Doe",
                 credentials=Credentials(username="admin", secret="12345678"))
        """

        return await self._request_model(
            User, "POST", self.users_endpoint, headers=self._headers(token), body=user
        )

    async def create_token(self, login: Login) -> Token:
        """Issue access and refresh tokens. `identity` is the email or the username."""

        return await self._request_model(
            Token, "POST", f"{self.users_endpoint}/tokens/issue", headers=self._headers(), body=login
        )

    async def refresh_token(self, refresh_token: str) -> Token:
        """Exchange a refresh token for a new access/refresh pair."""

        return await self._request_model(
            Token, "POST", f"{self.users_endpoint}/tokens/refresh", headers=self._headers(refresh_token)
        )

    async def update(self, user: User, token: str) -> User:
        """Update first/last name and metadata of `user.id`."""

        return await self._request_model(
            User, "PATCH", f"{self.users_endpoint}/{user.id}", headers=self._headers(token), body=user
        )

    async def update_email(self, user: User, token: str) -> User:
        return await self._request_model(
            User,
            "PATCH",
            f"{self.users_endpoint}/{user.id}/email",
            headers=self._headers(token),
            body={"email": user.email},
        )

    async def update_username(self, user: User, token: str) -> User:
        username = user.credentials.username if user.credentials else None
        return await self._request_model(
            User,
            "PATCH",
            f"{self.users_endpoint}/{user.id}/username",
            headers=self._headers(token),
            body={"username": username},
        )

    async def update_profile_picture(self, user: User, token: str) -> User:
        """Set the profile picture; the picture is given as a URL string."""

        return await self._request_model(
            User,
            "PATCH",
            f"{self.users_endpoint}/{user.id}/picture",
            headers=self._headers(token),
            body={"profile_picture": user.profile_picture},
        )

    async def update_user_tags(self, user: User, token: str) -> User:
        return await self._request_model(
            User, "PATCH", f"{self.users_endpoint}/{user.id}/tags", headers=self._headers(token), body=user
        )

    async def update_user_password(self, old_secret: str, new_secret: str, token: str) -> User:
        """Change the password of the user owning `token`."""

        return await self._request_model(
            User,
            "PATCH",
            f"{self.users_endpoint}/secret",
            headers=self._headers(token),
            body={"old_secret": old_secret, "new_secret": new_secret},
        )

    async def update_user_role(self, user: User, token: str) -> User:
        return await self._request_model(
            User, "PATCH", f"{self.users_endpoint}/{user.id}/role", headers=self._headers(token), body=user
        )

    async def user(self, user_id: str, token: str) -> User:
        return await self._request_model(
            User, "GET", f"{self.users_endpoint}/{user_id}", headers=self._headers(token)
        )

    async def user_profile(self, token: str) -> User:
        """The user the token belongs to."""

        return await self._request_model(
            User, "GET", f"{self.users_endpoint}/profile", headers=self._headers(token)
        )

    async def users(self, query: PageMetadata, token: str) -> UsersPage:
        return await self._request_model(
            UsersPage, "GET", self.users_endpoint, headers=self._headers(token), params=query
        )

    async def disable(self, user: User, token: str) -> User:
        return await self._request_model(
            User, "POST", f"{self.users_endpoint}/{user.id}/disable", headers=self._headers(token), body=user
        )

    async def enable(self, user: User, token: str) -> User:
        return await self._request_model(
            User, "POST", f"{self.users_endpoint}/{user.id}/enable", headers=self._headers(token), body=user
        )

    async def list_user_groups(
        self, domain_id: str, user_id: str, query: PageMetadata, token: str
    ) -> GroupsPage:
        """Groups `user_id` is a member of inside `domain_id`."""

        return await self._request_model(
            GroupsPage,
            "GET",
            f"{domain_id}/{self.users_endpoint}/{user_id}/groups",
            headers=self._headers(token),
            params=query,
        )

    async def list_user_clients(
        self, user_id: str, domain_id: str, query: PageMetadata, token: str
    ) -> ClientsPage:
        """Clients owned by `user_id`. Note the user id comes first here."""

        return await self._request_model(
            ClientsPage,
            "GET",
            f"{domain_id}/{self.users_endpoint}/{user_id}/clients",
            headers=self._headers(token),
            params=query,
            base_url=self._clients_url,
        )

    async def list_user_channels(
        self, domain_id: str, user_id: str, query: PageMetadata, token: str
    ) -> ChannelsPage:
        return await self._request_model(
            ChannelsPage,
            "GET",
            f"{domain_id}/{self.users_endpoint}/{user_id}/channels",
            headers=self._headers(token),
            params=query,
            base_url=self._clients_url,
        )

    async def reset_password_request(self, email: str, host_url: str) -> Response:
        """Ask the service to email a reset link.

        `host_url` is the UI the link should point back to; it travels in
        the Referer header.
        """

        return await self._request_status(
            "Email with reset link sent successfully",
            "POST",
            "/password/reset-request",
            headers={**self._headers(), "Referer": host_url},
            body={"email": email},
        )

    async def reset_password(self, password: str, conf_pass: str, token: str) -> Response:
        """Set a new password using the token from the reset email."""

        return await self._request_status(
            "Password reset successfully",
            "PUT",
            "/password/reset",
            headers=self._headers(),
            body={"token": token, "password": password, "confirm_password": conf_pass},
        )

    async def delete_user(self, user_id: str, token: str) -> Response:
        return await self._request_status(
            "User deleted successfully",
            "DELETE",
            f"{self.users_endpoint}/{user_id}",
            headers=self._headers(token, content_type=False),
        )

    async def search_users(self, query: PageMetadata, token: str) -> UsersPage:
        return await self._request_model(
            UsersPage,
            "GET",
            f"{self.users_endpoint}/{self.search_endpoint}",
            headers=self._headers(token),
            params=query,
        )
