"""Bootstrap client.

Bootstrap configs let a freshly flashed device fetch its thing key, channel
list and certificates using only its external id and external key.
"""

from __future__ import annotations

from mainflux_sdk.adapters.http_client import ServiceClient, thing_key
from mainflux_sdk.core.domain.models import BootstrapConfig, BootstrapsPage, PageMetadata, Response


class Bootstrap(ServiceClient):
    configs_endpoint = "things/configs"
    bootstrap_endpoint = "things/bootstrap"
    whitelist_endpoint = "things/state"

    async def add_bootstrap(self, config: BootstrapConfig, token: str) -> Response:
        return await self._request_status(
            "Configuration added successfully",
            "POST",
            self.configs_endpoint,
            headers=self._headers(token),
            body=config,
        )

    async def whitelist(self, config: BootstrapConfig, token: str) -> Response:
        """Change the bootstrap state (0 inactive, 1 active) of `config.thing_id`."""

        return await self._request_status(
            "Configuration updated successfully",
            "PUT",
            f"{self.whitelist_endpoint}/{config.thing_id}",
            headers=self._headers(token),
            body={"state": config.state},
        )

    async def update_bootstrap(self, config: BootstrapConfig, token: str) -> Response:
        return await self._request_status(
            "Configuration updated successfully",
            "PUT",
            f"{self.configs_endpoint}/{config.thing_id}",
            headers=self._headers(token),
            body=config,
        )

    async def update_bootstrap_certs(self, config: BootstrapConfig, token: str) -> BootstrapConfig:
        return await self._request_model(
            BootstrapConfig,
            "PATCH",
            f"{self.configs_endpoint}/certs/{config.thing_id}",
            headers=self._headers(token),
            body={
                "client_cert": config.client_cert,
                "client_key": config.client_key,
                "ca_cert": config.ca_cert,
            },
        )

    async def update_bootstrap_connection(self, thing_id: str, channel_ids: list[str], token: str) -> Response:
        return await self._request_status(
            "Configuration updated successfully",
            "PUT",
            f"{self.configs_endpoint}/connections/{thing_id}",
            headers=self._headers(token),
            body={"channels": channel_ids},
        )

    async def remove_bootstrap(self, thing_id: str, token: str) -> Response:
        return await self._request_status(
            "Configuration removed successfully",
            "DELETE",
            f"{self.configs_endpoint}/{thing_id}",
            headers=self._headers(token, content_type=False),
        )

    async def bootstrap(self, external_id: str, external_key: str) -> BootstrapConfig:
        """Fetch the config the device identified by `external_id` boots with."""

        return await self._request_model(
            BootstrapConfig,
            "GET",
            f"{self.bootstrap_endpoint}/{external_id}",
            headers={"Content-Type": self.content_type, **thing_key(external_key)},
        )

    async def bootstraps(self, query: PageMetadata, token: str) -> BootstrapsPage:
        return await self._request_model(
            BootstrapsPage, "GET", self.configs_endpoint, headers=self._headers(token), params=query
        )

    async def view_bootstrap(self, thing_id: str, token: str) -> BootstrapConfig:
        return await self._request_model(
            BootstrapConfig, "GET", f"{self.configs_endpoint}/{thing_id}", headers=self._headers(token)
        )
