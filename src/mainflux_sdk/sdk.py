"""SDK facade: every resource client built from one `SDKSettings`."""

from __future__ import annotations

from types import TracebackType

import httpx

from mainflux_sdk.adapters.bootstrap import Bootstrap
from mainflux_sdk.adapters.certs import Certs
from mainflux_sdk.adapters.channels import Channels
from mainflux_sdk.adapters.domains import Domains
from mainflux_sdk.adapters.groups import Groups
from mainflux_sdk.adapters.health import Health
from mainflux_sdk.adapters.http_client import build_async_client
from mainflux_sdk.adapters.invitations import Invitations
from mainflux_sdk.adapters.journal import Journal
from mainflux_sdk.adapters.messages import Messages
from mainflux_sdk.adapters.things import Things
from mainflux_sdk.adapters.users import Users
from mainflux_sdk.core.config import SDKSettings
from mainflux_sdk.core.domain.models import HealthInfo


class SDK:
    """Entry point of the SDK.

    Example::

        sdk = SDK(SDKSettings(things_url="http://localhost:9000"))
        thing = await sdk.things.create(Thing(name="sensor"), token)

    Without `http_client`, each call opens its own connection. Use
    `async with SDK(...)` to share one client across calls; it is closed on
    exit only when the SDK created it.
    """

    def __init__(
        self,
        settings: SDKSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or SDKSettings()
        self._http_client = http_client
        self._owns_client = False
        self._build_clients()

    def _build_clients(self) -> None:
        s = self.settings
        opts = {"http_client": self._http_client, "settings": s}
        self.users = Users(s.users_url, clients_url=s.clients_url, **opts)
        self.things = Things(s.things_url, **opts)
        self.channels = Channels(s.things_url, **opts)
        self.groups = Groups(s.users_url, **opts)
        self.domains = Domains(s.domains_url, **opts)
        self.invitations = Invitations(s.invitations_url, **opts)
        self.bootstrap = Bootstrap(s.bootstrap_url, **opts)
        self.certs = Certs(s.certs_url, **opts)
        self.messages = Messages(s.http_adapter_url, readers_url=s.readers_url, **opts)
        self.journal = Journal(s.journals_url, **opts)

    async def health(self, service: str) -> HealthInfo:
        """Health of a service by name (see `SDKSettings.service_urls`)."""

        urls = self.settings.service_urls()
        if service not in urls:
            raise ValueError(f"unknown service {service!r}; expected one of {sorted(urls)}")
        return await Health(urls[service], http_client=self._http_client, settings=self.settings).health()

    async def __aenter__(self) -> SDK:
        if self._http_client is None:
            self._http_client = build_async_client(self.settings)
            self._owns_client = True
            self._build_clients()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_client = False
            self._build_clients()
