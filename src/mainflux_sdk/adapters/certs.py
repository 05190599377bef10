"""Certs client: issue, inspect and revoke thing certificates."""

from __future__ import annotations

from mainflux_sdk.adapters.http_client import ServiceClient
from mainflux_sdk.core.domain.models import Cert, CertSerials, Revocation


class Certs(ServiceClient):
    certs_endpoint = "certs"
    serials_endpoint = "serials"

    async def issue_cert(self, thing_id: str, valid: str, token: str) -> Cert:
        """Issue a certificate for `thing_id`; `valid` is a TTL such as "10h"."""

        return await self._request_model(
            Cert,
            "POST",
            self.certs_endpoint,
            headers=self._headers(token),
            body={"thing_id": thing_id, "ttl": valid},
        )

    async def view_cert_by_thing(self, thing_id: str, token: str) -> CertSerials:
        return await self._request_model(
            CertSerials, "GET", f"{self.serials_endpoint}/{thing_id}", headers=self._headers(token)
        )

    async def view_cert(self, cert_id: str, token: str) -> Cert:
        return await self._request_model(
            Cert, "GET", f"{self.certs_endpoint}/{cert_id}", headers=self._headers(token)
        )

    async def revoke_cert(self, thing_id: str, token: str) -> Revocation:
        """Revoke every certificate of `thing_id`."""

        return await self._request_model(
            Revocation, "DELETE", f"{self.certs_endpoint}/{thing_id}", headers=self._headers(token)
        )
