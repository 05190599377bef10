"""Domain models (Pydantic v2).

Why pydantic here:
- The remote API owns every rule; these models only mirror its JSON shape.
- `extra="allow"` keeps fields the server adds without a client release.

Note:
- No client-side validation beyond types. Uniqueness, lifecycle and
  permissions are enforced by the platform.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class DTO(BaseModel):
    """Base for every pass-through structure."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """JSON body for a request (unset optional fields are omitted)."""

        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class Credentials(DTO):
    identity: str | None = None
    username: str | None = None
    secret: str | None = None


class User(DTO):
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None
    email: str | None = None
    credentials: Credentials | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None
    profile_picture: str | None = None
    role: str | None = None
    status: str | None = None
    permissions: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    updated_by: str | None = None


class Login(DTO):
    """Identity may be either the email or the username."""

    identity: str
    secret: str


class Token(DTO):
    access_token: str | None = None
    refresh_token: str | None = None
    access_type: str | None = None


class Thing(DTO):
    id: str | None = None
    name: str | None = None
    domain_id: str | None = None
    credentials: Credentials | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None
    status: str | None = None
    permissions: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    updated_by: str | None = None


class Channel(DTO):
    id: str | None = None
    name: str | None = None
    domain_id: str | None = None
    parent_id: str | None = None
    description: str | None = None
    metadata: dict[str, Any] | None = None
    status: str | None = None
    permissions: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    updated_by: str | None = None


class Group(DTO):
    id: str | None = None
    name: str | None = None
    domain_id: str | None = None
    parent_id: str | None = None
    description: str | None = None
    metadata: dict[str, Any] | None = None
    level: int | None = None
    path: str | None = None
    children: list[Group] | None = None
    status: str | None = None
    permissions: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    updated_by: str | None = None


class Domain(DTO):
    id: str | None = None
    name: str | None = None
    alias: str | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None
    status: str | None = None
    permission: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    updated_by: str | None = None


class Invitation(DTO):
    invited_by: str | None = None
    user_id: str | None = None
    domain_id: str | None = None
    token: str | None = None
    relation: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    confirmed_at: datetime | None = None
    resend: bool | None = None


class BootstrapConfig(DTO):
    thing_id: str | None = None
    external_id: str | None = None
    external_key: str | None = None
    thing_key: str | None = None
    channels: list[Any] | None = None
    content: str | None = None
    name: str | None = None
    client_cert: str | None = None
    client_key: str | None = None
    ca_cert: str | None = None
    state: int | None = None


class Cert(DTO):
    thing_id: str | None = None
    cert_serial: str | None = None
    client_key: str | None = None
    client_cert: str | None = None
    expiration: str | None = None


class CertSerials(DTO):
    certs: list[Cert] = Field(default_factory=list)
    total: int | None = None
    offset: int | None = None
    limit: int | None = None


class Revocation(DTO):
    revocation_time: str | None = None


class SenMLMessage(DTO):
    channel: str | None = None
    subtopic: str | None = None
    publisher: str | None = None
    protocol: str | None = None
    name: str | None = None
    unit: str | None = None
    time: float | None = None
    update_time: float | None = None
    value: float | None = None
    string_value: str | None = None
    data_value: str | None = None
    bool_value: bool | None = None
    sum: float | None = None


class Journal(DTO):
    id: str | None = None
    operation: str | None = None
    occurred_at: datetime | None = None
    attributes: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None


class Identity(DTO):
    id: str | None = None


class HealthInfo(DTO):
    status: str | None = None
    version: str | None = None
    commit: str | None = None
    description: str | None = None
    build_time: str | None = None
    instance_id: str | None = None


class Response(DTO):
    """Outcome of a call whose success carries no body."""

    status: int
    message: str


# --- Query parameters -------------------------------------------------------


class PageMetadata(DTO):
    """Query parameters of list endpoints. Unknown filters are passed through."""

    total: int | None = None
    offset: int | None = None
    limit: int | None = None
    name: str | None = None
    email: str | None = None
    identity: str | None = None
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    status: str | None = None
    tag: str | None = None
    metadata: dict[str, Any] | None = None
    visibility: str | None = None
    permission: str | None = None
    list_perms: bool | None = None
    level: int | None = None
    dir: str | None = None
    order: str | None = None
    domain_id: str | None = None
    user_id: str | None = None
    relation: str | None = None
    state: str | None = None


class JournalsPageMetadata(DTO):
    total: int | None = None
    offset: int | None = None
    limit: int | None = None
    operation: str | None = None
    from_: int | None = Field(default=None, alias="from")
    to: int | None = None
    with_attributes: bool | None = None
    with_metadata: bool | None = None
    dir: str | None = None


class MessagesPageMetadata(DTO):
    offset: int | None = None
    limit: int | None = None
    subtopic: str | None = None
    format: str | None = None
    publisher: str | None = None
    protocol: str | None = None
    name: str | None = None
    v: float | None = None
    comparator: str | None = None
    vs: str | None = None
    vb: bool | None = None
    vd: str | None = None
    from_: float | None = Field(default=None, alias="from")
    to: float | None = None
    aggregation: str | None = None
    interval: str | None = None


# --- Pages --------------------------------------------------------------------


class Page(DTO):
    total: int | None = None
    offset: int | None = None
    limit: int | None = None


class UsersPage(Page):
    users: list[User] = Field(default_factory=list)


class ThingsPage(Page):
    things: list[Thing] = Field(default_factory=list)


class ClientsPage(Page):
    clients: list[Thing] = Field(default_factory=list)


class ChannelsPage(Page):
    channels: list[Channel] = Field(default_factory=list)


class GroupsPage(Page):
    groups: list[Group] = Field(default_factory=list)


class DomainsPage(Page):
    domains: list[Domain] = Field(default_factory=list)


class InvitationsPage(Page):
    invitations: list[Invitation] = Field(default_factory=list)


class BootstrapsPage(Page):
    configs: list[BootstrapConfig] = Field(default_factory=list)


class MessagesPage(Page):
    messages: list[SenMLMessage] = Field(default_factory=list)


class JournalsPage(Page):
    journals: list[Journal] = Field(default_factory=list)
