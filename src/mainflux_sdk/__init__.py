"""Async Python SDK for the Mainflux IoT platform HTTP API."""

from mainflux_sdk.core.config import SDKSettings
from mainflux_sdk.core.domain.models import (
    BootstrapConfig,
    Channel,
    Credentials,
    Domain,
    Group,
    Invitation,
    JournalsPageMetadata,
    Login,
    MessagesPageMetadata,
    PageMetadata,
    Response,
    SenMLMessage,
    Thing,
    Token,
    User,
)
from mainflux_sdk.core.errors import SDKError
from mainflux_sdk.core.logging import configure_logging
from mainflux_sdk.sdk import SDK

__version__ = "0.1.0"

__all__ = [
    "SDK",
    "SDKError",
    "SDKSettings",
    "configure_logging",
    "BootstrapConfig",
    "Channel",
    "Credentials",
    "Domain",
    "Group",
    "Invitation",
    "JournalsPageMetadata",
    "Login",
    "MessagesPageMetadata",
    "PageMetadata",
    "Response",
    "SenMLMessage",
    "Thing",
    "Token",
    "User",
]
