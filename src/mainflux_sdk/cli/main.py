"""`mfsdk` command line.

Thin commands over the SDK: each one performs a single API call and renders
the result with Rich.
"""

from __future__ import annotations

import asyncio
import json
from typing import Awaitable, Optional, TypeVar

import typer
from rich.console import Console

from mainflux_sdk.cli import doctor
from mainflux_sdk.cli.ui_components import build_page_table, print_entity, print_error
from mainflux_sdk.core.config import SDKSettings
from mainflux_sdk.core.domain.models import (
    Channel,
    JournalsPageMetadata,
    Login,
    MessagesPageMetadata,
    PageMetadata,
    Thing,
)
from mainflux_sdk.core.errors import SDKError
from mainflux_sdk.core.logging import configure_logging
from mainflux_sdk.sdk import SDK

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Command line client for the Mainflux HTTP API.")
users_app = typer.Typer(no_args_is_help=True, help="Users: login, lookup and listing.")
things_app = typer.Typer(no_args_is_help=True, help="Things: create, inspect, list and delete.")
channels_app = typer.Typer(no_args_is_help=True, help="Channels and thing connections.")
messages_app = typer.Typer(no_args_is_help=True, help="Publish and read channel messages.")
journal_app = typer.Typer(no_args_is_help=True, help="Entity journals.")

app.add_typer(doctor.app, name="doctor")
app.add_typer(users_app, name="users")
app.add_typer(things_app, name="things")
app.add_typer(channels_app, name="channels")
app.add_typer(messages_app, name="messages")
app.add_typer(journal_app, name="journal")

_console = Console()

TokenOption = typer.Option(None, "--token", "-t", help="Access token (defaults to MF_SDK_TOKEN).")
OffsetOption = typer.Option(0, "--offset", min=0)
LimitOption = typer.Option(10, "--limit", min=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request."),
) -> None:
    settings = SDKSettings()
    configure_logging("DEBUG" if verbose else settings.log_level, settings.json_logs)


def _sdk() -> SDK:
    return SDK(SDKSettings())


def _token(token: Optional[str]) -> str:
    value = token or SDKSettings().token
    if not value:
        raise typer.BadParameter("an access token is required (--token or MF_SDK_TOKEN)")
    return value


def _json_object(value: str, option: str) -> dict:
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"invalid JSON: {exc.msg}", param_hint=option) from exc
    if not isinstance(parsed, dict):
        raise typer.BadParameter("expected a JSON object", param_hint=option)
    return parsed


def _call(coro: Awaitable[T]) -> T:
    """Run one SDK call; API errors end the command with exit code 1."""

    try:
        return asyncio.run(coro)
    except SDKError as exc:
        print_error(_console, f"Error {exc.status_code}: {exc.message}")
        raise typer.Exit(code=1) from exc


# --- users ----------------------------------------------------------------------


@users_app.command("login")
def users_login(
    identity: str = typer.Argument(..., help="Email or username."),
    secret: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """Issue an access/refresh token pair."""

    token = _call(_sdk().users.create_token(Login(identity=identity, secret=secret)))
    print_entity(_console, token, title="Token")


@users_app.command("get")
def users_get(user_id: str, token: Optional[str] = TokenOption) -> None:
    user = _call(_sdk().users.user(user_id, _token(token)))
    print_entity(_console, user, title="User")


@users_app.command("profile")
def users_profile(token: Optional[str] = TokenOption) -> None:
    """The user owning the token."""

    user = _call(_sdk().users.user_profile(_token(token)))
    print_entity(_console, user, title="Profile")


@users_app.command("list")
def users_list(
    offset: int = OffsetOption,
    limit: int = LimitOption,
    name: Optional[str] = typer.Option(None, "--name"),
    token: Optional[str] = TokenOption,
) -> None:
    page = _call(_sdk().users.users(PageMetadata(offset=offset, limit=limit, name=name), _token(token)))
    _console.print(build_page_table("Users", ("id", "name", "email", "status"), page.users, page=page))


# --- things ---------------------------------------------------------------------


@things_app.command("create")
def things_create(
    name: str,
    metadata: Optional[str] = typer.Option(None, "--metadata", help="JSON object."),
    token: Optional[str] = TokenOption,
) -> None:
    thing = Thing(name=name, metadata=_json_object(metadata, "--metadata") if metadata else None)
    created = _call(_sdk().things.create(thing, _token(token)))
    print_entity(_console, created, title="Thing")


@things_app.command("get")
def things_get(thing_id: str, token: Optional[str] = TokenOption) -> None:
    thing = _call(_sdk().things.thing(thing_id, _token(token)))
    print_entity(_console, thing, title="Thing")


@things_app.command("list")
def things_list(
    offset: int = OffsetOption,
    limit: int = LimitOption,
    name: Optional[str] = typer.Option(None, "--name"),
    token: Optional[str] = TokenOption,
) -> None:
    page = _call(_sdk().things.things(PageMetadata(offset=offset, limit=limit, name=name), _token(token)))
    _console.print(build_page_table("Things", ("id", "name", "status"), page.things, page=page))


@things_app.command("delete")
def things_delete(thing_id: str, token: Optional[str] = TokenOption) -> None:
    result = _call(_sdk().things.delete_thing(thing_id, _token(token)))
    _console.print(f"[green]{result.message}[/green] ({result.status})")


# --- channels -------------------------------------------------------------------


@channels_app.command("create")
def channels_create(
    name: str,
    description: Optional[str] = typer.Option(None, "--description"),
    token: Optional[str] = TokenOption,
) -> None:
    created = _call(_sdk().channels.create(Channel(name=name, description=description), _token(token)))
    print_entity(_console, created, title="Channel")


@channels_app.command("get")
def channels_get(channel_id: str, token: Optional[str] = TokenOption) -> None:
    channel = _call(_sdk().channels.channel(channel_id, _token(token)))
    print_entity(_console, channel, title="Channel")


@channels_app.command("list")
def channels_list(
    offset: int = OffsetOption,
    limit: int = LimitOption,
    token: Optional[str] = TokenOption,
) -> None:
    page = _call(_sdk().channels.channels(PageMetadata(offset=offset, limit=limit), _token(token)))
    _console.print(build_page_table("Channels", ("id", "name", "status"), page.channels, page=page))


@channels_app.command("connect")
def channels_connect(thing_id: str, channel_id: str, token: Optional[str] = TokenOption) -> None:
    result = _call(_sdk().channels.connect_thing(thing_id, channel_id, _token(token)))
    _console.print(f"[green]{result.message}[/green]")


@channels_app.command("disconnect")
def channels_disconnect(thing_id: str, channel_id: str, token: Optional[str] = TokenOption) -> None:
    result = _call(_sdk().channels.disconnect_thing(thing_id, channel_id, _token(token)))
    _console.print(f"[green]{result.message}[/green]")


# --- messages -------------------------------------------------------------------


@messages_app.command("send")
def messages_send(
    channel_id: str,
    payload: str = typer.Argument(..., help='SenML JSON, e.g. \'[{"n":"temp","v":21.5}]\'.'),
    thing_key: str = typer.Option(..., "--thing-key", "-k", help="Secret of the publishing thing."),
) -> None:
    result = _call(_sdk().messages.send(channel_id, payload, thing_key))
    _console.print(f"[green]{result.message}[/green]")


@messages_app.command("read")
def messages_read(
    channel_id: str,
    offset: int = OffsetOption,
    limit: int = LimitOption,
    token: Optional[str] = TokenOption,
) -> None:
    query = MessagesPageMetadata(offset=offset, limit=limit)
    page = _call(_sdk().messages.read(channel_id, query, _token(token)))
    _console.print(
        build_page_table("Messages", ("publisher", "name", "value", "unit", "time"), page.messages, page=page)
    )


# --- journal --------------------------------------------------------------------


@journal_app.command("list")
def journal_list(
    entity_type: str = typer.Argument(..., help="thing, channel, group, user, ..."),
    entity_id: str = typer.Argument(...),
    domain_id: str = typer.Option(..., "--domain", "-d"),
    offset: int = OffsetOption,
    limit: int = LimitOption,
    token: Optional[str] = TokenOption,
) -> None:
    query = JournalsPageMetadata(offset=offset, limit=limit)
    page = _call(_sdk().journal.journal(entity_type, entity_id, domain_id, query, _token(token)))
    _console.print(build_page_table("Journal", ("operation", "occurred_at", "id"), page.journals, page=page))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
