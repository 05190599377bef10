"""Doctor command: service reachability and local configuration."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console

from mainflux_sdk.cli.ui_components import build_health_table
from mainflux_sdk.core.config import SDKSettings, get_user_env_file, write_user_env_vars
from mainflux_sdk.core.errors import SDKError
from mainflux_sdk.sdk import SDK

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration.")

_console = Console()


async def _check_service(sdk: SDK, service: str) -> tuple[bool, str]:
    try:
        info = await sdk.health(service)
    except (SDKError, httpx.HTTPError, ValueError) as exc:
        return False, str(exc) or exc.__class__.__name__
    detail = info.status or "ok"
    if info.version:
        detail = f"{detail} (version {info.version})"
    return True, detail


async def _check_all(settings: SDKSettings) -> list[tuple[str, str, bool, str]]:
    sdk = SDK(settings)
    urls = settings.service_urls()
    results = await asyncio.gather(*(_check_service(sdk, name) for name in urls))
    return [(name, urls[name], ok, detail) for name, (ok, detail) in zip(urls, results)]


@app.command()
def run() -> None:
    """Query /health on every configured service."""

    settings = SDKSettings()

    table = build_health_table()
    failures = 0
    for name, url, ok, detail in asyncio.run(_check_all(settings)):
        if not ok:
            failures += 1
        table.add_row(name, "OK" if ok else "FAIL", f"{url} • {detail}")

    if settings.token:
        table.add_row("token", "OK", "Token configured")
    else:
        table.add_row("token", "OPTIONAL", "No token set -> pass --token to commands")

    _console.print(table)
    if failures:
        raise typer.Exit(code=1)


@app.command(name="configure")
def configure() -> None:
    """Interactive setup; values are stored in the user config .env."""

    settings = SDKSettings()
    host = typer.prompt("Platform host (leave empty to enter each URL)", default="", show_default=False).strip()

    values: dict[str, str | None] = {}
    for name, field_name in (
        ("users", "users_url"),
        ("things", "things_url"),
        ("domains", "domains_url"),
        ("invitations", "invitations_url"),
        ("bootstrap", "bootstrap_url"),
        ("certs", "certs_url"),
        ("http adapter", "http_adapter_url"),
        ("readers", "readers_url"),
        ("journal", "journals_url"),
    ):
        current = getattr(settings, field_name)
        if host:
            port = httpx.URL(current).port
            default = f"{host.rstrip('/')}:{port}" if port else host
        else:
            default = current
        url = typer.prompt(f"{name} URL", default=default, show_default=True).strip()
        values[f"MF_SDK_{field_name.upper()}"] = url

    token = typer.prompt("Access token (optional)", default="", hide_input=True, show_default=False).strip()
    if token:
        values["MF_SDK_TOKEN"] = token

    env_path = write_user_env_vars(values, get_user_env_file())
    _console.print(f"[green]Saved configuration to:[/green] {env_path}")
