"""SDK configuration.

Why here:
- Centralises environment variables (pydantic-settings) away from the CLI.
- Lets every resource client read its base URL in the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "mainflux-sdk"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "mainflux-sdk"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "mainflux-sdk"
    return Path.home() / ".config" / "mainflux-sdk"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write or update variables in the user-level .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# mainflux-sdk user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class SDKSettings(BaseSettings):
    """Base URLs and transport options for every platform service.

    Defaults match a local docker-compose deployment of the platform.
    """

    model_config = SettingsConfigDict(
        env_prefix="MF_SDK_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (development), then the user-level one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    users_url: str = Field(
        default="http://localhost:9002",
        min_length=1,
        description="Users service (users, groups, password reset).",
    )
    things_url: str = Field(
        default="http://localhost:9000",
        min_length=1,
        description="Things service (things and channels).",
    )
    clients_url: str | None = Field(
        default=None,
        description="Service answering per-user client/channel listings; defaults to users_url.",
    )
    domains_url: str = Field(
        default="http://localhost:8189",
        min_length=1,
        description="Domains service.",
    )
    invitations_url: str = Field(
        default="http://localhost:9020",
        min_length=1,
        description="Invitations service.",
    )
    bootstrap_url: str = Field(
        default="http://localhost:9013",
        min_length=1,
        description="Bootstrap service.",
    )
    certs_url: str = Field(
        default="http://localhost:9019",
        min_length=1,
        description="Certs service.",
    )
    http_adapter_url: str = Field(
        default="http://localhost:8008",
        min_length=1,
        description="HTTP adapter used to publish messages.",
    )
    readers_url: str = Field(
        default="http://localhost:9011",
        min_length=1,
        description="Readers service used to fetch stored messages.",
    )
    journals_url: str = Field(
        default="http://localhost:9021",
        min_length=1,
        description="Journal service.",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. None leaves requests unbounded.",
    )
    user_agent: str = Field(
        default="mainflux-sdk/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    token: str | None = Field(
        default=None,
        description="Access token used by the CLI when --token is not given.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level applied by configure_logging().",
    )
    json_logs: bool = Field(
        default=False,
        description="Render log events as JSON instead of console lines.",
    )

    def service_urls(self) -> dict[str, str]:
        """Base URL of every service, keyed by service name."""

        return {
            "users": self.users_url,
            "things": self.things_url,
            "domains": self.domains_url,
            "invitations": self.invitations_url,
            "bootstrap": self.bootstrap_url,
            "certs": self.certs_url,
            "http-adapter": self.http_adapter_url,
            "readers": self.readers_url,
            "journal": self.journals_url,
        }
