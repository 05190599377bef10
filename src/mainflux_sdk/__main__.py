"""Allows `python -m mainflux_sdk ...`."""

from __future__ import annotations

from mainflux_sdk.cli.main import run

if __name__ == "__main__":
    run()
