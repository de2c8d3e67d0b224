"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    """Any HTTP answer from the base URI counts as reachable."""

    try:
        with build_client(settings) as client:
            response = client.get(settings.normalized_base_uri())
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Call2FA Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URI", "OK", settings.normalized_base_uri())
    table.add_row("API version", "OK", settings.api_version)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    has_credentials = bool(settings.login) and settings.password is not None
    if has_credentials:
        table.add_row("Credentials", "OK", "CALL2FA_LOGIN / CALL2FA_PASSWORD set")
    else:
        table.add_row("Credentials", "MISSING", "Pass --login/--password or set CALL2FA_LOGIN / CALL2FA_PASSWORD")

    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not has_credentials:
        _console.print(f"\n[yellow]Note:[/yellow] credentials can also live in {get_user_env_file()}")
    if not ok_http:
        raise typer.Exit(code=1)
