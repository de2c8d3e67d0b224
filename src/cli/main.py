"""CLI principal (Typer).

Comandos:
- `call`, `call-code`, `call-pool`: originan una llamada y muestran la respuesta.
- `info`: estado de una llamada.
- `doctor`: diagnóstico de configuración y conectividad.

Las credenciales salen de `--login/--password` o de `AppSettings`
(variables `CALL2FA_LOGIN` / `CALL2FA_PASSWORD`). Cualquier `Call2FAError`
se imprime en stderr y termina con código 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
from typing import Callable, Optional

import typer
from rich.console import Console

from adapters.call2fa_client import Client
from cli import doctor
from cli.ui_components import build_response_panel, print_banner, print_error
from core.config import AppSettings
from core.domain.models import JsonValue
from core.errors import Call2FAError
from core.interfaces.call_service import Call2FAService
from core.logger import configure_logging

app = typer.Typer(no_args_is_help=True, help="Rikkicom Call2FA command-line client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@dataclass(frozen=True)
class CliOptions:
    settings: AppSettings
    login: str
    password: str


def _connect(options: CliOptions) -> Client:
    return Client.create(options.login, options.password, settings=options.settings)


def _run(ctx: typer.Context, operation: Callable[[Call2FAService], JsonValue], *, title: str) -> None:
    options: CliOptions = ctx.obj
    try:
        with _connect(options) as service:
            result = operation(service)
    except Call2FAError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc

    _console.print(build_response_panel(result, title=title))


@app.callback()
def main(
    ctx: typer.Context,
    login: Optional[str] = typer.Option(None, "--login", help="API login (default: CALL2FA_LOGIN)."),
    password: Optional[str] = typer.Option(
        None, "--password", help="API password (default: CALL2FA_PASSWORD)."
    ),
    api_version: Optional[str] = typer.Option(None, "--api-version", help="API version segment, e.g. v1."),
    banner: bool = typer.Option(False, "--banner", help="Show the welcome banner."),
) -> None:
    """Rikkicom Call2FA command-line client."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    if api_version:
        settings = settings.model_copy(update={"api_version": api_version})

    secret = settings.password.get_secret_value() if settings.password else ""
    ctx.obj = CliOptions(
        settings=settings,
        login=login or settings.login or "",
        password=password or secret,
    )

    if banner:
        print_banner(_console)


@app.command()
def call(
    ctx: typer.Context,
    phone_number: str = typer.Argument(..., help="Number to call, e.g. +380631010121."),
    callback_url: str = typer.Option("", "--callback-url", help="URL notified with the call result."),
) -> None:
    """Initiate a plain call."""

    _run(ctx, lambda service: service.call(phone_number, callback_url), title="Call initiated")


@app.command(name="call-code")
def call_code(
    ctx: typer.Context,
    phone_number: str = typer.Argument(..., help="Number to call."),
    code: str = typer.Argument(..., help="Verification code spoken during the call."),
    lang: str = typer.Option("en", "--lang", help="Language of the spoken code."),
) -> None:
    """Initiate a call that dictates a verification code."""

    _run(
        ctx,
        lambda service: service.call_with_code(phone_number, code, lang),
        title="Call with code initiated",
    )


@app.command(name="call-pool")
def call_pool(
    ctx: typer.Context,
    phone_number: str = typer.Argument(..., help="Number to call."),
    pool_id: str = typer.Argument(..., help="Pool identifier."),
    six_digits: bool = typer.Option(False, "--six-digits", help="Use the six-digit mode."),
) -> None:
    """Initiate a call via the last digits of a pool number."""

    _run(
        ctx,
        lambda service: service.call_via_last_digits(phone_number, pool_id, six_digits),
        title="Pool call initiated",
    )


@app.command()
def info(
    ctx: typer.Context,
    call_id: str = typer.Argument(..., help="Call identifier returned by a call command."),
) -> None:
    """Show information about a call."""

    _run(ctx, lambda service: service.info(call_id), title=f"Call {call_id}")


@app.command()
def version() -> None:
    """Print the client version."""

    try:
        current = package_version("call2fa-client")
    except PackageNotFoundError:
        current = "unknown"
    _console.print(f"call2fa-client {current}")


def run() -> None:
    app()
