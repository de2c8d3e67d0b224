"""Componentes de UI para CLI (Rich).

Separa los detalles visuales de la lógica de los comandos.
"""

from __future__ import annotations

import json
from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("Call2FA", style="bold cyan")
    subtitle = Text("Two-factor authentication by phone call", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_response_panel(payload: Any, *, title: str = "Response") -> Panel:
    """Panel con la respuesta JSON del servicio, con indentación estable."""

    rendered = json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
    return Panel(
        Syntax(rendered, "json", word_wrap=True),
        title=Text(title, style="bold green"),
        border_style="green",
    )


def print_error(console: Console, error: Exception) -> None:
    console.print(Text("Something went wrong:", style="bold red"))
    console.print(Text(str(error), style="red"))
