from __future__ import annotations

import sys
from typing import Any

import questionary
from questionary import Choice
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

console = Console()


def banner() -> None:
    console.print(
        Panel.fit("[bold]shadcn-remover[/bold]  ·  remove ui components", border_style="dim")
    )


def success(msg: str) -> None:
    console.print(f"[green]✓[/green] {msg}")


def info(msg: str) -> None:
    console.print(f"[dim]→[/dim] {msg}")


def warn(msg: str) -> None:
    console.print(f"[yellow]![/yellow] {msg}")


def error(msg: str) -> None:
    console.print(f"[red]✗[/red] {msg}")


def muted(msg: str) -> None:
    console.print(f"[dim]{msg}[/dim]")


def ask(prompt: str, default: str = "") -> str:
    return Prompt.ask(f"  {prompt}", default=default, console=console)


def confirm(prompt: str, default: bool = False) -> bool:
    try:
        return Confirm.ask(f"  {prompt}", default=default, console=console)
    except EOFError:
        console.print()
        return default


def multi_choose(prompt: str, choices: list[str]) -> list[str]:
    """Let the user tick any subset of ``choices``; nothing ticked means ``[]``."""
    if _can_use_interactive_selector():
        selected = questionary.checkbox(
            f"  {prompt}",
            choices=[Choice(title=c, value=c) for c in choices],
            qmark="",
        ).ask()
        return list(selected) if selected else []

    for i, c in enumerate(choices, 1):
        console.print(f"  [dim]{i}.[/dim] {c}")
    raw = ask(f"{prompt} (comma-separated numbers or names, empty for none)")
    selected: list[str] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        if part in choices:
            choice = part
        else:
            try:
                idx = int(part) - 1
            except ValueError:
                warn(f"Ignoring unknown component '{part}'")
                continue
            if not 0 <= idx < len(choices):
                warn(f"Ignoring out-of-range choice {part}")
                continue
            choice = choices[idx]
        if choice not in selected:
            selected.append(choice)
    return selected


def show_selection(names: list[str]) -> None:
    console.print(f"[cyan]Selected components:[/cyan] {', '.join(names)}")


def spinner(msg: str) -> Any:
    return console.status(f"[dim]{msg}[/dim]", spinner="dots")


def _can_use_interactive_selector() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()
