from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.logging import RichHandler

from shadcn_remover import __version__, ui
from shadcn_remover.commands import remove_cmd
from shadcn_remover.config import RunOptions


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=ui.console, show_path=False)],
    )


@click.command(name="shadcn-remover")
@click.argument("components", nargs=-1)
@click.option(
    "-d",
    "--dry-run",
    is_flag=True,
    help="Show what would be removed without actually removing files.",
)
@click.option(
    "-a",
    "--all",
    "remove_all",
    is_flag=True,
    help="Attempt to remove all detected shadcn/ui components.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug details.")
@click.version_option(__version__, prog_name="shadcn-remover")
def main(components: tuple[str, ...], dry_run: bool, remove_all: bool, verbose: bool) -> None:
    """Remove shadcn/ui components from src/components/ui.

    COMPONENTS are specific component names to remove (e.g. button card dialog).
    With no names and no --all, pick them interactively.
    """
    _configure_logging(verbose)
    remove_cmd.run(
        RunOptions(
            components=components,
            dry_run=dry_run,
            remove_all=remove_all,
            cwd=Path.cwd(),
        )
    )


if __name__ == "__main__":
    main()
