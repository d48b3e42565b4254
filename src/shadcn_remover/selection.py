from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Callable

from shadcn_remover import ui
from shadcn_remover.inventory import list_components

Prompt = Callable[[str, list[str]], list[str]]

SELECT_PROMPT = "Select components to remove:"


def resolve_selection(
    names: Sequence[str],
    remove_all: bool,
    root: Path,
    prompt: Prompt | None = None,
) -> list[str]:
    """Decide which components this run acts on.

    ``--all`` wins over explicit names, explicit names are taken as given, and
    otherwise the user picks from the inventory. An empty result means there
    is nothing to do. ``ComponentsDirError`` from the inventory propagates.
    """
    if remove_all:
        selected = _all_components(names, root)
        if not selected:
            return []
    elif names:
        selected = list(names)
    else:
        available = list_components(root)
        if not available:
            ui.warn("No components found to select from in components/ui directory.")
            return []
        selected = (prompt or ui.multi_choose)(SELECT_PROMPT, available)

    if not selected:
        ui.warn("No components selected or specified for removal. Exiting.")
        return []
    return list(selected)


def _all_components(names: Sequence[str], root: Path) -> list[str]:
    if names:
        ui.warn(
            "Specific components provided along with --all flag. "
            "Ignoring specific components and removing all."
        )
    available = list_components(root)
    if not available:
        ui.warn("No components found in components/ui directory.")
        return []
    ui.info(f"Attempting to remove all {len(available)} detected components.")
    return available
