from __future__ import annotations

import logging
from pathlib import Path

from shadcn_remover.config import COMPONENT_SUFFIX, INDEX_NAME

logger = logging.getLogger(__name__)


class ComponentsDirError(RuntimeError):
    """The components directory is missing or cannot be read."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"Directory not found: {path}" if not reason else f"Error reading {path}: {reason}"
        super().__init__(msg)


def component_name(entry: str) -> str:
    if entry.endswith(COMPONENT_SUFFIX):
        return entry[: -len(COMPONENT_SUFFIX)]
    return entry


def list_components(root: Path) -> list[str]:
    """Component names found directly under ``root``, in listing order.

    ``button.tsx`` and ``card/`` yield ``button`` and ``card``; dot-entries and
    ``index`` are skipped. Names that normalize to the same identifier are
    reported once.
    """
    if not root.is_dir():
        raise ComponentsDirError(root)
    try:
        entries = [p.name for p in root.iterdir()]
    except OSError as e:
        raise ComponentsDirError(root, str(e)) from e

    names: dict[str, None] = {}
    for entry in entries:
        name = component_name(entry)
        if name.startswith(".") or name == INDEX_NAME:
            continue
        names[name] = None
    logger.debug("Found %d component(s) in %s: %s", len(names), root, ", ".join(names))
    return list(names)
