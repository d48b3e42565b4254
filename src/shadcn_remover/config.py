from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

COMPONENTS_SUBDIR = Path("src") / "components" / "ui"
COMPONENT_SUFFIX = ".tsx"
INDEX_NAME = "index"


def components_dir(cwd: Path | None = None) -> Path:
    return (cwd or Path.cwd()) / COMPONENTS_SUBDIR


@dataclass(frozen=True)
class RunOptions:
    """Everything a single removal run needs, resolved up front by the CLI."""

    components: tuple[str, ...] = ()
    dry_run: bool = False
    remove_all: bool = False
    cwd: Path = field(default_factory=Path.cwd)

    @property
    def components_dir(self) -> Path:
        return components_dir(self.cwd)
