from __future__ import annotations

import asyncio
import logging
import os
import shutil
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from shadcn_remover import ui
from shadcn_remover.config import COMPONENT_SUFFIX

logger = logging.getLogger(__name__)


class TargetKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


class OutcomeStatus(str, Enum):
    REMOVED = "removed"
    SIMULATED = "simulated"
    NOT_FOUND = "not-found"
    ERROR = "error"


class ComponentNotFoundError(LookupError):
    """Neither ``<name>/`` nor ``<name>.tsx`` exists in the components directory."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Component not found: {name}")


class ComponentRemovalError(RuntimeError):
    """Deleting a resolved target failed; the ``OSError`` is chained as the cause."""

    def __init__(self, name: str, target: RemovalTarget, cause: OSError) -> None:
        self.name = name
        self.target = target
        self.cause = cause
        super().__init__(str(cause))


@dataclass(frozen=True)
class RemovalTarget:
    path: Path
    kind: TargetKind


@dataclass(frozen=True)
class RemovalOutcome:
    name: str
    status: OutcomeStatus
    target: RemovalTarget | None = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status in (OutcomeStatus.REMOVED, OutcomeStatus.SIMULATED)


@dataclass
class RunSummary:
    outcomes: list[RemovalOutcome] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def fail_count(self) -> int:
        return len(self.outcomes) - self.success_count

    @property
    def failures(self) -> list[RemovalOutcome]:
        return [o for o in self.outcomes if not o.ok]


def _is_direct_child(path: Path, root: Path) -> bool:
    # Lexical check so symlinked components still count as children of root.
    return Path(os.path.abspath(path)).parent == Path(os.path.abspath(root))


def resolve_target(name: str, root: Path) -> RemovalTarget | None:
    """Find what ``name`` refers to directly inside ``root``.

    A directory shadows a same-named .tsx file. Names that would point
    outside ``root`` (absolute paths, ``..``, nested paths) resolve to nothing.
    """
    if not name or Path(name).is_absolute():
        return None
    dir_path = root / name
    file_path = root / f"{name}{COMPONENT_SUFFIX}"
    if not (_is_direct_child(dir_path, root) and _is_direct_child(file_path, root)):
        return None
    if dir_path.is_dir():
        return RemovalTarget(dir_path, TargetKind.DIRECTORY)
    if file_path.exists():
        return RemovalTarget(file_path, TargetKind.FILE)
    return None


def _delete(target: RemovalTarget) -> None:
    if target.kind is TargetKind.DIRECTORY and not target.path.is_symlink():
        shutil.rmtree(target.path)
    else:
        target.path.unlink()


async def remove_one(
    name: str, root: Path, dry_run: bool = False, cwd: Path | None = None
) -> RemovalOutcome:
    """Remove (or, with ``dry_run``, describe removing) a single component.

    Raises ``ComponentNotFoundError`` when nothing matches ``name`` and
    ``ComponentRemovalError`` (chained to the ``OSError``) when deletion fails.
    """
    target = await asyncio.to_thread(resolve_target, name, root)
    if target is None:
        ui.warn(
            f'Component "{name}" not found '
            f"(checked for {name}{COMPONENT_SUFFIX} and directory {name})"
        )
        raise ComponentNotFoundError(name)

    rel = os.path.relpath(target.path, cwd or Path.cwd())
    if dry_run:
        ui.warn(f"[Dry Run] Would remove {target.kind.value}: {rel}")
        return RemovalOutcome(name, OutcomeStatus.SIMULATED, target)

    logger.debug("Deleting %s %s", target.kind.value, target.path)
    try:
        await asyncio.to_thread(_delete, target)
    except OSError as e:
        ui.error(f"Failed to remove {target.kind.value}: {name} ({e})")
        raise ComponentRemovalError(name, target, e) from e
    ui.success(f"Removed {target.kind.value}: {rel}")
    return RemovalOutcome(name, OutcomeStatus.REMOVED, target)


async def remove_many(
    names: Sequence[str], root: Path, dry_run: bool = False, cwd: Path | None = None
) -> RunSummary:
    """Run ``remove_one`` for every name at once and wait for all of them.

    One component failing never stops the others; outcomes keep input order.
    """
    results = await asyncio.gather(
        *(remove_one(name, root, dry_run=dry_run, cwd=cwd) for name in names),
        return_exceptions=True,
    )
    summary = RunSummary()
    for name, result in zip(names, results):
        if isinstance(result, ComponentNotFoundError):
            summary.outcomes.append(
                RemovalOutcome(name, OutcomeStatus.NOT_FOUND, reason=str(result))
            )
        elif isinstance(result, ComponentRemovalError):
            summary.outcomes.append(
                RemovalOutcome(name, OutcomeStatus.ERROR, result.target, reason=str(result))
            )
        elif isinstance(result, Exception):
            summary.outcomes.append(RemovalOutcome(name, OutcomeStatus.ERROR, reason=str(result)))
        elif isinstance(result, BaseException):
            raise result
        else:
            summary.outcomes.append(result)
    logger.debug(
        "Removal finished: %d succeeded, %d failed", summary.success_count, summary.fail_count
    )
    return summary


def remove_components(
    names: Sequence[str], root: Path, dry_run: bool = False, cwd: Path | None = None
) -> RunSummary:
    return asyncio.run(remove_many(names, root, dry_run=dry_run, cwd=cwd))
