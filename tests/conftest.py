from __future__ import annotations

import contextlib
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture()
def project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """A project root with an empty ``src/components/ui`` and cwd set to it."""
    root = tmp_path / "project"
    (root / "src" / "components" / "ui").mkdir(parents=True)
    monkeypatch.chdir(root)
    return root


@pytest.fixture()
def ui_dir(project: Path) -> Path:
    return project / "src" / "components" / "ui"


@pytest.fixture()
def sample_components(ui_dir: Path) -> Path:
    (ui_dir / "button.tsx").write_text("export function Button() {}\n")
    (ui_dir / "card").mkdir()
    (ui_dir / "card" / "card.tsx").write_text("export function Card() {}\n")
    (ui_dir / ".hidden").write_text("")
    (ui_dir / "index.tsx").write_text("export * from './button'\n")
    return ui_dir


@pytest.fixture()
def ui_log(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, str]]:
    """Silence terminal output and record ``(level, message)`` pairs instead."""
    from shadcn_remover import ui

    log: list[tuple[str, str]] = []
    for fn in ("info", "success", "warn", "error", "muted"):
        monkeypatch.setattr(ui, fn, lambda msg, level=fn: log.append((level, msg)))
    monkeypatch.setattr(ui, "banner", lambda: None)
    monkeypatch.setattr(
        ui, "show_selection", lambda names: log.append(("selection", ", ".join(names)))
    )
    monkeypatch.setattr(ui, "spinner", lambda _msg: contextlib.nullcontext())
    return log
