from __future__ import annotations

from pathlib import Path

import pytest

from shadcn_remover.inventory import ComponentsDirError, component_name, list_components


def test_list_components_strips_suffix_and_skips_hidden_and_index(
    sample_components: Path,
) -> None:
    names = list_components(sample_components)

    assert sorted(names) == ["button", "card"]
    assert len(names) == len(set(names))


def test_list_components_reports_file_and_directory_with_same_name_once(ui_dir: Path) -> None:
    (ui_dir / "dialog.tsx").write_text("")
    (ui_dir / "dialog").mkdir()
    (ui_dir / ".dialog.tsx").write_text("")

    assert list_components(ui_dir) == ["dialog"]


def test_list_components_empty_directory(ui_dir: Path) -> None:
    assert list_components(ui_dir) == []


def test_list_components_missing_directory_is_fatal(tmp_path: Path) -> None:
    missing = tmp_path / "src" / "components" / "ui"

    with pytest.raises(ComponentsDirError, match="Directory not found") as exc:
        list_components(missing)
    assert exc.value.path == missing


def test_list_components_wraps_read_errors(ui_dir: Path, monkeypatch) -> None:
    def boom(_self):
        raise PermissionError("permission denied")

    monkeypatch.setattr(Path, "iterdir", boom)

    with pytest.raises(ComponentsDirError, match="permission denied"):
        list_components(ui_dir)


def test_component_name_only_strips_one_trailing_suffix() -> None:
    assert component_name("button.tsx") == "button"
    assert component_name("button.tsx.tsx") == "button.tsx"
    assert component_name("button.ts") == "button.ts"
    assert component_name("card") == "card"
