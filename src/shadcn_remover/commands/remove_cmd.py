from __future__ import annotations

from typing import Callable

from shadcn_remover import ui
from shadcn_remover.config import RunOptions
from shadcn_remover.inventory import ComponentsDirError
from shadcn_remover.removal import RunSummary, remove_components
from shadcn_remover.selection import Prompt, resolve_selection


def run(
    options: RunOptions,
    prompt: Prompt | None = None,
    confirm: Callable[..., bool] | None = None,
) -> RunSummary | None:
    """Select, confirm and remove components. Returns ``None`` when nothing ran."""
    ui.banner()
    root = options.components_dir
    try:
        selected = resolve_selection(options.components, options.remove_all, root, prompt=prompt)
    except ComponentsDirError as e:
        ui.error(str(e))
        ui.warn(
            "Please ensure you are running this command from the root of your project "
            "and the path is correct."
        )
        raise SystemExit(1)
    if not selected:
        return None

    ui.show_selection(selected)
    count = len(selected)
    question = (
        f"Dry run: Show removal actions for {count} component(s)?"
        if options.dry_run
        else f"Are you sure you want to permanently remove {count} component(s)?"
    )
    if not (confirm or ui.confirm)(question, default=False):
        ui.muted("Operation cancelled by user.")
        return None

    status = "Simulating component removal..." if options.dry_run else "Removing components..."
    with ui.spinner(status):
        summary = remove_components(selected, root, dry_run=options.dry_run, cwd=options.cwd)

    for failure in summary.failures:
        ui.error(f"Failed processing component: {failure.reason}")

    if summary.fail_count:
        ui.warn(
            f"Completed with {summary.fail_count} error(s). "
            f"{summary.success_count} component(s) processed."
        )
        raise SystemExit(1)
    if options.dry_run:
        ui.success(
            f"Dry run complete. {summary.success_count} component(s) simulated for removal."
        )
    else:
        ui.success(f"Successfully removed {summary.success_count} component(s).")
    return summary
