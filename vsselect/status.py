"""Human-readable renderings of a selection."""

from __future__ import annotations

import os

from vsselect.config import Selection

STATUS_ICON = "\U000f070c"


def relative_path(path: str, root: str) -> str:
    """Return ``path`` relative to ``root`` with "/" separators.

    Paths outside ``root`` come back normalised but otherwise unchanged.
    """
    path_norm = path.replace("\\", "/")
    root_norm = root.replace("\\", "/")
    if not root_norm.endswith("/"):
        root_norm += "/"

    path_compare, root_compare = path_norm, root_norm
    if os.name == "nt":
        path_compare = path_compare.lower()
        root_compare = root_compare.lower()

    if path_compare.startswith(root_compare):
        return path_norm[len(root_norm):]
    return path_norm


def _stem(path: str) -> str:
    return os.path.splitext(os.path.basename(path.replace("\\", "/")))[0]


def summary(selection: Selection) -> str:
    parts = []
    if selection.solution:
        parts.append(f"Sln: {relative_path(selection.solution, selection.root)}")
    if selection.project:
        parts.append(f"Proj: {relative_path(selection.project, selection.root)}")
    if selection.platform:
        parts.append(f"Plat: {selection.platform}")
    if selection.configuration:
        parts.append(f"Cfg: {selection.configuration}")

    if not parts:
        return "No complete selection made."
    return "Selected: " + " | ".join(parts)


def statusline(selection: Selection) -> str:
    """Compact status text, e.g. ``VS[S:App|P:Core|x64|Debug]``.

    Solution and project are shown by file name without extension.
    Returns an empty string when nothing has been chosen.
    """
    parts = []
    if selection.solution:
        parts.append(f"S:{_stem(selection.solution)}")
    if selection.project:
        parts.append(f"P:{_stem(selection.project)}")
    if selection.platform:
        parts.append(selection.platform)
    if selection.configuration:
        parts.append(selection.configuration)

    if not parts:
        return ""
    return f"{STATUS_ICON} VS[{'|'.join(parts)}]"
