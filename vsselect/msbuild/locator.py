"""Recursive discovery of .sln and .vcxproj files."""

from __future__ import annotations

import logging
import os

from vsselect.config import LocatorResult, ScanError, SelectorConfig

logger = logging.getLogger(__name__)


def find_build_files(config: SelectorConfig) -> LocatorResult:
    """Walk ``config.root`` and collect solution and project file paths.

    Paths are absolute. A tree without solutions is fine; a tree without
    projects is reported as ``ScanError.NO_PROJECTS`` so callers can stop
    before asking for a selection.
    """
    root = os.path.abspath(config.root)
    result = LocatorResult(root=root)

    if not os.path.isdir(root):
        logger.error(f"Directory not found: {root}")
        result.error = ScanError.DIRECTORY_NOT_FOUND
        return result

    logger.debug(f"Scanning for {config.solution_extension} and {config.project_extension} files in {root}")

    solution_ext = config.solution_extension.lower()
    project_ext = config.project_extension.lower()
    ignore_set = set(config.exclude_patterns)
    root_unreadable = False

    def _on_error(err: OSError) -> None:
        nonlocal root_unreadable
        if err.filename and os.path.abspath(err.filename) == root:
            root_unreadable = True
            return
        logger.warning(f"Skipping unreadable directory {err.filename}: {err.strerror}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames[:] = [d for d in sorted(dirnames) if d not in ignore_set]

        for filename in sorted(filenames):
            ext = os.path.splitext(filename)[1].lower()
            if ext == solution_ext:
                result.solutions.append(os.path.join(dirpath, filename))
            elif ext == project_ext:
                result.projects.append(os.path.join(dirpath, filename))

    if root_unreadable:
        logger.error(f"Cannot read directory: {root}")
        result.error = ScanError.DIRECTORY_NOT_FOUND
        return result

    if not result.solutions:
        logger.warning(f"No {config.solution_extension} files found in the directory tree.")
    if not result.projects:
        logger.warning(f"No {config.project_extension} files found in the directory tree.")
        result.error = ScanError.NO_PROJECTS
        return result

    logger.debug(f"Found {len(result.solutions)} solution(s) and {len(result.projects)} project(s).")
    return result
