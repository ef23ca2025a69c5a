"""Step-by-step selection of solution, project, platform and configuration.

Each operation takes a ``Selection`` and returns a new one, so the host
decides how to prompt and the session is never shared implicitly. A
``None`` answer cancels the remaining steps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from vsselect.config import ScanError, Selection, SelectorConfig, Step
from vsselect.msbuild.locator import find_build_files
from vsselect.msbuild.project import parse_project
from vsselect.status import relative_path, summary

logger = logging.getLogger(__name__)

_TITLES = {
    Step.SOLUTION: "Select Solution:",
    Step.PROJECT: "Select Project:",
    Step.PLATFORM: "Select Platform:",
    Step.CONFIGURATION: "Select Configuration:",
}


class InvalidChoice(ValueError):
    """Raised when an answer does not fit the pending step."""


@dataclass(frozen=True)
class Prompt:
    step: Step
    title: str
    labels: list[str]
    values: list[str]


@dataclass(frozen=True)
class Halted:
    reason: ScanError


@dataclass(frozen=True)
class Cancelled:
    step: Step


def _first_step(selection: Selection) -> Step:
    return Step.SOLUTION if selection.found_solutions else Step.PROJECT


def _axis_step(selection: Selection, after: Step) -> Step | None:
    """Next step following ``after``, skipping axes the project lacks."""
    if after == Step.PROJECT and selection.available_platforms:
        return Step.PLATFORM
    if after in (Step.PROJECT, Step.PLATFORM) and selection.available_configurations:
        return Step.CONFIGURATION
    return None


def begin(config: SelectorConfig) -> Selection | Halted:
    """Locate build files under ``config.root`` and start a new selection."""
    located = find_build_files(config)
    if not located.ok:
        return Halted(reason=located.error)

    selection = Selection(
        root=located.root,
        found_solutions=located.solutions,
        found_projects=located.projects,
    )
    selection.pending = _first_step(selection)
    return selection


def next_prompt(selection: Selection) -> Prompt | None:
    """Describe the pending step, or return None if the selection is done."""
    step = selection.pending
    if step is None:
        return None

    if step == Step.SOLUTION:
        values = list(selection.found_solutions)
    elif step == Step.PROJECT:
        values = list(selection.found_projects)
    elif step == Step.PLATFORM:
        values = list(selection.available_platforms)
    else:
        values = list(selection.available_configurations)

    if step in (Step.SOLUTION, Step.PROJECT):
        labels = [relative_path(v, selection.root) for v in values]
    else:
        labels = list(values)

    return Prompt(step=step, title=_TITLES[step], labels=labels, values=values)


def _resolve_choice(prompt: Prompt, choice: str) -> str:
    for label, value in zip(prompt.labels, prompt.values):
        if choice in (label, value):
            return value
    raise InvalidChoice(
        f"{choice!r} is not a valid {prompt.step.value}; choose from: {', '.join(prompt.labels)}"
    )


def _advance(selection: Selection, **changes) -> Selection:
    """Copy ``selection`` with ``changes``; list fields are copied too."""
    lists = {
        "found_solutions": list(selection.found_solutions),
        "found_projects": list(selection.found_projects),
        "available_platforms": list(selection.available_platforms),
        "available_configurations": list(selection.available_configurations),
    }
    lists.update(changes)
    return replace(selection, **lists)


def answer(selection: Selection, step: Step, choice: str | None) -> Selection | Cancelled:
    """Apply ``choice`` to the pending ``step`` and advance the session."""
    if selection.pending != step:
        pending = selection.pending.value if selection.pending else "nothing"
        raise InvalidChoice(f"Cannot answer {step.value}; {pending} is pending")

    if choice is None:
        logger.warning(f"{step.value.capitalize()} selection cancelled.")
        return Cancelled(step=step)

    prompt = next_prompt(selection)
    value = _resolve_choice(prompt, choice)

    if step == Step.SOLUTION:
        return _advance(selection, solution=value, pending=Step.PROJECT)

    if step == Step.PROJECT:
        parsed = parse_project(value)
        rel = relative_path(value, selection.root)
        if not parsed.platforms:
            logger.warning(f"No platforms found in {rel}")
        if not parsed.configurations:
            logger.warning(f"No configurations found in {rel}")
        updated = _advance(
            selection,
            project=value,
            platform=None,
            configuration=None,
            available_platforms=parsed.platforms,
            available_configurations=parsed.configurations,
        )
        updated.pending = _axis_step(updated, Step.PROJECT)
        return _finish(updated)

    if step == Step.PLATFORM:
        updated = _advance(selection, platform=value)
        updated.pending = _axis_step(updated, Step.PLATFORM)
        return _finish(updated)

    return _finish(_advance(selection, configuration=value, pending=None))


def _finish(selection: Selection) -> Selection:
    if selection.pending is None:
        logger.info(summary(selection))
    return selection


def clear(selection: Selection) -> Selection:
    """Forget every choice but keep the files already found."""
    cleared = Selection(
        root=selection.root,
        found_solutions=list(selection.found_solutions),
        found_projects=list(selection.found_projects),
    )
    cleared.pending = _first_step(cleared)
    logger.info("VS selection cleared.")
    return cleared
