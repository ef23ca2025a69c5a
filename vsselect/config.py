"""Core data types and configuration for VS project selection."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum


class ScanError(str, Enum):
    DIRECTORY_NOT_FOUND = "directory_not_found"
    NO_PROJECTS = "no_projects"


class Step(str, Enum):
    SOLUTION = "solution"
    PROJECT = "project"
    PLATFORM = "platform"
    CONFIGURATION = "configuration"


@dataclass
class SelectorConfig:
    root: str = field(default_factory=os.getcwd)
    solution_extension: str = ".sln"
    project_extension: str = ".vcxproj"
    exclude_patterns: list[str] = field(default_factory=list)
    output_path: str = ".vsselect.json"
    verbose: bool = False
    quiet: bool = False


@dataclass
class ParseResult:
    """Platforms and configurations declared by one project file."""
    platforms: list[str] = field(default_factory=list)
    configurations: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LocatorResult:
    """Solution and project files found under a root directory."""
    root: str
    solutions: list[str] = field(default_factory=list)
    projects: list[str] = field(default_factory=list)
    error: ScanError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class Selection:
    """Caller-owned selection session.

    Holds the files found under ``root``, the choices made so far and the
    axes offered by the chosen project. ``pending`` is the next step to
    answer, or None once the selection is complete.
    """
    root: str
    found_solutions: list[str] = field(default_factory=list)
    found_projects: list[str] = field(default_factory=list)
    solution: str | None = None
    project: str | None = None
    platform: str | None = None
    configuration: str | None = None
    available_platforms: list[str] = field(default_factory=list)
    available_configurations: list[str] = field(default_factory=list)
    pending: Step | None = None

    def payload(self) -> dict[str, str | None]:
        """Return the values handed to build-database generation."""
        return {
            "solution": self.solution,
            "project": self.project,
            "platform": self.platform,
            "configuration": self.configuration,
        }
