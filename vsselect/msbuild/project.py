"""Extract platforms and configurations from .vcxproj files.

This is a line matcher, not an XML parser. Tags are only captured while
the current line sits inside a configuration-bearing element, tracked
with a single on/off flag.
"""

from __future__ import annotations

import logging
import re

from vsselect.config import ParseResult

logger = logging.getLogger(__name__)

_GROUP_START = (
    '<PropertyGroup Label="Configuration"',
    "<ItemDefinitionGroup Condition=",
    "<ProjectConfiguration",
)
_GROUP_END = (
    "</PropertyGroup>",
    "</ItemDefinitionGroup>",
    "</ProjectConfiguration>",
)

_PLATFORM_RE = re.compile(r"<Platform>(.*)</Platform>")
_CONFIGURATION_RE = re.compile(r"<Configuration>(.*)</Configuration>")


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def parse_project(project_path: str) -> ParseResult:
    """Parse a .vcxproj file and return its platforms and configurations.

    Both lists are deduplicated and sorted. An unreadable file yields empty
    lists with ``error`` set instead of raising.
    """
    logger.debug(f"Parsing project file: {project_path}")
    platforms: list[str] = []
    configurations: list[str] = []
    platform_set: set[str] = set()
    configuration_set: set[str] = set()

    in_config_group = False
    try:
        with open(project_path, "r", encoding="utf-8-sig") as f:
            for line in f:
                if any(marker in line for marker in _GROUP_START):
                    in_config_group = True
                # Both markers on one line leave the group closed.
                if any(marker in line for marker in _GROUP_END):
                    in_config_group = False

                if not in_config_group:
                    continue

                match = _PLATFORM_RE.search(line)
                if match and match.group(1) not in platform_set:
                    platforms.append(match.group(1))
                    platform_set.add(match.group(1))

                match = _CONFIGURATION_RE.search(line)
                if match and match.group(1) not in configuration_set:
                    configurations.append(match.group(1))
                    configuration_set.add(match.group(1))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error opening project file {project_path}: {e}")
        return ParseResult(error=str(e))

    platforms = sorted(_unique(platforms))
    configurations = sorted(_unique(configurations))

    logger.debug(f"Found Platforms: {', '.join(platforms)}")
    logger.debug(f"Found Configurations: {', '.join(configurations)}")

    return ParseResult(platforms=platforms, configurations=configurations)
