"""vsselect - Pick a Visual Studio solution, project, platform and configuration."""

from vsselect.config import ParseResult, Selection, SelectorConfig
from vsselect.msbuild.locator import find_build_files
from vsselect.msbuild.project import parse_project

__version__ = "0.1.0"
__all__ = ["find_build_files", "parse_project", "ParseResult", "Selection", "SelectorConfig"]
