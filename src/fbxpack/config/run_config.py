"""Invocation parameters for one pipeline run."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional


class BuildConfiguration(Enum):
    """CMake build configurations the pipeline can produce."""

    RELEASE = "Release"
    DEBUG = "Debug"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RunConfig:
    """Parsed command-line options.

    A missing ``artifact_path`` disables packaging; a missing ``version``
    means no version definition is passed to CMake.
    """

    artifact_path: Optional[Path] = None
    include_debug: bool = False
    version: Optional[str] = None
    verbose: bool = False

    @property
    def configurations(self) -> List[BuildConfiguration]:
        """Configurations to build, Release always first."""
        configurations = [BuildConfiguration.RELEASE]
        if self.include_debug:
            configurations.append(BuildConfiguration.DEBUG)
        return configurations
