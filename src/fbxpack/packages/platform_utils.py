"""Platform Detection Utilities.

This module derives the host platform facts that every pipeline stage
branches on. Detection happens once per run; stages receive the resulting
descriptor instead of probing the system again.

Supported Platforms:
    - Windows
    - macOS
    - Linux
"""

import platform
import sys
from dataclasses import dataclass
from enum import Enum

from ..errors import PipelineError


class PlatformError(PipelineError):
    """Raised when the host platform is not supported."""

    pass


class OSFamily(Enum):
    """Operating system families known to the pipeline."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PlatformDescriptor:
    """Immutable platform facts for one run."""

    os_family: OSFamily
    is_64bit: bool

    @property
    def is_windows(self) -> bool:
        return self.os_family is OSFamily.WINDOWS

    @property
    def is_macos(self) -> bool:
        return self.os_family is OSFamily.MACOS

    @property
    def is_linux(self) -> bool:
        return self.os_family is OSFamily.LINUX


class PlatformDetector:
    """Detects the current platform."""

    @staticmethod
    def detect_os_family() -> OSFamily:
        """Map ``platform.system()`` onto an OS family.

        Returns:
            The matching family, or ``OSFamily.UNKNOWN`` for anything else
        """
        system = platform.system().lower()

        if system == "windows":
            return OSFamily.WINDOWS
        elif system == "darwin":
            return OSFamily.MACOS
        elif system == "linux":
            return OSFamily.LINUX
        else:
            return OSFamily.UNKNOWN

    @staticmethod
    def detect() -> PlatformDescriptor:
        """Detect the platform descriptor for this process.

        Returns:
            PlatformDescriptor with OS family and word width
        """
        return PlatformDescriptor(
            os_family=PlatformDetector.detect_os_family(),
            is_64bit=sys.maxsize > 2**32,
        )
