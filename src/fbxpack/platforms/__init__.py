"""Host platform implementations.

Use create_host_platform() to get the implementation matching the detected
PlatformDescriptor.
"""

from typing import Optional

from ..command_runner import CommandRunner
from ..config import ProjectLayout
from ..packages.downloader import PackageDownloader
from ..packages.platform_utils import OSFamily, PlatformDescriptor, PlatformError
from .base import HostPlatform
from .linux import LinuxPlatform
from .macos import MacOSPlatform
from .windows import WindowsPlatform

PLATFORMS = {
    OSFamily.WINDOWS: WindowsPlatform,
    OSFamily.MACOS: MacOSPlatform,
    OSFamily.LINUX: LinuxPlatform,
}


def create_host_platform(
    descriptor: PlatformDescriptor,
    layout: ProjectLayout,
    runner: CommandRunner,
    downloader: Optional[PackageDownloader] = None,
) -> HostPlatform:
    """Select the host platform implementation for a descriptor.

    Raises:
        PlatformError: If the OS family is not supported
    """
    platform_class = PLATFORMS.get(descriptor.os_family)
    if platform_class is None:
        raise PlatformError(
            f"Unsupported platform: {descriptor.os_family.value}. "
            "FBX SDK and vcpkg are available on Windows, macOS and Linux only."
        )
    return platform_class(layout, runner, downloader or PackageDownloader())


__all__ = [
    "HostPlatform",
    "WindowsPlatform",
    "MacOSPlatform",
    "LinuxPlatform",
    "PLATFORMS",
    "create_host_platform",
]
