"""Host platform interface.

Each supported OS family implements the platform-dependent pipeline steps
behind this interface. The orchestrator picks one implementation from the
PlatformDescriptor and never branches on the OS itself.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from ..command_runner import CommandRunner
from ..config import BuildConfiguration, ProjectLayout
from ..packages.downloader import PackageDownloader
from ..packages.platform_utils import OSFamily
from ..packages.vcpkg import VcpkgInstaller, VcpkgToolchain


class HostPlatform(ABC):
    """Platform-specific steps of the build pipeline."""

    os_family: OSFamily

    # Bootstrap script shipped in the vcpkg checkout
    bootstrap_script: str = "bootstrap-vcpkg.sh"
    executable_suffix: str = ""

    # Whether the native project must polyfill std::filesystem
    polyfill_std_filesystem: bool = True

    def __init__(
        self,
        layout: ProjectLayout,
        runner: CommandRunner,
        downloader: PackageDownloader,
    ):
        """Initialize host platform.

        Args:
            layout: Project paths
            runner: Runner for external tools
            downloader: Downloader for the SDK installer
        """
        self.layout = layout
        self.runner = runner
        self.downloader = downloader

    @abstractmethod
    def acquire_sdk(self) -> Path:
        """Download and install the FBX SDK.

        Returns:
            SDK home directory passed to CMake
        """
        pass

    def install_toolchain(self) -> VcpkgToolchain:
        """Clone and bootstrap vcpkg."""
        installer = VcpkgInstaller(self.runner, self.layout.vcpkg_root)
        return installer.install(self.bootstrap_script, self.executable_suffix)

    def resolve_dependencies(self, toolchain: VcpkgToolchain) -> Optional[Path]:
        """Install every dependency declared in vcpkg.json.

        Returns:
            Dependency prefix CMake must be pointed at, or None when the
            vcpkg toolchain file locates the manifest-mode tree itself
        """
        logging.info("Installing dependencies from vcpkg.json")
        self.runner.run(toolchain.install_command())
        return None

    def cmake_dependency_args(self, dependency_dir: Optional[Path]) -> List[str]:
        """Extra CMake configure arguments for the resolved dependencies."""
        return []

    def install_command(
        self, build_dir: Path, configuration: BuildConfiguration
    ) -> List[str]:
        """Command that installs a finished build."""
        return ["cmake", "--install", str(build_dir)]

    def _prepare_sdk_dir(self) -> Path:
        sdk_dir = self.layout.sdk_dir
        sdk_dir.mkdir(parents=True, exist_ok=True)
        return sdk_dir
