"""CMake Build Runner.

This module configures, compiles and installs the native project once per
build configuration.

Design:
    - One CMake binary directory per configuration (out/build/<Config>)
    - One install prefix per configuration (out/install/<Config>)
    - Platform-specific flags come from the HostPlatform
    - The version definition is only passed when a version was given
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ..command_runner import CommandRunner
from ..config import VERSION_DEFINE, BuildConfiguration, ProjectLayout
from ..packages.vcpkg import VcpkgToolchain
from ..platforms.base import HostPlatform


class CMakeBuildRunner:
    """Runs the CMake configure/build/install cycle."""

    def __init__(
        self,
        layout: ProjectLayout,
        runner: CommandRunner,
        host: HostPlatform,
        version: Optional[str] = None,
    ):
        """Initialize build runner.

        Args:
            layout: Project paths
            runner: Runner for cmake invocations
            host: Platform supplying dependency flags and the install step
            version: Version string injected into the build, if any
        """
        self.layout = layout
        self.runner = runner
        self.host = host
        self.version = version

    def configure_command(
        self,
        configuration: BuildConfiguration,
        toolchain: VcpkgToolchain,
        sdk_home: Path,
        dependency_dir: Optional[Path] = None,
    ) -> List[str]:
        """Build the cmake configure command line for one configuration."""
        polyfill = "ON" if self.host.polyfill_std_filesystem else "OFF"

        command = [
            "cmake",
            f"-DCMAKE_TOOLCHAIN_FILE={toolchain.toolchain_file}",
            *self.host.cmake_dependency_args(dependency_dir),
            f"-DCMAKE_BUILD_TYPE={configuration.value}",
            f"-DCMAKE_INSTALL_PREFIX={self.layout.install_dir(configuration)}",
            f"-DFbxSdkHome:STRING={sdk_home}",
            f"-DPOLYFILLS_STD_FILESYSTEM={polyfill}",
        ]
        if self.version:
            command.append(f"-D{VERSION_DEFINE}={self.version}")
        command.extend(
            [
                "-S",
                str(self.layout.project_dir),
                "-B",
                str(self.layout.build_dir(configuration)),
            ]
        )
        return command

    def build(
        self,
        configuration: BuildConfiguration,
        toolchain: VcpkgToolchain,
        sdk_home: Path,
        dependency_dir: Optional[Path] = None,
    ) -> Path:
        """Configure, compile and install one configuration.

        Returns:
            The configuration's install directory

        Raises:
            CommandError: If any cmake invocation fails
        """
        logging.info(f"Build {configuration.value} ...")
        build_dir = self.layout.build_dir(configuration)

        self.runner.run(
            self.configure_command(configuration, toolchain, sdk_home, dependency_dir)
        )
        self.runner.run(
            ["cmake", "--build", str(build_dir), "--config", configuration.value]
        )
        self.runner.run(self.host.install_command(build_dir, configuration))

        return self.layout.install_dir(configuration)

    def build_all(
        self,
        configurations: Iterable[BuildConfiguration],
        toolchain: VcpkgToolchain,
        sdk_home: Path,
        dependency_dir: Optional[Path] = None,
    ) -> List[Path]:
        """Build configurations in order, stopping at the first failure."""
        return [
            self.build(configuration, toolchain, sdk_home, dependency_dir)
            for configuration in configurations
        ]
