"""vcpkg toolchain management.

This module clones and bootstraps vcpkg and wraps the install commands the
dependency step issues against it.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..command_runner import CommandRunner
from ..errors import PipelineError


class ToolchainError(PipelineError):
    """Raised when toolchain operations fail."""

    pass


@dataclass(frozen=True)
class VcpkgToolchain:
    """A bootstrapped vcpkg checkout."""

    root: Path
    executable_suffix: str = ""

    @property
    def executable(self) -> Path:
        return self.root / f"vcpkg{self.executable_suffix}"

    @property
    def toolchain_file(self) -> Path:
        return self.root / "scripts" / "buildsystems" / "vcpkg.cmake"

    def install_command(
        self,
        package: Optional[str] = None,
        triplet: Optional[str] = None,
        install_root: Optional[Path] = None,
    ) -> List[str]:
        """Build a ``vcpkg install`` command line.

        Without a package the command installs everything declared in the
        project manifest. With a package it runs in classic mode, since the
        project root holding vcpkg.json would otherwise force manifest mode.
        """
        command = [str(self.executable), "install"]
        if package:
            command.append("--classic")
        if triplet:
            command.append(f"--triplet={triplet}")
        if install_root:
            command.append(f"--x-install-root={install_root}")
        if package:
            command.append(package)
        return command


class VcpkgInstaller:
    """Clones vcpkg and runs its bootstrap script."""

    REPOSITORY_URL = "https://github.com/microsoft/vcpkg.git"

    def __init__(self, runner: CommandRunner, root: Path):
        """Initialize installer.

        Args:
            runner: Command runner for git and the bootstrap script
            root: Directory vcpkg is cloned into
        """
        self.runner = runner
        self.root = root

    def install(self, bootstrap_script: str, executable_suffix: str = "") -> VcpkgToolchain:
        """Clone and bootstrap vcpkg.

        Args:
            bootstrap_script: Script name inside the checkout
            executable_suffix: Suffix of the vcpkg binary on this platform

        Returns:
            Handle to the bootstrapped toolchain

        Raises:
            CommandError: If git or the bootstrap script fails
            ToolchainError: If bootstrap did not produce the vcpkg binary
        """
        self.runner.run(["git", "clone", self.REPOSITORY_URL, self.root])
        self.runner.run([self.root / bootstrap_script])

        toolchain = VcpkgToolchain(root=self.root, executable_suffix=executable_suffix)
        if not toolchain.executable.exists():
            raise ToolchainError(
                f"vcpkg executable missing after bootstrap: {toolchain.executable}"
            )
        return toolchain
