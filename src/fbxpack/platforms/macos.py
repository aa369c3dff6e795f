"""macOS host platform.

vcpkg has no universal (x86_64 + arm64) triplet, so every dependency is
installed once per architecture and the two trees are merged with lipo
into ``vcpkg_installed/uni-osx``.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..command_runner import CommandError
from ..config import UNIVERSAL_DIR_NAME
from ..packages.dependency_manifest import read_dependencies
from ..packages.fbx_sdk import FbxSdkRelease, find_installer_package
from ..packages.platform_utils import OSFamily
from ..packages.vcpkg import VcpkgToolchain
from .base import HostPlatform


class MacOSPlatform(HostPlatform):
    """Pipeline steps for macOS hosts."""

    os_family = OSFamily.MACOS

    X64_TRIPLET = "x64-osx"
    ARM64_TRIPLET = "arm64-osx"
    ARCHITECTURES = "x86_64;arm64"

    # xcode-select output when the command line tools are present
    TOOLS_ALREADY_INSTALLED = "already installed"

    def acquire_sdk(self) -> Path:
        sdk_dir = self._prepare_sdk_dir()
        tarball = sdk_dir / "fbxsdk.pkg.tgz"

        logging.info(f"Downloading FBX SDK package from {FbxSdkRelease.MACOS_URL}")
        self.downloader.download(FbxSdkRelease.MACOS_URL, tarball)
        self.downloader.extract_archive(tarball, sdk_dir)

        package = find_installer_package(sdk_dir)
        logging.info(f"FBX SDK macOS pkg: {package.name}")
        self.runner.run(["sudo", "installer", "-pkg", package, "-target", "/"])

        sdk_home = self.layout.sdk_home
        sdk_home.symlink_to(FbxSdkRelease.MACOS_INSTALL_DIR, target_is_directory=True)
        return sdk_home

    def install_toolchain(self) -> VcpkgToolchain:
        toolchain = super().install_toolchain()
        self._install_command_line_tools()
        return toolchain

    def _install_command_line_tools(self) -> None:
        try:
            self.runner.run(["xcode-select", "--install"], capture=True)
        except CommandError as e:
            if self.TOOLS_ALREADY_INSTALLED not in e.result.output:
                raise
            logging.info("Xcode command line tools already installed")

    def resolve_dependencies(self, toolchain: VcpkgToolchain) -> Optional[Path]:
        """Install each dependency for both architectures and merge them.

        Returns:
            The merged universal dependency tree
        """
        install_root = self.layout.vcpkg_installed_dir
        dependencies = read_dependencies(self.layout.manifest_path)
        logging.info(f"Resolving {len(dependencies)} dependencies for x86_64 and arm64")

        for name in dependencies:
            for triplet in (self.X64_TRIPLET, self.ARM64_TRIPLET):
                self.runner.run(
                    toolchain.install_command(name, triplet=triplet, install_root=install_root)
                )

        install_root.mkdir(parents=True, exist_ok=True)
        self.runner.run(
            [
                sys.executable,
                self.layout.merge_script,
                self.ARM64_TRIPLET,
                self.X64_TRIPLET,
                UNIVERSAL_DIR_NAME,
            ],
            cwd=install_root,
        )
        return self.layout.universal_dir

    def cmake_dependency_args(self, dependency_dir: Optional[Path]) -> List[str]:
        prefix = dependency_dir or self.layout.universal_dir
        return [
            f"-DCMAKE_PREFIX_PATH={prefix}",
            f"-DVCPKG_TARGET_TRIPLET={UNIVERSAL_DIR_NAME}",
            f"-DCMAKE_OSX_ARCHITECTURES={self.ARCHITECTURES}",
        ]
