"""Windows host platform."""

import logging
from pathlib import Path
from typing import List

from ..config import BuildConfiguration
from ..packages.fbx_sdk import FbxSdkRelease
from ..packages.platform_utils import OSFamily
from .base import HostPlatform


class WindowsPlatform(HostPlatform):
    """Pipeline steps for Windows hosts.

    The MSVC runtime ships std::filesystem, so no polyfill is needed, and
    installation is expressed as the ``install`` build target.
    """

    os_family = OSFamily.WINDOWS
    bootstrap_script = "bootstrap-vcpkg.bat"
    executable_suffix = ".exe"
    polyfill_std_filesystem = False

    def acquire_sdk(self) -> Path:
        sdk_dir = self._prepare_sdk_dir()
        sdk_home = self.layout.sdk_home
        installer = sdk_dir / "fbxsdk.exe"

        logging.info(f"Downloading FBX SDK installer from {FbxSdkRelease.WINDOWS_URL}")
        self.downloader.download(FbxSdkRelease.WINDOWS_URL, installer)

        # NSIS silent install; /D must be the last argument
        self.runner.run([installer, "/S", f"/D={sdk_home}"])
        return sdk_home

    def install_command(
        self, build_dir: Path, configuration: BuildConfiguration
    ) -> List[str]:
        return [
            "cmake",
            "--build",
            str(build_dir),
            "--config",
            configuration.value,
            "--target",
            "install",
        ]
