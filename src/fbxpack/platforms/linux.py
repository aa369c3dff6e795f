"""Linux host platform."""

import logging
import stat
from pathlib import Path
from typing import Optional

from ..command_runner import CommandRunner
from ..config import ProjectLayout
from ..packages.downloader import PackageDownloader
from ..packages.fbx_sdk import FbxSdkRelease, InstallerNotFoundError
from ..packages.platform_utils import OSFamily
from .base import HostPlatform


class LinuxPlatform(HostPlatform):
    """Pipeline steps for Linux hosts."""

    os_family = OSFamily.LINUX

    def __init__(
        self,
        layout: ProjectLayout,
        runner: CommandRunner,
        downloader: PackageDownloader,
        home_dir: Optional[Path] = None,
    ):
        super().__init__(layout, runner, downloader)
        self.home_dir = Path(home_dir) if home_dir else Path.home()

    @property
    def sdk_install_dir(self) -> Path:
        return self.home_dir / "fbxsdk" / "install"

    def acquire_sdk(self) -> Path:
        sdk_dir = self._prepare_sdk_dir()
        tarball = sdk_dir / "fbxsdk.tar.gz"

        logging.info(f"Downloading FBX SDK tarball from {FbxSdkRelease.LINUX_URL}")
        self.downloader.download(FbxSdkRelease.LINUX_URL, tarball)
        self.downloader.extract_archive(tarball, sdk_dir)

        installer = sdk_dir / FbxSdkRelease.LINUX_INSTALLER
        if not installer.is_file():
            raise InstallerNotFoundError(f"FBX SDK installer not found after extraction: {installer}")
        installer.chmod(installer.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

        install_dir = self.sdk_install_dir
        install_dir.mkdir(parents=True, exist_ok=True)

        # The installer asks for licence and destination confirmation
        logging.info(f"Installing FBX SDK from {installer} into {install_dir}")
        self.runner.run([installer, install_dir], answer="yes")

        logging.info(f"FBX SDK installation finished ({install_dir})")
        return install_dir
