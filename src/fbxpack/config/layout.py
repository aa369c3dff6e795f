"""Fixed filesystem locations used by the pipeline.

All paths hang off the project root, which is the current working
directory unless ``FBXPACK_PROJECT_DIR`` is set.
"""

import os
from pathlib import Path
from typing import Optional

from .run_config import BuildConfiguration

PROJECT_DIR_ENV = "FBXPACK_PROJECT_DIR"

# Name of the merged macOS dependency tree and its vcpkg triplet
UNIVERSAL_DIR_NAME = "uni-osx"

# CMake cache variable carrying the CLI version string
VERSION_DEFINE = "FBX_GLTF_CONV_CLI_VERSION"


class ProjectLayout:
    """Resolves every path the pipeline reads or writes."""

    def __init__(self, project_dir: Optional[Path] = None):
        """Initialize layout.

        Args:
            project_dir: Project root (defaults to FBXPACK_PROJECT_DIR or cwd)
        """
        if project_dir is None:
            env_dir = os.environ.get(PROJECT_DIR_ENV)
            project_dir = Path(env_dir) if env_dir else Path.cwd()

        self.project_dir = Path(project_dir).resolve()

    @property
    def out_dir(self) -> Path:
        return self.project_dir / "out"

    @property
    def build_root(self) -> Path:
        return self.out_dir / "build"

    @property
    def install_prefix(self) -> Path:
        return self.out_dir / "install"

    def build_dir(self, configuration: BuildConfiguration) -> Path:
        """CMake binary directory for one configuration."""
        return self.build_root / configuration.value

    def install_dir(self, configuration: BuildConfiguration) -> Path:
        """Install prefix scoped to one configuration."""
        return self.install_prefix / configuration.value

    @property
    def vcpkg_root(self) -> Path:
        return self.project_dir / "vcpkg"

    @property
    def vcpkg_installed_dir(self) -> Path:
        return self.project_dir / "vcpkg_installed"

    @property
    def universal_dir(self) -> Path:
        return self.vcpkg_installed_dir / UNIVERSAL_DIR_NAME

    @property
    def manifest_path(self) -> Path:
        return self.project_dir / "vcpkg.json"

    @property
    def merge_script(self) -> Path:
        return self.project_dir / "lipo-dir-merge.py"

    @property
    def sdk_dir(self) -> Path:
        return self.project_dir / "fbxsdk"

    @property
    def sdk_home(self) -> Path:
        return self.sdk_dir / "Home"

    def archive_path(self, artifact_dir: Path) -> Path:
        return Path(artifact_dir) / "archive.zip"
