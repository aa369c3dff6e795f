"""
Build orchestration for fbxpack.

This module runs the whole pipeline in order:
1. Select the host platform implementation
2. Download and install the FBX SDK
3. Clone and bootstrap vcpkg
4. Install native dependencies (universal merge on macOS)
5. Configure, build and install each configuration with CMake
6. Verify the install tree
7. Archive it when an artifact path was given

The first failing step aborts the run; nothing is retried or cleaned up.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..command_runner import CommandRunner
from ..config import BuildConfiguration, ProjectLayout, RunConfig
from ..packages.downloader import PackageDownloader
from ..packages.platform_utils import PlatformDescriptor
from ..platforms import HostPlatform, create_host_platform
from .cmake_runner import CMakeBuildRunner
from .packager import ArtifactPackager


@dataclass
class PipelineResult:
    """Result of a complete pipeline run."""

    sdk_home: Path
    install_prefix: Path
    configurations: List[BuildConfiguration] = field(default_factory=list)
    archive_path: Optional[Path] = None
    build_time: float = 0.0


class BuildPipeline:
    """
    Orchestrates the packaged native build.

    Example usage:
        pipeline = BuildPipeline(run_config, PlatformDetector.detect())
        result = pipeline.run()
        print(f"Installed to {result.install_prefix}")
    """

    def __init__(
        self,
        run_config: RunConfig,
        descriptor: PlatformDescriptor,
        layout: Optional[ProjectLayout] = None,
        runner: Optional[CommandRunner] = None,
        downloader: Optional[PackageDownloader] = None,
        host: Optional[HostPlatform] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            run_config: Parsed command-line options
            descriptor: Detected platform facts
            layout: Project paths (defaults to the current project)
            runner: Runner for external tools
            downloader: Downloader for the SDK
            host: Host platform implementation (selected from descriptor if omitted)
        """
        self.run_config = run_config
        self.descriptor = descriptor
        self.layout = layout or ProjectLayout()
        self.runner = runner or CommandRunner(cwd=self.layout.project_dir)
        self.downloader = downloader
        self.host = host

    def run(self) -> PipelineResult:
        """
        Execute every stage in order.

        Returns:
            PipelineResult describing the produced output

        Raises:
            PipelineError: If any stage fails
            SystemExit: If the install tree is missing after the build
        """
        start_time = time.time()

        host = self.host or create_host_platform(
            self.descriptor, self.layout, self.runner, self.downloader
        )

        logging.info("[1/5] Installing FBX SDK...")
        sdk_home = host.acquire_sdk()

        logging.info("[2/5] Installing vcpkg...")
        toolchain = host.install_toolchain()

        logging.info("[3/5] Resolving dependencies...")
        dependency_dir = host.resolve_dependencies(toolchain)

        logging.info("[4/5] Building...")
        configurations = self.run_config.configurations
        builder = CMakeBuildRunner(self.layout, self.runner, host, self.run_config.version)
        builder.build_all(configurations, toolchain, sdk_home, dependency_dir)

        logging.info("[5/5] Packaging...")
        packager = ArtifactPackager(self.layout)
        install_prefix = packager.verify_install_tree()

        archive_path = None
        if self.run_config.artifact_path:
            archive_path = packager.create_archive(self.run_config.artifact_path)

        return PipelineResult(
            sdk_home=sdk_home,
            install_prefix=install_prefix,
            configurations=configurations,
            archive_path=archive_path,
            build_time=time.time() - start_time,
        )
