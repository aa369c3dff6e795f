"""
Command-line interface for fbxpack.

This module provides the `fbxpack` CLI tool that produces a packaged
native build of the FBX glTF converter CLI.

Examples:
    fbxpack                                    # Release build
    fbxpack -IncludeDebug                      # Release and Debug builds
    fbxpack -Version 1.2.3 -ArtifactPath dist  # Versioned build, zipped into dist/
"""

import logging
import sys
from typing import Optional, Sequence

from fbxpack import __version__
from fbxpack.build import BuildPipeline
from fbxpack.cli_utils import EnvironmentReporter, ErrorFormatter, RunConfigParser
from fbxpack.command_runner import CommandError
from fbxpack.config import ProjectLayout
from fbxpack.errors import PipelineError
from fbxpack.packages import (
    DownloadError,
    ExtractionError,
    InstallerNotFoundError,
    ManifestError,
    PlatformDetector,
    PlatformError,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger to write to stdout."""
    level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger()
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)


def error_title(error: PipelineError) -> str:
    """Short title naming the kind of failure."""
    if isinstance(error, PlatformError):
        return "Unsupported platform"
    if isinstance(error, DownloadError):
        return "Download failed"
    if isinstance(error, (InstallerNotFoundError, ExtractionError)):
        return "SDK extraction failed"
    if isinstance(error, ManifestError):
        return "Invalid dependency manifest"
    if isinstance(error, CommandError):
        return "Command failed"
    return "Build failed"


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the packaged native build pipeline."""
    config = RunConfigParser.parse(sys.argv[1:] if argv is None else argv)
    setup_logging(config.verbose)

    print(f"fbxpack {__version__}")

    try:
        descriptor = PlatformDetector.detect()
        layout = ProjectLayout()
        print(EnvironmentReporter.format_report(descriptor, config, layout.project_dir))

        pipeline = BuildPipeline(config, descriptor, layout)
        result = pipeline.run()

        ErrorFormatter.print_success("Build successful!")
        print()
        print(f"Installed: {result.install_prefix}")
        if result.archive_path:
            print(f"Archive: {result.archive_path}")
        print(f"Build time: {result.build_time:.2f}s")
        sys.exit(0)

    except PipelineError as e:
        ErrorFormatter.handle_pipeline_error(error_title(e), e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, config.verbose)


if __name__ == "__main__":
    main()
