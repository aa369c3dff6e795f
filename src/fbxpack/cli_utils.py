"""CLI utility functions for fbxpack.

This module provides common utilities used by the CLI including:
- Parsing the PowerShell-style invocation flags
- Error handling and formatting
- The startup environment report
"""

import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import RunConfig
from .packages.platform_utils import PlatformDescriptor


class RunConfigParser:
    """Parses invocation flags into a RunConfig.

    Recognized flags:
        -ArtifactPath <path>   Zip the install tree into <path>/archive.zip
        -IncludeDebug          Also build the Debug configuration
        -Version <string>      Pass the version to the native build
        -Verbose               Debug logging and tracebacks

    Unrecognized tokens are skipped without error, as is a value flag given
    as the last token with no value after it.
    """

    @staticmethod
    def parse(argv: Sequence[str]) -> RunConfig:
        """Parse an argument list (without the program name).

        Args:
            argv: Raw command-line tokens

        Returns:
            RunConfig with the parsed values
        """
        artifact_path: Optional[Path] = None
        include_debug = False
        version: Optional[str] = None
        verbose = False

        args = list(argv)
        i = 0
        while i < len(args):
            arg = args[i]
            if arg == "-ArtifactPath" and i + 1 < len(args):
                artifact_path = Path(args[i + 1])
                i += 2
            elif arg == "-Version" and i + 1 < len(args):
                version = args[i + 1]
                i += 2
            elif arg == "-IncludeDebug":
                include_debug = True
                i += 1
            elif arg == "-Verbose":
                verbose = True
                i += 1
            else:
                i += 1

        return RunConfig(
            artifact_path=artifact_path,
            include_debug=include_debug,
            version=version or None,
            verbose=verbose,
        )


class ErrorFormatter:
    """Formats and displays error messages with ANSI color codes."""

    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        print()
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}")
        print()
        print(message)
        print()

    @staticmethod
    def print_success(message: str) -> None:
        print()
        print(f"{ErrorFormatter.GREEN}✓ {message}{ErrorFormatter.RESET}")

    @staticmethod
    def print_warning(message: str) -> None:
        print()
        print(f"{ErrorFormatter.YELLOW}✗ {message}{ErrorFormatter.RESET}")

    @staticmethod
    def handle_pipeline_error(title: str, error: Exception) -> None:
        """Report a fatal stage failure and exit with status 1."""
        ErrorFormatter.print_error(title, str(error))
        sys.exit(1)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        ErrorFormatter.print_warning("Build interrupted")
        sys.exit(130)  # Standard exit code for SIGINT

    @staticmethod
    def handle_unexpected_error(error: Exception, verbose: bool = False) -> None:
        """Handle unexpected errors with standard formatting.

        Args:
            error: The exception to handle
            verbose: Whether to print traceback
        """
        message = f"{type(error).__name__}: {error}"
        ErrorFormatter.print_error("Unexpected error", message)

        if verbose:
            import traceback

            print("Traceback:")
            print(traceback.format_exc())

        sys.exit(1)


class EnvironmentReporter:
    """Formats the platform and option summary printed at startup."""

    @staticmethod
    def format_report(
        descriptor: PlatformDescriptor,
        config: RunConfig,
        cwd: Optional[Path] = None,
    ) -> str:
        lines = [
            f"IsWindows: {descriptor.is_windows}",
            f"IsMacOS: {descriptor.is_macos}",
            f"IsLinux: {descriptor.is_linux}",
            f"Is64BitOperatingSystem: {descriptor.is_64bit}",
            f"Current working directory: {cwd or os.getcwd()}",
            f"ArtifactPath: {config.artifact_path or ''}",
            f"IncludeDebug: {config.include_debug}",
            f"Version: {config.version or ''}",
        ]
        return "\n".join(f"  {line}" for line in lines)
