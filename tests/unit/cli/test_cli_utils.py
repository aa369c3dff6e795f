"""Unit tests for CLI utilities."""

from pathlib import Path

import pytest

from fbxpack.cli_utils import EnvironmentReporter, ErrorFormatter, RunConfigParser
from fbxpack.config import RunConfig
from fbxpack.packages.platform_utils import OSFamily, PlatformDescriptor


class TestRunConfigParser:
    """Tests for RunConfigParser."""

    def test_no_arguments(self):
        assert RunConfigParser.parse([]) == RunConfig()

    def test_all_options(self):
        config = RunConfigParser.parse(["-ArtifactPath", "/out", "-IncludeDebug", "-Version", "1.2.3"])
        assert config.artifact_path == Path("/out")
        assert config.include_debug is True
        assert config.version == "1.2.3"

    def test_order_does_not_matter(self):
        config = RunConfigParser.parse(["-Version", "2.0", "-IncludeDebug", "-ArtifactPath", "dist"])
        assert config == RunConfig(artifact_path=Path("dist"), include_debug=True, version="2.0")

    def test_unrecognized_tokens_ignored(self):
        config = RunConfigParser.parse(["--clean", "extra", "-Version", "3.1", "-Unknown"])
        assert config == RunConfig(version="3.1")

    def test_value_flag_without_value(self):
        assert RunConfigParser.parse(["-IncludeDebug", "-ArtifactPath"]) == RunConfig(include_debug=True)

    def test_flag_values_are_taken_verbatim(self):
        config = RunConfigParser.parse(["-Version", "-IncludeDebug"])
        assert config.version == "-IncludeDebug"
        assert config.include_debug is False

    def test_empty_version_means_no_version(self):
        assert RunConfigParser.parse(["-Version", ""]).version is None

    def test_verbose(self):
        assert RunConfigParser.parse(["-Verbose"]).verbose is True


class TestErrorFormatter:
    """Tests for ErrorFormatter."""

    def test_pipeline_error_exits_1(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            ErrorFormatter.handle_pipeline_error("Download failed", RuntimeError("timeout"))

        assert excinfo.value.code == 1
        out = capsys.readouterr().out
        assert "Download failed" in out
        assert "timeout" in out

    def test_keyboard_interrupt_exits_130(self):
        with pytest.raises(SystemExit) as excinfo:
            ErrorFormatter.handle_keyboard_interrupt()
        assert excinfo.value.code == 130


class TestEnvironmentReporter:
    """Tests for EnvironmentReporter."""

    def test_report(self):
        report = EnvironmentReporter.format_report(
            PlatformDescriptor(OSFamily.MACOS, True),
            RunConfig(include_debug=True, version="1.0"),
            Path("/work"),
        )
        assert "IsMacOS: True" in report
        assert "IsWindows: False" in report
        assert "Is64BitOperatingSystem: True" in report
        assert "Current working directory: /work" in report
        assert "IncludeDebug: True" in report
        assert "Version: 1.0" in report
