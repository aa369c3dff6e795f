"""
Pytest configuration for the fbxpack test suite.

Provides a command runner and downloader that record what the pipeline asks
for instead of touching the network or running real tools.
"""

from pathlib import Path
from typing import Callable, List, Optional

import pytest

from fbxpack.command_runner import CommandError, CommandResult, CommandRunner
from fbxpack.config import ProjectLayout


class RecordingRunner(CommandRunner):
    """Records commands; optionally fails the ones matching a predicate."""

    def __init__(self, layout: ProjectLayout, simulate_tools: bool = True):
        super().__init__(cwd=layout.project_dir)
        self.layout = layout
        self.simulate_tools = simulate_tools
        self.commands: List[List[str]] = []
        self.calls: List[dict] = []
        self._failures: List[tuple] = []

    def fail_when(
        self,
        predicate: Callable[[List[str]], bool],
        returncode: int = 1,
        stderr: str = "",
    ) -> None:
        self._failures.append((predicate, returncode, stderr))

    def run(self, command, *, cwd=None, capture=False, answer=None) -> CommandResult:
        args = [str(part) for part in command]
        self.commands.append(args)
        self.calls.append({"command": args, "cwd": cwd, "capture": capture, "answer": answer})

        for predicate, returncode, stderr in self._failures:
            if predicate(args):
                raise CommandError(
                    CommandResult(command=args, returncode=returncode, stderr=stderr)
                )

        if self.simulate_tools:
            self._simulate(args)
        return CommandResult(command=args, returncode=0)

    def _simulate(self, args: List[str]) -> None:
        if "bootstrap-vcpkg" in Path(args[0]).name:
            self.layout.vcpkg_root.mkdir(parents=True, exist_ok=True)
            (self.layout.vcpkg_root / "vcpkg").touch()
            (self.layout.vcpkg_root / "vcpkg.exe").touch()
        elif args[:2] == ["cmake", "--install"] or args[-2:] == ["--target", "install"]:
            configuration = Path(args[2]).name
            install_dir = self.layout.install_prefix / configuration / "bin"
            install_dir.mkdir(parents=True, exist_ok=True)
            (install_dir / "FBX-glTF-conv").write_text("binary")

    def commands_starting_with(self, *prefix: str) -> List[List[str]]:
        return [c for c in self.commands if c[: len(prefix)] == list(prefix)]


class FakeDownloader:
    """Stands in for PackageDownloader."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.downloads: List[tuple] = []
        self.extractions: List[tuple] = []

    def download(self, url: str, dest_path: Path) -> Path:
        self.downloads.append((url, Path(dest_path)))
        if self.error:
            raise self.error
        Path(dest_path).parent.mkdir(parents=True, exist_ok=True)
        Path(dest_path).write_bytes(b"payload")
        return Path(dest_path)

    def extract_archive(self, archive_path: Path, dest_dir: Path) -> Path:
        self.extractions.append((Path(archive_path), Path(dest_dir)))
        return Path(dest_dir)


@pytest.fixture
def layout(tmp_path):
    """Project layout rooted in a fresh temporary directory."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    return ProjectLayout(project_dir)


@pytest.fixture
def runner(layout):
    """Recording command runner bound to the project layout."""
    return RecordingRunner(layout)


@pytest.fixture
def downloader():
    """Fake downloader that writes placeholder files."""
    return FakeDownloader()
