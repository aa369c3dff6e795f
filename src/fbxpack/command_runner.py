"""Command Runner.

This module runs the external tools the pipeline delegates to (git, vcpkg,
installers, cmake) and turns a non-zero exit status into a typed error.

Design:
    - Wraps subprocess.run; the calling stage blocks until the tool exits
    - Output streams straight to the console unless the caller asks to
      capture it
    - Can feed a repeated answer into an interactive installer's stdin
"""

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .errors import PipelineError

CommandArg = Union[str, Path]


@dataclass
class CommandResult:
    """Outcome of an executed command."""

    command: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def output(self) -> str:
        return f"{self.stdout}{self.stderr}"


class CommandError(PipelineError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, result: CommandResult):
        message = (
            f"Command failed with exit code {result.returncode}: "
            f"{format_command(result.command)}"
        )
        if result.stderr:
            message = f"{message}\n{result.stderr.strip()}"
        super().__init__(message)
        self.result = result


def format_command(command: Sequence[CommandArg]) -> str:
    return " ".join(shlex.quote(str(part)) for part in command)


class CommandRunner:
    """Executes external commands synchronously."""

    def __init__(self, cwd: Optional[Path] = None):
        """Initialize command runner.

        Args:
            cwd: Default working directory for commands
        """
        self.cwd = cwd

    def run(
        self,
        command: Sequence[CommandArg],
        *,
        cwd: Optional[Path] = None,
        capture: bool = False,
        answer: Optional[str] = None,
    ) -> CommandResult:
        """Run a command and wait for it to finish.

        Args:
            command: Program and arguments
            cwd: Working directory (defaults to the runner's directory)
            capture: Capture stdout/stderr instead of streaming them
            answer: Text written repeatedly to stdin, one line per prompt

        Returns:
            CommandResult for a successful command

        Raises:
            CommandError: If the command exits with a non-zero status
        """
        args = [str(part) for part in command]
        workdir = cwd or self.cwd
        logging.info(f"$ {format_command(args)}")

        try:
            if answer is not None:
                result = self._run_answering(args, workdir, answer)
            else:
                process = subprocess.run(
                    args,
                    cwd=str(workdir) if workdir else None,
                    capture_output=capture,
                    text=True,
                    check=False,
                )
                result = CommandResult(
                    command=args,
                    returncode=process.returncode,
                    stdout=process.stdout or "",
                    stderr=process.stderr or "",
                )
        except FileNotFoundError as e:
            raise CommandError(
                CommandResult(command=args, returncode=127, stderr=str(e))
            )

        if result.returncode != 0:
            raise CommandError(result)
        return result

    def _run_answering(
        self, args: List[str], workdir: Optional[Path], answer: str
    ) -> CommandResult:
        # Equivalent of `yes <answer> | command`
        yes_process = subprocess.Popen(["yes", answer], stdout=subprocess.PIPE)
        try:
            process = subprocess.run(
                args,
                cwd=str(workdir) if workdir else None,
                stdin=yes_process.stdout,
                check=False,
            )
        finally:
            if yes_process.stdout:
                yes_process.stdout.close()
            yes_process.terminate()
            yes_process.wait()

        return CommandResult(command=args, returncode=process.returncode)
