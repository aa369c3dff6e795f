"""Error types shared by every pipeline stage.

Each stage raises its own subclass so the CLI can report which step
failed. None of them are retried or rolled back.
"""


class PipelineError(Exception):
    """Base exception for fatal pipeline failures."""

    pass
