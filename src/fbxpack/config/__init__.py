"""Configuration for fbxpack runs.

This module provides:
- RunConfig: options parsed from the command line
- ProjectLayout: fixed input and output locations
"""

from .layout import PROJECT_DIR_ENV, UNIVERSAL_DIR_NAME, VERSION_DEFINE, ProjectLayout
from .run_config import BuildConfiguration, RunConfig

__all__ = [
    "BuildConfiguration",
    "RunConfig",
    "ProjectLayout",
    "PROJECT_DIR_ENV",
    "UNIVERSAL_DIR_NAME",
    "VERSION_DEFINE",
]
