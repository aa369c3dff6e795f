"""
Build system components for fbxpack.

This module provides:
- CMake configure/build/install per configuration
- Install tree verification and archiving
- Pipeline orchestration
"""

from .cmake_runner import CMakeBuildRunner
from .orchestrator import BuildPipeline, PipelineResult
from .packager import EXIT_INSTALLATION_FAILED, ArtifactPackager

__all__ = [
    "CMakeBuildRunner",
    "BuildPipeline",
    "PipelineResult",
    "ArtifactPackager",
    "EXIT_INSTALLATION_FAILED",
]
