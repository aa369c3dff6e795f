"""Artifact Packager.

This module checks that the build produced an install tree and zips it
for distribution.
"""

import logging
import sys
import zipfile
from pathlib import Path

from ..cli_utils import ErrorFormatter
from ..config import ProjectLayout

# Exit status when the pipeline completed but left no install tree
EXIT_INSTALLATION_FAILED = 2


class ArtifactPackager:
    """Verifies and archives the install prefix."""

    def __init__(self, layout: ProjectLayout):
        self.layout = layout

    def verify_install_tree(self) -> Path:
        """Ensure the install prefix exists and is a directory.

        Returns:
            The install prefix

        Raises:
            SystemExit: If the install prefix is missing or not a directory
        """
        install_prefix = self.layout.install_prefix
        if not install_prefix.is_dir():
            ErrorFormatter.print_error(
                "Installation failed.",
                f"Install directory not found: {install_prefix}",
            )
            sys.exit(EXIT_INSTALLATION_FAILED)
        return install_prefix

    def create_archive(self, artifact_dir: Path) -> Path:
        """Zip the whole install prefix into ``<artifact_dir>/archive.zip``.

        Entries keep their path relative to the project root, so the archive
        unpacks to ``out/install/<Config>/...``.

        Returns:
            Path to the archive
        """
        install_prefix = self.layout.install_prefix
        archive_path = self.layout.archive_path(artifact_dir)
        archive_path.parent.mkdir(parents=True, exist_ok=True)

        logging.info(f"Archiving {install_prefix} into {archive_path}")
        with zipfile.ZipFile(archive_path, "w", zipfile.ZIP_DEFLATED) as archive:
            for path in sorted(install_prefix.rglob("*")):
                # The archive may itself live inside the install prefix
                if path.resolve() == archive_path.resolve():
                    continue
                archive.write(path, path.relative_to(self.layout.project_dir).as_posix())

        return archive_path
