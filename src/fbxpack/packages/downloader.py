"""Package downloader with progress tracking.

This module handles downloading installers from URLs and extracting the
archives they ship in.
"""

import tarfile
import zipfile
from pathlib import Path
from urllib.parse import urlparse

import requests
from tqdm import tqdm

from ..errors import PipelineError


class DownloadError(PipelineError):
    """Raised when download fails."""

    pass


class ExtractionError(PipelineError):
    """Raised when archive extraction fails."""

    pass


class PackageDownloader:
    """Downloads and extracts packages with progress tracking."""

    TAR_SUFFIXES = (".tar.gz", ".tgz", ".tar.bz2", ".tar.xz")

    def __init__(self, chunk_size: int = 8192, show_progress: bool = True):
        """Initialize downloader.

        Args:
            chunk_size: Size of chunks streamed to disk
            show_progress: Whether to show a progress bar while downloading
        """
        self.chunk_size = chunk_size
        self.show_progress = show_progress

    def download(self, url: str, dest_path: Path) -> Path:
        """Download a file from a URL.

        The call returns only after the whole body has been written and the
        destination file is closed.

        Args:
            url: URL to download from
            dest_path: Destination file path

        Returns:
            Path to the downloaded file

        Raises:
            DownloadError: If download fails
        """
        dest_path = Path(dest_path)
        dest_path.parent.mkdir(parents=True, exist_ok=True)

        # Use temporary file during download
        temp_file = dest_path.with_suffix(dest_path.suffix + ".tmp")
        progress_bar = None
        completed = False

        try:
            response = requests.get(url, stream=True, timeout=30)
            response.raise_for_status()

            total_size = int(response.headers.get("content-length", 0))

            if self.show_progress and total_size > 0:
                filename = Path(urlparse(url).path).name
                progress_bar = tqdm(
                    total=total_size,
                    unit="B",
                    unit_scale=True,
                    unit_divisor=1024,
                    desc=f"Downloading {filename}",
                )

            with open(temp_file, "wb") as f:
                for chunk in response.iter_content(chunk_size=self.chunk_size):
                    if chunk:
                        f.write(chunk)
                        if progress_bar:
                            progress_bar.update(len(chunk))

            if dest_path.exists():
                dest_path.unlink()
            temp_file.rename(dest_path)
            completed = True

            return dest_path

        except requests.RequestException as e:
            raise DownloadError(f"Failed to download {url}: {e}")

        finally:
            if progress_bar:
                progress_bar.close()
            # Also reached on KeyboardInterrupt
            if not completed and temp_file.exists():
                temp_file.unlink()

    def extract_archive(self, archive_path: Path, dest_dir: Path) -> Path:
        """Extract an archive file.

        Supports .tar.gz, .tgz, .tar.bz2, .tar.xz and .zip formats.

        Args:
            archive_path: Path to the archive file
            dest_dir: Destination directory for extraction

        Returns:
            Path to the extracted directory

        Raises:
            ExtractionError: If extraction fails
        """
        archive_path = Path(archive_path)
        dest_dir = Path(dest_dir)

        if not archive_path.exists():
            raise ExtractionError(f"Archive not found: {archive_path}")

        dest_dir.mkdir(parents=True, exist_ok=True)

        if archive_path.suffix == ".zip":
            extract = self._extract_zip
        elif archive_path.name.endswith(self.TAR_SUFFIXES):
            extract = self._extract_tar
        else:
            raise ExtractionError(f"Unsupported archive format: {archive_path.name}")

        try:
            extract(archive_path, dest_dir)
        except (OSError, tarfile.TarError, zipfile.BadZipFile) as e:
            raise ExtractionError(f"Failed to extract {archive_path}: {e}")

        return dest_dir

    def _extract_tar(self, archive_path: Path, dest_dir: Path) -> None:
        with tarfile.open(archive_path, "r:*") as tar:
            if hasattr(tarfile, "data_filter"):
                # Rejects absolute paths and links escaping dest_dir
                tar.extractall(dest_dir, filter="data")
            else:
                tar.extractall(dest_dir)

    def _extract_zip(self, archive_path: Path, dest_dir: Path) -> None:
        with zipfile.ZipFile(archive_path, "r") as zip_file:
            zip_file.extractall(dest_dir)
