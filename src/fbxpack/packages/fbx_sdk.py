"""FBX SDK release metadata.

The per-platform install procedures live in ``fbxpack.platforms``; this
module only knows where each release is published and what it unpacks to.
"""

from pathlib import Path

from ..errors import PipelineError


class SdkError(PipelineError):
    """Raised when the FBX SDK cannot be installed."""

    pass


class InstallerNotFoundError(SdkError):
    """Raised when an extracted SDK archive does not hold exactly one installer."""

    pass


class FbxSdkRelease:
    """FBX SDK 2020.2.1 download locations."""

    VERSION = "2020.2.1"

    BASE_URL = "https://www.autodesk.com/content/dam/autodesk/www/adn/fbx/2020-2-1"

    WINDOWS_URL = f"{BASE_URL}/fbx202021_fbxsdk_vs2019_win.exe"
    MACOS_URL = f"{BASE_URL}/fbx202021_fbxsdk_clang_mac.pkg.tgz"
    LINUX_URL = f"{BASE_URL}/fbx202021_fbxsdk_linux.tar.gz"

    # Self-extracting installer shipped inside the Linux tarball
    LINUX_INSTALLER = "fbx202021_fbxsdk_linux"

    # Where the macOS package installs itself
    MACOS_INSTALL_DIR = Path("/Applications/Autodesk/FBX SDK") / VERSION


def find_installer_package(directory: Path, suffix: str = ".pkg") -> Path:
    """Locate the single installer package inside an extracted archive.

    Raises:
        InstallerNotFoundError: If zero or several entries match
    """
    matches = sorted(p for p in Path(directory).iterdir() if p.name.endswith(suffix))
    if not matches:
        raise InstallerNotFoundError(f"No {suffix} installer found in {directory}")
    if len(matches) > 1:
        names = ", ".join(p.name for p in matches)
        raise InstallerNotFoundError(f"Expected one {suffix} installer in {directory}, found: {names}")
    return matches[0]
