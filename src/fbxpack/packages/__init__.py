"""Package management for fbxpack.

This module handles downloading and installing the external packages the
native build needs: the FBX SDK, the vcpkg toolchain and the libraries
declared in vcpkg.json.
"""

from .dependency_manifest import ManifestError, read_dependencies
from .downloader import DownloadError, ExtractionError, PackageDownloader
from .fbx_sdk import FbxSdkRelease, InstallerNotFoundError, SdkError, find_installer_package
from .platform_utils import OSFamily, PlatformDescriptor, PlatformDetector, PlatformError
from .vcpkg import ToolchainError, VcpkgInstaller, VcpkgToolchain

__all__ = [
    "ManifestError",
    "read_dependencies",
    "DownloadError",
    "ExtractionError",
    "PackageDownloader",
    "FbxSdkRelease",
    "InstallerNotFoundError",
    "SdkError",
    "find_installer_package",
    "OSFamily",
    "PlatformDescriptor",
    "PlatformDetector",
    "PlatformError",
    "ToolchainError",
    "VcpkgInstaller",
    "VcpkgToolchain",
]
