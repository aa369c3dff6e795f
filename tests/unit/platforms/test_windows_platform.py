"""Unit tests for the Windows host platform."""

from fbxpack.config import BuildConfiguration
from fbxpack.packages.fbx_sdk import FbxSdkRelease
from fbxpack.platforms import WindowsPlatform


class TestWindowsPlatform:
    """Test cases for WindowsPlatform."""

    def test_acquire_sdk_runs_silent_installer(self, layout, runner, downloader):
        host = WindowsPlatform(layout, runner, downloader)

        sdk_home = host.acquire_sdk()

        installer = layout.sdk_dir / "fbxsdk.exe"
        assert downloader.downloads == [(FbxSdkRelease.WINDOWS_URL, installer)]
        assert runner.commands == [[str(installer), "/S", f"/D={layout.sdk_home}"]]
        assert sdk_home == layout.sdk_home

    def test_install_toolchain_uses_batch_bootstrap(self, layout, runner, downloader):
        toolchain = WindowsPlatform(layout, runner, downloader).install_toolchain()

        assert runner.commands[1] == [str(layout.vcpkg_root / "bootstrap-vcpkg.bat")]
        assert toolchain.executable.name == "vcpkg.exe"
        assert not any(cmd[0] == "xcode-select" for cmd in runner.commands)

    def test_resolve_dependencies_single_manifest_install(self, layout, runner, downloader):
        host = WindowsPlatform(layout, runner, downloader)
        toolchain = host.install_toolchain()
        runner.commands.clear()

        assert host.resolve_dependencies(toolchain) is None
        assert runner.commands == [[str(toolchain.executable), "install"]]

    def test_no_filesystem_polyfill(self, layout, runner, downloader):
        assert WindowsPlatform(layout, runner, downloader).polyfill_std_filesystem is False

    def test_install_is_a_build_target(self, layout, runner, downloader):
        host = WindowsPlatform(layout, runner, downloader)
        build_dir = layout.build_dir(BuildConfiguration.DEBUG)

        assert host.install_command(build_dir, BuildConfiguration.DEBUG) == [
            "cmake", "--build", str(build_dir), "--config", "Debug", "--target", "install",
        ]
