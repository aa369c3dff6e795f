"""Unit tests for platform detection."""

from unittest.mock import patch

import pytest

from fbxpack.packages.platform_utils import OSFamily, PlatformDescriptor, PlatformDetector


class TestPlatformDetector:
    """Test cases for PlatformDetector."""

    def test_detect_windows(self):
        with patch("platform.system", return_value="Windows"):
            assert PlatformDetector.detect_os_family() is OSFamily.WINDOWS

    def test_detect_macos(self):
        with patch("platform.system", return_value="Darwin"):
            assert PlatformDetector.detect_os_family() is OSFamily.MACOS

    def test_detect_linux(self):
        with patch("platform.system", return_value="Linux"):
            assert PlatformDetector.detect_os_family() is OSFamily.LINUX

    def test_detect_unknown_is_explicit(self):
        """Unrecognized systems are reported, not rejected, by the probe."""
        with patch("platform.system", return_value="FreeBSD"):
            descriptor = PlatformDetector.detect()
            assert descriptor.os_family is OSFamily.UNKNOWN

    def test_detect_word_width(self):
        with patch("platform.system", return_value="Linux"):
            with patch("sys.maxsize", 2**63 - 1):
                assert PlatformDetector.detect().is_64bit
            with patch("sys.maxsize", 2**31 - 1):
                assert not PlatformDetector.detect().is_64bit


class TestPlatformDescriptor:
    """Test cases for PlatformDescriptor."""

    def test_flags(self):
        descriptor = PlatformDescriptor(OSFamily.WINDOWS, True)
        assert descriptor.is_windows
        assert not descriptor.is_macos
        assert not descriptor.is_linux

    def test_is_immutable(self):
        descriptor = PlatformDescriptor(OSFamily.LINUX, True)
        with pytest.raises(AttributeError):
            descriptor.is_64bit = False
