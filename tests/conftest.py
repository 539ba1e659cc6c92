"""Test configuration for APK Renamer."""

import pytest
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock
import tempfile

from apk_renamer.core.types import ServiceResult
from apk_renamer.models.build import VersionMetadata
from apk_renamer.services.git import GitService

FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests.

    Yields:
        Path: A Path object pointing to the temporary directory.
            The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_apk_bytes():
    """Create minimal APK-like bytes for testing.

    Returns:
        bytes: The raw bytes of a small ZIP archive shaped like an APK.
    """
    import zipfile
    import io

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w') as zf:
        zf.writestr('AndroidManifest.xml', b'<?xml version="1.0"?><manifest/>')
        zf.writestr('classes.dex', b'dex\n035\x00')

    return buffer.getvalue()


@pytest.fixture
def build_dir(temp_dir):
    """Module build directory without any outputs yet."""
    path = temp_dir / "app" / "build"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def make_apk(build_dir, sample_apk_bytes):
    """Factory writing an APK into outputs/apk/<build type>.

    Returns:
        Callable taking (build_type, name, data=None) and returning the path.
    """
    def _make(build_type: str, name: str, data: bytes | None = None) -> Path:
        apk_dir = build_dir / "outputs" / "apk" / build_type
        apk_dir.mkdir(parents=True, exist_ok=True)
        path = apk_dir / name
        path.write_bytes(sample_apk_bytes if data is None else data)
        return path

    return _make


@pytest.fixture
def metadata():
    """Version metadata used across tests."""
    return VersionMetadata(
        application_id="com.example.app",
        version_name="1.2.0",
        version_code=7,
    )


@pytest.fixture
def fixed_clock():
    """Clock always returning the same local time."""
    return lambda: FIXED_NOW


@pytest.fixture
def fake_git():
    """GitService stand-in that resolves to 'feature_login'."""
    git = MagicMock(spec=GitService)
    git.fallback = "unknown"
    git.resolve_branch.return_value = ServiceResult.ok("feature_login")
    return git
