from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def manifest_path() -> Path:
    return FIXTURES / "manifest.json"


@pytest.fixture
def version_path() -> Path:
    return FIXTURES / "version_manifest.json"


@pytest.fixture
def manifest_bytes(manifest_path) -> bytes:
    return manifest_path.read_bytes()


@pytest.fixture
def version_bytes(version_path) -> bytes:
    return version_path.read_bytes()
