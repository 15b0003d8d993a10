"""Shared test fixtures and configuration."""

import shutil
import tempfile
from pathlib import Path

import pytest

# =============================================================================
# DIRECTORY FIXTURES
# =============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    yield path
    # Cleanup after test
    if path.exists():
        shutil.rmtree(path)


@pytest.fixture
def vault_dir(temp_dir):
    """Create an empty notes vault."""
    vault = temp_dir / "vault"
    vault.mkdir(parents=True)
    return vault


@pytest.fixture
def store_path(temp_dir):
    """Path for a directory store file (not created)."""
    return temp_dir / "config" / "directories.json"


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_transcript():
    """Sample transcript text for testing."""
    return """Welcome to this video about Python programming.
Today we will learn about testing with pytest.
Testing is an important part of software development."""


@pytest.fixture
def saved_directories():
    """Saved directory shortcuts as persisted by the store."""
    return ["Transcripts", "Notes/YouTube", "Videos/Transcripts"]


# =============================================================================
# YOUTUBE URL FIXTURES
# =============================================================================


@pytest.fixture
def video_id():
    """A well-formed video ID."""
    return "dQw4w9WgXcQ"


@pytest.fixture
def youtube_urls():
    """Sample YouTube URLs for testing, all pointing at dQw4w9WgXcQ."""
    return {
        "standard": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "no_www": "https://youtube.com/watch?v=dQw4w9WgXcQ",
        "mobile": "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
        "mobile_long": "https://mobile.youtube.com/watch?v=dQw4w9WgXcQ",
        "music": "https://music.youtube.com/watch?v=dQw4w9WgXcQ",
        "short": "https://youtu.be/dQw4w9WgXcQ",
        "embed": "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "with_params": "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=10s&list=PLxxx",
    }
