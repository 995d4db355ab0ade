from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the persistent config file from the real user data dir.
3. Shared fixtures for configuration dictionaries and sample inputs.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict
from unittest.mock import patch

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_config_file(tmp_path: Path):
    """Redirect config.json persistence into the test's temp directory."""
    config_path = tmp_path / "user_data" / "config.json"
    with patch("tagcloud.domain.config.CONFIG_FILE", str(config_path)):
        yield config_path


@pytest.fixture
def sample_lines() -> list:
    """The two-line scenario used across the pipeline tests."""
    return ["the cat sat on the mat\n", "the cat ran\n"]


@pytest.fixture
def sample_text_file(tmp_path: Path, sample_lines: list) -> Path:
    """Write the sample scenario to disk."""
    f = tmp_path / "story.txt"
    f.write_text("".join(sample_lines), encoding="utf-8")
    return f


@pytest.fixture
def mock_config_dict(sample_text_file: Path, tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'tagcloud.domain.config'.
    """
    return {
        "input_path": str(sample_text_file),
        "output_path": str(tmp_path / "out" / "cloud.html"),
        "word_count": 3,
        "separators": " \t, \n\r,.<>/?;:\"'{}[]_-+=~`!@#$%^&*()|",
        "font_min": 11,
        "font_max": 48,
        "stylesheets": ["tagcloud.css"],
    }
