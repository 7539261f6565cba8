"""Global pytest configuration for the dtoview test-suite.

The module ensures the ``src`` tree is importable regardless of whether the
package has been installed, and isolates every test from ``DTOVIEW_*``
environment variables and cached settings.
"""

import os
import sys
from pathlib import Path

import pytest

# Add the src directory to the Python path so imports work without installing
project_root = Path(__file__).parent.parent
src_dir = project_root / 'src'

if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from dtoview.config import ENV_PREFIX, reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop settings overrides from the environment and the settings cache."""

    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
