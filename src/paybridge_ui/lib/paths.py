"""
Path utilities for the PayBridge UI.
"""

import tempfile
from pathlib import Path


def temp_dir() -> Path:
    """Return the system temporary directory as a Path."""
    return Path(tempfile.gettempdir())


def cache_dir(name: str) -> Path:
    """
    Return a per-application cache directory under the temp directory.

    Args:
        name: Sub-directory name for the cache.

    Returns:
        Path such as ``/tmp/paybridge_ui/<name>`` (not created here).
    """
    return temp_dir() / "paybridge_ui" / name
