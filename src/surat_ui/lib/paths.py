"""
Path utilities for the letter numbering UI.

Resolves where on-disk state (the lookup cache) lives.
"""

import os
import tempfile
from pathlib import Path


def temp_dir() -> Path:
    """Return the system temporary directory as a Path."""
    return Path(tempfile.gettempdir())


def cache_dir(name: str = "surat_ui") -> Path:
    """
    Return the directory used for the disk cache.

    SURAT_UI_CACHE_DIR overrides the default location under the
    system temp directory.

    Args:
        name: Sub-directory name under the temp directory.

    Returns:
        Path to the cache directory (not created here).
    """
    override = os.getenv("SURAT_UI_CACHE_DIR")
    if override:
        return Path(override)
    return temp_dir() / name
