"""Filesystem path helpers for the dataset resource.

The dataset ships inside the package under ``data/``; settings or an explicit
argument may point elsewhere.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from brickset.core.config import get_settings

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PACKAGE_ROOT / "data"
DEFAULT_DATASET = DATA_DIR / "brickset.json"


def resolve_data_file(path: Optional[Union[str, Path]] = None) -> Path:
    """Return the dataset path to load.

    Priority: explicit ``path``, then ``BRICKSET_DATA_FILE`` (via settings),
    then the bundled dataset.
    """
    if path is None:
        path = get_settings().data_file
    if path is None:
        return DEFAULT_DATASET
    return Path(path).expanduser()


__all__ = ["PACKAGE_ROOT", "DATA_DIR", "DEFAULT_DATASET", "resolve_data_file"]
