# Ensure project root is on sys.path for imports of main and brickset packages
import sys, os, json

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest  # noqa: E402 (after sys.path manipulation)
from brickset.core import config as core_config  # noqa: E402


SAMPLE_SETS = [
    {
        "number": "1-1", "name": "Tiny Town", "theme": "City", "pieces": 120,
        "packagingType": "Polybag", "tags": ["Microscale", "City"],
        "dimensions": {"width": 2, "height": 3, "depth": 4},
    },
    {
        "number": "2-1", "name": "Game Night", "theme": "Games", "pieces": 500,
        "packagingType": "BOX", "tags": None,
        "dimensions": {"width": 1, "height": 1, "depth": 100},
    },
    {
        "number": "3-1", "name": "Skyline", "theme": "Architecture", "pieces": 900,
        "packagingType": "Box", "tags": ["Microscale"],
        "dimensions": {"width": 10, "height": 10, "depth": None},
    },
    {
        "number": "4-1", "name": "Dice Duel", "theme": "Games", "pieces": 80,
        "tags": ["Dice", "Family Game", "Board Game"],
    },
    {
        "number": "5-1", "name": "Loose Bricks", "theme": None, "pieces": 500,
    },
]


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and any BRICKSET_ env so each test starts clean."""
    for key in list(os.environ):
        if key.startswith("BRICKSET_"):
            monkeypatch.delenv(key, raising=False)
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def sample_sets():
    return [dict(s) for s in SAMPLE_SETS]


@pytest.fixture()
def dataset_file(tmp_path, sample_sets):
    """Write the sample records to a temporary brickset.json and return its path."""
    path = tmp_path / "brickset.json"
    path.write_text(json.dumps(sample_sets, indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def repo(dataset_file):
    from brickset.repository.lego_sets import LegoSetRepository
    return LegoSetRepository(dataset_file)


@pytest.fixture(autouse=True)
def reset_package_logger(monkeypatch):
    """Undo handlers/levels installed by cli.main so each test sees a bare logger."""
    import logging
    from brickset.core import logging as core_logging
    logger = logging.getLogger("brickset")
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    monkeypatch.setattr(core_logging, "_initialized", False)
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
