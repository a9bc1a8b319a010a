from pathlib import Path

import pytest

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"


@pytest.fixture
def sample_grid_path() -> Path:
    return SAMPLES_DIR / "grid.json"


@pytest.fixture
def sample_grid_text(sample_grid_path) -> str:
    return sample_grid_path.read_text()
