"""Pytest configuration and shared fixtures."""

import pytest
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def default_config():
    """Default configuration with 2 inputs and 2 outputs."""
    from aster.run.config import Config
    config = Config()
    config.num_inputs = 2
    config.num_outputs = 2
    return config


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(42)
