import logging

import numpy as np
import pytest


@pytest.fixture
def rng():
    """A deterministic random source so fault planes and colors are reproducible."""
    return np.random.default_rng(1337)


@pytest.fixture
def logger():
    return logging.getLogger("fault_terrain.tests")
