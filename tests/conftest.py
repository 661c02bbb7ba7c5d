import numpy as np
import pytest

from accrete import planetary_system
from accrete.base.disk import DustCloud
from accrete.config import build_config


@pytest.fixture(scope="session")
def sun_system():
    return planetary_system(42, 1.0)


@pytest.fixture
def config():
    return build_config(1.0)


@pytest.fixture
def cloud():
    return DustCloud(1.0, 1.5e-3)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
