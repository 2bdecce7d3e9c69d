from __future__ import annotations

import os
import random

import numpy as np
import pytest

from chain_reactions.utils.config import config as cr_config

DEFAULT_SEED = int(os.getenv("CHAIN_REACTIONS_SEED", "1234"))


def pytest_configure(config) -> None:  # pylint: disable=unused-argument
    random.seed(DEFAULT_SEED)
    np.random.seed(DEFAULT_SEED)


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    cr_config.debug = False


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(DEFAULT_SEED)
