import logging

import numpy as np
import pytest

from tanhnet import Network


@pytest.fixture(autouse=True)
def setup_logging():
    """Keep library logging quiet during tests."""
    logging.getLogger("tanhnet").setLevel(logging.CRITICAL)
    yield
    logging.getLogger("tanhnet").setLevel(logging.NOTSET)


@pytest.fixture
def small_network():
    """The 2-3-2 network with hand-picked connection strengths."""
    return Network(
        input_layer=[0, 0],
        input_hidden_weights=[[0.12, 0.2, 0.13],
                              [0.01, 0.02, 0.03]],
        hidden_layer=[0, 0, 0],
        hidden_output_weights=[[0.15, 0.16],
                               [0.02, 0.03],
                               [0.01, 0.02]],
        output_layer=[0, 0],
    )


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
