import logging
from typing import Union

import numpy as np

from tanhnet.errors import check_dimension
from tanhnet.network import Network

logger = logging.getLogger(__name__)

RandomSource = Union[None, int, np.random.Generator]


def gen_weights(rows: int, cols: int, rng: np.random.Generator) -> np.ndarray:
    """Uniform weights in [0, 1/(rows*cols))"""
    return rng.uniform(0.0, 1.0 / (rows * cols), size=(rows, cols))


def build_network(num_in: int,
                  num_hidden: int,
                  num_out: int,
                  random_source: RandomSource = None) -> Network:
    """Zeroed neurons with small random weights.

    ``random_source`` is a numpy Generator or a seed; ``None`` draws fresh
    entropy.
    """
    num_in = check_dimension('num_in', num_in)
    num_hidden = check_dimension('num_hidden', num_hidden)
    num_out = check_dimension('num_out', num_out)
    rng = np.random.default_rng(random_source)

    logger.debug(f"Building {num_in}-{num_hidden}-{num_out} network")
    return Network(
        input_layer=np.zeros(num_in),
        input_hidden_weights=gen_weights(num_in, num_hidden, rng),
        hidden_layer=np.zeros(num_hidden),
        hidden_output_weights=gen_weights(num_hidden, num_out, rng),
        output_layer=np.zeros(num_out),
    )
