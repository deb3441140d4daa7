"""Putting the pieces together.

1. Forward propagate the input to get the output
2. Calculate the errors from the target through backpropagation
3. Update the connection strengths
"""
import itertools
import logging
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from tanhnet.backprop import hidden_deltas, output_deltas, update_weights
from tanhnet.config import TrainingConfig
from tanhnet.errors import ShapeMismatchError
from tanhnet.initializer import build_network
from tanhnet.network import Network
from tanhnet.propagation import forward

logger = logging.getLogger(__name__)


def squared_error(target, output) -> float:
    target = np.asarray(target, dtype=np.float64)
    output = np.asarray(output, dtype=np.float64)
    if target.shape != output.shape:
        raise ShapeMismatchError(f"target shape {target.shape} != output shape {output.shape}")
    return float(np.sum((target - output) ** 2))


def _step(network: Network, inputs, target, learning_rate: float) -> Tuple[Network, float]:
    activated = forward(network, inputs)
    o_deltas = output_deltas(target, activated.output_layer)
    h_deltas = hidden_deltas(o_deltas,
                             activated.hidden_layer,
                             activated.hidden_output_weights)
    new_ho = update_weights(o_deltas,
                            activated.hidden_layer,
                            activated.hidden_output_weights,
                            learning_rate)
    new_ih = update_weights(h_deltas,
                            activated.input_layer,
                            activated.input_hidden_weights,
                            learning_rate)
    error = squared_error(target, activated.output_layer)
    return activated.with_weights(new_ih, new_ho), error


def train_step(network: Network, inputs, target, learning_rate: float) -> Network:
    """One forward pass and one weight update for a single example"""
    new_network, _ = _step(network, inputs, target, learning_rate)
    return new_network


def _run(network: Network,
         examples: Iterable,
         learning_rate: float,
         max_examples: Optional[int]) -> Iterator[Tuple[int, float, Network]]:
    if max_examples is not None:
        examples = itertools.islice(examples, max_examples)
    for step, (inputs, target) in enumerate(examples, start=1):
        network, error = _step(network, inputs, target, learning_rate)
        yield step, error, network


def iter_train(network: Network,
               examples: Iterable,
               learning_rate: float,
               max_examples: Optional[int] = None) -> Iterator[Network]:
    """Yield the network after each example"""
    for _, _, trained in _run(network, examples, learning_rate, max_examples):
        yield trained


def train_all(network: Network,
              examples: Iterable,
              learning_rate: float,
              max_examples: Optional[int] = None,
              log_every: int = 100) -> Network:
    """Train on (input, target) pairs in order, one update per example.

    ``examples`` may be any iterable; an unbounded generator needs
    ``max_examples`` to stop.
    """
    if log_every <= 0:
        raise ValueError(f"log_every must be positive, got {log_every}")
    logger.info(f"Training {'-'.join(map(str, network.dimensions))} network "
                f"with learning rate {learning_rate}")
    steps = 0
    for steps, error, network in _run(network, examples, learning_rate, max_examples):
        if steps % log_every == 0:
            logger.debug(f"Step {steps:5d} | Error: {error:.6f}")
    logger.info(f"Trained on {steps} examples")
    return network


def loss_history(network: Network,
                 examples: Iterable,
                 learning_rate: float,
                 max_examples: Optional[int] = None) -> Tuple[Network, pd.DataFrame]:
    """Train like train_all and report each step's error before its update"""
    rows = []
    for step, error, network in _run(network, examples, learning_rate, max_examples):
        rows.append({'step': step, 'error': error})
    history = pd.DataFrame(rows, columns=['step', 'error'])
    return network, history


def fit(examples: Iterable,
        config: TrainingConfig,
        network: Optional[Network] = None) -> Network:
    """Train a network for config.epochs passes over the examples"""
    if network is None:
        network = build_network(config.input_dim,
                                config.hidden_dim,
                                config.output_dim,
                                config.random_state)
    examples = list(examples)
    logger.info(f"Fitting {len(examples)} examples for {config.epochs} epochs")
    repeated = itertools.chain.from_iterable(itertools.repeat(examples, config.epochs))
    return train_all(network, repeated, config.learning_rate, log_every=config.log_every)
