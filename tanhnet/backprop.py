"""Backwards propagation and connection strength updates.

weight-change = error-delta * neuron-value
new-weight = weight + learning rate * weight-change
"""
import numpy as np

from tanhnet.activation import d_activate
from tanhnet.errors import ShapeMismatchError


def _vector(value, name: str) -> np.ndarray:
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim != 1:
        raise ShapeMismatchError(f"{name} must be 1-D, got shape {arr.shape}")
    return arr


def output_deltas(targets, outputs) -> np.ndarray:
    """Desired minus actual, scaled by the gradient of the activation"""
    targets = _vector(targets, 'targets')
    outputs = _vector(outputs, 'outputs')
    if targets.shape != outputs.shape:
        raise ShapeMismatchError(
            f"targets {targets.shape} do not match output neurons {outputs.shape}")
    return d_activate(outputs) * (targets - outputs)


def hidden_deltas(out_deltas, hidden, weights) -> np.ndarray:
    """Output deltas pushed back through the hidden-output weights"""
    out_deltas = _vector(out_deltas, 'output deltas')
    hidden = _vector(hidden, 'hidden layer')
    weights = np.asarray(weights, dtype=np.float64)
    if weights.shape != hidden.shape + out_deltas.shape:
        raise ShapeMismatchError(
            f"weights {weights.shape} do not connect hidden layer {hidden.shape} "
            f"to output deltas {out_deltas.shape}")
    # row j sums over destination k: W[j, k] * delta[k]
    return d_activate(hidden) * (weights @ out_deltas)


def update_weights(deltas, neurons, weights, learning_rate: float) -> np.ndarray:
    deltas = _vector(deltas, 'deltas')
    neurons = _vector(neurons, 'neurons')
    weights = np.asarray(weights, dtype=np.float64)
    if weights.shape != neurons.shape + deltas.shape:
        raise ShapeMismatchError(
            f"weights {weights.shape} do not match source neurons {neurons.shape} "
            f"and deltas {deltas.shape}")
    return weights + learning_rate * np.outer(neurons, deltas)
