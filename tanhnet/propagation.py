"""Feed forward"""
import numpy as np

from tanhnet.activation import activate
from tanhnet.errors import ShapeMismatchError
from tanhnet.network import Network


def propagate_layer(inputs, weights) -> np.ndarray:
    """Forward propagate the input of a layer"""
    inputs = np.asarray(inputs, dtype=np.float64)
    weights = np.asarray(weights, dtype=np.float64)
    if inputs.ndim != 1 or weights.ndim != 2 or inputs.shape[0] != weights.shape[0]:
        raise ShapeMismatchError(
            f"cannot propagate {inputs.shape} inputs through {weights.shape} weights")
    return activate(inputs @ weights)


def forward(network: Network, inputs) -> Network:
    """Run one input through the network, keeping the weights"""
    new_hidden = propagate_layer(inputs, network.input_hidden_weights)
    new_output = propagate_layer(new_hidden, network.hidden_output_weights)
    return network.with_layers(inputs, new_hidden, new_output)


def predict(network: Network, inputs) -> np.ndarray:
    return forward(network, inputs).output_layer
