"""Backpropagation for a one-hidden-layer tanh network"""
from tanhnet.activation import activate, d_activate
from tanhnet.backprop import hidden_deltas, output_deltas, update_weights
from tanhnet.config import TrainingConfig, setup_logging
from tanhnet.data import as_examples, inverse_example, inverse_examples
from tanhnet.errors import InvalidDimensionError, NetworkError, ShapeMismatchError
from tanhnet.initializer import build_network
from tanhnet.network import Network
from tanhnet.propagation import forward, predict, propagate_layer
from tanhnet.training import fit, iter_train, loss_history, squared_error, train_all, train_step

__version__ = '0.1.0'
