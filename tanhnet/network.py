"""Immutable record for a one-hidden-layer network.

Neurons
  Input  Hidden  Output
  A      1       C
  B      2       D
         3

Weights are stored row = source neuron, column = destination neuron:
  input -> hidden   [[A1 A2 A3], [B1 B2 B3]]
  hidden -> output  [[1C 1D], [2C 2D], [3C 3D]]
"""
import dataclasses
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import numpy as np

from tanhnet.errors import ShapeMismatchError

FIELDS = (
    'input_layer',
    'input_hidden_weights',
    'hidden_layer',
    'hidden_output_weights',
    'output_layer',
)


def _frozen_array(value, ndim: int, name: str) -> np.ndarray:
    try:
        arr = np.array(value, dtype=np.float64)
    except ValueError as e:
        raise ShapeMismatchError(f"{name} is not a rectangular {ndim}-D array: {e}") from e
    if arr.ndim != ndim:
        raise ShapeMismatchError(f"{name} must be {ndim}-D, got shape {arr.shape}")
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class Network:
    """Input layer, weights, hidden layer, weights, output layer"""
    input_layer: np.ndarray
    input_hidden_weights: np.ndarray
    hidden_layer: np.ndarray
    hidden_output_weights: np.ndarray
    output_layer: np.ndarray

    def __post_init__(self):
        for name in FIELDS:
            ndim = 2 if name.endswith('weights') else 1
            object.__setattr__(self, name, _frozen_array(getattr(self, name), ndim, name))

        n_in = self.input_layer.shape[0]
        ih_rows, ih_cols = self.input_hidden_weights.shape
        n_hidden = self.hidden_layer.shape[0]
        ho_rows, ho_cols = self.hidden_output_weights.shape
        n_out = self.output_layer.shape[0]

        if n_in != ih_rows:
            raise ShapeMismatchError(
                f"input layer has {n_in} neurons but input-hidden weights have {ih_rows} rows")
        if not ih_cols == n_hidden == ho_rows:
            raise ShapeMismatchError(
                f"input-hidden weights have {ih_cols} columns, hidden layer has {n_hidden} "
                f"neurons, hidden-output weights have {ho_rows} rows")
        if ho_cols != n_out:
            raise ShapeMismatchError(
                f"hidden-output weights have {ho_cols} columns but output layer has {n_out} neurons")

    @classmethod
    def from_tuple(cls, values: Sequence) -> 'Network':
        if len(values) != len(FIELDS):
            raise ShapeMismatchError(f"expected a {len(FIELDS)}-tuple, got {len(values)} items")
        return cls(*values)

    def __iter__(self) -> Iterator[np.ndarray]:
        return (getattr(self, name) for name in FIELDS)

    def __eq__(self, other):
        if not isinstance(other, Network):
            return NotImplemented
        return all(np.array_equal(a, b) for a, b in zip(self, other))

    __hash__ = None

    @property
    def dimensions(self) -> Tuple[int, int, int]:
        return (self.input_layer.shape[0],
                self.hidden_layer.shape[0],
                self.output_layer.shape[0])

    def with_layers(self, input_layer, hidden_layer, output_layer) -> 'Network':
        return dataclasses.replace(self,
                                   input_layer=input_layer,
                                   hidden_layer=hidden_layer,
                                   output_layer=output_layer)

    def with_weights(self, input_hidden_weights, hidden_output_weights) -> 'Network':
        return dataclasses.replace(self,
                                   input_hidden_weights=input_hidden_weights,
                                   hidden_output_weights=hidden_output_weights)
