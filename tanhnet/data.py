from typing import Iterator, List, Sequence, Tuple

import numpy as np

from tanhnet.errors import ShapeMismatchError

Example = Tuple[np.ndarray, np.ndarray]


def inverse_example(rng: np.random.Generator) -> Example:
    """Given [n, 0] the network should answer [0, n]"""
    n = rng.random()
    return np.array([n, 0.0]), np.array([0.0, n])


def inverse_examples(count: int, rng: np.random.Generator) -> Iterator[Example]:
    for _ in range(count):
        yield inverse_example(rng)


def as_examples(inputs: Sequence, targets: Sequence) -> List[Example]:
    if len(inputs) != len(targets):
        raise ShapeMismatchError(f"{len(inputs)} inputs but {len(targets)} targets")
    return [(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
            for x, y in zip(inputs, targets)]
