import numpy as np


class NetworkError(ValueError):
    """Base class for contract violations raised by tanhnet"""


class ShapeMismatchError(NetworkError):
    """A layer length does not match the weight matrix it meets"""


class InvalidDimensionError(NetworkError):
    """A layer size is not a positive integer"""


def check_dimension(name: str, value) -> int:
    """Return ``value`` as an int, or raise if it is not a positive integer"""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
        raise InvalidDimensionError(f"{name} must be a positive integer, got {value!r}")
    return int(value)
