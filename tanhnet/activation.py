import numpy as np


# Activation functions
def activate(x):
    return np.tanh(x)


def d_activate(y):
    # y is the activated output, not the net input
    return 1.0 - y * y
