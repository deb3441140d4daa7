import numpy as np
import pytest

from tanhnet.errors import InvalidDimensionError
from tanhnet.initializer import build_network, gen_weights


@pytest.mark.parametrize("dims", [(2, 3, 2), (1, 1, 1), (4, 7, 3)])
def test_dimension_contract(dims):
    a, b, c = dims
    net = build_network(a, b, c, np.random.default_rng(0))
    assert net.input_hidden_weights.shape == (a, b)
    assert net.hidden_output_weights.shape == (b, c)
    assert np.all(net.input_hidden_weights >= 0)
    assert np.all(net.input_hidden_weights < 1 / (a * b))
    assert np.all(net.hidden_output_weights >= 0)
    assert np.all(net.hidden_output_weights < 1 / (b * c))


def test_layers_start_at_zero():
    net = build_network(2, 3, 2, 7)
    np.testing.assert_array_equal(net.input_layer, np.zeros(2))
    np.testing.assert_array_equal(net.hidden_layer, np.zeros(3))
    np.testing.assert_array_equal(net.output_layer, np.zeros(2))


def test_seeded_runs_are_reproducible():
    assert build_network(3, 4, 2, 42) == build_network(3, 4, 2, 42)
    assert build_network(3, 4, 2, 42) != build_network(3, 4, 2, 43)


def test_generator_is_consumed():
    rng = np.random.default_rng(5)
    assert build_network(2, 2, 2, rng) != build_network(2, 2, 2, rng)


@pytest.mark.parametrize("dims", [(0, 3, 2), (2, -1, 2), (2, 3, 0), (2.5, 3, 2), (True, 3, 2)])
def test_invalid_dimensions(dims):
    with pytest.raises(InvalidDimensionError):
        build_network(*dims, random_source=0)


def test_gen_weights_bound_shrinks_with_size():
    rng = np.random.default_rng(0)
    assert gen_weights(10, 10, rng).max() < 0.01
