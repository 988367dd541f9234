"""
Tests for the activation catalog.

Validates closed forms, analytic derivatives and construction rules.
"""

import dataclasses
import math
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from leaf_detective.core import (
    Activation,
    ACTIVATIONS,
    get_activation,
    identity,
    sigmoid,
    relu,
    sinc,
    softplus,
)


POINTS = [-2.0, -0.5, 0.3, 1.7]


def numeric_derivative(func, x, h=1e-6):
    return (func(x + h) - func(x - h)) / (2 * h)


class TestActivation:
    """Tests for the Activation pair."""

    def test_missing_derivative_fails(self):
        with pytest.raises(TypeError):
            Activation(lambda x: x, None)

    def test_missing_source_fails(self):
        with pytest.raises(TypeError):
            Activation(None, lambda x: 1.0)

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            sigmoid.source = math.tanh

    def test_from_scalar_is_elementwise(self):
        activation = Activation.from_scalar(
            lambda x: max(0.0, x), lambda x: 0.0 if x <= 0 else 1.0
        )
        values = np.array([-2.0, 0.0, 3.0])
        assert activation.source(values).tolist() == [0.0, 0.0, 3.0]
        assert activation.derivative(values).tolist() == [0.0, 0.0, 1.0]

    def test_from_scalar_incomplete(self):
        with pytest.raises(TypeError):
            Activation.from_scalar(math.tanh, None)

    def test_call_is_source(self):
        assert sigmoid(0.0) == pytest.approx(0.5)


class TestCatalog:
    """Tests for the named activations."""

    def test_catalog_names(self):
        assert set(ACTIVATIONS) == {
            "identity", "sigmoid", "relu", "arctan", "elliotsig",
            "gaussian", "sinusoid", "sinc", "softplus",
        }

    def test_get_activation(self):
        assert get_activation("relu") is relu

    def test_get_unknown_activation(self):
        with pytest.raises(ValueError, match="Unknown activation"):
            get_activation("swish")

    @pytest.mark.parametrize("name", sorted(ACTIVATIONS))
    def test_derivative_matches_slope(self, name):
        activation = ACTIVATIONS[name]
        for x in POINTS:
            expected = numeric_derivative(activation.source, x)
            assert activation.derivative(x) == pytest.approx(expected, abs=1e-6)

    @pytest.mark.parametrize("name", sorted(ACTIVATIONS))
    def test_elementwise_on_arrays(self, name):
        activation = ACTIVATIONS[name]
        values = np.array(POINTS)
        out = np.asarray(activation.source(values))
        slopes = np.asarray(activation.derivative(values))
        assert out.shape == values.shape
        assert slopes.shape == values.shape
        for i, x in enumerate(POINTS):
            assert out[i] == pytest.approx(float(activation.source(x)))


class TestSigmoid:
    """Tests for sigmoid bounds and derivative."""

    def test_bounds(self):
        for z in np.linspace(-30, 30, 61):
            assert 0.0 < sigmoid.source(z) < 1.0

    def test_derivative_identity(self):
        for z in np.linspace(-10, 10, 41):
            s = sigmoid.source(z)
            d = sigmoid.derivative(z)
            assert d == pytest.approx(s * (1 - s))
            assert 0.0 < d <= 0.25

    def test_derivative_peak(self):
        assert sigmoid.derivative(0.0) == pytest.approx(0.25)

    def test_known_value(self):
        assert sigmoid.source(6.5) == pytest.approx(0.99850, abs=1e-5)


class TestPiecewise:
    """Tests for special points of the catalog."""

    def test_relu_subgradient(self):
        assert relu.derivative(0.0) == 0.0
        assert relu.derivative(-1.0) == 0.0
        assert relu.derivative(1e-9) == 1.0
        assert relu.source(-3.0) == 0.0
        assert relu.source(3.0) == 3.0

    def test_sinc_at_zero(self):
        assert sinc.source(0.0) == 1.0
        assert sinc.derivative(0.0) == 0.0

    def test_sinc_unnormalized(self):
        assert sinc.source(math.pi) == pytest.approx(0.0, abs=1e-12)
        assert sinc.source(2.0) == pytest.approx(math.sin(2.0) / 2.0)

    def test_identity(self):
        assert identity.source(4.2) == 4.2
        assert identity.derivative(4.2) == 1.0

    def test_softplus_derivative_is_sigmoid(self):
        for z in POINTS:
            assert softplus.derivative(z) == pytest.approx(sigmoid.source(z))

    def test_softplus_large_input(self):
        assert softplus.source(1000.0) == pytest.approx(1000.0)
