"""
Tests for configuration, the training loop and plotting.
"""

import json
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from leaf_detective import (
    TrainingConfig,
    Trainer,
    TrainingMetrics,
    train_network,
    load_config,
    save_config,
    FIRST_BIT,
    CELSIUS_TO_FAHRENHEIT,
    Network,
    Weights,
    Biases,
    identity,
    MSELoss,
    MAELoss,
)


AND_SAMPLES = [
    ([0, 0], [0]),
    ([0, 1], [0]),
    ([1, 0], [0]),
    ([1, 1], 1),
]


class TestTrainingConfig:
    def test_defaults(self):
        config = TrainingConfig()
        assert config.layer_sizes == [2, 2, 1]
        assert config.activation == "sigmoid"

    def test_save_and_load(self, tmp_path):
        config = TrainingConfig(layer_sizes=[3, 5, 1], activation="relu", momentum=None, seed=3)
        path = tmp_path / "nested" / "config.json"
        save_config(config, path)
        assert json.loads(path.read_text())["layer_sizes"] == [3, 5, 1]
        assert load_config(path) == config

    def test_build_network(self):
        network = TrainingConfig(layer_sizes=[3, 4, 2], activation="identity").build_network()
        assert isinstance(network, Network)
        assert network.activation is identity
        assert network[0].weights.shape == (4, 3)
        assert network[2].biases.shape == (2,)
        assert network[0].next is network[1]

    def test_build_network_seeded(self):
        a = TrainingConfig(seed=9).build_network()
        b = TrainingConfig(seed=9).build_network()
        np.testing.assert_array_equal(a[0].weights.values, b[0].weights.values)

    def test_unknown_activation(self):
        with pytest.raises(ValueError):
            TrainingConfig(activation="swish").build_network()

    def test_presets(self):
        assert FIRST_BIT.layer_sizes == [3, 3, 3, 1]
        assert FIRST_BIT.iterations_per_sample == 50
        assert CELSIUS_TO_FAHRENHEIT.layer_sizes == [1, 4, 2, 1]
        assert CELSIUS_TO_FAHRENHEIT.learning_rate == 0.01


class TestLosses:
    def test_mse(self):
        assert MSELoss()([1.0, 2.0], [0.0, 0.0]) == pytest.approx(2.5)

    def test_mae(self):
        assert MAELoss()([1.0, -3.0], [0.0, 0.0]) == pytest.approx(2.0)


class TestTrainer:
    def test_train_reduces_error(self):
        config = TrainingConfig(layer_sizes=[2, 2, 1], learning_rate=0.5, momentum=1.0,
                                epochs=300, seed=1)
        trainer = Trainer(config=config)
        metrics = trainer.train(AND_SAMPLES, verbose=False)
        assert len(metrics.epoch_errors) == 300
        assert len(metrics.epoch_times) == 300
        assert metrics.epoch_errors[-1] < metrics.epoch_errors[0]

    def test_iterations_per_sample(self):
        config = TrainingConfig(layer_sizes=[1, 1], activation="identity",
                                learning_rate=0.1, momentum=1.0, iterations_per_sample=3)
        network = Network([1, 1], activation=identity).connect()
        network[0].add_weights(Weights(1, 1).populate([[2]]))
        network[1].add_biases(Biases(1).populate([0.5]))
        trainer = Trainer(config=config, network=network)
        error = trainer.train_sample([3], [7])
        # The first step reaches the target, later steps change nothing
        assert trainer.predict([3])[0] == pytest.approx(7.0)
        assert trainer.network[0].weights[0][0] == pytest.approx(2.15)
        assert error == pytest.approx(0.0, abs=1e-12)

    def test_verbose_output(self, capsys):
        config = TrainingConfig(epochs=2, log_interval=1, seed=0)
        Trainer(config=config).train(AND_SAMPLES, verbose=True)
        captured = capsys.readouterr().out
        assert "Epoch 0" in captured
        assert "Epoch 1" in captured
        assert "Training complete" in captured

    def test_quiet(self, capsys):
        Trainer(config=TrainingConfig(seed=0)).train(AND_SAMPLES, verbose=False)
        assert capsys.readouterr().out == ""

    def test_evaluate_does_not_update(self):
        trainer = Trainer(config=TrainingConfig(seed=2))
        before = trainer.network[0].weights.values.copy()
        results = trainer.evaluate(AND_SAMPLES)
        np.testing.assert_array_equal(trainer.network[0].weights.values, before)
        assert set(results) == {"mean_abs_error", "max_abs_error", "mean_squared_error"}
        assert results["max_abs_error"] >= results["mean_abs_error"]

    def test_evaluate_scale(self):
        trainer = Trainer(config=TrainingConfig(seed=2))
        plain = trainer.evaluate(AND_SAMPLES)
        scaled = trainer.evaluate(AND_SAMPLES, scale=212.0)
        assert scaled["mean_abs_error"] == pytest.approx(plain["mean_abs_error"] * 212.0)
        assert scaled["mean_squared_error"] == pytest.approx(plain["mean_squared_error"])

    def test_train_network(self):
        network, metrics = train_network(TrainingConfig(epochs=3, seed=4), AND_SAMPLES, verbose=False)
        assert isinstance(network, Network)
        assert isinstance(metrics, TrainingMetrics)
        assert len(metrics.epoch_errors) == 3

    def test_metrics_save(self, tmp_path):
        metrics = TrainingMetrics(epoch_errors=[0.5, 0.25], epoch_times=[0.1, 0.1])
        path = tmp_path / "metrics.json"
        metrics.save(str(path))
        assert json.loads(path.read_text()) == metrics.to_dict()


class TestPlots:
    def test_plot_training_metrics(self, tmp_path):
        pytest.importorskip("matplotlib")
        import matplotlib
        matplotlib.use("Agg")
        from leaf_detective.visualization import plot_training_metrics

        errors = list(np.geomspace(1.0, 0.001, 40))
        errors[-1] = 0.01
        metrics = TrainingMetrics(epoch_errors=errors, epoch_times=[0.01] * 40)
        path = tmp_path / "plots" / "metrics.png"
        fig = plot_training_metrics(metrics, save_path=path, show=False)
        assert path.exists()

        ax_err, ax_time = fig.axes
        assert ax_err.get_yscale() == "log"
        labels = ax_err.get_legend_handles_labels()[1]
        assert any(label.startswith("best: epoch 38") for label in labels)
        assert len(ax_time.patches) == 40

    def test_plot_empty_metrics(self):
        pytest.importorskip("matplotlib")
        import matplotlib
        matplotlib.use("Agg")
        from leaf_detective.visualization import plot_training_metrics

        fig = plot_training_metrics(TrainingMetrics(), show=False)
        assert len(fig.axes) == 2
