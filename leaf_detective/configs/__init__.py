"""Configuration presets and utilities."""

from .config import TrainingConfig, load_config, save_config, FIRST_BIT, CELSIUS_TO_FAHRENHEIT

__all__ = ["TrainingConfig", "load_config", "save_config", "FIRST_BIT", "CELSIUS_TO_FAHRENHEIT"]
