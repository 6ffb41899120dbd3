"""Configuration utilities for bvgenealogy."""
from .schema import ConfigSchema, InferenceConfig, OutputConfig, SimulationConfig, inference_config, load_config

__all__ = ["ConfigSchema", "InferenceConfig", "OutputConfig", "SimulationConfig", "inference_config", "load_config"]
