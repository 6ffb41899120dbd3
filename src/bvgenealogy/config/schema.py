"""Pydantic config schema and loader."""
from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from bvgenealogy.errors import ConfigError


def _parse_int(v):
    if isinstance(v, bool):
        raise ValueError("expected an integer")
    if isinstance(v, str):
        return int(v.strip())
    return v


class InferenceConfig(BaseModel):
    mutation_percent: int = 20
    scale: Optional[int] = None
    workers: int = 1
    acyclic: bool = False

    @field_validator("mutation_percent", "scale", "workers", mode="before")
    @classmethod
    def validate_integer(cls, v):
        if v is None:
            return v
        return _parse_int(v)

    @field_validator("mutation_percent")
    @classmethod
    def validate_percent(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError("mutation_percent must be within [0, 100]")
        return v

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("scale must be positive")
        return v

    @field_validator("workers")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError("workers must be at least 1")
        return v


class SimulationConfig(BaseModel):
    scale: int = 500
    mutation_percent: int = 20
    seed: Optional[int] = None
    genesis_bit_prob: float = 0.5

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("scale must be positive")
        return v

    @field_validator("mutation_percent")
    @classmethod
    def validate_percent(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError("mutation_percent must be within [0, 100]")
        return v

    @field_validator("genesis_bit_prob")
    @classmethod
    def validate_unit_interval(cls, v: float) -> float:
        if not 0 <= v <= 1:
            raise ValueError("genesis_bit_prob must be within [0, 1]")
        return v


class OutputConfig(BaseModel):
    summary: bool = False
    metrics_path: Optional[Path] = None


class ConfigSchema(BaseModel):
    inference: InferenceConfig = Field(default_factory=InferenceConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    outputs: OutputConfig = Field(default_factory=OutputConfig)


DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")


def load_config(path: Optional[Path] = None) -> ConfigSchema:
    """Read a YAML config; a missing ``path`` gives the packaged defaults."""
    path = Path(path) if path is not None else DEFAULTS_PATH
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    try:
        return ConfigSchema(**data)
    except (TypeError, ValidationError) as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc


def inference_config(base: InferenceConfig, **overrides) -> InferenceConfig:
    """Apply non-None ``overrides`` to ``base``, re-running validation."""
    data = base.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return InferenceConfig(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
