import pytest

pytest.importorskip("pydantic")
pytest.importorskip("yaml")

from pydantic import ValidationError

from bvgenealogy.config import ConfigSchema, InferenceConfig, SimulationConfig, inference_config, load_config
from bvgenealogy.errors import ConfigError


def test_packaged_defaults_match_schema_defaults():
    assert load_config() == ConfigSchema()


def test_mutation_percent_accepts_integer_strings():
    assert InferenceConfig(mutation_percent="20").mutation_percent == 20
    assert InferenceConfig(mutation_percent=" 0 ").mutation_percent == 0


@pytest.mark.parametrize("value", ["abc", "20.5", "", "101", "-1", 101, True])
def test_mutation_percent_rejects_bad_values(value):
    with pytest.raises(ValidationError):
        InferenceConfig(mutation_percent=value)


def test_scale_and_workers_must_be_positive():
    with pytest.raises(ValidationError):
        InferenceConfig(scale=0)
    with pytest.raises(ValidationError):
        InferenceConfig(workers=0)


def test_simulation_bounds():
    with pytest.raises(ValidationError):
        SimulationConfig(genesis_bit_prob=1.5)
    with pytest.raises(ValidationError):
        SimulationConfig(scale=0)


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("inference:\n  mutation_percent: 35\n  acyclic: true\noutputs:\n  summary: true\n")
    cfg = load_config(path)
    assert cfg.inference.mutation_percent == 35
    assert cfg.inference.acyclic is True
    assert cfg.outputs.summary is True
    assert cfg.simulation == SimulationConfig()


def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")
    bad = tmp_path / "bad.yaml"
    bad.write_text("inference:\n  mutation_percent: 500\n")
    with pytest.raises(ConfigError):
        load_config(bad)


def test_inference_overrides_skip_none():
    base = InferenceConfig(mutation_percent=10, workers=3)
    merged = inference_config(base, mutation_percent="40", scale=None, acyclic=None)
    assert merged.mutation_percent == 40
    assert merged.workers == 3
    with pytest.raises(ConfigError):
        inference_config(base, workers=0)
