import numpy as np
import pytest

from bvgenealogy.core.genotype import Genotype, MutationModel, dissimilarity


def test_expected_flips_rounds_down():
    assert MutationModel(20, 7).expected_flips == 1
    assert MutationModel(0, 10).expected_flips == 0
    assert MutationModel(100, 10).expected_flips == 10
    assert MutationModel(20, 10000).expected_flips == 2000


def test_mutation_model_rejects_out_of_range():
    with pytest.raises(ValueError):
        MutationModel(101, 4)
    with pytest.raises(ValueError):
        MutationModel(-1, 4)


def test_dissimilarity_is_deviation_from_expected_flips():
    model = MutationModel(50, 4)
    a = Genotype.from_string(0, "0000")
    b = Genotype.from_string(1, "0111")
    assert a.hamming(b) == 3
    assert dissimilarity(a, b, model) == 1
    assert dissimilarity(a, a, model) == model.expected_flips


def test_dissimilarity_is_symmetric():
    rng = np.random.default_rng(7)
    model = MutationModel(25, 32)
    genotypes = [Genotype(i, rng.random(32) < 0.5) for i in range(6)]
    for a in genotypes:
        for b in genotypes:
            assert dissimilarity(a, b, model) == dissimilarity(b, a, model)


def test_dissimilarity_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        dissimilarity(Genotype.from_string(0, "01"), Genotype.from_string(1, "011"), MutationModel(0, 2))


def test_from_string_rejects_other_characters():
    for text in ("01a1", "0 01", "0121", "01\t1"):
        with pytest.raises(ValueError):
            Genotype.from_string(0, text)


def test_to_string_matches_input():
    assert Genotype.from_string(3, "100101").to_string() == "100101"
    assert len(Genotype.from_string(3, "100101")) == 6
