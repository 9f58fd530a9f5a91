"""
Unit tests for NeuronGene class.

Tests cover initialization, tree properties, mutation and string representations.
"""

import pytest
import numpy as np
from unittest.mock import Mock

from aster.genotype.neuron_gene import NeuronGene, NeuronType
from aster.run.config import Config


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def basic_config():
    """Config with standard bias mutation parameters."""
    config = Mock(spec=Config)
    config.min_bias = -5.0
    config.max_bias = 5.0
    config.bias_perturb_prob = 0.7
    config.bias_perturb_strength = 0.5
    config.bias_replace_prob = 0.1
    return config


@pytest.fixture
def perturb_config(basic_config):
    """Config where the bias is always perturbed, with tight bounds."""
    basic_config.min_bias = -1.0
    basic_config.max_bias = 1.0
    basic_config.bias_perturb_prob = 1.0
    basic_config.bias_perturb_strength = 100.0
    basic_config.bias_replace_prob = 0.0
    return basic_config


@pytest.fixture
def replace_config(basic_config):
    """Config where the bias is always replaced."""
    basic_config.bias_perturb_prob = 0.0
    basic_config.bias_replace_prob = 1.0
    return basic_config


@pytest.fixture
def no_mutation_config(basic_config):
    basic_config.bias_perturb_prob = 0.0
    basic_config.bias_replace_prob = 0.0
    return basic_config


# ============================================================================
# Test: Constructor
# ============================================================================

class TestNeuronGeneInit:
    """Test NeuronGene initialization."""

    def test_defaults(self, basic_config):
        gene = NeuronGene((3, 0), NeuronType.INPUT, basic_config)

        assert gene.id == (3, 0)
        assert gene.type == NeuronType.INPUT
        assert gene.growth == 0
        assert gene.bias == 0.0
        assert gene.activation == 0.0

    def test_explicit_values(self, basic_config):
        gene = NeuronGene((3, 4), NeuronType.HIDDEN, basic_config, bias=0.5, growth=2, activation=1.5)

        assert gene.growth == 2
        assert gene.bias == 0.5
        assert gene.activation == 1.5

    def test_list_id_converted_to_tuple(self, basic_config):
        gene = NeuronGene([1, 2], NeuronType.HIDDEN, basic_config)
        assert gene.id == (1, 2)

    def test_tree_properties(self, basic_config):
        gene = NeuronGene((7, 9), NeuronType.HIDDEN, basic_config)

        assert gene.seed == 7
        assert gene.position == 9
        assert gene.height == 3


# ============================================================================
# Test: Mutation
# ============================================================================

class TestNeuronGeneMutate:
    """Test bias mutation."""

    def test_input_never_mutated(self, perturb_config):
        gene = NeuronGene((0, 0), NeuronType.INPUT, perturb_config)
        rng = np.random.default_rng(0)
        for _ in range(20):
            gene.mutate(rng)
        assert gene.bias == 0.0

    def test_perturbation_is_clipped(self, perturb_config):
        gene = NeuronGene((0, 1), NeuronType.HIDDEN, perturb_config)
        rng = np.random.default_rng(0)
        for _ in range(20):
            gene.mutate(rng)
            assert -1.0 <= gene.bias <= 1.0
            assert isinstance(gene.bias, float)

    def test_replacement_within_bounds(self, replace_config):
        gene = NeuronGene((255, 0), NeuronType.OUTPUT, replace_config, bias=100.0)
        gene.mutate(np.random.default_rng(1))
        assert -5.0 <= gene.bias <= 5.0

    def test_no_mutation(self, no_mutation_config):
        gene = NeuronGene((0, 1), NeuronType.HIDDEN, no_mutation_config, bias=0.25)
        rng = np.random.default_rng(0)
        for _ in range(20):
            gene.mutate(rng)
        assert gene.bias == 0.25

    def test_same_seed_same_result(self, basic_config):
        gene1 = NeuronGene((0, 1), NeuronType.HIDDEN, basic_config)
        gene2 = NeuronGene((0, 1), NeuronType.HIDDEN, basic_config)
        rng1 = np.random.default_rng(7)
        rng2 = np.random.default_rng(7)
        for _ in range(10):
            gene1.mutate(rng1)
            gene2.mutate(rng2)
        assert gene1.bias == gene2.bias


# ============================================================================
# Test: String Representations
# ============================================================================

class TestNeuronGeneStrings:

    def test_repr(self, basic_config):
        gene = NeuronGene((0, 1), NeuronType.HIDDEN, basic_config, growth=1)
        text = repr(gene)
        assert "NeuronGene(" in text
        assert "NeuronType.HIDDEN" in text
        assert "growth=1" in text

    def test_str(self, basic_config):
        gene = NeuronGene((255, 0), NeuronType.OUTPUT, basic_config)
        text = str(gene)
        assert text.startswith("OUTPUT")
        assert "(255, 0)" in text
        assert "GROWTH: 0" in text
