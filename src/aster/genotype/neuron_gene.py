"""
Aster Neuron Gene Module

This module implements the NeuronGene class and NeuronType enumeration.

Classes:
    NeuronType: Enumeration for neuron types (INPUT, HIDDEN, OUTPUT)
    NeuronGene: Gene encoding a single network neuron
"""

import numpy as np
from enum import Enum

from aster.genotype.identifier import NeuronId
from aster.genotype.tree       import neuron_height
from aster.run.config          import Config

class NeuronType(Enum):
    """
    Neurons come in three types: input, hidden, output.
    """
    INPUT  = "I"
    HIDDEN = "H"
    OUTPUT = "O"

class NeuronGene:
    """
    A gene describing a neuron in a tree-indexed genome.

    The neuron ID is the pair (seed, position): 'seed' names the growth tree
    the neuron belongs to and 'position' is its heap index inside that tree.
    Input and output neurons sit at the root (position 0) of their own tree;
    hidden neurons are grown as children of input or hidden neurons.

    Public Attributes:
        id:         (seed, position) pair, unique within a genome
        type:       Type of neuron (INPUT, HIDDEN, or OUTPUT)
        growth:     Number of hidden children grown from this neuron (0, 1 or 2)
        bias:       Bias value added to the neuron's weighted input
        activation: Extra per-neuron value carried for the phenotype (not interpreted here)

    Public Properties:
        seed, position, height

    Public Methods:
        mutate(rng): Stochastically mutate the bias
    """

    def __init__(self,
                 neuron_id  : NeuronId,
                 neuron_type: NeuronType,
                 config     : Config,
                 bias       : float = 0.0,
                 growth     : int   = 0,
                 activation : float = 0.0):
        """
        Initialize a neuron gene.

        Parameters:
            neuron_id:   (seed, position) pair
            neuron_type: Type of neuron (INPUT, HIDDEN, or OUTPUT)
            config:      Stores configuration parameters
            bias:        Bias value added to the neuron's weighted input
            growth:      Number of hidden children already grown from this neuron
            activation:  Extra per-neuron value carried for the phenotype
        """
        self._config   : Config     = config
        self.id        : NeuronId   = tuple(neuron_id)
        self.type      : NeuronType = neuron_type
        self.growth    : int        = growth
        self.bias      : float      = bias
        self.activation: float      = activation

    @property
    def seed(self) -> int:
        return self.id[0]

    @property
    def position(self) -> int:
        return self.id[1]

    @property
    def height(self) -> int:
        return neuron_height(self.position)

    def mutate(self, rng: np.random.Generator) -> None:
        """
        Stochastically mutate the (gene describing the) neuron.

        Only the 'bias' changes, either additively by a small amount or by
        replacement with a new value. Input neurons pass their input through
        unchanged and are never mutated.

        Parameters:
            rng: source of randomness
        """
        if self.type == NeuronType.INPUT:
            return

        perturb_prob = self._config.bias_perturb_prob   # prob of perturbing the 'bias'
        replace_prob = self._config.bias_replace_prob   # prob of replacing  the 'bias'

        r = rng.random()
        if r < perturb_prob:
            new_bias  = self.bias + rng.normal(0.0, self._config.bias_perturb_strength)
            self.bias = float(np.clip(new_bias, self._config.min_bias, self._config.max_bias))

        elif r < perturb_prob + replace_prob:
            self.bias = float(rng.uniform(self._config.min_bias, self._config.max_bias))

    def __repr__(self):
        return (f"NeuronGene(neuron_id={self.id}, neuron_type=NeuronType.{self.type.name}, "
                f"growth={self.growth}, bias={self.bias}, activation={self.activation})")

    def __str__(self):
        return (f"{self.type.name:6s} NEURON  # ID: {self.id} # GROWTH: {self.growth} "
                f"# BIAS: {self.bias:+.3f}")
