"""
Aster Synapse Gene Module

This module implements the SynapseGene class.

Classes:
    SynapseGene: Gene encoding a weighted synapse between two neurons
"""

import numpy as np

from aster.genotype.identifier import NeuronId, encode_id, decode_id
from aster.run.config          import Config

class SynapseGene:
    """
    A gene describing a weighted synapse between two neurons.

    A synapse is keyed in the gene store by its source neuron ID (which is
    shared by all synapses leaving that neuron). The destination is stored in
    packed numeric form (see 'aster.genotype.identifier'), so every synapse
    record has the same shape regardless of where it points.

    Synapses can be enabled or disabled. Only disabled synapses are eligible
    for removal by the mutation engine.

    Public Attributes:
        source:      ID of the source neuron
        destination: Packed numeric ID of the destination neuron
        weight:      Weight of the synapse
        enabled:     Whether this synapse is active in the network

    Public Properties:
        id:             Same as 'source' (the sorting key in the gene store)
        destination_id: The decoded destination neuron ID

    Public Methods:
        mutate(rng): Stochastically mutate the synapse weight
    """

    def __init__(self,
                 source     : NeuronId,
                 destination: NeuronId,
                 config     : Config,
                 weight     : float = 0.0,
                 enabled    : bool  = True):
        """
        Initialize a synapse gene.

        Parameters:
            source:      ID of the source neuron
            destination: ID of the destination neuron
            config:      Stores configuration parameters
            weight:      Weight of the synapse
            enabled:     Whether this synapse is active in the network
        """
        self._config    : Config   = config
        self.source     : NeuronId = tuple(source)
        self.destination: int      = encode_id(tuple(destination))
        self.weight     : float    = weight
        self.enabled    : bool     = enabled

    @property
    def id(self) -> NeuronId:
        return self.source

    @property
    def destination_id(self) -> NeuronId:
        return decode_id(self.destination)

    @property
    def endpoints(self) -> tuple[NeuronId, NeuronId]:
        return self.source, self.destination_id

    def mutate(self, rng: np.random.Generator) -> None:
        """
        Stochastically mutate the (gene describing the) synapse.

        Mutating a synapse means changing its 'weight', either additively by a
        small amount or by replacing it with a new value.

        Parameters:
            rng: source of randomness
        """
        perturb_prob = self._config.weight_perturb_prob   # prob of perturbing the 'weight'
        replace_prob = self._config.weight_replace_prob   # prob of replacing  the 'weight'

        r = rng.random()
        if r < perturb_prob:
            new_weight  = self.weight + rng.normal(0.0, self._config.weight_perturb_strength)
            self.weight = float(np.clip(new_weight, self._config.min_weight, self._config.max_weight))

        elif r < perturb_prob + replace_prob:
            self.weight = float(rng.uniform(self._config.min_weight, self._config.max_weight))

    def __repr__(self):
        return (f"SynapseGene(source={self.source}, destination={self.destination_id}, "
                f"weight={self.weight:+.6f}, enabled={self.enabled})")

    def __str__(self):
        return (f"SYNAPSE        # FROM: {self.source} # TO: {self.destination_id} "
                f"# WEIGHT: {self.weight:+.3f} # ENABLED: [{self.enabled}]")
