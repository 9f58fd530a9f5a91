"""
Aster - tree-indexed genome encoding for evolving feed-forward networks.

Every neuron of a genome is placed at a deterministic position of a binary
growth tree rooted at one of the network's input or output channels. The
tree height of a neuron orders the synapses, which keeps every evolved
network acyclic by construction.

Main components:
- genotype:  Genetic encoding (identifier codec, tree geometry, genes, genome and its mutations)
- phenotype: Neuron and synapse lookup tables built from a genome
- run:       Configuration

Example:
    >>> import numpy as np
    >>> from aster import Config, Genome
    >>> config = Config()
    >>> config.num_inputs, config.num_outputs = 2, 1
    >>> genome = Genome(config)
    >>> rng = np.random.default_rng(0)
    >>> child = genome.grow_random_neuron(rng)
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from aster.run.config            import Config
from aster.genotype.genome       import Genome
from aster.genotype.neuron_gene  import NeuronType, NeuronGene
from aster.genotype.synapse_gene import SynapseGene
from aster.phenotype.network     import Network
from aster.exceptions            import GenomeError, MalformedDestinationError, InvariantViolationError

__all__ = [
    "Config",
    "Genome",
    "NeuronType",
    "NeuronGene",
    "SynapseGene",
    "Network",
    "GenomeError",
    "MalformedDestinationError",
    "InvariantViolationError",
]
