"""
Aster Genotype Package

This package implements the genotype: a flat, ordered list of neuron and
synapse genes in which every neuron sits at a deterministic position
(seed, position) of a per-channel binary growth tree.

Modules:
    identifier:   Packing of neuron IDs into numeric form
    tree:         Height and in-order rank of tree positions
    neuron_gene:  NeuronType enumeration and NeuronGene class
    synapse_gene: SynapseGene class
    genome:       Genome class (gene store, candidate generation, mutations)

Exported Classes:
    NeuronType:  Enumeration for neuron types (INPUT, HIDDEN, OUTPUT)
    NeuronGene:  Gene encoding a single network neuron
    SynapseGene: Gene encoding a weighted synapse between neurons
    Genome:      Complete genome representing a neural network
"""

from aster.genotype.genome       import Genome
from aster.genotype.identifier   import NeuronId, encode_id, decode_id
from aster.genotype.neuron_gene  import NeuronType, NeuronGene
from aster.genotype.synapse_gene import SynapseGene
from aster.genotype.tree         import neuron_height, inorder_position

__all__ = ['Genome',
           'NeuronId',
           'NeuronGene',
           'NeuronType',
           'SynapseGene',
           'decode_id',
           'encode_id',
           'inorder_position',
           'neuron_height']
