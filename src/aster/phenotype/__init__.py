"""
Aster Phenotype Package

Expresses a genome as neuron and synapse lookup tables.
"""

from aster.phenotype.network import Network, Neuron, Synapse

__all__ = ['Network', 'Neuron', 'Synapse']
