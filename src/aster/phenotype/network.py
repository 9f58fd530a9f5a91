"""
Aster Network Module

This module builds the phenotype of a genome: lookup tables of neurons and
synapses, ready to be consumed by a forward-pass implementation.

Classes:
    Neuron:  Phenotype record of a neuron
    Synapse: Phenotype record of a synapse
    Network: Neuron and synapse lookup tables built from a Genome
"""

from collections import deque, defaultdict
from typing      import NamedTuple, TYPE_CHECKING

from aster.exceptions            import MalformedDestinationError
from aster.genotype.identifier   import NeuronId, decode_id
from aster.genotype.neuron_gene  import NeuronType, NeuronGene
from aster.genotype.synapse_gene import SynapseGene
from aster.genotype.tree         import neuron_height, MAX_HEIGHT

if TYPE_CHECKING:
    from aster.genotype import Genome

class Neuron(NamedTuple):
    id        : NeuronId
    type      : NeuronType
    bias      : float
    activation: float

class Synapse(NamedTuple):
    source     : NeuronId
    destination: NeuronId
    weight     : float
    enabled    : bool

class Network:
    """
    Lookup structure built from a Genome.

    The genes are read in store order: neuron genes become 'Neuron' records
    keyed by ID, synapse genes become 'Synapse' records keyed by
    (source ID, destination ID).

    Public Attributes:
        neurons:  Dictionary mapping neuron IDs to Neuron records
        synapses: Dictionary mapping (source, destination) to Synapse records

    Public Properties:
        number_neurons:          Total number of neurons in the network
        number_neurons_hidden:   Number of hidden neurons in the network
        number_synapses:         Total number of synapses in the network
        number_synapses_enabled: Number of enabled synapses in the network
        input_ids, output_ids

    Public Methods:
        evaluation_order(): Neuron IDs sorted so that every neuron comes after its inputs
        layers():           Neuron IDs grouped by tree height
    """

    def __init__(self, genome: 'Genome'):
        """
        Build the lookup tables from a genome.

        Parameters:
            genome: The Genome encoding the network structure

        Raises:
            MalformedDestinationError: if a synapse points to a neuron absent from the genome
        """
        self.neurons : dict[NeuronId, Neuron]                   = {}
        self.synapses: dict[tuple[NeuronId, NeuronId], Synapse] = {}

        genes = list(genome)
        for gene in genes:
            if isinstance(gene, NeuronGene):
                self.neurons[gene.id] = Neuron(gene.id, gene.type, gene.bias, gene.activation)

        for gene in genes:
            if isinstance(gene, SynapseGene):
                try:
                    destination = decode_id(gene.destination)
                except ValueError as err:
                    raise MalformedDestinationError(f"Synapse from {gene.source} has corrupt destination") from err
                if destination not in self.neurons:
                    raise MalformedDestinationError(f"Synapse from {gene.source} points to unknown neuron {destination}")
                if gene.source not in self.neurons:
                    raise MalformedDestinationError(f"Synapse source {gene.source} is not a known neuron")
                self.synapses[(gene.source, destination)] = Synapse(gene.source, destination, gene.weight, gene.enabled)

    @property
    def input_ids(self) -> list[NeuronId]:
        return [n.id for n in self.neurons.values() if n.type == NeuronType.INPUT]

    @property
    def output_ids(self) -> list[NeuronId]:
        return [n.id for n in self.neurons.values() if n.type == NeuronType.OUTPUT]

    @property
    def number_neurons(self) -> int:
        """Total number of neurons in the network."""
        return len(self.neurons)

    @property
    def number_neurons_hidden(self) -> int:
        """Number of hidden neurons in the network."""
        return sum(1 for n in self.neurons.values() if n.type == NeuronType.HIDDEN)

    @property
    def number_synapses(self) -> int:
        """Total number of synapses in the network."""
        return len(self.synapses)

    @property
    def number_synapses_enabled(self) -> int:
        """Number of enabled synapses in the network."""
        return sum(1 for s in self.synapses.values() if s.enabled)

    def evaluation_order(self) -> list[NeuronId]:
        """
        Sort the neurons topologically using Kahn's algorithm.

        Only enabled synapses create dependencies. Ties are broken by neuron
        ID, so the order is deterministic.

        Returns:
            List of neuron IDs in topological order
        """
        adjacency = defaultdict(list)
        in_degree = {neuron_id: 0 for neuron_id in self.neurons}

        for synapse in self.synapses.values():
            if synapse.enabled:
                adjacency[synapse.source].append(synapse.destination)
                in_degree[synapse.destination] += 1

        queue  = deque(sorted(neuron_id for neuron_id, degree in in_degree.items() if degree == 0))
        result = []
        while queue:
            neuron_id = queue.popleft()
            result.append(neuron_id)
            for neighbor in sorted(adjacency[neuron_id]):
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

        return result

    def layers(self) -> dict[int, list[NeuronId]]:
        """
        Group the input and hidden neuron IDs by tree height.
        Output neurons are placed in a final layer above every hidden neuron.
        """
        layers = defaultdict(list)
        for neuron in self.neurons.values():
            height = MAX_HEIGHT + 1 if neuron.type == NeuronType.OUTPUT else neuron_height(neuron.id[1])
            layers[height].append(neuron.id)
        return {height: sorted(ids) for height, ids in sorted(layers.items())}

    def __str__(self):
        lines = ["################ NETWORK DISPLAY ################"]
        for neuron_id in sorted(self.neurons):
            neuron = self.neurons[neuron_id]
            lines.append(f"{neuron.type.name} NEURON # ID: {neuron.id} # BIAS: {neuron.bias} # ACTIVATION: {neuron.activation}")
        for key in sorted(self.synapses):
            synapse = self.synapses[key]
            lines.append(f"SYNAPSE # FROM: {synapse.source} # TO: {synapse.destination} "
                         f"# WEIGHT: {synapse.weight} # ENABLED: [{synapse.enabled}]")
        lines.append("#################################################")
        return "\n".join(lines)
