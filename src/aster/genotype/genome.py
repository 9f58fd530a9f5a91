"""
Aster Genome Module

This module implements the Genome class: a flat, ordered collection of neuron
and synapse genes describing a feed-forward network, together with the
structural mutation operators that grow, prune and toggle it.

Classes:
    Genome: Complete genome representing a neural network structure
"""

import logging
import numpy as np

from aster.exceptions             import InvariantViolationError, MalformedDestinationError
from aster.genotype.identifier    import NeuronId, decode_id, is_valid_id
from aster.genotype.neuron_gene   import NeuronType, NeuronGene
from aster.genotype.synapse_gene  import SynapseGene
from aster.genotype.tree          import (neuron_height, parent_position, child_positions,
                                          can_have_children, is_hidden_position)
from aster.run.config             import Config

logger = logging.getLogger(__name__)

Gene = NeuronGene | SynapseGene

class Genome:
    """
    A genome representing a feed-forward network as an ordered list of genes.

    Every neuron is placed in the binary growth tree of its seed:
    - Input  neurons: (i, 0)       for i in [0, num_inputs)
    - Output neurons: (255 - i, 0) for i in [0, num_outputs)
    - Hidden neurons: (seed, p), p > 0, grown as child '2q+1' or '2q+2' of
      the input/hidden neuron (seed, q)

    A synapse may only point to a neuron of strictly greater tree height, or
    to an output neuron. Since outputs never source synapses, this height
    ordering alone keeps the network acyclic.

    The genes are kept sorted by neuron ID; each neuron is immediately
    followed by the synapses leaving it (ordered by destination).

    Attributes:
        genes: Tuple snapshot of all genes, in store order

    Public Properties:
        neurons, input_neurons, hidden_neurons, output_neurons, synapses

    Public Methods (candidate generation, read-only):
        neuron_growth_candidates():      (parent, child) pairs for growing a neuron
        possible_synapse_sources():      neurons allowed to source a synapse
        synapse_targets(source_id):      legal destinations for a new synapse
        toggle_candidates(enabled):      store indices of synapses in the given state
        disabled_edge_endpoints():       endpoints of all disabled synapses

    Public Methods (mutation, each takes an explicit random generator):
        grow_random_neuron(rng):             Add a hidden neuron below a random parent
        grow_and_link(rng):                  Same, then connect the new neuron onward
        grow_random_synapse(rng):            Add a synapse between existing neurons
        disable_random_synapse(rng):         Disable a random enabled synapse
        enable_random_synapse(rng):          Enable a random disabled synapse
        remove_random_disabled_synapse(rng): Delete a disabled synapse, pruning isolated neurons
        remove_synapse(source, destination): Delete a given synapse, pruning isolated neurons
        mutate(rng):                         Apply mutation operators stochastically

    Class Methods:
        from_dict(genome_dict): Create a genome from a dictionary description
    """

    def __init__(self, config: Config):
        """
        Initialize a minimal Genome.

        A minimal genome holds only the input and output neurons (whose number
        never changes and is retrieved from the configuration) and no synapses.

        Parameters:
            config: Stores configuration parameters

        Raises:
            ValueError: if the inputs and outputs do not fit in 256 seeds
        """
        self._config = config
        self._check_io_counts(config.num_inputs, config.num_outputs)

        self._genes: list[Gene] = []
        for i in range(config.num_inputs):
            self._genes.append(NeuronGene((i, 0), NeuronType.INPUT, config))
        for i in range(config.num_outputs):
            self._genes.append(NeuronGene((255 - i, 0), NeuronType.OUTPUT, config))
        self._sort_genes()

    @staticmethod
    def _check_io_counts(num_inputs: int, num_outputs: int) -> None:
        if not 0 <= num_inputs <= 256:
            raise ValueError(f"Number of inputs must be in [0, 256], got {num_inputs}")
        if not 0 <= num_outputs <= 256:
            raise ValueError(f"Number of outputs must be in [0, 256], got {num_outputs}")
        if num_inputs + num_outputs > 256:
            raise ValueError(f"Inputs and outputs would share seeds: {num_inputs} + {num_outputs} > 256")

    # ------------------------------------------------------------------
    # Gene store
    # ------------------------------------------------------------------

    @property
    def genes(self) -> tuple[Gene, ...]:
        return tuple(self._genes)

    def __iter__(self):
        return iter(tuple(self._genes))

    def __len__(self):
        return len(self._genes)

    @property
    def num_inputs(self) -> int:
        return self._config.num_inputs

    @property
    def num_outputs(self) -> int:
        return self._config.num_outputs

    @property
    def neurons(self) -> list[NeuronGene]:
        return [gene for gene in self._genes if isinstance(gene, NeuronGene)]

    @property
    def input_neurons(self) -> list[NeuronGene]:
        return [gene for gene in self.neurons if gene.type == NeuronType.INPUT]

    @property
    def hidden_neurons(self) -> list[NeuronGene]:
        return [gene for gene in self.neurons if gene.type == NeuronType.HIDDEN]

    @property
    def output_neurons(self) -> list[NeuronGene]:
        return [gene for gene in self.neurons if gene.type == NeuronType.OUTPUT]

    @property
    def synapses(self) -> list[SynapseGene]:
        return [gene for gene in self._genes if isinstance(gene, SynapseGene)]

    def find_neuron(self, neuron_id: NeuronId) -> NeuronGene | None:
        """Return the neuron gene with the given ID, or None if there is none."""
        neuron_id = tuple(neuron_id)
        for gene in self._genes:
            if isinstance(gene, NeuronGene) and gene.id == neuron_id:
                return gene
        return None

    def find_synapse(self, source_id: NeuronId, destination_id: NeuronId) -> SynapseGene | None:
        """Return the synapse gene 'source_id' -> 'destination_id', or None if there is none."""
        endpoints = (tuple(source_id), tuple(destination_id))
        for gene in self._genes:
            if isinstance(gene, SynapseGene) and gene.endpoints == endpoints:
                return gene
        return None

    def are_connected(self, source_id: NeuronId, destination_id: NeuronId) -> bool:
        """Whether a synapse 'source_id' -> 'destination_id' exists (enabled or not)."""
        return self.find_synapse(source_id, destination_id) is not None

    def _has_synapses(self, neuron_id: NeuronId) -> bool:
        """Whether any synapse starts or ends at 'neuron_id'."""
        return any(neuron_id in synapse.endpoints for synapse in self.synapses)

    @staticmethod
    def _sort_key(gene: Gene):
        if isinstance(gene, SynapseGene):
            return (gene.source, 1, gene.destination)
        return (gene.id, 0, 0)

    def _sort_genes(self) -> None:
        self._genes.sort(key=self._sort_key)

    # ------------------------------------------------------------------
    # Candidate generation
    # ------------------------------------------------------------------

    def neuron_growth_candidates(self) -> list[tuple[NeuronId, NeuronId]]:
        """
        Find every (parent, child) pair through which a hidden neuron can be grown.

        A parent must be an input or hidden neuron with fewer than two children
        and a position low enough for its children to fit in the tree. The
        child is the parent's first free child slot.

        Returns:
            list of (parent ID, child ID), shallower parents first
        """
        neuron_ids = {neuron.id for neuron in self.neurons}

        candidates = []
        for neuron in self.neurons:
            if neuron.type == NeuronType.OUTPUT:
                continue
            if neuron.growth >= 2 or not can_have_children(neuron.position):
                continue
            for position in child_positions(neuron.position):
                child_id = (neuron.seed, position)
                if child_id not in neuron_ids:
                    candidates.append((neuron.id, child_id))
                    break

        candidates.sort(key=lambda pair: neuron_height(pair[0][1]))
        return candidates

    def possible_synapse_sources(self) -> list[NeuronId]:
        """
        All neurons that may source a synapse (outputs only ever receive).
        """
        return [neuron.id for neuron in self.neurons if neuron.type != NeuronType.OUTPUT]

    def synapse_targets(self, source_id: NeuronId) -> list[NeuronId]:
        """
        Find all legal destinations for a new synapse leaving 'source_id'.

        A neuron is a legal destination if it is not the source itself, is not
        already connected from the source, and either sits strictly higher in
        its tree than the source or is an output neuron.

        Parameters:
            source_id: ID of the source neuron

        Returns:
            list of neuron IDs (empty if 'source_id' cannot source synapses)
        """
        source_id = tuple(source_id)
        source    = self.find_neuron(source_id)
        if source is None or source.type == NeuronType.OUTPUT:
            return []

        connected = {synapse.destination_id for synapse in self.synapses if synapse.source == source_id}
        return [neuron.id for neuron in self.neurons
                if neuron.id != source_id
                and neuron.id not in connected
                and (neuron.height > source.height or neuron.type == NeuronType.OUTPUT)]

    def toggle_candidates(self, enabled: bool) -> list[int]:
        """
        Store indices of all synapses whose 'enabled' status equals 'enabled'.
        """
        return [index for index, gene in enumerate(self._genes)
                if isinstance(gene, SynapseGene) and gene.enabled == enabled]

    def disabled_edge_endpoints(self) -> list[tuple[NeuronId, NeuronId]]:
        """
        Endpoints (source ID, destination ID) of all disabled synapses.
        """
        return [synapse.endpoints for synapse in self.synapses if not synapse.enabled]

    # ------------------------------------------------------------------
    # Mutation operators
    # ------------------------------------------------------------------

    @staticmethod
    def _select_random(rng: np.random.Generator, items: list):
        if not items:
            return None
        return items[int(rng.integers(len(items)))]

    def grow_random_neuron(self, rng: np.random.Generator) -> NeuronId | None:
        """
        Grow a hidden neuron below a randomly selected parent.

        The new neuron is connected to its parent by an enabled synapse, so it
        is never left without synapses.

        Parameters:
            rng: source of randomness

        Returns:
            ID of the new neuron, or None if no neuron can grow a child
        """
        pair = self._select_random(rng, self.neuron_growth_candidates())
        if pair is None:
            logger.debug("No neuron can grow a child")
            return None

        parent_id, child_id = pair
        self._create_neuron(parent_id, child_id)
        self._create_synapse(parent_id, child_id)
        self._sort_genes()
        logger.debug("Grew neuron %s from %s", child_id, parent_id)
        return child_id

    def grow_and_link(self, rng: np.random.Generator) -> tuple[NeuronId, NeuronId | None] | None:
        """
        Grow a hidden neuron (see 'grow_random_neuron()'), then connect it to a
        random legal target.

        The outgoing synapse is best-effort: if the new neuron has no legal
        target, the neuron and its incoming synapse are kept anyway.

        Parameters:
            rng: source of randomness

        Returns:
            (new neuron ID, target ID or None), or None if no neuron was grown
        """
        child_id = self.grow_random_neuron(rng)
        if child_id is None:
            return None

        target_id = self._select_random(rng, self.synapse_targets(child_id))
        if target_id is None:
            logger.debug("No target for new neuron %s", child_id)
        else:
            self._create_synapse(child_id, target_id)
            self._sort_genes()
        return child_id, target_id

    def grow_random_synapse(self, rng: np.random.Generator) -> tuple[NeuronId, NeuronId] | None:
        """
        Add an enabled synapse from a random source to a random legal target.

        Parameters:
            rng: source of randomness

        Returns:
            (source ID, destination ID) of the new synapse, or None if nothing was added
        """
        source_id = self._select_random(rng, self.possible_synapse_sources())
        if source_id is None:
            logger.debug("No neuron can source a synapse")
            return None

        target_id = self._select_random(rng, self.synapse_targets(source_id))
        if target_id is None:
            logger.debug("No synapse target for %s", source_id)
            return None

        self._create_synapse(source_id, target_id)
        self._sort_genes()
        return source_id, target_id

    def disable_random_synapse(self, rng: np.random.Generator) -> tuple[NeuronId, NeuronId] | None:
        """
        Disable a random enabled synapse.

        Returns:
            endpoints of the disabled synapse, or None if no synapse is enabled
        """
        return self._toggle_random_synapse(rng, enabled=True)

    def enable_random_synapse(self, rng: np.random.Generator) -> tuple[NeuronId, NeuronId] | None:
        """
        Enable a random disabled synapse.

        Returns:
            endpoints of the enabled synapse, or None if no synapse is disabled
        """
        return self._toggle_random_synapse(rng, enabled=False)

    def _toggle_random_synapse(self, rng: np.random.Generator, enabled: bool) -> tuple[NeuronId, NeuronId] | None:
        index = self._select_random(rng, self.toggle_candidates(enabled))
        if index is None:
            logger.debug("No %s synapses to toggle", "enabled" if enabled else "disabled")
            return None

        synapse = self._genes[index]
        synapse.enabled = not enabled
        return synapse.endpoints

    def set_synapse_enabled(self, source_id: NeuronId, destination_id: NeuronId, enabled: bool) -> bool:
        """
        Set the status of the synapse 'source_id' -> 'destination_id'.

        Returns:
            whether the synapse was found
        """
        synapse = self.find_synapse(source_id, destination_id)
        if synapse is None:
            return False
        synapse.enabled = enabled
        return True

    def connect(self, source_id: NeuronId, destination_id: NeuronId, weight: float = 0.0) -> bool:
        """
        Add an enabled synapse 'source_id' -> 'destination_id'.

        The synapse is only added if the destination is one of
        'synapse_targets(source_id)'; any other request is refused.

        Returns:
            whether the synapse was added
        """
        source_id, destination_id = tuple(source_id), tuple(destination_id)
        if destination_id not in self.synapse_targets(source_id):
            return False
        self._create_synapse(source_id, destination_id, weight)
        self._sort_genes()
        return True

    def remove_random_disabled_synapse(self, rng: np.random.Generator) -> tuple[NeuronId, NeuronId] | None:
        """
        Delete a random disabled synapse, then delete either endpoint if it is
        a hidden neuron left without any synapse.

        Parameters:
            rng: source of randomness

        Returns:
            endpoints of the deleted synapse, or None if no synapse is disabled
        """
        endpoints = self._select_random(rng, self.disabled_edge_endpoints())
        if endpoints is None:
            logger.debug("No disabled synapses to remove")
            return None

        self.remove_synapse(*endpoints)
        return endpoints

    def remove_synapse(self, source_id: NeuronId, destination_id: NeuronId) -> bool:
        """
        Delete the synapse 'source_id' -> 'destination_id' (enabled or not).

        Either endpoint is then deleted too if it is a hidden neuron with no
        incoming and no outgoing synapse left. Input and output neurons are
        never deleted.

        Returns:
            whether the synapse was found (and deleted)
        """
        synapse = self.find_synapse(source_id, destination_id)
        if synapse is None:
            logger.debug("Synapse %s -> %s not found", source_id, destination_id)
            return False

        self._genes.remove(synapse)
        for neuron_id in synapse.endpoints:
            neuron = self.find_neuron(neuron_id)
            if neuron is not None and neuron.type == NeuronType.HIDDEN and not self._has_synapses(neuron_id):
                self._delete_neuron(neuron)
        self._sort_genes()
        return True

    def _create_neuron(self, parent_id: NeuronId, child_id: NeuronId) -> None:
        """
        Add a hidden neuron 'child_id' below 'parent_id'.
        The child may inherit grandchildren left behind by an earlier pruning.
        """
        parent = self.find_neuron(parent_id)
        parent.growth += 1

        neuron_ids = {neuron.id for neuron in self.neurons}
        grandchildren = sum(1 for position in child_positions(child_id[1])
                            if (child_id[0], position) in neuron_ids)
        self._genes.append(NeuronGene(child_id, NeuronType.HIDDEN, self._config, growth=grandchildren))

    def _create_synapse(self, source_id: NeuronId, destination_id: NeuronId, weight: float = 0.0) -> None:
        self._genes.append(SynapseGene(source_id, destination_id, self._config, weight))

    def _delete_neuron(self, neuron: NeuronGene) -> None:
        """
        Delete a hidden neuron (which must have no synapses) and release its
        slot in the parent's growth counter.
        """
        self._genes.remove(neuron)
        parent = self.find_neuron((neuron.seed, parent_position(neuron.position)))
        if parent is not None and parent.growth > 0:
            parent.growth -= 1
        logger.debug("Pruned isolated neuron %s", neuron.id)

    # ------------------------------------------------------------------
    # Stochastic mutation
    # ------------------------------------------------------------------

    def mutate(self, rng: np.random.Generator) -> list[str]:
        """
        Apply to the current genome all possible mutation operations.

        The list of possible structural mutations is:
          + grow a neuron
          + grow a neuron and link it onward
          + add a synapse
          + enable  a disabled synapse
          + disable an enabled synapse
          + remove a disabled synapse
        Each one occurs with the probability given in the configuration; if
        'single_structural_mutation' is set, at most one is attempted. Then the
        weights of all synapses and the biases of all non-input neurons are
        mutated.

        Parameters:
            rng: source of randomness

        Returns:
            names of the structural operators that changed the genome
        """
        operators = [(self._config.neuron_add_probability     , self.grow_random_neuron),
                     (self._config.neuron_link_probability    , self.grow_and_link),
                     (self._config.synapse_add_probability    , self.grow_random_synapse),
                     (self._config.synapse_enable_probability , self.enable_random_synapse),
                     (self._config.synapse_disable_probability, self.disable_random_synapse),
                     (self._config.synapse_remove_probability , self.remove_random_disabled_synapse)]

        # Case #1: only one structural mutation is allowed at a time
        if self._config.single_structural_mutation:
            selected   = []
            normalizer = sum(probability for probability, _ in operators)
            if normalizer > 0:
                r          = rng.random() * normalizer
                cumulative = 0.0
                for probability, operator in operators:
                    cumulative += probability
                    if r < cumulative:
                        selected.append(operator)
                        break

        # Case #2: multiple structural mutations are allowed at a time
        else:
            selected = [operator for probability, operator in operators if rng.random() < probability]

        applied = [operator.__name__ for operator in selected if operator(rng) is not None]

        for synapse in self.synapses:
            synapse.mutate(rng)
        for neuron in self.neurons:
            neuron.mutate(rng)

        return applied

    # ------------------------------------------------------------------
    # Validation and serialization
    # ------------------------------------------------------------------

    def check_invariants(self) -> None:
        """
        Verify that the gene store is internally consistent.

        Raises:
            MalformedDestinationError: a synapse points to a neuron that does not exist
            InvariantViolationError:   any other structural invariant is broken
        """
        neurons = {}
        for neuron in self.neurons:
            if not is_valid_id(neuron.id):
                raise InvariantViolationError(f"Invalid neuron ID {neuron.id!r}")
            if neuron.id in neurons:
                raise InvariantViolationError(f"Duplicate neuron ID {neuron.id}")
            if (neuron.position == 0) == (neuron.type == NeuronType.HIDDEN):
                raise InvariantViolationError(f"Neuron {neuron.id} of type {neuron.type.name} at wrong position")
            if neuron.type == NeuronType.HIDDEN:
                if not is_hidden_position(neuron.position):
                    raise InvariantViolationError(f"Hidden neuron {neuron.id} is deeper than the tree allows")
                if neuron.seed >= self.num_inputs:
                    raise InvariantViolationError(f"Hidden neuron {neuron.id} is not in the tree of an input")
            neurons[neuron.id] = neuron

        input_ids  = {neuron.id for neuron in neurons.values() if neuron.type == NeuronType.INPUT}
        output_ids = {neuron.id for neuron in neurons.values() if neuron.type == NeuronType.OUTPUT}
        if input_ids != {(i, 0) for i in range(self.num_inputs)}:
            raise InvariantViolationError(f"Input neurons must be (i, 0) for i < {self.num_inputs}")
        if output_ids != {(255 - i, 0) for i in range(self.num_outputs)}:
            raise InvariantViolationError(f"Output neurons must be (255 - i, 0) for i < {self.num_outputs}")

        edges     = set()
        connected = set()
        for synapse in self.synapses:
            try:
                destination_id = decode_id(synapse.destination)
            except ValueError as err:
                raise MalformedDestinationError(f"Synapse from {synapse.source} has corrupt destination") from err
            if destination_id not in neurons:
                raise MalformedDestinationError(f"Synapse from {synapse.source} points to unknown neuron {destination_id}")
            source = neurons.get(synapse.source)
            if source is None or source.type == NeuronType.OUTPUT:
                raise InvariantViolationError(f"Synapse source {synapse.source} is not an input or hidden neuron")
            if synapse.source == destination_id:
                raise InvariantViolationError(f"Synapse from {synapse.source} to itself")
            destination = neurons[destination_id]
            if destination.type != NeuronType.OUTPUT and destination.height <= source.height:
                raise InvariantViolationError(f"Synapse {synapse.source} -> {destination_id} does not go up the tree")
            if synapse.endpoints in edges:
                raise InvariantViolationError(f"Duplicate synapse {synapse.source} -> {destination_id}")
            edges.add(synapse.endpoints)
            connected.update(synapse.endpoints)

        for neuron in neurons.values():
            children = sum(1 for position in child_positions(neuron.position)
                           if (neuron.seed, position) in neurons)
            if neuron.type == NeuronType.OUTPUT and neuron.growth != 0:
                raise InvariantViolationError(f"Output neuron {neuron.id} has growth {neuron.growth}")
            if neuron.growth != children:
                raise InvariantViolationError(f"Neuron {neuron.id} has growth {neuron.growth} but {children} children")
            if neuron.type == NeuronType.HIDDEN and neuron.id not in connected:
                raise InvariantViolationError(f"Hidden neuron {neuron.id} has no synapses")

        if self._genes != sorted(self._genes, key=self._sort_key):
            raise InvariantViolationError("Genes are not sorted by ID")

    def to_dict(self) -> dict:
        """
        Convert the genome to a dictionary representation.

        This is the inverse operation of from_dict(); every field of every
        gene (growth counters and synapse status included) is preserved.

        Returns:
            Dictionary with the following structure:
            {
                "num_inputs": 1,
                "num_outputs": 1,
                "neurons": [
                    {"id": [0, 0],   "type": "input",  "growth": 1, "bias": 0.0, "activation": 0.0},
                    {"id": [0, 1],   "type": "hidden", "growth": 0, "bias": 0.5, "activation": 0.0},
                    {"id": [255, 0], "type": "output", "growth": 0, "bias": 0.0, "activation": 0.0}
                ],
                "synapses": [
                    {"from": [0, 0], "to": [0, 1],   "weight": 0.0, "enabled": true},
                    {"from": [0, 1], "to": [255, 0], "weight": 1.5, "enabled": false}
                ]
            }
        """
        neurons = []
        for neuron in self.neurons:
            neurons.append({
                "id"        : list(neuron.id),
                "type"      : neuron.type.name.lower(),
                "growth"    : neuron.growth,
                "bias"      : neuron.bias,
                "activation": neuron.activation
            })

        synapses = []
        for synapse in self.synapses:
            synapses.append({
                "from"   : list(synapse.source),
                "to"     : list(synapse.destination_id),
                "weight" : synapse.weight,
                "enabled": synapse.enabled
            })

        return {
            "num_inputs" : self.num_inputs,
            "num_outputs": self.num_outputs,
            "neurons"    : neurons,
            "synapses"   : synapses
        }

    @classmethod
    def from_dict(cls, genome_dict: dict, config: Config | None = None) -> 'Genome':
        """
        Create a Genome from a dictionary description (see 'to_dict()').

        Parameters:
            genome_dict: Dictionary describing the genome structure
            config:      Stores configuration parameters. If None, a default
                         Config is created with the input/output counts of 'genome_dict'.

        Returns:
            A new Genome object with the specified structure

        Raises:
            MalformedDestinationError: if a synapse points to a missing neuron
            InvariantViolationError:   if the structure breaks any other invariant
            ValueError:                if a neuron ID or type is malformed
            KeyError:                  if required fields are missing from the dictionary
        """
        if config is None:
            config = Config(config_file=None)
            config.num_inputs  = genome_dict["num_inputs"]
            config.num_outputs = genome_dict["num_outputs"]
        cls._check_io_counts(config.num_inputs, config.num_outputs)

        genome = cls.__new__(cls)
        genome._config = config
        genome._genes  = []

        for neuron_data in genome_dict["neurons"]:
            neuron_id = tuple(neuron_data["id"])
            if not is_valid_id(neuron_id):
                raise ValueError(f"Invalid neuron ID {neuron_data['id']!r}")
            try:
                neuron_type = NeuronType[str(neuron_data["type"]).upper()]
            except KeyError:
                raise ValueError(f"Invalid neuron type {neuron_data['type']!r} for neuron {neuron_id}") from None
            neuron = NeuronGene(neuron_id,
                                neuron_type,
                                config,
                                bias       = neuron_data.get("bias", 0.0),
                                growth     = neuron_data.get("growth", 0),
                                activation = neuron_data.get("activation", 0.0))
            genome._genes.append(neuron)

        for synapse_data in genome_dict.get("synapses", []):
            synapse = SynapseGene(tuple(synapse_data["from"]),
                                  tuple(synapse_data["to"]),
                                  config,
                                  weight  = synapse_data.get("weight", 0.0),
                                  enabled = synapse_data.get("enabled", True))
            genome._genes.append(synapse)

        genome._sort_genes()
        genome.check_invariants()
        return genome

    def __str__(self):
        return "\n".join(str(gene) for gene in self._genes)
