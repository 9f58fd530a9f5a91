import configparser
import os
import numpy as np

class Config:

    # Structural mutation operators, in the order used by the roulette draw
    STRUCTURAL_PROBABILITIES = ('neuron_add_probability',
                                'neuron_link_probability',
                                'synapse_add_probability',
                                'synapse_enable_probability',
                                'synapse_disable_probability',
                                'synapse_remove_probability')

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.num_inputs  = 1
            self.num_outputs = 1
            self.seed        = None

            self.min_bias   = -30.0
            self.max_bias   = 30.0
            self.min_weight = -30.0
            self.max_weight = 30.0

            # Set defaults for parameter mutations
            self.bias_replace_prob       = 0.1
            self.bias_perturb_prob       = 0.7
            self.bias_perturb_strength   = 0.5
            self.weight_replace_prob     = 0.1
            self.weight_perturb_prob     = 0.8
            self.weight_perturb_strength = 0.5

            # Set defaults for structural mutations
            self.single_structural_mutation  = False
            self.neuron_add_probability      = 0.2
            self.neuron_link_probability     = 0.1
            self.synapse_add_probability     = 0.5
            self.synapse_enable_probability  = 0.01
            self.synapse_disable_probability = 0.01
            self.synapse_remove_probability  = 0.0
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [GENOME]

        # The number of input neurons; each one is the root of its own growth tree.
        self.num_inputs = get_value('GENOME', 'num_inputs', int)

        # The number of output neurons. Outputs receive synapses but never grow.
        self.num_outputs = get_value('GENOME', 'num_outputs', int)

        # Seed for the random generator returned by 'make_rng()'.
        # Use "None" for a non-reproducible run.
        self.seed = get_value('GENOME', 'seed', int, default=None)

        # [NEURON]

        # The minimum and maximum allowed 'bias' values.
        # Biases outside this range will be clamped to this range.
        self.min_bias = get_value('NEURON', 'min_bias', float, default=-30.0)
        self.max_bias = get_value('NEURON', 'max_bias', float, default=30.0)

        # The probability that mutation will replace the 'bias' of a
        # neuron with a value drawn uniformly from [min_bias, max_bias].
        self.bias_replace_prob = get_value('NEURON', 'bias_replace_prob', float, default=0.0)

        # The probability that mutation will change the 'bias'
        # of a neuron by adding a random value.
        self.bias_perturb_prob = get_value('NEURON', 'bias_perturb_prob', float, default=0.0)

        # The standard deviation of the zero-centered normal distribution
        # from which a 'bias' perturbation value is drawn.
        self.bias_perturb_strength = get_value('NEURON', 'bias_perturb_strength', float, default=0.0)

        # [SYNAPSE]

        # The minimum and maximum allowed 'weight' values.
        # Weights outside this range will be clamped to this range.
        self.min_weight = get_value('SYNAPSE', 'min_weight', float, default=-30.0)
        self.max_weight = get_value('SYNAPSE', 'max_weight', float, default=30.0)

        # The probability that mutation will replace the 'weight' of a synapse
        # with a value drawn uniformly from [min_weight, max_weight].
        self.weight_replace_prob = get_value('SYNAPSE', 'weight_replace_prob', float, default=0.0)

        # The probability that mutation will change the 'weight'
        # of a synapse by adding a random value.
        self.weight_perturb_prob = get_value('SYNAPSE', 'weight_perturb_prob', float, default=0.0)

        # The standard deviation of the zero-centered normal distribution
        # from which a 'weight' perturbation value is drawn.
        self.weight_perturb_strength = get_value('SYNAPSE', 'weight_perturb_strength', float, default=0.0)

        # [STRUCTURAL MUTATIONS]

        # If this is 'True', only one structural mutation will be
        # attempted per genome per call to 'Genome.mutate()'.
        self.single_structural_mutation = get_value('STRUCTURAL_MUTATIONS', 'single_structural_mutation', bool)

        # The probability that mutation will grow a new hidden neuron
        # (connected to its parent by a new synapse).
        self.neuron_add_probability = get_value('STRUCTURAL_MUTATIONS', 'neuron_add_probability', float)

        # The probability that mutation will grow a new hidden neuron and
        # also connect it to a random legal target.
        self.neuron_link_probability = get_value('STRUCTURAL_MUTATIONS', 'neuron_link_probability', float, default=0.0)

        # The probability that mutation will add a synapse between existing neurons.
        self.synapse_add_probability = get_value('STRUCTURAL_MUTATIONS', 'synapse_add_probability', float)

        # The probability that a mutation will enable a currently
        # disabled synapse, or the other way around.
        self.synapse_enable_probability  = get_value('STRUCTURAL_MUTATIONS', 'synapse_enable_probability' , float)
        self.synapse_disable_probability = get_value('STRUCTURAL_MUTATIONS', 'synapse_disable_probability', float)

        # The probability that mutation will delete a disabled synapse
        # (and any hidden neuron left without synapses).
        self.synapse_remove_probability = get_value('STRUCTURAL_MUTATIONS', 'synapse_remove_probability', float, default=0.0)

        self._validate()

    def _validate(self) -> None:
        """
        Check the values read from the configuration file.

        Raises:
            ValueError: if a value is out of its allowed range
        """
        if self.num_inputs is None or self.num_inputs < 0:
            raise ValueError(f"num_inputs must be a non-negative integer, got {self.num_inputs}")
        if self.num_outputs is None or self.num_outputs < 0:
            raise ValueError(f"num_outputs must be a non-negative integer, got {self.num_outputs}")
        if self.num_inputs + self.num_outputs > 256:
            raise ValueError("num_inputs + num_outputs must be <= 256 (one growth tree per seed)")

        for name in self.STRUCTURAL_PROBABILITIES:
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")

    def make_rng(self) -> np.random.Generator:
        """
        Create a random generator seeded with 'seed' (non-reproducible if 'seed' is None).
        """
        return np.random.default_rng(self.seed)
