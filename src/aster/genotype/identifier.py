"""
Aster Neuron Identifier Module

A neuron is identified by a pair of bytes (seed, position):
 + seed:     which growth tree the neuron belongs to (one per input/output channel)
 + position: heap-style index of the neuron inside that tree

Synapse genes store their destination in packed numeric form. The packing is
big-endian: the seed is the high byte and the position the low byte. This
order is used everywhere in the package; never mix it with another packing.

Functions:
    encode_id(neuron_id): Pack a neuron ID into a 16-bit integer
    decode_id(value):     Unpack a 16-bit integer into a neuron ID
    is_valid_id(value):   Whether a value is a well formed neuron ID
"""

NeuronId = tuple[int, int]

BYTE_MAX = 0xFF
CODE_MAX = 0xFFFF

def is_valid_id(neuron_id) -> bool:
    """
    Whether 'neuron_id' is a pair of integers, each in the byte range [0, 255].
    """
    if not isinstance(neuron_id, tuple) or len(neuron_id) != 2:
        return False
    return all(isinstance(b, int) and not isinstance(b, bool) and 0 <= b <= BYTE_MAX for b in neuron_id)

def encode_id(neuron_id: NeuronId) -> int:
    """
    Pack a neuron ID into its numeric (storage) form.

    Parameters:
        neuron_id: (seed, position) pair

    Returns:
        integer in [0, 65535]

    Raises:
        ValueError: if 'neuron_id' is not a pair of bytes
    """
    if not is_valid_id(neuron_id):
        raise ValueError(f"Invalid neuron ID: {neuron_id!r}")
    seed, position = neuron_id
    return (seed << 8) | position

def decode_id(value: int) -> NeuronId:
    """
    Unpack the numeric form of a neuron ID. Exact inverse of 'encode_id()'.

    Parameters:
        value: integer in [0, 65535]

    Returns:
        (seed, position) pair

    Raises:
        ValueError: if 'value' is not an integer in the representable range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Encoded neuron ID must be an integer, got {value!r}")
    if not 0 <= value <= CODE_MAX:
        raise ValueError(f"Encoded neuron ID {value} outside of range [0, {CODE_MAX}]")
    return (value >> 8, value & BYTE_MAX)
