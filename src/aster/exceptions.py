"""
Aster Exceptions Module

Errors raised when a genome's encoding is found to be corrupt.

Outcomes that are part of normal evolution (a mutation with no legal
candidate, a lookup of a synapse that does not exist) are not errors:
operators report them through their return value.

Classes:
    GenomeError:               Base class for all genome errors
    MalformedDestinationError: A synapse points at a neuron that does not exist
    InvariantViolationError:   The gene store breaks a structural invariant
"""

class GenomeError(Exception):
    """Base class for errors raised by this package."""

class MalformedDestinationError(GenomeError, ValueError):
    """
    A synapse's encoded destination does not decode to a known neuron.

    The mutation operators never produce such a synapse, so this always
    signals upstream corruption (e.g. hand-edited genes).
    """

class InvariantViolationError(GenomeError, ValueError):
    """The gene store violates one of the structural invariants of a genome."""
