"""
Error taxonomy for the discovery engine.

The HTTP layer maps each class to a status code; other callers catch them
directly.
"""


class DiscoveryError(Exception):
    """Base class for all discovery engine failures."""
    retryable = False


class NotFound(DiscoveryError):
    """Candidate or user reference does not exist."""


class InvalidArgument(DiscoveryError):
    """Malformed input, e.g. an unknown action or an empty candidate id."""


class UpstreamUnavailable(DiscoveryError):
    """A contact graph store query failed."""
    retryable = True


class Cancelled(DiscoveryError):
    """The request deadline passed or the caller cancelled it."""
