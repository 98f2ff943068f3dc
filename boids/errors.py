"""Exceptions raised by the flocking core."""


class ConfigurationError(ValueError):
    """Invalid simulation parameters, raised while setting up a flock or a run."""
