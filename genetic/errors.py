"""Exceptions raised by selection operators and the weighted sampler."""


class SelectionError(Exception):
    """Base class for all selection errors."""


class ConfigurationError(SelectionError, ValueError):
    """Invalid construction arguments or configuration."""


class PreconditionViolation(SelectionError, AssertionError):
    """An operator was used in a way its contract forbids, e.g. `select` on an unsorted population."""


class SamplerBuildError(SelectionError, ValueError):
    """Weights that cannot form a probability distribution."""
