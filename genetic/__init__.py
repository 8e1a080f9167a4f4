"""Parent selection operators for generational genetic algorithms."""

from genetic.errors import SelectionError, ConfigurationError, PreconditionViolation, SamplerBuildError

__all__ = ['SelectionError', 'ConfigurationError', 'PreconditionViolation', 'SamplerBuildError']
