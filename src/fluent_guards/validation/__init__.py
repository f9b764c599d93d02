"""Guard validators for validation pipelines."""

from fluent_guards.validation.validators import GuardValidator

__all__ = ["GuardValidator"]
