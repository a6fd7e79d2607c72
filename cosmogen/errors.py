"""Exception and warning types raised by the generator."""

from __future__ import annotations


class ConfigValidationError(ValueError):
    """A generation config field is out of range or of the wrong type."""


class InternalInvariantViolation(RuntimeError):
    """A grammar or an assembled entity graph broke a structural invariant.

    Always a programming error in a preset or in the assembly pass; the
    generation call fails instead of returning a partial result.
    """


class UnknownPresetWarning(UserWarning):
    """A topology preset id was not found and ``classic`` was used instead."""
