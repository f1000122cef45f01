# app/core/errors.py


class PosError(Exception):
    """Base class for domain errors raised outside the HTTP layer."""


class ValidationError(PosError):
    """
    Malformed order payload handed to the stats aggregator
    (missing items, missing name, missing or non-positive quantity).
    """


class PersistenceError(PosError):
    """Storage read/write failure."""
