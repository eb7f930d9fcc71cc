"""Exceptions raised by warkov."""


class WarkovError(Exception):
    """Base class for all warkov errors."""


class InvalidConfig(WarkovError, ValueError):
    """A model was constructed with an unusable configuration."""


class InvalidArgument(WarkovError, ValueError):
    """An operation was called with an argument outside its valid range."""


class ModelUntrained(WarkovError, RuntimeError):
    """Generation was requested from a model that has seen no data."""


class CorpusError(WarkovError):
    """A training corpus could not be read."""
