"""Exceptions raised by dataregistry."""


class DataRegistryException(Exception):
    """Base class for all dataregistry exceptions."""


class InvalidContextLevel(DataRegistryException):
    """A branch was requested for a context of the wrong level."""


class OrphanedCategory(DataRegistryException):
    """Some categories reference a parent that is not in the tree."""

    def __init__(self, message, categories=()):
        super().__init__(message)
        self.categories = list(categories)
