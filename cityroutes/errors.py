"""Exceptions raised by the container classes."""


class DataStructureError(Exception):
    """Base class for container errors."""


class Underflow(DataStructureError):
    """An item was requested from an empty container."""


class Overflow(DataStructureError):
    """An item was added to a full container."""


class OutOfMemory(DataStructureError):
    """Storage for a new item could not be obtained."""


class BadIterator(DataStructureError):
    """An iterator was used at a position that holds no item."""