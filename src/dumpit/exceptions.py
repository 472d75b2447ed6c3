"""src/dumpit/exceptions.py

Dumpit Exceptions hierarchy.
"""


class DumpitError(Exception):
    """Base exception for all Dumpit errors."""


class SerializationError(DumpitError):
    """
    The value cannot be represented as JSON text.
    Raised for cyclic structures and for types with no JSON mapping.
    """
