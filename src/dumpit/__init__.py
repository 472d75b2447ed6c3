"""src/dumpit/__init__.py

Dumpit - print any value as JSON and keep going.

Dumpit is a zero-dependency debugging helper built on Python's standard library.
``dump`` serializes a value to indented JSON, prints it to standard output and
returns the very same value, so it can be dropped into the middle of an
expression without changing what the expression computes.

Example:
    Inline usage::

        from dumpit import dump

        total = sum(dump([1, 2, 3], "items"))

    Custom formatting::

        from dumpit import DumpOptions, DumpPrinter

        compact = DumpPrinter(DumpOptions(indent=None, sort_keys=True))
        compact({"b": 1, "a": 2})
"""

import logging

from dumpit.exceptions import DumpitError, SerializationError
from dumpit.printer import DumpPrinter, dump
from dumpit.utils.serialization import DumpOptions
from dumpit.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "dump",
    "DumpPrinter",
    "DumpOptions",
    "DumpitError",
    "SerializationError",
    "__version__",
]
