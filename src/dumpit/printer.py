"""src/dumpit/printer.py

Print-and-return helper.

This module provides ``DumpPrinter``, which writes a JSON rendering of a value
to a text stream and hands the value back untouched, and the module-level
``dump`` shortcut built on a default printer.
"""

import logging
import sys
from typing import Optional, TextIO, TypeVar

from dumpit.exceptions import SerializationError
from dumpit.utils.serialization import DumpOptions, to_text

__all__ = ["DumpPrinter", "dump"]

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DumpPrinter:
    """
    Writes values as JSON to a text stream.

    Attributes:
        options: Formatting options used for every dump.
        stream: Target stream. ``None`` means whatever ``sys.stdout`` is at
            the time of the call.
    """

    __slots__ = ("options", "stream")

    def __init__(
        self,
        options: Optional[DumpOptions] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.options: DumpOptions = options or DumpOptions()
        self.stream: Optional[TextIO] = stream

    def dump(self, value: T, label: str = "") -> T:
        """
        Print ``value`` as JSON and return it.

        Args:
            value: The value to print. It is neither copied nor modified.
            label: Printed as ``label + ": "`` on its own line before the
                JSON text. Nothing is printed for it when empty.

        Returns:
            ``value`` itself.

        Raises:
            SerializationError: If ``value`` cannot be represented. Nothing
                is written in that case.
        """
        try:
            text = to_text(value, self.options)
        except SerializationError:
            logger.debug("Dump failed for %s (label=%r)", type(value).__name__, label)
            raise

        if label:
            text = f"{label}: \n{text}"

        stream = self.stream if self.stream is not None else sys.stdout
        # label and payload go out in a single write
        stream.write(text + "\n")
        stream.flush()

        logger.debug("Dumped %s (label=%r, %d chars)", type(value).__name__, label, len(text))
        return value

    __call__ = dump

    def __repr__(self) -> str:
        return f"DumpPrinter(options={self.options!r}, stream={self.stream!r})"


_default_printer = DumpPrinter()


def dump(value: T, label: str = "") -> T:
    """Print ``value`` as indented JSON to standard output and return it."""
    return _default_printer.dump(value, label)
