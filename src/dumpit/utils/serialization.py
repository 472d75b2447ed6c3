"""utils/serialization.py

JSON serialization for Dumpit.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from dumpit.exceptions import SerializationError

__all__ = ["DumpOptions", "to_text"]


@dataclass(frozen=True)
class DumpOptions:
    """
    Formatting options for dumped values.

    Attributes:
        indent: Spaces per nesting level. ``None`` prints everything on one
            line with no padding around separators.
        sort_keys: Emit mapping keys in sorted order.
        ensure_ascii: Escape non-ASCII characters instead of printing them.
    """

    indent: Optional[int] = 2
    sort_keys: bool = False
    ensure_ascii: bool = False

    @classmethod
    def compact(cls) -> "DumpOptions":
        """Single-line output, e.g. ``{"a":1,"b":[1,2,3]}``."""
        return cls(indent=None)


_DEFAULT_OPTIONS = DumpOptions()


def to_text(value: Any, options: Optional[DumpOptions] = None) -> str:
    """
    Serialize ``value`` to JSON text.

    Args:
        value: Any JSON-representable value.
        options: Formatting options, defaults to two-space indentation.

    Returns:
        The JSON text, without a trailing newline.

    Raises:
        SerializationError: If ``value`` contains a reference cycle or an
            object with no JSON mapping.
    """
    opts = options or _DEFAULT_OPTIONS
    separators = (",", ":") if opts.indent is None else (",", ": ")
    try:
        return json.dumps(
            value,
            indent=opts.indent,
            separators=separators,
            sort_keys=opts.sort_keys,
            ensure_ascii=opts.ensure_ascii,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"Cannot serialize value: {exc}") from exc
