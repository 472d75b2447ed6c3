"""tests/unit/test_properties.py"""

import io
import json

from hypothesis import given
from hypothesis.strategies import (
    booleans,
    dictionaries,
    floats,
    integers,
    lists,
    none,
    recursive,
    text,
)

from dumpit import DumpOptions, DumpPrinter

# hypothesis inputs: acyclic values made of primitives, lists and str-keyed dicts
JSON_VALUES = recursive(
    none() | booleans() | integers() | floats(allow_nan=False) | text(),
    lambda children: lists(children, max_size=4) | dictionaries(text(), children, max_size=4),
    max_leaves=20,
)


@given(JSON_VALUES, text().filter(lambda s: "\n" not in s and "\r" not in s))
def test_dump_returns_input_and_output_reads_back(value, label):
    stream = io.StringIO()
    assert DumpPrinter(stream=stream).dump(value, label) is value

    out = stream.getvalue()
    if label:
        label_line, out = out.split("\n", 1)
        assert label_line == f"{label}: "
    assert json.loads(out) == value


@given(JSON_VALUES)
def test_compact_dump_is_one_line(value):
    stream = io.StringIO()
    DumpPrinter(DumpOptions.compact(), stream=stream).dump(value)
    assert stream.getvalue().count("\n") == 1
