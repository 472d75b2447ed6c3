import io

import pytest


@pytest.fixture
def cyclic_value():
    """Fixture providing a mapping that contains itself."""
    value = {"name": "root", "children": []}
    value["children"].append(value)
    return value


@pytest.fixture
def buffer():
    """Fixture providing an in-memory text stream."""
    return io.StringIO()
