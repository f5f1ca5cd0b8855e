import pytest
from simpler_command.domain.errors import ErrorCollection


@pytest.fixture
def errors() -> ErrorCollection:
    """A fresh, empty error collection."""
    return ErrorCollection()
