import pytest

from tests.attributes import content_type, digest


@pytest.fixture
def example():
    """[A(v1), B(v2), A(v3)] with A = message_digest, B = content_type."""
    return [digest(1), content_type(), digest(3)]
